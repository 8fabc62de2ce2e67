"""Named transformations applied, in registration order, after merging."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Optional, Sequence, Tuple

WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class Modifier:
    name: str
    fn: Callable[[Sequence[Any]], Sequence[Any]] = field(repr=False, compare=False)
    description: str = ''

    def apply(self, words: Sequence[Any]) -> Tuple[Any, ...]:
        return tuple(self.fn(tuple(words)))

    __call__ = apply


def of_string(transform: Callable[[str], str]) -> Callable[[Sequence[Any]], Sequence[str]]:
    """Lift a str -> str function to a sequence, dropping None and stringifying the rest."""

    def _apply(words):
        return [transform(w if isinstance(w, str) else str(w)) for w in words if w is not None]

    return _apply


def only_of_type(output_type: type = str) -> Modifier:
    """Keeps the elements that are already ``output_type`` and drops the rest."""
    return Modifier(
        'identity',
        lambda words: [w for w in words if isinstance(w, output_type)],
        f'Keeps only {output_type.__name__} elements',
    )


def uppercase() -> Modifier:
    return Modifier('uppercase', of_string(str.upper), 'Converts words to uppercase')


def lowercase() -> Modifier:
    return Modifier('lowercase', of_string(str.lower), 'Converts words to lowercase')


def reverse() -> Modifier:
    return Modifier('reverse', of_string(lambda s: s[::-1]), 'Reverses the characters of each word')


def capitalize() -> Modifier:
    # only the first character changes, unlike str.capitalize
    return Modifier('capitalize', of_string(lambda s: s[:1].upper() + s[1:]), 'Capitalizes the first letter')


def trim() -> Modifier:
    return Modifier('trim', of_string(str.strip), 'Removes leading and trailing whitespace')


def no_spaces() -> Modifier:
    return Modifier('removeSpaces', of_string(lambda s: WHITESPACE_RE.sub('', s)), 'Removes all whitespace')


def limit(max_length: int) -> Modifier:
    return Modifier('limit', of_string(lambda s: s[:max_length]), f'Truncates words to {max_length} characters')


def add_prefix(prefix: str) -> Modifier:
    return Modifier('addPrefix', of_string(lambda s: prefix + s), f'Prepends "{prefix}" to each word')


def add_suffix(suffix: str) -> Modifier:
    return Modifier('addSuffix', of_string(lambda s: s + suffix), f'Appends "{suffix}" to each word')


_REGISTRY: Dict[str, Callable[[], Modifier]] = {
    'uppercase': uppercase,
    'lowercase': lowercase,
    'reverse': reverse,
    'capitalize': capitalize,
    'trim': trim,
    'removeSpaces': no_spaces,
    'noSpaces': no_spaces,
}


def get_modifier(name: str) -> Optional[Modifier]:
    factory = _REGISTRY.get(name)
    return factory() if factory else None


def is_valid_modifier(name: str) -> bool:
    return name in _REGISTRY


def available_modifiers() -> Dict[str, str]:
    return {name: factory().description for name, factory in sorted(_REGISTRY.items())}


def apply_chain(modifiers: Iterable[Modifier], words: Sequence[Any]) -> Tuple[Any, ...]:
    """Left fold: each modifier's output feeds the next."""
    result = tuple(words)
    for modifier in modifiers:
        result = modifier.apply(result)
    return result


__all__ = [
    "Modifier",
    "of_string",
    "only_of_type",
    "uppercase",
    "lowercase",
    "reverse",
    "capitalize",
    "trim",
    "no_spaces",
    "limit",
    "add_prefix",
    "add_suffix",
    "get_modifier",
    "is_valid_modifier",
    "available_modifiers",
    "apply_chain",
]
