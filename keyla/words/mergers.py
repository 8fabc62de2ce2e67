"""Named strategies that fold the next source's words into the accumulation."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class MergeStrategy:
    name: str
    fn: Callable[[Sequence[Any], Sequence[Any]], Sequence[Any]] = field(repr=False, compare=False)
    description: str = ''

    def merge(self, accumulated: Sequence[Any], words: Sequence[Any]) -> Tuple[Any, ...]:
        return tuple(self.fn(tuple(accumulated), tuple(words)))

    __call__ = merge


def _alternate(first, second, keep_remainder: bool):
    shortest = min(len(first), len(second))
    merged = [item for pair in zip(first, second) for item in pair]
    if keep_remainder:
        merged.extend(first[shortest:] if len(first) > len(second) else second[shortest:])
    return merged


def concat() -> MergeStrategy:
    return MergeStrategy('concat', lambda a, b: a + b, 'Appends the next source after the current words')


def interleave() -> MergeStrategy:
    return MergeStrategy(
        'interleave',
        lambda a, b: _alternate(a, b, keep_remainder=True),
        'Alternates words from both sources, then appends the longer remainder',
    )


def zip_shortest() -> MergeStrategy:
    return MergeStrategy(
        'zip-shortest',
        lambda a, b: _alternate(a, b, keep_remainder=False),
        'Alternates words from both sources, stopping at the shorter one',
    )


def random_mix(rng: Optional[random.Random] = None) -> MergeStrategy:
    rng = rng or random.Random()

    def _mix(a, b):
        merged = list(a + b)
        rng.shuffle(merged)
        return merged

    return MergeStrategy('random-mix', _mix, 'Shuffles the words of both sources together')


def random_insert(rng: Optional[random.Random] = None) -> MergeStrategy:
    rng = rng or random.Random()

    def _insert(a, b):
        # choose which output slots hold words from b; both keep their own order
        total = len(a) + len(b)
        slots = set(rng.sample(range(total), len(b)))
        first, second = iter(a), iter(b)
        return [next(second) if i in slots else next(first) for i in range(total)]

    return MergeStrategy('random-insert', _insert, 'Inserts the next source at random positions')


def interleave_chunks(chunk_size: int) -> MergeStrategy:
    if chunk_size <= 0:
        raise ValueError("Chunk size must be positive")

    def _chunks(a, b):
        merged: List[Any] = []
        for start in range(0, max(len(a), len(b)), chunk_size):
            merged.extend(a[start:start + chunk_size])
            merged.extend(b[start:start + chunk_size])
        return merged

    return MergeStrategy('interleave-chunks', _chunks, f'Alternates chunks of {chunk_size} words')


def probabilistic(size: int, probability: float, rng: Optional[random.Random] = None) -> MergeStrategy:
    """Draws ``size`` words, each from the current words with ``probability``.

    Falls back to whichever side still has words; raises when both run out.
    """
    if not 0.0 <= probability <= 1.0:
        raise ValueError("Probability must be between 0.0 and 1.0")
    if size <= 0:
        raise ValueError("Size must be positive")
    rng = rng or random.Random()

    def _draw(a, b):
        first, second = list(a), list(b)
        rng.shuffle(first)
        rng.shuffle(second)
        merged = []
        for _ in range(size):
            if first and rng.random() < probability:
                merged.append(first.pop(0))
            elif second:
                merged.append(second.pop(0))
            elif first:
                merged.append(first.pop(0))
            else:
                raise ValueError("Not enough words in either source to satisfy size")
        return merged

    return MergeStrategy('probabilistic', _draw, f'Draws {size} words, {probability:.0%} from the current words')


_FACTORIES: Dict[str, Callable[..., MergeStrategy]] = {
    'concat': lambda rng=None: concat(),
    'interleave': lambda rng=None: interleave(),
    'zip-shortest': lambda rng=None: zip_shortest(),
    'random-mix': random_mix,
    'random-insert': random_insert,
}


def get_merge_strategy(name: str, rng: Optional[random.Random] = None) -> Optional[MergeStrategy]:
    factory = _FACTORIES.get(name)
    return factory(rng=rng) if factory else None


def available_merge_strategies() -> Dict[str, str]:
    return {name: factory().description for name, factory in sorted(_FACTORIES.items())}


__all__ = [
    "MergeStrategy",
    "concat",
    "interleave",
    "zip_shortest",
    "random_mix",
    "random_insert",
    "interleave_chunks",
    "probabilistic",
    "get_merge_strategy",
    "available_merge_strategies",
]
