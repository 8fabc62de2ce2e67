"""Builds a TestDefinition from a loader, sources, merge strategies and modifiers.

Configuration calls only record state; all I/O happens in ``build()``, which
runs load -> merge -> modify in declared order. A composer builds exactly one
definition.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, FrozenSet, List, Optional, Tuple

from .loaders import WordLoader
from .mergers import MergeStrategy
from .modifiers import Modifier, apply_chain, only_of_type
from .sources import WordSource

logger = logging.getLogger(__name__)


class ComposerError(ValueError):
    """Invalid composer configuration; raised before any word is loaded."""


@dataclass(frozen=True)
class CompletionInfo:
    completed_at: Optional[datetime] = None

    @property
    def completed(self) -> bool:
        return self.completed_at is not None


@dataclass(frozen=True)
class TestDefinition:
    sources: FrozenSet[WordSource]
    words: Tuple[Any, ...]
    modifier_names: Tuple[str, ...]
    info: CompletionInfo = field(default_factory=CompletionInfo)

    __test__ = False  # not a pytest class

    def with_words(self, words) -> "TestDefinition":
        return TestDefinition(self.sources, tuple(words), self.modifier_names, self.info)

    def completed(self, at: datetime) -> "TestDefinition":
        return TestDefinition(self.sources, self.words, self.modifier_names, CompletionInfo(at))


class ComposerState(enum.Enum):
    EMPTY = 'empty'
    HAS_LOADER = 'has_loader'
    HAS_BASE_SOURCE = 'has_base_source'
    HAS_MORE_SOURCES = 'has_more_sources'
    BUILT = 'built'


class TestComposer:
    __test__ = False

    def __init__(self, output_type: type = str):
        self.output_type = output_type
        self._loader: Optional[WordLoader] = None
        self._sources: List[WordSource] = []
        self._mergers: List[MergeStrategy] = []
        self._modifiers: List[Modifier] = []
        self._built = False

    @property
    def state(self) -> ComposerState:
        if self._built:
            return ComposerState.BUILT
        if len(self._sources) > 1:
            return ComposerState.HAS_MORE_SOURCES
        if self._sources:
            return ComposerState.HAS_BASE_SOURCE
        if self._loader is not None:
            return ComposerState.HAS_LOADER
        return ComposerState.EMPTY

    def _require_open(self) -> None:
        if self._built:
            raise ComposerError("Composer already built; create a new one for each test")

    def with_loader(self, loader: WordLoader) -> "TestComposer":
        self._require_open()
        self._loader = loader
        return self

    def with_base_source(self, source: WordSource) -> "TestComposer":
        self._require_open()
        if self._sources:
            raise ComposerError("Source already exists, cannot add a new one")
        self._sources.append(source)
        return self

    def with_merged_source(self, strategy: MergeStrategy, source: WordSource) -> "TestComposer":
        self._require_open()
        if not self._sources:
            raise ComposerError("First source must be defined before merging")
        self._sources.append(source)
        self._mergers.append(strategy)
        return self

    def with_modifier(self, modifier: Modifier) -> "TestComposer":
        self._require_open()
        self._modifiers.append(modifier)
        return self

    def build(self) -> TestDefinition:
        self._require_open()
        if self._loader is None:
            raise ComposerError("Loader must be defined")
        if not self._sources:
            raise ComposerError("At least one source must be defined")
        self._built = True

        loaded = [self._loader.load_words(source) for source in self._sources]
        words: Tuple[Any, ...] = tuple(loaded[0])
        for strategy, next_words in zip(self._mergers, loaded[1:]):
            words = strategy.merge(words, next_words)

        modifiers = self._modifiers or [only_of_type(self.output_type)]
        words = apply_chain(modifiers, words)

        logger.debug(
            f"[compose] sources={[s.name for s in self._sources]} "
            f"mergers={[m.name for m in self._mergers]} words={len(words)}"
        )
        return TestDefinition(
            sources=frozenset(self._sources),
            words=words,
            modifier_names=tuple(m.name for m in modifiers),
        )


__all__ = ["ComposerError", "ComposerState", "CompletionInfo", "TestComposer", "TestDefinition"]
