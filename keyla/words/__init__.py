"""Word-source composition: loading, merging and modifying word lists into tests."""

from .composer import ComposerError, ComposerState, CompletionInfo, TestComposer, TestDefinition
from .loaders import (
    DispatchingWordLoader,
    JsonWordLoader,
    LineWordLoader,
    WordLoader,
    WordSourceCache,
    default_loader,
)
from .mergers import MergeStrategy, available_merge_strategies, get_merge_strategy
from .modifiers import Modifier, available_modifiers, get_modifier, is_valid_modifier, only_of_type
from .sources import CachedDictionaryCatalog, DictionaryCatalog, FileDictionaryCatalog, WordSource

__all__ = [
    "ComposerError",
    "ComposerState",
    "CompletionInfo",
    "TestComposer",
    "TestDefinition",
    "WordLoader",
    "WordSourceCache",
    "LineWordLoader",
    "JsonWordLoader",
    "DispatchingWordLoader",
    "default_loader",
    "MergeStrategy",
    "get_merge_strategy",
    "available_merge_strategies",
    "Modifier",
    "get_modifier",
    "is_valid_modifier",
    "available_modifiers",
    "only_of_type",
    "WordSource",
    "DictionaryCatalog",
    "FileDictionaryCatalog",
    "CachedDictionaryCatalog",
]
