"""Word sources and the dictionary catalog that resolves them."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordSource:
    """A named, located list of words.

    Two sources are equal when name and location match; the language is
    descriptive only.
    """

    name: str
    language: str = field(compare=False)
    location: str

    @property
    def extension(self) -> str:
        return os.path.splitext(self.location)[1].lower()

    def to_dict(self):
        return {'name': self.name, 'language': self.language}


class DictionaryCatalog:
    """Resolves WordSource descriptors. Never loads words."""

    def all_sources(self) -> List[WordSource]:
        raise NotImplementedError

    def sources_by_language(self, language: str) -> List[WordSource]:
        return [s for s in self.all_sources() if s.language == language]

    def source_by_name(self, name: str) -> Optional[WordSource]:
        return next((s for s in self.all_sources() if s.name == name), None)

    def source_by_language_and_name(self, language: str, name: str) -> Optional[WordSource]:
        return next((s for s in self.sources_by_language(language) if s.name == name), None)

    def languages(self) -> Dict[str, List[str]]:
        grouped: Dict[str, List[str]] = {}
        for source in self.all_sources():
            grouped.setdefault(source.language, []).append(source.name)
        return {lang: sorted(names) for lang, names in sorted(grouped.items())}


class FileDictionaryCatalog(DictionaryCatalog):
    """Scans ``<base_dir>/<language>/<name><ext>``."""

    def __init__(self, base_dir, extensions: Iterable[str] = ('.txt', '.json')):
        self.base_dir = str(base_dir)
        self.extensions = tuple(e.lower() if e.startswith('.') else f'.{e.lower()}' for e in extensions)

    def _language_dirs(self) -> List[str]:
        if not os.path.isdir(self.base_dir):
            logger.info(f"[catalog] base dir missing: {self.base_dir}")
            return []
        return sorted(
            entry for entry in os.listdir(self.base_dir)
            if os.path.isdir(os.path.join(self.base_dir, entry))
        )

    def _folder_sources(self, language: str) -> List[WordSource]:
        folder = os.path.join(self.base_dir, language)
        if not os.path.isdir(folder):
            return []
        sources = []
        for filename in sorted(os.listdir(folder)):
            path = os.path.join(folder, filename)
            stem, ext = os.path.splitext(filename)
            if os.path.isfile(path) and ext.lower() in self.extensions:
                sources.append(WordSource(name=stem, language=language, location=os.path.abspath(path)))
        return sources

    def all_sources(self) -> List[WordSource]:
        return [s for lang in self._language_dirs() for s in self._folder_sources(lang)]

    def sources_by_language(self, language: str) -> List[WordSource]:
        return self._folder_sources(language)


class CachedDictionaryCatalog(DictionaryCatalog):
    """Snapshot of another catalog taken at construction.

    Changes to the underlying storage are not picked up; build a new instance
    to refresh.
    """

    def __init__(self, catalog: DictionaryCatalog):
        self._sources = list(catalog.all_sources())
        self._by_name: Dict[str, WordSource] = {}
        for source in self._sources:
            self._by_name.setdefault(source.name, source)

    def all_sources(self) -> List[WordSource]:
        return list(self._sources)

    def source_by_name(self, name: str) -> Optional[WordSource]:
        return self._by_name.get(name)


__all__ = ["WordSource", "DictionaryCatalog", "FileDictionaryCatalog", "CachedDictionaryCatalog"]
