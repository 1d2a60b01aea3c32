"""
Module `corpus`: loading of the bundled reference license texts.

The texts live in the `licenses` directory of this package and are read once,
normalized, and kept in a read-only mapping for the lifetime of the process.
A missing or unreadable text is a packaging defect: loading fails with
`CorpusLoadError` and no scan can run.

The main public entry point is `get_corpus()`, which returns the shared corpus
(loaded on first use).
"""

import logging
from enum import Enum
from importlib import resources
from types import MappingProxyType
from typing import Dict, Mapping, Optional
from .normalizer import normalize

logger = logging.getLogger(__name__)

_RESOURCE_PACKAGE = __package__
_RESOURCE_DIR = "licenses"


class CorpusLoadError(RuntimeError):
    """A bundled reference text is missing, unreadable or empty."""


class ReferenceKey(Enum):
    """Reference texts, valued by their resource file name."""
    MIT = "MIT.txt"
    APACHE2 = "Apache2.txt"
    APACHE2_HEADER = "AP2_Header.txt"
    GPL3 = "GPL3.txt"
    GPL3_HEADER = "GPL3_Header.txt"
    LGPL3 = "LGPL3.txt"
    BSD3CLAUSE = "BSD3Cl.txt"

    @property
    def resource_name(self) -> str:
        return self.value


class ReferenceCorpus:
    """Immutable mapping {ReferenceKey: normalized text}."""

    __slots__ = ("_texts",)

    def __init__(self, normalized_texts: Mapping[ReferenceKey, str]):
        missing = [key.name for key in ReferenceKey if key not in normalized_texts]
        if missing:
            raise CorpusLoadError(f"Missing reference texts: {', '.join(missing)}")
        empty = [key.name for key, text in normalized_texts.items() if not text]
        if empty:
            # an empty needle would be contained in every file
            raise CorpusLoadError(f"Empty reference texts: {', '.join(empty)}")
        self._texts = MappingProxyType(dict(normalized_texts))

    @classmethod
    def from_texts(cls, raw_texts: Mapping[ReferenceKey, str]) -> "ReferenceCorpus":
        """Builds a corpus from raw (not yet normalized) texts."""
        return cls({key: normalize(text) for key, text in raw_texts.items()})

    @classmethod
    def load(cls) -> "ReferenceCorpus":
        """
        Reads and normalizes every bundled reference text.

        Raises:
            CorpusLoadError: If a resource is missing, unreadable or not valid UTF-8.
        """
        raw_texts: Dict[ReferenceKey, str] = {}
        for key in ReferenceKey:
            raw_texts[key] = _read_resource(key.resource_name)
        corpus = cls.from_texts(raw_texts)
        logger.debug("Loaded %d reference license texts", len(raw_texts))
        return corpus

    def __getitem__(self, key: ReferenceKey) -> str:
        return self._texts[key]

    def __contains__(self, key) -> bool:
        return key in self._texts

    def __len__(self) -> int:
        return len(self._texts)

    @property
    def texts(self) -> Mapping[ReferenceKey, str]:
        return self._texts


def _read_resource(name: str) -> str:
    try:
        return resources.files(_RESOURCE_PACKAGE).joinpath(_RESOURCE_DIR).joinpath(name).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Unable to read the bundled license text %s", name)
        raise CorpusLoadError(f"Unable to read the bundled license text {name}: {e}") from e


_CORPUS: Optional[ReferenceCorpus] = None


def get_corpus() -> ReferenceCorpus:
    """
    Returns the process-wide reference corpus, loading it on first use.
    """
    global _CORPUS
    if _CORPUS is None:
        _CORPUS = ReferenceCorpus.load()
    return _CORPUS
