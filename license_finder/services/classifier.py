"""
This module decides which known license, if any, a single file contains.

A file matches a license when the normalized reference text is a substring of the
normalized file content, so comment banners, copyright lines and reflowed
paragraphs around the license body do not prevent a match. References are tested
in a fixed priority order and the first hit wins: a file has at most one verdict.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple
from license_finder.models.schemas import License
from .corpus import ReferenceCorpus, ReferenceKey, get_corpus
from .normalizer import normalize

# Priority order, first match wins. GPL must stay ahead of LGPL.
_RULES: Tuple[Tuple[License, Tuple[ReferenceKey, ...]], ...] = (
    (License.MIT, (ReferenceKey.MIT,)),
    (License.APACHE2, (ReferenceKey.APACHE2_HEADER, ReferenceKey.APACHE2)),
    (License.BSD3CLAUSE, (ReferenceKey.BSD3CLAUSE,)),
    (License.GPL3, (ReferenceKey.GPL3_HEADER, ReferenceKey.GPL3)),
    (License.LGPL3, (ReferenceKey.LGPL3,)),
)


class FileClassifier(ABC):
    """
    Contract for per-file license classification.
    """

    @abstractmethod
    def classify(self, content: str) -> Optional[License]:
        """Returns the license contained in `content`, or None when nothing matches."""

    def classify_file(self, path: str) -> Optional[License]:
        """
        Reads a file as text and classifies it.

        Bytes that are not valid UTF-8 are dropped; they cannot be letters or
        digits of a bundled license text anyway.

        Raises:
            OSError: If the file cannot be opened or read.
        """
        with open(path, "r", encoding="utf-8", errors="ignore") as f:
            content = f.read()
        return self.classify(content)


class CorpusClassifier(FileClassifier):
    """
    Substring classifier over a reference corpus.
    """

    def __init__(self, corpus: ReferenceCorpus):
        self._corpus = corpus

    def classify(self, content: str) -> Optional[License]:
        haystack = normalize(content)
        if not haystack:
            return None

        for license, keys in _RULES:
            if any(self._corpus[key] in haystack for key in keys):
                return license

        return None


_DEFAULT_CLASSIFIER: Optional[CorpusClassifier] = None


def get_default_classifier() -> CorpusClassifier:
    """
    Returns the shared classifier over the bundled corpus.

    Raises:
        CorpusLoadError: If the bundled corpus cannot be loaded.
    """
    global _DEFAULT_CLASSIFIER
    if _DEFAULT_CLASSIFIER is None:
        _DEFAULT_CLASSIFIER = CorpusClassifier(get_corpus())
    return _DEFAULT_CLASSIFIER
