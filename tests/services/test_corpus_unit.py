"""
Unit tests for `license_finder.services.corpus`.

Covers loading of the bundled texts, the fatal failure on missing resources and
the read-only guarantees of the loaded corpus.
"""

from unittest.mock import patch
import pytest
from license_finder.services import corpus as corpus_module
from license_finder.services.corpus import (
    CorpusLoadError,
    ReferenceCorpus,
    ReferenceKey,
    get_corpus,
)
from license_finder.services.normalizer import normalize


def _fake_texts(**overrides):
    texts = {key: f"reference text {key.name}" for key in ReferenceKey}
    for name, text in overrides.items():
        texts[ReferenceKey[name]] = text
    return texts


# ==================================================================================
#                                TESTS: BUNDLED CORPUS
# ==================================================================================

def test_load_contains_every_reference():
    corpus = ReferenceCorpus.load()
    assert len(corpus) == len(ReferenceKey)
    for key in ReferenceKey:
        assert key in corpus
        assert corpus[key]


def test_loaded_texts_are_normalized(license_texts):
    corpus = ReferenceCorpus.load()
    for key, raw in license_texts.items():
        assert corpus[key] == normalize(raw)


def test_headers_do_not_leak_into_other_references():
    """
    The full texts stop at END OF TERMS AND CONDITIONS, so the per-file notices of the
    appendices are only available as separate header references.
    """
    corpus = ReferenceCorpus.load()
    assert corpus[ReferenceKey.GPL3_HEADER] not in corpus[ReferenceKey.LGPL3]
    assert corpus[ReferenceKey.APACHE2_HEADER] not in corpus[ReferenceKey.APACHE2]


def test_get_corpus_is_loaded_once():
    assert get_corpus() is get_corpus()


# ==================================================================================
#                                TESTS: FAILURES
# ==================================================================================

def test_load_fails_when_a_resource_is_missing():
    with patch.object(corpus_module, "_RESOURCE_DIR", "no_such_directory"):
        with pytest.raises(CorpusLoadError) as exc_info:
            ReferenceCorpus.load()
    assert "MIT.txt" in str(exc_info.value)


def test_from_texts_rejects_missing_keys():
    texts = _fake_texts()
    del texts[ReferenceKey.LGPL3]
    with pytest.raises(CorpusLoadError, match="LGPL3"):
        ReferenceCorpus.from_texts(texts)


def test_from_texts_rejects_text_without_alphanumerics():
    with pytest.raises(CorpusLoadError, match="BSD3CLAUSE"):
        ReferenceCorpus.from_texts(_fake_texts(BSD3CLAUSE="  -- \n *  "))


def test_corpus_mapping_is_read_only():
    corpus = ReferenceCorpus.from_texts(_fake_texts())
    with pytest.raises(TypeError):
        corpus.texts[ReferenceKey.MIT] = "changed"
    assert corpus[ReferenceKey.MIT] == "referencetextmit"
