"""
Shared fixtures: raw bundled license texts and helpers to lay out project trees.
"""

import pytest
from license_finder.services import corpus as corpus_module
from license_finder.services.corpus import ReferenceKey


@pytest.fixture(scope="session")
def license_texts():
    """Raw (not normalized) bundled reference texts, keyed by ReferenceKey."""
    return {key: corpus_module._read_resource(key.resource_name) for key in ReferenceKey}


@pytest.fixture
def make_tree(tmp_path):
    """
    Writes a {relative_path: str | bytes} mapping under tmp_path and returns the root.
    """
    def _make(files):
        for rel_path, content in files.items():
            target = tmp_path / rel_path
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                target.write_bytes(content)
            else:
                target.write_text(content, encoding="utf-8")
        return tmp_path
    return _make
