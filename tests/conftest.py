"""Pytest configuration for test environment setup.

- Forces ``DISABLE_FILE_LOGS=1`` to avoid writing log files during tests.
- Ensures the project root is available on ``sys.path`` for imports.
- Provides a small in-memory content tree that satisfies the full schema.
"""

import copy
import json
import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("DISABLE_FILE_LOGS", "1")  # Avoid creating log files during tests

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from studysite.config import LOCALES_DIR  # noqa: E402
from studysite.content.store import ContentStore  # noqa: E402


def _shipped(locale: str) -> dict:
    with (LOCALES_DIR / f"{locale}.json").open(encoding="utf-8") as fh:
        return json.load(fh)


@pytest.fixture
def content_tree() -> dict:
    """Deep copies of the shipped ``en`` and ``th`` content dictionaries."""
    return {"en": copy.deepcopy(_shipped("en")), "th": copy.deepcopy(_shipped("th"))}


@pytest.fixture
def store(content_tree) -> ContentStore:
    return ContentStore(content_tree)


@pytest.fixture
def locales_dir(tmp_path, content_tree) -> Path:
    """A temporary locales directory holding writable copies of the content."""
    target = tmp_path / "locales"
    target.mkdir()
    for locale, tree in content_tree.items():
        (target / f"{locale}.json").write_text(
            json.dumps(tree, ensure_ascii=False), encoding="utf-8"
        )
    return target
