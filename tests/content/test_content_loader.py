"""Tests for loading locale content files."""

import json

import pytest

from studysite.content.loader import load_content_store, load_locale_file
from studysite.exceptions import ContentLoadError, ContentValidationError


def test_load_shipped_content():
    store = load_content_store()
    assert store.locales() == ("en", "th")
    assert store.default_locale == "en"


def test_load_from_directory(locales_dir):
    store = load_content_store(locales_dir)
    assert store.resolve_records("homePage.techStack.stack", "th")


def test_missing_file(tmp_path):
    with pytest.raises(ContentLoadError) as info:
        load_locale_file(tmp_path / "xx.json")
    assert info.value.context["path"].endswith("xx.json")


def test_invalid_json(tmp_path):
    p = tmp_path / "en.json"
    p.write_text("{not json", encoding="utf-8")
    with pytest.raises(ContentLoadError):
        load_locale_file(p)


def test_top_level_must_be_object(tmp_path):
    p = tmp_path / "en.json"
    p.write_text("[]", encoding="utf-8")
    with pytest.raises(ContentLoadError):
        load_locale_file(p)


def test_validation_runs_at_load(locales_dir):
    path = locales_dir / "th.json"
    tree = json.loads(path.read_text(encoding="utf-8"))
    del tree["homePage"]["stats"]["accuracy"]
    path.write_text(json.dumps(tree, ensure_ascii=False), encoding="utf-8")
    with pytest.raises(ContentValidationError):
        load_content_store(locales_dir)
    store = load_content_store(locales_dir, validate=False)
    assert store.locales() == ("en", "th")


def test_invalid_utf8(tmp_path):
    p = tmp_path / "th.json"
    p.write_bytes(b'{"a": "\xff\xfe"}')
    with pytest.raises(ContentLoadError) as info:
        load_locale_file(p)
    assert info.value.context["path"].endswith("th.json")
