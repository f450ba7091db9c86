"""Tests for incremental feed rendering and depth trimming."""

import json

import pytest

from tagfeed.application.services.feed_writer import FeedWriter, trim_to_depth


def test_empty_document() -> None:
    assert FeedWriter().close() == "{}"
    assert FeedWriter(tidy=True).close() == "{}"


def test_compact_matches_json_dumps() -> None:
    doc = {"a": {"x": 1, "content": {}}, "b": {"content": {"id": "C", "tag": ["t"]}}}
    writer = FeedWriter()
    for key, value in doc.items():
        writer.write_entry(key, value)
    assert writer.close() == json.dumps(doc, separators=(",", ":"))


def test_tidy_matches_indented_json_dumps() -> None:
    doc = {"a": {"x": [1, 2], "content": {}}, "b": {"content": {"id": "é"}}}
    writer = FeedWriter(tidy=True)
    for key, value in doc.items():
        writer.write_entry(key, value)
    assert writer.close() == json.dumps(doc, indent=2, ensure_ascii=False)


def test_write_after_close_fails() -> None:
    writer = FeedWriter()
    writer.close()
    with pytest.raises(RuntimeError):
        writer.write_entry("a", {})


def test_trim_to_depth() -> None:
    props = {"a": 1, "b": {"c": {"d": 2}, "e": [1]}}
    assert trim_to_depth(props, 0) == {"a": 1}
    assert trim_to_depth(props, 1) == {"a": 1, "b": {"e": [1]}}
    assert trim_to_depth(props, -1) == props
