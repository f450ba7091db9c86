"""Tests for selector-style resource path parsing."""

from tagfeed.api.v1.request_options import parse_resource_path, parse_selectors


class TestParseResourcePath:
    def test_selectors_and_extension(self) -> None:
        parsed = parse_resource_path("tags/sports.tagged.tidy.json")
        assert parsed.path == "/tags/sports"
        assert parsed.selectors == ("tagged", "tidy")
        assert parsed.extension == "json"

    def test_dots_in_parent_segments_stay_in_path(self) -> None:
        parsed = parse_resource_path("v1.0/dir.tagged.json")
        assert parsed.path == "/v1.0/dir"
        assert parsed.selectors == ("tagged",)

    def test_no_extension(self) -> None:
        parsed = parse_resource_path("/tags/sports")
        assert parsed.path == "/tags/sports"
        assert parsed.selectors == ()
        assert parsed.extension is None

    def test_root(self) -> None:
        assert parse_resource_path(".tagged.json").path == "/"


class TestParseSelectors:
    def test_defaults(self) -> None:
        options = parse_selectors(["tagged"])
        assert options.tidy is False
        assert options.depth == 0

    def test_tidy_and_numeric_depth(self) -> None:
        options = parse_selectors(["tagged", "tidy", "3"])
        assert options.tidy is True
        assert options.depth == 3

    def test_infinity(self) -> None:
        assert parse_selectors(["infinity"]).depth == -1

    def test_last_depth_selector_wins(self) -> None:
        assert parse_selectors(["infinity", "2"]).depth == 2
        assert parse_selectors(["2", "infinity"]).depth == -1

    def test_unknown_selectors_ignored(self) -> None:
        assert parse_selectors(["foo", "1x"]).depth == 0
