"""Tests for the tag scanner."""

from tagjournal.tags import extract_tags, split_lines


class TestBalancedMarkers:
    def test_single_tag(self):
        assert extract_tags("went for a run {sport}") == {"{sport}"}

    def test_lower_cases_and_collapses(self):
        assert extract_tags("{Work} then {work} and {WORK}") == {"{work}"}

    def test_repeated_tags_once(self):
        text = "{a} x {b} y {a}\n{b} {c}"
        assert extract_tags(text) == {"{a}", "{b}", "{c}"}

    def test_adjacent_tags(self):
        assert extract_tags("{a}{b}") == {"{a}", "{b}"}

    def test_empty_marker_is_a_tag(self):
        assert extract_tags("{}") == {"{}"}

    def test_arbitrary_characters_inside(self):
        assert extract_tags("{Mood: 7/10 ☺}") == {"{mood: 7/10 ☺}"}

    def test_no_markers(self):
        assert extract_tags("plain text only") == set()
        assert extract_tags("") == set()


class TestMalformedMarkers:
    def test_nested_open_aborts_line(self):
        assert extract_tags("{a{b}") == set()

    def test_nested_open_keeps_earlier_tags_on_line(self):
        assert extract_tags("{ok} {a{b} {lost}") == {"{ok}"}

    def test_nested_open_only_aborts_its_own_line(self):
        assert extract_tags("{a{b}\n{next}") == {"{next}"}

    def test_stray_close_ignored(self):
        assert extract_tags("}{a}") == {"{a}"}
        assert extract_tags("}}} done") == set()

    def test_unterminated_marker_dropped_at_end_of_line(self):
        assert extract_tags("{open\nclose} {real}") == {"{real}"}

    def test_crlf_line_endings(self):
        assert extract_tags("{a}\r\n{b}\r\n") == {"{a}", "{b}"}


class TestSplitLines:
    def test_trailing_newline_dropped(self):
        assert split_lines("a\nb\n") == ["a", "b"]

    def test_blank_lines_kept(self):
        assert split_lines("a\n\nb") == ["a", "", "b"]

    def test_only_newline_breaks(self):
        assert split_lines("a\x0cb c") == ["a\x0cb c"]

    def test_empty(self):
        assert split_lines("") == []
