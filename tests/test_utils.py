"""Tests for pagekit.utils — predicates, ordinals, relative time, truncation, headings."""

from pagekit.utils import (
    contains,
    ends_with,
    humanize_seconds,
    normalize_headings,
    ordinal,
    sanitize_html,
    starts_with,
    strip_tags,
    time_since,
    truncate,
    truncate_words,
)


# ── predicates ────────────────────────────────────────────────────────────────


class TestContains:
    def test_substring(self):
        assert contains("hello world", "world")

    def test_missing_substring(self):
        assert not contains("hello world", "mars")

    def test_list_member(self):
        assert contains(["a", "b"], "b")

    def test_list_non_member(self):
        assert not contains(["a", "b"], "c")


class TestStartsWith:
    def test_string_prefix(self):
        assert starts_with("hello", "he")
        assert not starts_with("hello", "lo")

    def test_first_element(self):
        assert starts_with(["a", "b"], "a")
        assert not starts_with(["a", "b"], "b")

    def test_empty_list(self):
        assert not starts_with([], "a")


class TestEndsWith:
    def test_string_suffix(self):
        assert ends_with("hello", "lo")
        assert not ends_with("hello", "he")

    def test_last_element(self):
        assert ends_with(("a", "b"), "b")
        assert not ends_with(("a", "b"), "a")

    def test_empty_list(self):
        assert not ends_with([], "a")


# ── ordinal ───────────────────────────────────────────────────────────────────


class TestOrdinal:
    def test_common_suffixes(self):
        assert ordinal(1) == "1st"
        assert ordinal(2) == "2nd"
        assert ordinal(3) == "3rd"
        assert ordinal(4) == "4th"

    def test_teens_take_th(self):
        assert ordinal(11) == "11th"
        assert ordinal(12) == "12th"
        assert ordinal(13) == "13th"
        assert ordinal(111) == "111th"
        assert ordinal(113) == "113th"

    def test_twenties_and_hundreds(self):
        assert ordinal(21) == "21st"
        assert ordinal(22) == "22nd"
        assert ordinal(23) == "23rd"
        assert ordinal(101) == "101st"

    def test_zero(self):
        assert ordinal(0) == "0th"

    def test_negative(self):
        assert ordinal(-1) == "-1st"
        assert ordinal(-12) == "-12th"


# ── sanitize_html / strip_tags ────────────────────────────────────────────────


class TestStripTags:
    def test_none_returns_empty(self):
        assert strip_tags(None) == ""

    def test_removes_tags_keeps_entities(self):
        assert strip_tags("<b>Tom</b> &amp; Jerry") == "Tom &amp; Jerry"


class TestSanitizeHtml:
    def test_none_returns_empty(self):
        assert sanitize_html(None) == ""

    def test_strips_html_tags(self):
        assert sanitize_html("<b>Bold</b> and <i>italic</i>") == "Bold and italic"

    def test_decodes_entities(self):
        assert sanitize_html("Tom &amp; Jerry") == "Tom & Jerry"

    def test_combined(self):
        result = sanitize_html("<p>Hello &amp; <b>world</b></p>  \n  ")
        assert result == "Hello & world"


# ── truncate ──────────────────────────────────────────────────────────────────


class TestTruncate:
    def test_short_text_unchanged(self):
        assert truncate("Hello", 200) == "Hello"

    def test_exact_length_unchanged(self):
        text = "a" * 20
        assert truncate(text, 20) == text

    def test_backs_off_to_whole_word(self):
        assert truncate("The quick brown fox", 10) == "The quick &#8230;"

    def test_cut_on_word_boundary_keeps_word(self):
        assert truncate("The quick brown fox", 9) == "The quick &#8230;"

    def test_single_long_word_is_cut(self):
        assert truncate("Supercalifragilistic", 5) == "Super &#8230;"

    def test_custom_suffix(self):
        assert truncate("The quick brown fox", 10, "…") == "The quick…"

    def test_tags_removed_first(self):
        assert truncate("<p>Hello <b>world</b></p>", 200) == "Hello world"

    def test_none_returns_empty(self):
        assert truncate(None, 10) == ""


class TestTruncateWords:
    def test_under_limit_unchanged(self):
        assert truncate_words("one two three four", 4) == "one two three four"

    def test_cuts_before_next_word(self):
        assert truncate_words("one two three four", 2) == "one two &#8230;"

    def test_tags_removed_first(self):
        assert truncate_words("<p>one <em>two</em> three</p>", 1, "...") == "one..."

    def test_apostrophes_and_hyphens_stay_in_words(self):
        text = "don't over-think it please"
        assert truncate_words(text, 2) == "don't over-think &#8230;"


# ── relative time ─────────────────────────────────────────────────────────────


class TestHumanizeSeconds:
    def test_under_a_second_is_none(self):
        assert humanize_seconds(0) is None
        assert humanize_seconds(0.5) is None
        assert humanize_seconds(-10) is None

    def test_floors_to_largest_unit(self):
        assert humanize_seconds(90061) == "1 day"
        assert humanize_seconds(200000) == "2 days"

    def test_weeks(self):
        assert humanize_seconds(15 * 86400) == "2 weeks"


class TestTimeSince:
    def test_hours_ago(self):
        assert time_since(1000, clock=lambda: 1000 + 7200) == "2 hours ago"

    def test_one_minute_ago(self):
        assert time_since(1000, clock=lambda: 1060) == "1 minute ago"

    def test_just_now(self):
        assert time_since(1000, clock=lambda: 1000) == "Just now"

    def test_future_is_just_now(self):
        assert time_since(5000, clock=lambda: 1000) == "Just now"

    def test_custom_labels(self):
        assert time_since(0, "earlier", clock=lambda: 86400) == "1 day earlier"
        assert time_since(0, now="now", clock=lambda: 0) == "now"

    def test_empty_suffix(self):
        assert time_since(0, "", clock=lambda: 120) == "2 minutes"

    def test_defaults_to_system_clock(self, monkeypatch):
        monkeypatch.setattr("pagekit.utils.time.time", lambda: 1_000_000 + 3 * 86400)
        assert time_since(1_000_000) == "3 days ago"


# ── normalize_headings ────────────────────────────────────────────────────────


class TestNormalizeHeadings:
    def test_demotes_headings(self):
        content = "<h1>Title</h1><h2>Sub</h2>"
        assert normalize_headings(content) == "<h2>Title</h2><h3>Sub</h3>"

    def test_promotes_headings(self):
        assert normalize_headings("<h3>A</h3><h4>B</h4>", 1) == "<h1>A</h1><h2>B</h2>"

    def test_overflow_becomes_paragraph(self):
        content = "<h1>A</h1><h6>B</h6>"
        assert normalize_headings(content) == "<h2>A</h2><p>B</p>"

    def test_already_at_limit_unchanged(self):
        content = "<h2>A</h2><h3>B</h3>"
        assert normalize_headings(content) == content

    def test_no_headings_unchanged(self):
        assert normalize_headings("<p>Plain</p>") == "<p>Plain</p>"

    def test_invalid_limit_unchanged(self):
        assert normalize_headings("<h1>A</h1>", 7) == "<h1>A</h1>"

    def test_keeps_attributes(self):
        assert normalize_headings('<h1 class="x">A</h1>') == '<h2 class="x">A</h2>'
