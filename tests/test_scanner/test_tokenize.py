"""Tests for the candidate tokenizer."""

from breeze.scanner import extract_candidates, scan, scan_ordered
from breeze.scanner.tokenize import MAX_RESUMES


class TestExtractCandidates:
    def test_html_class_attribute(self):
        tokens = extract_candidates('<div class="container mx-auto p-4 md:p-8">')
        assert tokens == ["div", "class", "container", "mx-auto", "p-4", "md:p-8"]

    def test_arbitrary_value_with_parentheses(self):
        assert "w-[calc(100%_-_2rem)]" in extract_candidates('class="w-[calc(100%_-_2rem)]"')

    def test_arbitrary_value_with_quotes(self):
        assert "content-['hi']" in extract_candidates("<p class=\"content-['hi']\">")

    def test_arbitrary_property(self):
        assert "[mask-type:luminance]" in extract_candidates('"[mask-type:luminance] p-1"')

    def test_opacity_and_important_markers(self):
        tokens = extract_candidates("bg-blue-500/50 !p-4 m-2!")
        assert tokens == ["bg-blue-500/50", "!p-4", "m-2!"]

    def test_trailing_punctuation_yields_stripped_copy(self):
        tokens = extract_candidates("Use p-4. Then m-2, done")
        assert "p-4." in tokens
        assert "p-4" in tokens
        assert "m-2" in tokens

    def test_tokens_without_letters_are_dropped(self):
        assert extract_candidates("1 2 3 100% #123 p-2") == ["p-2"]

    def test_unterminated_bracket_rejects_only_that_token(self):
        tokens = extract_candidates('class="w-[100px p-4 m-2"')
        assert "w-[100px" not in tokens
        assert not any(t.startswith("w-") for t in tokens)
        assert "p-4" in tokens
        assert "m-2" in tokens

    def test_stray_closing_bracket_rejects_token(self):
        tokens = extract_candidates("p-4] m-2")
        assert "p-4]" not in tokens
        assert "p-4" not in tokens
        assert "m-2" in tokens

    def test_long_run_of_open_brackets_keeps_neighbours(self):
        text = "p-4 " + "[" * 20_000 + " m-2"
        assert extract_candidates(text) == ["p-4", "m-2"]

    def test_resumes_are_capped_within_one_run(self):
        assert extract_candidates("[" * 5 + "p-4 m-2") == ["p-4", "m-2"]
        assert extract_candidates("[" * (MAX_RESUMES + 5) + "p-4 m-2") == ["m-2"]

    def test_candidates_inside_script_arrays(self):
        tokens = extract_candidates("const cls = ['p-4','m-2'];")
        assert "p-4" in tokens
        assert "m-2" in tokens

    def test_spaced_script_array(self):
        tokens = extract_candidates('["text-lg", "font-bold"]')
        assert "text-lg" in tokens
        assert "font-bold" in tokens

    def test_markdown_prose(self):
        tokens = extract_candidates("Add `hover:underline` to links.")
        assert "hover:underline" in tokens
        assert "links" in tokens

    def test_empty_text(self):
        assert extract_candidates("") == []


class TestScan:
    def test_scan_returns_distinct_set(self):
        assert scan(["p-4 p-4", "p-4 m-2"]) == {"p-4", "m-2"}

    def test_scan_ordered_keeps_first_occurrence(self):
        assert scan_ordered(["b-1 a-1", "a-1 c-1 b-1"]) == ["b-1", "a-1", "c-1"]

    def test_scan_accepts_generators(self):
        assert scan(text for text in ["flex"]) == {"flex"}
