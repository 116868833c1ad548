"""Tests for content discovery and file scanning."""

import pytest

from breeze.config import RawContent
from breeze.errors import ScanError
from breeze.scanner import collect_files, expand_braces, read_source, scan_content, scan_files


@pytest.fixture
def site(tmp_path):
    (tmp_path / "layouts").mkdir()
    (tmp_path / "layouts" / "base.html").write_text('<body class="p-4">')
    (tmp_path / "layouts" / "app.js").write_text("el.className = 'm-2'")
    (tmp_path / "layouts" / "notes.txt").write_text("ignored-class")
    (tmp_path / "content").mkdir()
    (tmp_path / "content" / "post.md").write_text("# Post\n\n<div class='flex'></div>")
    (tmp_path / "content" / "draft.md").write_text("draft-only")
    return tmp_path


class TestExpandBraces:
    def test_no_braces(self):
        assert expand_braces("src/*.html") == ["src/*.html"]

    def test_simple_group(self):
        assert expand_braces("*.{html,js}") == ["*.html", "*.js"]

    def test_two_groups(self):
        assert expand_braces("{a,b}/*.{x,y}") == ["a/*.x", "a/*.y", "b/*.x", "b/*.y"]

    def test_nested_group(self):
        assert expand_braces("*.{md,{html,htm}}") == ["*.md", "*.html", "*.htm"]

    def test_unmatched_brace_is_literal(self):
        assert expand_braces("*.{html") == ["*.{html"]


class TestCollectFiles:
    def test_brace_glob(self, site):
        files = collect_files(["./layouts/**/*.{html,js}"], site)
        assert [f.name for f in files] == ["app.js", "base.html"]

    def test_sorted_and_deduplicated(self, site):
        files = collect_files(["content/*.md", "content/**/*.md", "layouts/*.html"], site)
        assert files == sorted(files)
        assert len(files) == len(set(files)) == 3

    def test_exclude(self, site):
        files = collect_files(["content/*.md", "!content/draft.md"], site)
        assert [f.name for f in files] == ["post.md"]

    def test_exclude_order_does_not_matter(self, site):
        assert collect_files(["!content/draft.md", "content/*.md"], site) == collect_files(
            ["content/*.md", "!content/draft.md"], site
        )

    def test_no_matches(self, site):
        assert collect_files(["nothing/*.html"], site) == []


class TestScanFiles:
    def test_canonical_order(self, site):
        files = collect_files(["layouts/*.{html,js}", "content/post.md"], site)
        candidates = scan_files(files, workers=3)
        # content/ sorts before layouts/, app.js before base.html
        assert candidates.index("flex") < candidates.index("m-2") < candidates.index("p-4")

    def test_unreadable_file_raises(self, tmp_path):
        with pytest.raises(ScanError) as excinfo:
            scan_files([tmp_path / "missing.html"])
        assert excinfo.value.path.endswith("missing.html")

    def test_read_source_replaces_bad_bytes(self, tmp_path):
        path = tmp_path / "bin.html"
        path.write_bytes(b"p-4 \xff m-2")
        assert "p-4" in read_source(path)

    def test_empty(self):
        assert scan_files([]) == []


class TestScanContent:
    def test_globs_and_raw(self, site):
        candidates = scan_content(
            ["content/post.md", RawContent("raw-class p-4")], base_dir=site, workers=2
        )
        assert "flex" in candidates
        assert "raw-class" in candidates
        assert candidates.index("flex") < candidates.index("raw-class")
        assert candidates.count("p-4") == 1

    def test_raw_only(self):
        assert scan_content([RawContent("only")]) == ["only"]
