"""Tests for the breeze command-line interface."""

from pathlib import Path

from click.testing import CliRunner

from breeze import __version__
from breeze.cli.main import cli


def write_site(root: Path) -> None:
    (root / "index.html").write_text('<div class="container mx-auto p-4 md:p-8"></div>')
    (root / "breeze.config.yaml").write_text(
        "content:\n"
        "  - '*.html'\n"
        "preflight: false\n"
        "theme:\n"
        "  container:\n"
        "    center: true\n"
    )


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        for command in ("build", "resolve", "scan", "init"):
            assert command in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build
# ---------------------------------------------------------------------------


class TestBuild:
    def test_build_to_stdout_with_discovered_config(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            write_site(Path.cwd())
            result = runner.invoke(cli, ["build"])
        assert result.exit_code == 0, result.output
        assert ".mx-auto {" in result.output
        assert ".md\\:p-8 {" in result.output

    def test_build_to_file(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            write_site(Path.cwd())
            result = runner.invoke(cli, ["build", "-c", "breeze.config.yaml", "-o", "dist/site.css"])
            css = Path("dist/site.css").read_text()
        assert result.exit_code == 0, result.output
        assert "Wrote" in result.output
        assert ".container {" in css

    def test_build_minified(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            write_site(Path.cwd())
            result = runner.invoke(cli, ["build", "--minify"])
        assert ".p-4{padding:1rem}" in result.output

    def test_build_explicit_sources(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("page.html").write_text('<p class="italic">')
            result = runner.invoke(cli, ["build", "page.html"])
        assert result.exit_code == 0, result.output
        assert ".italic {" in result.output

    def test_invalid_config_exits_1(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("breeze.config.yaml").write_text("dark_mode: sometimes\n")
            result = runner.invoke(cli, ["build"])
        assert result.exit_code == 1
        assert "Error: dark_mode" in result.output

    def test_unknown_plugin_exits_1(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("breeze.config.yaml").write_text("plugins:\n  - typography\n")
            result = runner.invoke(cli, ["build"])
        assert result.exit_code == 1
        assert "Error:" in result.output


# ---------------------------------------------------------------------------
# resolve / scan / init
# ---------------------------------------------------------------------------


class TestResolve:
    def test_resolve_prints_rules(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["resolve", "p-4", "hover:bg-white"])
        assert result.exit_code == 0, result.output
        assert ".p-4 {" in result.output
        assert ".hover\\:bg-white:hover {" in result.output

    def test_rejected_candidate_exits_1(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["resolve", "p-4", "nope:p-4"])
        assert result.exit_code == 1
        assert "Rejected nope:p-4 (unknown_variant: nope)" in result.output


class TestScan:
    def test_scan_lists_candidates(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("a.html").write_text('<p class="p-4 m-2">')
            result = runner.invoke(cli, ["scan", "a.html"])
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["p", "class", "p-4", "m-2"]

    def test_scan_resolvable_only(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("a.html").write_text('<p class="p-4 m-2">')
            result = runner.invoke(cli, ["scan", "--resolvable", "a.html"])
        assert result.output.splitlines() == ["p-4", "m-2"]


class TestInit:
    def test_init_creates_config(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["init"])
            text = Path("breeze.config.yaml").read_text()
        assert result.exit_code == 0
        assert "strategy: class" in text
        assert "center: true" in text

    def test_init_refuses_to_overwrite(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("breeze.config.yaml").write_text("")
            result = runner.invoke(cli, ["init"])
            forced = runner.invoke(cli, ["init", "--force"])
        assert result.exit_code == 1
        assert "already exists" in result.output
        assert forced.exit_code == 0
