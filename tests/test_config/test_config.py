"""Tests for configuration loading and validation."""

import json
from pathlib import Path

import pytest

from breeze.config import (
    DEFAULT_CONFIG_TEMPLATE,
    BreezeConfig,
    PluginSpec,
    RawContent,
    find_config,
    load_config,
)
from breeze.errors import ConfigError


# ---------------------------------------------------------------------------
# from_dict
# ---------------------------------------------------------------------------


class TestFromDict:
    def test_defaults(self):
        config = BreezeConfig.from_dict({})
        assert config.content == ()
        assert config.separator == ":"
        assert config.dark_mode == "media"
        assert config.preflight is True
        assert config.workers == 4

    def test_content_strings_and_raw(self):
        config = BreezeConfig.from_dict({"content": ["src/**/*.html", {"raw": "p-4"}]})
        assert config.content == ("src/**/*.html", RawContent(text="p-4"))

    def test_single_content_string(self):
        assert BreezeConfig.from_dict({"content": "*.html"}).content == ("*.html",)

    def test_plugins_by_name_and_mapping(self):
        config = BreezeConfig.from_dict(
            {"plugins": ["forms", {"name": "forms", "options": {"strategy": "class"}}]}
        )
        assert config.plugins == (
            PluginSpec(name="forms"),
            PluginSpec(name="forms", options={"strategy": "class"}),
        )

    def test_plugin_objects_pass_through(self):
        def setup(api):
            pass

        assert BreezeConfig.from_dict({"plugins": [setup]}).plugins == (setup,)

    def test_base_dir(self, tmp_path):
        assert BreezeConfig.from_dict({}, base_dir=tmp_path).base_dir == tmp_path

    @pytest.mark.parametrize(
        "data",
        [
            {"unknown": 1},
            {"theme": []},
            {"theme": {"extend": "colors"}},
            {"content": 5},
            {"content": [5]},
            {"plugins": "forms"},
            {"plugins": [{"options": {}}]},
            {"plugins": [{"name": "forms", "options": []}]},
            {"separator": ""},
            {"separator": 1},
            {"important": "yes"},
            {"dark_mode": "auto"},
            {"workers": 0},
            {"workers": True},
        ],
    )
    def test_invalid_shapes_raise(self, data):
        with pytest.raises(ConfigError):
            BreezeConfig.from_dict(data)

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError):
            BreezeConfig.from_dict(["content"])

    def test_error_carries_key(self):
        with pytest.raises(ConfigError) as excinfo:
            BreezeConfig.from_dict({"dark_mode": "auto"})
        assert excinfo.value.key == "dark_mode"


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


class TestLoadConfig:
    def test_yaml(self, tmp_path):
        path = tmp_path / "breeze.config.yaml"
        path.write_text("content:\n  - '*.html'\ntheme:\n  container:\n    center: true\n")
        config = load_config(path)
        assert config.content == ("*.html",)
        assert config.theme == {"container": {"center": True}}
        assert config.base_dir == tmp_path

    def test_json(self, tmp_path):
        path = tmp_path / "breeze.config.json"
        path.write_text(json.dumps({"important": True, "workers": 2}))
        config = load_config(path)
        assert config.important is True
        assert config.workers == 2

    def test_empty_file_is_default(self, tmp_path):
        path = tmp_path / "breeze.config.yaml"
        path.write_text("")
        assert load_config(path).content == ()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "breeze.config.yaml"
        path.write_text("content: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(tmp_path / "absent.yaml")

    def test_template_is_loadable(self, tmp_path):
        path = tmp_path / "breeze.config.yaml"
        path.write_text(DEFAULT_CONFIG_TEMPLATE)
        config = load_config(path)
        assert config.theme["container"]["center"] is True
        assert config.plugins == (PluginSpec(name="forms", options={"strategy": "class"}),)


class TestFindConfig:
    def test_finds_yaml(self, tmp_path):
        (tmp_path / "breeze.config.yaml").write_text("")
        assert find_config(tmp_path) == tmp_path / "breeze.config.yaml"

    def test_prefers_yaml_over_json(self, tmp_path):
        (tmp_path / "breeze.config.json").write_text("{}")
        (tmp_path / "breeze.config.yaml").write_text("")
        assert find_config(tmp_path).name == "breeze.config.yaml"

    def test_none_when_absent(self, tmp_path):
        assert find_config(tmp_path) is None
