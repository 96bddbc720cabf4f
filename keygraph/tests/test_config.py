"""Tests for configuration loading and validation."""
from pathlib import Path

import pytest
from pydantic import ValidationError

from keygraph.layouts.connector import neighbours
from keygraph.layouts.presets import build_layout
from keygraph.utils.config import (
    Config, ConfigurationError, LayoutPreset, MissingKeys, load_config, load_presets
)

CONFIG_TEMPLATE = """
paths:
  logs_dir: {root}/logs
  plots_dir: {root}/plots
logging:
  console_level: WARNING
  file_level: DEBUG
  format: '%(levelname)s %(message)s'
layouts:
  - name: arrows
    style: aligned
    rows: |-
      \\0 ^
      < v >
    missing_keys: create
  - name: tiny
    rows: "a b\\nc d"
    alphabetics: true
"""


def write_config(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_config(tmp_path):
    path = write_config(tmp_path, CONFIG_TEMPLATE.format(root=tmp_path))
    config = load_config(path)
    assert config.logging.console_level == "WARNING"
    assert (tmp_path / "logs").is_dir()
    assert [preset.name for preset in config.layouts] == ["arrows", "tiny"]
    assert config.layouts[0].missing_keys is MissingKeys.CREATE
    assert config.layouts[1].style == "slanted"


def test_presets_from_yaml_compile(tmp_path):
    path = write_config(tmp_path, CONFIG_TEMPLATE.format(root=tmp_path))
    arrows, tiny = load_presets(path)

    graph = build_layout(arrows)
    assert {key.value for key in neighbours(graph, '^')} == {'<', 'v', '>'}
    assert graph.number_of_nodes() == 4

    graph = build_layout(tiny)
    assert {key.value for key in neighbours(graph, 'a')} == {'b', 'c'}


def test_empty_file_uses_defaults(tmp_path):
    config = load_config(write_config(tmp_path, ""))
    assert config == Config()
    assert config.layouts == []


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(tmp_path / "nope.yaml")


def test_invalid_yaml(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(write_config(tmp_path, "layouts: [unclosed"))


def test_top_level_must_be_mapping(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(write_config(tmp_path, "- a\n- b\n"))


def test_invalid_log_level(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(write_config(tmp_path, "logging:\n  console_level: LOUD\n"))


def test_duplicate_layout_names(tmp_path):
    text = "layouts:\n  - {name: a, rows: 'a'}\n  - {name: a, rows: 'b'}\n"
    with pytest.raises(ConfigurationError) as excinfo:
        load_config(write_config(tmp_path, text))
    assert isinstance(excinfo.value.__cause__, ValidationError)


class TestLayoutPreset:
    def test_unknown_style(self):
        with pytest.raises(ValidationError):
            LayoutPreset(name="x", style="diagonal", rows="a b")

    def test_blank_rows(self):
        with pytest.raises(ValidationError):
            LayoutPreset(name="x", rows="  \n ")

    def test_multi_character_shift(self):
        with pytest.raises(ValidationError):
            LayoutPreset(name="x", rows="a", keys={'a': 'AB'})

    def test_unknown_policy(self):
        with pytest.raises(ValidationError):
            LayoutPreset(name="x", rows="a", missing_keys="guess")

    def test_frozen(self):
        preset = LayoutPreset(name="x", rows="a")
        with pytest.raises(ValidationError):
            preset.name = "y"

    def test_frozen_through_model_config(self):
        assert LayoutPreset.model_config.get("frozen") is True
        assert "Config" not in vars(LayoutPreset)
