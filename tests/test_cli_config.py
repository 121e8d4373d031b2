"""Tests for configuration loading and overrides."""

import pytest

import cli_config
from cli_config import (
    apply_set_overrides,
    apply_toolchain_overrides,
    configured_log_level,
    load_config,
)
from constants import Constants, ExitCodes


@pytest.fixture(autouse=True)
def restore_affixes(monkeypatch):
    monkeypatch.setattr(Constants, "TOOLCHAIN_AFFIXES", dict(Constants.TOOLCHAIN_AFFIXES))


def test_load_config_from_explicit_path(tmp_path):
    path = tmp_path / "projgrammar.yml"
    path.write_text("logging:\n  level: debug\ntoolchains:\n  GCC:\n    elf_suffix: .out\n", encoding="utf-8")
    cfg = load_config(str(path))
    assert cfg["toolchains"]["GCC"]["elf_suffix"] == ".out"
    assert configured_log_level(cfg) == "DEBUG"


def test_load_config_missing_explicit_path_exits(tmp_path):
    with pytest.raises(SystemExit) as exc:
        load_config(str(tmp_path / "missing.yml"))
    assert exc.value.code == ExitCodes.FILE_ERROR.value


def test_load_config_invalid_yaml_exits(tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("toolchains: [unclosed\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        load_config(str(path))
    assert exc.value.code == ExitCodes.FILE_ERROR.value


def test_load_config_without_files(monkeypatch):
    monkeypatch.setattr(cli_config, "default_config_paths", lambda: [])
    assert load_config(None) == {}


def test_load_config_uses_first_default_location(monkeypatch, tmp_path):
    path = tmp_path / "projgrammar.yml"
    path.write_text("logging:\n  level: WARNING\n", encoding="utf-8")
    monkeypatch.setattr(cli_config, "default_config_paths", lambda: [str(tmp_path / "none.yml"), str(path)])
    assert configured_log_level(load_config(None)) == "WARNING"


def test_empty_config_file(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)) == {}


class TestSetOverrides:
    """Test --set KEY=VALUE handling."""

    def test_dotted_keys_create_sections(self):
        cfg = apply_set_overrides({}, ["toolchains.IAR.lib_prefix=lib", "logging.level=ERROR"])
        assert cfg == {"toolchains": {"IAR": {"lib_prefix": "lib"}}, "logging": {"level": "ERROR"}}

    def test_override_wins_over_file_value(self):
        cfg = apply_set_overrides({"logging": {"level": "INFO"}}, ["logging.level=DEBUG"])
        assert configured_log_level(cfg) == "DEBUG"

    def test_invalid_override(self):
        with pytest.raises(ValueError):
            apply_set_overrides({}, ["no-equals-sign"])


class TestToolchainOverrides:
    """Test toolchain affix overrides."""

    def test_partial_override_keeps_other_affixes(self):
        apply_toolchain_overrides({"toolchains": {"GCC": {"elf_suffix": ".out"}}})
        assert Constants.TOOLCHAIN_AFFIXES["GCC"] == (".out", "lib", ".a")

    def test_new_toolchain_starts_from_defaults(self):
        apply_toolchain_overrides({"toolchains": {"CLANG": {"lib_prefix": "lib"}}})
        assert Constants.TOOLCHAIN_AFFIXES["CLANG"] == (".elf", "lib", ".a")

    def test_invalid_section_is_ignored(self):
        before = dict(Constants.TOOLCHAIN_AFFIXES)
        apply_toolchain_overrides({"toolchains": ["GCC"]})
        assert Constants.TOOLCHAIN_AFFIXES == before
