"""Tests for the projgrammar command-line front end."""

import json
from unittest.mock import patch

import pytest

import cli_config
import projgrammar
from args import parse_args
from constants import Constants, ExitCodes
from identifiers import ComponentDescriptor, get_condition_id


@pytest.fixture(autouse=True)
def isolated_cli(monkeypatch):
    monkeypatch.setattr(cli_config, "default_config_paths", lambda: [])
    monkeypatch.setattr(Constants, "TOOLCHAIN_AFFIXES", dict(Constants.TOOLCHAIN_AFFIXES))
    with patch("projgrammar.configure_logging") as mock_configure:
        yield mock_configure


def run(capsys, argv):
    code = projgrammar.main(argv)
    return code, json.loads(capsys.readouterr().out)


def test_parse_args_requires_command():
    with pytest.raises(SystemExit) as exc:
        parse_args([])
    assert exc.value.code == 2


def test_component_id(capsys):
    code, out = run(capsys, ["component-id", "--vendor", "ARM", "--class", "CMSIS", "--group", "CORE",
                             "--version", "5.6.0"])
    assert code == ExitCodes.SUCCESS.value
    assert out == {"id": "ARM::CMSIS:CORE@5.6.0"}


def test_condition_flavor(capsys):
    _, out = run(capsys, ["component-id", "--flavor", "condition", "--tag", "accept",
                          "--class", "Device", "--group", "Startup"])
    assert out == {"id": "accept Device:Startup"}


def test_condition_flavor_default_tag_matches_descriptor(capsys):
    _, out = run(capsys, ["component-id", "--flavor", "condition", "--class", "Device", "--group", "Startup"])
    assert out == {"id": get_condition_id(ComponentDescriptor(cclass="Device", group="Startup"))}
    assert out == {"id": "require Device:Startup"}


def test_decompose(capsys):
    code, out = run(capsys, ["decompose", "ARM::CMSIS:CORE&Var@5.6.0"])
    assert code == ExitCodes.SUCCESS.value
    assert out["attributes"] == {
        "Cvendor": "ARM", "Cclass": "CMSIS", "Cgroup": "CORE", "Cvariant": "Var", "Cversion": "5.6.0",
    }
    assert out["variant_owner"] == "group"
    assert out["ambiguous_variant"] is False


def test_package_id(capsys):
    _, out = run(capsys, ["package-id", "--vendor", "ARM", "--name", "CMSIS", "--version", "5.9.0"])
    assert out == {"id": "ARM::CMSIS@5.9.0"}


def test_compiler_intersect(capsys):
    code, out = run(capsys, ["compiler-intersect", "GCC@>=6.0.0", "GCC@>=8.0.0"])
    assert code == ExitCodes.SUCCESS.value
    assert out == {"outcome": "value", "intersection": "GCC@>=8.0.0"}


def test_compiler_intersect_unrepresentable(capsys):
    _, out = run(capsys, ["compiler-intersect", "GCC@>=8.0", "GCC@8"])
    assert out["outcome"] == "unrepresentable"
    assert out["intersection"] == ""
    assert (out["min_version"], out["max_version"]) == ("8.0", "8")


def test_incompatible_with_error_on_warnings(capsys):
    code, out = run(capsys, ["--error-on-warnings", "compiler-compatible", "GCC@6.0.0", "GCC@8.0.0"])
    assert out == {"compatible": False}
    assert code == ExitCodes.EXIT_WARNINGS.value


def test_incompatible_without_error_on_warnings(capsys):
    code, _ = run(capsys, ["compiler-compatible", "AC6", "GCC"])
    assert code == ExitCodes.SUCCESS.value


def test_context(capsys):
    _, out = run(capsys, ["context", "App+Board.Debug"])
    assert out == {"project": "App", "build_type": "Debug", "target_type": "Board"}


def test_affixes_with_set_override(capsys):
    _, out = run(capsys, ["--set", "toolchains.GCC.elf_suffix=.out", "affixes", "GCC@12.2.0"])
    assert out == {"compiler": "GCC", "elf_suffix": ".out", "lib_prefix": "lib", "lib_suffix": ".a"}


def test_loglevel_flag_wins_over_config(isolated_cli, capsys):
    run(capsys, ["--loglevel", "debug", "--set", "logging.level=ERROR", "context", "App"])
    assert isolated_cli.call_args.kwargs["level"] == "DEBUG"


def test_invalid_set_override(capsys):
    code = projgrammar.main(["--set", "broken", "context", "App"])
    assert code == ExitCodes.USAGE_ERROR.value
    assert "KEY=VALUE" in capsys.readouterr().err
