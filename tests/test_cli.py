import json
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from ilcf.cli.main import ILCFCLI


@pytest.fixture
def config_file(tmp_path):
    target = tmp_path / "app.ilcf"
    target.write_text("server\n\tport = 8080\n\tsecure = false\nname = demo\n", encoding="utf-8")
    return target


def run(*argv) -> int:
    return ILCFCLI().run(list(argv))


def test_get_prints_converted_value(config_file, capsys):
    assert run("get", str(config_file), "server_port", "--type", "int") == 0
    assert capsys.readouterr().out.strip() == "8080"


def test_get_missing_key_fails(config_file, capsys):
    assert run("get", str(config_file), "server_user") == 1
    assert "Key not found" in capsys.readouterr().out


def test_get_conversion_error_fails(config_file, capsys):
    assert run("get", str(config_file), "name", "--type", "int") == 1
    assert "Cannot convert" in capsys.readouterr().out


def test_dump_json(config_file, capsys):
    assert run("dump", str(config_file), "--format", "json") == 0
    assert json.loads(capsys.readouterr().out) == {
        "server_port": "8080", "server_secure": "false", "name": "demo"}


def test_custom_separator(config_file, capsys):
    assert run("--separator", ".", "get", str(config_file), "server.secure", "--type", "bool") == 0
    assert capsys.readouterr().out.strip() == "False"


def test_check_directory_with_fault(tmp_path, config_file, capsys):
    (tmp_path / "broken.ilcf").write_text("a\n\t\tb = 1\n", encoding="utf-8")
    assert run("check", str(tmp_path)) == 1
    assert "INDENT_ERROR" in capsys.readouterr().out


def test_check_single_file(config_file):
    assert run("check", str(config_file)) == 0


def test_convert_writes_yaml(config_file):
    assert run("convert", str(config_file), "--to", "yaml") == 0
    assert config_file.with_suffix(".yaml").exists()


def test_convert_dry_run(config_file):
    assert run("convert", str(config_file), "--to", "json", "--dry-run") == 0
    assert not config_file.with_suffix(".json").exists()


def test_missing_path(tmp_path):
    assert run("check", str(tmp_path / "nope")) == 1


def test_no_arguments_prints_help(capsys):
    assert run() == 0
    assert "usage: ilcf" in capsys.readouterr().out
