#!/usr/bin/env python3
"""
ILCF ENGINE SUITE
-----------------
Batch checking and conversion across filesystem edge cases:
1. Valid, broken and missing files
2. Strict mode and list elements
3. Atomic export writes and dry runs
4. Recursive discovery with extension filtering

Author: ILCF Team
Date: 2026-10-18
"""

import os
import sys
from pathlib import Path

import pytest
from ruamel.yaml import YAML

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from ilcf.core.engine import ConfigEngine


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    (tmp_path / "app.ilcf").write_text("server\n\tport = 8080\nname = demo\n", encoding="utf-8")
    (tmp_path / "broken.ilcf").write_text("a = 1\n\t\tb = 2\n", encoding="utf-8")
    (tmp_path / "lists.ilcf").write_text("fruits\n\t- apple\n\t- pear\n", encoding="utf-8")
    nested = tmp_path / "env" / "prod"
    nested.mkdir(parents=True)
    (nested / "db.ILCF").write_text("db\n\thost = db.internal\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("not = config\n", encoding="utf-8")
    return tmp_path


def test_check_valid_file(workspace):
    report = ConfigEngine(str(workspace)).check_file("app.ilcf")
    assert report["success"] is True
    assert report["status"] == "OK"
    assert report["keys"] == 2
    assert report["labels"] == 1
    assert report["written"] is False


def test_check_reports_indentation_fault(workspace):
    report = ConfigEngine(str(workspace)).check_file("broken.ilcf")
    assert report["success"] is False
    assert report["status"] == "INDENT_ERROR"
    assert report["line_no"] == 2


def test_check_missing_file(workspace):
    report = ConfigEngine(str(workspace)).check_file("absent.ilcf")
    assert report["status"] == "FILE_NOT_FOUND"
    assert report["success"] is False


def test_strict_mode_fails_on_list_elements(workspace):
    engine = ConfigEngine(str(workspace))
    assert engine.check_file("lists.ilcf")["success"] is True

    report = engine.check_file("lists.ilcf", strict=True)
    assert report["success"] is False
    assert report["status"] == "LIST_IGNORED"
    assert report["list_elements"] == 2


def test_convert_writes_export_atomically(workspace):
    report = ConfigEngine(str(workspace)).check_file("app.ilcf", export_format="yaml", dry_run=False)

    target = workspace / "app.yaml"
    assert report["written"] is True
    assert report["export_path"] == "app.yaml"
    assert YAML(typ="safe").load(target.read_text(encoding="utf-8")) == {
        "server_port": "8080", "name": "demo"}
    assert not list(workspace.glob("*.tmp"))


def test_dry_run_does_not_write(workspace):
    report = ConfigEngine(str(workspace)).check_file("app.ilcf", export_format="json")
    assert report["written"] is False
    assert '"server_port": "8080"' in report["exported_content"]
    assert not (workspace / "app.json").exists()


def test_scan_directory_and_summary(workspace):
    engine = ConfigEngine(str(workspace))
    seen = []
    reports = engine.scan_directory(".ilcf", progress_callback=lambda done, total: seen.append(total))

    paths = sorted(r["file_path"] for r in reports)
    assert paths == sorted(["app.ilcf", "broken.ilcf", "lists.ilcf",
                            os.path.join("env", "prod", "db.ILCF")])
    assert seen and seen[-1] == 4

    summary = engine.generate_summary(reports)
    assert summary["total_files"] == 4
    assert summary["successful"] == 3
    assert summary["failed"] == 1
    assert summary["total_keys"] == 3


def test_scan_directory_respects_max_depth(workspace):
    reports = ConfigEngine(str(workspace)).scan_directory(".ilcf", max_depth=1)
    assert all(os.sep not in r["file_path"] for r in reports)
    assert len(reports) == 3


def test_empty_summary(workspace):
    assert ConfigEngine(str(workspace)).generate_summary([])["total_files"] == 0


@pytest.mark.parametrize("name, fmt", [("svc.yaml", "yaml"), ("svc.json", "json")])
def test_export_never_overwrites_its_source(tmp_path, name, fmt):
    source = tmp_path / name
    source.write_text("a\n\tb = 1\n", encoding="utf-8")

    report = ConfigEngine(str(tmp_path)).check_file(name, export_format=fmt, dry_run=False)

    assert report["written"] is False
    assert report["success"] is False
    assert report["status"] == "WRITE_ERROR"
    assert source.read_text(encoding="utf-8") == "a\n\tb = 1\n"
