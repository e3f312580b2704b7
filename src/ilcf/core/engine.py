#!/usr/bin/env python3
"""
ILCF ENGINE - Batch Checker & Converter
---------------------------------------
ConfigEngine runs the reader over single files or a whole workspace,
turning every outcome into a report dict. Optional exports are written
atomically next to their source file.

Author: ILCF Team
Date: 2026-10-18
"""

import logging
import os
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from ilcf.core.errors import ILCFReadError, IndentationFault
from ilcf.core.models import FormatSettings
from ilcf.export.exporter import FlatExporter
from ilcf.reading.reader import ILCFReader

logger = logging.getLogger("ilcf.engine")


class ConfigEngine:
    """
    Principal orchestrator for checking and converting ILCF files.
    Per-file faults are reported, never raised, so one bad file does not
    stop a batch.
    """

    def __init__(self, workspace_path: str, settings: Optional[FormatSettings] = None):
        self.workspace = Path(workspace_path).resolve()
        self.settings = settings or FormatSettings()

    def check_file(self, relative_path: str, export_format: Optional[str] = None,
                   dry_run: bool = True, strict: bool = False) -> Dict[str, Any]:
        """
        Parses one file and, when `export_format` is given and not `dry_run`,
        writes the converted document beside it.

        With `strict`, list elements (which are recognized but never
        materialized) fail the check.
        """
        full_path = (self.workspace / relative_path).resolve()
        if not full_path.is_file():
            return self._file_error(relative_path, "FILE_NOT_FOUND", f"Path missing: {full_path}")

        try:
            context = ILCFReader(full_path, settings=self.settings).read()
        except IndentationFault as e:
            logger.error("Indentation fault in %s: %s", relative_path, e)
            return self._file_error(relative_path, "INDENT_ERROR", str(e), line_no=e.line_no)
        except ILCFReadError as e:
            logger.error("Unable to read %s: %s", relative_path, e)
            return self._file_error(relative_path, "READ_ERROR", str(e))

        success = not (strict and context.list_elements)
        result = {
            "file_path": str(relative_path),
            "success": success,
            "status": "OK" if success else "LIST_IGNORED",
            "keys": len(context.variables),
            "labels": len(context.labels),
            "list_elements": len(context.list_elements),
            "lines": context.lines_read,
            "error": None if success else
                f"{len(context.list_elements)} list element(s) are not materialized",
            "written": False,
            "export_path": None,
            "timestamp": time.time(),
        }

        if export_format:
            exporter = FlatExporter(export_format)
            content = exporter.export(context.variables, context.key_lines)
            target = full_path.with_suffix(exporter.extension)
            result["export_path"] = str(target.relative_to(self.workspace))
            result["exported_content"] = content
            if target == full_path:
                result["success"] = False
                result["status"] = "WRITE_ERROR"
                result["error"] = f"Export target {result['export_path']} is the source file"
            elif not dry_run and success:
                try:
                    self._atomic_write(target, content)
                    result["written"] = True
                except IOError as e:
                    result["write_error"] = str(e)
                    result["success"] = False
                    result["status"] = "WRITE_ERROR"

        return result

    def scan_directory(self, extension: str = ".ilcf", export_format: Optional[str] = None,
                       dry_run: bool = True, strict: bool = False, max_depth: int = 10,
                       progress_callback: Optional[Callable[[int, int], None]] = None
                       ) -> List[Dict[str, Any]]:
        """
        Recursively discovers and checks all files with `extension`.
        Symlinks are skipped to prevent loops.
        """
        patterns = {f"*{extension.lower()}", f"*{extension.upper()}"}
        all_files = sorted({
            f for p in patterns for f in self.workspace.rglob(p)
            if f.is_file() and not f.is_symlink()
        })

        reports = []
        total_files = len(all_files)
        for processed, file_path in enumerate(all_files, 1):
            rel_parts = file_path.relative_to(self.workspace).parts
            if len(rel_parts) > max_depth:
                logger.debug("Skipping %s: deeper than %d levels", file_path, max_depth)
                continue

            rel_path = str(file_path.relative_to(self.workspace))
            reports.append(self.check_file(rel_path, export_format=export_format,
                                           dry_run=dry_run, strict=strict))
            if progress_callback:
                progress_callback(processed, total_files)

        return reports

    def generate_summary(self, reports: List[Dict[str, Any]]) -> Dict[str, Any]:
        if not reports:
            return {"total_files": 0, "success_rate": 0, "successful": 0,
                    "failed": 0, "total_keys": 0, "written_to_disk": 0}

        total = len(reports)
        successful = sum(1 for r in reports if r.get("success", False))
        return {
            "total_files": total,
            "success_rate": successful / total,
            "successful": successful,
            "failed": total - successful,
            "total_keys": sum(r.get("keys", 0) for r in reports),
            "written_to_disk": sum(1 for r in reports if r.get("written", False)),
            "summary_timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
        }

    def _atomic_write(self, target_path: Path, content: str):
        if not os.access(target_path.parent, os.W_OK):
            raise PermissionError(f"No write access to {target_path.parent}")
        temp_file = target_path.with_suffix(target_path.suffix + ".ilcf.tmp")
        try:
            temp_file.write_text(content, encoding="utf-8")
            os.replace(temp_file, target_path)
        except OSError as e:
            if temp_file.exists():
                temp_file.unlink()
            raise IOError(f"Atomic write failed: {e}") from e

    def _file_error(self, path: str, status: str, error: str,
                    line_no: Optional[int] = None) -> Dict[str, Any]:
        return {
            "file_path": path, "status": status, "error": error, "line_no": line_no,
            "success": False, "keys": 0, "labels": 0, "list_elements": 0,
            "written": False, "export_path": None,
        }
