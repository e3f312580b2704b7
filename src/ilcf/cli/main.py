#!/usr/bin/env python3
"""
ILCF CLI
--------
Command-line front end over the reader, the typed accessor and the
check engine.

    ilcf check  PATH            validate one file or a directory tree
    ilcf get    FILE KEY        print one value, optionally converted
    ilcf dump   FILE            show every flattened key
    ilcf convert PATH --to FMT  write YAML/JSON exports beside the sources

Author: ILCF Team
Date: 2026-10-18
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)

from ilcf.cli.formatter import ILCFFormatter, console
from ilcf.config.accessor import ILCFConfig
from ilcf.core.engine import ConfigEngine
from ilcf.core.errors import ILCFError
from ilcf.core.models import FormatSettings
from ilcf.export.exporter import FORMATS, FlatExporter
from ilcf.reading.reader import ILCFReader

__version__ = "0.1.0"

TYPE_GETTERS = {
    "str": "get_string",
    "int": "get_int",
    "float": "get_float",
    "bool": "get_bool",
    "char": "get_char",
}


class ILCFCLI:
    """
    CLI wrapper that translates user commands into reader and engine calls.
    `run` returns the process exit code.
    """

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog="ilcf",
            description="ILCF - Indented Line Configuration Format reader",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self.formatter = ILCFFormatter()
        self._setup_args()

    def _setup_args(self):
        self.parser.add_argument("-V", "--version", action="version", version=f"ilcf v{__version__}")
        self.parser.add_argument("--separator", default=FormatSettings.prefix_delim,
                                 help="Key separator for nested names (default: _)")
        self.parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        check_parser = subparsers.add_parser("check", help="🔍 Validate ILCF files")
        check_parser.add_argument("path", help="Path to a file or directory")
        check_parser.add_argument("--ext", default=".ilcf", help="File extension filter (default: .ilcf)")
        check_parser.add_argument("--strict", action="store_true",
                                  help="Fail files containing list elements")

        get_parser = subparsers.add_parser("get", help="Print the value of one flattened key")
        get_parser.add_argument("file", help="ILCF file")
        get_parser.add_argument("key", help="Flattened key, e.g. server_port")
        get_parser.add_argument("--type", choices=sorted(TYPE_GETTERS), default="str",
                                help="Convert the value before printing")

        dump_parser = subparsers.add_parser("dump", help="Show every flattened key")
        dump_parser.add_argument("file", help="ILCF file")
        dump_parser.add_argument("--format", choices=("table",) + FORMATS, default="table")

        convert_parser = subparsers.add_parser("convert", help="Write YAML/JSON exports")
        convert_parser.add_argument("path", help="Path to a file or directory")
        convert_parser.add_argument("--to", choices=FORMATS, default="yaml", dest="fmt")
        convert_parser.add_argument("--ext", default=".ilcf", help="File extension filter (default: .ilcf)")
        convert_parser.add_argument("--dry-run", action="store_true", help="Preview without writing")

    def _settings(self, args: argparse.Namespace) -> FormatSettings:
        return FormatSettings(prefix_delim=args.separator)

    def _run_engine(self, args: argparse.Namespace, export_format: Optional[str] = None) -> int:
        input_path = Path(args.path).resolve()
        if not input_path.exists():
            console.print(f"[bold red]Error:[/bold red] Path '{args.path}' not found.")
            return 1

        workspace = input_path if input_path.is_dir() else input_path.parent
        engine = ConfigEngine(str(workspace), self._settings(args))
        dry_run = getattr(args, "dry_run", True) if export_format else True
        strict = getattr(args, "strict", False)

        if input_path.is_file():
            reports = [engine.check_file(input_path.name, export_format=export_format,
                                         dry_run=dry_run, strict=strict)]
        else:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                BarColumn(bar_width=40),
                TaskProgressColumn(),
                TimeElapsedColumn(),
                console=console,
                transient=True,
            ) as progress:
                task_id = progress.add_task("Reading configurations...", total=None)

                def advance(done: int, total: int):
                    progress.update(task_id, completed=done, total=total)

                reports = engine.scan_directory(args.ext, export_format=export_format,
                                                dry_run=dry_run, strict=strict,
                                                progress_callback=advance)

        if not reports:
            console.print(f"\n[bold yellow]⚠️  No {args.ext} files found.[/bold yellow]")
            return 0

        if export_format and dry_run:
            for r in reports:
                if r.get("exported_content"):
                    self.formatter.print_export(r["exported_content"], export_format,
                                                f"PREVIEW: {r['export_path']}")

        self.formatter.print_final_table(reports)
        self.formatter.print_summary(engine.generate_summary(reports))
        return 0 if all(r.get("success") for r in reports) else 1

    def _get(self, args: argparse.Namespace) -> int:
        config = ILCFConfig.from_reader(ILCFReader(args.file, settings=self._settings(args)))
        value = getattr(config, TYPE_GETTERS[args.type])(args.key)
        console.print(str(value), markup=False, highlight=False, emoji=False, soft_wrap=True)
        return 0

    def _dump(self, args: argparse.Namespace) -> int:
        context = ILCFReader(args.file, settings=self._settings(args)).read()
        if args.format == "table":
            self.formatter.print_variables(context.variables, args.file, context.key_lines)
        else:
            content = FlatExporter(args.format).export(context.variables, context.key_lines)
            console.print(content, end="", markup=False, highlight=False, emoji=False, soft_wrap=True)
        return 0

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point."""
        argv = sys.argv[1:] if argv is None else argv
        if not argv:
            console.print(Panel.fit("[bold cyan]ILCF v" + __version__ + "[/bold cyan]",
                                    border_style="cyan"))
            self.parser.print_help()
            return 0

        args = self.parser.parse_args(argv)
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )

        try:
            if args.command == "check":
                return self._run_engine(args)
            if args.command == "convert":
                return self._run_engine(args, export_format=args.fmt)
            if args.command == "get":
                return self._get(args)
            if args.command == "dump":
                return self._dump(args)
        except ILCFError as e:
            console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", highlight=False)
            return 1

        self.parser.print_help()
        return 0


def main():
    """Application entry point with interrupt handling."""
    try:
        sys.exit(ILCFCLI().run())
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
