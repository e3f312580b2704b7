# src/ilcf/cli/formatter.py
from typing import Any, Dict, List, Mapping, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

console = Console()


class ILCFFormatter:
    """
    ILCFFormatter: the visual side of the CLI.
    Renders variable tables, exports and execution reports.
    """

    def __init__(self, out: Optional[Console] = None):
        self.console = out or console

    def print_variables(self, variables: Mapping[str, str], title: str,
                        key_lines: Optional[Mapping[str, int]] = None):
        table = Table(title=title, show_header=True, header_style="bold magenta")
        table.add_column("Line", justify="right", style="dim")
        table.add_column("Key", style="cyan")
        table.add_column("Value")

        for key in sorted(variables):
            line = str(key_lines.get(key, "")) if key_lines else ""
            table.add_row(line, escape(key), escape(variables[key]))

        self.console.print(table)

    def print_export(self, content: str, fmt: str, title: str):
        syntax = Syntax(content.rstrip(), fmt, theme="monokai", line_numbers=False)
        self.console.print(Panel(syntax, title=title, border_style="green"))

    def print_final_table(self, reports: List[Dict[str, Any]]):
        """Builds the summary table shown at the end of a check."""
        table = Table(title="ILCF Check Report", show_lines=True, header_style="bold magenta")
        table.add_column("File Path", style="cyan")
        table.add_column("Keys", justify="right")
        table.add_column("Status", style="bold")
        table.add_column("Result", justify="center")

        for r in reports:
            success = r.get("success", False)
            color = "green" if success else "red"
            table.add_row(
                escape(str(r.get("file_path"))), str(r.get("keys", 0)),
                f"[{color}]{r.get('status', 'FAILED')}[/{color}]",
                "✅" if success else "❌",
            )
            if r.get("error"):
                self.console.print(f"[bold red]{escape(str(r['file_path']))}:[/bold red] {escape(r['error'])}")

        self.console.print(table)

    def print_summary(self, summary: Dict[str, Any]):
        self.console.print(Panel(
            f"[bold white]Summary Report[/bold white]\n"
            f"════════════════════════════════════════\n"
            f"Total Files:     {summary['total_files']}\n"
            f"Success:         [green]{summary['successful']}[/green]\n"
            f"Failed:          [red]{summary['failed']}[/red]\n"
            f"Keys Parsed:     {summary['total_keys']}\n"
            f"Written to Disk: {summary['written_to_disk']}",
            border_style="dim"
        ))
