"""
Console and JSON reporting for documentation checks.
"""

from pathlib import Path
from typing import List

from rich.console import Console
from rich.table import Table

from docschema.schemas import CheckSummary, ValidationIssue

BANNER = "-------------------------"


class Reporter:
    """Prints per-domain diagnostics and the run summary."""

    def __init__(self, console: Console):
        self.console = console

    def _plain(self, message: str, style: str = "") -> None:
        # Messages embed "[identifier]" which must not be read as markup
        self.console.print(message, style=style, markup=False, highlight=False, soft_wrap=True)

    def examples_unavailable(self) -> None:
        self.console.print(
            "[bold yellow]⚠️  Warning: Cant check if example files are correctly formatted and have valid URLs.[/bold yellow]"
        )
        self.console.print(
            "[yellow]   To enable this check, clone the example corpus repository next to the docs "
            "or point --examples-dir at an existing checkout.[/yellow]"
        )

    def domain_header(self, path: Path) -> None:
        self.console.print(BANNER)
        self._plain(f"Checking file: {path}")
        self.console.print(BANNER)

    def duplicate_headings(self, titles: List[str]) -> None:
        for title in titles:
            self._plain(f'Warning: heading "{title}" appears more than once, only the last one is kept', "yellow")

    def orphans(self, titles: List[str]) -> None:
        self._plain(
            f'No default option was found for "{", ".join(titles)}". Should the documentation be removed!',
            "red",
        )

    def processing_error(self, identifier: str, error: Exception) -> None:
        self._plain(f"[{identifier}] error processing: {error}", "red")

    def issues(self, issues: List[ValidationIssue]) -> None:
        for issue in issues:
            self._plain(issue.message, "red")

    def summary(self, summary: CheckSummary) -> None:
        """Print a per-domain table followed by the final verdict."""
        table = Table(title="Documentation Check")
        table.add_column("Domain", style="cyan", no_wrap=True)
        table.add_column("File", no_wrap=True)
        table.add_column("Status")
        table.add_column("Sections", justify="right")
        table.add_column("Errors", justify="right")

        for report in summary.domains:
            status = "[green]rewritten[/green]" if report.status == "rewritten" else "[red]aborted[/red]"
            errors = f"[red]{report.error_count}[/red]" if report.error_count else "[green]0[/green]"
            table.add_row(report.domain, Path(report.file).name, status, str(len(report.sections_written)), errors)

        self.console.print()
        self.console.print(table)

        if summary.passed:
            self.console.print("[bold green]✅ Good job! Everything is up to date![/bold green]")
        else:
            self.console.print(f"[bold red]❌ {summary.total_errors} documentation error(s) found[/bold red]")


def write_json_report(summary: CheckSummary, output_file: Path) -> None:
    """Write the run summary as JSON."""
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    with open(output_file, 'w', encoding='utf-8') as f:
        f.write(summary.model_dump_json(indent=2))
