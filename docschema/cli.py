"""
docschema CLI - API Reference Documentation Consistency Checker

A command-line tool that keeps the Markdown API reference in sync with the
library's constants:
1. Every option, column option, method, event and locale key has a section
2. Every section carries its required bullet fields in the expected format
3. Example links point at files that exist in the example corpus
4. Sections are pruned and reordered canonically in place
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from docschema import __version__
from docschema.catalog import CatalogError, load_catalog, build_domains
from docschema.config import CheckerSettings
from docschema.examples import ExampleCorpus
from docschema.reconcile import DocumentationChecker
from docschema.report import Reporter, write_json_report

app = typer.Typer(
    name="docschema",
    help="API Reference Documentation Consistency Checker",
    add_completion=False,
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def check(
    docs_dir: Optional[Path] = typer.Option(None, "--docs-dir", "-d", help="Directory holding the API reference Markdown files"),
    examples_dir: Optional[Path] = typer.Option(None, "--examples-dir", "-e", help="Example corpus checkout (optional)"),
    schema: Optional[Path] = typer.Option(None, "--schema", "-s", help="Schema catalog JSON file"),
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="Locale whose keys define the localization headings"),
    json_report: Optional[Path] = typer.Option(None, "--json-report", "-o", help="Also write the results as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging"),
):
    """
    Check every API reference document against the schema catalog.

    Documents are checked in order: table options, column options, methods,
    events, localizations. Each document that has no unknown headings is
    rewritten with its sections in canonical order.

    Exits with status 0 when no errors were found, 1 otherwise.

    Example:
        docschema check \\
            --docs-dir ../site/docs/api \\
            --examples-dir ./bootstrap-table-examples \\
            --schema ./api-schema.json
    """
    _configure_logging(verbose)

    settings = CheckerSettings()
    docs_dir = docs_dir or settings.docs_dir
    examples_dir = examples_dir or settings.examples_dir
    schema = schema or settings.schema_path
    locale = locale or settings.locale

    try:
        catalog = load_catalog(schema)
        domains = build_domains(catalog, locale)
    except CatalogError as e:
        console.print(f"[red]❌ Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    corpus = ExampleCorpus.load(examples_dir)
    reporter = Reporter(console)
    checker = DocumentationChecker(docs_dir=docs_dir, domains=domains, corpus=corpus, reporter=reporter)

    try:
        summary = checker.run()
    except FileNotFoundError as e:
        console.print(f"[red]❌ Error: documentation file not found: {escape(str(e.filename))}[/red]")
        raise typer.Exit(1)

    reporter.summary(summary)

    if json_report:
        write_json_report(summary, json_report)
        console.print(f"[bold]📁 Report saved to:[/bold] [cyan]{escape(str(json_report))}[/cyan]")

    raise typer.Exit(0 if summary.passed else 1)


@app.command()
def domains(
    schema: Optional[Path] = typer.Option(None, "--schema", "-s", help="Schema catalog JSON file"),
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="Locale whose keys define the localization headings"),
):
    """List the document domains defined by the schema catalog."""
    settings = CheckerSettings()

    try:
        catalog = load_catalog(schema or settings.schema_path)
        document_domains = build_domains(catalog, locale or settings.locale)
    except CatalogError as e:
        console.print(f"[red]❌ Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    table = Table(title="Document Domains")
    table.add_column("Domain", style="cyan", no_wrap=True)
    table.add_column("File", no_wrap=True)
    table.add_column("Headings", justify="right")
    table.add_column("Fields")

    for domain in document_domains:
        table.add_row(domain.name, domain.file, str(len(domain.identifiers)), escape(", ".join(domain.attributes)))

    console.print(table)


@app.command()
def version():
    """Show the version of docschema."""
    console.print(f"[bold cyan]docschema[/bold cyan] v{__version__}")
    console.print("API Reference Documentation Consistency Checker")


if __name__ == "__main__":
    app()
