"""Shared fixtures for docschema tests."""

import io
import json
from pathlib import Path

import pytest
from rich.console import Console

from docschema.examples import ExampleCorpus
from docschema.report import Reporter

from doc_helpers import make_document, make_section, method_fields, option_fields


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    root = tmp_path / "examples"
    listing = {
        "welcomes": ["from-data.html"],
        "options": ["table-pagination.html", "table-search.html"],
        "column-options": ["column-title.html"],
        "methods": ["methods-get-data.html"],
    }
    for subdir, files in listing.items():
        (root / subdir).mkdir(parents=True)
        for name in files:
            (root / subdir / name).write_text("<html></html>")
    return root


@pytest.fixture
def corpus(corpus_dir: Path) -> ExampleCorpus:
    return ExampleCorpus.load(corpus_dir)


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def reporter(output: io.StringIO) -> Reporter:
    return Reporter(Console(file=output, width=200, color_system=None))


@pytest.fixture
def catalog_data() -> dict:
    return {
        "DEFAULTS": {
            "pagination": False,
            "search": False,
            "onClickRow": None,
            "formatLoadingMessage": None,
        },
        "COLUMN_DEFAULTS": {
            "title": None,
        },
        "METHODS": ["getData"],
        "EVENTS": {
            "click-row.bs.table": "onClickRow",
        },
        "LOCALES": {
            "en": {
                "formatLoadingMessage": "Loading, please wait",
            },
        },
    }


@pytest.fixture
def catalog_file(tmp_path: Path, catalog_data: dict) -> Path:
    path = tmp_path / "api-schema.json"
    path.write_text(json.dumps(catalog_data))
    return path


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """API docs that are fully consistent with `catalog_data`."""
    root = tmp_path / "docs"
    root.mkdir()

    placeholder = {
        "Attribute": "`data-toggle`",
        "Type": "`String`",
        "Detail": "Activate the table without writing JavaScript.",
        "Default": "`'table'`",
        "Example": "[From HTML](https://examples.bootstrap-table.com/#welcomes/from-data.html)",
    }
    (root / "table-options.md").write_text(make_document([
        make_section("-", placeholder),
        make_section("pagination", option_fields("pagination")),
        make_section("search", option_fields("search", "table-search.html")),
    ]))
    (root / "column-options.md").write_text(make_document([
        make_section("title", option_fields("title", "column-title.html")),
    ]))
    (root / "methods.md").write_text(make_document([
        make_section("getData", method_fields("getData")),
    ]))
    (root / "events.md").write_text(make_document([
        make_section("onClickRow", {
            "jQuery Event": "`click-row.bs.table`",
            "Parameter": "`row, $element, field`",
            "Detail": "Fires when user click a row.",
        }),
    ]))
    (root / "localizations.md").write_text(make_document([
        make_section("formatLoadingMessage", {
            "Parameter": "`-`",
            "Default": "`'Loading, please wait'`",
        }),
    ]))
    return root
