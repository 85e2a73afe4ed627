"""
docschema - keeps Markdown API reference documents in sync with a schema catalog.
"""

__version__ = "0.1.0"

from .schemas import SchemaCatalog, DocumentDomain, ValidationIssue, DomainReport, CheckSummary
from .catalog import CatalogError, load_catalog, build_domains
from .examples import ExampleCorpus
from .markdown import ParsedDocument, parse_sections
from .validator import validate_entry
from .reconcile import DocumentationChecker, check_domain

__all__ = [
    "SchemaCatalog",
    "DocumentDomain",
    "ValidationIssue",
    "DomainReport",
    "CheckSummary",
    "CatalogError",
    "load_catalog",
    "build_domains",
    "ExampleCorpus",
    "ParsedDocument",
    "parse_sections",
    "validate_entry",
    "DocumentationChecker",
    "check_domain",
]
