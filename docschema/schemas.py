"""
Centralized Pydantic schemas for docschema.

This module is the single source of truth for the data models shared by the
catalog loader, the entry validator, the reconciliation driver and the
reporter.
"""

from typing import Dict, List, Literal, Optional, Any

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# SCHEMA SOURCE
# ============================================================================

class SchemaCatalog(BaseModel):
    """Canonical identifiers exported from the documented library's constants."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    defaults: Dict[str, Any] = Field(default_factory=dict, alias="DEFAULTS", description="Table option name -> default value")
    column_defaults: Dict[str, Any] = Field(default_factory=dict, alias="COLUMN_DEFAULTS", description="Column option name -> default value")
    methods: List[str] = Field(default_factory=list, alias="METHODS", description="Public method names")
    events: Dict[str, str] = Field(default_factory=dict, alias="EVENTS", description="jQuery event name -> handler option name")
    locales: Dict[str, Dict[str, Any]] = Field(default_factory=dict, alias="LOCALES", description="Locale code -> locale keys")


# ============================================================================
# DOMAIN CONFIGURATION
# ============================================================================

class DocumentDomain(BaseModel):
    """One Markdown document and the identifiers/attributes it must document."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Human readable domain name, e.g. 'table options'")
    file: str = Field(description="Markdown file name relative to the docs directory")
    identifiers: List[str] = Field(description="Canonical identifiers (headings) expected in the document")
    attributes: List[str] = Field(description="Ordered sub-field names every section must contain")
    placeholder: Optional[str] = Field(None, description="Leading heading that is not part of the schema but is kept first")
    ignore: Dict[str, List[str]] = Field(default_factory=dict, description="Identifier -> field names exempt from validation")

    def is_ignored(self, identifier: str, field_name: str) -> bool:
        return field_name in self.ignore.get(identifier, [])

    def canonical_order(self) -> List[str]:
        """
        Identifiers sorted case-insensitively, placeholder pinned first.

        Returns:
            Headings in the order they appear in a rewritten document
        """
        ordered = sorted(
            (it for it in self.identifiers if it != self.placeholder),
            key=str.lower,
        )
        if self.placeholder is not None:
            ordered.insert(0, self.placeholder)
        return ordered


# ============================================================================
# VALIDATION RESULTS
# ============================================================================

IssueType = Literal[
    "orphan_heading",
    "missing_section",
    "missing_field",
    "invalid_example",
    "example_not_found",
    "invalid_attribute",
]

DomainStatus = Literal["rewritten", "aborted"]


class ValidationIssue(BaseModel):
    """A single documentation problem found during a domain pass."""
    model_config = ConfigDict(frozen=True)

    type: IssueType = Field(description="Kind of documentation problem")
    identifier: str = Field(description="Heading / canonical identifier the issue belongs to")
    field: Optional[str] = Field(None, description="Attribute name, for field level issues")
    snippet: Optional[str] = Field(None, description="Offending text fragment, if any")
    message: str = Field(description="Human readable diagnostic line")


class DomainReport(BaseModel):
    """Outcome of one domain pass."""
    model_config = ConfigDict(validate_assignment=True)

    domain: str
    file: str
    status: DomainStatus = Field(description="\"aborted\" when orphan headings were found, the file is then left untouched")
    issues: List[ValidationIssue] = Field(default_factory=list)
    sections_written: List[str] = Field(default_factory=list, description="Headings in the rewritten document, in order")
    duplicate_headings: List[str] = Field(default_factory=list)
    processing_errors: List[str] = Field(default_factory=list, description="Identifiers whose check raised unexpectedly")

    @property
    def error_count(self) -> int:
        return len(self.issues)


class CheckSummary(BaseModel):
    """Summary of a full run across all domains."""
    timestamp: str = Field(description="ISO timestamp of the run")
    docs_dir: str
    examples_available: bool
    total_errors: int
    domains: List[DomainReport] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.total_errors == 0
