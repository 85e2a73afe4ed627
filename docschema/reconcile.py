"""
Reconciliation driver.

Runs one pass per document domain:
1. Parse the Markdown document
2. Abort the domain if it documents headings the schema does not know
3. Validate every canonical identifier in canonical order
4. Report the domain's issues
5. Rewrite the document with only recognized sections, in canonical order

Domains are processed sequentially; errors are tallied across the whole run.
"""

import logging
from pathlib import Path
from datetime import datetime
from typing import List, Optional

from docschema.examples import ExampleCorpus
from docschema.markdown import parse_sections
from docschema.report import Reporter
from docschema.schemas import CheckSummary, DocumentDomain, DomainReport, ValidationIssue
from docschema.validator import validate_entry

logger = logging.getLogger(__name__)


def check_domain(
    domain: DocumentDomain,
    docs_dir: Path,
    corpus: Optional[ExampleCorpus],
    reporter: Reporter,
) -> DomainReport:
    """
    Check and normalize one domain document.

    Args:
        domain: Domain configuration
        docs_dir: Directory holding the API reference Markdown files
        corpus: Example corpus index, or None if unavailable
        reporter: Output sink for diagnostics

    Returns:
        DomainReport with status "aborted" (orphan headings, file untouched)
        or "rewritten"

    Raises:
        FileNotFoundError: If the domain's Markdown file does not exist
    """
    path = Path(docs_dir) / domain.file
    content = path.read_text(encoding='utf-8')
    document = parse_sections(content)

    reporter.domain_header(path)
    report = DomainReport(domain=domain.name, file=str(path), status="rewritten")

    if document.duplicates:
        report.duplicate_headings = list(document.duplicates)
        reporter.duplicate_headings(document.duplicates)

    order = domain.canonical_order()
    known = set(order)
    orphans = [title for title in document.titles() if title not in known]
    if orphans:
        report.status = "aborted"
        report.issues = [
            ValidationIssue(
                type="orphan_heading",
                identifier=title,
                message=f'No default option was found for "{title}". Should the documentation be removed!',
            )
            for title in orphans
        ]
        reporter.orphans(orphans)
        logger.info(f"{domain.file}: {len(orphans)} orphan heading(s), skipping rewrite")
        return report

    issues: List[ValidationIssue] = []
    written: List[str] = []

    for identifier in order:
        try:
            if identifier in document.sections:
                written.append(identifier)
            validate_entry(identifier, document, domain, corpus, issues)
        except Exception as e:
            logger.exception(f"{domain.file}: error processing '{identifier}'")
            report.processing_errors.append(identifier)
            reporter.processing_error(identifier, e)

    report.issues = issues
    report.sections_written = written
    reporter.issues(issues)

    path.write_text(document.render(written), encoding='utf-8')
    logger.debug(f"Rewrote {path} with {len(written)} section(s)")

    return report


class DocumentationChecker:
    """Runs every domain check in order and keeps the process-wide error tally."""

    def __init__(
        self,
        docs_dir: Path,
        domains: List[DocumentDomain],
        corpus: Optional[ExampleCorpus],
        reporter: Reporter,
    ):
        """
        Initialize the checker.

        Args:
            docs_dir: Directory holding the API reference Markdown files
            domains: Domains to check, in checking order
            corpus: Example corpus index, or None to skip example checks
            reporter: Output sink for diagnostics
        """
        self.docs_dir = Path(docs_dir)
        self.domains = domains
        self.corpus = corpus
        self.reporter = reporter
        self.error_count = 0

    def run(self) -> CheckSummary:
        """
        Check all domains.

        Returns:
            CheckSummary with one DomainReport per domain
        """
        if self.corpus is None:
            self.reporter.examples_unavailable()

        reports = []
        for domain in self.domains:
            report = check_domain(domain, self.docs_dir, self.corpus, self.reporter)
            self.error_count += report.error_count
            reports.append(report)

        return CheckSummary(
            timestamp=datetime.now().isoformat(),
            docs_dir=str(self.docs_dir),
            examples_available=self.corpus is not None,
            total_errors=self.error_count,
            domains=reports,
        )
