"""
Entry validator.

Checks one canonical identifier's section against the attribute shape of its
domain. Every section is expected to look like:

    ## pagination

    - **Attribute:** `data-pagination`

    - **Type:** `Boolean`

    - **Detail:**

      Set `true` to show a pagination toolbar on table bottom.

    - **Default:** `false`

    - **Example:** [Pagination](https://examples.bootstrap-table.com/#options/table-pagination.html)

Bullets are matched to attribute names by position.
"""

import re
from typing import List, Optional

from docschema.examples import ExampleCorpus
from docschema.markdown import ParsedDocument
from docschema.schemas import DocumentDomain, ValidationIssue

FIELD_DELIMITER = "\n\n- "

EXAMPLE_PATTERN = re.compile(r"\[.*\]\(.*/(.*\.html)\)", re.MULTILINE)
ATTRIBUTE_PATTERN = re.compile(r"\*\*Attribute:\*\*\s`(.*)data-(.*)`", re.MULTILINE)

# The `columns` option is documented as a nested structure without a data attribute
ATTRIBUTE_EXEMPT = {'columns'}


def field_marker(field_name: str) -> str:
    return f"**{field_name}:**"


def split_fields(section: str) -> List[str]:
    """Split a heading block into stripped bullet fragments, title part excluded."""
    return [part.strip() for part in section.split(FIELD_DELIMITER)[1:]]


def validate_entry(
    identifier: str,
    document: ParsedDocument,
    domain: DocumentDomain,
    corpus: Optional[ExampleCorpus] = None,
    issues: Optional[List[ValidationIssue]] = None,
) -> List[ValidationIssue]:
    """
    Validate a single identifier's section.

    Args:
        identifier: Canonical identifier (heading title) to check
        document: Parsed Markdown document of the domain
        domain: Domain configuration (attribute shape, ignore map)
        corpus: Example corpus index, or None to skip example checks
        issues: List to append issues to as they are found; a new list is
            used when omitted

    Returns:
        The issues list, with this identifier's issues appended
    """
    if issues is None:
        issues = []

    section = document.sections.get(identifier)
    if section is None:
        issues.append(ValidationIssue(
            type="missing_section",
            identifier=identifier,
            message=f"[{identifier}] option could not be found",
        ))
        return issues

    fragments = split_fields(section)

    for index, name in enumerate(domain.attributes):
        if domain.is_ignored(identifier, name):
            continue

        details = fragments[index] if index < len(fragments) else ""
        if not details:
            issues.append(_missing_field(identifier, name))
            continue

        if name == 'Example' and corpus is not None:
            match = EXAMPLE_PATTERN.search(details)
            if not match:
                issues.append(ValidationIssue(
                    type="invalid_example",
                    identifier=identifier,
                    field=name,
                    snippet=details,
                    message=f'[{identifier}] missing or incorrectly formatted example "{details}"',
                ))
                continue

            example_file = match.group(1)
            if example_file not in corpus:
                issues.append(ValidationIssue(
                    type="example_not_found",
                    identifier=identifier,
                    field=name,
                    snippet=example_file,
                    message=f"[{identifier}] example '{example_file}' could not be found",
                ))

        elif name == 'Attribute' and identifier not in ATTRIBUTE_EXEMPT:
            if not ATTRIBUTE_PATTERN.search(details):
                issues.append(ValidationIssue(
                    type="invalid_attribute",
                    identifier=identifier,
                    field=name,
                    snippet=details,
                    message=f'[{identifier}] missing or incorrectly formatted attribute "{details}"',
                ))
                continue

        if field_marker(name) not in details:
            issues.append(_missing_field(identifier, name))

    return issues


def _missing_field(identifier: str, name: str) -> ValidationIssue:
    return ValidationIssue(
        type="missing_field",
        identifier=identifier,
        field=name,
        message=f"[{identifier}] missing '{name}'",
    )
