"""
Schema source for docschema.

Loads the canonical identifier catalog (a JSON export of the documented
library's constants module) and turns it into the five document domains that
get checked, in the order they are checked.
"""

import json
import logging
import re
from pathlib import Path
from typing import List

from pydantic import ValidationError

from docschema.schemas import SchemaCatalog, DocumentDomain

logger = logging.getLogger(__name__)

# Table options that are callbacks/formatters are documented as events instead
CALLBACK_OPTION_PATTERN = re.compile(r"^(on|format)[A-Z]")

TABLE_OPTIONS_PLACEHOLDER = "-"

DEFAULT_LOCALE = "en"


class CatalogError(ValueError):
    """Raised when the schema catalog cannot be read or is malformed."""


def load_catalog(path: Path) -> SchemaCatalog:
    """
    Load and validate a schema catalog file.

    Args:
        path: Path to the JSON catalog (keys DEFAULTS, COLUMN_DEFAULTS,
            METHODS, EVENTS, LOCALES)

    Returns:
        Parsed SchemaCatalog

    Raises:
        CatalogError: If the file is missing, not JSON, or has the wrong shape
    """
    path = Path(path)
    if not path.exists():
        raise CatalogError(f"Schema catalog not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogError(f"Schema catalog is not valid JSON: {path}: {e}") from e

    try:
        catalog = SchemaCatalog.model_validate(data)
    except ValidationError as e:
        raise CatalogError(f"Schema catalog has an unexpected shape: {path}\n{e}") from e

    logger.debug(
        f"Loaded catalog {path}: {len(catalog.defaults)} options, "
        f"{len(catalog.column_defaults)} column options, {len(catalog.methods)} methods, "
        f"{len(catalog.events)} events, {len(catalog.locales)} locales"
    )
    return catalog


def build_domains(catalog: SchemaCatalog, locale: str = DEFAULT_LOCALE) -> List[DocumentDomain]:
    """
    Build the document domains in checking order.

    Args:
        catalog: Loaded schema catalog
        locale: Locale whose keys define the localization headings

    Returns:
        Domains for table options, column options, methods, events, localizations

    Raises:
        CatalogError: If the requested locale is not in the catalog
    """
    if locale not in catalog.locales:
        raise CatalogError(f"Locale '{locale}' not found in schema catalog")

    table_options = [it for it in catalog.defaults if not CALLBACK_OPTION_PATTERN.match(it)]

    return [
        DocumentDomain(
            name="table options",
            file="table-options.md",
            identifiers=[TABLE_OPTIONS_PLACEHOLDER] + table_options,
            attributes=['Attribute', 'Type', 'Detail', 'Default', 'Example'],
            placeholder=TABLE_OPTIONS_PLACEHOLDER,
            ignore={
                'totalRows': ['Example'],
                'totalNotFiltered': ['Example'],
                'virtualScrollItemHeight': ['Example'],
            },
        ),
        DocumentDomain(
            name="column options",
            file="column-options.md",
            identifiers=list(catalog.column_defaults),
            attributes=['Attribute', 'Type', 'Detail', 'Default', 'Example'],
        ),
        DocumentDomain(
            name="methods",
            file="methods.md",
            identifiers=list(catalog.methods),
            attributes=['Parameter', 'Detail', 'Example'],
        ),
        DocumentDomain(
            name="events",
            file="events.md",
            identifiers=list(catalog.events.values()),
            attributes=['jQuery Event', 'Parameter', 'Detail'],
        ),
        DocumentDomain(
            name="localizations",
            file="localizations.md",
            identifiers=list(catalog.locales[locale]),
            attributes=['Parameter', 'Default'],
        ),
    ]
