"""Settings for docschema using Pydantic Settings.

Paths default to the layout of the documentation site checkout and can be
overridden through DOCSCHEMA_* environment variables, a .env file, or CLI
options.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from docschema.catalog import DEFAULT_LOCALE


class CheckerSettings(BaseSettings):
    """Input locations for a documentation check."""

    model_config = SettingsConfigDict(
        env_prefix="DOCSCHEMA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    docs_dir: Path = Field(
        default=Path("../site/docs/api"),
        description="Directory holding the API reference Markdown files",
    )
    examples_dir: Path = Field(
        default=Path("./bootstrap-table-examples"),
        description="Example corpus checkout (optional)",
    )
    schema_path: Path = Field(
        default=Path("./api-schema.json"),
        validation_alias="DOCSCHEMA_SCHEMA",
        description="Schema catalog JSON file",
    )
    locale: str = Field(
        default=DEFAULT_LOCALE,
        description="Locale whose keys define the localization headings",
    )
