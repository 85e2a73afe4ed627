"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from docschema.config import CheckerSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ["DOCSCHEMA_DOCS_DIR", "DOCSCHEMA_EXAMPLES_DIR", "DOCSCHEMA_SCHEMA", "DOCSCHEMA_LOCALE"]:
        monkeypatch.delenv(name, raising=False)
    # No stray .env from the working tree
    monkeypatch.chdir(tmp_path)


def test_defaults():
    settings = CheckerSettings()
    assert settings.docs_dir == Path("../site/docs/api")
    assert settings.examples_dir == Path("./bootstrap-table-examples")
    assert settings.schema_path == Path("./api-schema.json")
    assert settings.locale == "en"


def test_prefixed_environment_variables(monkeypatch):
    monkeypatch.setenv("DOCSCHEMA_DOCS_DIR", "/srv/docs")
    monkeypatch.setenv("DOCSCHEMA_EXAMPLES_DIR", "/srv/examples")
    monkeypatch.setenv("DOCSCHEMA_SCHEMA", "/srv/api-schema.json")
    monkeypatch.setenv("DOCSCHEMA_LOCALE", "de-DE")

    settings = CheckerSettings()

    assert settings.docs_dir == Path("/srv/docs")
    assert settings.examples_dir == Path("/srv/examples")
    assert settings.schema_path == Path("/srv/api-schema.json")
    assert settings.locale == "de-DE"


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("DOCSCHEMA_SCHEMA=catalog.json\nDOCSCHEMA_LOCALE=fr-FR\n")

    settings = CheckerSettings()

    assert settings.schema_path == Path("catalog.json")
    assert settings.locale == "fr-FR"


def test_environment_overrides_dotenv_file(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("DOCSCHEMA_LOCALE=fr-FR\n")
    monkeypatch.setenv("DOCSCHEMA_LOCALE", "es-ES")
    assert CheckerSettings().locale == "es-ES"
