import pytest

from archive_folder.conf.identifier import IdentifierConfig


def test_config_defaults(monkeypatch):
    monkeypatch.delenv("OAI_IDENTIFIER_FORMAT", raising=False)
    monkeypatch.delenv("REPOSITORY_IDENTIFIER", raising=False)
    monkeypatch.delenv("REPOSITORY_URI", raising=False)

    config = IdentifierConfig()
    assert config.OAI_IDENTIFIER_FORMAT == "short_name"
    assert config.REPOSITORY_IDENTIFIER == ""
    assert config.REPOSITORY_URI == ""


def test_config_override(monkeypatch):
    monkeypatch.setenv("OAI_IDENTIFIER_FORMAT", "position_folder")
    monkeypatch.setenv("REPOSITORY_IDENTIFIER", "repo")
    monkeypatch.setenv("REPOSITORY_URI", "http://example.org/foo")

    config = IdentifierConfig()

    assert config.OAI_IDENTIFIER_FORMAT == "position_folder"
    assert config.REPOSITORY_IDENTIFIER == "repo"
    assert config.REPOSITORY_URI == "http://example.org/foo"


def test_config_invalid_value(monkeypatch):
    monkeypatch.setenv("OAI_IDENTIFIER_FORMAT", "ark")

    with pytest.raises(ValueError):
        IdentifierConfig()
