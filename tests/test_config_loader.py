"""Tests for config loading and display settings."""

import pytest

from orderdesk.config.loader import (
    DisplaySettings,
    get_display_settings,
    load_config,
    load_config_or_defaults,
)


def _write(tmp_path, text):
    path = tmp_path / "orderdesk.config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_without_config():
    """Test built-in settings."""
    settings = get_display_settings({})
    assert settings == DisplaySettings()
    assert settings.locale == "en-US"
    assert settings.page_size == 5
    assert settings.page_size_options == [5, 10, 25, 50]


def test_load_config_from_yaml(tmp_path):
    """Test a config file with a built-in locale."""
    path = _write(
        tmp_path,
        "version: 1\nlocale: de-DE\npage_size: 10\npage_size_options: [10, 20]\n",
    )
    settings = get_display_settings(load_config(path))
    assert settings.locale == "de-DE"
    assert settings.thousands_separator == "."
    assert settings.decimal_separator == ","
    assert settings.page_size == 10
    assert settings.page_size_options == [10, 20]


def test_user_defined_locale(tmp_path):
    """Test locales added in the config file."""
    path = _write(
        tmp_path,
        "version: 1\n"
        "locale: sv-SE\n"
        "locales:\n"
        "  sv-SE:\n"
        "    thousands_separator: ' '\n"
        "    decimal_separator: ','\n",
    )
    settings = get_display_settings(load_config(path))
    assert settings.thousands_separator == " "
    assert settings.decimal_separator == ","


def test_page_size_defaults_to_first_option():
    """Test that the default page size follows custom options."""
    settings = get_display_settings({"version": 1, "page_size_options": [20, 40]})
    assert settings.page_size == 20


def test_missing_file_raises(tmp_path):
    """Test that an explicit missing path is an error."""
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")
    with pytest.raises(FileNotFoundError):
        load_config_or_defaults(tmp_path / "nope.yaml")


def test_missing_default_file_gives_defaults(tmp_path, monkeypatch):
    """Test that no default file means built-in defaults."""
    monkeypatch.chdir(tmp_path)
    assert load_config_or_defaults() == {}


def test_default_file_is_picked_up(tmp_path, monkeypatch):
    """Test loading ./orderdesk.config.yaml when present."""
    _write(tmp_path, "version: 1\nlocale: fr-FR\n")
    monkeypatch.chdir(tmp_path)
    assert load_config_or_defaults()["locale"] == "fr-FR"


@pytest.mark.parametrize(
    "text,message",
    [
        ("- a\n- b\n", "must be a dictionary"),
        ("locale: en-US\n", "version"),
        ("version: 1\nlocales: [a]\n", "locales"),
        ("version: 1\npage_size_options: 5\n", "page_size_options"),
    ],
)
def test_invalid_structure(tmp_path, text, message):
    """Test structural validation of the config file."""
    with pytest.raises(ValueError, match=message):
        load_config(_write(tmp_path, text))


def test_unknown_locale():
    """Test that locale tags must be known."""
    with pytest.raises(ValueError, match="Unknown locale 'xx-XX'"):
        get_display_settings({"version": 1, "locale": "xx-XX"})


def test_page_size_must_be_an_option():
    """Test the page size selector consistency."""
    with pytest.raises(ValueError, match="is not one of"):
        get_display_settings({"version": 1, "page_size": 7})


def test_page_size_options_must_be_positive():
    """Test rejection of zero-sized pages."""
    with pytest.raises(ValueError):
        get_display_settings({"version": 1, "page_size": 5, "page_size_options": [0, 5]})
