"""Tests for locale-tailored text collation."""

from orderdesk.query.collation import collation_key


def _sorted(names, locale="en-US"):
    return sorted(names, key=lambda name: collation_key(name, locale))


def test_accents_and_case_ignored_at_primary_level():
    """Test that 'É' sorts with 'E' and case does not split groups."""
    assert _sorted(["eve", "Zoe", "Émile", "adam"]) == ["adam", "Émile", "eve", "Zoe"]


def test_plain_letter_before_accented_on_tie():
    """Test the secondary level."""
    assert _sorted(["é", "e"]) == ["e", "é"]


def test_scandinavian_alphabets():
    """Test letters that sort after 'z' in Swedish and Danish."""
    swedish = ["Ödön", "Åse", "Zeta", "Ärla", "Anna"]
    assert _sorted(swedish, "sv-SE") == ["Anna", "Zeta", "Åse", "Ärla", "Ödön"]
    danish = ["Åse", "Ødegaard", "Zeta", "Ærø", "Olsen", "Anna"]
    assert _sorted(danish, "da-DK") == ["Anna", "Olsen", "Zeta", "Ærø", "Ødegaard", "Åse"]


def test_unknown_locale_uses_default_collation():
    """Test that untailored languages fold every accent."""
    assert _sorted(["Åse", "Anna", "Zeta"], "xx-XX") == ["Anna", "Åse", "Zeta"]
