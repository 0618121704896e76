"""Unit tests for route boundary validators."""

import pytest

from aksara.api.routers.router_utils.validators import (
    filter_ids,
    parse_limit,
    require_text,
    resolve_author,
    validate_id,
    validate_message_fields,
    validate_thought_text,
)
from aksara.core.exceptions import ValidationError


class TestThoughtText:
    def test_trims_text(self):
        assert validate_thought_text("  halo  ") == "halo"

    @pytest.mark.parametrize("text", [None, "", "  \n", 12])
    def test_blank_or_missing(self, text):
        with pytest.raises(ValidationError) as exc_info:
            validate_thought_text(text)
        assert exc_info.value.message == "Kata-kata tidak boleh kosong."

    def test_too_long(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_thought_text("a" * 501)
        assert exc_info.value.message == "Kata-kata terlalu panjang (maksimal 500 karakter)."

    def test_length_counts_untrimmed_text(self):
        with pytest.raises(ValidationError):
            validate_thought_text(" " + "a" * 500)

    def test_length_counts_utf16_units(self):
        with pytest.raises(ValidationError):
            validate_thought_text("\U0001F600" * 251)

    def test_astral_text_within_limit(self):
        assert validate_thought_text("\U0001F600" * 250) == "\U0001F600" * 250


@pytest.mark.parametrize(
    ("author", "expected"),
    [("Budi", "Budi"), ("  Budi ", "Budi"), ("", "anonymous"), ("  ", "anonymous"), (None, "anonymous"), (3, "anonymous")],
)
def test_resolve_author(author, expected):
    assert resolve_author(author) == expected


def test_validate_id_rejects_blank():
    with pytest.raises(ValidationError) as exc_info:
        validate_id("  ")
    assert exc_info.value.message == "ID tidak valid."


def test_require_text_names_field():
    with pytest.raises(ValidationError) as exc_info:
        require_text(None, "title")
    assert exc_info.value.message == "title required"


def test_message_fields():
    assert validate_message_fields("u1", " yo ") == ("u1", "yo")
    with pytest.raises(ValidationError):
        validate_message_fields(None, "yo")


def test_filter_ids_keeps_strings():
    assert filter_ids(["a", 1, "b", None]) == ["a", "b"]
    with pytest.raises(ValidationError):
        filter_ids(None)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, None),
        ("", None),
        ("10", 10),
        ("3.7", 3),
        ("0", 1),
        ("-5", 1),
        ("abc", 1),
        ("inf", 1),
        ("nan", 1),
        ("1000", 1000),
        ("1e30", 1000),
        ("99999999999999999999", 1000),
    ],
)
def test_parse_limit(raw, expected):
    assert parse_limit(raw) == expected
