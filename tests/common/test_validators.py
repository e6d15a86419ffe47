from carwash_ops.common.validators import (
    data_uri_size,
    require_choice,
    require_email,
    require_int_between,
    require_image_data_uri,
    require_positive,
)
from carwash_ops.core.enums import SizeUnit


def test_email_pattern():
    errors = {}
    assert require_email(errors, "a@b.co") is True
    assert require_email(errors, "a@b") is False
    assert errors == {"email": "Email is invalid"}


def test_positive_rejects_zero_and_text():
    errors = {}
    assert require_positive(errors, "2.5", "length", "bad") is True
    assert require_positive(errors, 0, "length", "bad") is False
    assert require_positive(errors, "abc", "width", "bad") is False
    assert set(errors) == {"length", "width"}


def test_int_between_is_inclusive():
    errors = {}
    assert require_int_between(errors, 1900, "year", 1900, 2027, "bad") is True
    assert require_int_between(errors, 2027, "year", 1900, 2027, "bad") is True
    assert require_int_between(errors, 1899, "year", 1900, 2027, "bad") is False


def test_choice_accepts_values_and_members():
    errors = {}
    assert require_choice(errors, "meters", "unit", SizeUnit) is True
    assert require_choice(errors, SizeUnit.FEET, "unit", SizeUnit) is True
    assert require_choice(errors, "yards", "unit", SizeUnit) is False
    assert "feet" in errors["unit"]


def test_data_uri_size_decodes_base64():
    assert data_uri_size("data:image/png;base64,AAAA") == 3
    assert data_uri_size("data:text/plain,hello") == 5
    assert data_uri_size("not a uri") is None


def test_positive_rejects_non_finite_numbers():
    errors = {}
    assert require_positive(errors, "nan", "length", "bad") is False
    assert require_positive(errors, float("inf"), "width", "bad") is False
    assert set(errors) == {"length", "width"}


def test_id_image_must_be_an_image_type():
    errors = {}
    assert require_image_data_uri(errors, "data:image/jpeg;base64,AAAA", "nationalIdImage", 1024) is True
    assert require_image_data_uri(errors, "data:text/plain;base64,AAAA", "nationalIdImage", 1024) is False
    assert require_image_data_uri(errors, "data:;base64,AAAA", "nationalIdImage", 1024) is False
    assert errors == {"nationalIdImage": "Please select a valid image file"}
