"""Tests for field validation (no database)."""

import pytest

from app.services.validation import (FieldErrorKind, validate_cart_item,
                                     validate_user)


def _kinds(result, field):
    return {e.kind for e in result.errors if e.field == field}


def test_valid_user_passes():
    result = validate_user(account="alice01", password="secret", email="alice@example.com")
    assert result.ok
    assert result.errors == []


def test_missing_fields_are_required():
    result = validate_user(account=None, password="", email=None)
    assert not result.ok
    assert result.error_fields() == {"account", "password", "email"}
    for field in ("account", "password", "email"):
        assert _kinds(result, field) == {FieldErrorKind.required}


@pytest.mark.parametrize(
    "account, kinds",
    [
        ("abc", {FieldErrorKind.length_invalid}),
        ("a" * 21, {FieldErrorKind.length_invalid}),
        ("abcd", set()),
        ("a" * 20, set()),
        ("ab_cd", {FieldErrorKind.format_invalid}),
        ("ab cd", {FieldErrorKind.format_invalid}),
        ("用戶帳號名", {FieldErrorKind.format_invalid}),
        ("a-b", {FieldErrorKind.length_invalid, FieldErrorKind.format_invalid}),
        ("abcd\n", {FieldErrorKind.format_invalid}),
        ("\nabcd", {FieldErrorKind.format_invalid}),
    ],
)
def test_account_rules(account, kinds):
    result = validate_user(account=account, password="secret", email="a@example.com")
    assert _kinds(result, "account") == kinds


@pytest.mark.parametrize(
    "length, valid",
    [(1, False), (3, False), (4, True), (12, True), (20, True), (21, False), (72, False)],
)
def test_password_length_bounds(length, valid):
    result = validate_user(account="alice01", password="p" * length, email="a@example.com")
    assert result.ok is valid
    if not valid:
        assert result.errors[0].field == "password"
        assert result.errors[0].kind == FieldErrorKind.length_invalid
        assert result.errors[0].message == "Password length is invalid"


def test_unmodified_password_skips_length_rule():
    """A stored bcrypt hash is 60 chars and must not trip the plaintext rule."""
    stored = "$2b$10$" + "x" * 53
    result = validate_user(
        account="alice01", password=stored, email="a@example.com", password_modified=False
    )
    assert result.ok


@pytest.mark.parametrize("email", ["not-an-email", "a@", "@example.com", "a b@example.com"])
def test_bad_email_format(email):
    result = validate_user(account="alice01", password="secret", email=email)
    assert _kinds(result, "email") == {FieldErrorKind.format_invalid}


def test_cart_item_rules():
    assert validate_cart_item(product_id=1, quantity=1).ok

    result = validate_cart_item(product_id=None, quantity=None)
    assert result.error_fields() == {"product_id", "quantity"}
    assert all(e.kind == FieldErrorKind.required for e in result.errors)

    for quantity in (0, -3):
        result = validate_cart_item(product_id=1, quantity=quantity)
        assert _kinds(result, "quantity") == {FieldErrorKind.out_of_range}


@pytest.mark.parametrize(
    "product_id, quantity, field",
    [
        (0, 1, "product_id"),
        (2**31, 1, "product_id"),
        (1, 2**31, "quantity"),
        (1, 10**20, "quantity"),
    ],
)
def test_cart_item_bounds(product_id, quantity, field):
    result = validate_cart_item(product_id=product_id, quantity=quantity)
    assert _kinds(result, field) == {FieldErrorKind.out_of_range}
    assert validate_cart_item(product_id=2**31 - 1, quantity=2**31 - 1).ok
