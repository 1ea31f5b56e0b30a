"""
Field-level validation for users and cart lines.

Validation never touches the database and never mutates its input: it
returns a :class:`ValidationResult` that the caller inspects before any
write.  Uniqueness is the one rule that needs the database, so it is
checked by :mod:`app.services.users` at the persistence boundary.
"""

from __future__ import annotations

import enum
import re

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field

from app.core.config import settings

_ACCOUNT_RE = re.compile(r"[A-Za-z0-9]+")

# Upper bound of the INTEGER columns backing cart lines
MAX_INT = 2**31 - 1


class FieldErrorKind(str, enum.Enum):
    required = "required"
    length_invalid = "length_invalid"
    format_invalid = "format_invalid"
    not_unique = "not_unique"
    out_of_range = "out_of_range"


class FieldError(BaseModel):
    field: str
    kind: FieldErrorKind
    message: str


class ValidationResult(BaseModel):
    errors: list[FieldError] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def error_fields(self) -> set[str]:
        return {e.field for e in self.errors}


# ── Messages ────────────────────────────────────────────────────────
MESSAGES: dict[tuple[str, FieldErrorKind], str] = {
    ("account", FieldErrorKind.required): "Account is required",
    ("account", FieldErrorKind.length_invalid): "Account length is invalid",
    ("account", FieldErrorKind.format_invalid): "Account format is invalid",
    ("account", FieldErrorKind.not_unique): "Account already registered",
    ("password", FieldErrorKind.required): "Password is required",
    ("password", FieldErrorKind.length_invalid): "Password length is invalid",
    ("email", FieldErrorKind.required): "Email is required",
    ("email", FieldErrorKind.format_invalid): "Email format is invalid",
    ("email", FieldErrorKind.not_unique): "Email already registered",
    ("product_id", FieldErrorKind.required): "Cart product is required",
    ("product_id", FieldErrorKind.out_of_range): "Cart product is invalid",
    ("quantity", FieldErrorKind.required): "Cart quantity is required",
    ("quantity", FieldErrorKind.out_of_range): "Cart quantity is invalid",
}


def field_error(field: str, kind: FieldErrorKind) -> FieldError:
    return FieldError(field=field, kind=kind, message=MESSAGES[(field, kind)])


def _fail(result: ValidationResult, field: str, kind: FieldErrorKind) -> None:
    result.errors.append(field_error(field, kind))


# ── Single fields ───────────────────────────────────────────────────
def _check_account(result: ValidationResult, account: str | None) -> None:
    if not account:
        _fail(result, "account", FieldErrorKind.required)
        return
    if not settings.ACCOUNT_MIN_LENGTH <= len(account) <= settings.ACCOUNT_MAX_LENGTH:
        _fail(result, "account", FieldErrorKind.length_invalid)
    if not _ACCOUNT_RE.fullmatch(account):
        _fail(result, "account", FieldErrorKind.format_invalid)


def _check_password(
    result: ValidationResult, password: str | None, *, check_length: bool
) -> None:
    if not password:
        _fail(result, "password", FieldErrorKind.required)
        return
    if check_length and not (
        settings.PASSWORD_MIN_LENGTH <= len(password) <= settings.PASSWORD_MAX_LENGTH
    ):
        _fail(result, "password", FieldErrorKind.length_invalid)


def _check_email(result: ValidationResult, email: str | None) -> None:
    if not email:
        _fail(result, "email", FieldErrorKind.required)
        return
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        _fail(result, "email", FieldErrorKind.format_invalid)


# ── Records ─────────────────────────────────────────────────────────
def validate_user(
    *,
    account: str | None,
    password: str | None,
    email: str | None,
    password_modified: bool = True,
) -> ValidationResult:
    """Check a user's fields.

    The plaintext length rule only applies when *password_modified* is
    true; an untouched password is already a hash and is only checked for
    presence.
    """
    result = ValidationResult()
    _check_account(result, account)
    _check_password(result, password, check_length=password_modified)
    _check_email(result, email)
    return result


def validate_cart_item(*, product_id: int | None, quantity: int | None) -> ValidationResult:
    result = ValidationResult()
    if product_id is None:
        _fail(result, "product_id", FieldErrorKind.required)
    elif not 1 <= product_id <= MAX_INT:
        _fail(result, "product_id", FieldErrorKind.out_of_range)
    if quantity is None:
        _fail(result, "quantity", FieldErrorKind.required)
    elif not 1 <= quantity <= MAX_INT:
        _fail(result, "quantity", FieldErrorKind.out_of_range)
    return result
