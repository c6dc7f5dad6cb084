"""validators.py

Predicates and conversion helpers shared by the account type:

  - ``is_email_valid``: syntactic check of an account identifier.
  - ``is_amount_valid``: strictly positive, finite, at most two decimal places.
  - ``to_decimal``: the single conversion path from caller input to Decimal.

Floats are converted through their shortest ``repr`` so that a value which
prints as ``50.55`` is treated as ``Decimal('50.55')`` and not as the binary
approximation behind it.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

MAX_EMAIL_LENGTH = 254
MAX_LOCAL_PART_LENGTH = 64
MAX_DECIMAL_PLACES = 2

_ATOM = r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+"
_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"

EMAIL_PATTERN = re.compile(
    rf"(?=.{{1,{MAX_EMAIL_LENGTH}}}\Z)"
    rf"(?=.{{1,{MAX_LOCAL_PART_LENGTH}}}@)"
    rf"{_ATOM}(?:\.{_ATOM})*"
    r"@"
    rf"(?:{_LABEL}\.)+[A-Za-z]{{2,63}}\Z"
)


class AccountError(Exception):
    """Base class for account-related errors."""


class InvalidArgumentError(AccountError, ValueError):
    """Raised for a malformed identifier, amount or destination account."""


class InsufficientFundsError(AccountError):
    """Raised when a withdrawal or transfer would overdraw the account."""


def to_decimal(value) -> Decimal:
    """Convert an input amount to an exact Decimal.

    Accepts Decimal, int, float, or str. Raises InvalidArgumentError for
    booleans, other types and unparsable strings. Non-finite values are
    returned as-is; callers decide whether they are acceptable.
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Invalid monetary amount: {value!r}")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation as exc:
            raise InvalidArgumentError(f"Invalid monetary amount: {value!r}") from exc
    raise InvalidArgumentError(f"Invalid monetary amount: {value!r}")


def decimal_places(value: Decimal) -> int:
    """Return the number of fractional digits once trailing zeros are removed.

    Works on the digit tuple rather than ``normalize()`` so very long values
    are never rounded by the active context.
    """
    _, digits, exponent = value.as_tuple()
    digits = list(digits)
    while exponent < 0 and len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    if exponent < 0 and digits == [0]:
        return 0
    return max(0, -exponent)


def is_email_valid(email) -> bool:
    """Return True if ``email`` is a syntactically valid address.

    No DNS or network lookups are made.
    """
    if not isinstance(email, str) or not email.strip():
        return False
    return EMAIL_PATTERN.match(email) is not None


def is_amount_valid(amount) -> bool:
    """Return True if ``amount`` is positive, finite and has at most 2 decimals."""
    try:
        dec = to_decimal(amount)
    except InvalidArgumentError:
        return False
    if not dec.is_finite() or dec <= 0:
        return False
    return decimal_places(dec) <= MAX_DECIMAL_PLACES


__all__ = [
    'AccountError',
    'InvalidArgumentError',
    'InsufficientFundsError',
    'EMAIL_PATTERN',
    'MAX_EMAIL_LENGTH',
    'MAX_LOCAL_PART_LENGTH',
    'MAX_DECIMAL_PLACES',
    'to_decimal',
    'decimal_places',
    'is_email_valid',
    'is_amount_valid',
]
