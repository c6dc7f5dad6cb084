"""accounts.py

Provides the Account class: an email-identified owner with an exact decimal
balance. Supports depositing, withdrawing and transferring between accounts
while enforcing the account invariants (non-negative balance, positive
amounts with at most two decimal places, and insufficient funds checks).

All balance arithmetic runs in MONEY_CONTEXT, which traps inexact results, so
a balance is never rounded.
"""

from __future__ import annotations

from decimal import Context, Decimal, Inexact, InvalidOperation
from typing import Any, Dict, Mapping

from pydantic import ValidationError

from bank_account.logs import get_logger
from bank_account.schema import AccountSnapshot
from bank_account.validators import (
    AccountError,
    InsufficientFundsError,
    InvalidArgumentError,
    is_amount_valid,
    is_email_valid,
    to_decimal,
)

MONEY_CONTEXT = Context(prec=64, traps=[InvalidOperation, Inexact])

_CENT = Decimal('0.01')

log = get_logger(__name__)


def _fits(value: Decimal) -> Decimal:
    """Return ``value`` if it can be held to the cent within MONEY_CONTEXT."""
    try:
        value.quantize(_CENT, context=MONEY_CONTEXT)
    except InvalidOperation as exc:
        raise InvalidArgumentError(f"Balance exceeds supported precision: {value}") from exc
    return value


def _exact(operation, a: Decimal, b: Decimal) -> Decimal:
    try:
        result = operation(a, b)
    except (Inexact, InvalidOperation) as exc:
        raise InvalidArgumentError(
            f"Result exceeds supported precision: {a} and {b}"
        ) from exc
    return _fits(result)


class Account:
    """A monetary account owned by an email address.

    Attributes:
        email: Owner's email address, validated at construction and read-only.
        balance: Current balance as Decimal (always >= 0).
    """

    def __init__(self, email: str, starting_balance: object = 0) -> None:
        if not is_email_valid(email):
            raise InvalidArgumentError(f"Invalid email address: {email!r}")

        balance = to_decimal(starting_balance)
        if not is_amount_valid(balance):
            # zero is the only starting balance exempt from the amount rule
            if not (balance.is_finite() and balance == 0):
                raise InvalidArgumentError(f"Invalid starting balance: {starting_balance!r}")
            balance = Decimal('0')

        self._email = email
        self._balance = _fits(balance)
        log.debug("account_created", email=email, balance=str(balance))

    @property
    def email(self) -> str:
        return self._email

    @property
    def identifier(self) -> str:
        """Alias of ``email``."""
        return self._email

    @property
    def balance(self) -> Decimal:
        return self._balance

    def get_balance(self) -> Decimal:
        """Return the current balance as Decimal."""
        return self._balance

    def deposit(self, amount: object) -> Decimal:
        """Deposit a positive amount into the account.

        Returns the new balance.
        """
        dec_amount = self._validated_amount(amount, "deposit")
        self._balance = _exact(MONEY_CONTEXT.add, self._balance, dec_amount)
        log.debug("deposit", email=self._email, amount=str(dec_amount), balance=str(self._balance))
        return self._balance

    def withdraw(self, amount: object) -> Decimal:
        """Withdraw a positive amount from the account.

        Raises InsufficientFundsError if the requested amount exceeds the
        available balance. Returns the new balance.
        """
        dec_amount = self._validated_amount(amount, "withdrawal")
        if self._balance < dec_amount:
            raise InsufficientFundsError(
                f"Insufficient funds: requested {dec_amount}, available {self._balance}"
            )
        self._balance = _exact(MONEY_CONTEXT.subtract, self._balance, dec_amount)
        log.debug("withdrawal", email=self._email, amount=str(dec_amount), balance=str(self._balance))
        return self._balance

    def transfer(self, amount: object, destination: Account) -> Decimal:
        """Move ``amount`` from this account into ``destination``.

        Either both balances change or neither does. Returns this account's
        new balance.
        """
        dec_amount = self._validated_amount(amount, "transfer")
        if destination is None:
            raise InvalidArgumentError("Destination account cannot be None")
        if not isinstance(destination, Account):
            raise InvalidArgumentError(f"Destination is not an account: {destination!r}")

        # check the deposit leg first so neither account changes if it would fail
        if destination is not self:
            _exact(MONEY_CONTEXT.add, destination._balance, dec_amount)
        self.withdraw(dec_amount)
        destination.deposit(dec_amount)
        log.debug(
            "transfer",
            email=self._email,
            destination=destination.email,
            amount=str(dec_amount),
            balance=str(self._balance),
        )
        return self._balance

    def snapshot(self) -> AccountSnapshot:
        """Return an immutable description of the account's current state."""
        return AccountSnapshot(email=self._email, balance=self._balance.quantize(_CENT, context=MONEY_CONTEXT))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the account to a dict with the balance as a decimal string."""
        return self.snapshot().model_dump(mode='json')

    @classmethod
    def from_snapshot(cls, snapshot: AccountSnapshot) -> Account:
        return cls(snapshot.email, snapshot.balance)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Account:
        """Build an account from a mapping shaped like ``to_dict()`` output."""
        try:
            snapshot = AccountSnapshot.model_validate(data)
        except ValidationError as exc:
            raise InvalidArgumentError(f"Invalid account data: {data!r}") from exc
        return cls.from_snapshot(snapshot)

    def _validated_amount(self, amount: object, operation: str) -> Decimal:
        if not is_amount_valid(amount):
            raise InvalidArgumentError(f"Invalid {operation} amount: {amount!r}")
        return to_decimal(amount)

    def __repr__(self) -> str:
        return f"Account(email={self._email!r}, balance={str(self._balance)!r})"


__all__ = [
    'Account',
    'AccountError',
    'InvalidArgumentError',
    'InsufficientFundsError',
    'MONEY_CONTEXT',
]
