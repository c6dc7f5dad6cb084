from bank_account.accounts import Account, MONEY_CONTEXT
from bank_account.schema import AccountSnapshot
from bank_account.validators import (
    AccountError,
    InsufficientFundsError,
    InvalidArgumentError,
    is_amount_valid,
    is_email_valid,
    to_decimal,
)

__all__ = [
    'Account',
    'AccountSnapshot',
    'AccountError',
    'InvalidArgumentError',
    'InsufficientFundsError',
    'MONEY_CONTEXT',
    'is_amount_valid',
    'is_email_valid',
    'to_decimal',
]
