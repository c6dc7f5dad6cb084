from decimal import Decimal

from pydantic import BaseModel, ConfigDict, condecimal, constr, field_validator

from bank_account.validators import MAX_EMAIL_LENGTH, is_email_valid


class AccountSnapshot(BaseModel):
    """Point-in-time description of an account's state."""

    model_config = ConfigDict(frozen=True)

    email: constr(min_length=1, max_length=MAX_EMAIL_LENGTH)
    balance: condecimal(ge=0, decimal_places=2, allow_inf_nan=False) = Decimal('0')

    @field_validator('email')
    @classmethod
    def check_email(cls, v: str) -> str:
        if not is_email_valid(v):
            raise ValueError(f"invalid email address: {v!r}")
        return v
