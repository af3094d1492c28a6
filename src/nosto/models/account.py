"""Account metadata contracts used when creating Nosto accounts."""

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, field_validator


@runtime_checkable
class BillingDetailsProvider(Protocol):
    """Anything that can report the billing country of an account."""

    def get_country(self) -> str:
        """The 3-letter ISO 3166-1 alpha-3 country code."""
        ...


class AccountBillingDetails(BaseModel):
    """Billing details sent with an account creation payload."""

    country: str

    @field_validator("country")
    @classmethod
    def _validate_country(cls, value: str) -> str:
        code = value.strip()
        if len(code) != 3 or not code.isascii() or not code.isalpha():
            raise ValueError(
                f"country must be a 3-letter ISO 3166-1 alpha-3 code, got {value!r}"
            )
        return code.upper()

    def get_country(self) -> str:
        return self.country
