"""Transaction model."""

from collections.abc import Mapping
from datetime import date as date_type, datetime
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

TransactionType = Literal["debit", "credit"]
TRANSACTION_TYPES: tuple[str, ...] = ("debit", "credit")

# Accepted keys per field, attribute name first. The second key is the one
# used in transaction files.
FIELD_KEYS: dict[str, tuple[str, ...]] = {
    "id": ("id", "transaction_id"),
    "date": ("date", "transaction_date"),
    "amount": ("amount", "transaction_amount"),
    "type": ("type", "transaction_type"),
    "description": ("description", "transaction_description"),
    "merchant_name": ("merchant_name", "merchantName"),
    "card_type": ("card_type", "cardType"),
}

REQUIRED_FIELDS: tuple[str, ...] = tuple(FIELD_KEYS)

_MISSING = object()


def _field(name: str, description: str, record_key: str | None = None) -> Any:
    return Field(
        validation_alias=AliasChoices(*FIELD_KEYS[name]),
        serialization_alias=record_key or FIELD_KEYS[name][1],
        description=description,
    )


def parse_date(value: Any) -> date_type | None:
    """Parse a stored or user-supplied date into a calendar date.

    Strings are read by their ``YYYY-MM-DD`` prefix so that timestamps such
    as ``2019-01-15T10:00:00`` still resolve to their calendar day. Returns
    None when the value cannot be interpreted as a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date_type):
        return value
    if isinstance(value, str):
        try:
            return date_type.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def lookup_field(record: Mapping[str, Any], name: str) -> Any:
    """Return the value stored under any accepted key for ``name``, or a sentinel."""
    for key in FIELD_KEYS[name]:
        if key in record:
            return record[key]
    return _MISSING


def is_missing(value: Any) -> bool:
    return value is _MISSING


class Transaction(BaseModel):
    """Represents a financial transaction."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = _field("id", "Transaction identifier (not guaranteed unique)")
    date: str | date_type = _field("date", "Transaction date, YYYY-MM-DD")
    amount: float = _field("amount", "Non-negative transaction amount")
    type: TransactionType = _field("type", "Transaction type (debit or credit)")
    description: str = _field("description", "Free-text description")
    merchant_name: str = _field("merchant_name", "Merchant name", "merchant_name")
    card_type: str = _field("card_type", "Card type", "card_type")

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Transaction":
        """Build a transaction from a raw record without validating it.

        Fields absent from the record are set to None.
        """
        values = {}
        for name in FIELD_KEYS:
            value = lookup_field(record, name)
            values[name] = None if is_missing(value) else value
        return cls.model_construct(**values)

    @property
    def parsed_date(self) -> date_type | None:
        """Calendar date of the transaction, or None if it does not parse."""
        return parse_date(getattr(self, "date", None))

    def to_record(self) -> dict[str, Any]:
        """Return the record in transaction-file layout.

        Works for records loaded without validation, skipping unset fields.
        """
        record = {}
        for name, info in type(self).model_fields.items():
            if name in self.__dict__:
                record[info.serialization_alias or name] = self.__dict__[name]
        return record

    def to_display_dict(self) -> dict:
        """Return a dictionary suitable for display to users."""
        amount = getattr(self, "amount", None)
        return {
            "id": getattr(self, "id", None),
            "date": str(getattr(self, "date", "")),
            "amount": f"{amount:.2f}" if isinstance(amount, (int, float)) else str(amount),
            "type": getattr(self, "type", None),
            "description": getattr(self, "description", ""),
            "merchant": getattr(self, "merchant_name", ""),
            "card": getattr(self, "card_type", ""),
        }


class PeriodFilter(BaseModel):
    """Optional year/month/day criteria, combined with logical AND."""

    model_config = ConfigDict(frozen=True)

    year: int | None = Field(default=None, description="Calendar year")
    month: int | None = Field(default=None, description="Month number, 1-12")
    day: int | None = Field(default=None, description="Day of the month")

    def matches(self, value: date_type | None) -> bool:
        """Check whether a calendar date satisfies every provided criterion."""
        if self.year is None and self.month is None and self.day is None:
            return True
        if value is None:
            return False
        if self.year is not None and value.year != self.year:
            return False
        if self.month is not None and value.month != self.month:
            return False
        if self.day is not None and value.day != self.day:
            return False
        return True
