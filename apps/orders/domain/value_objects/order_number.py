"""
Order number value object.
"""
import secrets
import string
from dataclasses import dataclass
from datetime import datetime, timezone

from shared.domain import ValueObject

ALPHABET = string.ascii_uppercase + string.digits
RANDOM_PART_LENGTH = 8


@dataclass(frozen=True)
class OrderNumber(ValueObject):
    """Human legible order number, e.g. ORD-20261018-7K2Q9XA1."""
    value: str

    @classmethod
    def generate(cls) -> 'OrderNumber':
        """Generate a new order number from the date and a random suffix."""
        date_part = datetime.now(timezone.utc).strftime("%Y%m%d")
        random_part = ''.join(secrets.choice(ALPHABET) for _ in range(RANDOM_PART_LENGTH))
        return cls(value=f"ORD-{date_part}-{random_part}")

    def __str__(self) -> str:
        return self.value
