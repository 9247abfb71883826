"""
Address value object.
"""
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from shared.domain import ValueObject
from ..exceptions import InvalidAddressError

REQUIRED_FIELDS = (
    'first_name',
    'last_name',
    'address_line_1',
    'city',
    'state',
    'postal_code',
    'country',
)
MAX_LENGTHS = {'postal_code': 20}
DEFAULT_MAX_LENGTH = 255


@dataclass(frozen=True)
class Address(ValueObject):
    """Structured postal address, copied onto the order as a snapshot."""
    first_name: str
    last_name: str
    address_line_1: str
    city: str
    state: str
    postal_code: str
    country: str
    address_line_2: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]], prefix: str = "address") -> 'Address':
        """
        Build and validate an address from request data.

        Raises:
            InvalidAddressError: naming the first missing or oversized field, e.g. "billing_address.city".
        """
        if not isinstance(data, dict):
            raise InvalidAddressError(prefix, f"{prefix} is required")

        values = {}
        for f in fields(cls):
            raw = data.get(f.name)
            value = "" if raw is None else str(raw).strip()
            if f.name in REQUIRED_FIELDS and not value:
                raise InvalidAddressError(f"{prefix}.{f.name}", f"{prefix}.{f.name} is required")
            max_length = MAX_LENGTHS.get(f.name, DEFAULT_MAX_LENGTH)
            if len(value) > max_length:
                raise InvalidAddressError(
                    f"{prefix}.{f.name}",
                    f"{prefix}.{f.name} must be at most {max_length} characters",
                )
            values[f.name] = value
        return cls(**values)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def full_address(self) -> str:
        """Single line address."""
        lines = [self.address_line_1]
        if self.address_line_2:
            lines.append(self.address_line_2)
        lines.append(f"{self.city}, {self.state} {self.postal_code}")
        lines.append(self.country)
        return ", ".join(lines)
