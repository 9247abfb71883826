"""
Contact info value object.
"""
import re
from dataclasses import dataclass
from typing import Optional

from shared.domain import ValidationError, ValueObject
from ..exceptions import InvalidEmailError

EMAIL_PATTERN = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
PHONE_MAX_LENGTH = 20


@dataclass(frozen=True)
class ContactInfo(ValueObject):
    """Email (required) and phone (optional) the order confirmation goes to."""
    email: str
    phone: Optional[str] = None

    def __post_init__(self):
        email = (self.email or "").strip()
        if not re.match(EMAIL_PATTERN, email):
            raise InvalidEmailError(self.email)
        object.__setattr__(self, 'email', email)

        phone = (self.phone or "").strip() or None
        if phone and len(phone) > PHONE_MAX_LENGTH:
            raise ValidationError(
                message=f"Phone number must be at most {PHONE_MAX_LENGTH} characters",
                field="phone",
            )
        object.__setattr__(self, 'phone', phone)
