"""
Django settings backed config provider.
"""
from typing import Dict, Optional

from django.conf import settings

from shared.application.config import ConfigProvider


class DjangoSettingsConfigProvider(ConfigProvider):
    """Reads ``settings.CHECKOUT``; keys are matched case-insensitively."""

    def __init__(self, overrides: Optional[Dict[str, object]] = None):
        self.overrides = {k.lower(): v for k, v in (overrides or {}).items()}

    def get(self, key: str) -> Optional[str]:
        key = key.lower()
        if key in self.overrides:
            value = self.overrides[key]
        else:
            source = {k.lower(): v for k, v in getattr(settings, 'CHECKOUT', {}).items()}
            value = source.get(key)
        return None if value is None else str(value)
