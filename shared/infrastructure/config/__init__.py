from .settings_provider import DjangoSettingsConfigProvider

__all__ = ['DjangoSettingsConfigProvider']
