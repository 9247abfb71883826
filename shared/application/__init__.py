# Shared application module
from .base_use_case import UseCase, UseCaseResult
from .config import CheckoutConfig, ConfigProvider

__all__ = ['UseCase', 'UseCaseResult', 'CheckoutConfig', 'ConfigProvider']
