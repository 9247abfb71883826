"""
Default wiring of the order services to their Django adapters.
"""
from apps.catalog.infrastructure.notifiers import CeleryLowStockNotifier
from apps.catalog.infrastructure.repositories import DjangoStockRepository
from apps.customers.infrastructure.repositories import DjangoCustomerRepository
from shared.infrastructure.config import DjangoSettingsConfigProvider
from ..application.services.order_commit_service import OrderCommitService
from ..application.use_cases.get_order import GetOrderUseCase
from ..application.use_cases.place_order import PlaceOrderUseCase
from .repositories import DjangoCartRepository, DjangoOrderRepository


def build_order_commit_service(**overrides) -> OrderCommitService:
    """Service wired to the ORM, settings.CHECKOUT and Celery; keyword arguments replace collaborators."""
    collaborators = {
        'order_repository': DjangoOrderRepository(),
        'cart_repository': DjangoCartRepository(),
        'stock_repository': DjangoStockRepository(),
        'customer_repository': DjangoCustomerRepository(),
        'notifier': CeleryLowStockNotifier(),
        'config_provider': DjangoSettingsConfigProvider(),
    }
    collaborators.update(overrides)
    return OrderCommitService(**collaborators)


def build_place_order_use_case() -> PlaceOrderUseCase:
    return PlaceOrderUseCase(
        order_commit_service=build_order_commit_service(),
        cart_repository=DjangoCartRepository(),
    )


def build_get_order_use_case() -> GetOrderUseCase:
    return GetOrderUseCase(order_repository=DjangoOrderRepository())
