"""
Get order use case.
"""
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.exceptions import OrderNotFoundError
from ...domain.repositories.order_repository import OrderRepository
from ..dtos.order_dto import OrderDTO


@dataclass
class GetOrderUseCase(UseCase[str, OrderDTO]):
    """Use case for looking up an order by its number."""

    order_repository: OrderRepository

    def execute(self, input_dto: str) -> UseCaseResult[OrderDTO]:
        order = self.order_repository.find_by_order_number(input_dto)
        if order is None:
            raise OrderNotFoundError(input_dto)
        return UseCaseResult.ok(OrderDTO.from_entity(order))
