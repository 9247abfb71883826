"""
Place order use case.
"""
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.exceptions import EmptyCartError
from ...domain.repositories.cart_repository import CartRepository
from ..dtos.order_dto import CheckoutDTO, OrderDTO
from ..services.order_commit_service import OrderCommitService


@dataclass
class PlaceOrderUseCase(UseCase[CheckoutDTO, OrderDTO]):
    """
    Use case for checking out.

    Guests post their items; registered customers check out their
    persistent cart unless items are posted explicitly.
    """

    order_commit_service: OrderCommitService
    cart_repository: CartRepository

    def execute(self, input_dto: CheckoutDTO) -> UseCaseResult[OrderDTO]:
        contact = {'email': input_dto.email, 'phone': input_dto.phone}

        if input_dto.items:
            lines = self.cart_repository.build_lines(input_dto.items)
            order = self.order_commit_service.commit(
                input_dto.customer_id,
                contact,
                input_dto.billing_address,
                input_dto.shipping_address,
                lines,
            )
        elif input_dto.customer_id is not None:
            order = self.order_commit_service.place_order(
                input_dto.customer_id,
                contact,
                input_dto.billing_address,
                input_dto.shipping_address,
            )
        else:
            raise EmptyCartError()

        return UseCaseResult.ok(OrderDTO.from_entity(order), created=True)
