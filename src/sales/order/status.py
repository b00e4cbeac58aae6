"""Order status changes — commands and handler.

MarkOrderComplete is the dashboard fast-path and is idempotent: completing an
order that is already terminal changes nothing. ChangeOrderStatus is the
administrative override and surfaces every illegal transition as
InvalidTransition.
"""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from sales.domain import logger, sales
from sales.order.order import Order


@sales.command(part_of="Order")
class ChangeOrderStatus:
    order_id = Identifier(required=True)
    status = String(required=True, max_length=20)


@sales.command(part_of="Order")
class MarkOrderComplete:
    order_id = Identifier(required=True)


@sales.command_handler(part_of=Order)
class OrderStatusHandler:
    @handle(ChangeOrderStatus)
    def change_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        previous = order.status
        order.transition_to(command.status)
        repo.add(order)
        logger.info(
            "Order status changed",
            order_id=str(order.id),
            previous_status=previous,
            status=order.status,
        )
        return order.status

    @handle(MarkOrderComplete)
    def mark_complete(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        if order.is_terminal:
            logger.info(
                "Order already terminal, nothing to complete",
                order_id=str(order.id),
                status=order.status,
            )
            return order.status

        order.complete()
        repo.add(order)
        logger.info("Order completed", order_id=str(order.id))
        return order.status
