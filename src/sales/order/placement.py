"""Order placement — command and handler.

The external checkout flow records each new order through PlaceOrder; this is
the only way orders enter the Order Store.
"""

from protean import handle
from protean.fields import Float, String
from protean.utils.globals import current_domain

from sales.domain import logger, sales
from sales.order.order import Order, OrderStatus


@sales.command(part_of="Order")
class PlaceOrder:
    customer_name = String(required=True, max_length=255)
    total = Float(required=True, min_value=0.0)
    placed_on = String(required=True, max_length=50)  # ISO date or "June 15, 2023"
    status = String(max_length=20, default=OrderStatus.PENDING.value)


@sales.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        order = Order.create(
            customer_name=command.customer_name,
            total=command.total,
            placed_on=command.placed_on,
            status=command.status or OrderStatus.PENDING.value,
        )
        current_domain.repository_for(Order).add(order)
        logger.info(
            "Order placed",
            order_id=str(order.id),
            order_number=order.order_number,
            total=order.total,
            status=order.status,
        )
        return str(order.id)
