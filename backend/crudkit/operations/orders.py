"""Order operations."""

from crudkit.core.domain_types import InputShape
from crudkit.core.result import Failure, Result, Success
from crudkit.models.order import Order
from crudkit.operations.base import Operation


class CancelOrder(Operation):
    """Cancel an order; an optional params["reason"] is echoed in the message.

    Input: `order` alone, or `order` plus `params`; an id is required.
    """
    name = "cancel_order"
    resource = "orders"
    input_shape = InputShape.RECORD_OPTIONAL_PARAMS

    async def __call__(self, order: Order, params: dict | None = None) -> Result:
        if order.status == "cancelled":
            return Failure.message(f"Order {order.reference} is already cancelled")
        if order.status == "shipped":
            return Failure.message(f"Order {order.reference} has already shipped")
        order.status = "cancelled"
        await self._store.save_or_raise(order)

        reason = (params or {}).get("reason")
        suffix = f": {reason}" if reason else ""
        return Success.message(f"Order {order.reference} cancelled{suffix}")
