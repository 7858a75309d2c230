"""OrderEntity — presenter for the orders resource."""

from crudkit.presenters.base import Presenter
from crudkit.schemas.order import OrderFull, OrderSummary


class OrderEntity(Presenter):
    views = {"summary": OrderSummary, "full": OrderFull}
    default_view = "summary"
