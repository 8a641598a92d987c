"""Order aggregate.

Orders are created once by the order service and never change
afterwards: no confirm, ship or cancel operations exist yet, so every
order stays PENDING.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from orderflow.domain.exceptions import ValidationError
from orderflow.domain.model.value_objects import Money


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"


@dataclass(frozen=True)
class OrderItem:
    """A single line of an order (or of a cart that is about to become one).

    ``price`` is the unit price frozen when the item was added to the
    cart, so later catalog price changes never alter existing orders.
    """

    product_id: str
    quantity: int
    price: Money  # locked when the item entered the cart

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity <= 0:
            raise ValidationError("Quantity must be positive")

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity


@dataclass(frozen=True)
class Order:
    """Aggregate root for customer orders.

    Use ``Order.create()`` for new orders. The total is computed by the
    caller once, at creation, and stored; it is never recomputed.
    """

    id: str
    customer_name: str
    items: tuple[OrderItem, ...]
    total: Money
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(customer_name: str, items: list[OrderItem], total: Money) -> Order:
        """Create a new pending order.

        ``customer_name`` and ``items`` are taken as given; checking that
        they are non-empty is the caller's responsibility.
        """
        return Order(
            id=str(uuid.uuid4()),
            customer_name=customer_name,
            items=tuple(items),
            total=total,
        )

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)
