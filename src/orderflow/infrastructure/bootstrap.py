"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

A ``Session`` is built once per process and handed to whoever needs
the stores; nothing is kept in module-level state.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from orderflow.domain.model.product import NewProduct
from orderflow.domain.model.value_objects import Money
from orderflow.domain.repository.catalog_store import CatalogStore
from orderflow.domain.repository.order_store import OrderStore
from orderflow.infrastructure.persistence.in_memory_catalog_store import (
    InMemoryCatalogStore,
)
from orderflow.infrastructure.persistence.in_memory_order_store import (
    InMemoryOrderStore,
)

# Demo catalog loaded into every new session unless seeding is disabled.
SEED_PRODUCTS = (
    NewProduct("Wireless Headphones", Money.of("79.99"), 25, "WH-001", "Electronics"),
    NewProduct("USB-C Cable", Money.of("12.99"), 100, "UC-001", "Accessories"),
    NewProduct("Laptop Stand", Money.of("49.99"), 15, "LS-001", "Accessories"),
    NewProduct("Mechanical Keyboard", Money.of("129.99"), 8, "MK-001", "Electronics"),
)


@dataclass
class Session:
    catalog: CatalogStore = field(default_factory=InMemoryCatalogStore)
    orders: OrderStore = field(default_factory=InMemoryOrderStore)


def build_session(seed: bool = True) -> Session:
    session = Session()
    if seed:
        for new_product in SEED_PRODUCTS:
            session.catalog.add_product(new_product)
    return session
