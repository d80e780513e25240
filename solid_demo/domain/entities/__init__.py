"""Domain entities - core business objects."""
from solid_demo.domain.entities.invoice import Invoice, Item

__all__ = [
    "Invoice",
    "Item",
]
