"""Repository implementations (Infrastructure Layer).

These implement domain interfaces defined in solid_demo.domain.interfaces.
"""
from solid_demo.infrastructure.repositories.invoice_repository import InvoiceRepository

__all__ = [
    "InvoiceRepository",
]
