"""Application services module.

Services depend on domain interfaces, never on concrete implementations.
"""
from solid_demo.application.services.discount_calculator import DiscountCalculator
from solid_demo.application.services.invoice_calculator import InvoiceCalculator
from solid_demo.application.services.notification import Notification

__all__ = [
    "DiscountCalculator",
    "InvoiceCalculator",
    "Notification",
]
