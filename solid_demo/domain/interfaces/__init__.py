"""Domain interfaces following Dependency Inversion Principle."""

from solid_demo.domain.interfaces.discount_strategy import IDiscountStrategy
from solid_demo.domain.interfaces.invoice_repository import IInvoiceRepository
from solid_demo.domain.interfaces.notification_service import INotificationService
from solid_demo.domain.interfaces.worker import IWorkable, IEatable, ISleepable

__all__ = [
    "IDiscountStrategy",
    "IInvoiceRepository",
    "INotificationService",
    "IWorkable",
    "IEatable",
    "ISleepable",
]
