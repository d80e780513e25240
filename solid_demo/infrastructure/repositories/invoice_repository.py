"""Placeholder invoice repository implementation."""
import logging

from solid_demo.domain.entities.invoice import Invoice
from solid_demo.domain.interfaces.invoice_repository import IInvoiceRepository


class InvoiceRepository(IInvoiceRepository):
    """
    Invoice repository that only reports the save.
    
    Follows Repository Pattern; no storage backend is attached.
    """
    
    def __init__(self):
        self._logger = logging.getLogger(__name__)
    
    def save_to_database(self, invoice: Invoice) -> None:
        """Print a save confirmation for the invoice."""
        self._logger.debug(f"Saving invoice {invoice.id} with {len(invoice.items or [])} items")
        print(f"Invoice {invoice.id} saved to database.")
