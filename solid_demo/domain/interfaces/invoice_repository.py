"""Interface for invoice persistence (Repository Pattern)."""
from abc import ABC, abstractmethod

from solid_demo.domain.entities.invoice import Invoice


class IInvoiceRepository(ABC):
    """Interface for invoice storage, kept apart from invoice arithmetic."""
    
    @abstractmethod
    def save_to_database(self, invoice: Invoice) -> None:
        """
        Persist an invoice.
        
        Args:
            invoice: Invoice to store
        """
        pass
