"""Invoice total calculation (Single Responsibility Principle)."""
import logging

from solid_demo.domain.entities.invoice import Invoice


logger = logging.getLogger(__name__)


class InvoiceCalculator:
    """
    Computes invoice totals.
    
    Only knows arithmetic; storing the invoice is InvoiceRepository's job.
    """
    
    def calculate_total(self, invoice: Invoice) -> float:
        """
        Calculate the taxed total of an invoice.
        
        Args:
            invoice: Invoice with zero or more items
            
        Returns:
            Sum of item prices plus tax at the invoice's tax rate
        """
        subtotal = 0.0
        for item in invoice.items or []:
            subtotal += item.price
        
        total = subtotal + (subtotal * invoice.tax_rate)
        logger.debug(f"Invoice {invoice.id}: subtotal={subtotal}, total={total}")
        return total
