"""Interface for discount strategies (Strategy Pattern).

New customer tiers are added as new implementations; the
DiscountCalculator that uses them never changes (Open/Closed Principle).
"""
from abc import ABC, abstractmethod


class IDiscountStrategy(ABC):
    """Interface for discount strategies following Strategy Pattern."""
    
    @abstractmethod
    def apply_discount(self, amount: float) -> float:
        """
        Apply the discount to an amount.
        
        Args:
            amount: Amount before discount (assumed non-negative)
            
        Returns:
            Amount after discount
        """
        pass
