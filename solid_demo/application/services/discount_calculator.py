"""Discount calculation (Open/Closed Principle)."""
import logging

from solid_demo.domain.interfaces.discount_strategy import IDiscountStrategy


class DiscountCalculator:
    """Applies whichever discount strategy it was built with."""
    
    def __init__(self, discount_strategy: IDiscountStrategy):
        """
        Initialize calculator with its strategy (Dependency Injection).
        
        Args:
            discount_strategy: Discount strategy to delegate to
        """
        self.discount_strategy = discount_strategy
        self._logger = logging.getLogger(__name__)
    
    def calculate(self, amount: float) -> float:
        """Return the discounted amount."""
        discounted = self.discount_strategy.apply_discount(amount)
        self._logger.debug(
            f"{type(self.discount_strategy).__name__} applied: {amount} -> {discounted}"
        )
        return discounted
