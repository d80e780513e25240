"""Discount strategy implementations (Strategy Pattern)."""
from solid_demo.domain.interfaces.discount_strategy import IDiscountStrategy


class RegularDiscount(IDiscountStrategy):
    """No discount."""
    
    def apply_discount(self, amount: float) -> float:
        return amount


class SilverDiscount(IDiscountStrategy):
    """10% off."""
    
    def apply_discount(self, amount: float) -> float:
        return amount * 0.9


class GoldDiscount(IDiscountStrategy):
    """20% off."""
    
    def apply_discount(self, amount: float) -> float:
        return amount * 0.8


class PlatinumDiscount(IDiscountStrategy):
    """30% off."""
    
    def apply_discount(self, amount: float) -> float:
        return amount * 0.7
