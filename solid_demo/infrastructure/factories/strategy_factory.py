"""Factory for creating strategy instances (Factory Pattern)."""
import logging

from solid_demo.domain.interfaces.discount_strategy import IDiscountStrategy
from solid_demo.domain.interfaces.notification_service import INotificationService

from solid_demo.infrastructure.providers.discount_strategies import (
    RegularDiscount,
    SilverDiscount,
    GoldDiscount,
    PlatinumDiscount,
)
from solid_demo.infrastructure.providers.notification_services import EmailService, SmsService


logger = logging.getLogger(__name__)


class StrategyFactory:
    """
    Factory for creating strategy instances following Factory Pattern.
    
    Centralizes variant selection so callers can pick an implementation by name.
    """
    
    _discount_strategies = {
        "regular": RegularDiscount,
        "silver": SilverDiscount,
        "gold": GoldDiscount,
        "platinum": PlatinumDiscount,
    }
    
    _notification_services = {
        "email": EmailService,
        "sms": SmsService,
    }
    
    @staticmethod
    def create_discount_strategy(tier: str = "regular") -> IDiscountStrategy:
        """
        Create a discount strategy instance.
        
        Args:
            tier: Customer tier ("regular", "silver", "gold", "platinum")
            
        Returns:
            IDiscountStrategy instance
            
        Raises:
            ValueError: If tier is not supported
        """
        strategy_class = StrategyFactory._discount_strategies.get(tier.lower())
        if strategy_class is None:
            raise ValueError(f"Unsupported discount tier: {tier}")
        
        logger.debug(f"Created discount strategy {strategy_class.__name__}")
        return strategy_class()
    
    @staticmethod
    def create_notification_service(channel: str = "email") -> INotificationService:
        """
        Create a notification service instance.
        
        Args:
            channel: Delivery channel ("email", "sms")
            
        Returns:
            INotificationService instance
            
        Raises:
            ValueError: If channel is not supported
        """
        service_class = StrategyFactory._notification_services.get(channel.lower())
        if service_class is None:
            raise ValueError(f"Unsupported notification channel: {channel}")
        
        logger.debug(f"Created notification service {service_class.__name__}")
        return service_class()
