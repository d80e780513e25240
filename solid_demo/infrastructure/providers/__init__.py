"""Provider implementations (Infrastructure Layer).

Concrete strategies and capabilities implementing domain interfaces.
"""
from solid_demo.infrastructure.providers.discount_strategies import (
    RegularDiscount,
    SilverDiscount,
    GoldDiscount,
    PlatinumDiscount,
)
from solid_demo.infrastructure.providers.notification_services import EmailService, SmsService
from solid_demo.infrastructure.providers.workers import HumanWorker, RobotWorker

__all__ = [
    "RegularDiscount",
    "SilverDiscount",
    "GoldDiscount",
    "PlatinumDiscount",
    "EmailService",
    "SmsService",
    "HumanWorker",
    "RobotWorker",
]
