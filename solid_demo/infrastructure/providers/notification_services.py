"""Notification service implementations (Strategy Pattern)."""
from solid_demo.domain.interfaces.notification_service import INotificationService


class EmailService(INotificationService):
    """Email channel. Implements INotificationService."""
    
    def send(self, message: str) -> None:
        print(f"Email sent: {message}")


class SmsService(INotificationService):
    """SMS channel. Implements INotificationService."""
    
    def send(self, message: str) -> None:
        print(f"SMS sent: {message}")
