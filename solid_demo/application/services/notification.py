"""Notification sending (Dependency Inversion Principle)."""
import logging

from solid_demo.domain.interfaces.notification_service import INotificationService


class Notification:
    """
    High-level notification component.
    
    Depends only on INotificationService, so new channels plug in without
    changes here.
    """
    
    def __init__(self, notification_service: INotificationService):
        """
        Initialize with a delivery channel (Dependency Injection).
        
        Args:
            notification_service: Channel used to deliver messages
        """
        self.notification_service = notification_service
        self._logger = logging.getLogger(__name__)
    
    def send(self, message: str) -> None:
        """Send a message through the configured channel."""
        self._logger.debug(f"Sending via {type(self.notification_service).__name__}")
        self.notification_service.send(message)
