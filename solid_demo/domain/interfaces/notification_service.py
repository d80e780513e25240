"""Interface for notification services (Strategy Pattern).

This allows switching between different delivery channels:
- Email
- SMS
- etc.
"""
from abc import ABC, abstractmethod


class INotificationService(ABC):
    """
    Interface for notification services.
    
    High-level components depend on this abstraction instead of a concrete
    channel (Dependency Inversion Principle).
    """
    
    @abstractmethod
    def send(self, message: str) -> None:
        """
        Deliver a message over this channel.
        
        Args:
            message: Message text content
        """
        pass
