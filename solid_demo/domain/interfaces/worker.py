"""Worker capability interfaces (Interface Segregation Principle).

Each capability is its own interface so a client that only needs work
done never depends on eating or sleeping.
"""
from abc import ABC, abstractmethod


class IWorkable(ABC):
    """Something that can work."""
    
    @abstractmethod
    def work(self) -> None:
        pass


class IEatable(ABC):
    """Something that can eat."""
    
    @abstractmethod
    def eat(self) -> None:
        pass


class ISleepable(ABC):
    """Something that can sleep."""
    
    @abstractmethod
    def sleep(self) -> None:
        pass
