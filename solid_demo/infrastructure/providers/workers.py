"""Worker implementations (Interface Segregation Principle).

Each worker implements only the capabilities it actually has.
"""
from solid_demo.domain.interfaces.worker import IWorkable, IEatable, ISleepable


class HumanWorker(IWorkable, IEatable, ISleepable):
    """Worker that can work, eat and sleep."""
    
    def work(self) -> None:
        print("Human is working...")
    
    def eat(self) -> None:
        print("Human is eating...")
    
    def sleep(self) -> None:
        print("Human is sleeping...")


class RobotWorker(IWorkable):
    """Worker that only works."""
    
    def work(self) -> None:
        print("Robot is working...")
