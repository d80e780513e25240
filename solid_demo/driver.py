"""Console driver walking through each SOLID principle."""
import logging
import sys
from typing import Optional

import sentry_sdk

from solid_demo.config.settings import Config, get_config
from solid_demo.domain.entities.invoice import Invoice, Item
from solid_demo.domain.interfaces.worker import IWorkable
from solid_demo.application.services.invoice_calculator import InvoiceCalculator
from solid_demo.application.services.discount_calculator import DiscountCalculator
from solid_demo.application.services.notification import Notification
from solid_demo.infrastructure.repositories.invoice_repository import InvoiceRepository
from solid_demo.infrastructure.providers.workers import HumanWorker, RobotWorker
from solid_demo.infrastructure.factories.strategy_factory import StrategyFactory


logger = logging.getLogger(__name__)


def configure_logging(config: Optional[type[Config]] = None) -> None:
    """Configure application logging.
    
    Logs go to stderr; stdout carries only the demo transcript.
    """
    config = config or get_config()
    logging.basicConfig(
        level=getattr(logging, config.log_level(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True
    )


def init_error_tracking(config: Optional[type[Config]] = None) -> bool:
    """
    Initialize Sentry if a DSN is configured.
    
    Returns:
        True if Sentry was initialized
    """
    config = config or get_config()
    if not config.SENTRY_DSN:
        return False
    
    sentry_sdk.init(
        dsn=config.SENTRY_DSN,
        traces_sample_rate=0.1,
        environment=config.ENVIRONMENT,
    )
    logger.info("Sentry error tracking initialized")
    return True


def _srp_demo() -> None:
    print("=== SRP Demo ===")
    invoice = Invoice(id=1, tax_rate=0.2)
    invoice.add_item(Item(name="Laptop", price=1000))
    invoice.add_item(Item(name="Mouse", price=50))
    
    calculator = InvoiceCalculator()
    print(f"Invoice Total: {calculator.calculate_total(invoice)}")
    InvoiceRepository().save_to_database(invoice)


def _ocp_demo() -> None:
    print("\n=== OCP Demo ===")
    gold_customer = DiscountCalculator(StrategyFactory.create_discount_strategy("gold"))
    print(f"Gold discount: {gold_customer.calculate(1000)}")
    
    platinum_customer = DiscountCalculator(StrategyFactory.create_discount_strategy("platinum"))
    print(f"Platinum discount: {platinum_customer.calculate(1000)}")


def _isp_demo() -> None:
    print("\n=== ISP Demo ===")
    human = HumanWorker()
    human.work()
    human.eat()
    human.sleep()
    
    robot: IWorkable = RobotWorker()
    robot.work()


def _dip_demo() -> None:
    print("\n=== DIP Demo ===")
    email_notification = Notification(StrategyFactory.create_notification_service("email"))
    email_notification.send("Hello via Email!")
    
    sms_notification = Notification(StrategyFactory.create_notification_service("sms"))
    sms_notification.send("Hello via SMS!")


def run_demo() -> None:
    """Run every principle demo in order, printing labeled sections."""
    _srp_demo()
    _ocp_demo()
    _isp_demo()
    _dip_demo()
    logger.debug("Demo completed")


def main() -> int:
    """Process entry point."""
    configure_logging()
    init_error_tracking()
    
    try:
        run_demo()
    except Exception as e:
        logger.critical(f"Demo failed: {e}", exc_info=True)
        raise
    
    return 0
