"""SOLID principles demo: invoices, discounts, workers and notifications."""
from solid_demo.driver import main, run_demo

__all__ = ["main", "run_demo"]
