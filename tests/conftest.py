"""Shared fixtures."""
import logging

import pytest

from solid_demo.domain.entities.invoice import Invoice, Item


@pytest.fixture
def sample_invoice() -> Invoice:
    """Invoice used by the console demo."""
    invoice = Invoice(id=1, tax_rate=0.2)
    invoice.add_item(Item(name="Laptop", price=1000))
    invoice.add_item(Item(name="Mouse", price=50))
    return invoice


@pytest.fixture
def restore_root_logger():
    """Undo logging.basicConfig(force=True) calls made by the code under test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
