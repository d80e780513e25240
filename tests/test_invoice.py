"""Tests for invoice totals and the placeholder repository."""
import pytest

from solid_demo.application.services.invoice_calculator import InvoiceCalculator
from solid_demo.domain.entities.invoice import Invoice, Item
from solid_demo.domain.interfaces.invoice_repository import IInvoiceRepository
from solid_demo.infrastructure.repositories.invoice_repository import InvoiceRepository


def test_total_includes_tax(sample_invoice):
    assert InvoiceCalculator().calculate_total(sample_invoice) == pytest.approx(1260.0)


@pytest.mark.parametrize("tax_rate", [0.0, 0.2, 1.0])
def test_empty_invoice_totals_zero(tax_rate):
    assert InvoiceCalculator().calculate_total(Invoice(id=7, tax_rate=tax_rate)) == 0


def test_missing_items_treated_as_empty():
    invoice = Invoice(id=3, items=None, tax_rate=0.5)
    assert InvoiceCalculator().calculate_total(invoice) == 0


def test_duplicate_items_are_counted_each_time():
    invoice = Invoice(id=2, tax_rate=0.0)
    mouse = Item(name="Mouse", price=50)
    invoice.add_item(mouse)
    invoice.add_item(mouse)

    assert [item.name for item in invoice.items] == ["Mouse", "Mouse"]
    assert InvoiceCalculator().calculate_total(invoice) == pytest.approx(100.0)


def test_no_validation_on_prices_or_tax_rate():
    invoice = Invoice(id=4, items=[Item(name="Refund", price=-10)], tax_rate=1.5)
    assert InvoiceCalculator().calculate_total(invoice) == pytest.approx(-25.0)


def test_invoices_do_not_share_item_lists():
    first = Invoice(id=1)
    second = Invoice(id=2)
    first.add_item(Item(name="Laptop", price=1000))

    assert second.items == []


def test_repository_prints_confirmation(sample_invoice, capsys):
    repository = InvoiceRepository()
    repository.save_to_database(sample_invoice)

    assert isinstance(repository, IInvoiceRepository)
    assert capsys.readouterr().out == "Invoice 1 saved to database.\n"


def test_repository_saves_invoice_without_items(capsys):
    InvoiceRepository().save_to_database(Invoice(id=9, items=None, tax_rate=0.1))
    assert capsys.readouterr().out == "Invoice 9 saved to database.\n"
