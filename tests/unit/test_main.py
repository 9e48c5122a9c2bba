"""Unit tests for the employee app wiring."""

from unittest.mock import MagicMock

import pytest

from billed.main import create_app
from billed.models.enums import ListingState, Route
from billed.schemas.bill import BillForm, FileInput, ReceiptFile
from billed.services.bills_gateway import HttpBillsGateway
from billed.services.receipt_preview import ReceiptIcon


@pytest.mark.asyncio
async def test_employee_flow_through_app(employee_storage, gateway, navigator):
    app = create_app(employee_storage, navigator, MagicMock(), gateway=gateway)

    page = await app.bills_page().fetch_and_render()
    assert page.state == ListingState.LOADED

    new_bill = app.new_bill_page()
    await new_bill.on_file_selected(
        FileInput(value="C:\\fakepath\\taxi.jpg", files=[ReceiptFile(name="taxi.jpg", content=b"x")])
    )
    new_bill.on_form_submit(BillForm(type="Transports", name="Taxi", date="2023-02-01", amount="35"))
    await new_bill.wait_pending()

    navigator.on_navigate.assert_called_once_with(Route.BILLS)
    assert gateway.updated[0].id == "1234"


def test_pages_are_fresh_per_visit(employee_storage, gateway, navigator):
    app = create_app(employee_storage, navigator, MagicMock(), gateway=gateway)
    first = app.new_bill_page()
    first.file_url = "https://host/old.jpg"

    assert app.new_bill_page().file_url is None
    assert app.bills_page() is not app.bills_page()


@pytest.mark.asyncio
async def test_default_gateway_is_http(employee_storage, navigator):
    app = create_app(employee_storage, navigator, MagicMock())
    assert isinstance(app.gateway, HttpBillsGateway)
    await app.aclose()


def test_receipt_preview_uses_app_modal(employee_storage, gateway, navigator):
    modal = MagicMock()
    modal.width.return_value = 200
    app = create_app(employee_storage, navigator, modal, gateway=gateway)

    app.receipt_preview().open_preview(ReceiptIcon(bill_url="https://host/r.png"))

    modal.show.assert_called_once()
