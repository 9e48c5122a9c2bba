"""Bills page: fetch, order and format the employee's bills."""

import logging
from typing import Iterable, List, Optional

from billed.core.result import capture
from billed.core.routes import Navigator
from billed.models.enums import ListingState, Route
from billed.schemas.bill import Bill
from billed.schemas.views import BillRow, BillsPage
from billed.services.bills_gateway import BillsGateway
from billed.utils.format import format_date, format_status

logger = logging.getLogger(__name__)


def sort_anti_chronological(bills: Iterable[Bill]) -> List[Bill]:
    """Most recent first, comparing the raw ISO date strings."""
    return sorted(bills, key=lambda bill: bill.date or "", reverse=True)


def to_row(bill: Bill) -> BillRow:
    """Display row for a bill; unparseable fields are shown as received."""
    try:
        formatted_date = format_date(bill.date)
    except (TypeError, ValueError):
        logger.warning("Unparseable bill date", extra={"bill_id": bill.id, "date": bill.date})
        formatted_date = bill.date or ""

    try:
        status_label = format_status(bill.status)
    except KeyError:
        logger.warning("Unknown bill status", extra={"bill_id": bill.id, "status": bill.status})
        status_label = bill.status or ""

    return BillRow(bill=bill, formatted_date=formatted_date, status_label=status_label)


class BillsListing:
    def __init__(self, gateway: Optional[BillsGateway], navigator: Navigator):
        self.gateway = gateway
        self.navigator = navigator
        self.state = ListingState.LOADING
        self.rows: List[BillRow] = []
        self.error_message: Optional[str] = None

    async def fetch_and_render(self) -> BillsPage:
        """
        Load the bills and move to LOADED, or to ERRORED when the service fails.
        No retry: navigating to the page again calls this again.
        """
        if self.gateway is None:
            self.rows = []
            self.state = ListingState.LOADED
            return self.render()

        outcome = await capture(self.gateway.list())
        if not outcome.ok:
            logger.error(
                "Could not load bills",
                extra={"status_code": outcome.error.status_code, "error": outcome.error.message},
            )
            self.error_message = outcome.error.message
            self.state = ListingState.ERRORED
            return self.render()

        self.rows = [to_row(bill) for bill in sort_anti_chronological(outcome.value)]
        self.error_message = None
        self.state = ListingState.LOADED
        return self.render()

    def render(self) -> BillsPage:
        if self.state == ListingState.ERRORED:
            return BillsPage(state=self.state, error_message=self.error_message)
        if self.state == ListingState.LOADING:
            return BillsPage(state=self.state)
        return BillsPage(state=self.state, rows=self.rows)

    def on_new_bill_click(self) -> None:
        self.navigator.on_navigate(Route.NEW_BILL)
