"""Employee Application Entry Point"""

import logging
from typing import Optional

from billed.config import settings
from billed.core.logging import setup_logging
from billed.core.routes import Navigator
from billed.core.session import SessionStore, StoreSessionProvider
from billed.services.bills_gateway import BillsGateway, HttpBillsGateway
from billed.services.bills_service import BillsListing
from billed.services.new_bill_service import NewBillSubmission
from billed.services.receipt_preview import Modal, ReceiptPreview

logger = logging.getLogger(__name__)


class EmployeeApp:
    """
    Wires the employee pages to their collaborators.

    Each page factory returns a fresh component: state from a previous visit
    of the page is never reused.
    """

    def __init__(
        self,
        store: SessionStore,
        navigator: Navigator,
        modal: Modal,
        gateway: Optional[BillsGateway] = None,
    ):
        self.session = StoreSessionProvider(store)
        self.navigator = navigator
        self.modal = modal
        self.gateway = gateway if gateway is not None else HttpBillsGateway(session=self.session)

    def bills_page(self) -> BillsListing:
        return BillsListing(self.gateway, self.navigator)

    def new_bill_page(self) -> NewBillSubmission:
        return NewBillSubmission(self.gateway, self.session, self.navigator)

    def receipt_preview(self) -> ReceiptPreview:
        return ReceiptPreview(self.modal)

    async def aclose(self) -> None:
        if isinstance(self.gateway, HttpBillsGateway):
            await self.gateway.aclose()


def create_app(
    store: SessionStore,
    navigator: Navigator,
    modal: Modal,
    gateway: Optional[BillsGateway] = None,
) -> EmployeeApp:
    setup_logging()
    logger.info(
        "Starting employee app",
        extra={"environment": settings.ENVIRONMENT, "api_url": settings.API_URL},
    )
    return EmployeeApp(store, navigator, modal, gateway=gateway)
