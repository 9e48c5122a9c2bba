"""
New bill workflow: upload the receipt, then complete the bill from the form.

The receipt upload creates the bill on the server and hands back its key and
the receipt URL; submitting the form fills in the rest of that same bill.
"""
import asyncio
import logging
from typing import Optional, Set

from billed.config import settings
from billed.core.result import Outcome, capture
from billed.core.routes import Navigator
from billed.core.session import SessionProvider
from billed.models.enums import BillStatus, Route
from billed.schemas.bill import Bill, BillForm, FileInput, ReceiptUpload, UploadResult
from billed.services import file_validator
from billed.services.bills_gateway import BillsGateway
from billed.utils.format import parse_leading_int, parse_number

logger = logging.getLogger(__name__)


def apply_upload_outcome(
    submission: "NewBillSubmission",
    outcome: Outcome[UploadResult],
    file_name: str,
) -> bool:
    """
    Store an upload result on the submission, or log why there is none.
    Returns True when the submission state changed.
    """
    if not outcome.ok:
        logger.error(
            "Receipt upload failed",
            extra={
                "file_name": file_name,
                "status_code": outcome.error.status_code,
                "error": outcome.error.message,
            },
        )
        return False

    result = outcome.value
    submission.bill_id = result.key
    submission.file_url = result.file_url
    submission.file_name = file_name
    return True


class NewBillSubmission:
    """One in-progress bill. Build a new instance for every new bill page."""

    def __init__(
        self,
        gateway: Optional[BillsGateway],
        session: SessionProvider,
        navigator: Navigator,
    ):
        self.gateway = gateway
        self.session = session
        self.navigator = navigator
        self.file_url: Optional[str] = None
        self.file_name: Optional[str] = None
        self.bill_id: Optional[str] = None
        self._pending: Set[asyncio.Task] = set()

    async def on_file_selected(self, file_input: FileInput) -> None:
        """Validate the picked receipt and upload it when its extension is accepted."""
        file = file_input.selected
        if file is None:
            return

        if not file_validator.validate(file.name):
            logger.warning("Receipt rejected: unsupported extension", extra={"file_name": file.name})
            file_input.value = ""
            self.file_url = None
            self.file_name = None
            return

        if self.gateway is None:
            return

        payload = ReceiptUpload(file=file, email=self.session.current_user().email)
        outcome = await capture(self.gateway.create(payload))
        apply_upload_outcome(self, outcome, file.name)

    def build_bill(self, form: BillForm) -> Bill:
        pct = parse_leading_int(form.pct)
        return Bill(
            id=self.bill_id,
            email=self.session.current_user().email,
            type=form.type,
            name=form.name,
            amount=parse_leading_int(form.amount),
            date=form.date,
            vat=parse_number(form.vat),
            pct=pct if pct else settings.DEFAULT_VAT_PCT,
            commentary=form.commentary,
            file_url=self.file_url,
            file_name=self.file_name,
            status=BillStatus.PENDING.value,
        )

    def on_form_submit(self, form: BillForm) -> Bill:
        """
        Send the completed bill and go back to the bills page.

        The update runs in the background; navigation never waits for it and
        happens whatever its outcome. Must be called from a running event loop.
        """
        if self.file_url is None or self.file_name is None:
            # Accepted as-is: the bill goes out without a receipt
            logger.warning("Bill submitted without an uploaded receipt", extra={"bill_id": self.bill_id})

        bill = self.build_bill(form)
        if self.gateway is not None:
            task = asyncio.get_running_loop().create_task(self._update(bill))
            self._pending.add(task)
            task.add_done_callback(self._settle)

        self.navigator.on_navigate(Route.BILLS)
        return bill

    async def _update(self, bill: Bill) -> Optional[Bill]:
        outcome = await capture(self.gateway.update(bill))
        if not outcome.ok:
            logger.error(
                "Bill update failed",
                extra={
                    "bill_id": bill.id,
                    "status_code": outcome.error.status_code,
                    "error": outcome.error.message,
                },
            )
            return None
        return outcome.value

    def _settle(self, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error("Bill update crashed", exc_info=error)

    async def wait_pending(self) -> None:
        """Wait for every update sent by on_form_submit to settle."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
