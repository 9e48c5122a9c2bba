"""View models handed to the page templates"""

from typing import List, Optional
from pydantic import BaseModel

from billed.models.enums import ListingState
from billed.schemas.bill import Bill


class BillRow(BaseModel):
    """
    One line of the bills table.

    date stays the raw ISO string the table is ordered on; formatted_date and
    status_label are what the employee reads.
    """
    bill: Bill
    formatted_date: str
    status_label: str

    @property
    def date(self) -> Optional[str]:
        return self.bill.date

    @property
    def receipt_url(self) -> Optional[str]:
        return self.bill.file_url


class BillsPage(BaseModel):
    state: ListingState
    rows: List[BillRow] = []
    error_message: Optional[str] = None

    @property
    def loading(self) -> bool:
        return self.state == ListingState.LOADING

    @property
    def dates(self) -> List[Optional[str]]:
        return [row.date for row in self.rows]
