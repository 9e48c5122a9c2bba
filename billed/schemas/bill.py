import math
from typing import Any, Optional, List
from pydantic import BaseModel, Field, ConfigDict, field_validator

from billed.models.enums import BillStatus


def _lenient_number(v: Any) -> Optional[float]:
    """Number a stored value stands for, None when it stands for none."""
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, (int, float)):
        return float(v)
    if isinstance(v, str):
        try:
            return float(v.strip().replace(",", "."))
        except ValueError:
            return None
    return None


class Bill(BaseModel):
    """
    Expense bill as exchanged with the remote service (camelCase on the wire).

    Parsing never fails on a badly typed field: text fields take the str() of
    whatever was stored and numbers that cannot be read become None, so one
    broken record still shows up in the bills table.
    """
    id: Optional[str] = None
    email: Optional[str] = None
    type: Optional[str] = None
    name: Optional[str] = None
    date: Optional[str] = None
    amount: Optional[float] = None
    vat: Optional[float] = None
    pct: Optional[int] = None
    commentary: Optional[str] = None
    file_url: Optional[str] = Field(default=None, alias="fileUrl")
    file_name: Optional[str] = Field(default=None, alias="fileName")
    # Raw string so an unknown value from the back office still renders
    status: Optional[str] = BillStatus.PENDING.value

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator(
        "id", "email", "type", "name", "date", "commentary", "file_url", "file_name", "status",
        mode="before",
    )
    @classmethod
    def text_as_received(cls, v: Any) -> Any:
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("amount", "vat", mode="before")
    @classmethod
    def readable_number(cls, v: Any) -> Optional[float]:
        """Blank form values (vat is often left empty) and garbage mean no value"""
        return _lenient_number(v)

    @field_validator("pct", mode="before")
    @classmethod
    def readable_pct(cls, v: Any) -> Optional[int]:
        number = _lenient_number(v)
        if number is None or not math.isfinite(number):
            return None
        return int(number)

    def to_payload(self) -> dict:
        """Body sent on update; the id travels in the URL, not the body."""
        return self.model_dump(mode="json", by_alias=True, exclude={"id"})


# --- New bill form ---
class ReceiptFile(BaseModel):
    name: str
    content: bytes = b""
    content_type: Optional[str] = None


class FileInput(BaseModel):
    """The receipt <input type="file">: what the user sees and what was picked."""
    value: str = ""
    files: List[ReceiptFile] = []

    @property
    def selected(self) -> Optional[ReceiptFile]:
        return self.files[0] if self.files else None


class BillForm(BaseModel):
    """Raw values typed in the new bill form."""
    type: str = ""
    name: str = ""
    date: str = ""
    amount: str = ""
    vat: str = ""
    pct: str = ""
    commentary: str = ""


# --- Gateway payloads ---
class ReceiptUpload(BaseModel):
    file: ReceiptFile
    email: str


class UploadResult(BaseModel):
    file_url: str = Field(alias="fileUrl")
    key: str
    file_name: Optional[str] = Field(default=None, alias="fileName")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
