"""Eye icon on a bill row: show the receipt in the page's modal."""

import html
import math
from typing import Optional, Protocol

from pydantic import BaseModel

from billed.config import settings


class ReceiptIcon(BaseModel):
    """The clicked eye icon; bill_url is its data-bill-url attribute."""
    bill_url: Optional[str] = None


class Modal(Protocol):
    def width(self) -> float:
        ...

    def set_body(self, markup: str) -> None:
        ...

    def show(self) -> None:
        ...


class ReceiptPreview:
    def __init__(self, modal: Modal):
        self.modal = modal

    def open_preview(self, icon: ReceiptIcon) -> None:
        img_width = math.floor(self.modal.width() * settings.PREVIEW_WIDTH_RATIO)
        src = html.escape(icon.bill_url or "", quote=True)
        self.modal.set_body(
            f'<div style="text-align: center;" class="bill-proof-container">'
            f'<img width="{img_width}" src="{src}" alt="Bill" /></div>'
        )
        self.modal.show()
