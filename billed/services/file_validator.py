"""Receipt file checks done before anything is uploaded."""

from typing import Iterable, Optional

from billed.config import settings
from billed.core.exceptions import InvalidReceiptError


def file_extension(file_name: str) -> str:
    """Lower-cased text after the last dot, "" when there is no dot."""
    if "." not in file_name:
        return ""
    return file_name.rsplit(".", 1)[-1].lower()


def validate(file_name: str, allowed: Optional[Iterable[str]] = None) -> bool:
    """True iff file_name ends with an accepted image extension (jpg, jpeg, png by default)."""
    accepted = set(allowed if allowed is not None else settings.ALLOWED_RECEIPT_EXTENSIONS)
    extension = file_extension(file_name)
    return bool(extension) and extension in accepted


def ensure_valid(file_name: str) -> None:
    if not validate(file_name):
        raise InvalidReceiptError(file_name)
