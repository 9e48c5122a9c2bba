"""
Client for the remote bills API.

Endpoints:
    GET   /bills        list the bills visible to the token's owner
    POST  /bills        multipart upload of a receipt (file, email) -> {fileUrl, key}
    PATCH /bills/{id}   complete a bill created by an upload
"""
import logging
from typing import Any, List, Optional, Protocol, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from billed.config import settings
from billed.core.exceptions import GatewayError
from billed.core.session import SessionProvider
from billed.schemas.bill import Bill, ReceiptUpload, UploadResult
from billed.services.file_validator import ensure_valid

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class BillsGateway(Protocol):
    """Remote persistence for bills. Every call raises GatewayError on failure."""

    async def list(self) -> List[Bill]:
        ...

    async def create(self, payload: ReceiptUpload) -> UploadResult:
        ...

    async def update(self, bill: Bill) -> Bill:
        ...


class HttpBillsGateway:
    def __init__(
        self,
        session: Optional[SessionProvider] = None,
        client: Optional[httpx.AsyncClient] = None,
        base_url: Optional[str] = None,
    ):
        self.session = session
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            base_url=base_url or settings.API_URL,
            timeout=settings.API_TIMEOUT,
        )

    async def __aenter__(self) -> "HttpBillsGateway":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    def _headers(self) -> dict:
        token = self.session.access_token() if self.session else None
        return {"Authorization": f"Bearer {token}"} if token else {}

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            response = await self.client.request(method, url, headers=self._headers(), **kwargs)
        except httpx.HTTPError as e:
            raise GatewayError(f"Bills API unreachable: {e}") from e
        if response.is_error:
            logger.warning(
                "Bills API error",
                extra={"method": method, "url": url, "status_code": response.status_code},
            )
            raise GatewayError.from_status(response.status_code)
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise GatewayError("Invalid response from bills API", status_code=response.status_code) from e

    @staticmethod
    def _parse(model: Type[M], data: Any, status_code: int) -> M:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise GatewayError("Invalid response from bills API", status_code=status_code) from e

    async def list(self) -> List[Bill]:
        response = await self._request("GET", "/bills")
        data = self._json(response)
        if not isinstance(data, list):
            raise GatewayError("Invalid response from bills API", status_code=response.status_code)

        bills = []
        for item in data:
            if not isinstance(item, dict):
                logger.warning("Skipping bill record that is not an object", extra={"record": repr(item)})
                continue
            bills.append(Bill.model_validate(item))
        return bills

    async def create(self, payload: ReceiptUpload) -> UploadResult:
        ensure_valid(payload.file.name)
        # No explicit Content-Type: httpx writes the multipart boundary itself
        response = await self._request(
            "POST",
            "/bills",
            data={"email": payload.email},
            files={"file": (payload.file.name, payload.file.content, payload.file.content_type)},
        )
        result = self._parse(UploadResult, self._json(response), response.status_code)
        if result.file_name is None:
            result.file_name = payload.file.name
        return result

    async def update(self, bill: Bill) -> Bill:
        if not bill.id:
            raise GatewayError("Cannot update a bill that has no id")
        response = await self._request("PATCH", f"/bills/{bill.id}", json=bill.to_payload())
        data = self._json(response)
        if not isinstance(data, dict):
            raise GatewayError("Invalid response from bills API", status_code=response.status_code)
        return Bill.model_validate(data)
