"""Shared pytest fixtures for the bills workflow tests."""

import json
from typing import List, Optional
from unittest.mock import MagicMock

import pytest

from billed.core.exceptions import GatewayError
from billed.core.session import LocalStorage, StoreSessionProvider
from billed.schemas.bill import Bill, ReceiptUpload, UploadResult


BILLS = [
    {
        "id": "47qAXb6fIm2zOKkLzMro",
        "vat": "80",
        "fileUrl": "https://test.storage.tld/v0/b/billable-677b6.a-f-1.jpg?alt=media&token=c1640e12",
        "status": "pending",
        "type": "Hôtel et logement",
        "commentary": "séminaire billed",
        "name": "encore",
        "fileName": "preview-facture-free-201801-pdf-1.jpg",
        "date": "2004-04-04",
        "amount": 400,
        "commentAdmin": "ok",
        "email": "a@a",
        "pct": 20,
    },
    {
        "id": "BeKy5Mo4jkmdfPGYpTxZ",
        "vat": "",
        "amount": 100,
        "name": "test1",
        "fileName": "1592770761.jpeg",
        "commentary": "plop",
        "pct": 20,
        "type": "Transports",
        "email": "a@a",
        "fileUrl": "https://test.storage.tld/v0/b/billable-677b6.a-61.jpeg?alt=media&token=7685cd61",
        "date": "2001-01-01",
        "status": "refused",
        "commentAdmin": "en fait non",
    },
    {
        "id": "UIUZtnPQvnbFnB0ozvJh",
        "name": "test3",
        "email": "a@a",
        "type": "Services en ligne",
        "vat": "60",
        "pct": 20,
        "commentAdmin": "bon bah d'accord",
        "amount": 300,
        "status": "accepted",
        "date": "2003-03-03",
        "commentary": "",
        "fileName": "facture-client-php-exportee.png",
        "fileUrl": "https://test.storage.tld/v0/b/billable-677b6.a-dur.png?alt=media&token=571d34cb",
    },
    {
        "id": "qcCK3SzECmaZAGRrHjaC",
        "status": "refused",
        "pct": 20,
        "amount": 200,
        "email": "a@a",
        "name": "test2",
        "vat": "40",
        "fileName": "preview-facture-free-201801-pdf-1.jpg",
        "date": "2002-02-02",
        "commentAdmin": "pas la bonne facture",
        "commentary": "test2",
        "type": "Restaurants et bars",
        "fileUrl": "https://test.storage.tld/v0/b/billable-677b6.a-f-1.jpg?alt=media&token=4df6ed2c",
    },
]


class FakeBillsGateway:
    """In-memory stand-in for the bills API, answering like the real one."""

    def __init__(self, bills: Optional[List[dict]] = None):
        self.bills = [Bill.model_validate(b) for b in (bills if bills is not None else BILLS)]
        self.list_error: Optional[GatewayError] = None
        self.create_error: Optional[GatewayError] = None
        self.update_error: Optional[GatewayError] = None
        self.created: List[ReceiptUpload] = []
        self.updated: List[Bill] = []

    async def list(self) -> List[Bill]:
        if self.list_error:
            raise self.list_error
        return list(self.bills)

    async def create(self, payload: ReceiptUpload) -> UploadResult:
        if self.create_error:
            raise self.create_error
        self.created.append(payload)
        return UploadResult(fileUrl="https://localhost:3456/images/test.jpg", key="1234")

    async def update(self, bill: Bill) -> Bill:
        if self.update_error:
            raise self.update_error
        self.updated.append(bill)
        return bill


@pytest.fixture
def employee_storage() -> LocalStorage:
    storage = LocalStorage()
    storage.set_item("user", json.dumps({"type": "Employee", "email": "employee@test.tld"}))
    return storage


@pytest.fixture
def session(employee_storage: LocalStorage) -> StoreSessionProvider:
    return StoreSessionProvider(employee_storage)


@pytest.fixture
def gateway() -> FakeBillsGateway:
    return FakeBillsGateway()


@pytest.fixture
def navigator() -> MagicMock:
    return MagicMock()
