"""Explicit outcome of an awaited gateway call"""

from dataclasses import dataclass
from typing import Awaitable, Generic, Optional, TypeVar

from billed.core.exceptions import GatewayError

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Either value (call succeeded) or error (call failed), never both."""
    value: Optional[T] = None
    error: Optional[GatewayError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: GatewayError) -> "Outcome[T]":
        return cls(error=error)


async def capture(call: Awaitable[T]) -> Outcome[T]:
    """Await a gateway call and fold a GatewayError into the outcome."""
    try:
        return Outcome.success(await call)
    except GatewayError as e:
        return Outcome.failure(e)
