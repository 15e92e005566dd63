"""Response envelope wrapping every successful payload as {data, code, message}."""

from typing import Generic, TypeVar

from pydantic import BaseModel

from app.core.errors import SUCCESS_CODE, SUCCESS_MESSAGE

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    data: T | None = None
    code: int = SUCCESS_CODE
    message: str = SUCCESS_MESSAGE


def ok(data: T | None = None) -> Envelope[T]:
    """Wrap a payload in a success envelope."""
    return Envelope(data=data)
