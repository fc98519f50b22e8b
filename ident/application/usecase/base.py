"""Use case contract."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One application operation, driven by a request model."""

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        """Run the operation."""
