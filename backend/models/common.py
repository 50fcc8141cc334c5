"""
Response shapes shared across routers.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, computed_field

T = TypeVar("T")


class ListResult(BaseModel, Generic[T]):
    """
    One page of a paginated listing, shaped like the CMS list result the
    widgets already consume.

    Attributes:
        page: 1-based page number
        size: Page size
        total: Total matching rows
        items: Rows on this page
    """

    page: int
    size: int
    total: int
    items: list[T]

    @computed_field
    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 1
        return max(1, -(-self.total // self.size))

    @computed_field
    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @computed_field
    @property
    def has_previous(self) -> bool:
        return self.page > 1


class OperationResult(BaseModel):
    """Outcome of an action reported as a success flag plus message."""

    success: bool
    message: str
