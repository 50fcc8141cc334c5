"""
Polish schemas.

Dependencies: pydantic
System role: Polish API contracts
"""

from pydantic import BaseModel


class PolishRequest(BaseModel):
    """Text segment to rewrite."""

    content: str | None = None


class PolishResponse(BaseModel):
    """
    Polish outcome.

    Attributes:
        success: Whether the rewrite succeeded
        original_content: Input text
        polished_content: Rewritten text (empty on failure)
        message: Status or user-facing error text
        original_length: Length of the input
        polished_length: Length of the output
    """

    success: bool
    original_content: str
    polished_content: str
    message: str
    original_length: int
    polished_length: int

    @classmethod
    def ok(cls, original: str, polished: str) -> "PolishResponse":
        return cls(
            success=True,
            original_content=original,
            polished_content=polished,
            message="文章润色成功",
            original_length=len(original),
            polished_length=len(polished),
        )

    @classmethod
    def failed(cls, original: str | None, message: str) -> "PolishResponse":
        original = original or ""
        return cls(
            success=False,
            original_content=original,
            polished_content="",
            message=message,
            original_length=len(original),
            polished_length=0,
        )
