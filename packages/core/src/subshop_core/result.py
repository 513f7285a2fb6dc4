"""Result carrier returned by every mutating repository operation."""

from __future__ import annotations

from dataclasses import dataclass

_AND_SEPARATOR = "\nand\n"


@dataclass(frozen=True, slots=True)
class Result[T]:
    """Success/failure outcome of an operation.

    ``message`` is set if and only if the result is a failure. ``data`` holds
    the produced entity (or identifier) on success and is ``None`` on failure.

    A result is truthy when it succeeded, so call sites can short-circuit::

        result = await service.create_brand(name)
        if not result:
            raise HTTPException(400, detail=result.message)
    """

    success: bool
    message: str | None = None
    data: T | None = None

    def __post_init__(self) -> None:
        if self.success and self.message is not None:
            raise ValueError("A successful result cannot carry a message")
        if not self.success:
            if not self.message:
                raise ValueError("A failed result requires a non-empty message")
            if self.data is not None:
                raise ValueError("A failed result cannot carry data")

    @classmethod
    def ok(cls, data: T | None = None) -> Result[T]:
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, message: str) -> Result[T]:
        return cls(success=False, message=message)

    def __bool__(self) -> bool:
        return self.success

    def __str__(self) -> str:
        return self.message or ""

    def is_success(self) -> bool:
        return self.success

    def unwrap_or(self, default: T) -> T | None:
        """Return ``data`` on success, otherwise *default*."""
        return self.data if self.success else default

    def and_(self, other: Result) -> Result:
        """Combine two results.

        Both succeed: plain success. Both fail: one failure carrying both
        messages in argument order. Exactly one fails: that failure, unchanged.
        """
        if self.success and other.success:
            return Result.ok()
        if not self.success and not other.success:
            return Result.fail(f"{self.message}{_AND_SEPARATOR}{other.message}")
        return other if self.success else self

    __and__ = and_
