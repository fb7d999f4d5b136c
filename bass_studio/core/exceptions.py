from __future__ import annotations

from typing import Any


class DomainConstraintViolation(ValueError):
    """A parameter lies outside the domain where the Bass closed form is defined."""

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{field}={value!r}: {reason}")


class UnknownParameter(KeyError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(field)

    def __str__(self) -> str:
        return f"Unknown model parameter: {self.field!r}"
