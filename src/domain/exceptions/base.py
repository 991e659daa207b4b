"""Base domain exception."""

from typing import Any, Dict


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Carries a stable machine-readable code and optional details
    that the API layer returns alongside the message.
    """

    def __init__(
        self,
        message: str,
        code: str = "DOMAIN_ERROR",
        details: Dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"
