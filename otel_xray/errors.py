"""otel_xray error hierarchy and exceptions."""

from __future__ import annotations


class XRayTranslationError(Exception):
    """Base exception for all otel_xray errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class InvalidIdentifierError(XRayTranslationError):
    """Raised when a trace or span identifier has the wrong length or is all zero."""

    def __init__(self, message: str, kind: str, length: int):
        super().__init__(message, {"kind": kind, "length": length})
        self.kind = kind
        self.length = length

    def __str__(self) -> str:
        return f"{self.message} (got {self.length}-byte {self.kind})"


class ConfigError(XRayTranslationError):
    """Raised when configuration is invalid or cannot be read."""
    pass
