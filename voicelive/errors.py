"""Shared error types for the Voice Live relay."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ConfigurationError(Exception):
    """Raised when a required upstream setting is missing or malformed."""

    setting: str
    reason: str

    def __str__(self) -> str:
        return f"{self.setting} {self.reason}"


__all__ = ["ConfigurationError"]
