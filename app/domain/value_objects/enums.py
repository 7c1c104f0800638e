"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class UpdateMode(str, Enum):
    FULL = "full"
    PARTIAL = "partial"
