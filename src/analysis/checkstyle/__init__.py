"""Checkstyle XML report support."""

from .parser import CHECKSTYLE_RULES, CheckStyleParser

__all__ = ["CHECKSTYLE_RULES", "CheckStyleParser"]
