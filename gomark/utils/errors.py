"""
Custom exception classes for gomark.

This module defines the exception hierarchy used throughout the application
for consistent error handling and reporting.
"""

from typing import Optional


class ParsingError(Exception):
    """Base exception for gomark errors."""

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        """
        Initialize a parsing error.

        Args:
            message: The error message describing what went wrong
            recovery_hint: Optional hint on how to recover from this error
        """
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(self.message)


class HeaderError(ParsingError):
    """Exception for a package preamble that cannot be read."""

    pass


class ParserStateError(ParsingError):
    """Exception for reusing a parser whose model is already populated."""

    pass


class GoDocError(ParsingError):
    """Exception for a failed ``go doc`` invocation."""

    def __init__(
        self,
        message: str,
        output: str = "",
        recovery_hint: Optional[str] = None,
    ):
        self.output = output
        super().__init__(message, recovery_hint)


class TemplateRenderError(ParsingError):
    """Exception for template loading or rendering failures."""

    pass


class ConfigError(ParsingError):
    """Exception for unreadable or invalid configuration files."""

    pass
