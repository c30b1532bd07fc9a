"""
Markdown Forms Exceptions

This module contains the exception classes raised by the markdown forms
rendering engine.
"""

from typing import Optional


class MarkdownFormsError(Exception):
    """Base exception class for all markdown forms errors."""


class UnsupportedNestingError(MarkdownFormsError):
    """Raised when a grouped control is declared inside another group's option list.

    Grouped controls (select, checklist, radiolist) capture the list items
    that follow them. A second grouped control appearing while the first one
    is still capturing options would silently overwrite the captured state.

    Attributes:
        outerType: Group type of the control which is currently capturing
        innerType: Group type of the control which tried to start a new group
    """

    def __init__(self, outerType: str, innerType: str, message: Optional[str] = None) -> None:
        if message is None:
            message = f"Cannot start a '{innerType}' group inside the option list of a '{outerType}' group"
        super().__init__(message)
        self.outerType = outerType
        self.innerType = innerType
