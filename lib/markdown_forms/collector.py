"""
List Collector for Markdown Forms

A two state machine (disarmed / armed) which captures the markdown list
following a select, checklist or radiolist control. While armed it
intercepts paragraph, list item and list rendering callbacks of the host
renderer, turns each list item into one option and flushes the pending
closing markup when the list closes.

Every transition returns either the replacement markup or None, meaning
the host renderer should fall back to its default rendering.
"""

import logging
import re
from typing import Callable, Optional

from .exceptions import UnsupportedNestingError
from .html_utils import escapeQuotes, unescapeQuotes
from .models import CollectorState, Option

logger = logging.getLogger(__name__)

OptionRenderer = Callable[[CollectorState, Option], str]

_QUOTED_VALUE_RE = re.compile(r'^(.*)\s+"([^"]*)"\s*$')


def splitOption(text: str) -> Option:
    """
    Split list item text into label and value.

    A trailing quoted segment is the submitted value: ``T-Mobile "TMO"``
    gives label ``T-Mobile`` and value ``TMO``. Without one, label and value
    are both the whole item text. Quotes are unescaped before matching and
    escaped again afterwards, so pre-escaped quotes round-trip.
    """
    match = _QUOTED_VALUE_RE.fullmatch(unescapeQuotes(text))
    if not match:
        return Option(label=text, value=text)
    return Option(label=escapeQuotes(match.group(1)), value=escapeQuotes(match.group(2)))


class ListCollector:
    """Captures list items into grouped control options."""

    def __init__(self, optionRenderer: OptionRenderer):
        """
        Initialize the collector in the disarmed state.

        Args:
            optionRenderer: Callable producing the markup of one option
        """
        self._optionRenderer = optionRenderer
        self._state: Optional[CollectorState] = None

    @property
    def isArmed(self) -> bool:
        return self._state is not None

    @property
    def hasOptions(self) -> bool:
        """Whether the armed group has already captured at least one option."""
        return self._state is not None and self._state.optionCounter > 0

    @property
    def isCapturing(self) -> bool:
        """Whether the option list of the armed group has started, even if no item has closed yet."""
        return self._state is not None and (self._state.listOpened or self._state.optionCounter > 0)

    @property
    def state(self) -> Optional[CollectorState]:
        return self._state

    def arm(self, state: CollectorState) -> None:
        """Disarmed -> Armed."""
        if self._state is not None:
            raise UnsupportedNestingError(self._state.groupType, state.groupType)
        logger.debug(f"Capturing options for {state.groupType} '{state.name or state.id}'")
        self._state = state

    def flush(self) -> str:
        """Armed -> Disarmed, returning the pending markup (empty when disarmed)."""
        if self._state is None:
            return ""
        pending = self._state.pending
        logger.debug(f"Closing {self._state.groupType} after {self._state.optionCounter} option(s)")
        self._state = None
        return pending

    def reset(self) -> None:
        """Drop any captured state without emitting it."""
        self._state = None

    def onListOpen(self) -> None:
        """Mark the start of the captured list, before any of its items render."""
        if self._state is None or self._state.listOpened:
            return
        logger.debug(f"Option list of {self._state.groupType} '{self._state.name or self._state.id}' started")
        self._state.listOpened = True

    def onParagraph(self, text: str) -> Optional[str]:
        """Unwrap paragraphs inside the captured list."""
        if self._state is None:
            return None
        return text

    def onListItem(self, text: str) -> Optional[str]:
        """Render one captured list item as an option."""
        if self._state is None:
            return None
        option = splitOption(text.rstrip("\n"))
        self._state.optionCounter += 1
        return self._optionRenderer(self._state, option)

    def onListClose(self, body: str) -> Optional[str]:
        """Append the pending closing markup to the captured options and disarm."""
        if self._state is None:
            return None
        return body + self.flush()
