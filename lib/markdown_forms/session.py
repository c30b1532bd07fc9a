"""Render session tying the classifier, collector and control renderer together."""

import logging
import re
from html import escape
from typing import Optional

from .classifier import LinkClassifier
from .collector import ListCollector
from .models import CollectorState, Option
from .renderer import ControlRenderer

logger = logging.getLogger(__name__)

# `[??]("cssname")`: a title with no name before it
_QUOTED_ONLY_DESTINATION_RE = re.compile(r'"[^"]*"')


class FormsSession:
    """
    Forms state for one document render.

    Host adapters call the callback methods in document order. Each of them
    returns the replacement markup, or None when the host should use its
    default rendering. A new session (or a call to reset()) is needed for
    every document, otherwise an unterminated group leaks into the next one.
    """

    def __init__(self):
        self.classifier = LinkClassifier()
        self.collector = ListCollector(self._renderOption)
        self.renderer = ControlRenderer(self.collector)
        self.controlsRendered = 0

    def _renderOption(self, state: CollectorState, option: Option) -> str:
        return self.renderer.renderOption(state, option)

    def reset(self) -> None:
        self.collector.reset()
        self.controlsRendered = 0

    def link(self, destination: str, title: Optional[str], text: str) -> Optional[str]:
        control = self.classifier.classify(destination, title, text)
        if control is None:
            return None
        if not title and _QUOTED_ONLY_DESTINATION_RE.fullmatch(destination):
            logger.debug(f"Leaving '[{text}]({destination})' as text, the link has no name")
            return f"[{text}]({escape(destination)})"
        self.controlsRendered += 1
        return self.renderer.render(control)

    def openList(self) -> None:
        """Called before the items of any list render."""
        self.collector.onListOpen()

    def listItem(self, text: str) -> Optional[str]:
        return self.collector.onListItem(text)

    def list(self, body: str, ordered: bool = False) -> Optional[str]:
        return self.collector.onListClose(body)

    def paragraph(self, text: str) -> Optional[str]:
        return self.collector.onParagraph(text)

    def finish(self, html: str) -> str:
        """
        Finish the document.

        Markup still pending from a grouped control without a following list
        is appended so the document does not end inside an open element.
        """
        if self.collector.isArmed:
            state = self.collector.state
            logger.warning(f"No option list found for {state.groupType} '{state.name or state.id}'")
            html += self.collector.flush()
        return html
