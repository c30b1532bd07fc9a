"""
Mistune integration for Markdown Forms

This module bridges the mistune HTML renderer callbacks to a FormsSession
and provides the FormsMarkdown facade used to render whole documents.
"""

import html
import logging
import re
from typing import Any, Dict, List, Optional
from urllib.parse import unquote

import mistune
from mistune.util import escape_url

from .session import FormsSession

logger = logging.getLogger(__name__)

DEFAULT_PLUGINS: List[str] = ["table", "strikethrough"]

# `[text](words with spaces "title")`; no nested brackets, code spans or html in the text
SPACED_LINK_PATTERN = (
    r"\[(?:[^\\\[\]`<\n]|\\.)*\]"
    r"\([^\s()<>\"'][^\s()<>\"]*(?: +[^\s()<>\"'][^\s()<>\"]*)+"
    r"(?: +(?:\"[^\"\n]*\"|'[^'\n]*'))? *\)"
)

_SPACED_LINK_RE = re.compile(
    r"\[(?P<text>(?:[^\\\[\]`<\n]|\\.)*)\]"
    r"\((?P<url>[^\s()<>\"'][^\s()<>\"]*(?: +[^\s()<>\"'][^\s()<>\"]*)+)"
    r"(?: +(?:\"(?P<doubleTitle>[^\"\n]*)\"|'(?P<singleTitle>[^'\n]*)'))? *\)"
)


def parseSpacedLink(inline: mistune.InlineParser, m: re.Match[str], state: mistune.InlineState) -> Optional[int]:
    """
    Parse an inline link whose destination contains spaces.

    Returns the end position, or None to let mistune treat the opening
    bracket as text, exactly as it does for such links on its own.
    """
    start = m.start()
    if state.in_link or (start > 0 and state.src[start - 1] == "!"):
        return None

    match = _SPACED_LINK_RE.match(state.src, start)
    if match is None:
        return None

    attrs: Dict[str, Any] = {"url": escape_url(match.group("url"))}
    title = match.group("doubleTitle") or match.group("singleTitle")
    if title:
        attrs["title"] = title

    textState = state.copy()
    textState.src = match.group("text")
    textState.in_link = True
    state.append_token({"type": "link", "children": inline.render(textState), "attrs": attrs})
    return match.end()


def allowSpacesInLinks(md: mistune.Markdown) -> None:
    """
    mistune plugin accepting unescaped spaces in link destinations.

    CommonMark only accepts spaces inside destinations written in angle
    brackets, so ``[Label ??](Name With Spaces)`` would be plain text.
    The rule only sees inline content: code spans and code blocks are
    never rewritten.
    """
    md.inline.register("spaced_link", SPACED_LINK_PATTERN, parseSpacedLink, before="link")


def normalizeDestination(url: str) -> str:
    """Undo the url and entity escaping mistune applies to link destinations."""
    return html.unescape(unquote(url))


class FormsHTMLRenderer(mistune.HTMLRenderer):
    """mistune HTMLRenderer which renders form controls through a FormsSession."""

    def __init__(self, session: Optional[FormsSession] = None, escape: bool = True):
        super().__init__(escape=escape)
        self.session = session or FormsSession()

    def render_token(self, token: Dict[str, Any], state: mistune.BlockState) -> str:
        # List items render before list(), so the session learns about the list here
        if token["type"] == "list":
            self.session.openList()
        return super().render_token(token, state)

    def link(self, text: str, url: str, title: Optional[str] = None) -> str:
        out = self.session.link(normalizeDestination(url), html.unescape(title) if title else "", text)
        if out is None:
            return super().link(text, url, title)
        return out

    def list_item(self, text: str) -> str:
        out = self.session.listItem(text)
        if out is None:
            return super().list_item(text)
        return out

    def list(self, text: str, ordered: bool, **attrs: Any) -> str:
        out = self.session.list(text, ordered)
        if out is None:
            return super().list(text, ordered, **attrs)
        return out

    def paragraph(self, text: str) -> str:
        out = self.session.paragraph(text)
        if out is None:
            return super().paragraph(text)
        return out


class FormsMarkdown:
    """
    Markdown to HTML converter with form controls support.

    Options (all optional):
        escape: Escape raw HTML in the source (default True)
        plugins: mistune plugin names (default table and strikethrough)
        allow_spaces_in_links: Accept spaces in link destinations (default True)
    """

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        self.options = options or {}

        self.escape = bool(self.options.get("escape", True))
        self.plugins = list(self.options.get("plugins", DEFAULT_PLUGINS))
        self.allowSpacesInLinks = bool(self.options.get("allow_spaces_in_links", True))

        plugins: List[Any] = list(self.plugins)
        if self.allowSpacesInLinks:
            plugins.append(allowSpacesInLinks)

        self.renderer = FormsHTMLRenderer(escape=self.escape)
        self._markdown = mistune.create_markdown(renderer=self.renderer, plugins=plugins)

    def render(self, text: str) -> str:
        """
        Render a markdown document to HTML.

        Args:
            text: Markdown source

        Returns:
            HTML string

        Raises:
            UnsupportedNestingError: If grouped controls are nested
        """
        session = FormsSession()
        self.renderer.session = session

        result = session.finish(self._markdown(text))
        logger.debug(f"Rendered document with {session.controlsRendered} form control(s)")
        return result


def markdownToHtml(text: str, **options) -> str:
    """
    Convert markdown text with form controls to HTML.

    Args:
        text: Markdown text to convert
        **options: FormsMarkdown options

    Returns:
        HTML string
    """
    return FormsMarkdown(options).render(text)
