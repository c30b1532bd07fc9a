"""
Markdown Forms

Generates HTML form controls from markdown links and lists, on top of
the mistune markdown renderer.

Syntax:
    [Label Text ?type?flags](name "css classes")
    [?type?flags Label Text](name "css classes")

A select, checklist or radiolist control takes its options from the
markdown list that follows it. A trailing quoted string in a list item
is the submitted value.

Example:
    >>> from lib.markdown_forms import markdownToHtml
    >>>
    >>> markdownToHtml("[Email ?email?*](email)")
    '<p>\\n<label for="email" class="required">Email</label>...'
    >>>
    >>> source = '''
    ... [Carrier ?select?](carrier)
    ...
    ... - Please select ""
    ... - T-Mobile "TMO"
    ... - Verizon
    ... '''
    >>> html = markdownToHtml(source)
"""

from .classifier import LinkClassifier
from .collector import ListCollector, splitOption
from .exceptions import MarkdownFormsError, UnsupportedNestingError
from .markdown import FormsHTMLRenderer, FormsMarkdown, allowSpacesInLinks, markdownToHtml
from .models import CollectorState, ControlType, Option, ParsedControl
from .renderer import ControlRenderer
from .session import FormsSession

__version__ = "1.0.0"
__all__ = [
    "LinkClassifier",
    "ListCollector",
    "splitOption",
    "ControlRenderer",
    "FormsSession",
    "FormsHTMLRenderer",
    "FormsMarkdown",
    "allowSpacesInLinks",
    "markdownToHtml",
    "ControlType",
    "ParsedControl",
    "CollectorState",
    "Option",
    "MarkdownFormsError",
    "UnsupportedNestingError",
]
