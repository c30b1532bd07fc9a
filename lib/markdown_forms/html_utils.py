"""HTML attribute helpers shared by the control renderer and the list collector."""

import re

# ASCII word characters only: non-ASCII letters become hyphens too
_NON_WORD_RUN_RE = re.compile(r"[^\w]+", re.ASCII)


def escapeQuotes(text: str) -> str:
    """Escape double quotes so text can be used inside an attribute value."""
    return text.replace('"', "&quot;")


def unescapeQuotes(text: str) -> str:
    return text.replace("&quot;", '"')


def attr(name: str, value: str, force: bool = False) -> str:
    """Render `` name="value"``, or an empty string when value is empty and not forced."""
    if not value and not force:
        return ""
    return f' {name}="{escapeQuotes(value)}"'


def deriveId(name: str) -> str:
    """Derive an element id from a control name.

    The name is lower-cased and every run of non-word characters is
    collapsed into a single hyphen, e.g. ``Name With Spaces`` becomes
    ``name-with-spaces``.
    """
    if not name:
        return ""
    return _NON_WORD_RUN_RE.sub("-", name.lower())


def joinClasses(*classes: str) -> str:
    """Join non-empty css class names with single spaces."""
    return " ".join(cls for cls in classes if cls)
