"""
Link Classifier for Markdown Forms

Decides whether the text of a markdown link describes a form control.
Two syntaxes are recognized, label before the marker and label after it:

    [Label Text ?type?flags](name "css classes")
    [?type?flags Label Text](name "css classes")

Flags are optional and must appear in this order:

    *   required
    X   checked
    H   hidden (implies disabled)
    M   modern list markup for checklist / radiolist
"""

import logging
import re
from typing import Optional

from .models import (
    NO_NAME,
    UNNAMED_TYPES,
    VALUE_FROM_LABEL_TYPES,
    ControlType,
    ParsedControl,
)

logger = logging.getLogger(__name__)


class LinkClassifier:
    """Parses link text into a ParsedControl."""

    LABEL_FIRST_RE = re.compile(r"^(.*?)\s*\?([^?\s]*)\?(\*?)(X?)(H?)(M?)$")
    LABEL_AFTER_RE = re.compile(r"^\?([^?\s]*)\?(\*?)(X?)(H?)(M?)\s*(.*)$")

    def classify(self, destination: str, title: Optional[str], text: str) -> Optional[ParsedControl]:
        """
        Classify a markdown link.

        Args:
            destination: Link destination, used as the control name
            title: Link title, used as the css class
            text: Rendered link text

        Returns:
            ParsedControl if the text matches the forms grammar, None otherwise
        """
        match = self.LABEL_FIRST_RE.fullmatch(text)
        if match:
            label, controlType, required, checked, hidden, modern = match.groups()
            labelFirst = True
        else:
            match = self.LABEL_AFTER_RE.fullmatch(text)
            if not match:
                return None
            controlType, required, checked, hidden, modern, label = match.groups()
            labelFirst = False

        return self._applyTypeRules(
            label=label,
            controlType=controlType,
            required=bool(required),
            checked=bool(checked),
            hidden=bool(hidden),
            modern=bool(modern),
            name=destination or "",
            cssClass=title or "",
            labelFirst=labelFirst,
        )

    def _applyTypeRules(
        self,
        label: str,
        controlType: str,
        required: bool,
        checked: bool,
        hidden: bool,
        modern: bool,
        name: str,
        cssClass: str,
        labelFirst: bool,
    ) -> ParsedControl:
        """Apply the type specific overrides to freshly parsed fields."""
        value = ""
        if controlType in VALUE_FROM_LABEL_TYPES:
            value = label
            label = ""
        elif controlType in (ControlType.CHECKBOX, ControlType.RADIO):
            value = "checked"

        if controlType not in UNNAMED_TYPES:
            name = name or label

        if controlType == ControlType.SUBMIT and hidden:
            # Hidden or disabled submit buttons break native form validation
            logger.debug("Ignoring hidden flag on submit control")
            hidden = False

        if name == NO_NAME:
            name = ""

        return ParsedControl(
            labelText=label,
            controlType=controlType,
            required=required,
            checked=checked,
            hidden=hidden,
            modern=modern,
            name=name,
            cssClass=cssClass,
            labelFirst=labelFirst,
            value=value,
        )
