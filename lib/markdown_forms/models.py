"""Data models for the markdown forms engine."""

from dataclasses import dataclass
from enum import StrEnum


class ControlType(StrEnum):
    """Control types with special handling.

    Any other type token found in a link is passed through verbatim as the
    HTML ``type`` attribute of an ``<input>`` element.
    """

    TEXT = ""
    SELECT = "select"
    CHECKLIST = "checklist"
    RADIOLIST = "radiolist"
    TEXTAREA = "textarea"
    LABEL = "label"
    SUBMIT = "submit"
    BUTTON = "button"
    HIDDEN = "hidden"
    CHECKBOX = "checkbox"
    RADIO = "radio"


# Types which capture the markdown list following the declaring link
GROUP_TYPES = frozenset({ControlType.SELECT, ControlType.CHECKLIST, ControlType.RADIOLIST})

# Types whose label text is submitted as the control value
VALUE_FROM_LABEL_TYPES = frozenset({ControlType.SUBMIT, ControlType.BUTTON, ControlType.HIDDEN})

# Types which never take their name from the label text
UNNAMED_TYPES = frozenset({ControlType.SUBMIT, ControlType.BUTTON, ControlType.LABEL})

# Input type used for each option of a checklist / radiolist
OPTION_INPUT_TYPES = {
    ControlType.CHECKLIST: "checkbox",
    ControlType.RADIOLIST: "radio",
}

# Name value which suppresses the name and id attributes
NO_NAME = "-"


@dataclass(frozen=True)
class ParsedControl:
    """A form control recognized in the text of a markdown link.

    Attributes:
        labelText: Visible label, empty for submit/button/hidden
        controlType: Type token found between the ``?`` markers
        required: ``*`` flag
        checked: ``X`` flag
        hidden: ``H`` flag (never set for submit)
        modern: ``M`` flag, list-item markup for checklist/radiolist
        name: Control name, empty when suppressed with ``-``
        cssClass: Explicit css class taken from the link title
        labelFirst: Whether the label preceded the marker in the link text
        value: Value attribute for submit/button/hidden/checkbox/radio
    """

    labelText: str
    controlType: str
    required: bool = False
    checked: bool = False
    hidden: bool = False
    modern: bool = False
    name: str = ""
    cssClass: str = ""
    labelFirst: bool = True
    value: str = ""

    @property
    def disabled(self) -> bool:
        """Hidden fields are disabled so they take no part in native validation."""
        return self.hidden

    @property
    def isGroup(self) -> bool:
        return self.controlType in GROUP_TYPES


@dataclass
class CollectorState:
    """State of an armed list collector.

    Attributes:
        pending: Markup emitted once the captured list closes
        groupType: select, checklist or radiolist
        name: Name attribute for each option input (empty for select)
        id: Id of the grouped control, prefix of modern option ids
        optionCounter: Number of options captured so far
        labelFirst: Option label placement
        modernMarkup: Render options as ``<li>`` items with explicit ids
        requiredAttr: `` required`` or empty, repeated on option inputs
        checkedAttr: `` checked`` or empty, repeated on option inputs
        listOpened: Whether the captured list has started rendering
    """

    pending: str
    groupType: str
    name: str = ""
    id: str = ""
    optionCounter: int = 0
    labelFirst: bool = True
    modernMarkup: bool = False
    requiredAttr: str = ""
    checkedAttr: str = ""
    listOpened: bool = False


@dataclass(frozen=True)
class Option:
    """One captured list item, split into visible label and submitted value."""

    label: str
    value: str
