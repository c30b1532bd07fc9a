"""
Control Renderer for Markdown Forms

Generates the HTML fragment for a single parsed control, and for each
option of a grouped control. Attribute order and omission rules are fixed:
an attribute is emitted only when its value is non-empty, except option
values which are always emitted.
"""

import logging

from .collector import ListCollector
from .exceptions import UnsupportedNestingError
from .html_utils import attr, deriveId, joinClasses
from .models import (
    OPTION_INPUT_TYPES,
    CollectorState,
    ControlType,
    Option,
    ParsedControl,
)

logger = logging.getLogger(__name__)

HIDDEN_STYLE = ' style="display:none;"'


class ControlRenderer:
    """Renders ParsedControl instances, arming the list collector for grouped types."""

    def __init__(self, collector: ListCollector):
        self.collector = collector

    def render(self, control: ParsedControl) -> str:
        """
        Render a form control.

        Any markup still pending from a grouped control whose list never
        arrived is emitted first.

        Args:
            control: Parsed control to render

        Returns:
            HTML fragment

        Raises:
            UnsupportedNestingError: If a grouped control appears inside the
                option list of another grouped control
        """
        if control.isGroup and self.collector.isCapturing:
            raise UnsupportedNestingError(self.collector.state.groupType, control.controlType)

        hidden = HIDDEN_STYLE if control.hidden else ""
        disabled = " disabled" if control.disabled else ""
        required = " required" if control.required else ""
        checked = " checked" if control.checked else ""
        css = joinClasses("required" if control.required else "", control.cssClass)
        elementId = deriveId(control.name)
        classicGroup = control.controlType in OPTION_INPUT_TYPES and not control.modern

        label = ""
        if control.labelText:
            labelFor = "" if classicGroup else elementId
            label = f"\n<label{hidden}{attr('for', labelFor)}{attr('class', css)}>{control.labelText}</label>"

        out = self.collector.flush()

        if control.controlType == ControlType.LABEL:
            return out + label

        logger.debug(f"Rendering '{control.controlType}' control '{control.name}'")

        element = "input"
        inputType = control.controlType
        closing = ""

        if control.isGroup:
            if control.controlType == ControlType.SELECT:
                element = "select"
                closing = "</select>"
            elif control.modern:
                element = "ul"
                closing = "</ul>"
            else:
                element = ""
            self.collector.arm(
                CollectorState(
                    pending="\n" + closing + ("" if control.labelFirst else label),
                    groupType=control.controlType,
                    name="" if control.controlType == ControlType.SELECT else control.name,
                    id=elementId,
                    labelFirst=control.labelFirst,
                    modernMarkup=control.modern,
                    requiredAttr=required,
                    checkedAttr=checked,
                )
            )
            inputType = ""
        elif control.controlType == ControlType.TEXTAREA:
            element = "textarea"
            inputType = ""

        if element == "ul":
            html = f"\n<ul{hidden}{attr('id', elementId)}{attr('class', joinClasses(control.controlType, css))}>"
        elif element:
            html = (
                f"\n<{element}{hidden}{disabled}{required}{checked}"
                f"{attr('type', inputType)}"
                f"{attr('name', control.name)}"
                f"{attr('value', control.value)}"
                f"{attr('id', elementId)}"
                f"{attr('class', css)}>"
            )
            if element == "textarea":
                html += "</textarea>"
        else:
            html = ""

        if control.labelFirst:
            return out + label + html
        if self.collector.isArmed:
            # Label is emitted after the options, as part of the pending markup
            return out + html
        return out + html + label

    def renderOption(self, state: CollectorState, option: Option) -> str:
        """Render one option of an armed grouped control."""
        if state.groupType == ControlType.SELECT:
            return f"\n<option{attr('name', state.name)}{attr('value', option.value, True)}>{option.label}</option>"

        inputType = OPTION_INPUT_TYPES[state.groupType]
        flags = state.requiredAttr + state.checkedAttr

        if state.modernMarkup:
            optionId = f"{state.id}-{state.optionCounter}" if state.id else ""
            label = ""
            if option.label:
                label = f"\n<label{attr('class', inputType)}{attr('for', optionId)}>{option.label}</label>"
            html = (
                f"<input{attr('id', optionId)}{flags}{attr('type', inputType)}"
                f"{attr('name', state.name)}{attr('value', option.value, True)}>"
            )
            inner = label + html if state.labelFirst else html + label
            return f"<li{attr('class', inputType)}>{inner}</li>"

        html = f"<input{flags}{attr('type', inputType)}{attr('name', state.name)}{attr('value', option.value, True)}>"
        if not option.label:
            return html
        inner = option.label + html if state.labelFirst else html + option.label
        return f"\n<label{attr('class', inputType)}>{inner}</label>"
