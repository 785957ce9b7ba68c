"""
Editor HTML Form

Renders a FormState as an HTML form and applies posted form data back onto it.

In the rendered form, group widget ids use each group's current display
position, so the ids are always contiguous (exp-company-0, exp-company-1, ...)
whatever the groups' creation indices are. read_form_data() maps ids back to
groups by that same position.

The page script removes a group after confirmation and adds empty groups from a
per-section <template>, numbering each new group with the next unused position.
"""

import re
from pathlib import Path
from typing import Any, Dict, List, Mapping, Set

from cvsite.contexts.document.defaults import DEFAULT_SECTION_TITLES
from cvsite.contexts.document.model import SectionType
from cvsite.contexts.editor.form_state import (
    GROUP_SPECS,
    REMOVE_CONFIRMATION,
    SCALAR_WIDGETS,
    SUMMARY_WIDGET_ID,
    FormState,
    GroupSpec,
    WidgetGroup,
    WidgetKind,
)
from cvsite.contexts.editor.logger import _log_debug, _log_info
from cvsite.contexts.rendering.registries import TemplateRegistry

EDITOR_TEMPLATES_PATH = Path(__file__).resolve().parent / "templates"

FORM_TEMPLATE = "form"

META_PREFIX = "meta-"

# Filled in by the page script when a group is added in the browser
INDEX_PLACEHOLDER = "__index__"
NUMBER_PLACEHOLDER = "__number__"


def _widget_view(widget_id: str, label: str, kind: str, value: str) -> Dict[str, str]:
    return {"id": widget_id, "label": label, "kind": kind, "value": value}


def _scalar_fieldsets(state: FormState) -> List[Dict[str, Any]]:
    meta_widgets = [w for w in SCALAR_WIDGETS if w.widget_id.startswith(META_PREFIX)]
    personal_widgets = [w for w in SCALAR_WIDGETS if not w.widget_id.startswith(META_PREFIX)]

    fieldsets = []
    for legend, widgets in (("Page Metadata", meta_widgets), ("Personal Information", personal_widgets)):
        fieldsets.append(
            {
                "legend": legend,
                "widgets": [
                    _widget_view(w.widget_id, w.label, w.kind, state.get_value(w.widget_id)) for w in widgets
                ],
            }
        )

    fieldsets.append(
        {
            "legend": DEFAULT_SECTION_TITLES[SectionType.SUMMARY],
            "widgets": [
                _widget_view(
                    SUMMARY_WIDGET_ID,
                    "Professional Summary",
                    WidgetKind.TEXTAREA,
                    state.get_value(SUMMARY_WIDGET_ID),
                )
            ],
        }
    )
    return fieldsets


def _group_view(spec: GroupSpec, values: Mapping[str, str], position: Any, number: Any) -> Dict[str, Any]:
    return {
        "element_id": spec.element_id(position),
        "label": f"{spec.label} {number}",
        "widgets": [
            _widget_view(
                spec.widget_id(group_field.suffix, position),
                group_field.label,
                group_field.kind,
                values.get(group_field.key, ""),
            )
            for group_field in spec.fields
        ],
    }


def render_form(state: FormState, template_registry: TemplateRegistry = None, lang: str = "en") -> str:
    """
    Render the editor form as a standalone HTML page.

    Args:
        state: Form to render
        template_registry: Registry over the editor templates (created when None)
        lang: Page language

    Returns:
        HTML text
    """
    registry = template_registry or TemplateRegistry(EDITOR_TEMPLATES_PATH)

    group_sections = []
    for spec in GROUP_SPECS:
        groups = state.groups[spec.section_type]
        group_sections.append(
            {
                "legend": DEFAULT_SECTION_TITLES[spec.section_type],
                "container_id": spec.container_id,
                "item_label": spec.label,
                "groups": [
                    _group_view(spec, group.values, position, position + 1) for position, group in enumerate(groups)
                ],
                "blank": _group_view(spec, {}, INDEX_PLACEHOLDER, NUMBER_PLACEHOLDER),
            }
        )

    name = state.get_value("name")
    template = registry.get_template(FORM_TEMPLATE)
    return template.render(
        lang=lang,
        page_title=f"Resume Editor - {name}" if name else "Resume Editor",
        fieldsets=_scalar_fieldsets(state),
        group_sections=group_sections,
        remove_confirmation=REMOVE_CONFIRMATION,
        index_placeholder=INDEX_PLACEHOLDER,
        number_placeholder=NUMBER_PLACEHOLDER,
    ) + "\n"


def _posted_positions(spec: GroupSpec, data: Mapping[str, Any]) -> Set[int]:
    suffixes = "|".join(re.escape(group_field.suffix) for group_field in spec.fields)
    pattern = re.compile(rf"^{re.escape(spec.prefix)}-(?:{suffixes})-(\d+)$")

    positions = set()
    for key in data:
        match = pattern.match(key)
        if match:
            positions.add(int(match.group(1)))
    return positions


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        # Multi-valued posts keep the last value
        return str(value[-1]) if value else ""
    return str(value)


def _apply_group(group: WidgetGroup, position: int, data: Mapping[str, Any]) -> None:
    for group_field in group.spec.fields:
        widget_id = group.spec.widget_id(group_field.suffix, position)
        if widget_id in data:
            group.set(group_field.key, _as_text(data[widget_id]))
        else:
            # Absent widget: the serializer falls back to the original item value
            group.values.pop(group_field.key, None)


def read_form_data(state: FormState, data: Mapping[str, Any]) -> FormState:
    """
    Apply posted form data (widget id -> text) onto a form.

    Scalar widgets missing from the data keep their current value. Groups are
    matched by display position: a position with no posted widgets means the
    group was removed in the browser; positions past the current groups are new
    items. Posting a group without some of its widgets leaves those fields to
    the original item.

    Args:
        state: Form that produced the rendered page
        data: Posted mapping of widget id -> text

    Returns:
        The updated state
    """
    for widget_id in state.scalars:
        if widget_id in data:
            state.scalars[widget_id] = _as_text(data[widget_id])

    for spec in GROUP_SPECS:
        groups = state.groups[spec.section_type]
        posted = _posted_positions(spec, data)
        current = list(groups)

        for position, group in enumerate(current):
            if position in posted:
                _apply_group(group, position, data)
            else:
                # Confirmation already happened in the browser
                groups.remove(group, confirm=lambda message: True)

        for position in sorted(p for p in posted if p >= len(current)):
            _apply_group(groups.add(), position, data)
            _log_debug(f"Added {spec.section_type} item from posted position {position}")

    _log_info(f"Applied form data ({len(data)} fields)")
    return state
