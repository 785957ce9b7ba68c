"""
Form Serializer

Rebuilds a ResumeDocument from the editor widgets.

Serialization starts from a deep copy of the base document and overwrites only
what the form controls, so unexposed fields (meta.social.imageUrl, all of
meta.structuredData, unknown sections, extra item keys) pass through untouched.
List items are rebuilt in current display order from the surviving widget groups;
creation-time indices play no part.

Write rule for every form-controlled key: the key is written when the target
already has it or when the widget holds a value. Empty widgets therefore never
add keys the base document did not have, and an empty widget over a null value
keeps the null.
"""

import copy
from typing import Any, Dict, List, Optional, Tuple

from omegaconf import DictConfig

from cvsite.contexts.document.defaults import (
    MissingSectionPolicy,
    get_empty_section,
    get_missing_section_policy,
)
from cvsite.contexts.document.exceptions import MissingSectionError
from cvsite.contexts.document.model import ResumeDocument, SectionType
from cvsite.contexts.editor.form_state import (
    GROUP_SPECS,
    SCALAR_WIDGETS,
    SUMMARY_WIDGET_ID,
    FormState,
    GroupSpec,
    WidgetGroup,
    WidgetKind,
)
from cvsite.contexts.editor.logger import _log_debug, _log_info
from cvsite.utils.text_processing import split_lines


def _has_value(value: Any) -> bool:
    return value not in ("", None) and value != []


def assign(target: Dict[str, Any], key: str, value: Any) -> None:
    """Write a form-controlled value following the module's write rule."""
    if key in target:
        if target[key] is None and not _has_value(value):
            return
        target[key] = value
    elif _has_value(value):
        target[key] = value


def assign_path(data: Dict[str, Any], path: Tuple[str, ...], value: Any) -> None:
    """
    Write a value at a nested path following the write rule.

    Intermediate objects are created only when there is a value to write.
    """
    target = data
    for key in path[:-1]:
        child = target.get(key)
        if not isinstance(child, dict):
            if not _has_value(value):
                return
            child = {}
            target[key] = child
        target = child
    assign(target, path[-1], value)


def empty_item(spec: GroupSpec) -> Dict[str, Any]:
    """All-empty item with every key of the section's item shape."""
    return {group_field.key: [] if group_field.kind == WidgetKind.LINES else "" for group_field in spec.fields}


def serialize_group(group: WidgetGroup) -> Dict[str, Any]:
    """
    Build one list item from a widget group.

    A projected group starts from a copy of its loaded item and follows the
    write rule. A group added in the editor starts from an all-empty item and
    writes every field, so it always has the full item shape. A field whose
    widget is missing from the group keeps the starting value.

    Args:
        group: Widget group handle

    Returns:
        Item object for the section's items array
    """
    if group.projected:
        item = copy.deepcopy(group.origin)
    else:
        item = empty_item(group.spec)
        item.update(copy.deepcopy(group.origin))

    for group_field in group.spec.fields:
        if group_field.key not in group.values:
            _log_debug(f"{group.widget_id(group_field.key)} missing, keeping original value")
            continue
        text = group.values[group_field.key]
        value = split_lines(text) if group_field.kind == WidgetKind.LINES else text
        if group.projected:
            assign(item, group_field.key, value)
        else:
            item[group_field.key] = value
    return item


def _first_section_index(sections: List[Any], section_type: str) -> Optional[int]:
    for position, section in enumerate(sections):
        if isinstance(section, dict) and section.get("type") == section_type:
            return position
    return None


def _target_section(
    sections: List[Any], section_type: str, has_content: bool, settings: DictConfig
) -> Optional[Dict[str, Any]]:
    """
    Find the section object to write into.

    An absent section raises under the "error" policy. Under "skip" it is created
    (with its default title) when the form holds content for it, else left out.
    """
    position = _first_section_index(sections, section_type)
    if position is not None:
        return sections[position]

    if get_missing_section_policy(settings, section_type) == MissingSectionPolicy.ERROR:
        raise MissingSectionError(section_type)
    if not has_content:
        return None

    section = get_empty_section(section_type)
    sections.append(section)
    _log_info(f"Created missing '{section_type}' section for form content")
    return section


def serialize(state: FormState, base_document: ResumeDocument, settings: DictConfig = None) -> ResumeDocument:
    """
    Produce a new document from the form.

    Args:
        state: Form widgets (from project(), possibly edited)
        base_document: Document originally loaded; not modified
        settings: Settings for the missing-section policy

    Returns:
        New ResumeDocument snapshot

    Raises:
        WidgetAccessError: A scalar widget is missing from the form
        MissingSectionError: A section is absent and its policy is "error"
    """
    data = base_document.to_dict()

    for widget in SCALAR_WIDGETS:
        assign_path(data, widget.path, state.get_value(widget.widget_id))

    if not isinstance(data.get("sections"), list):
        data["sections"] = []
    sections = data["sections"]

    summary_text = state.get_value(SUMMARY_WIDGET_ID)
    summary = _target_section(sections, SectionType.SUMMARY, _has_value(summary_text), settings)
    if summary is not None:
        assign(summary, "content", summary_text)

    for spec in GROUP_SPECS:
        items = [serialize_group(group) for group in state.groups[spec.section_type]]
        section = _target_section(sections, spec.section_type, bool(items), settings)
        if section is not None:
            assign(section, "items", items)

    if not sections and "sections" not in base_document.data:
        del data["sections"]

    _log_debug(f"Serialized form ({len(sections)} sections)")
    return ResumeDocument(data)
