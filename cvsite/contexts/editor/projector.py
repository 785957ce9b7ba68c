"""
Form Projector

Maps a ResumeDocument into editor widgets: scalar fields to single-value
widgets, list-typed sections to one widget group per item. Re-projecting
clears every group list first, so reloading never leaves stale groups behind.
"""

from typing import Optional

from omegaconf import DictConfig

from cvsite.contexts.document.defaults import MissingSectionPolicy, get_missing_section_policy
from cvsite.contexts.document.exceptions import MissingSectionError
from cvsite.contexts.document.model import ResumeDocument, ResumeSection, SectionType
from cvsite.contexts.editor.form_state import GROUP_SPECS, SCALAR_WIDGETS, SUMMARY_WIDGET_ID, FormState
from cvsite.contexts.editor.logger import _log_warning, log_projection_result


def lookup_section(
    document: ResumeDocument, section_type: str, settings: DictConfig = None
) -> Optional[ResumeSection]:
    """
    Find the first section of a type, applying the missing-section policy.

    Returns:
        The section, or None when absent under the "skip" policy

    Raises:
        MissingSectionError: When absent under the "error" policy
    """
    section = document.get_section(section_type)
    if section is None:
        if get_missing_section_policy(settings, section_type) == MissingSectionPolicy.ERROR:
            raise MissingSectionError(section_type)
        _log_warning(f"No '{section_type}' section in document, leaving its widgets empty")
    return section


def project(document: ResumeDocument, state: FormState = None, settings: DictConfig = None) -> FormState:
    """
    Populate form widgets from a document.

    The document is only read; widget groups keep deep copies of their items.

    Args:
        document: Document to edit
        state: Existing form to repopulate (a new FormState when None)
        settings: Settings for the missing-section policy

    Returns:
        The populated FormState

    Raises:
        MissingSectionError: A section is absent and its policy is "error"
    """
    if state is None:
        state = FormState()

    state.clear_groups()

    for widget in SCALAR_WIDGETS:
        state.scalars[widget.widget_id] = widget.read(document.data)

    summary = lookup_section(document, SectionType.SUMMARY, settings)
    state.scalars[SUMMARY_WIDGET_ID] = summary.content if summary is not None else ""

    for spec in GROUP_SPECS:
        section = lookup_section(document, spec.section_type, settings)
        if section is None:
            continue
        groups = state.groups[spec.section_type]
        for item in section.raw_items:
            groups.add(item, projected=True)

    log_projection_result(state.item_counts())
    return state
