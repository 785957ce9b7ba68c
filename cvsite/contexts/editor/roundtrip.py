"""
Roundtrip Validation

Checks that projecting a document into the form and serializing it back, with
no edits in between, reproduces the document. The only allowed change is the
removal of blank lines from list fields edited one-item-per-line (skills,
achievements), which the line-split rule always drops.
"""

import copy
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List

from omegaconf import DictConfig

from cvsite.contexts.document.model import ResumeDocument
from cvsite.contexts.editor.form_state import GROUP_SPECS, WidgetKind
from cvsite.contexts.editor.logger import log_roundtrip_result
from cvsite.contexts.editor.projector import project
from cvsite.contexts.editor.serializer import serialize
from cvsite.utils.text_processing import compare_structured, is_blank


@dataclass
class RoundtripResult:
    """Result from validate_roundtrip()."""

    success: bool
    diffs: List[str] = field(default_factory=list)
    num_diffs: int = 0
    time_ms: float = 0.0


def drop_blank_lines(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Copy of a raw document with blank entries removed from line-split list fields.

    This is the expected output of a no-edit project/serialize cycle.
    """
    expected = copy.deepcopy(data)
    sections = expected.get("sections")
    if not isinstance(sections, list):
        return expected

    line_fields = {
        spec.section_type: [f.key for f in spec.fields if f.kind == WidgetKind.LINES] for spec in GROUP_SPECS
    }
    seen = set()
    for section in sections:
        if not isinstance(section, dict):
            continue
        section_type = section.get("type")
        # Only the first section of a type goes through the form
        if section_type not in line_fields or section_type in seen:
            continue
        seen.add(section_type)
        for item in section.get("items") or []:
            if not isinstance(item, dict):
                continue
            for key in line_fields[section_type]:
                if isinstance(item.get(key), list):
                    item[key] = [line for line in item[key] if not is_blank(line)]
    return expected


def validate_roundtrip(document: ResumeDocument, settings: DictConfig = None) -> RoundtripResult:
    """
    Validate the project -> serialize roundtrip for a document.

    Args:
        document: Document to check
        settings: Settings for the missing-section policy

    Returns:
        RoundtripResult with every structural difference found
    """
    start_time = time.time()

    state = project(document, settings=settings)
    roundtrip = serialize(state, document, settings=settings)
    diffs, num_diffs = compare_structured(drop_blank_lines(document.data), roundtrip.data)

    result = RoundtripResult(
        success=num_diffs == 0,
        diffs=diffs,
        num_diffs=num_diffs,
        time_ms=(time.time() - start_time) * 1000,
    )
    log_roundtrip_result(result)
    return result
