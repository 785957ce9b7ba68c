"""
Editor Context

Responsibilities:
- Projects a resume document into form widgets (one widget group per list item)
- Serializes the widgets back into a new document, keeping unexposed fields
- Renders the form as HTML and reads posted form data
- Exports generated JSON (file, display, clipboard)

Owns: Widget identifier scheme, form state, JSON export
Never: Renders the read-only resume page
"""

from cvsite.contexts.editor.editor_session import EditorSession
from cvsite.contexts.editor.export import ExportResult, export_json, publish_json
from cvsite.contexts.editor.form_html import read_form_data, render_form
from cvsite.contexts.editor.form_state import FormState, GroupList, WidgetGroup
from cvsite.contexts.editor.projector import project
from cvsite.contexts.editor.roundtrip import RoundtripResult, validate_roundtrip
from cvsite.contexts.editor.serializer import serialize

__all__ = [
    # Form
    "FormState",
    "GroupList",
    "WidgetGroup",
    "project",
    "serialize",
    "render_form",
    "read_form_data",
    # Export
    "export_json",
    "publish_json",
    "ExportResult",
    # Validation
    "validate_roundtrip",
    "RoundtripResult",
    # Front end
    "EditorSession",
]
