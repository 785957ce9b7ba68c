"""
Editor Session

Editor front end orchestration: load the resume (falling back to a blank
document with a visible error), project it into the form, add and remove
items, and generate JSON from the current form.
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from omegaconf import DictConfig

from cvsite.contexts.document.defaults import get_default_document
from cvsite.contexts.document.exceptions import FetchError, MissingSectionError, ResumeParseError
from cvsite.contexts.document.loader import load_resume
from cvsite.contexts.document.session import ResumeSession
from cvsite.contexts.editor.export import ExportResult, export_json, publish_json
from cvsite.contexts.editor.form_html import read_form_data, render_form
from cvsite.contexts.editor.form_state import ConfirmFn, FormState, WidgetGroup, ask_confirmation
from cvsite.contexts.editor.logger import _log_error, _log_info, _log_warning
from cvsite.contexts.editor.projector import project
from cvsite.contexts.editor.serializer import serialize
from cvsite.utils.settings import load_settings


class EditorSession:
    """
    One editing session over one resume document.

    The loaded document stays the serialization base for the whole session;
    generate() produces new snapshots without replacing it.

    Attributes:
        settings: Merged settings
        session: Holder of the base document
        state: Current form
        confirm: Callback asked before removing an item
    """

    def __init__(
        self,
        settings: DictConfig = None,
        session: ResumeSession = None,
        confirm: ConfirmFn = None,
    ):
        self.settings = settings if settings is not None else load_settings()
        self.session = session or ResumeSession()
        self.confirm = confirm or ask_confirmation
        self.state = FormState()
        if self.session.is_loaded:
            project(self.session.document, self.state, self.settings)

    @property
    def load_error(self) -> Optional[str]:
        return self.session.load_error

    def load(self, source: Union[str, Path] = None) -> bool:
        """
        Load a resume and populate the form.

        On a fetch or parse failure the form is populated from the default
        document and the error is kept in load_error. The document and form
        are swapped in only after projection succeeds.

        Args:
            source: resume.json path or URL (defaults to settings source.resume_path)

        Returns:
            True if the resume loaded, False if the default document is in use

        Raises:
            MissingSectionError: A section is absent and its policy is "error";
                the session keeps its previous document and form
        """
        source = str(source if source is not None else self.settings.source.resume_path)
        load_error = None
        try:
            document = load_resume(source, timeout=self.settings.source.request_timeout)
        except (FetchError, ResumeParseError) as e:
            _log_error(f"Could not load resume data: {e}")
            _log_warning("Starting from an empty resume")
            document = get_default_document()
            load_error = str(e)

        try:
            state = project(document, FormState(), self.settings)
        except MissingSectionError as e:
            _log_error(f"Could not populate the form: {e}")
            raise

        self.session.replace(document, source=source if load_error is None else None)
        self.session.load_error = load_error
        self.state = state
        return load_error is None

    def add_item(self, section_type: str, item: Optional[Dict[str, Any]] = None) -> WidgetGroup:
        return self.state.add_item(section_type, item)

    def remove_item(self, section_type: str, position: int) -> bool:
        """Remove the item displayed at a position, asking self.confirm first."""
        return self.state.remove_item(section_type, position, confirm=self.confirm)

    def set_value(self, widget_id: str, value: str) -> None:
        self.state.set_value(widget_id, value)

    def render_form(self) -> str:
        return render_form(self.state, lang=self.settings.rendering.get("lang", "en"))

    def apply_form_data(self, data: Mapping[str, Any]) -> None:
        read_form_data(self.state, data)

    def generate(self, output_path: Path = None, copy: bool = None) -> ExportResult:
        """
        Serialize the form and publish the JSON.

        Args:
            output_path: File to write the JSON to (None to only return it)
            copy: Copy to the clipboard (defaults to settings editor.copy_to_clipboard)

        Returns:
            ExportResult with the text and the serialized document

        Raises:
            SessionError: If nothing was loaded
            WidgetAccessError, MissingSectionError: Serialization failures propagate
        """
        if copy is None:
            copy = self.settings.editor.copy_to_clipboard

        document = serialize(self.state, self.session.document, self.settings)
        text = export_json(document, indent=self.settings.editor.json_indent)
        result = publish_json(text, output_path=output_path, copy=copy)
        result.document = document
        _log_info(f"Generated {len(text)} characters of JSON")
        return result
