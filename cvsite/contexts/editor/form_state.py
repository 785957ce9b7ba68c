"""
Form State

Headless model of the editor form: single-value widgets for scalar fields and,
for every list-typed section, an ordered list of widget groups (one per item).

Widget identifiers follow one fixed scheme shared by the projector, the
serializer and the HTML form. Scalar widgets have fixed ids ("meta-title",
"contact-email", "summary", ...). Group widgets are namespaced by section prefix
and index ("exp-company-0", "exp-role-0", ...).

A group's index is assigned when the group is created (number of groups at that
moment) and never renumbered. Groups are addressed through their handle, so
display order comes from the GroupList, never from the index.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from cvsite.contexts.document.exceptions import WidgetAccessError
from cvsite.contexts.document.model import SectionType
from cvsite.contexts.editor.logger import _log_debug, _log_info
from cvsite.utils.text_processing import join_lines

REMOVE_CONFIRMATION = "Are you sure you want to remove this item?"

ConfirmFn = Callable[[str], bool]


class WidgetKind:
    """Enum-like class for widget kinds"""

    TEXT = "text"  # single-line input
    TEXTAREA = "textarea"  # multi-line input, stored as-is
    LINES = "lines"  # multi-line input holding a list, one item per line


@dataclass(frozen=True)
class ScalarWidget:
    """
    A single-value widget bound to a path in the document.

    Attributes:
        widget_id: Fixed widget identifier
        path: Keys leading to the value in the raw document
        label: Form label
        kind: WidgetKind
    """

    widget_id: str
    path: Tuple[str, ...]
    label: str
    kind: str = WidgetKind.TEXT

    def read(self, data: Dict[str, Any]) -> str:
        """Read the bound value from a raw document ("" when any step is missing)."""
        value: Any = data
        for key in self.path:
            if not isinstance(value, dict):
                return ""
            value = value.get(key)
        return "" if value is None else str(value)


@dataclass(frozen=True)
class GroupField:
    """
    One widget inside a group.

    Attributes:
        key: Item key in the document (e.g., "company")
        suffix: Widget id part (e.g., "company" in "exp-company-0")
        label: Form label
        kind: WidgetKind
    """

    key: str
    suffix: str
    label: str
    kind: str = WidgetKind.TEXT

    def to_widget(self, value: Any) -> str:
        """Convert an item value to widget text."""
        if value is None:
            return ""
        if self.kind == WidgetKind.LINES and isinstance(value, list):
            return join_lines(value)
        return str(value)


@dataclass(frozen=True)
class GroupSpec:
    """
    Widget layout of one list-typed section.

    Attributes:
        section_type: Section type the groups belong to
        prefix: Widget id prefix (e.g., "exp")
        label: Group heading; rendered with the ordinal, e.g. "Job 1"
        container_id: Id of the element holding the groups
        fields: Widgets of each group, in form order
    """

    section_type: str
    prefix: str
    label: str
    container_id: str
    fields: Tuple[GroupField, ...]

    def widget_id(self, suffix: str, index: int) -> str:
        return f"{self.prefix}-{suffix}-{index}"

    def element_id(self, index: int) -> str:
        return f"{self.prefix}-item-{index}"

    def get_field(self, key: str) -> GroupField:
        for group_field in self.fields:
            if group_field.key == key:
                return group_field
        raise KeyError(f"'{self.section_type}' items have no field '{key}'")


SCALAR_WIDGETS = (
    ScalarWidget("meta-title", ("meta", "title"), "Page Title"),
    ScalarWidget("meta-description", ("meta", "description"), "Meta Description", WidgetKind.TEXTAREA),
    ScalarWidget("meta-keywords", ("meta", "keywords"), "Meta Keywords"),
    ScalarWidget("meta-ogTitle", ("meta", "social", "ogTitle"), "Open Graph Title"),
    ScalarWidget(
        "meta-ogDescription", ("meta", "social", "ogDescription"), "Open Graph Description", WidgetKind.TEXTAREA
    ),
    ScalarWidget(
        "meta-twitterDescription",
        ("meta", "social", "twitterDescription"),
        "Twitter Description",
        WidgetKind.TEXTAREA,
    ),
    ScalarWidget("name", ("personalInfo", "name"), "Full Name"),
    ScalarWidget("title", ("personalInfo", "title"), "Professional Title"),
    ScalarWidget("contact-location", ("personalInfo", "contact", "location"), "Location"),
    ScalarWidget("contact-phone", ("personalInfo", "contact", "phone"), "Phone"),
    ScalarWidget("contact-email", ("personalInfo", "contact", "email"), "Email"),
    ScalarWidget("contact-linkedin", ("personalInfo", "contact", "linkedin"), "LinkedIn URL"),
    ScalarWidget("contact-github", ("personalInfo", "contact", "github"), "GitHub URL"),
)

# The summary lives in a section rather than at a fixed path
SUMMARY_WIDGET_ID = "summary"

GROUP_SPECS = (
    GroupSpec(
        section_type=SectionType.TECHNOLOGIES,
        prefix="tech",
        label="Tech Category",
        container_id="technologies-container",
        fields=(
            GroupField("category", "category", "Category Name"),
            GroupField("skills", "skills", "Skills (one per line)", WidgetKind.LINES),
        ),
    ),
    GroupSpec(
        section_type=SectionType.EXPERIENCE,
        prefix="exp",
        label="Job",
        container_id="experience-container",
        fields=(
            GroupField("company", "company", "Company"),
            GroupField("role", "role", "Role"),
            GroupField("period", "period", "Period"),
            GroupField("achievements", "achievements", "Achievements (one per line)", WidgetKind.LINES),
        ),
    ),
    GroupSpec(
        section_type=SectionType.PROJECTS,
        prefix="proj",
        label="Project",
        container_id="projects-container",
        fields=(
            GroupField("name", "name", "Name"),
            GroupField("url", "url", "URL (optional)"),
            GroupField("description", "description", "Description", WidgetKind.TEXTAREA),
        ),
    ),
    GroupSpec(
        section_type=SectionType.EDUCATION,
        prefix="edu",
        label="Education",
        container_id="education-container",
        fields=(
            GroupField("degree", "degree", "Degree/Certificate"),
            GroupField("institution", "institution", "Institution & Year"),
        ),
    ),
)

GROUP_SPECS_BY_TYPE = {spec.section_type: spec for spec in GROUP_SPECS}


def get_group_spec(section_type: str) -> GroupSpec:
    """
    Look up the widget layout of a list-typed section.

    Raises:
        ValueError: If the section type has no item widgets
    """
    try:
        return GROUP_SPECS_BY_TYPE[section_type]
    except KeyError:
        raise ValueError(
            f"Section type '{section_type}' has no item widgets. "
            f"Valid types: {list(GROUP_SPECS_BY_TYPE)}"
        ) from None


def ask_confirmation(message: str) -> bool:
    """Ask on the terminal; anything but yes declines."""
    response = input(f"{message} [y/N]: ").strip().lower()
    return response in ("y", "yes")


@dataclass(eq=False)
class WidgetGroup:
    """
    Handle for the widgets of one list item.

    Attributes:
        spec: Layout of the owning section
        index: Creation-time index used to namespace widget ids
        values: Widget text keyed by item field key
        origin: Deep copy of the item the group was filled from ({} for empty groups)
        projected: True when the group was projected from a loaded document item
        attached: False once the group has been removed from its list
    """

    spec: GroupSpec
    index: int
    values: Dict[str, str] = field(default_factory=dict)
    origin: Dict[str, Any] = field(default_factory=dict)
    projected: bool = False
    attached: bool = True

    @property
    def element_id(self) -> str:
        return self.spec.element_id(self.index)

    @property
    def label(self) -> str:
        """Ordinal heading, e.g. "Job 1"."""
        return f"{self.spec.label} {self.index + 1}"

    def widget_id(self, key: str) -> str:
        return self.spec.widget_id(self.spec.get_field(key).suffix, self.index)

    def widget_ids(self) -> List[str]:
        return [self.spec.widget_id(group_field.suffix, self.index) for group_field in self.spec.fields]

    def get(self, key: str) -> str:
        """
        Current widget text for an item field.

        Raises:
            WidgetAccessError: If the group holds no widget for the field
        """
        if key not in self.values:
            raise WidgetAccessError(self.spec.widget_id(key, self.index))
        return self.values[key]

    def set(self, key: str, value: str) -> None:
        """Set widget text; the key must be one of the section's item fields."""
        self.spec.get_field(key)
        self.values[key] = value


class GroupList:
    """
    Ordered widget groups of one list-typed section.

    Iteration order is display order. Adding appends; removing detaches a
    group without renumbering the others.
    """

    def __init__(self, spec: GroupSpec):
        self.spec = spec
        self._groups: List[WidgetGroup] = []

    def __iter__(self) -> Iterator[WidgetGroup]:
        return iter(list(self._groups))

    def __len__(self) -> int:
        return len(self._groups)

    def __getitem__(self, position: int) -> WidgetGroup:
        return self._groups[position]

    def add(self, item: Optional[Dict[str, Any]] = None, projected: bool = False) -> WidgetGroup:
        """
        Append a widget group at the end.

        Args:
            item: Item to pre-fill the widgets with (None gives an all-empty group)
            projected: Whether the item comes from the loaded document

        Returns:
            The new group handle
        """
        item = item or {}
        group = WidgetGroup(
            spec=self.spec,
            index=len(self._groups),
            values={group_field.key: group_field.to_widget(item.get(group_field.key)) for group_field in self.spec.fields},
            origin=copy.deepcopy(item),
            projected=projected,
        )
        self._groups.append(group)
        _log_debug(f"Added {group.label} ({group.element_id})")
        return group

    def remove(self, group: WidgetGroup, confirm: ConfirmFn = ask_confirmation) -> bool:
        """
        Detach a group after confirmation.

        Args:
            group: Handle returned by add()
            confirm: Called with REMOVE_CONFIRMATION; removal happens only on True

        Returns:
            True if the group was removed
        """
        if not any(existing is group for existing in self._groups):
            return False
        if not confirm(REMOVE_CONFIRMATION):
            _log_debug(f"Removal of {group.label} declined")
            return False

        self._groups = [existing for existing in self._groups if existing is not group]
        group.attached = False
        _log_info(f"Removed {group.label} from {self.spec.section_type}")
        return True

    def clear(self) -> None:
        for group in self._groups:
            group.attached = False
        self._groups = []


class FormState:
    """
    Complete editor form: scalar widgets plus one GroupList per list-typed section.

    Attributes:
        scalars: Widget text keyed by scalar widget id (including "summary")
        groups: GroupList keyed by section type
    """

    def __init__(self):
        self.scalars: Dict[str, str] = {widget.widget_id: "" for widget in SCALAR_WIDGETS}
        self.scalars[SUMMARY_WIDGET_ID] = ""
        self.groups: Dict[str, GroupList] = {spec.section_type: GroupList(spec) for spec in GROUP_SPECS}

    def get_value(self, widget_id: str) -> str:
        """
        Text of a scalar widget.

        Raises:
            WidgetAccessError: If no such scalar widget exists
        """
        if widget_id not in self.scalars:
            raise WidgetAccessError(widget_id)
        return self.scalars[widget_id]

    def set_value(self, widget_id: str, value: str) -> None:
        """Set a scalar widget; unknown ids raise WidgetAccessError."""
        if widget_id not in self.scalars:
            raise WidgetAccessError(widget_id)
        self.scalars[widget_id] = value

    def group_list(self, section_type: str) -> GroupList:
        get_group_spec(section_type)
        return self.groups[section_type]

    def add_item(self, section_type: str, item: Optional[Dict[str, Any]] = None) -> WidgetGroup:
        return self.group_list(section_type).add(item)

    def remove_item(self, section_type: str, position: int, confirm: ConfirmFn = ask_confirmation) -> bool:
        """
        Remove the group currently displayed at a position.

        Args:
            section_type: List-typed section
            position: 0-based display position (not the creation index)
            confirm: Confirmation callback

        Raises:
            IndexError: If there is no group at that position
        """
        groups = self.group_list(section_type)
        if not 0 <= position < len(groups):
            raise IndexError(f"No {section_type} item at position {position} (have {len(groups)})")
        return groups.remove(groups[position], confirm=confirm)

    def clear_groups(self) -> None:
        """Clear every list-typed section's groups."""
        for groups in self.groups.values():
            groups.clear()

    def item_counts(self) -> Dict[str, int]:
        return {section_type: len(groups) for section_type, groups in self.groups.items()}
