"""Unit tests for the editor form state (widgets, groups, add/remove)."""

import pytest

from cvsite.contexts.document.exceptions import WidgetAccessError
from cvsite.contexts.document.model import SectionType
from cvsite.contexts.editor.form_state import (
    REMOVE_CONFIRMATION,
    SCALAR_WIDGETS,
    SUMMARY_WIDGET_ID,
    FormState,
    GroupField,
    ScalarWidget,
    WidgetKind,
    ask_confirmation,
    get_group_spec,
)


def always(answer):
    return lambda message: answer


@pytest.mark.unit
def test_form_state_has_every_scalar_widget():
    state = FormState()

    expected = {widget.widget_id for widget in SCALAR_WIDGETS} | {SUMMARY_WIDGET_ID}
    assert set(state.scalars) == expected
    assert "meta-twitterDescription" in state.scalars
    assert all(value == "" for value in state.scalars.values())
    assert set(state.groups) == set(SectionType.list_types())


@pytest.mark.unit
def test_scalar_widget_read():
    widget = ScalarWidget("contact-email", ("personalInfo", "contact", "email"), "Email")

    assert widget.read({"personalInfo": {"contact": {"email": "a@b.c"}}}) == "a@b.c"
    assert widget.read({"personalInfo": {"contact": None}}) == ""
    assert widget.read({}) == ""


@pytest.mark.unit
def test_group_field_to_widget():
    lines = GroupField("skills", "skills", "Skills", WidgetKind.LINES)

    assert lines.to_widget(["Python", "SQL"]) == "Python\nSQL"
    assert lines.to_widget(None) == ""
    assert GroupField("name", "name", "Name").to_widget("x") == "x"


@pytest.mark.unit
def test_add_assigns_creation_index_and_ids():
    state = FormState()

    first = state.add_item(SectionType.EXPERIENCE, {"company": "Northwind", "achievements": ["a", "b"]})
    second = state.add_item(SectionType.EXPERIENCE)

    assert (first.index, second.index) == (0, 1)
    assert first.label == "Job 1"
    assert second.label == "Job 2"
    assert first.element_id == "exp-item-0"
    assert first.widget_ids() == ["exp-company-0", "exp-role-0", "exp-period-0", "exp-achievements-0"]
    assert first.get("achievements") == "a\nb"
    assert second.get("company") == ""


@pytest.mark.unit
def test_group_labels_per_section():
    state = FormState()

    assert state.add_item(SectionType.TECHNOLOGIES).label == "Tech Category 1"
    assert state.add_item(SectionType.PROJECTS).label == "Project 1"
    assert state.add_item(SectionType.EDUCATION).label == "Education 1"
    assert state.add_item(SectionType.TECHNOLOGIES).widget_id("skills") == "tech-skills-1"


@pytest.mark.unit
def test_origin_is_a_copy():
    item = {"company": "Northwind", "achievements": ["a"]}
    group = FormState().add_item(SectionType.EXPERIENCE, item)

    item["achievements"].append("b")

    assert group.origin == {"company": "Northwind", "achievements": ["a"]}


@pytest.mark.unit
def test_remove_requires_confirmation():
    state = FormState()
    group = state.add_item(SectionType.PROJECTS)
    asked = []

    def decline(message):
        asked.append(message)
        return False

    assert state.group_list(SectionType.PROJECTS).remove(group, confirm=decline) is False
    assert asked == [REMOVE_CONFIRMATION]
    assert len(state.groups[SectionType.PROJECTS]) == 1
    assert group.attached


@pytest.mark.unit
def test_remove_does_not_renumber():
    state = FormState()
    groups = [state.add_item(SectionType.EDUCATION, {"degree": name}) for name in ("A", "B", "C")]

    assert state.remove_item(SectionType.EDUCATION, 0, confirm=always(True))

    remaining = list(state.groups[SectionType.EDUCATION])
    assert remaining == groups[1:]
    assert [group.index for group in remaining] == [1, 2]
    assert not groups[0].attached


@pytest.mark.unit
def test_remove_unknown_group_is_a_no_op():
    state = FormState()
    other = FormState().add_item(SectionType.EDUCATION)

    assert state.group_list(SectionType.EDUCATION).remove(other, confirm=always(True)) is False


@pytest.mark.unit
def test_remove_item_bad_position():
    state = FormState()
    state.add_item(SectionType.EXPERIENCE)

    with pytest.raises(IndexError):
        state.remove_item(SectionType.EXPERIENCE, 1, confirm=always(True))


@pytest.mark.unit
def test_summary_has_no_groups():
    with pytest.raises(ValueError, match="no item widgets"):
        get_group_spec(SectionType.SUMMARY)

    with pytest.raises(ValueError):
        FormState().add_item(SectionType.SUMMARY)


@pytest.mark.unit
def test_missing_group_widget_raises_widget_access_error():
    group = FormState().add_item(SectionType.EXPERIENCE)
    del group.values["company"]

    with pytest.raises(WidgetAccessError) as exc_info:
        group.get("company")

    assert exc_info.value.widget_id == "exp-company-0"


@pytest.mark.unit
def test_set_rejects_unknown_field():
    group = FormState().add_item(SectionType.PROJECTS)

    with pytest.raises(KeyError):
        group.set("stars", "5")


@pytest.mark.unit
def test_scalar_access():
    state = FormState()
    state.set_value("name", "Jordan")

    assert state.get_value("name") == "Jordan"
    with pytest.raises(WidgetAccessError):
        state.get_value("nickname")
    with pytest.raises(WidgetAccessError):
        state.set_value("nickname", "J")


@pytest.mark.unit
def test_clear_groups():
    state = FormState()
    group = state.add_item(SectionType.EXPERIENCE)
    state.add_item(SectionType.EDUCATION)

    state.clear_groups()

    assert state.item_counts() == {section_type: 0 for section_type in SectionType.list_types()}
    assert not group.attached


@pytest.mark.unit
@pytest.mark.parametrize("answer,expected", [("y", True), ("YES", True), ("n", False), ("", False)])
def test_ask_confirmation(monkeypatch, answer, expected):
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        return answer

    monkeypatch.setattr("builtins.input", fake_input)

    assert ask_confirmation(REMOVE_CONFIRMATION) is expected
    assert prompts[0].startswith(REMOVE_CONFIRMATION)
