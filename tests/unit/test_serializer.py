"""Unit tests for rebuilding a document from the editor widgets."""

import copy

import pytest

from cvsite.contexts.document.exceptions import MissingSectionError, WidgetAccessError
from cvsite.contexts.document.model import ResumeDocument, SectionType
from cvsite.contexts.editor.form_state import get_group_spec
from cvsite.contexts.editor.projector import project
from cvsite.contexts.editor.serializer import assign, assign_path, empty_item, serialize


def always_yes(message):
    return True


@pytest.mark.unit
def test_roundtrip_reproduces_document(resume_document):
    result = serialize(project(resume_document), resume_document)

    assert result == resume_document
    assert result is not resume_document


@pytest.mark.unit
def test_unexposed_fields_pass_through(resume_document):
    state = project(resume_document)
    state.set_value("title", "Staff Engineer")

    result = serialize(state, resume_document)

    assert result.personal_info.title == "Staff Engineer"
    assert result.meta["social"]["imageUrl"] == "https://example.com/avery.png"
    assert result.meta["structuredData"] == resume_document.meta["structuredData"]
    assert result.get_section("volunteering").raw_items == [{"organization": "Code Club", "role": "Mentor"}]
    assert result.get_section(SectionType.EXPERIENCE).raw_items[0]["location"] == "Remote"


@pytest.mark.unit
def test_serialize_does_not_modify_base(resume_document):
    before = copy.deepcopy(resume_document.data)
    state = project(resume_document)
    state.set_value("name", "Someone Else")
    state.remove_item(SectionType.EXPERIENCE, 0, confirm=always_yes)

    serialize(state, resume_document)

    assert resume_document.data == before


@pytest.mark.unit
def test_items_follow_current_group_order(resume_document):
    """Creation indices play no part: removing then adding keeps display order."""
    state = project(resume_document)
    state.remove_item(SectionType.EXPERIENCE, 0, confirm=always_yes)
    new_job = state.add_item(SectionType.EXPERIENCE)
    new_job.set("company", "Acme")

    result = serialize(state, resume_document)

    companies = [item.company for item in result.get_section(SectionType.EXPERIENCE).items]
    assert companies == ["Contoso", "Acme"]


@pytest.mark.unit
def test_new_item_from_empty_form():
    """A job added to an empty experience section gets every item key."""
    document = ResumeDocument({"sections": [{"type": "experience", "title": "Experience", "items": []}]})
    state = project(document)
    job = state.add_item(SectionType.EXPERIENCE)
    job.set("company", "Acme")
    job.set("role", "Engineer")
    job.set("achievements", "Shipped X\n\n   \nShipped Y\n")

    result = serialize(state, document)

    assert result.get_section(SectionType.EXPERIENCE).raw_items == [
        {"company": "Acme", "role": "Engineer", "period": "", "achievements": ["Shipped X", "Shipped Y"]}
    ]


@pytest.mark.unit
def test_line_split_handles_crlf(resume_document):
    state = project(resume_document)
    state.groups[SectionType.TECHNOLOGIES][0].set("skills", "Python\r\nRust\r\n")

    result = serialize(state, resume_document)

    assert result.get_section(SectionType.TECHNOLOGIES).items[0].skills == ["Python", "Rust"]


@pytest.mark.unit
def test_blank_lines_are_dropped_on_roundtrip():
    document = ResumeDocument(
        {"sections": [{"type": "technologies", "title": "T", "items": [{"category": "C", "skills": ["a", "", "b"]}]}]}
    )

    result = serialize(project(document), document)

    assert result.get_section(SectionType.TECHNOLOGIES).raw_items[0]["skills"] == ["a", "b"]


@pytest.mark.unit
def test_removing_every_item_leaves_empty_list(resume_document):
    state = project(resume_document)
    for _ in range(2):
        state.remove_item(SectionType.TECHNOLOGIES, 0, confirm=always_yes)

    result = serialize(state, resume_document)

    technologies = result.get_section(SectionType.TECHNOLOGIES)
    assert technologies is not None
    assert technologies.raw_items == []
    assert technologies.title == "Technologies"


@pytest.mark.unit
def test_missing_group_widget_keeps_original_value(resume_document):
    state = project(resume_document)
    group = state.groups[SectionType.EXPERIENCE][0]
    del group.values["role"]
    group.set("company", "Northwind Labs")

    result = serialize(state, resume_document)

    job = result.get_section(SectionType.EXPERIENCE).items[0]
    assert job.company == "Northwind Labs"
    assert job.role == "Senior Engineer"


@pytest.mark.unit
def test_missing_scalar_widget_raises(resume_document):
    state = project(resume_document)
    del state.scalars["name"]

    with pytest.raises(WidgetAccessError) as exc_info:
        serialize(state, resume_document)

    assert exc_info.value.widget_id == "name"


@pytest.mark.unit
def test_sparse_document_roundtrip_adds_no_keys():
    document = ResumeDocument({"personalInfo": {"name": "A"}})

    result = serialize(project(document), document)

    assert result.data == {"personalInfo": {"name": "A"}}


@pytest.mark.unit
def test_null_values_survive_empty_widgets():
    document = ResumeDocument({"personalInfo": {"name": "A", "title": None}, "sections": []})

    result = serialize(project(document), document)

    assert result.data["personalInfo"]["title"] is None


@pytest.mark.unit
def test_cleared_value_is_written():
    document = ResumeDocument({"personalInfo": {"name": "A", "title": "Engineer"}})
    state = project(document)
    state.set_value("title", "")

    result = serialize(state, document)

    assert result.data["personalInfo"]["title"] == ""


@pytest.mark.unit
def test_absent_section_created_only_for_content():
    document = ResumeDocument({"sections": [{"type": "summary", "title": "About", "content": "Hi"}]})

    untouched = serialize(project(document), document)
    assert [section.type for section in untouched.sections] == ["summary"]

    state = project(document)
    state.add_item(SectionType.PROJECTS, {"name": "cvsite"})
    result = serialize(state, document)

    projects = result.get_section(SectionType.PROJECTS)
    assert projects.title == "Projects"
    assert projects.raw_items == [{"name": "cvsite", "url": "", "description": ""}]


@pytest.mark.unit
def test_absent_section_raises_under_error_policy(strict_settings):
    document = ResumeDocument({"sections": [{"type": "summary", "title": "Summary", "content": ""}]})
    state = project(document)

    with pytest.raises(MissingSectionError) as exc_info:
        serialize(state, document, settings=strict_settings)

    assert exc_info.value.section_type == SectionType.TECHNOLOGIES


@pytest.mark.unit
def test_only_first_section_of_a_type_is_written():
    document = ResumeDocument(
        {
            "sections": [
                {"type": "education", "title": "Education", "items": [{"degree": "BSc"}]},
                {"type": "education", "title": "More", "items": [{"degree": "MSc"}]},
            ]
        }
    )
    state = project(document)
    state.groups[SectionType.EDUCATION][0].set("degree", "BA")

    result = serialize(state, document)

    assert result.data["sections"][0]["items"] == [{"degree": "BA"}]
    assert result.data["sections"][1]["items"] == [{"degree": "MSc"}]


@pytest.mark.unit
def test_assign_write_rule():
    target = {"kept": "x", "null": None}

    assign(target, "kept", "")
    assign(target, "null", "")
    assign(target, "absent", "")
    assign(target, "new", "value")

    assert target == {"kept": "", "null": None, "new": "value"}


@pytest.mark.unit
def test_assign_path_creates_parents_only_for_values():
    data = {}

    assign_path(data, ("meta", "social", "ogTitle"), "")
    assert data == {}

    assign_path(data, ("meta", "social", "ogTitle"), "Title")
    assert data == {"meta": {"social": {"ogTitle": "Title"}}}


@pytest.mark.unit
def test_removing_middle_item_keeps_relative_order():
    items = [{"degree": "A"}, {"degree": "B"}, {"degree": "C"}]
    document = ResumeDocument({"sections": [{"type": "education", "title": "Education", "items": items}]})
    state = project(document)

    state.remove_item(SectionType.EDUCATION, 1, confirm=always_yes)
    result = serialize(state, document)

    assert result.get_section(SectionType.EDUCATION).raw_items == [{"degree": "A"}, {"degree": "C"}]


@pytest.mark.unit
def test_empty_technologies_section():
    document = ResumeDocument({"sections": [{"type": "technologies", "title": "Technologies", "items": []}]})

    state = project(document)
    assert len(state.groups[SectionType.TECHNOLOGIES]) == 0

    result = serialize(state, document)
    assert result.get_section(SectionType.TECHNOLOGIES).raw_items == []


@pytest.mark.unit
def test_declined_removal_leaves_experience_unchanged():
    job = {"company": "Acme", "role": "Eng", "period": "2020-2022", "achievements": ["Did X", "Did Y"]}
    document = ResumeDocument({"sections": [{"type": "experience", "title": "Experience", "items": [job]}]})
    state = project(document)

    assert not state.remove_item(SectionType.EXPERIENCE, 0, confirm=lambda message: False)
    result = serialize(state, document)

    assert result.get_section(SectionType.EXPERIENCE).raw_items == [job]
    assert result.get_section(SectionType.EXPERIENCE).items[0].achievements == ["Did X", "Did Y"]


@pytest.mark.unit
def test_added_job_with_only_company_has_full_shape(resume_document):
    state = project(resume_document)
    state.add_item(SectionType.EXPERIENCE).set("company", "Acme")

    result = serialize(state, resume_document)

    assert result.get_section(SectionType.EXPERIENCE).raw_items[-1] == {
        "company": "Acme",
        "role": "",
        "period": "",
        "achievements": [],
    }


@pytest.mark.unit
@pytest.mark.parametrize(
    "section_type,expected",
    [
        (SectionType.TECHNOLOGIES, {"category": "", "skills": []}),
        (SectionType.PROJECTS, {"name": "", "url": "", "description": ""}),
        (SectionType.EDUCATION, {"degree": "", "institution": ""}),
    ],
)
def test_empty_added_item_has_every_key(section_type, expected):
    document = ResumeDocument({"sections": [{"type": section_type, "title": "T", "items": []}]})
    state = project(document)
    state.add_item(section_type)

    result = serialize(state, document)

    assert result.get_section(section_type).raw_items == [expected]
    assert empty_item(get_group_spec(section_type)) == expected


@pytest.mark.unit
def test_loaded_sparse_item_stays_sparse():
    document = ResumeDocument(
        {"sections": [{"type": "experience", "title": "Experience", "items": [{"company": "Acme"}]}]}
    )

    result = serialize(project(document), document)

    assert result.get_section(SectionType.EXPERIENCE).raw_items == [{"company": "Acme"}]
