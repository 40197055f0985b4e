from __future__ import annotations

import itertools

import pytest

from src.models.resource_record import DateType, ResourceRecord
from src.models.row_data import FieldRow
from src.services.record_builder import (
    ConversionError,
    RecordBuilder,
    format_extent,
    format_lang_material,
    format_processing_note,
)


@pytest.fixture()
def builder(fixed_today) -> RecordBuilder:
    counter = itertools.count(1)
    return RecordBuilder("/repositories/2", today=fixed_today, token_factory=lambda: f"tok{next(counter)}")


def test_identifiers_always_four_slots(builder):
    record = builder.build(FieldRow(title="Smith Papers", resource_id="MS 123 A"))

    assert record.identifiers == ("MS 123 A", None, None, None)
    assert record.id_0 == "MS 123 A"
    data = record.to_dict()
    assert data["id_0"] == "MS 123 A"
    assert not any(k in data for k in ("id_1", "id_2", "id_3"))


def test_identifiers_without_resource_id(builder):
    record = builder.build(FieldRow(title="Smith Papers"))

    assert record.identifiers == (None, None, None, None)


def test_record_rejects_wrong_identifier_count():
    with pytest.raises(ValueError, match="exactly 4 slots"):
        ResourceRecord(uri="/repositories/2/resources/import_x", title="T", identifiers=("a",))


def test_fixed_level_and_uri(builder):
    first = builder.build(FieldRow(title="A"))
    second = builder.build(FieldRow(title="B"))

    assert first.level == "collection"
    assert first.uri == "/repositories/2/resources/import_tok1"
    assert second.uri == "/repositories/2/resources/import_tok2"


def test_default_tokens_are_unique(fixed_today):
    b = RecordBuilder("/repositories/2/", today=fixed_today)
    uris = {b.build(FieldRow(title="T")).uri for _ in range(50)}

    assert len(uris) == 50
    assert all(u.startswith("/repositories/2/resources/import_") for u in uris)


def test_build_without_title_raises(builder):
    with pytest.raises(ConversionError, match="title is required"):
        builder.build(FieldRow(resource_id="MS 1", row_number=7))


@pytest.mark.parametrize(
    "note_1,note_2,expected",
    [
        ("Boxed 2019", "Listed 2020", "Boxed 2019 Listed 2020"),
        ("Boxed 2019", None, "Boxed 2019"),
        (None, "Listed 2020", "Listed 2020"),
        (None, None, None),
    ],
)
def test_format_processing_note(note_1, note_2, expected):
    row = FieldRow(title="T", processing_note_1=note_1, processing_note_2=note_2)
    assert format_processing_note(row) == expected


def test_extent_requires_number_and_type(builder):
    assert format_extent(FieldRow(title="T", extent_number="3")) is None
    assert format_extent(FieldRow(title="T", extent_type="boxes")) is None
    assert builder.build(FieldRow(title="T", extent_number="3")).extents == ()


def test_extent_whole_portion(builder):
    record = builder.build(FieldRow(title="T", extent_number="3", extent_type="boxes"))

    assert [e.to_dict() for e in record.extents] == [
        {"jsonmodel_type": "extent", "portion": "whole", "extent_type": "boxes", "number": "3"}
    ]


def test_extent_container_summary(builder):
    row = FieldRow(title="T", extent_number="2", extent_type="volumes", extent_container_summary="2 bound volumes")
    extent = builder.build(row).extents[0]

    assert extent.container_summary == "2 bound volumes"


def test_format_extent_default_portion():
    extent = format_extent(FieldRow(title="T", extent_number="1", extent_type="box"))

    assert extent is not None
    assert extent.portion == "part"


def test_lang_materials_omitted_when_absent(builder):
    assert format_lang_material(FieldRow(title="T")) is None
    assert builder.build(FieldRow(title="T")).lang_materials == ()


def test_lang_materials_partial(builder):
    record = builder.build(FieldRow(title="T", lang_materials="eng"))

    assert [m.to_dict() for m in record.lang_materials] == [
        {
            "jsonmodel_type": "lang_material",
            "language_and_script": {"jsonmodel_type": "language_and_script", "language": "eng"},
        }
    ]


def test_lang_materials_language_and_script(builder):
    record = builder.build(FieldRow(title="T", lang_materials="eng", script_materials="Latn"))

    assert record.lang_materials[0].language == "eng"
    assert record.lang_materials[0].script == "Latn"


def test_finding_aid_language_and_script(builder):
    record = builder.build(FieldRow(title="T", finding_aid_language="eng", finding_aid_script="Latn"))
    data = record.to_dict()

    assert data["finding_aid_language"] == "eng"
    assert data["finding_aid_script"] == "Latn"


def test_dates_notes_and_rights_delegated(builder):
    row = FieldRow(
        title="T",
        date_expression="1950-1960",
        note_scope_and_content="Letters",
        access_conditions="Open",
    )
    record = builder.build(row)

    assert len(record.dates) == 1
    assert record.dates[0].date_type is DateType.INCLUSIVE
    assert [n.type for n in record.notes] == ["scopecontent"]
    assert len(record.rights_statements) == 1
    assert record.rights_statements[0].start_date == "2024-05-17"
    assert [n.text for n in record.rights_statements[0].notes] == ["Open"]


def test_minimal_record_shape(builder):
    data = builder.build(FieldRow(title="Smith Papers", row_number=2)).to_dict()

    assert data == {
        "jsonmodel_type": "resource",
        "uri": "/repositories/2/resources/import_tok1",
        "title": "Smith Papers",
        "level": "collection",
        "extents": [],
        "dates": [],
        "rights_statements": [
            {
                "jsonmodel_type": "rights_statement",
                "rights_type": "other",
                "other_rights_basis": "donor",
                "start_date": "2024-05-17",
                "notes": [],
            }
        ],
        "notes": [],
        "lang_materials": [],
    }


def test_source_row_ignored_in_equality(fixed_today):
    b = RecordBuilder("/repositories/2", today=fixed_today, token_factory=lambda: "same")
    first = b.build(FieldRow(title="T", row_number=1))
    second = b.build(FieldRow(title="T", row_number=9))

    assert first == second
    assert first.source_row == 1
