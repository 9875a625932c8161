"""End-to-end tests for the query translation facade."""

import copy

import pytest

from caml_builder import (
    CamlBuilderError,
    Filter,
    InvalidOperandError,
    MalformedClauseError,
    ModelBuilder,
    QueryTranslator,
    TranslatorSettings,
    UnknownFieldError,
    translate,
)
from caml_builder.core.models import CamlType

DEFAULT_ORDER = '<OrderBy><FieldRef Name="ID" Ascending="False"/></OrderBy>'


def test_empty_filter(translator):
    assert translator.translate() == f"<View><Query>{DEFAULT_ORDER}</Query></View>"
    assert translator.translate({}) == f"<View><Query>{DEFAULT_ORDER}</Query></View>"


def test_full_filter(translator):
    view = translator.translate(
        {
            "fields": ["firstName", "lastName"],
            "where": {"age": {"gt": 20}},
            "order": "lastName DESC",
            "limit": 5,
        }
    )
    assert view == (
        "<View>"
        '<ViewFields><FieldRef Name="FirstName"/><FieldRef Name="LastName"/></ViewFields>'
        "<Query>"
        '<Where><Gt><FieldRef Name="Age"/><Value Type="Number">20</Value></Gt></Where>'
        '<OrderBy><FieldRef Name="LastName" Ascending="FALSE"/></OrderBy>'
        "</Query>"
        "<RowLimit>5</RowLimit>"
        "</View>"
    )


def test_three_and_conditions(translator):
    view = translator.translate(
        Filter(where={"and": [{"firstName": "Joe"}, {"lastName": "Doe"}, {"age": 28}]})
    )
    assert view == (
        "<View><Query>"
        '<Where><And><Eq><FieldRef Name="FirstName"/><Value Type="Text">Joe</Value></Eq>'
        '<And><Eq><FieldRef Name="LastName"/><Value Type="Text">Doe</Value></Eq>'
        '<Eq><FieldRef Name="Age"/><Value Type="Number">28</Value></Eq></And></And></Where>'
        f"{DEFAULT_ORDER}</Query></View>"
    )


def test_build_query_payload(translator):
    payload = translator.build_query({"limit": 2, "order": "age"})
    assert payload == {
        "ViewXml": (
            '<View><Query><OrderBy><FieldRef Name="Age"/></OrderBy></Query>'
            "<RowLimit>2</RowLimit></View>"
        )
    }


def test_module_level_translate(user_model):
    view = translate(user_model, {"where": {"ID": {"inq": [1]}}, "limit": 0})
    assert view == (
        '<View><Query><Where><In><FieldRef Name="ID"/><Values>'
        '<Value Type="Number">1</Value></Values></In></Where>'
        f"{DEFAULT_ORDER}</Query></View>"
    )


def test_settings_are_applied(user_model):
    settings = TranslatorSettings(identity_field="Id", identity_type=CamlType.GUID)
    view = translate(user_model, {"where": {"Id": "abc"}}, settings)
    assert view == (
        '<View><Query><Where><Eq><FieldRef Name="Id"/><Value Type="Guid">abc</Value></Eq></Where>'
        '<OrderBy><FieldRef Name="Id" Ascending="False"/></OrderBy></Query></View>'
    )


def test_errors_propagate_without_output(translator):
    with pytest.raises(UnknownFieldError):
        translator.translate({"where": {"nickname": "JD"}})
    with pytest.raises(InvalidOperandError):
        translator.translate({"where": {"age": {"inq": 3}}})
    with pytest.raises(MalformedClauseError):
        translator.translate({"where": {"age": 3, "email": "x"}})


def test_translate_does_not_modify_filter(translator):
    raw = {
        "fields": {"age": True},
        "where": {"and": [{"age": {"gte": 18}}, {"or": [{"firstName": "A"}, {"firstName": "B"}]}, {"email": "e"}]},
        "order": ["lastName", "age DESC"],
        "limit": "3",
    }
    snapshot = copy.deepcopy(raw)
    assert translator.translate(raw) == translator.translate(raw)
    assert raw == snapshot


def test_scenario_with_partial_column_overrides():
    model = ModelBuilder(
        "Person",
        {
            "FirstName": {"type": "string"},
            "lastName": {"type": "string", "sharepoint": {"columnName": "LastName"}},
            "Age": {"type": "number"},
        },
    ).build()
    where = {"and": [{"FirstName": "Joe"}, {"lastName": "Doe"}, {"Age": 28}]}
    assert QueryTranslator(model).compile_where(where) == (
        '<Where><And><Eq><FieldRef Name="FirstName"/><Value Type="Text">Joe</Value></Eq>'
        '<And><Eq><FieldRef Name="LastName"/><Value Type="Text">Doe</Value></Eq>'
        '<Eq><FieldRef Name="Age"/><Value Type="Number">28</Value></Eq></And></And></Where>'
    )


def test_declared_identity_drives_default_order_and_conditions():
    model = ModelBuilder(
        "Doc",
        {
            "id": {"type": "string", "id": True, "sharepoint": {"columnName": "GUID"}},
            "title": {"type": "string"},
        },
    ).build()
    translator = QueryTranslator(model)
    assert translator.compile_order_by(None) == (
        '<OrderBy><FieldRef Name="GUID" Ascending="False"/></OrderBy>'
    )
    assert translator.compile_where({"ID": "abc"}) == (
        '<Where><Eq><FieldRef Name="GUID"/><Value Type="Text">abc</Value></Eq></Where>'
    )


def test_single_field_name_and_empty_order(translator):
    assert translator.translate({"fields": "age", "order": {}}) == (
        '<View><ViewFields><FieldRef Name="Age"/></ViewFields>'
        f"<Query>{DEFAULT_ORDER}</Query></View>"
    )


@pytest.mark.parametrize("fields", [5, ["age", 3]])
def test_invalid_fields_raise_library_error(translator, fields):
    with pytest.raises(CamlBuilderError):
        translator.translate({"fields": fields})


def test_empty_inq_fails(translator):
    with pytest.raises(InvalidOperandError):
        translator.translate({"where": {"age": {"inq": []}}})
