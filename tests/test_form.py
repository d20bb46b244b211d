import json
from pathlib import Path

import pytest

from drycore.domain.enums import FormKind
from drycore.domain.form import FormRef, NormalizedForm
from drycore.domain.identity import FilePath
from drycore.domain.span import LineColumn, Span


def make_span():
    return Span(LineColumn(1, 0), LineColumn(3, 12))


def json_round_trip(obj):
    return json.loads(json.dumps(obj.to_dict()))


def test_new_stores_all_fields():
    fps = {1, 2, 3, 4}
    form = NormalizedForm(FormKind.PRODUCTION, fps, make_span(), 17, 3)
    assert form.kind is FormKind.PRODUCTION
    assert form.fingerprint_set == frozenset(fps)
    assert form.node_count == 17
    assert form.line_count == 3
    assert form.identifier_set == []
    assert form.qualified_name == []


def test_empty_fingerprint_set_is_well_formed():
    form = NormalizedForm(FormKind.DOCTEST, set(), make_span(), 0, 0)
    assert form.fingerprint_set == frozenset()


def test_with_context_stores_all_fields():
    fps = {1, 2, 3}
    identifiers = ["x", "y", "z"]
    qname = ["my_module", "MyType", "foo"]
    form = NormalizedForm(
        FormKind.PRODUCTION,
        fps,
        make_span(),
        17,
        3,
        identifier_set=identifiers,
        qualified_name=qname,
    )
    assert form.fingerprint_set == frozenset(fps)
    assert form.identifier_set == identifiers
    assert form.qualified_name == qname


def test_identifier_set_preserves_order_and_duplicates():
    identifiers = ["x", "y", "x"]
    form = NormalizedForm(
        FormKind.PRODUCTION, set(), make_span(), 0, 0, identifier_set=identifiers
    )
    assert form.identifier_set == identifiers
    assert form.identifier_set[0] == form.identifier_set[2]
    back = NormalizedForm.from_dict(json_round_trip(form))
    assert back.identifier_set == ["x", "y", "x"]


def test_qualified_name_is_path_components():
    form = NormalizedForm(
        FormKind.TEST,
        set(),
        make_span(),
        0,
        0,
        qualified_name=["my_crate", "tests", "the_test_fn"],
    )
    assert len(form.qualified_name) == 3
    assert form.qualified_name[0] == "my_crate"
    assert form.qualified_name[2] == "the_test_fn"


def test_serde_round_trips():
    form = NormalizedForm(FormKind.TEST, {42, 7, 99}, make_span(), 8, 2)
    assert NormalizedForm.from_dict(json_round_trip(form)) == form


def test_serde_round_trips_with_context_populated():
    form = NormalizedForm(
        FormKind.TEST,
        {1, 2},
        make_span(),
        5,
        1,
        identifier_set=["a", "b"],
        qualified_name=["mod_a", "fn_b"],
    )
    assert NormalizedForm.from_dict(json_round_trip(form)) == form


def test_to_dict_field_order_and_values():
    form = NormalizedForm(FormKind.PRODUCTION, {3, 1, 2}, make_span(), 4, 2)
    data = form.to_dict()
    assert list(data) == [
        "kind",
        "fingerprint_set",
        "identifier_set",
        "qualified_name",
        "span",
        "node_count",
        "line_count",
    ]
    assert data["kind"] == "production"
    assert data["fingerprint_set"] == [1, 2, 3]


def test_deserializes_envelope_missing_context_fields():
    text = """{
        "kind": "production",
        "fingerprint_set": [1, 2, 3],
        "span": {"start": {"line": 1, "column": 0}, "end": {"line": 2, "column": 5}},
        "node_count": 4,
        "line_count": 2
    }"""
    form = NormalizedForm.from_dict(json.loads(text))
    assert form.identifier_set == []
    assert form.qualified_name == []
    assert form.node_count == 4
    assert form.fingerprint_set == frozenset({1, 2, 3})


def test_from_dict_missing_required_field_raises():
    with pytest.raises(ValueError):
        NormalizedForm.from_dict({"kind": "production", "fingerprint_set": []})


def test_from_dict_unknown_kind_raises():
    data = NormalizedForm(FormKind.TEST, set(), make_span(), 0, 0).to_dict()
    data["kind"] = "benchmark"
    with pytest.raises(ValueError):
        NormalizedForm.from_dict(data)


def test_rejects_negative_node_count():
    with pytest.raises(ValueError):
        NormalizedForm(FormKind.TEST, set(), make_span(), -1, 0)


def test_rejects_fingerprint_beyond_64_bits():
    with pytest.raises(ValueError):
        NormalizedForm(FormKind.TEST, {2**64}, make_span(), 0, 0)


def test_form_ref_stores_fields():
    file = FilePath(Path("src/lib.rs"))
    span = make_span()
    r = FormRef(file, span, FormKind.PRODUCTION)
    assert r.file == file
    assert r.span == span
    assert r.kind is FormKind.PRODUCTION


def test_form_ref_serde_round_trips():
    r = FormRef(FilePath(Path("src/foo.rs")), make_span(), FormKind.PRODUCTION)
    data = json_round_trip(r)
    assert data["file"] == "src/foo.rs"
    assert data["kind"] == "production"
    assert FormRef.from_dict(data) == r


def test_form_ref_from_dict_missing_file_raises():
    with pytest.raises(ValueError):
        FormRef.from_dict({"span": make_span().to_dict(), "kind": "test"})