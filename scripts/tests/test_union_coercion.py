"""
Union coercion: undiscriminated (merges every variant's errors) vs.
discriminated (dispatch first, errors scoped to one variant).

Run:
  python scripts/tests/test_union_coercion.py
"""

from __future__ import annotations

from uuid import uuid4

from _runner import ensure_backend_on_path, run_all

ensure_backend_on_path()

from coercion_lab.schemas.machines import (  # noqa: E402
    DANGEROUS_OR,
    ENCABULATOR,
    MARZLEVANE,
    SAFE_SCHEMA_WITH_MULTI,
)
from coercion_lab.validation import (  # noqa: E402
    Invalid,
    Keyword,
    Valid,
    coerce,
    coerce_discriminated,
    coerce_envelope,
    coerce_undiscriminated,
    humanize,
)

OR_UNION = DANGEROUS_OR.union
MULTI_UNION = SAFE_SCHEMA_WITH_MULTI.union


def _data(**overrides) -> dict:
    data = {"type": "encabulator", "foo": str(uuid4()), "bar": 1, "baz": "e"}
    data.update(overrides)
    return data


def _body(**overrides) -> dict:
    return {"id": str(uuid4()), "data": _data(**overrides)}


def test_valid_input_passes_both_strategies() -> None:
    raw = _data()
    for union in (OR_UNION, MULTI_UNION):
        result = coerce(union, raw)
        assert isinstance(result, Valid), result
        assert result.variant is ENCABULATOR
        assert result.value["type"] == Keyword("encabulator")
        assert result.value["baz"] == Keyword("e")


def test_undiscriminated_takes_first_accepting_variant() -> None:
    result = coerce_undiscriminated(OR_UNION, _data(type="marzlevane", baz="a"))
    assert isinstance(result, Valid)
    assert result.variant is MARZLEVANE


def test_discriminated_scopes_errors_to_one_field() -> None:
    result = coerce_discriminated(MULTI_UNION, _data(baz="invalid-baz"))
    assert isinstance(result, Invalid)
    assert humanize(result.errors) == {"baz": ["should be either :e, :f or :g"]}


def test_discriminated_reports_only_the_bad_field() -> None:
    result = coerce_discriminated(MULTI_UNION, _data(bar="x"))
    assert isinstance(result, Invalid)
    assert humanize(result.errors) == {"bar": ["should be an integer"]}

    result = coerce_discriminated(MULTI_UNION, _data(foo="nope"))
    assert isinstance(result, Invalid)
    assert humanize(result.errors) == {"foo": ["should be a uuid"]}


def test_undiscriminated_merges_every_variant() -> None:
    result = coerce_undiscriminated(OR_UNION, _data(baz="invalid-baz"))
    assert isinstance(result, Invalid)
    assert humanize(result.errors) == {
        "type": ["should be :marzlevane", "should be :encabulator"],
        "foo": ["should be a uuid", "should be a uuid"],
        "baz": ["should be either :a, :b or :c", "should be either :e, :f or :g"],
    }


def test_undiscriminated_concatenates_in_declaration_order() -> None:
    result = coerce_undiscriminated(OR_UNION, _data(bar="x"))
    assert isinstance(result, Invalid)
    errors = humanize(result.errors)
    assert errors["bar"] == ["should be an integer", "should be an integer"]
    assert errors["type"] == ["should be :marzlevane", "should be :encabulator"]
    # The baz value is fine for the Encabulator, but undecoded it fails both enums.
    assert errors["baz"] == ["should be either :a, :b or :c", "should be either :e, :f or :g"]
    # First variant's records come first.
    assert [e.path for e in result.errors[:4]] == [("type",), ("foo",), ("bar",), ("baz",)]


def test_discriminated_missing_tag_is_a_single_error() -> None:
    raw = _data()
    del raw["type"]
    raw["baz"] = "nope"
    result = coerce_discriminated(MULTI_UNION, raw)
    assert isinstance(result, Invalid)
    assert humanize(result.errors) == {"type": ["should be either :marzlevane or :encabulator"]}


def test_discriminated_unknown_tag() -> None:
    result = coerce_discriminated(MULTI_UNION, _data(type="gizmo"), ("data",))
    assert isinstance(result, Invalid)
    assert humanize(result.errors) == {"data": {"type": ["should be either :marzlevane or :encabulator"]}}


def test_non_mapping_union_value() -> None:
    multi = coerce_discriminated(MULTI_UNION, "nope", ("data",))
    assert isinstance(multi, Invalid)
    assert humanize(multi.errors) == {"data": ["invalid type"]}

    merged = coerce_undiscriminated(OR_UNION, 7, ("data",))
    assert isinstance(merged, Invalid)
    assert humanize(merged.errors) == {"data": ["invalid type", "invalid type"]}


def test_envelope_scenario_a_safe() -> None:
    result = coerce_envelope(SAFE_SCHEMA_WITH_MULTI, _body(baz="invalid-baz"))
    assert isinstance(result, Invalid)
    assert humanize(result.errors) == {"data": {"baz": ["should be either :e, :f or :g"]}}


def test_envelope_scenario_b_dangerous() -> None:
    result = coerce_envelope(DANGEROUS_OR, _body(baz="invalid-baz"))
    assert isinstance(result, Invalid)
    assert humanize(result.errors) == {
        "data": {
            "type": ["should be :marzlevane", "should be :encabulator"],
            "foo": ["should be a uuid", "should be a uuid"],
            "baz": ["should be either :a, :b or :c", "should be either :e, :f or :g"],
        }
    }


def test_envelope_errors_combine_with_union_errors() -> None:
    body = _body(baz="invalid-baz")
    body["id"] = "not-a-uuid"
    result = coerce_envelope(SAFE_SCHEMA_WITH_MULTI, body)
    assert isinstance(result, Invalid)
    assert humanize(result.errors) == {
        "id": ["should be a uuid"],
        "data": {"baz": ["should be either :e, :f or :g"]},
    }


def test_envelope_missing_data_and_id() -> None:
    result = coerce_envelope(SAFE_SCHEMA_WITH_MULTI, {})
    assert isinstance(result, Invalid)
    assert humanize(result.errors) == {
        "id": ["missing required key"],
        "data": ["missing required key"],
    }


def test_envelope_valid_value_is_coerced() -> None:
    body = _body()
    result = coerce_envelope(SAFE_SCHEMA_WITH_MULTI, body)
    assert isinstance(result, Valid)
    assert result.variant is ENCABULATOR
    assert str(result.value["id"]) == body["id"]
    assert result.value["data"]["baz"] == Keyword("e")


def test_envelope_rejects_non_object_body() -> None:
    result = coerce_envelope(DANGEROUS_OR, [1, 2, 3])
    assert isinstance(result, Invalid)
    assert humanize(result.errors) == ["invalid type"]


def test_coercion_is_repeatable() -> None:
    body = _body(baz="invalid-baz")
    for schema in (DANGEROUS_OR, SAFE_SCHEMA_WITH_MULTI):
        assert coerce_envelope(schema, body) == coerce_envelope(schema, body)


def main() -> int:
    return run_all(globals())


if __name__ == "__main__":
    raise SystemExit(main())
