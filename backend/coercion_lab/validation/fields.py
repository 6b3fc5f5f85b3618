"""
Per-field validation.

Coercion runs in two phases:
  1) decode: turn JSON values into typed values where the kind recognises them
     (uuid strings -> UUID, whole floats -> int, strings -> Keyword)
  2) check: report what is still not the right type

Decoding never fails, it only leaves unrecognised values untouched so the
check phase can report them. Nothing here short-circuits: every field of a
record is checked and every message is kept.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Dict, List, Sequence, Tuple
from uuid import UUID

from .types import MISSING, FieldError, FieldKind, FieldSpec, Invalid, Keyword, Valid, ValidationResult


UUID_RE = re.compile(r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$")

MISSING_KEY_MESSAGE = "missing required key"
INVALID_TYPE_MESSAGE = "invalid type"
UUID_MESSAGE = "should be a uuid"
INT_MESSAGE = "should be an integer"


def enum_message(symbols: Sequence[Keyword]) -> str:
    """
    "should be :a" for a single symbol, otherwise
    "should be either :a, :b or :c" (declaration order).
    """
    rendered = [str(s) for s in symbols]
    if len(rendered) == 1:
        return f"should be {rendered[0]}"
    return f"should be either {', '.join(rendered[:-1])} or {rendered[-1]}"


def decode_value(spec: FieldSpec, raw: Any) -> Any:
    if raw is MISSING:
        return raw

    if spec.kind is FieldKind.UUID:
        if isinstance(raw, str) and UUID_RE.match(raw):
            return UUID(raw)
        return raw

    if spec.kind is FieldKind.INT:
        if isinstance(raw, float) and raw.is_integer():
            return int(raw)
        return raw

    if spec.kind is FieldKind.ENUM:
        if isinstance(raw, str):
            return Keyword(raw)
        return raw

    raise ValueError(f"Unsupported field kind: {spec.kind}")


def check_value(spec: FieldSpec, value: Any) -> List[str]:
    if value is MISSING:
        return [MISSING_KEY_MESSAGE]

    if spec.kind is FieldKind.UUID:
        return [] if isinstance(value, UUID) else [UUID_MESSAGE]

    if spec.kind is FieldKind.INT:
        # bool is an int subclass; JSON true/false is not an integer.
        ok = isinstance(value, int) and not isinstance(value, bool)
        return [] if ok else [INT_MESSAGE]

    if spec.kind is FieldKind.ENUM:
        ok = isinstance(value, Keyword) and value in spec.symbols
        return [] if ok else [enum_message(spec.symbols)]

    raise ValueError(f"Unsupported field kind: {spec.kind}")


def validate(spec: FieldSpec, raw: Any) -> List[str]:
    """Error messages for one raw value (empty list when valid)."""
    return check_value(spec, decode_value(spec, raw))


def decode_record(fields: Sequence[FieldSpec], raw: Mapping) -> Dict[str, Any]:
    # Open map: keys no field names are carried through as-is.
    out = dict(raw)
    for spec in fields:
        if spec.name in out:
            out[spec.name] = decode_value(spec, out[spec.name])
    return out


def check_record(fields: Sequence[FieldSpec], value: Any, path: Tuple[str, ...] = ()) -> List[FieldError]:
    if not isinstance(value, Mapping):
        return [FieldError(path=path, message=INVALID_TYPE_MESSAGE, value=value)]

    errors: List[FieldError] = []
    for spec in fields:
        v = value.get(spec.name, MISSING)
        for msg in check_value(spec, v):
            errors.append(FieldError(path=path + (spec.name,), message=msg, value=v))
    return errors


def validate_record(fields: Sequence[FieldSpec], raw: Any, path: Tuple[str, ...] = ()) -> ValidationResult:
    if not isinstance(raw, Mapping):
        return Invalid(errors=(FieldError(path=path, message=INVALID_TYPE_MESSAGE, value=raw),))

    decoded = decode_record(fields, raw)
    errors = check_record(fields, decoded, path)
    if errors:
        return Invalid(errors=tuple(errors))
    return Valid(value=decoded)
