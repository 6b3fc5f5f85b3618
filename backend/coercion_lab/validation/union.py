"""
Union coercion, two ways.

Undiscriminated (`UndiscriminatedUnion`):
  Try to decode+validate the input as each variant in turn and take the first
  one that comes out clean. If none does, there is no way to tell which
  variant was meant, so the input stays undecoded and *every* variant reports
  against it. Messages for a shared field name pile up in declaration order:

    {"type": ["should be :marzlevane", "should be :encabulator"],
     "foo":  ["should be a uuid", "should be a uuid"],
     "baz":  ["should be either :a, :b or :c", "should be either :e, :f or :g"]}

  even when the only real mistake was `baz`.

Discriminated (`DiscriminatedUnion`):
  Resolve the discriminator first, then validate against that one variant.
  Errors never leak across variants:

    {"baz": ["should be either :e, :f or :g"]}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Tuple

from .fields import INVALID_TYPE_MESSAGE, MISSING_KEY_MESSAGE, check_record, decode_record, enum_message, validate_record
from .resolver import resolve
from .types import (
    DiscriminatedUnion,
    EnvelopeSchema,
    FieldError,
    Invalid,
    UndiscriminatedUnion,
    UnionSchema,
    Unresolved,
    Valid,
    ValidationResult,
)


def coerce_undiscriminated(
    union: UndiscriminatedUnion, raw: Any, path: Tuple[str, ...] = ()
) -> ValidationResult:
    for candidate in union.variants:
        result = validate_record(candidate.all_fields, raw, path)
        if isinstance(result, Valid):
            return Valid(value=result.value, variant=candidate)

    errors: List[FieldError] = []
    for candidate in union.variants:
        errors.extend(check_record(candidate.all_fields, raw, path))
    return Invalid(errors=tuple(errors))


def coerce_discriminated(
    union: DiscriminatedUnion, raw: Any, path: Tuple[str, ...] = ()
) -> ValidationResult:
    if not isinstance(raw, Mapping):
        return Invalid(errors=(FieldError(path=path, message=INVALID_TYPE_MESSAGE, value=raw),))

    chosen = resolve(union, raw)
    if isinstance(chosen, Unresolved):
        return Invalid(
            errors=(
                FieldError(
                    path=path + (union.discriminator_field,),
                    message=enum_message(union.dispatch_values),
                    value=chosen.value,
                ),
            )
        )

    result = validate_record(chosen.all_fields, raw, path)
    if isinstance(result, Invalid):
        return result
    return Valid(value=result.value, variant=chosen)


def coerce(union: UnionSchema, raw: Any, path: Tuple[str, ...] = ()) -> ValidationResult:
    if isinstance(union, DiscriminatedUnion):
        return coerce_discriminated(union, raw, path)
    if isinstance(union, UndiscriminatedUnion):
        return coerce_undiscriminated(union, raw, path)
    raise TypeError(f"Unsupported union schema: {type(union).__name__}")


def coerce_envelope(envelope: EnvelopeSchema, raw: Any) -> ValidationResult:
    """
    Validate `{<envelope fields>..., <union_key>: <union>}`.

    Envelope field errors and union errors land in one result; union errors
    are nested under the union key.
    """
    if not isinstance(raw, Mapping):
        return Invalid(errors=(FieldError(path=(), message=INVALID_TYPE_MESSAGE, value=raw),))

    decoded = decode_record(envelope.fields, raw)
    errors = check_record(envelope.fields, decoded)

    union_path = (envelope.union_key,)
    chosen = None
    if envelope.union_key not in raw:
        errors.append(FieldError(path=union_path, message=MISSING_KEY_MESSAGE))
    else:
        result = coerce(envelope.union, raw[envelope.union_key], union_path)
        if isinstance(result, Invalid):
            errors.extend(result.errors)
        else:
            decoded[envelope.union_key] = result.value
            chosen = result.variant

    if errors:
        return Invalid(errors=tuple(errors))
    return Valid(value=decoded, variant=chosen)
