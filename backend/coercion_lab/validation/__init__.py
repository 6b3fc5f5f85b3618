"""
Schema validation/coercion for request bodies.

Schemas are immutable dataclasses built once at import time; every function
here is a pure function of (schema, input).
"""

from coercion_lab.validation.fields import enum_message, validate, validate_record
from coercion_lab.validation.humanize import describe, humanize
from coercion_lab.validation.resolver import resolve
from coercion_lab.validation.types import (
    MISSING,
    DiscriminatedUnion,
    EnvelopeSchema,
    FieldError,
    FieldKind,
    FieldSpec,
    Invalid,
    Keyword,
    UndiscriminatedUnion,
    Unresolved,
    Valid,
    ValidationResult,
    VariantSchema,
    enum_field,
    int_field,
    uuid_field,
    variant,
)
from coercion_lab.validation.union import coerce, coerce_discriminated, coerce_envelope, coerce_undiscriminated

__all__ = [
    "MISSING",
    "DiscriminatedUnion",
    "EnvelopeSchema",
    "FieldError",
    "FieldKind",
    "FieldSpec",
    "Invalid",
    "Keyword",
    "UndiscriminatedUnion",
    "Unresolved",
    "Valid",
    "ValidationResult",
    "VariantSchema",
    "coerce",
    "coerce_discriminated",
    "coerce_envelope",
    "coerce_undiscriminated",
    "describe",
    "enum_field",
    "enum_message",
    "humanize",
    "int_field",
    "resolve",
    "uuid_field",
    "validate",
    "validate_record",
    "variant",
]
