"""
Request-body schemas for the two demo routes.

Marzlevanes and Encabulators share `foo` (uuid) and `bar` (int) but differ in
their `type` tag and in which symbols `baz` accepts. That overlap is what makes
the undiscriminated union report confusing errors.
"""

from __future__ import annotations

from coercion_lab.validation import (
    DiscriminatedUnion,
    EnvelopeSchema,
    UndiscriminatedUnion,
    enum_field,
    int_field,
    uuid_field,
    variant,
)


DISCRIMINATOR_FIELD = "type"

MARZLEVANE = variant(
    "Marzlevane",
    "marzlevane",
    uuid_field("foo"),
    int_field("bar"),
    enum_field("baz", "a", "b", "c"),
    discriminator=DISCRIMINATOR_FIELD,
)

ENCABULATOR = variant(
    "Encabulator",
    "encabulator",
    uuid_field("foo"),
    int_field("bar"),
    enum_field("baz", "e", "f", "g"),
    discriminator=DISCRIMINATOR_FIELD,
)

# `data` is a plain alternation of two map shapes. Nothing says which one the
# caller meant, so a single bad field is reported against both.
DANGEROUS_OR = EnvelopeSchema(
    fields=(uuid_field("id"),),
    union_key="data",
    union=UndiscriminatedUnion(variants=(MARZLEVANE, ENCABULATOR)),
)

# `data` dispatches on `type` first, so only the chosen variant is validated
# and errors point at the field that is actually wrong.
SAFE_SCHEMA_WITH_MULTI = EnvelopeSchema(
    fields=(uuid_field("id"),),
    union_key="data",
    union=DiscriminatedUnion.of(DISCRIMINATOR_FIELD, MARZLEVANE, ENCABULATOR),
)
