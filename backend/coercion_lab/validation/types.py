from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple, Union


class FieldKind(str, Enum):
    UUID = "uuid"
    INT = "int"
    ENUM = "enum"


class _Missing:
    """Marker for a key that is absent from the input (distinct from JSON null)."""

    def __repr__(self) -> str:
        return "<missing>"


MISSING: Any = _Missing()


@dataclass(frozen=True)
class Keyword:
    """
    A symbolic value such as `:encabulator`.

    JSON has no symbols, so enum fields decode strings into Keywords before
    checking them. A plain string never compares equal to a Keyword.
    """

    name: str

    def __str__(self) -> str:
        return f":{self.name}"


@dataclass(frozen=True)
class FieldSpec:
    name: str
    kind: FieldKind
    symbols: Tuple[Keyword, ...] = ()

    def __post_init__(self) -> None:
        if self.kind is FieldKind.ENUM and not self.symbols:
            raise ValueError(f"Field '{self.name}': enum fields need at least one symbol")
        if self.kind is not FieldKind.ENUM and self.symbols:
            raise ValueError(f"Field '{self.name}': only enum fields take symbols")


def uuid_field(name: str) -> FieldSpec:
    return FieldSpec(name=name, kind=FieldKind.UUID)


def int_field(name: str) -> FieldSpec:
    return FieldSpec(name=name, kind=FieldKind.INT)


def enum_field(name: str, *symbols: str) -> FieldSpec:
    return FieldSpec(name=name, kind=FieldKind.ENUM, symbols=tuple(Keyword(s) for s in symbols))


@dataclass(frozen=True)
class VariantSchema:
    """
    One concrete shape inside a union.

    The type tag is not listed in `fields`; it is derived from
    (discriminator_field, discriminator_value) and always checked first.
    """

    name: str
    discriminator_field: str
    discriminator_value: Keyword
    fields: Tuple[FieldSpec, ...]

    def __post_init__(self) -> None:
        names = [f.name for f in self.fields]
        if len(set(names)) != len(names):
            raise ValueError(f"Variant '{self.name}': duplicate field names {names}")
        if self.discriminator_field in names:
            raise ValueError(
                f"Variant '{self.name}': '{self.discriminator_field}' is the discriminator and cannot be redeclared"
            )

    @property
    def tag_field(self) -> FieldSpec:
        return FieldSpec(
            name=self.discriminator_field,
            kind=FieldKind.ENUM,
            symbols=(self.discriminator_value,),
        )

    @property
    def all_fields(self) -> Tuple[FieldSpec, ...]:
        return (self.tag_field, *self.fields)


def variant(name: str, tag: str, *fields: FieldSpec, discriminator: str = "type") -> VariantSchema:
    return VariantSchema(
        name=name,
        discriminator_field=discriminator,
        discriminator_value=Keyword(tag),
        fields=tuple(fields),
    )


@dataclass(frozen=True)
class UndiscriminatedUnion:
    """Plain alternation: every variant is a candidate for every input."""

    variants: Tuple[VariantSchema, ...]

    def __post_init__(self) -> None:
        if not self.variants:
            raise ValueError("A union needs at least one variant")


@dataclass(frozen=True)
class DiscriminatedUnion:
    """Tagged union: the discriminator field picks exactly one variant."""

    discriminator_field: str
    variants: Tuple[VariantSchema, ...]

    def __post_init__(self) -> None:
        if not self.variants:
            raise ValueError("A union needs at least one variant")
        seen: set[Keyword] = set()
        for v in self.variants:
            if v.discriminator_field != self.discriminator_field:
                raise ValueError(
                    f"Variant '{v.name}' dispatches on '{v.discriminator_field}', "
                    f"expected '{self.discriminator_field}'"
                )
            if v.discriminator_value in seen:
                raise ValueError(f"Duplicate discriminator value {v.discriminator_value}")
            seen.add(v.discriminator_value)

    @classmethod
    def of(cls, discriminator_field: str, *variants: VariantSchema) -> "DiscriminatedUnion":
        return cls(discriminator_field=discriminator_field, variants=tuple(variants))

    @property
    def dispatch_values(self) -> Tuple[Keyword, ...]:
        return tuple(v.discriminator_value for v in self.variants)

    def lookup(self, tag: Keyword) -> Optional[VariantSchema]:
        for v in self.variants:
            if v.discriminator_value == tag:
                return v
        return None


UnionSchema = Union[UndiscriminatedUnion, DiscriminatedUnion]


@dataclass(frozen=True)
class EnvelopeSchema:
    """Outer map: plain fields (e.g. `id`) plus one key holding the union."""

    fields: Tuple[FieldSpec, ...]
    union_key: str
    union: UnionSchema


@dataclass(frozen=True)
class Unresolved:
    """Discriminator dispatch failed. `reason` is missing | not-coercible | unknown-value."""

    reason: str
    value: Any = MISSING


@dataclass(frozen=True)
class FieldError:
    path: Tuple[str, ...]
    message: str
    value: Any = MISSING


@dataclass(frozen=True)
class Valid:
    value: Any
    variant: Optional[VariantSchema] = None


@dataclass(frozen=True)
class Invalid:
    errors: Tuple[FieldError, ...]


ValidationResult = Union[Valid, Invalid]
