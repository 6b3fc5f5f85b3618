from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

from .types import DiscriminatedUnion, Keyword, Unresolved, VariantSchema


def resolve(union: DiscriminatedUnion, raw: Any) -> Union[VariantSchema, Unresolved]:
    """
    Pick the variant named by the discriminator field.

    Purely structural: a resolved variant may still fail validation later.
    """
    if not isinstance(raw, Mapping) or union.discriminator_field not in raw:
        return Unresolved(reason="missing")

    tag = raw[union.discriminator_field]
    if isinstance(tag, str):
        tag = Keyword(tag)
    if not isinstance(tag, Keyword):
        return Unresolved(reason="not-coercible", value=tag)

    chosen = union.lookup(tag)
    if chosen is None:
        return Unresolved(reason="unknown-value", value=tag)
    return chosen
