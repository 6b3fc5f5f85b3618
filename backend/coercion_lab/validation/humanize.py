from __future__ import annotations

from typing import Any, Dict, Iterable, List
from uuid import UUID

from .types import MISSING, FieldError, Keyword


# Key for whole-body messages when they sit next to field errors.
ROOT_KEY = "_root"


def humanize(errors: Iterable[FieldError]) -> Any:
    """
    Fold error records into the nested response shape:
      ("data", "baz") -> {"data": {"baz": [...]}}

    Messages for the same path are appended in record order, never replaced.
    Records at the empty path (the whole body was the wrong type) become a
    bare list, or go under ROOT_KEY when field errors exist alongside them.
    """
    root: List[str] = []
    tree: Dict[str, Any] = {}
    for err in errors:
        if not err.path:
            root.append(err.message)
            continue

        node = tree
        for key in err.path[:-1]:
            node = node.setdefault(key, {})
        node.setdefault(err.path[-1], []).append(err.message)

    if not tree:
        return root if root else {}
    if root:
        tree[ROOT_KEY] = root
    return tree


def _jsonable(value: Any) -> Any:
    if isinstance(value, (Keyword, UUID)):
        return str(value)
    return value


def describe(errors: Iterable[FieldError]) -> List[Dict[str, Any]]:
    """Flat, descriptive form: one entry per record, including the offending value when there was one."""
    out: List[Dict[str, Any]] = []
    for err in errors:
        item: Dict[str, Any] = {"path": list(err.path), "message": err.message}
        if err.value is not MISSING:
            item["value"] = _jsonable(err.value)
        out.append(item)
    return out
