"""
jsv/services/documentation.py

Lookup of human-authored schema documentation by schema path.
"""

from __future__ import annotations

from jsv.domain.pointer import JSONPointer
from jsv.domain.validation import Documentation
from jsv.domain.values import ArrayValue, ObjectValue, StringValue, Value


def resolve_node(schema_root: Value, schema_path: JSONPointer) -> Value | None:
    """
    Return the schema value at `schema_path`, or None when it does not resolve.
    """

    current: Value = schema_root
    for token in schema_path.tokens:
        if isinstance(current, ObjectValue):
            child = current.get(token)
        elif isinstance(current, ArrayValue) and token.isdigit():
            index = int(token)
            child = current.items[index] if index < len(current.items) else None
        else:
            child = None
        if child is None:
            return None
        current = child
    return current


def resolve_owning_node(schema_root: Value, schema_path: JSONPointer) -> ObjectValue | None:
    """
    Return the nearest schema object at or above `schema_path`.

    Violation paths end at a keyword (`/type`, `/required`), so the object that
    owns the keyword is the node to describe.
    """

    path = schema_path
    node = resolve_node(schema_root, path)
    while node is not None:
        if isinstance(node, ObjectValue):
            return node
        if path.is_root:
            return None
        path = path.parent
        node = resolve_node(schema_root, path)
    return None


def resolve_docs(schema_root: Value, schema_path: JSONPointer) -> Documentation | None:
    node = resolve_owning_node(schema_root, schema_path)
    if node is None:
        return None

    title = node.get("title")
    description = node.get("description")
    docs = Documentation(
        title=title.value if isinstance(title, StringValue) else None,
        description=description.value if isinstance(description, StringValue) else None,
    )
    if docs.title is None and docs.description is None:
        return None
    return docs
