"""
Location of the static properties block of a class.
"""
from typing import Iterator, Tuple

from tree_sitter import Node

from litanalyzer.core.engine.ast_handler import ASTHandler
from litanalyzer.core.engine.syntax import (
    FIELD_TYPES,
    is_getter,
    is_identifier_name,
    is_object_literal,
    node_text,
)
from litanalyzer.core.error_handling import (
    UnsupportedStaticPropertiesEntryError,
    UnsupportedStaticPropertiesFormatError,
)


def get_static_properties_object_literal(properties: Node) -> Node:
    """
    Find the object literal for a static properties block.

    For a field it looks like::

        static properties = { ... };

    For a getter::

        static get properties() {
          return { ... };
        }

    Raises:
        UnsupportedStaticPropertiesFormatError: for any other shape
    """
    obj = None
    if properties.type in FIELD_TYPES:
        value = properties.child_by_field_name('value')
        if is_object_literal(value):
            obj = value
    elif is_getter(properties):
        statements = ASTHandler.named_statements(properties.child_by_field_name('body'))
        statement = statements[-1] if statements else None
        if statement is not None and statement.type == 'return_statement':
            expressions = ASTHandler.named_statements(statement)
            if expressions and is_object_literal(expressions[0]):
                obj = expressions[0]
    if obj is None:
        raise UnsupportedStaticPropertiesFormatError(properties)
    return obj


def iter_static_entries(obj: Node) -> Iterator[Tuple[str, Node, Node]]:
    """
    Yields ``(name, options, entry)`` for each entry of a static properties object.

    Raises:
        UnsupportedStaticPropertiesEntryError: for an entry that is not
            `identifier: {object literal}`
    """
    for entry in ASTHandler.named_statements(obj):
        key = entry.child_by_field_name('key') if entry.type == 'pair' else None
        value = entry.child_by_field_name('value') if entry.type == 'pair' else None
        if not (is_identifier_name(key) and is_object_literal(value)):
            raise UnsupportedStaticPropertiesEntryError(entry)
        yield node_text(key), value, entry
