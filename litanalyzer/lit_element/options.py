"""
Decoding of reactive property options objects.

The same decoding applies to a decorator argument (`@property({...})`) and to
an entry of a static properties block. Values this analysis cannot evaluate
statically fall back to their defaults instead of raising.
"""
from typing import Any, Dict, Optional

from tree_sitter import Node

from litanalyzer.core.engine.ast_handler import ASTHandler
from litanalyzer.core.engine.syntax import (
    is_false,
    is_identifier,
    is_identifier_name,
    is_string_literal,
    is_true,
    is_undefined,
    node_text,
    string_literal_text,
)


def get_object_property(obj: Node, name: str) -> Optional[Node]:
    """
    Gets the value node of a named property from an object literal.

    Only `{k: v}` pairs are considered; shorthand properties (`{k}`),
    methods, accessors and spreads never match.
    """
    for entry in ASTHandler.named_statements(obj):
        if entry.type != 'pair':
            continue
        key = entry.child_by_field_name('key')
        if is_identifier_name(key) and node_text(key) == name:
            return entry.child_by_field_name('value')
    return None


def get_property_attribute(obj: Optional[Node], prop_name: str) -> Optional[str]:
    """
    Gets the `attribute` option as a string.

    Returns the lower-cased property name by default, None when the
    attribute is suppressed or cannot be evaluated.
    """
    if obj is None:
        return prop_name.lower()
    value = get_object_property(obj, 'attribute')
    if value is None:
        return prop_name.lower()
    if is_string_literal(value):
        return string_literal_text(value)
    if is_false(value):
        return None
    if is_true(value) or is_undefined(value):
        return prop_name.lower()
    return None


def get_property_type(obj: Optional[Node]) -> Optional[str]:
    """
    Gets the `type` option as a string.

    A string is returned so that it need not be compared against known
    references for String, Number, etc. With a custom converter the name may
    not mean the same thing.
    """
    if obj is None:
        return None
    value = get_object_property(obj, 'type')
    if is_identifier(value):
        return node_text(value)
    return None


def get_property_reflect(obj: Optional[Node]) -> bool:
    if obj is None:
        return False
    return is_true(get_object_property(obj, 'reflect'))


def get_property_converter(obj: Optional[Node]) -> Optional[Node]:
    """Gets the raw `converter` expression; its semantics are not interpreted."""
    if obj is None:
        return None
    return get_object_property(obj, 'converter')


def decode_property_options(obj: Optional[Node], prop_name: str) -> Dict[str, Any]:
    """All decoded options for one property, keyed by ReactiveProperty field name."""
    return {
        'attribute': get_property_attribute(obj, prop_name),
        'type_option': get_property_type(obj),
        'reflect': get_property_reflect(obj),
        'converter': get_property_converter(obj),
    }
