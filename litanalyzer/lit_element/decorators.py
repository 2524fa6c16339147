"""
Recognition of the decorators used by Lit elements.
"""
import logging
from typing import Optional

from tree_sitter import Node

from litanalyzer.core.config import config
from litanalyzer.core.engine.syntax import (
    call_arguments,
    class_decorators,
    decorator_expression,
    is_identifier,
    is_object_literal,
    is_string_literal,
    member_decorators,
    node_text,
    string_literal_text,
)

logger = logging.getLogger(__name__)

_BARE = object()


def _decorator_call(decorator: Node, name: str):
    """
    Match `@name` or `@name(...)`.

    Returns:
        The call_expression node, ``_BARE`` for an uncalled decorator, or None
    """
    expression = decorator_expression(decorator)
    if expression is None:
        return None
    if is_identifier(expression) and node_text(expression) == name:
        return _BARE
    if expression.type == 'call_expression':
        function = expression.child_by_field_name('function')
        if is_identifier(function) and node_text(function) == name:
            return expression
    return None


def get_property_decorator(member: Node) -> Optional[Node]:
    """Returns the property-declaring decorator on ``member``, if any."""
    name = config.get('analysis', 'property_decorator', 'property')
    for decorator in member_decorators(member):
        if _decorator_call(decorator, name) is not None:
            return decorator
    return None


def get_property_options(decorator: Node) -> Optional[Node]:
    """
    Gets the options object literal passed to a property decorator.

    Returns None for a bare `@property`, for `@property()` and when the
    argument is not an object literal.
    """
    name = config.get('analysis', 'property_decorator', 'property')
    call = _decorator_call(decorator, name)
    if call is None or call is _BARE:
        return None
    arguments = call_arguments(call)
    if arguments and is_object_literal(arguments[0]):
        return arguments[0]
    if arguments:
        logger.debug('Property decorator argument is not an object literal: %s', node_text(arguments[0]))
    return None


def get_custom_element_tag(class_node: Node) -> Optional[str]:
    """Tag name from a `@customElement('x-foo')` decorator on the class."""
    name = config.get('analysis', 'custom_element_decorator', 'customElement')
    for decorator in class_decorators(class_node):
        call = _decorator_call(decorator, name)
        if call is None or call is _BARE:
            continue
        arguments = call_arguments(call)
        if arguments and is_string_literal(arguments[0]):
            return string_literal_text(arguments[0])
    return None
