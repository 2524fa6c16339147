"""
Type resolution for declarations and expressions.

The analyzer only depends on the ``TypeResolver`` protocol; the default
``SyntacticTypeResolver`` reads type annotations and infers simple types from
literal initializers, without a full type checker.
"""
import logging
from typing import Optional, Protocol

from tree_sitter import Node

from litanalyzer.core.engine.syntax import FIELD_TYPES, node_text
from litanalyzer.models.reactive_property import TypeDescriptor

logger = logging.getLogger(__name__)

UNKNOWN = 'unknown'

_LITERAL_TYPES = {
    'string': 'string',
    'template_string': 'string',
    'true': 'boolean',
    'false': 'boolean',
    'null': 'null',
    'undefined': 'undefined',
    'regex': 'RegExp',
    'object': 'object',
    'arrow_function': 'Function',
    'function_expression': 'Function',
    'function': 'Function',
    'class': 'Function',
}


class TypeResolver(Protocol):
    """Resolves a syntax node to a type descriptor."""

    def resolve_type(self, node: Node) -> TypeDescriptor:
        ...


class SyntacticTypeResolver:
    """Resolves types from annotations and literal initializers."""

    def resolve_type(self, node: Node) -> TypeDescriptor:
        if node.type in FIELD_TYPES:
            annotation = self._annotation_text(node.child_by_field_name('type'))
            if annotation is not None:
                return TypeDescriptor(text=annotation, node=node)
            value = node.child_by_field_name('value')
            if value is not None:
                return TypeDescriptor(text=self.infer_expression(value), inferred=True, node=node)
            return TypeDescriptor(text=UNKNOWN, inferred=True, node=node)
        if node.type == 'method_definition':
            annotation = self._annotation_text(node.child_by_field_name('return_type'))
            if annotation is not None:
                return TypeDescriptor(text=annotation, node=node)
            return TypeDescriptor(text=UNKNOWN, inferred=True, node=node)
        return TypeDescriptor(text=self.infer_expression(node), inferred=True, node=node)

    @staticmethod
    def _annotation_text(annotation: Optional[Node]) -> Optional[str]:
        if annotation is None:
            return None
        named = [child for child in annotation.named_children if child.type != 'comment']
        if not named:
            return None
        return node_text(named[0])

    def infer_expression(self, expr: Node) -> str:
        """Widened type of an expression, or 'unknown'."""
        kind = expr.type
        if kind in _LITERAL_TYPES:
            return _LITERAL_TYPES[kind]
        if kind == 'number':
            return 'bigint' if node_text(expr).endswith('n') else 'number'
        if kind == 'parenthesized_expression':
            inner = expr.named_children
            return self.infer_expression(inner[0]) if inner else UNKNOWN
        if kind == 'array':
            element_types = {self.infer_expression(e) for e in expr.named_children if e.type != 'comment'}
            if not element_types:
                return 'any[]'
            if len(element_types) == 1:
                return f'{element_types.pop()}[]'
            return UNKNOWN + '[]'
        if kind == 'new_expression':
            constructor = expr.child_by_field_name('constructor')
            return node_text(constructor) if constructor is not None else UNKNOWN
        if kind in ('as_expression', 'satisfies_expression'):
            named = expr.named_children
            if kind == 'as_expression' and len(named) == 2:
                return node_text(named[1])
            return self.infer_expression(named[0]) if named else UNKNOWN
        if kind == 'unary_expression':
            operator = expr.child_by_field_name('operator')
            op = node_text(operator) if operator is not None else ''
            if op == '!':
                return 'boolean'
            if op == 'typeof':
                return 'string'
            if op in ('-', '+', '~'):
                return 'number'
            if op == 'void':
                return 'undefined'
        logger.debug("No inferred type for expression of kind '%s'", kind)
        return UNKNOWN
