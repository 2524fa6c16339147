"""
Closed set of syntactic shapes recognized by the analyzer.

Every predicate inspects the tree-sitter node type tag; the tree itself is
never modified.
"""
from typing import List, Optional

from tree_sitter import Node

from litanalyzer.core.engine.ast_handler import ASTHandler
from litanalyzer.models.enums import MemberKind

FIELD_TYPES = ('public_field_definition', 'field_definition')
CLASS_TYPES = ('class_declaration', 'abstract_class_declaration', 'class')
IDENTIFIER_NAME_TYPES = ('property_identifier', 'identifier')
STRING_TYPES = ('string',)


def node_text(node: Node) -> str:
    return ASTHandler.get_node_text(node)


def is_identifier(node: Optional[Node]) -> bool:
    return node is not None and node.type == 'identifier'


def is_identifier_name(node: Optional[Node]) -> bool:
    """A plain identifier used as a member or key name (not computed, private or literal)."""
    return node is not None and node.type in IDENTIFIER_NAME_TYPES


def is_object_literal(node: Optional[Node]) -> bool:
    return node is not None and node.type == 'object'


def is_string_literal(node: Optional[Node]) -> bool:
    return node is not None and node.type in STRING_TYPES


def string_literal_text(node: Node) -> str:
    """Contents of a string literal without its quotes."""
    return node_text(node)[1:-1]


def is_true(node: Optional[Node]) -> bool:
    return node is not None and node.type == 'true'


def is_false(node: Optional[Node]) -> bool:
    return node is not None and node.type == 'false'


def is_undefined(node: Optional[Node]) -> bool:
    """`undefined`, either as keyword node or as a bare identifier."""
    if node is None:
        return False
    if node.type == 'undefined':
        return True
    return node.type == 'identifier' and node_text(node) == 'undefined'


def is_static(member: Node) -> bool:
    return any(child.type in ('static', 'static get') for child in member.children)


def is_getter(member: Node) -> bool:
    return member.type == 'method_definition' and any(
        child.type in ('get', 'static get') for child in member.children
    )


def member_kind(member: Node) -> Optional[MemberKind]:
    """Kind of a class member that may declare a property; None for anything else."""
    if member.type in FIELD_TYPES:
        return MemberKind.FIELD
    if is_getter(member):
        return MemberKind.GETTER
    return None


def is_constructor(member: Node) -> bool:
    if member.type != 'method_definition':
        return False
    name = member.child_by_field_name('name')
    return is_identifier_name(name) and node_text(name) == 'constructor'


def class_members(class_node: Node) -> List[Node]:
    """Members of a class body in declaration order."""
    body = class_node.child_by_field_name('body')
    return [
        child for child in ASTHandler.named_statements(body)
        if child.type != 'decorator'
    ]


def member_decorators(member: Node) -> List[Node]:
    """
    Decorators attached to a class member.

    Field decorators are children of the field; method and accessor
    decorators are preceding siblings inside the class body.
    """
    decorators = [child for child in member.children if child.type == 'decorator']
    if member.type == 'method_definition':
        preceding = []
        sibling = member.prev_named_sibling
        while sibling is not None and sibling.type in ('decorator', 'comment'):
            if sibling.type == 'decorator':
                preceding.append(sibling)
            sibling = sibling.prev_named_sibling
        decorators = list(reversed(preceding)) + decorators
    return decorators


def class_decorators(class_node: Node) -> List[Node]:
    """Decorators on a class, including those written before `export`."""
    decorators = [child for child in class_node.children if child.type == 'decorator']
    parent = class_node.parent
    if parent is not None and parent.type == 'export_statement':
        decorators = [child for child in parent.children if child.type == 'decorator'] + decorators
    return decorators


def decorator_expression(decorator: Node) -> Optional[Node]:
    named = [child for child in decorator.named_children if child.type != 'comment']
    return named[0] if named else None


def call_arguments(call: Node) -> List[Node]:
    arguments = call.child_by_field_name('arguments')
    return ASTHandler.named_statements(arguments)


def this_assignment(statement: Node):
    """
    Match `this.<identifier> = <expr>;`.

    Returns:
        (name, right-hand side node) or None when the statement has another shape
    """
    if statement.type != 'expression_statement':
        return None
    expressions = ASTHandler.named_statements(statement)
    if len(expressions) != 1 or expressions[0].type != 'assignment_expression':
        return None
    assignment = expressions[0]
    left = assignment.child_by_field_name('left')
    right = assignment.child_by_field_name('right')
    if left is None or right is None or left.type != 'member_expression':
        return None
    target = left.child_by_field_name('object')
    prop = left.child_by_field_name('property')
    if target is None or target.type != 'this' or not is_identifier_name(prop):
        return None
    return node_text(prop), right
