"""
Discovery of Lit element classes in a module.
"""
import logging
from typing import Dict, List, Optional

from tree_sitter import Node

from litanalyzer.core.config import config
from litanalyzer.core.engine.ast_handler import ASTHandler
from litanalyzer.core.engine.syntax import (
    CLASS_TYPES,
    call_arguments,
    is_identifier,
    is_string_literal,
    node_text,
    string_literal_text,
)
from litanalyzer.lit_element.decorators import get_custom_element_tag

logger = logging.getLogger(__name__)


def get_class_name(class_node: Node) -> Optional[str]:
    name = class_node.child_by_field_name('name')
    if name is not None:
        return node_text(name)
    # `const Foo = class extends LitElement {}`
    parent = class_node.parent
    if parent is not None and parent.type == 'variable_declarator':
        declared = parent.child_by_field_name('name')
        if is_identifier(declared):
            return node_text(declared)
    return None


def find_class_declarations(root: Node) -> List[Node]:
    """All class declarations and class expressions in a module, in source order."""
    return [node for node in ASTHandler.walk(root) if node.is_named and node.type in CLASS_TYPES]


def _heritage(class_node: Node) -> Optional[Node]:
    for child in class_node.named_children:
        if child.type == 'class_heritage':
            return child
    return None


def is_lit_element(class_node: Node) -> bool:
    """
    True when the class extends one of the configured base classes, directly
    (`extends LitElement`), through a namespace (`extends lit.LitElement`) or
    through a mixin call (`extends Mixin(LitElement)`).
    """
    heritage = _heritage(class_node)
    if heritage is None:
        return False
    extends = next((c for c in heritage.named_children if c.type == 'extends_clause'), heritage)
    base_classes = set(config.get('analysis', 'lit_base_classes', []))
    for node in ASTHandler.walk(extends):
        if node.type in ('identifier', 'property_identifier', 'type_identifier') and node_text(node) in base_classes:
            return True
    return False


def find_custom_element_definitions(root: Node) -> Dict[str, str]:
    """Class name to tag name for `customElements.define('x-foo', Foo)` calls."""
    definitions = {}
    for node in ASTHandler.walk(root):
        if node.type != 'call_expression':
            continue
        function = node.child_by_field_name('function')
        if function is None or node_text(function) not in ('customElements.define', 'window.customElements.define'):
            continue
        arguments = call_arguments(node)
        if len(arguments) >= 2 and is_string_literal(arguments[0]) and is_identifier(arguments[1]):
            definitions[node_text(arguments[1])] = string_literal_text(arguments[0])
            logger.debug("customElements.define for '%s'", node_text(arguments[1]))
    return definitions


def get_tag_name(class_node: Node, definitions: Dict[str, str]) -> Optional[str]:
    tag_name = get_custom_element_tag(class_node)
    if tag_name is None:
        tag_name = definitions.get(get_class_name(class_node) or '')
    return tag_name
