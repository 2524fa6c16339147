"""
Constructor field initializers, used to infer types of fields in JS sources.
"""
import logging
from typing import Dict, Optional

from tree_sitter import Node

from litanalyzer.core.engine.ast_handler import ASTHandler
from litanalyzer.core.engine.syntax import class_members, is_constructor, this_assignment

logger = logging.getLogger(__name__)


def get_constructor(class_node: Node) -> Optional[Node]:
    for member in class_members(class_node):
        if is_constructor(member):
            return member
    return None


def add_constructor_initializers(class_node: Node, undecorated_properties: Dict[str, Node]) -> None:
    """
    Adds `this.foo = expr` initializers from the class's constructor to
    ``undecorated_properties``.

    Only top-level statements are scanned. Existing entries are kept, and the
    first assignment to a name wins.
    """
    ctor = get_constructor(class_node)
    if ctor is None:
        return
    for statement in ASTHandler.named_statements(ctor.child_by_field_name('body')):
        match = this_assignment(statement)
        if match is None:
            continue
        name, expression = match
        if name not in undecorated_properties:
            undecorated_properties[name] = expression
            logger.debug("Constructor initializer hint for '%s'", name)
