"""
Classification of class members into property declaration sources.
"""
import logging
from typing import Dict, List, Optional, Tuple

from tree_sitter import Node

from litanalyzer.core.config import config
from litanalyzer.core.diagnostics import DiagnosticCollector
from litanalyzer.core.engine.syntax import (
    class_members,
    is_identifier_name,
    is_static,
    member_kind,
    node_text,
)
from litanalyzer.core.error_handling import UnsupportedPropertyNameError
from litanalyzer.lit_element.decorators import get_property_decorator

logger = logging.getLogger(__name__)


class ClassifiedMembers:
    """Members of one class, split by how they may declare properties."""

    def __init__(self):
        self.decorated: List[Tuple[str, Node, Node]] = []
        self.static_properties: Optional[Node] = None
        self.undecorated: Dict[str, Node] = {}


def classify_members(class_node: Node, diagnostics: Optional[DiagnosticCollector] = None) -> ClassifiedMembers:
    """
    Split the fields and getters of a class into decorated members
    ``(name, member, decorator)``, the static properties member and
    undecorated non-static members keyed by name.

    Raises:
        UnsupportedPropertyNameError: for a member with a non-identifier name
    """
    static_name = config.get('analysis', 'static_properties_name', 'properties')
    result = ClassifiedMembers()
    for member in class_members(class_node):
        if member_kind(member) is None:
            continue
        name_node = member.child_by_field_name('name')
        if not is_identifier_name(name_node):
            raise UnsupportedPropertyNameError(member)
        name = node_text(name_node)

        decorator = get_property_decorator(member)
        if decorator is not None:
            result.decorated.append((name, member, decorator))
        elif name == static_name and is_static(member):
            if result.static_properties is None:
                result.static_properties = member
            else:
                logger.warning("Ignoring additional static '%s' declaration", static_name)
                if diagnostics is not None:
                    diagnostics.warning(
                        f"Only the first static '{static_name}' declaration is analyzed", member
                    )
        elif not is_static(member):
            result.undecorated[name] = member
    return result
