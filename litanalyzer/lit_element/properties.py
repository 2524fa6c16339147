"""
Extraction of reactive property declarations from a component class.

Properties are merged from three declaration styles, in this order:

1. members decorated with `@property()`, in member order;
2. entries of the static `properties` block (field or getter), in object
   literal order, overwriting earlier entries of the same name.

Undecorated fields and constructor assignments never become properties by
themselves; they only supply the type of a static block entry.
"""
import logging
from typing import Dict, Optional

from tree_sitter import Node

from litanalyzer.core.diagnostics import DiagnosticCollector
from litanalyzer.core.error_handling import LitAnalyzerError, TypeResolutionError
from litanalyzer.lit_element.constructor import add_constructor_initializers
from litanalyzer.lit_element.decorators import get_property_options
from litanalyzer.lit_element.members import classify_members
from litanalyzer.lit_element.options import decode_property_options
from litanalyzer.lit_element.static_block import (
    get_static_properties_object_literal,
    iter_static_entries,
)
from litanalyzer.models.enums import DeclarationSource
from litanalyzer.models.reactive_property import ReactiveProperty, ReactivePropertyMap, TypeDescriptor
from litanalyzer.type_resolver import SyntacticTypeResolver, TypeResolver

logger = logging.getLogger(__name__)


def _resolve_type(node: Node, type_resolver: TypeResolver) -> TypeDescriptor:
    try:
        return type_resolver.resolve_type(node)
    except LitAnalyzerError:
        raise
    except Exception as e:
        raise TypeResolutionError(node, f'Type resolution failed: {e}') from e


def get_properties(class_node: Node, type_resolver: Optional[TypeResolver] = None,
                   diagnostics: Optional[DiagnosticCollector] = None) -> ReactivePropertyMap:
    """
    Build the reactive property map of a class declaration.

    Args:
        class_node: The class declaration node
        type_resolver: Resolver used for property types
        diagnostics: Optional collector for non-fatal findings

    Returns:
        Mapping of property name to ReactiveProperty, in declaration order

    Raises:
        DiagnosticsError: when an unsupported declaration shape is found
    """
    type_resolver = type_resolver or SyntacticTypeResolver()
    reactive_properties: Dict[str, ReactiveProperty] = {}

    members = classify_members(class_node, diagnostics)

    for name, member, decorator in members.decorated:
        options = get_property_options(decorator)
        reactive_properties[name] = ReactiveProperty(
            name=name,
            type=_resolve_type(member, type_resolver),
            source=DeclarationSource.DECORATOR,
            **decode_property_options(options, name),
        )

    if members.static_properties is not None:
        _add_properties_from_static_block(
            class_node,
            members.static_properties,
            members.undecorated,
            reactive_properties,
            type_resolver,
        )

    logger.debug('Extracted %d reactive properties', len(reactive_properties))
    return reactive_properties


extract_reactive_properties = get_properties


def _add_properties_from_static_block(class_node: Node, properties: Node,
                                      undecorated_properties: Dict[str, Node],
                                      reactive_properties: Dict[str, ReactiveProperty],
                                      type_resolver: TypeResolver) -> None:
    # In TS sources the type comes from a `declare`d field; JS sources only
    # have the constructor assignment.
    add_constructor_initializers(class_node, undecorated_properties)
    obj = get_static_properties_object_literal(properties)
    for name, options, _entry in iter_static_entries(obj):
        node_for_type = undecorated_properties.get(name)
        reactive_properties[name] = ReactiveProperty(
            name=name,
            type=_resolve_type(node_for_type, type_resolver) if node_for_type is not None else None,
            source=DeclarationSource.STATIC_BLOCK,
            **decode_property_options(options, name),
        )
