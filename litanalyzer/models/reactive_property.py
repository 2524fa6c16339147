"""
Models for reactive properties.
Provides the canonical, normalized view of a component's reactive properties.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel

from .enums import DeclarationSource


class TypeDescriptor(BaseModel):
    """A resolved type for a declaration or expression"""
    text: str
    inferred: bool = False
    node: Any = None
    model_config = {'arbitrary_types_allowed': True}


class ReactiveProperty(BaseModel):
    """
    A component field whose assignment triggers an update cycle.

    ``attribute`` is the lower-cased property name unless suppressed or
    overridden, ``reflect`` defaults to False and ``type_option`` /
    ``converter`` default to None.
    """
    name: str
    type: Optional[TypeDescriptor] = None
    attribute: Optional[str] = None
    type_option: Optional[str] = None
    reflect: bool = False
    converter: Any = None
    source: DeclarationSource = DeclarationSource.DECORATOR
    model_config = {'arbitrary_types_allowed': True}

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe view; the converter node is rendered as its source text."""
        converter = None
        if self.converter is not None:
            raw = getattr(self.converter, 'text', None)
            converter = raw.decode('utf8') if isinstance(raw, bytes) else str(self.converter)
        return {
            'name': self.name,
            'type': self.type.text if self.type else None,
            'attribute': self.attribute,
            'typeOption': self.type_option,
            'reflect': self.reflect,
            'converter': converter,
            'source': self.source.value,
        }


ReactivePropertyMap = Dict[str, ReactiveProperty]
