"""
Models for analyzed modules and the component classes they declare.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .diagnostic import Diagnostic
from .enums import DiagnosticSeverity
from .range import SourceRange
from .reactive_property import ReactiveProperty


class LitElementDeclaration(BaseModel):
    """A component class and its extracted reactive properties"""
    name: str
    tag_name: Optional[str] = None
    range: Optional[SourceRange] = None
    reactive_properties: Dict[str, ReactiveProperty] = Field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'tagName': self.tag_name,
            'line': self.range.start_line if self.range else None,
            'reactiveProperties': [p.to_dict() for p in self.reactive_properties.values()],
        }


class LitModule(BaseModel):
    """Result of analyzing one source module"""
    path: Optional[str] = None
    elements: List[LitElementDeclaration] = Field(default_factory=list)
    diagnostics: List[Diagnostic] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(d.severity == DiagnosticSeverity.ERROR for d in self.diagnostics)

    def get_element(self, name: str) -> Optional[LitElementDeclaration]:
        for element in self.elements:
            if element.name == name:
                return element
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'path': self.path,
            'elements': [e.to_dict() for e in self.elements],
            'diagnostics': [d.to_dict() for d in self.diagnostics],
        }
