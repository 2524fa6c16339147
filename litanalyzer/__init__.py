from .analyzer import Analyzer
from .core.config import config
from .core.diagnostics import DiagnosticCollector
from .core.error_handling import (
    DiagnosticsError,
    LitAnalyzerError,
    UnsupportedPropertyNameError,
    UnsupportedStaticPropertiesEntryError,
    UnsupportedStaticPropertiesFormatError,
)
from .lit_element.properties import extract_reactive_properties, get_properties
from .models import LitElementDeclaration, LitModule, ReactiveProperty, TypeDescriptor
from .type_resolver import SyntacticTypeResolver, TypeResolver

__version__ = "0.1.0"
__all__ = [
    "Analyzer",
    "DiagnosticCollector",
    "DiagnosticsError",
    "LitAnalyzerError",
    "LitElementDeclaration",
    "LitModule",
    "ReactiveProperty",
    "SyntacticTypeResolver",
    "TypeDescriptor",
    "TypeResolver",
    "UnsupportedPropertyNameError",
    "UnsupportedStaticPropertiesEntryError",
    "UnsupportedStaticPropertiesFormatError",
    "config",
    "extract_reactive_properties",
    "get_properties",
]
