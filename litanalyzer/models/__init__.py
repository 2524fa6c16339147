from .enums import DeclarationSource, DiagnosticSeverity, MemberKind
from .range import SourceRange
from .reactive_property import ReactiveProperty, ReactivePropertyMap, TypeDescriptor
from .diagnostic import Diagnostic
from .module import LitElementDeclaration, LitModule

__all__ = [
    'DeclarationSource',
    'Diagnostic',
    'DiagnosticSeverity',
    'LitElementDeclaration',
    'LitModule',
    'MemberKind',
    'ReactiveProperty',
    'ReactivePropertyMap',
    'SourceRange',
    'TypeDescriptor',
]
