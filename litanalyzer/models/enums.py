"""
Enumerations shared by the litanalyzer models.
"""
from enum import Enum

class MemberKind(str, Enum):
    """Syntactic kinds of class members that can declare a property"""
    FIELD = 'field'
    GETTER = 'getter'

class DeclarationSource(str, Enum):
    """Where the final options of a reactive property came from"""
    DECORATOR = 'decorator'
    STATIC_BLOCK = 'static_block'

class DiagnosticSeverity(str, Enum):
    ERROR = 'error'
    WARNING = 'warning'
    INFO = 'info'
