from typing import Any, Dict, Optional

from pydantic import BaseModel

from .enums import DiagnosticSeverity
from .range import SourceRange


class Diagnostic(BaseModel):
    """A structured analysis message, reported instead of printed"""
    severity: DiagnosticSeverity
    message: str
    range: Optional[SourceRange] = None
    class_name: Optional[str] = None
    path: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'severity': self.severity.value,
            'message': self.message,
            'line': self.range.start_line if self.range else None,
            'column': self.range.start_column if self.range else None,
            'class_name': self.class_name,
            'path': self.path,
        }

    def __str__(self) -> str:
        location = self.path or '<source>'
        if self.range:
            location += f':{self.range.start_line}:{(self.range.start_column or 0) + 1}'
        return f'{location}: {self.severity.value}: {self.message}'
