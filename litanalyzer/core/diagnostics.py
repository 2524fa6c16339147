"""
Structured diagnostic collection.

Analysis steps report problems to a collector rather than writing to a
global stream; callers decide whether to log, fail or ignore them.
"""
import logging
from typing import Any, Iterator, List, Optional

from litanalyzer.models.diagnostic import Diagnostic
from litanalyzer.models.enums import DiagnosticSeverity
from litanalyzer.models.range import SourceRange

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    DiagnosticSeverity.ERROR: logging.ERROR,
    DiagnosticSeverity.WARNING: logging.WARNING,
    DiagnosticSeverity.INFO: logging.INFO,
}


class DiagnosticCollector:
    """Accumulates diagnostics for one analysis run."""

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self._diagnostics: List[Diagnostic] = []

    def add(self, diagnostic: Diagnostic) -> None:
        if diagnostic.path is None and self.path is not None:
            diagnostic = diagnostic.model_copy(update={'path': self.path})
        self._diagnostics.append(diagnostic)

    def report(self, severity: DiagnosticSeverity, message: str, node: Any = None,
               class_name: Optional[str] = None) -> Diagnostic:
        diagnostic = Diagnostic(
            severity=severity,
            message=message,
            range=SourceRange.from_node(node) if node is not None else None,
            class_name=class_name,
            path=self.path,
        )
        self._diagnostics.append(diagnostic)
        return diagnostic

    def error(self, message: str, node: Any = None, class_name: Optional[str] = None) -> Diagnostic:
        return self.report(DiagnosticSeverity.ERROR, message, node, class_name)

    def warning(self, message: str, node: Any = None, class_name: Optional[str] = None) -> Diagnostic:
        return self.report(DiagnosticSeverity.WARNING, message, node, class_name)

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return list(self._diagnostics)

    @property
    def has_errors(self) -> bool:
        return any(d.severity == DiagnosticSeverity.ERROR for d in self._diagnostics)

    def log_all(self, target: Optional[logging.Logger] = None) -> None:
        """Emit every collected diagnostic through ``logging``."""
        target = target or logger
        for diagnostic in self._diagnostics:
            target.log(_LOG_LEVELS[diagnostic.severity], '%s', diagnostic)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)
