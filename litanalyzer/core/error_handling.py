"""
Error handling for litanalyzer.

This module provides the exception hierarchy used throughout the analyzer.
Errors raised while analyzing a class carry the offending syntax node so that
callers can report a precise source location, and can be turned into
structured diagnostics instead of being printed.
"""
from typing import Any, Optional

from litanalyzer.models.diagnostic import Diagnostic
from litanalyzer.models.enums import DiagnosticSeverity
from litanalyzer.models.range import SourceRange


class LitAnalyzerError(Exception):
    """Base class for all litanalyzer exceptions.

    All exceptions specific to litanalyzer inherit from this class to allow
    for consistent error handling and identification.
    """
    def __init__(self, message: str, **kwargs):
        self.message = message
        self.context = kwargs.get('context', {})

        for key, value in kwargs.items():
            if key != 'context':
                self.context[key] = value

        super().__init__(message)

    def add_context(self, key: str, value: Any) -> None:
        """Add additional context information to the exception.

        Args:
            key: The context key
            value: The context value
        """
        self.context[key] = value

    def __str__(self) -> str:
        if not self.context:
            return self.message

        context_str = ', '.join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} [Context: {context_str}]"

# ===== Parsing Errors =====

class ParsingError(LitAnalyzerError):
    """Exception raised when source code cannot be parsed with tree-sitter."""
    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, path=path, **kwargs)
        self.path = path

class UnsupportedLanguageError(LitAnalyzerError):
    """Exception raised when no grammar is registered for a language code."""
    def __init__(self, language: str, **kwargs):
        super().__init__(f"Unsupported language: '{language}'", language=language, **kwargs)
        self.language = language

# ===== Analysis Errors =====

class DiagnosticsError(LitAnalyzerError):
    """Exception raised for an unsupported shape at a specific syntax node.

    Aborts the extraction of the enclosing class.
    """
    def __init__(self, node: Any, message: str, **kwargs):
        self.node = node
        self.range = SourceRange.from_node(node) if node is not None else None
        if self.range is not None:
            kwargs.setdefault('location', str(self.range))
        super().__init__(message, **kwargs)

    def to_diagnostic(self, class_name: Optional[str] = None,
                      path: Optional[str] = None) -> Diagnostic:
        return Diagnostic(
            severity=DiagnosticSeverity.ERROR,
            message=self.message,
            range=self.range,
            class_name=class_name,
            path=path,
        )

class UnsupportedPropertyNameError(DiagnosticsError):
    """A class member declaring a property has a non-identifier name."""
    def __init__(self, node: Any, **kwargs):
        super().__init__(node, 'Unsupported property name', **kwargs)

class UnsupportedStaticPropertiesFormatError(DiagnosticsError):
    """The static properties member is neither an initializer nor a getter returning an object."""
    def __init__(self, node: Any, **kwargs):
        super().__init__(
            node,
            'Unsupported static properties format. Expected an object literal '
            'assigned in a static initializer or returned from a static getter.',
            **kwargs,
        )

class UnsupportedStaticPropertiesEntryError(DiagnosticsError):
    """An entry of the static properties object is not `identifier: {...}`."""
    def __init__(self, node: Any, **kwargs):
        super().__init__(
            node,
            'Unsupported static properties entry. Expected a string identifier '
            'key and object literal value.',
            **kwargs,
        )

class TypeResolutionError(DiagnosticsError):
    """The type resolver failed for a node."""
    pass
