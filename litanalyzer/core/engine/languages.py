"""
Tree-sitter grammars available to the analyzer.
"""
import os

import tree_sitter_typescript
from tree_sitter import Language, Parser

from litanalyzer.core.error_handling import UnsupportedLanguageError


LANGUAGES = {
    'typescript': Language(tree_sitter_typescript.language_typescript()),
    'tsx': Language(tree_sitter_typescript.language_tsx()),
}

_JSX_EXTENSIONS = ('.tsx', '.jsx')


def get_parser(language_code: str) -> Parser:
    """Return a parser configured for ``language_code``."""
    language = LANGUAGES.get(language_code)
    if language is None:
        raise UnsupportedLanguageError(language_code)
    return Parser(language)


def language_for_path(file_path: str) -> str:
    """Pick the grammar for a file; JSX-capable sources use the tsx grammar."""
    _, ext = os.path.splitext(file_path)
    if ext.lower() in _JSX_EXTENSIONS:
        return 'tsx'
    return 'typescript'
