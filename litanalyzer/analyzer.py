import logging
import os
from pathlib import Path
from typing import List, Optional

from litanalyzer.core.config import config
from litanalyzer.core.diagnostics import DiagnosticCollector
from litanalyzer.core.engine.ast_handler import ASTHandler
from litanalyzer.core.engine.languages import language_for_path
from litanalyzer.core.error_handling import DiagnosticsError, ParsingError
from litanalyzer.lit_element.classes import (
    find_class_declarations,
    find_custom_element_definitions,
    get_class_name,
    get_tag_name,
    is_lit_element,
)
from litanalyzer.lit_element.properties import get_properties
from litanalyzer.models.module import LitElementDeclaration, LitModule
from litanalyzer.models.range import SourceRange
from litanalyzer.type_resolver import SyntacticTypeResolver, TypeResolver

logger = logging.getLogger(__name__)


class Analyzer:
    """
    Main entry point for litanalyzer.
    Finds Lit element classes in TypeScript/JavaScript modules and extracts
    their reactive properties.
    """

    def __init__(self, type_resolver: Optional[TypeResolver] = None, strict: Optional[bool] = None):
        """
        Args:
            type_resolver: Resolver for property types (syntactic by default)
            strict: Propagate class errors instead of recording them as
                diagnostics; defaults to the inverse of
                ``analysis.skip_failed_classes``
        """
        self.type_resolver = type_resolver or SyntacticTypeResolver()
        if strict is None:
            strict = not config.get('analysis', 'skip_failed_classes', True)
        self.strict = strict
        self._handlers = {}

    def _get_handler(self, language_code: str) -> ASTHandler:
        if language_code not in self._handlers:
            self._handlers[language_code] = ASTHandler(language_code)
        return self._handlers[language_code]

    @staticmethod
    def load_file(file_path: str) -> str:
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return f.read()
        except UnicodeDecodeError:
            with open(file_path, 'r', encoding='latin-1') as f:
                return f.read()

    def analyze_code(self, code: str, path: Optional[str] = None,
                     language_code: Optional[str] = None) -> LitModule:
        """
        Analyze one module's source.

        Args:
            code: Module source
            path: Path reported in diagnostics; also selects the grammar
            language_code: Grammar override ('typescript' or 'tsx')

        Returns:
            LitModule with one declaration per Lit element class

        Raises:
            DiagnosticsError: in strict mode, for the first class that fails
        """
        language_code = language_code or language_for_path(path or '')
        root, _ = self._get_handler(language_code).parse(code)
        if root.has_error:
            logger.warning('Syntax errors in %s; results may be incomplete', path or '<source>')

        collector = DiagnosticCollector(path)
        definitions = find_custom_element_definitions(root)
        elements: List[LitElementDeclaration] = []
        for class_node in find_class_declarations(root):
            if not is_lit_element(class_node):
                continue
            name = get_class_name(class_node) or '<anonymous>'
            try:
                properties = get_properties(class_node, self.type_resolver, collector)
            except DiagnosticsError as e:
                if self.strict:
                    e.add_context('class_name', name)
                    raise
                logger.info('Skipping class %s: %s', name, e.message)
                collector.add(e.to_diagnostic(class_name=name, path=path))
                continue
            elements.append(LitElementDeclaration(
                name=name,
                tag_name=get_tag_name(class_node, definitions),
                range=SourceRange.from_node(class_node),
                reactive_properties=properties,
            ))
        logger.debug('Analyzed %s: %d elements, %d diagnostics', path or '<source>', len(elements), len(collector))
        return LitModule(path=path, elements=elements, diagnostics=collector.diagnostics)

    def analyze_file(self, file_path: str) -> LitModule:
        if not os.path.isfile(file_path):
            raise ParsingError(f'File not found: {file_path}', path=file_path)
        return self.analyze_code(self.load_file(file_path), path=file_path)

    def analyze_directory(self, root: str, recursive: bool = True) -> List[LitModule]:
        """Analyze every source file with a configured extension under ``root``."""
        extensions = set(config.get('analysis', 'file_extensions', []))
        root_path = Path(root)
        candidates = root_path.rglob('*') if recursive else root_path.glob('*')
        modules = []
        for path in sorted(candidates):
            if not path.is_file() or path.suffix.lower() not in extensions:
                continue
            if path.name.endswith('.d.ts') or 'node_modules' in path.parts:
                continue
            modules.append(self.analyze_file(str(path)))
        return modules
