import textwrap

import pytest

from litanalyzer.core.config import config
from litanalyzer.core.engine.ast_handler import ASTHandler
from litanalyzer.lit_element.classes import find_class_declarations, get_class_name


@pytest.fixture(autouse=True)
def reset_config():
    """Each test starts from the default configuration."""
    config.reset()
    yield
    config.reset()


@pytest.fixture
def ast_handler():
    return ASTHandler('typescript')


@pytest.fixture
def parse_class(ast_handler):
    """Parses a snippet and returns a class declaration node (the first, or by name)."""
    def _parse(code: str, name: str = None):
        root, _ = ast_handler.parse(textwrap.dedent(code))
        classes = find_class_declarations(root)
        if name is not None:
            classes = [c for c in classes if get_class_name(c) == name]
        assert classes, f"No class found in snippet: {code}"
        return classes[0]
    return _parse


@pytest.fixture
def parse_expression(ast_handler):
    """Parses `const x = <expr>;` and returns the expression node."""
    def _parse(expression: str):
        root, _ = ast_handler.parse(f'const x = {expression};')
        declarator = root.named_children[0].named_children[0]
        return declarator.child_by_field_name('value')
    return _parse
