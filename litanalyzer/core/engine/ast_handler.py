"""
AST Handler providing a unified interface for tree-sitter operations.
"""
import logging
from functools import lru_cache
from typing import Iterator, List, Optional, Tuple

from tree_sitter import Node

from litanalyzer.core.engine.languages import LANGUAGES, get_parser
from litanalyzer.core.error_handling import ParsingError
from litanalyzer.core.utils.hashing import sha1_code

logger = logging.getLogger(__name__)

class ASTHandler:
    """
    Handles Abstract Syntax Tree operations using tree-sitter.
    Provides a unified interface for parsing and navigating syntax trees.
    """

    def __init__(self, language_code: str = 'typescript'):
        """
        Initialize the AST handler.

        Args:
            language_code: Grammar code ('typescript' or 'tsx')
        """
        self.language_code = language_code
        self.parser = get_parser(language_code)
        self.language = LANGUAGES[language_code]

    @lru_cache(maxsize=128)
    def _parse_cached(self, code_hash: str, code: str) -> Tuple[Node, bytes]:
        """Internal cached parse implementation."""
        code_bytes = code.encode("utf8")
        tree = self.parser.parse(code_bytes)
        return (tree.root_node, code_bytes)

    def parse(self, code: str) -> Tuple[Node, bytes]:
        """
        Parse source code into an AST. Results are cached using an LRU cache
        keyed by the SHA1 hash of ``code``.

        Args:
            code: Source code as string

        Returns:
            Tuple of (root_node, code_bytes)
        """
        try:
            return self._parse_cached(sha1_code(code), code)
        except ValueError as e:
            raise ParsingError(f"Could not parse source: {e}", language=self.language_code) from e

    @staticmethod
    def get_node_text(node: Node, code_bytes: Optional[bytes] = None) -> str:
        """
        Get the text content of a node.

        Args:
            node: Tree-sitter node
            code_bytes: Source code as bytes; the node's own text is used when omitted

        Returns:
            String content of the node
        """
        if code_bytes is not None:
            return code_bytes[node.start_byte:node.end_byte].decode('utf8')
        return node.text.decode('utf8')

    @staticmethod
    def named_statements(block: Optional[Node]) -> List[Node]:
        """
        Named children of a block, without comments.

        Args:
            block: A statement block or object node

        Returns:
            Ordered list of statement / entry nodes
        """
        if block is None:
            return []
        return [child for child in block.named_children if child.type != 'comment']

    @staticmethod
    def walk(node: Node) -> Iterator[Node]:
        """Pre-order traversal of ``node`` and its descendants."""
        stack = [node]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))
