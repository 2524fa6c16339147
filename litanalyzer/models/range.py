from typing import Optional, Any

from pydantic import BaseModel


class SourceRange(BaseModel):
    """Represents a range in source code (1-based lines, 0-based columns)"""
    start_line: int
    end_line: int
    start_column: Optional[int] = None
    end_column: Optional[int] = None
    node: Any = None
    model_config = {'arbitrary_types_allowed': True}

    @classmethod
    def from_node(cls, node: Any) -> 'SourceRange':
        return cls(
            start_line=node.start_point[0] + 1,
            start_column=node.start_point[1],
            end_line=node.end_point[0] + 1,
            end_column=node.end_point[1],
            node=node,
        )

    def __str__(self) -> str:
        return f'{self.start_line}:{self.start_column or 0}-{self.end_line}:{self.end_column or 0}'
