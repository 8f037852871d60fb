"""Configuration classes for stopgraph presentation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stopgraph.graph import StopGraph


@dataclass
class DisplayConfig:
    """Layout settings for the distance matrix and path listings."""

    # Width of each matrix column, right-aligned
    column_width: int = 4

    # Width of the left row-label column, left-aligned
    label_width: int = 3

    # Character and length of the rule printed between sections
    separator_char: str = "-"
    separator_length: int = 25

    def separator(self) -> str:
        """Return the horizontal rule used between listing sections."""
        return self.separator_char * self.separator_length

    def column_width_for(self, graph: "StopGraph") -> int:
        """Return a column width wide enough for every cell of ``graph``.

        One space of padding is kept so adjacent numbers never touch.
        """
        widest = max(
            len(str(graph.vertex_count - 1)),
            max((len(str(w)) for _, _, w in graph.edges()), default=1),
        )
        return max(self.column_width, widest + 1)


# Global configuration instance
DISPLAY_CONFIG = DisplayConfig()
