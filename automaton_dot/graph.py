"""A directed labelled graph rendered in the DOT language."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Edge:
    """An arc between two vertices, given by their positions in the vertex list."""

    source: int
    target: int
    label: str


@dataclass
class Graph:
    """Vertex labels in order, and the labelled edges between them."""

    vertices: list[str] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    def to_dot(self) -> str:
        """Render the graph as DOT text."""
        lines = ["digraph G {"]
        lines.extend(f'{index} [label="{label}"];' for index, label in enumerate(self.vertices))
        lines.extend(f'{edge.source}->{edge.target} [label="{edge.label}"];' for edge in self.edges)
        lines.append("}")
        return "\n".join(lines) + "\n"

    def write(self, path: str | os.PathLike[str]) -> None:
        """Write the DOT text to a file."""
        with open(path, "w", encoding="utf-8", newline="\n") as stream:
            stream.write(self.to_dot())