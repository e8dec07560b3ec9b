"""Read automata from semicolon-separated tables and write them as Graphviz DOT graphs."""

__version__ = "0.1.0"