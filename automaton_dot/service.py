"""Turning automata into graphs and drawing them from table files to DOT files."""

from __future__ import annotations

import os
from collections.abc import Iterable

from .csv_reader import read_finite, read_mealy, read_moore
from .graph import Edge, Graph
from .model import FiniteAutomaton, MealyAutomaton, MooreAutomaton

PathLike = str | os.PathLike[str]


def _index_by_name(names: Iterable[str]) -> dict[str, int]:
    """Map each state name to its position; a repeated name keeps its last position."""
    return {name: index for index, name in enumerate(names)}


def mealy_graph(automaton: MealyAutomaton) -> Graph:
    """Build a graph whose edges are labelled 'symbol/signal'."""
    index = _index_by_name(automaton.states)
    edges = [
        Edge(index.get(move.state, 0), index.get(destination, 0), f"{move.symbol}/{signal}")
        for move, (destination, signal) in automaton.moves.items()
    ]
    return Graph(vertices=list(automaton.states), edges=edges)


def moore_graph(automaton: MooreAutomaton) -> Graph:
    """Build a graph whose vertices are labelled 'state/signal' and edges by symbol."""
    vertices = [f"{state}/{automaton.state_signals[state]}" for state in automaton.states]
    index = _index_by_name(automaton.states)
    edges = [
        Edge(index.get(move.state, 0), index.get(destination, 0), move.symbol)
        for move, destination in automaton.moves.items()
    ]
    return Graph(vertices=vertices, edges=edges)


def finite_graph(automaton: FiniteAutomaton) -> Graph:
    """Build a graph whose accepting vertices carry an '(F)' mark."""
    vertices = [
        f"{state.name} (F)" if state.is_final else state.name for state in automaton.states
    ]
    index = _index_by_name(state.name for state in automaton.states)
    edges = [
        Edge(index.get(move.state, 0), index.get(destination, 0), move.symbol)
        for move, destination in automaton.moves.items()
    ]
    return Graph(vertices=vertices, edges=edges)


def draw_mealy(input_path: PathLike, output_path: PathLike) -> None:
    """Read a Mealy machine table and write its DOT graph."""
    mealy_graph(read_mealy(input_path)).write(output_path)


def draw_moore(input_path: PathLike, output_path: PathLike) -> None:
    """Read a Moore machine table and write its DOT graph."""
    moore_graph(read_moore(input_path)).write(output_path)


def draw_finite(input_path: PathLike, output_path: PathLike) -> None:
    """Read a finite automaton table and write its DOT graph."""
    finite_graph(read_finite(input_path)).write(output_path)