"""Data types describing Mealy, Moore and finite automata."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Transition:
    """A source state together with the input symbol that leaves it."""

    state: str
    symbol: str


@dataclass
class MealyAutomaton:
    """A Mealy machine: each move yields a destination state and an output signal."""

    states: list[str] = field(default_factory=list)
    input_symbols: list[str] = field(default_factory=list)
    moves: dict[Transition, tuple[str, str]] = field(default_factory=dict)


@dataclass
class MooreAutomaton:
    """A Moore machine: output signals belong to states, moves yield states."""

    states: list[str] = field(default_factory=list)
    input_symbols: list[str] = field(default_factory=list)
    state_signals: dict[str, str] = field(default_factory=dict)
    moves: dict[Transition, str] = field(default_factory=dict)


@dataclass(frozen=True)
class FiniteState:
    """A state of a finite automaton and whether it accepts."""

    name: str
    is_final: bool = False


@dataclass
class FiniteAutomaton:
    """A finite automaton whose moves yield destination states."""

    states: list[FiniteState] = field(default_factory=list)
    input_symbols: list[str] = field(default_factory=list)
    moves: dict[Transition, str] = field(default_factory=dict)