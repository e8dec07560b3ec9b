"""Reading automata from semicolon-separated tables."""

from __future__ import annotations

import os

from .model import FiniteAutomaton, FiniteState, MealyAutomaton, MooreAutomaton, Transition

CSV_SEPARATOR = ";"
STATE_AND_SIGNAL_SEPARATOR = "/"
FINAL_STATE = "F"
EMPTY_MOVE = "-"

Spreadsheet = list[list[str]]


class SpreadsheetError(ValueError):
    """The table does not have the shape the automaton kind requires."""


def _split_fields(text: str, separator: str) -> list[str]:
    """Split like a delimiter-driven line reader: a trailing empty field is not a field."""
    parts = text.split(separator)
    if parts[-1] == "":
        parts.pop()
    return parts


def _cell(spreadsheet: Spreadsheet, row: int, column: int) -> str:
    try:
        return spreadsheet[row][column]
    except IndexError:
        raise SpreadsheetError(f"missing cell at row {row + 1}, column {column + 1}") from None


def read_spreadsheet(path: str | os.PathLike[str]) -> Spreadsheet:
    """Read the table as rows of cells, padding the first row to the second one's width."""
    with open(path, encoding="utf-8", newline="") as stream:
        content = stream.read()

    spreadsheet = [_split_fields(line, CSV_SEPARATOR) for line in _split_fields(content, "\n")]
    if len(spreadsheet) < 2:
        raise SpreadsheetError("table must have at least two rows")

    header, second = spreadsheet[0], spreadsheet[1]
    header.extend("" for _ in range(len(second) - len(header)))
    return spreadsheet


def read_mealy(path: str | os.PathLike[str]) -> MealyAutomaton:
    """Read a Mealy machine: states across the top, symbols down the side, 'state/signal' cells."""
    spreadsheet = read_spreadsheet(path)
    automaton = MealyAutomaton(states=spreadsheet[0][1:])

    for row in spreadsheet[1:]:
        if not row:
            continue
        symbol = row[0]
        automaton.input_symbols.append(symbol)
        for column, cell in enumerate(row[1:], start=1):
            elements = _split_fields(cell, STATE_AND_SIGNAL_SEPARATOR)
            if len(elements) < 2:
                raise SpreadsheetError(f"expected 'state{STATE_AND_SIGNAL_SEPARATOR}signal', got {cell!r}")
            key = Transition(_cell(spreadsheet, 0, column), symbol)
            automaton.moves.setdefault(key, (elements[0], elements[1]))

    return automaton


def read_moore(path: str | os.PathLike[str]) -> MooreAutomaton:
    """Read a Moore machine: signals in the first row, states in the second, moves below."""
    spreadsheet = read_spreadsheet(path)
    automaton = MooreAutomaton()

    for column, state in enumerate(spreadsheet[1][1:], start=1):
        automaton.states.append(state)
        automaton.state_signals.setdefault(state, _cell(spreadsheet, 0, column))

    for row in spreadsheet[2:]:
        if not row:
            continue
        symbol = row[0]
        automaton.input_symbols.append(symbol)
        for column, cell in enumerate(row[1:], start=1):
            key = Transition(_cell(spreadsheet, 1, column), symbol)
            automaton.moves.setdefault(key, cell)

    return automaton


def read_finite(path: str | os.PathLike[str]) -> FiniteAutomaton:
    """Read a finite automaton: 'F' marks in the first row, states in the second, moves below."""
    spreadsheet = read_spreadsheet(path)
    automaton = FiniteAutomaton()

    for column, mark in enumerate(spreadsheet[0][1:], start=1):
        automaton.states.append(FiniteState(_cell(spreadsheet, 1, column), mark == FINAL_STATE))

    for row in spreadsheet[2:]:
        if not row:
            continue
        symbol = row[0]
        automaton.input_symbols.append(symbol)
        for column, cell in enumerate(row[1:], start=1):
            if cell == EMPTY_MOVE:
                continue
            key = Transition(_cell(spreadsheet, 1, column), symbol)
            automaton.moves.setdefault(key, cell)

    return automaton