# automaton-dot

`automaton-dot` reads a Mealy, Moore or finite automaton from a table whose cells are
separated by semicolons. It writes the automaton out as a Graphviz DOT graph.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install .[test]
```

## Command line

```
automaton-dot [mealy|moore|finite] INPUT.csv OUTPUT.dot
```

You can also run `python -m automaton_dot.cli` with the same arguments.

The command expects exactly three arguments. It exits with status 1 and prints a message
to standard error in these cases:

- the number of arguments is wrong;
- the automaton type is not one of the three listed;
- a file cannot be read or written;
- the table does not have the shape described below.

On success it exits with status 0.

## Input formats

Cells are separated by `;` and rows by `\n`. A trailing `;` at the end of a row is
ignored. Empty rows below the header rows are skipped. The table must have at least two
rows. If the first row is shorter than the second, it is padded with empty cells.

**Mealy.** The first row is an empty cell followed by the state names. Each following
row starts with an input symbol, and its cells hold `next_state/output_signal`.

```
;q0;q1
a;q1/y1;q0/y2
b;q0/y1;q1/y2
```

**Moore.** The first row is an empty cell followed by the output signal of each state.
The second row is an empty cell followed by the state names. Each following row starts
with an input symbol and then gives the next state for each column.

```
;y1;y2
;q0;q1
a;q1;q0
b;q0;q1
```

**Finite.** The first row marks final states with `F`. The second row is an empty cell
followed by the state names. Each following row starts with an input symbol and then
gives the next state for each column. A `-` cell means there is no transition.

```
;;F
;q0;q1
a;q1;-
b;q0;q1
```

If the same state and symbol pair appears more than once, the first move read is kept.

## Output

Vertices are numbered in the order of the states in the table. Their labels are:

- Mealy: the state name.
- Moore: `state/signal`.
- Finite: the state name, with ` (F)` added for a final state.

Edge labels are:

- Mealy: `symbol/signal`.
- Moore and finite: the input symbol.

Edges appear in table order, row by row. A move to a state name that is not in the
state list is drawn to vertex `0`. Labels are written as they are, with no escaping.

The Mealy example above gives:

```
digraph G {
0 [label="q0"];
1 [label="q1"];
0->1 [label="a/y1"];
1->0 [label="a/y2"];
0->0 [label="b/y1"];
1->1 [label="b/y2"];
}
```

## Library use

```python
from automaton_dot.csv_reader import read_mealy
from automaton_dot.service import mealy_graph, draw_moore

graph = mealy_graph(read_mealy("mealy.csv"))
print(graph.to_dot())

draw_moore("moore.csv", "moore.dot")
```

- `automaton_dot.model` defines the dataclasses `MealyAutomaton`, `MooreAutomaton`,
  `FiniteAutomaton`, `FiniteState` and `Transition`. A `Transition` is a source state
  and an input symbol, and it is used as the key of each automaton's `moves`.
- `automaton_dot.csv_reader` provides `read_spreadsheet`, `read_mealy`, `read_moore`
  and `read_finite`. A badly shaped table raises `SpreadsheetError`, a subclass of
  `ValueError`.
- `automaton_dot.graph.Graph` holds a list of vertex labels and a list of `Edge`
  objects (`source`, `target`, `label`). `Graph.to_dot()` returns the DOT text, and
  `Graph.write(path)` saves it to a file.
- `automaton_dot.service` provides `mealy_graph`, `moore_graph` and `finite_graph`,
  which turn an automaton into a `Graph`. It also provides `draw_mealy`, `draw_moore`
  and `draw_finite`, which read a table file and write a DOT file.
- `automaton_dot.cli` provides `parse_args(argv)` and `main(argv=None)`. `main`
  returns the exit status.

## What it does not do

The package only writes DOT text. It does not render images, so use a separate Graphviz
tool to turn the `.dot` file into a picture. It does not simulate, check or minimise
automata, and it does not write automata back to tables.