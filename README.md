# circuitsim

A console simulator of digital integrated circuits. You define a circuit
as a boolean expression over single-character inputs. You can then run it
with given input values, list its full truth table, or synthesise an
expression from a truth table stored in a file.

The package also ships a few small command-line tools: body mass index,
barrel volume, circle, calculator, attendance and others.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## The circuit simulator

Start it with:

```
circuitsim
```

It prints a banner, then shows the prompt `Enter command: ` and reads one
command per line until `EXIT` or end of input. Unknown commands are ignored.
Errors go to standard error, and the command that caused them is skipped.

| Command | Meaning |
|---|---|
| `DEFINE name(a, b, ...) "expr"` | Define a circuit. Operators are `!` (not), `&` (and) and `\|` (or), and parentheses are allowed. |
| `RUN name(1, 0, ...)` | Evaluate the circuit with the given single-digit inputs, in argument order, and print the result. |
| `ALL name` | Print every 0/1 input combination with its result. |
| `FIND "file.txt"` | Read a truth table from a file, print it, and print a sum-of-products expression for it. |
| `PRINT` | List all defined circuits in the order they were defined. |
| `EXIT` | Leave the simulator. |

Example session (prompts left out):

```
DEFINE and1(a, b) "a & b"
RUN and1(1, 1)
1
ALL and1
Execute and1 "a & b"
0 | 0 | res: 0
0 | 1 | res: 0
1 | 0 | res: 0
1 | 1 | res: 1
PRINT
and1(a, b) "a & b"
EXIT
```

Precedence from highest to lowest is `!`, `&`, `|`.

Each character of the argument list, other than spaces and commas, is one
input name. A `DEFINE` is rejected in these cases:
- the argument list is missing or not closed;
- the name is empty;
- there is no quoted expression;
- the expression uses a symbol that is neither an operator, a parenthesis,
  nor one of the circuit's inputs;
- a circuit with the same name already exists;
- the store already holds its maximum of 100 circuits.

A `RUN` argument that is not a digit is rejected. A malformed expression,
such as mismatched parentheses or a missing operand, is reported when the
circuit is run.

### Truth table files for `FIND`

Each line holds one row of whitespace-separated integers. The last column
is the output, and the inputs are named `a`, `b`, `c`, and so on. A line is
read up to its first word that is not an integer. Lines without any leading
integers are skipped. All rows must have the same number of columns.

For every row whose output is 1, the result contains one product term. A
zero input appears negated. For example:

```
0 0 0
0 1 1
1 0 1
1 1 0
```

gives `"(!a & b) | (a & !b)"`. If no row has output 1, the result is a
lone `"`.

### Using it from Python

```python
from circuitsim.circuit import CircuitStorage, parse_definition, parse_run
from circuitsim.expression import evaluate, tokenize

storage = CircuitStorage()
storage.add(parse_definition('xor1(a, b) "(a & !b) | (!a & b)"'))
name, values = parse_run("xor1(1, 0)")
print(storage.find(name).run(values))   # 1

for inputs, result in storage.find("xor1").truth_rows():
    print(inputs, result)

print(evaluate(tokenize("1 & !0")))     # 1
```

- `circuitsim.expression` provides `tokenize`, `precedence`, `to_postfix`,
  `evaluate_postfix` and `evaluate`. Malformed input raises `ExpressionError`.
- `circuitsim.circuit` provides `Circuit`, `CircuitStorage`,
  `parse_definition` and `parse_run`. Invalid definitions, inputs and
  storage operations raise `CircuitError`.
- `circuitsim.truthtable` provides `TruthTable`, `parse_truth_table`,
  `load_truth_table`, `parse_file_name`, `synthesize_minterm` and
  `find_expression`.
- `circuitsim.cli.Simulator.execute` runs one command line. It returns
  `False` when that line is `EXIT`.

### What it does not do

Circuits live only in memory for the length of a session. There is no
command to save them or load them back. `FIND` prints an expression but does
not define a circuit from it, and the synthesised expression is not
minimised.

## Other tools

| Command | What it does |
|---|---|
| `circuitsim-bmi` | Asks for mass (kg) and height (m) and prints the low- and high-precision body mass index. |
| `circuitsim-barrel-vertical` | Volume of a vertical cylindrical barrel from its radius and height. |
| `circuitsim-barrel-horizontal` | Volume of liquid in a horizontal cylindrical barrel from its radius, length and filled height. The filled height may not exceed the diameter. |
| `circuitsim-maxnum` | Reads three numbers and prints the largest. |
| `circuitsim-swap` | Reads two integers and prints them before and after swapping. |
| `circuitsim-circle` | Reads radii until end of input or the first non-number, and prints each perimeter and area to two decimals. |
| `circuitsim-xor` | Reads pairs of integers and prints their logical XOR. |
| `circuitsim-logicfunc` | Reads triples `a b c` and prints the three-input logic function F. |
| `circuitsim-attendance` | Interactive menu that sets, clears, toggles and lists the attendance of students 0–63. |
| `circuitsim-calc 3 x 4` | Calculator supporting `+`, `-`, `x` or `*`, and `/`. Division by zero is an error. |
| `circuitsim-count word` | Counts the lines on standard input that equal `word` exactly. |

The functions behind these tools can also be called from Python:
- `circuitsim.bmi.BodyMassIndex`
- `circuitsim.barrel.vertical_cylinder_volume` and
  `circuitsim.barrel.horizontal_cylinder_volume`
- `circuitsim.maxnum.find_max`
- `circuitsim.swap.swap`
- `circuitsim.circle.circle`
- `circuitsim.logic.logical_xor`, `circuitsim.logic.synthesis_by_one`,
  `circuitsim.logic.synthesis_by_zero` and `circuitsim.logic.minimized_expr`
- `circuitsim.attendance.Attendance`
- `circuitsim.calculator.calculate`
- `circuitsim.stringcount.count_lines`

## Running the tests

```
pytest
```