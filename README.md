# aoc2024

Solvers for days 1 to 20 of the 2024 advent programming puzzles. Each day
has its own module, `aoc2024.day01` to `aoc2024.day20`. Each module has a
`part1` and a `part2` function. Both take the puzzle input as text and
return the answer. Most answers are integers. `day17.part1` returns the
program output as a comma-separated string. `day18.part2` returns the
blocking byte as `"x,y"`.

The package has no dependencies beyond the standard library. It needs
Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `aoc2024` command solves one part of one day and prints `Result: <answer>`:

```
aoc2024 DAY PART [INPUT]
```

- `DAY` is a number from 1 to 20.
- `PART` is 1 or 2.
- `INPUT` is the path of the puzzle input. It defaults to `Input.txt` in the current directory.

For example:

```
aoc2024 11 2 my-input.txt
```

The command exits with status 1 and prints a message to standard error in
these cases:

- the input file cannot be opened;
- the day or part is unknown;
- the puzzle cannot be solved for the input, for example when a maze has no exit.

The command always uses each day's default sizes and thresholds.

## Library use

```python
from aoc2024 import day01, day11
from aoc2024.cli import solve
from aoc2024.common import read_file

text = read_file("input.txt")
print(day01.part1(text))
print(day11.part2(text))
print(solve(1, 2, text))
```

`solve(day, part, text)` raises `ValueError` if there is no such day or part.

Some days take extra arguments so that smaller examples can be solved:

| Call | Default |
| --- | --- |
| `day14.part1(text, width, height)` and `day14.part2(text, width, height)` | width 101, height 103 |
| `day18.part1(text, size, count)` | a 71 × 71 grid and 1024 fallen bytes |
| `day18.part2(text, size)` | a 71 × 71 grid |
| `day20.part1(text, threshold)` and `day20.part2(text, threshold)` | a threshold of 100 picoseconds saved |

Several modules also expose their building blocks:

- `day07.is_valid_equation(values, operators)` takes any mix of the operators `+`, `*` and `|`, where `|` concatenates.
- `day11.count_stones(stones, blinks)` returns the number of stones after the given number of blinks.
- `day14` has:
  - the `Robot` dataclass, with a `step` method;
  - `parse_robots`;
  - `render_grid`, which draws the floor as text;
  - `safety_factor`.
- `day15` has `parse_warehouse`, `parse_instructions`, `widen` and `gps_sum`.
- `day17` has:
  - the `Registers` dataclass;
  - `parse_registers` and `parse_program`;
  - `run_program(program, registers)`, which returns the output and the final registers;
  - `find_register_a(program)`.
- `day18.shortest_path(corrupted, size)` returns the number of steps, or `None` when the exit is cut off.
- `day20.track_distances(grid)` maps each reachable track cell to its distance from `S`.

`aoc2024.common` holds the helpers that the days share:

- input handling: `read_file`, `parse_lines`, `parse_uint_data` and `remove_line_breaks`;
- grid helpers for maps stored as one string with line breaks: `directions_2d`, `directions`, `is_valid_pos`, `get_xy`, `is_collinear` and `to_int`.

## Limits

The package covers days 1 to 20 only. It does not download puzzle inputs or
submit answers. You supply the input text or file yourself.