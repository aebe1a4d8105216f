# drillwatch

Support code for a course of small Rust exercises, written as a Python
library:

- `drillwatch.ui` prints coloured status lines to the terminal.
- `drillwatch.project` writes a `rust-project.json` so that rust-analyzer
  treats every exercise file as its own crate.
- `drillwatch.drills` holds worked solutions to the course exercises as
  ordinary Python functions and classes.

## Installing

```
pip install .
```

The only runtime dependency is `rich`. `RustAnalyzerProject.get_sysroot_src`
runs `rustc`, so that method needs `rustc` on your `PATH`.

## Status lines

```python
from drillwatch.ui import warn, success

warn("Compiling of exercises/intro/intro2.rs failed!")
success("Successfully ran exercises/intro/intro1.rs")
```

`warn` prints a red line and `success` a green one, each prefixed with a
symbol, and both return the plain text of the line they printed. When the
`NO_EMOJI` environment variable is set (`no_emoji()` reports this), the
prefixes are the plain symbols `!` and `✓` instead of emoji.

## rust-project.json

```python
from drillwatch.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()            # runs `rustc --print sysroot`
project.exercises_to_json("exercises")
if project.crates:
    project.write_to_disk("rust-project.json")
```

- `get_sysroot_src()` asks `rustc` for its sysroot, prints
  `Determined toolchain: ...` and sets `sysroot_src` to the
  `lib/rustlib/src/rust/library` directory below it.
- `exercises_to_json(root="./exercises")` walks everything below `root` in
  sorted order and calls `path_to_json` on each path.
- `path_to_json(path)` adds a `Crate` when the text after the first dot in
  the path is exactly `rs`. Each crate uses edition `2021`, no dependencies
  and the `test` cfg, so the language server also works inside test blocks.
- `to_json()` returns the compact JSON text; `write_to_disk(path="./rust-project.json")`
  writes it out.

## Drills

Each module in `drillwatch.drills` covers one topic of the course:

| Module | Contents |
| --- | --- |
| `basics` | `is_even`, `sale_price`, `square`, `bigger`, `foo_if_fizz`, `is_a_color_word`, `trim_me`, `compose_me`, `replace_me`, `longest` |
| `quizzes` | `calculate_price_of_apples`, `transformer` with the `Uppercase`, `Trim` and `Append` commands, `ReportCard` |
| `errors` | `generate_nametag_text`, `total_cost`, `spend_tokens`, `PositiveNonzeroInteger`, `CreationError`, `parse_pos_nonzero`, `ParsePosNonzeroError` |
| `messages` | `Point`, the `Move`, `Echo`, `ChangeColor` and `Quit` messages, and a `State` that processes them |
| `collections` | `fruit_basket`, `fill_fruit_basket` with the `Fruit` enum, `build_scores_table` with `Team` |
| `iterators` | `capitalize_first`, `capitalize_words_vector`, `capitalize_words_string`, `divide`, `result_with_list`, `list_of_results`, `factorial`, `count_iterator`, `count_collection_iterator` |
| `containers` | the `Cons` list, `create_empty_list`, `create_non_empty_list`, `abs_all`, `maybe_icecream` |
| `structs` | `ColorClassic`, `ColorTuple`, `UnitLike`, `Order`, `create_order_template`, `Package`, `Wrapper`, `array_and_vec`, `vec_loop`, `vec_map` |
| `traits` | `append_bar`, `Licensed` with `SomeSoftware` and `OtherSoftware`, `compare_license_types`, `SomeTrait`, `OtherTrait`, `some_func` |
| `shared` | `offset_sums` (one thread per offset), `run_jobs` with `JobStatus` |

Failures are raised as exceptions:

```python
from drillwatch.drills.errors import parse_pos_nonzero, ParsePosNonzeroError
from drillwatch.drills.iterators import divide, NotDivisibleError

parse_pos_nonzero("42")          # PositiveNonzeroInteger(value=42)
try:
    parse_pos_nonzero("-555")
except ParsePosNonzeroError as err:
    print(err.creation.kind)     # CreationErrorKind.NEGATIVE

try:
    divide(81, 6)
except NotDivisibleError as err:
    print(err.dividend, err.divisor)   # 81 6
```

## What this package does not do

There is no command-line program. The package does not read an exercise
list, does not compile, run, test or lint exercise files, does not track
which exercises are done, does not watch files for changes and does not
reset exercises. It provides the status-line, `rust-project.json` and drill
pieces described above.

## Running the tests

```
pip install .[test]
pytest
```