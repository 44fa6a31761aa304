# rustdrill

`rustdrill` is a small library for people working through Rust exercises. It
has three parts:

- `rustdrill.lessons`: the ideas behind many exercises, worked out in Python.
- `rustdrill.project`: writes a `rust-project.json` so that rust-analyzer can
  treat each exercise file as its own crate.
- `rustdrill.ui`: coloured warning and success lines for the terminal.

## Requirements

- Python 3.11 or later
- For `RustAnalyzerProject.get_sysroot_src`: either `RUST_SRC_PATH` set in the
  environment, or `rustc` on your `PATH`

## Installation

```
pip install .
```

## Lessons

Each module in `rustdrill.lessons` covers one topic:

| Module | Contents |
| --- | --- |
| `basics` | `sale_price`, `is_even`, `square`, `bigger`, `foo_if_fizz`, `array_and_vec`, `vec_loop`, `vec_map`, `is_a_color_word`, `trim_me`, `compose_me`, `replace_me`, `longest`, `maybe_icecream` |
| `errors` | `generate_nametag_text`, `total_cost`, `buy`, `parse_pos_nonzero`, `PositiveNonzeroInteger`, `CreationError`, `ParsePosNonzeroError` |
| `traits` | `append_bar`, `Licensed`, `SomeSoftware`, `OtherSoftware`, `compare_license_types`, `SomeStruct`, `OtherStruct`, `some_func` |
| `iterators` | `capitalize_first`, `capitalize_words_vector`, `capitalize_words_string`, `divide`, `result_with_list`, `list_of_results`, `factorial`, `Progress`, `count_for`, `count_iterator`, `count_collection_for`, `count_collection_iterator` |
| `collections` | `fruit_basket`, `Fruit`, `fill_fruit_basket`, `Team`, `build_scores_table` |
| `quiz` | `calculate_price_of_apples`, `Command`, `transformer`, `ReportCard` |
| `structures` | `ColorClassicStruct`, `ColorTupleStruct`, `UnitLikeStruct`, `Order`, `create_order_template`, `Package`, `Point`, `ChangeColor`, `Echo`, `Move`, `Quit`, `MachineState`, `Wrapper`, `Cons`, `create_empty_list`, `create_non_empty_list`, `abs_all` |

These functions raise exceptions where a Rust version would return an error:

```python
from rustdrill.lessons.errors import parse_pos_nonzero, ParsePosNonzeroError
from rustdrill.lessons.iterators import divide, NotDivisibleError
from rustdrill.lessons.quiz import Command, transformer

parse_pos_nonzero("42")          # PositiveNonzeroInteger(value=42)
divide(81, 9)                    # 9

try:
    divide(81, 6)
except NotDivisibleError as exc:
    print(exc.dividend, exc.divisor)   # 81 6

transformer([("hello", Command.UPPERCASE), ("bar", Command.append(2))])
# ['HELLO', 'barbarbar']
```

## rust-analyzer project file

```python
from rustdrill.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()     # RUST_SRC_PATH, or derived from `rustc --print sysroot`
project.exercises_to_json()   # one crate for every .rs file below ./exercises
if project.crates:
    project.write_to_disk()   # writes ./rust-project.json
```

Each crate uses edition 2021 and sets the `test` cfg, so rust-analyzer also
works inside `#[test]` blocks. `add_path` adds a single path by hand, and
`to_dict` gives the data that `write_to_disk` serialises.

## Terminal output

`rustdrill.ui.warn(message)` and `rustdrill.ui.success(message)` print a
marked red or green line. Colour is used only when standard output is a
terminal, unless `CLICOLOR_FORCE` is set to something other than `0`; setting
`CLICOLOR=0` turns it off. `no_emoji()` reports whether `NO_EMOJI` is set, in
which case the markers are plain `!` and `✓`. `bold(text)` renders bold text
under the same rules.

## What this package does not do

There is no command-line program. The package does not compile, run, test or
lint exercise files, does not read an exercise list, does not track which
exercises are done, and has no watch mode, hints or reset. The lessons cover
the topics above only; type conversions have no lesson module.

## Running the tests

```
pip install ".[test]"
pytest
```