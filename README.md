# rclf

`rclf` reads, checks and prints RCLF documents. An RCLF document holds numbered
columns. Each column has one line of keys and any number of value lines.

```
&rcl
// a comment
&c[0]
name; colours; size
"box": ("red", "green"): 12
"bag": "blue": 3
&e
```

- `&rcl` must come first and may appear only once.
- `&c[N]` opens column `N` and `&e` closes it. Columns cannot be nested, and
  two columns cannot share the same `N`.
- A line containing `;` is the key line, with keys separated by `;`. A column
  has at most one key line.
- A line containing `:` is a value line, with values separated by `:`. Each
  value line needs exactly one value per key.
- `( ... )` holds an array value, with items separated by `,`.
- Surrounding double quotes are removed from keys, values and array items.
- Lines that start with `//` are comments. The parser also drops anything
  after `//` on a line.

## Installation

```
pip install .
```

## Command line

```
rclf out [-n] -f <file name> [-c N] [-k N] [-v N]
rclf version
```

| Option | Meaning |
| ------ | ------- |
| `-f <file name>` | Path to the RCLF document |
| `-n` | Skip the syntax check before parsing |
| `-c <N>` | Print only the column at position N |
| `-k <N>` | Print only key N of that column (needs `-c`) |
| `-v <N>` | Print only value N of that key (needs `-c` and `-k`) |

Column positions count the columns in the order they are closed, starting at 0.
They do not use the number written in `&c[N]`.

For the document above, `rclf out -f data.rclf` prints:

```
[rclf] reading "data.rclf"...
Col0 0/     "name"
Col0 0 0~   "box"
Col0 0 1~   "bag"
Col0 1/     "colours"
Col0 1 0~   "red"
Col0 1 0~   "green"
Col0 1 1~   "blue"
Col0 2/     "size"
Col0 2 0~   "12"
Col0 2 1~   "3"
```

Each item of an array value gets its own line.

### Exit status

| Code | Meaning |
| ---- | ------- |
| 0 | Success |
| 1 | Invalid arguments, or a `-k`/`-v` index that does not exist |
| 2 | The file cannot be opened |
| 3 | Checking or parsing the document failed |

If the syntax check fails, the specific problem is written to standard error
with its own code, as listed under `ErrorCode` below. The command then reports
parsing failure and exits with 3. If `-n` is given and `-c` alone names a column
that does not exist, the command prints nothing and exits with 0.

## Library use

```python
from rclf.parser import parse
from rclf.printer import format_all

document = parse("data.rclf", check_syntax=True)
for column in document.columns:
    print(column.index, [key.name for key in column.keys])

print(format_all(document), end="")
```

- `rclf.parser`: `parse(filepath, check_syntax=True)` and `parse_lines(lines)`
  return a `Document`. A `Document` has `columns`. A `Column` has `index` and
  `keys`. A `Key` has `name` and `values`. A `Value` has `items` and `is_array`.
  `parse_value(text)` parses a single value token. A malformed `&c[` header or a
  duplicate column number raises `DocumentError`.
- `rclf.syntax`: `check_syntax(filepath)` and `check_lines(lines, filepath)`
  check a document. They return the number of lines read, or raise an
  `RclfError` subclass for the first problem found.
- `rclf.printer`: `format_all`, `format_column`, `format_key` and
  `format_value` return the rendered text. `print_all`, `print_column`,
  `print_key` and `print_value` write that text to `file`, which defaults to
  standard output.
- `rclf.errors`: `RclfError` and its subclasses. Each error carries a `code`
  from `ErrorCode`:

| Code | Error |
| ---- | ----- |
| 1 | `InvalidArgsError` |
| 2 | `RclfFileNotFoundError` |
| 3 | `ParsingFailedError`, `DocumentError` |
| 4 | `EmptyFileError` |
| 5 | `NoRclTagError` |
| 6 | `NoEndTagError` |
| 7 | `InvalidColumnError` |
| 8 | `InvalidKeyCountError` |
| 9 | `InvalidValueCountError` |
| 11 | `InvalidSyntaxError` |

## Limitations

The package only reads documents. It cannot create, edit or write RCLF files.