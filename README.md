# yamlglow

A small filter that colours YAML for the terminal with ANSI escape
sequences. Pipe YAML in and read the coloured version that comes out.

## Install

```
pip install .
```

## Usage

```
kubectl get pod my-pod -o yaml | yamlglow
cat config.yaml | yamlglow
```

Colours used:

- keys: bright cyan
- plain values: yellow
- numbers, IP addresses, timestamps and booleans (`true`/`false` in any
  case): green
- comments: grey
- multiline blocks (the more-indented lines after a value holding `|`, `>`
  or a similar indicator): light grey
- list elements and URLs: yellow
- lines that are not recognised as YAML: black on bright red

Reading stops at the end of input, at a line that holds only `EOF`, or at a
line of 64 KiB or more.

Blank lines are printed to standard output as soon as they are read, while
the coloured text is written once all input has been read; so in the
command's output blank lines come before the rest rather than in place.

If standard input cannot be read or decoded, the error is printed to
standard error and the command exits with status 1.

### Commands

```
yamlglow help       # short help text
yamlglow version    # print the version
```

Any other argument prints a short hint and exits with status 0.

## Library use

```python
import io
from yamlglow.highlight import highlight

print(highlight(io.StringIO("name: demo\nreplicas: 3\n")), end="")
```

`highlight(stream)` takes any iterable of text lines (a file, `sys.stdin`,
a list of strings) and returns the coloured text as one string.

`yamlglow.lines.YamlLine` holds one line of input (`raw`) together with the
`key` and `value` found in it, and has the checks used to classify it:
`is_key_value()`, `is_comment()`, `value_is_boolean()`,
`value_is_number_or_ip()`, `is_empty_line()`, `is_element_of_list()`,
`is_url()`, `indentation_spaces()` and
`value_contains_chomping_indicator()`.

`yamlglow.cli.main(argv=None)` runs the command; it reads `sys.argv` when
no arguments are given and returns the exit status.

## What it does not do

Lines are classified one at a time by simple text checks. The input is not
parsed or validated as YAML, and there is no option to turn colours off or
change them.

## Tests

```
pip install .[test]
pytest
```