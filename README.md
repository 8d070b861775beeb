# textprint

A tiny library for writing text to standard output or to any open text stream,
such as a file.

## Installation

```
pip install textprint
```

## Library use

```python
from textprint.output import print_text

print_text("hello")                  # goes to standard output

with open("log.txt", "w") as log:
    print_text("hello", log)         # goes to the file
```

`print_text(text, out=None)` writes the text exactly as given and adds no
newline. When `out` is left out, the text goes to standard output.

The module `textprint.examples` holds two small ready-made uses:

```python
from textprint.examples import hello_stdout, hello_file

hello_stdout()             # writes "hello" to standard output
hello_file("log.txt")      # writes "hello" to log.txt, replacing its content
```

`hello_file` writes to `log.txt` in the current directory when called with no
path.

## Command-line demo

The package installs one command, `textprint-demo`. It reads
whitespace-separated words from standard input and appends each word, on a
line of its own, to the file named by the `LOG_PATH` environment variable:

```
echo "one two three" | LOG_PATH=words.log textprint-demo
```

After this, `words.log` ends with the lines `one`, `two` and `three`.

If `LOG_PATH` is not set, the command reports
`undefined environment variable: LOG_PATH` on standard error and exits with
status 1. The same behaviour is available from Python as
`textprint.demo.main()`, which returns the exit status.