# fdlines

Read lines one at a time from raw file descriptors. Data is read with
`os.read` in chunks of a fixed buffer size (42 bytes unless you pass another
size). Whatever follows the last newline is kept until the next call.

Lines are returned as `bytes`. Every line keeps its trailing `b"\n"`. The only
exception is a final line that the input ends without one. Once the input is
exhausted, `None` is returned.

## Installation

```
pip install fdlines
```

## Reading one descriptor

```python
import os
from fdlines.reader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
reader = LineReader(fd, 42)

first = reader.read_line()      # b"...\n", or None once the input is exhausted
for line in reader:             # or iterate over the remaining lines
    print(line.decode(), end="")

os.close(fd)
```

`LineReader` raises `ValueError` for a negative descriptor or a buffer size that
is not positive. If `os.read` fails, its `OSError` propagates and any buffered
data is dropped.

## Reading several descriptors at once

`MultiLineReader` keeps a separate pending buffer for each descriptor. You can
interleave reads from different files without mixing up their contents.

```python
import os
from fdlines.multi import MultiLineReader

a = os.open("a.txt", os.O_RDONLY)
b = os.open("b.txt", os.O_RDONLY)
lines = MultiLineReader(42)

print(lines.read_line(a))
print(lines.read_line(b))
print(lines.read_line(a))

print(a in lines, len(lines))   # descriptors with pending data
lines.discard(b)                # drop whatever is buffered for b
```

A descriptor's state is dropped once nothing is left buffered after a line is
returned, and also when a read on it fails; the `OSError` is then raised to the
caller. `read_line` raises `ValueError` for a negative descriptor.

## Working with a stash directly

The helpers in `fdlines.stash` work on the bytes that have been buffered so far:

```python
from fdlines.stash import extract_line, update_stash, split_line

extract_line(b"one\ntwo")   # b"one\n"
update_stash(b"one\ntwo")   # b"two"
split_line(b"one\ntwo")     # (b"one\n", b"two")
split_line(b"")             # (None, None)
```

## What it does not do

The package does not open or close files and does not decode text. It has no
command-line tool; it is used as a library only.

## Running the tests

```
pip install -e ".[test]"
pytest
```