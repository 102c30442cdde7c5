# kata

A collection of small, self-contained programs and helpers, each one solving a
well-known exercise. You can import and use every module on its own, and most
modules also have a command.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | What it does |
| --- | --- |
| `kata.numbers` | `collatz_length`, `fib`, `transpose` of a rectangular matrix, `magnitude` and `normalize` of vectors, `min_of` (ties go to the left argument), `offset_differences` with wrap-around |
| `kata.evaluator` | `evaluate` for trees of `Value` and `BinaryOperation`. Division truncates toward zero, and division by zero raises `EvaluationError` |
| `kata.elevator` | Event types (`ButtonPressed`, `CarArrived`, `CarDoorOpened`, `CarDoorClosed`) for an elevator controller, plus constructor functions |
| `kata.counter` | `Counter` with `count(value)` and `times_seen(value)` |
| `kata.packages` | `Package` descriptions built with a fluent `PackageBuilder` |
| `kata.expression_parser` | `tokenize` and `parse` for sums and differences such as `10+foo+20-30`. Operators group to the right. Errors raise `TokenizerError` or `ParserError` |
| `kata.protobuf` | Protobuf wire-format decoding: `parse_varint`, `parse_field`, `parse_message(data, message_type)`, with `Person` and `PhoneNumber` messages. Bad input raises `DecodeError` |
| `kata.binary_tree` | `BinaryTree`, a set of ordered values that supports `insert`, `in` and `len` |
| `kata.rot` | `rotate(data, rot)` for bytes, and `RotDecoder`, a readable stream that rotates letters as it reads |
| `kata.widgets` | Text-mode `Label`, `Button` and `Window` widgets |
| `kata.verbosity` | `StderrLogger`, and `VerbosityFilter`, which drops messages above a maximum verbosity |
| `kata.directory` | `DirectoryIterator`, which yields the entries of a directory with `.` and `..` first. It can be used as a context manager and raises `DirectoryError` |
| `kata.philosophers` | Dining philosophers using threads and locks: `dine(names, rounds)` yields their thoughts |
| `kata.async_philosophers` | Dining philosophers as asyncio tasks: `dine(names, rounds)` is an async generator of thoughts |
| `kata.link_checker` | `check_links(start_url, thread_count)` crawls with a pool of threads and returns the URLs that failed |
| `kata.chat_server`, `kata.chat_client` | A broadcast chat over websockets (`Broadcaster`, `handle_connection`, `serve`, `run_client`) |

## Library examples

```python
from kata.numbers import collatz_length, offset_differences
from kata.expression_parser import parse
from kata.binary_tree import BinaryTree
from kata.rot import rotate

collatz_length(11)                        # 15
offset_differences(1, [1, 3, 5, 7])       # [2, 2, 2, -6]
parse("10+foo+20-30")                     # an expression tree
rotate(b"Gb trg gb gur bgure fvqr!", 13)  # b"To get to the other side!"

tree = BinaryTree()
tree.insert(2)
tree.insert(1)
tree.insert(2)
len(tree), 1 in tree                      # (2, True)
```

Building a package description:

```python
from kata.packages import Language, PackageBuilder

base64 = PackageBuilder("base64").version("0.13").build()
log = PackageBuilder("log").version("0.4").language(Language.RUST).build()
serde = (
    PackageBuilder("serde")
    .version("4.0")
    .dependency(base64.as_dependency())
    .dependency(log.as_dependency())
    .build()
)
```

## Commands

Each command runs a short demonstration of its module:

```
kata-packages                     # build and print a few package descriptions
kata-parse [EXPRESSION]           # parse an expression (default 10+foo+20-30) and print the tree
kata-protobuf                     # decode a sample Person message
kata-rot                          # decode a ROT13 sample sentence
kata-widgets                      # draw a small text window with a label and a button
kata-verbosity                    # log through a verbosity filter to standard error
kata-ls [PATH]                    # list the entries of a directory (default .)
kata-philosophers [--rounds N]    # dining philosophers with threads
kata-async-philosophers [--rounds N]  # dining philosophers with asyncio
kata-check-links [URL] [--threads N]  # crawl a site and print the URLs that failed
kata-chat-server [--host H] [--port P]  # websocket chat server, 127.0.0.1:2000 by default
kata-chat-client [--uri URI]      # chat from standard input, ws://127.0.0.1:2000 by default
```

Start `kata-chat-server` in one terminal and `kata-chat-client` in one or more
others. The server relays every line typed into a client to all connected
clients.