"""A websocket chat client that sends lines and prints what it receives."""

from __future__ import annotations

import argparse
import asyncio
import sys
import threading
from typing import Any, AsyncIterator, Optional, Sequence, TextIO

import websockets
from websockets.exceptions import WebSocketException

DEFAULT_URI = "ws://127.0.0.1:2000"


def _strip_newline(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


async def _stdin_lines() -> AsyncIterator[str]:
    loop = asyncio.get_running_loop()
    received: asyncio.Queue = asyncio.Queue()
    stream = sys.stdin

    def pump() -> None:
        try:
            for line in iter(stream.readline, ""):
                loop.call_soon_threadsafe(received.put_nowait, line)
            loop.call_soon_threadsafe(received.put_nowait, None)
        except RuntimeError:
            return

    threading.Thread(target=pump, daemon=True).start()
    while (line := await received.get()) is not None:
        yield _strip_newline(line)


async def _each(lines: Any) -> AsyncIterator[str]:
    if hasattr(lines, "__aiter__"):
        async for line in lines:
            yield line
    else:
        for line in lines:
            yield line


async def _print_incoming(websocket: Any, output: TextIO) -> None:
    async for message in websocket:
        if isinstance(message, str):
            print(f"From server: {message}", file=output, flush=True)


async def _send_lines(websocket: Any, lines: Any) -> None:
    async for line in _each(lines):
        await websocket.send(line)


async def run_client(
    uri: str = DEFAULT_URI,
    lines: Any = None,
    output: Optional[TextIO] = None,
) -> None:
    """Send each of ``lines`` to the server at ``uri`` and print its messages.

    ``lines`` is an iterable or async iterable of strings, standard input by
    default. Returns when either the lines or the connection run out.
    """
    source = _stdin_lines() if lines is None else lines
    target = sys.stdout if output is None else output
    async with websockets.connect(uri) as websocket:
        tasks = {
            asyncio.create_task(_print_incoming(websocket, target)),
            asyncio.create_task(_send_lines(websocket, source)),
        }
        try:
            done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
        for task in done:
            task.result()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Chat with a server: lines from standard input go out, messages print."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("--uri", default=DEFAULT_URI)
    args = parser.parse_args(argv)
    try:
        asyncio.run(run_client(args.uri))
    except (OSError, WebSocketException) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())