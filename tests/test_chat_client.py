import asyncio
import io
import socket

import pytest
import websockets

from kata.chat_client import main, run_client


def _free_port():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


class _Never:
    """An async iterable that never yields."""

    def __aiter__(self):
        return self

    async def __anext__(self):
        await asyncio.get_running_loop().create_future()


async def _collecting_server(received, finished):
    async def handler(websocket):
        async for message in websocket:
            received.append(message)
        finished.set()

    return websockets.serve(handler, "127.0.0.1", 0)


@pytest.mark.asyncio
async def test_prints_text_messages_until_server_closes():
    async def handler(websocket):
        await websocket.send("first")
        await websocket.send(b"\x00binary")
        await websocket.send("second")

    async with websockets.serve(handler, "127.0.0.1", 0) as server:
        port = server.sockets[0].getsockname()[1]
        output = io.StringIO()
        await asyncio.wait_for(
            run_client(f"ws://127.0.0.1:{port}", _Never(), output), 5
        )
    assert output.getvalue() == "From server: first\nFrom server: second\n"


@pytest.mark.asyncio
async def test_sends_every_line():
    received = []
    finished = asyncio.Event()
    async with await _collecting_server(received, finished) as server:
        port = server.sockets[0].getsockname()[1]
        output = io.StringIO()
        await asyncio.wait_for(
            run_client(f"ws://127.0.0.1:{port}", ["hello", "world"], output), 5
        )
        await asyncio.wait_for(finished.wait(), 5)
    assert received == ["hello", "world"]
    assert output.getvalue() == ""


@pytest.mark.asyncio
async def test_reads_standard_input_without_newlines(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("one\r\ntwo\n"))
    received = []
    finished = asyncio.Event()
    output = io.StringIO()
    async with await _collecting_server(received, finished) as server:
        port = server.sockets[0].getsockname()[1]
        await asyncio.wait_for(
            run_client(f"ws://127.0.0.1:{port}", output=output), 5
        )
        await asyncio.wait_for(finished.wait(), 5)
    assert received == ["one", "two"]
    assert output.getvalue() == ""


@pytest.mark.asyncio
async def test_connection_refused():
    port = _free_port()
    with pytest.raises(OSError):
        await run_client(f"ws://127.0.0.1:{port}", [], io.StringIO())


def test_main_reports_connection_failure(capsys):
    port = _free_port()
    assert main(["--uri", f"ws://127.0.0.1:{port}"]) == 1
    assert "Error" in capsys.readouterr().err