"""A websocket chat server that relays every message to every client."""

from __future__ import annotations

import argparse
import asyncio
from typing import Any, Optional, Sequence

import websockets
from websockets.exceptions import ConnectionClosed

WELCOME = "Welcome to chat! Type a message"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 2000
DEFAULT_CAPACITY = 16


class BroadcastError(Exception):
    """Raised when a broadcast cannot be delivered."""


class LaggedError(BroadcastError):
    """Delivered to a subscriber that fell too far behind."""

    def __init__(self, skipped: int) -> None:
        super().__init__(f"receiver lagged behind, {skipped} messages skipped")
        self.skipped = skipped


class Broadcaster:
    """Delivers each message to every subscribed queue.

    A subscriber holding ``capacity`` unread messages loses them and
    receives a LaggedError instead.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._subscribers: list[asyncio.Queue] = []

    def subscribe(self) -> asyncio.Queue:
        """Return a new queue that receives every later message."""
        subscription: asyncio.Queue = asyncio.Queue()
        self._subscribers.append(subscription)
        return subscription

    def unsubscribe(self, queue: asyncio.Queue) -> None:
        """Stop delivering to ``queue``; unknown queues are ignored."""
        if queue in self._subscribers:
            self._subscribers.remove(queue)

    def send(self, message: Any) -> int:
        """Deliver ``message`` to all subscribers and return their number.

        Raises BroadcastError when there is no subscriber.
        """
        if not self._subscribers:
            raise BroadcastError("no subscribers")
        for subscription in self._subscribers:
            if subscription.qsize() >= self.capacity:
                skipped = 1
                while not subscription.empty():
                    subscription.get_nowait()
                    skipped += 1
                subscription.put_nowait(LaggedError(skipped))
            else:
                subscription.put_nowait(message)
        return len(self._subscribers)


async def _relay_incoming(websocket: Any, broadcaster: Broadcaster) -> None:
    async for message in websocket:
        if isinstance(message, str):
            print(f"From client {websocket.remote_address!r} {message!r}")
            broadcaster.send(message)


async def _relay_outgoing(websocket: Any, subscription: asyncio.Queue) -> None:
    while True:
        message = await subscription.get()
        if isinstance(message, LaggedError):
            raise message
        await websocket.send(message)


async def handle_connection(websocket: Any, broadcaster: Broadcaster) -> None:
    """Greet a client, then relay its text messages and everyone else's.

    Returns when the client closes the connection.
    """
    subscription = broadcaster.subscribe()
    try:
        await websocket.send(WELCOME)
        tasks = {
            asyncio.create_task(_relay_incoming(websocket, broadcaster)),
            asyncio.create_task(_relay_outgoing(websocket, subscription)),
        }
        try:
            done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
        for task in done:
            task.result()
    finally:
        broadcaster.unsubscribe(subscription)


async def serve(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Run the chat server on ``host`` and ``port`` until cancelled."""
    broadcaster = Broadcaster()

    async def handler(websocket: Any) -> None:
        print(f"New connection from {websocket.remote_address!r}")
        try:
            await handle_connection(websocket, broadcaster)
        except (ConnectionClosed, BroadcastError):
            pass

    async with websockets.serve(handler, host, port):
        print(f"listening on port {port}")
        await asyncio.get_running_loop().create_future()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the chat server."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        asyncio.run(serve(args.host, args.port))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())