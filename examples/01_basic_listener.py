#!/usr/bin/env python3
"""
01_basic_listener.py - Listener lifecycle walkthrough

Demonstrates:
- Listeners built from a callback and from a subclass
- Named ("client") and direct emitters
- on vs once subscriptions
- disable() / enable() toggling through the handler
"""

import asyncio

from earshot import EventEmitter, Listener, Settings, create_client
from earshot.config import Environment, LogLevel


def on_message(listener: Listener, text: str) -> None:
    print(f"[{listener}] message: {text}")


class Greeter(Listener):
    def __init__(self) -> None:
        super().__init__("greeter", type="once", category="system")

    def exec(self, client) -> None:
        print(f"[{self}] client ready, {len(client.listener_handler)} listener(s)")


async def main() -> None:
    client = create_client(
        Settings(environment=Environment.DEVELOPMENT, log_level=LogLevel.DEBUG)
    )
    handler = client.listener_handler

    ticks = EventEmitter()
    handler.add(Greeter())
    chat = handler.add(Listener("chat", on_message, event_name="message"))
    handler.add(
        Listener(
            "tick",
            lambda listener, n: print(f"[{listener}] tick {n}"),
            emitter=ticks,
            event_name="tick",
        )
    )

    await client.start()
    await client.start()  # greeter is once-only and stays quiet

    await client.emit("message", "hello")
    chat.disable()
    await client.emit("message", "nobody hears this")
    chat.enable()
    await client.emit("message", "back again")

    await ticks.emit("tick", 1)


if __name__ == "__main__":
    asyncio.run(main())
