#!/usr/bin/env python3
"""Standalone session sweeper for deployments that set SESSION_SWEEP_ENABLED=false on the API."""
import asyncio
import signal
from inquiry_desk.services.sessions.sweeper import SessionSweeper


async def main():
    sweeper = SessionSweeper()

    # Handle graceful shutdown
    def shutdown_handler(sig, frame):
        sweeper.stop()

    signal.signal(signal.SIGTERM, shutdown_handler)
    signal.signal(signal.SIGINT, shutdown_handler)

    await sweeper.start()


if __name__ == "__main__":
    asyncio.run(main())
