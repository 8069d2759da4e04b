"""Cooperative cancellation for in-flight streaming calls."""

from __future__ import annotations

import asyncio

from genbridge.core.errors import StreamCancelledError


class CancellationToken:
    """Signals a streaming call to stop at the next event boundary.

    The reducer checks the token before consuming each event and closes the
    transport stream when it fires. Safe to share between the caller and one
    in-flight call; create a fresh token per call.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise StreamCancelledError()

    async def wait(self) -> None:
        """Block until :meth:`cancel` is called."""
        await self._event.wait()
