"""Shared test doubles."""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from genbridge.core.interface.wire import GenerateRequest, StreamEvent


class ScriptedTransport:
    """A generation transport that replays one scripted event list per call.

    An ``Exception`` in a script is raised at that point in the stream.
    """

    def __init__(self, *scripts: Sequence[StreamEvent | Exception]) -> None:
        self._scripts = list(scripts)
        self.requests: list[GenerateRequest] = []
        self.closed = 0

    def stream(self, model: str, request: GenerateRequest) -> AsyncIterator[StreamEvent]:
        self.requests.append(request)
        script = self._scripts.pop(0) if self._scripts else []
        return self._replay(script)

    async def _replay(self, script: Sequence[StreamEvent | Exception]) -> AsyncIterator[StreamEvent]:
        try:
            for item in script:
                if isinstance(item, Exception):
                    raise item
                yield item
        finally:
            self.closed += 1


@pytest.fixture
def scripted() -> type[ScriptedTransport]:
    """Factory for :class:`ScriptedTransport`: ``scripted([event, ...], [event, ...])``."""
    return ScriptedTransport
