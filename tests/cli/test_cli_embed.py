"""Tests for ``genbridge embed`` CLI command."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock, patch

from click.testing import CliRunner

from genbridge.cli import main
from genbridge.transports.base import ContentEmbedding, EmbeddingResponse


def _transport(*vectors: list[float]) -> MagicMock:
    transport = MagicMock()
    transport.embed = AsyncMock(
        side_effect=[EmbeddingResponse(embeddings=[ContentEmbedding(values=v)]) for v in vectors]
    )
    return transport


class TestEmbedCommand:
    def test_table_output(self) -> None:
        transport = _transport([0.1, 0.2, 0.3], [0.4, 0.5, 0.6])
        with patch("genbridge.cli_commands.embed.get_embedding_transport", return_value=transport):
            result = CliRunner().invoke(main, ["embed", "first text", "second text"])

        assert result.exit_code == 0, result.output
        assert "Embeddings" in result.output
        assert "first text" in result.output
        assert "0.4000" in result.output

    def test_json_output(self) -> None:
        transport = _transport([1.0, 2.0])
        with patch("genbridge.cli_commands.embed.get_embedding_transport", return_value=transport):
            result = CliRunner().invoke(main, ["embed", "hello", "--json", "--model", "text-embedding-004"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == [{"text": "hello", "vector": [1.0, 2.0]}]
        transport.embed.assert_awaited_once_with("text-embedding-004", "hello")

    def test_failure_exits_1(self) -> None:
        transport = MagicMock()
        transport.embed = AsyncMock(side_effect=ConnectionError("quota"))
        with patch("genbridge.cli_commands.embed.get_embedding_transport", return_value=transport):
            result = CliRunner().invoke(main, ["embed", "a", "b"])

        assert result.exit_code == 1
        assert "Embedding error" in result.output

    def test_requires_text(self) -> None:
        result = CliRunner().invoke(main, ["embed"])
        assert result.exit_code != 0
