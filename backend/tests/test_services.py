"""
Tests for frame sinks, the session registry and configuration.
"""

import asyncio
import io
import os
import sys
from datetime import datetime, timezone

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config  # noqa: E402
from domain import Frame  # noqa: E402
from main import SnakeGame  # noqa: E402
from services.frame_sink import FrameSink, ConsoleFrameSink, RecordingFrameSink  # noqa: E402
from services.sessions import SessionRegistry  # noqa: E402



class TestFrameSinks:

    def test_base_sink_not_implemented(self):
        with pytest.raises(NotImplementedError):
            asyncio.run(FrameSink().send(Frame("t", "d", "random")))

    def test_recording_sink_keeps_frames(self):
        sink = RecordingFrameSink()
        assert sink.last is None

        first = Frame("a", "..", "random")
        second = Frame("b", "SCORE: **0**", "random", game_over=True)
        asyncio.run(sink.send(first))
        asyncio.run(sink.send(second))

        assert sink.frames == [first, second]
        assert sink.last is second

    def test_console_sink_prints_title_grid_and_timestamp(self):
        stream = io.StringIO()
        sink = ConsoleFrameSink(stream=stream)
        stamp = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

        asyncio.run(sink.send(Frame("Snake", "ab\ncd", "random", timestamp=stamp)))

        output = stream.getvalue()
        assert "== Snake ==" in output
        assert "ab\ncd" in output
        assert "2024-01-02T03:04:05+00:00" in output

    def test_console_sink_without_timestamp(self):
        sink = ConsoleFrameSink(stream=io.StringIO())
        assert sink.format(Frame("T", "x", "random")) == "== T ==\nx"


class TestSessionRegistry:

    def test_get_or_create_reuses_session(self):
        registry = SessionRegistry()
        game = registry.get_or_create("channel-1")

        assert isinstance(game, SnakeGame)
        assert registry.get_or_create("channel-1") is game
        assert "channel-1" in registry
        assert len(registry) == 1

    def test_surfaces_are_isolated(self):
        registry = SessionRegistry()
        first = registry.get_or_create(1)
        second = registry.get_or_create(2)

        first.start_game(15, 10, "🟦")
        assert registry.is_running(1)
        assert not registry.is_running(2)
        assert first is not second

    def test_unknown_surface(self):
        registry = SessionRegistry()
        assert registry.get("nope") is None
        assert registry.is_running("nope") is False

    def test_discard_ends_running_game(self):
        registry = SessionRegistry()
        game = registry.get_or_create(1)
        game.start_game()

        registry.discard(1)
        assert game.running is False
        assert 1 not in registry
        registry.discard(1)

    def test_custom_factory(self):
        created = []

        def factory():
            game = SnakeGame().set_title("Channel game")
            created.append(game)
            return game

        registry = SessionRegistry(factory)
        game = registry.get_or_create(1)
        assert created == [game]
        assert game.options.title == "Channel game"


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.setattr(config, "load_dotenv", lambda: None)
        for name in ("DISCORD_TOKEN", "SNAKE_COMMAND_PREFIX", "SNAKE_BOARD_WIDTH",
                     "SNAKE_BOARD_HEIGHT", "SNAKE_INPUT_TIMEOUT", "SNAKE_TITLE",
                     "SNAKE_COLOR", "SNAKE_TIMESTAMP", "SNAKE_LOG_LEVEL",
                     "SNAKE_GAME_OVER_TITLE", "SNAKE_BACKGROUND_SYMBOL",
                     "SNAKE_APPLE_SYMBOL", "SNAKE_SNAKE_SYMBOL"):
            monkeypatch.delenv(name, raising=False)

        settings = config.load_settings()

        assert settings.discord_token is None
        assert settings.command_prefix == "!"
        assert (settings.board_width, settings.board_height) == (15, 10)
        assert settings.input_timeout == 60
        assert settings.title == "Snake: The Game"
        assert settings.color == "random"
        assert settings.timestamp is False
        assert settings.log_level == "INFO"
        assert settings.game_over_title == "Game Over!"
        assert (settings.background_symbol, settings.apple_symbol, settings.snake_symbol) == ("🟦", "🍎", "🟩")

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setattr(config, "load_dotenv", lambda: None)
        monkeypatch.setenv("DISCORD_TOKEN", "abc")
        monkeypatch.setenv("SNAKE_COMMAND_PREFIX", "?")
        monkeypatch.setenv("SNAKE_BOARD_WIDTH", "20")
        monkeypatch.setenv("SNAKE_BOARD_HEIGHT", "12")
        monkeypatch.setenv("SNAKE_INPUT_TIMEOUT", "2.5")
        monkeypatch.setenv("SNAKE_COLOR", "#ff0000")
        monkeypatch.setenv("SNAKE_TIMESTAMP", "yes")
        monkeypatch.setenv("SNAKE_LOG_LEVEL", "debug")
        monkeypatch.setenv("SNAKE_GAME_OVER_TITLE", "Bonk")
        monkeypatch.setenv("SNAKE_BACKGROUND_SYMBOL", "⬛")
        monkeypatch.setenv("SNAKE_APPLE_SYMBOL", "🍒")
        monkeypatch.setenv("SNAKE_SNAKE_SYMBOL", "🟨")

        settings = config.load_settings()

        assert settings.discord_token == "abc"
        assert settings.command_prefix == "?"
        assert (settings.board_width, settings.board_height) == (20, 12)
        assert settings.input_timeout == 2.5
        assert settings.color == "#ff0000"
        assert settings.timestamp is True
        assert settings.log_level == "DEBUG"
        assert settings.game_over_title == "Bonk"
        assert (settings.background_symbol, settings.apple_symbol, settings.snake_symbol) == ("⬛", "🍒", "🟨")
