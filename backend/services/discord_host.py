"""
Discord binding for the snake game.

The game panel is an embed message in a channel:
1. `!snake` posts the first frame and adds the four arrow reactions
2. The player who started the game moves by clicking an arrow
3. Every move edits the embed in place; their reaction is removed again
4. On game over the embed shows the final score and the arrows are cleared

One game runs per channel at a time.
"""

import logging
from typing import Iterable, Optional

import discord
from discord.ext import commands

from config import Settings
from domain.constants import UP, DOWN, LEFT, RIGHT, DEFAULT_COLOR
from domain.errors import AlreadyRunning
from domain.frame import Frame
from domain.game_state import GameState
from main import SnakeGame, GameOptions, run_session
from players.base import Player
from services.frame_sink import FrameSink
from services.sessions import SessionRegistry

logger = logging.getLogger(__name__)

# Reaction order matches the on-screen arrows
REACTION_CONTROLS = {
    "⬅️": LEFT,
    "⬆️": UP,
    "⬇️": DOWN,
    "➡️": RIGHT,
}

# Discord rejects embeds whose description is longer than this
MAX_DESCRIPTION_LENGTH = 4096


def discord_length(text: str) -> int:
    """Length as Discord counts it (UTF-16 code units)."""
    return len(text.encode("utf-16-le")) // 2


def board_fits_embed(width: int, height: int, symbols: Iterable[str]) -> bool:
    """
    Check that a width x height board drawn with any of the given symbols
    stays within the embed description limit.
    """
    widest = max(discord_length(symbol) for symbol in symbols)
    return width * height * widest + (height - 1) <= MAX_DESCRIPTION_LENGTH


def resolve_color(color: Optional[str]) -> discord.Colour:
    """
    Turn a configured color into a discord Colour.

    Accepts "random", hex strings ("#1abc9c", "0x1abc9c") and the names of
    discord's Colour presets ("green", "dark_red", ...). Anything else falls
    back to a random color.
    """
    if not color or color.lower() == DEFAULT_COLOR:
        return discord.Colour.random()

    try:
        return discord.Colour.from_str(color)
    except ValueError:
        pass

    preset = getattr(discord.Colour, color.strip().lower().replace(" ", "_"), None)
    if callable(preset):
        try:
            return preset()
        except TypeError:
            pass

    logger.warning(f"Unknown embed color {color!r}, using a random one")
    return discord.Colour.random()


def frame_to_embed(frame: Frame) -> discord.Embed:
    embed = discord.Embed(
        title=frame.title,
        description=frame.description,
        color=resolve_color(frame.color)
    )
    if frame.timestamp is not None:
        embed.timestamp = frame.timestamp
    return embed


class EmbedFrameSink(FrameSink):
    """
    Shows frames as a single embed message that is edited on every turn.
    """

    def __init__(self, channel: discord.abc.Messageable):
        self.channel = channel
        self.message: Optional[discord.Message] = None

    async def send(self, frame: Frame) -> None:
        embed = frame_to_embed(frame)

        if self.message is None:
            self.message = await self.channel.send(embed=embed)
            if not frame.game_over:
                for emoji in REACTION_CONTROLS:
                    try:
                        await self.message.add_reaction(emoji)
                    except discord.HTTPException as e:
                        # Adding reactions needs Add Reactions; players can still add their own
                        logger.warning(f"Could not add {emoji} to game panel {self.message.id}: {e}")
            return

        try:
            await self.message.edit(embed=embed)
        except discord.HTTPException as e:
            logger.warning(f"Could not update game panel {self.message.id}: {e}")

        if frame.game_over:
            try:
                await self.message.clear_reactions()
            except discord.HTTPException as e:
                # Clearing needs Manage Messages; the panel still shows the score
                logger.warning(f"Could not clear reactions on {self.message.id}: {e}")


class ReactionPlayer(Player):
    """
    Turns arrow reactions on the game panel into moves.

    Only reactions from the player who started the game count; the bot's
    own reactions and any other emoji are ignored.
    """

    def __init__(self, bot: commands.Bot, sink: EmbedFrameSink, user_id: Optional[int] = None):
        self.bot = bot
        self.sink = sink
        self.user_id = user_id

    def accepts(self, reaction: discord.Reaction, user: discord.abc.User) -> bool:
        message = self.sink.message
        if message is None or reaction.message.id != message.id:
            return False
        if str(reaction.emoji) not in REACTION_CONTROLS:
            return False
        if self.bot.user is not None and user.id == self.bot.user.id:
            return False
        return self.user_id is None or user.id == self.user_id

    async def get_move(self, game_state: GameState) -> str:
        reaction, user = await self.bot.wait_for("reaction_add", check=self.accepts)

        # Remove the click so the same arrow can be used again next turn
        try:
            await reaction.remove(user)
        except discord.HTTPException as e:
            logger.warning(f"Could not remove reaction from {user}: {e}")

        return REACTION_CONTROLS[str(reaction.emoji)]


class SnakeCog(commands.Cog):

    def __init__(self, bot: commands.Bot, settings: Settings, registry: Optional[SessionRegistry] = None):
        self.bot = bot
        self.settings = settings
        self.registry = registry or SessionRegistry(self.new_game)

    def new_game(self) -> SnakeGame:
        options = GameOptions(
            game_over_title=self.settings.game_over_title,
            background_symbol=self.settings.background_symbol,
            apple_symbol=self.settings.apple_symbol,
            snake_symbol=self.settings.snake_symbol,
            board_width=self.settings.board_width,
            board_height=self.settings.board_height
        )
        game = SnakeGame(options).set_title(self.settings.title).set_color(self.settings.color)
        if self.settings.timestamp:
            game.set_timestamp()
        return game

    @commands.command(name="snake", help="Start a game of Snake in this channel.")
    async def snake(self, ctx: commands.Context):
        surface_id = ctx.channel.id
        if self.registry.is_running(surface_id):
            logger.info(f"Ignoring snake start in channel {surface_id}: a game is already running")
            return

        game = self.registry.get_or_create(surface_id)
        sink = EmbedFrameSink(ctx.channel)
        player = ReactionPlayer(self.bot, sink, ctx.author.id)

        try:
            score = await run_session(game, player, sink, timeout=self.settings.input_timeout)
        except AlreadyRunning:
            logger.info(f"Ignoring snake start in channel {surface_id}: a game is already running")
            return
        except discord.HTTPException as e:
            # run_session has already ended the game, so the channel is free again
            logger.warning(f"Game in channel {surface_id} stopped by a Discord error: {e}")
            return

        logger.info(f"Game in channel {surface_id} for {ctx.author} finished: {game.end_reason}, score {score}")


class SnakeBot(commands.Bot):

    def __init__(self, settings: Settings):
        intents = discord.Intents.default()
        intents.message_content = True
        super().__init__(command_prefix=settings.command_prefix, intents=intents)
        self.settings = settings

    async def setup_hook(self) -> None:
        await self.add_cog(SnakeCog(self, self.settings))

    async def on_ready(self):
        logger.info(f"Logged in as {self.user} (prefix {self.settings.command_prefix!r})")


def create_bot(settings: Settings) -> SnakeBot:
    return SnakeBot(settings)
