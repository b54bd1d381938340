"""Session state machine.

The session sits between the input collaborator and the simulation. It is
either in the menu (no game) or in a game it exclusively owns, and every
input token moves it along one transition:

    MENU     --new-->   IN_GAME     (fresh player, map with one room)
    MENU     --load-->  MENU        (not implemented)
    MENU     --quit-->  TERMINATED
    IN_GAME  --quit-->  MENU        (game discarded, nothing saved)
    IN_GAME  --equip/use N-->  IN_GAME
    IN_GAME  --other--> IN_GAME     (Game.update)

Recoverable game errors never leave the session: they come back as the
response message and the state is kept.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable
from uuid import uuid4

from dungeon_crawler.core.config import Settings, get_settings
from dungeon_crawler.core.exceptions import CrawlerError, InputClosedError, InvalidGameStateError
from dungeon_crawler.core.logging import bind_context, clear_context, get_logger
from dungeon_crawler.models.enums import SessionState
from dungeon_crawler.models.game import Game
from dungeon_crawler.models.item import create_item
from dungeon_crawler.models.map import Map
from dungeon_crawler.models.room import Room


if TYPE_CHECKING:
    from dungeon_crawler.engine.interfaces import UserInterface

logger = get_logger(__name__)


MENU_NEW = ("1", "new", "n")
MENU_LOAD = ("2", "load", "l")
MENU_QUIT = ("3", "q", "quit", "exit")
GAME_QUIT = ("q", "quit")
GAME_EQUIP = ("e", "equip")
GAME_USE = ("u", "use")


@dataclass(frozen=True)
class SessionResponse:
    """Outcome of handling one token.

    Attributes:
        state: Session state after the token.
        message: Text for the player, empty when there is nothing to say.
    """

    state: SessionState
    message: str = ""


@dataclass(frozen=True)
class Command:
    """An in-game command."""

    name: str
    aliases: tuple[str, ...]
    handler: Callable[[Game, list[str]], str]


def new_game(settings: Settings, player_name: str | None = None) -> Game:
    """Build a fresh run from settings.

    The map gets exactly one room, stamped at its center, and the player
    receives the configured starting items.

    Args:
        settings: Application settings.
        player_name: Character name; defaults to the configured one.

    Returns:
        A running Game.
    """
    game_map = Map.new(settings.map.width, settings.map.height)
    game_map.create_room(Room.new(settings.map.room_width, settings.map.room_height))

    game = Game.new(player_name or settings.player.default_name, game_map)
    for slug in settings.player.starting_items:
        game.player.pick_up(create_item(slug))
    return game


def _parse_slot_number(args: list[str], verb: str) -> int:
    """Turn a 1-based inventory number from the player into an index."""
    usage = CrawlerError(f"Usage: {verb} <inventory number>")
    if len(args) != 1:
        raise usage
    try:
        return int(args[0]) - 1
    except ValueError:
        raise usage from None


def _equip(game: Game, args: list[str]) -> str:
    item = game.player.equip_item(_parse_slot_number(args, "equip"))
    return f"You equip the {item.name}. Attack {game.player.attack}, defense {game.player.defense}."


def _use(game: Game, args: list[str]) -> str:
    item = game.player.use_item(_parse_slot_number(args, "use"))
    return f"You use the {item.name}. Health: {game.player.health}."


GAME_COMMANDS = (
    Command(name="equip", aliases=GAME_EQUIP, handler=_equip),
    Command(name="use", aliases=GAME_USE, handler=_use),
)


class Session:
    """Menu / in-game state machine that owns the current Game.

    Attributes:
        state: Current session state.
        game: The active game, only while IN_GAME.
        last_message: Message from the most recent token.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        player_name: str | None = None,
    ) -> None:
        """Initialize a session in the menu.

        Args:
            settings: Application settings; loaded from the environment
                when omitted.
            player_name: Name for new characters, overriding settings.
        """
        self._settings = settings or get_settings()
        self._player_name = player_name
        self._state = SessionState.MENU
        self._game: Game | None = None
        self._commands = {alias: command for command in GAME_COMMANDS for alias in command.aliases}
        self.last_message = ""

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def game(self) -> Game | None:
        return self._game

    @property
    def is_terminated(self) -> bool:
        return self._state == SessionState.TERMINATED

    def handle(self, token: str) -> SessionResponse:
        """Process one input token.

        Args:
            token: A trimmed line of input.

        Returns:
            The resulting state and a message for the player.
        """
        if self._state == SessionState.MENU:
            message = self._handle_menu(token.strip().lower())
        elif self._state == SessionState.IN_GAME:
            message = self._handle_game(token.strip())
        else:
            message = ""

        self.last_message = message
        return SessionResponse(state=self._state, message=message)

    def _handle_menu(self, token: str) -> str:
        if token in MENU_NEW:
            self._start_game()
            return "Starting new game..."
        if token in MENU_LOAD:
            logger.info("Load requested", supported=False)
            return "Loading saved games is not implemented yet."
        if token in MENU_QUIT:
            self._state = SessionState.TERMINATED
            logger.info("Session terminated")
            return "Goodbye!"
        return "Invalid input! Please select a number between 1 and 3."

    def _handle_game(self, token: str) -> str:
        if self._game is None:
            raise InvalidGameStateError(
                "Session is in game without a game",
                current_state=self._state.value,
            )
        words = token.split()
        verb = words[0].lower() if words else ""

        if verb in GAME_QUIT and len(words) == 1:
            self._end_game()
            return "Returned to the main menu."

        command = self._commands.get(verb)
        if command is None:
            self._game.update()
            return ""

        try:
            return command.handler(self._game, words[1:])
        except CrawlerError as exc:
            logger.info("Command rejected", command=command.name, error=str(exc))
            return exc.message

    def _start_game(self) -> None:
        self._game = new_game(self._settings, self._player_name)
        self._state = SessionState.IN_GAME
        bind_context(run_id=uuid4().hex[:8])
        logger.info(
            "Game started",
            player=self._game.player.name,
            map_size=(self._game.map.width, self._game.map.height),
        )

    def _end_game(self) -> None:
        turns = self._game.turn if self._game else 0
        self._game = None
        self._state = SessionState.MENU
        logger.info("Game discarded", turns=turns)
        clear_context()

    def render(self, ui: UserInterface) -> None:
        """Draw the frame for the current state."""
        if self._state == SessionState.IN_GAME and self._game is not None:
            ui.render_game(self._game.snapshot(), self.last_message)
        elif self._state == SessionState.MENU:
            ui.render_menu(self.last_message)

    def run(self, ui: UserInterface) -> None:
        """Pull loop: render, read a token, handle it, until terminated.

        Quitting from the menu shows its farewell message once the loop
        ends. Closing the input ends the session, discarding any active
        game, without a farewell.
        """
        while not self.is_terminated:
            self.render(ui)
            try:
                token = ui.read_token()
            except InputClosedError:
                logger.info("Input closed", state=self._state.value)
                if self._state == SessionState.IN_GAME:
                    self._end_game()
                self._state = SessionState.TERMINATED
                break
            response = self.handle(token)
            if response.state == SessionState.TERMINATED and response.message:
                ui.show_message(response.message)


__all__ = [
    "Session",
    "SessionResponse",
    "Command",
    "GAME_COMMANDS",
    "new_game",
]
