"""Game aggregate: one run of the dungeon.

A Game owns its Player and Map and tracks the run status. Status changes
only through the explicit transition methods; nothing in the turn update
calls them on its own.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from dungeon_crawler.core.exceptions import InvalidGameStateError
from dungeon_crawler.core.logging import get_logger
from dungeon_crawler.models.enums import GameStatus
from dungeon_crawler.models.map import Map
from dungeon_crawler.models.player import Player
from dungeon_crawler.models.snapshot import GameSnapshot, MapSnapshot, PlayerSnapshot


logger = get_logger(__name__)


class Game(BaseModel):
    """A single run.

    Attributes:
        player: The player character.
        status: Run status.
        map: The world map.
        turn: Number of turns played while running.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    player: Player
    status: GameStatus = Field(default=GameStatus.RUNNING)
    map: Map
    turn: int = Field(default=0, ge=0)

    @classmethod
    def new(cls, player_name: str, game_map: Map) -> Game:
        """Start a run with a fresh player on the given map.

        Args:
            player_name: Name of the player character.
            game_map: Initial game map.

        Returns:
            A running Game.
        """
        return cls(player=Player.new(player_name), map=game_map)

    @property
    def is_running(self) -> bool:
        return self.status == GameStatus.RUNNING

    def update(self) -> None:
        """Advance the simulation by one turn.

        Only counts turns for now; movement, combat and status ticks hook
        in here. Does nothing unless the run is running.
        """
        if not self.is_running:
            return
        self.turn += 1
        logger.debug("Turn advanced", turn=self.turn)

    # -------------------------------------------------------------------------
    # Status transitions
    # -------------------------------------------------------------------------

    def _transition(self, target: GameStatus, allowed_from: tuple[GameStatus, ...]) -> None:
        if self.status not in allowed_from:
            raise InvalidGameStateError(
                f"Cannot move run from {self.status.value} to {target.value}",
                current_state=self.status.value,
                expected_states=[state.value for state in allowed_from],
            )
        previous = self.status
        self.status = target
        logger.info("Run status changed", previous=previous.value, status=target.value)

    def pause(self) -> None:
        self._transition(GameStatus.PAUSED, (GameStatus.RUNNING,))

    def resume(self) -> None:
        self._transition(GameStatus.RUNNING, (GameStatus.PAUSED,))

    def resolve_death(self) -> None:
        """End the run. Allowed from Running or Paused."""
        self._transition(GameStatus.GAME_OVER, (GameStatus.RUNNING, GameStatus.PAUSED))

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            player=PlayerSnapshot.from_player(self.player),
            map=MapSnapshot.from_map(self.map),
            status=self.status,
            turn=self.turn,
        )


__all__ = ["Game"]
