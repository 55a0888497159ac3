"""Saving and restoring a game in progress."""

from __future__ import annotations

import copy
import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from .state import Color, GameState, Keys, Mode, PlayerShot

DEFAULT_PATH = Path("SaveGame.dat")
SAVE_KEY = "S"
LOAD_KEY = "L"

PLAYER_FIELDS = (
    "px", "py", "px2", "py2", "vel_x", "vel_y", "lives",
    "in_ground", "in_air", "is_playing", "alive",
)
SHIP_FIELDS = ("px", "py", "level", "fill", "time")


@dataclass
class SaveGame:
    """A snapshot of the parts of the game state that are saved."""

    players: list[dict[str, Any]]
    shots: list[PlayerShot]
    level: int
    difficulty: int
    mode: Mode
    current_player: int
    ship: dict[str, Any]

    def apply(self, state: GameState) -> None:
        """Write the snapshot back into a running game.

        The current player is kept as it is.
        """
        for player, saved in zip(state.players, self.players):
            for name, value in saved.items():
                setattr(player, name, value)
        state.shots = copy.deepcopy(self.shots)
        state.level = self.level
        state.difficulty = self.difficulty
        state.mode = self.mode
        for name, value in self.ship.items():
            setattr(state.ship, name, value)

    def to_json(self) -> str:
        return json.dumps(
            {
                "players": self.players,
                "shots": [asdict(shot) for shot in self.shots],
                "level": self.level,
                "difficulty": self.difficulty,
                "mode": int(self.mode),
                "current_player": self.current_player,
                "ship": self.ship,
            }
        )

    @classmethod
    def from_json(cls, text: str) -> SaveGame:
        try:
            data = json.loads(text)
            return cls(
                players=[{name: saved[name] for name in PLAYER_FIELDS} for saved in data["players"]],
                shots=[_shot_from_dict(item) for item in data["shots"]],
                level=int(data["level"]),
                difficulty=int(data["difficulty"]),
                mode=Mode(data["mode"]),
                current_player=int(data["current_player"]),
                ship={name: data["ship"][name] for name in SHIP_FIELDS},
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"invalid save game: {exc}") from exc


def _shot_from_dict(item: dict[str, Any]) -> PlayerShot:
    values = dict(item)
    color = Color(**values.pop("color"))
    return PlayerShot(color=color, **values)


def collect(state: GameState) -> SaveGame:
    """Take a snapshot of the saved parts of the state."""
    return SaveGame(
        players=[{name: getattr(player, name) for name in PLAYER_FIELDS} for player in state.players],
        shots=copy.deepcopy(state.shots),
        level=state.level,
        difficulty=state.difficulty,
        mode=state.mode,
        current_player=state.current_player,
        ship={name: getattr(state.ship, name) for name in SHIP_FIELDS},
    )


def save_game(state: GameState, path: str | Path = DEFAULT_PATH) -> None:
    Path(path).write_text(collect(state).to_json(), encoding="utf-8")


def load_game(state: GameState, path: str | Path = DEFAULT_PATH) -> bool:
    """Restore a saved game; return False when there is no save file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return False
    SaveGame.from_json(text).apply(state)
    return True


def handle_save_keys(state: GameState, keys: Keys, path: str | Path = DEFAULT_PATH) -> bool:
    """Save on S, load on L; return True when a game was loaded."""
    if keys.is_down(SAVE_KEY):
        save_game(state, path)
    if keys.is_down(LOAD_KEY):
        return load_game(state, path)
    return False