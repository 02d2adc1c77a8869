"""A small Mario game whose power-ups are modelled as states."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar


@dataclass
class Position:
    """A mutable point on the board."""

    x: int = 0
    y: int = 0

    def add_x(self, delta: int) -> None:
        self.x += delta

    def add_y(self, delta: int) -> None:
        self.y += delta

    def __iadd__(self, other: Position) -> Position:
        self.x += other.x
        self.y += other.y
        return self

    def __str__(self) -> str:
        return f"x : {self.x} y : {self.y}"


class MarioTool(enum.Enum):
    """Things Mario can bump into."""

    MUSHROOM = "mushroom"
    FIRE_FLOWER = "fire_flower"
    FEATHER = "feather"
    ATTACK = "attack"


_TOOL_SYMBOLS = {
    MarioTool.MUSHROOM: "1",
    MarioTool.FIRE_FLOWER: "2",
    MarioTool.FEATHER: "3",
    MarioTool.ATTACK: "4",
}


def tool_symbol(tool: MarioTool) -> str:
    """The character that draws ``tool`` on the board."""
    return _TOOL_SYMBOLS[tool]


@dataclass
class GameConfig:
    """Board size, quit key and the game's live settings."""

    QUIT: ClassVar[str] = "q"
    HEIGHT: ClassVar[int] = 25
    WIDTH: ClassVar[int] = 120

    delay_time: float = 0.03
    mario_alive: bool = True


class MarioState(ABC):
    """How Mario reacts to each kind of tool."""

    @abstractmethod
    def got_mushroom(self, mario: Mario) -> None: ...

    @abstractmethod
    def got_fire_flower(self, mario: Mario) -> None: ...

    @abstractmethod
    def got_feather(self, mario: Mario) -> None: ...

    @abstractmethod
    def got_attack(self, mario: Mario) -> None: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SmallMario(MarioState):
    """The starting form; an attack kills it."""

    def got_mushroom(self, mario: Mario) -> None:
        mario.add_coins(100)
        mario.become(SUPER_MARIO, "O")

    def got_fire_flower(self, mario: Mario) -> None:
        mario.add_coins(200)
        mario.become(FIRE_MARIO, "F")

    def got_feather(self, mario: Mario) -> None:
        # A feather turns small Mario into the fire form drawn as a cape.
        mario.add_coins(300)
        mario.become(FIRE_MARIO, "-")

    def got_attack(self, mario: Mario) -> None:
        mario.die()


class SuperMario(MarioState):
    """The grown form reached with a mushroom."""

    def got_mushroom(self, mario: Mario) -> None:
        mario.add_coins(50)

    def got_fire_flower(self, mario: Mario) -> None:
        mario.add_coins(300)
        mario.become(FIRE_MARIO, "F")

    def got_feather(self, mario: Mario) -> None:
        mario.add_coins(300)
        mario.become(CAPE_MARIO, "-")

    def got_attack(self, mario: Mario) -> None:
        mario.become(SMALL_MARIO, "o")


class FireMario(MarioState):
    """The form reached with a fire flower."""

    def got_mushroom(self, mario: Mario) -> None:
        mario.add_coins(100)

    def got_fire_flower(self, mario: Mario) -> None:
        mario.add_coins(100)

    def got_feather(self, mario: Mario) -> None:
        mario.add_coins(100)
        mario.become(CAPE_MARIO, "-")

    def got_attack(self, mario: Mario) -> None:
        mario.become(SMALL_MARIO, "o")


class CapeMario(MarioState):
    """The form reached with a feather."""

    def got_mushroom(self, mario: Mario) -> None:
        mario.add_coins(100)

    def got_fire_flower(self, mario: Mario) -> None:
        mario.add_coins(100)
        mario.become(FIRE_MARIO, "F")

    def got_feather(self, mario: Mario) -> None:
        mario.add_coins(100)

    def got_attack(self, mario: Mario) -> None:
        mario.become(SMALL_MARIO, "o")


SMALL_MARIO = SmallMario()
SUPER_MARIO = SuperMario()
FIRE_MARIO = FireMario()
CAPE_MARIO = CapeMario()


class Mario:
    """The player: a position, a form, a coin count and how it is drawn."""

    def __init__(self, start: Position | None = None, config: GameConfig | None = None) -> None:
        self.position = Position(start.x, start.y) if start is not None else Position()
        self.config = config if config is not None else GameConfig()
        self.state: MarioState = SMALL_MARIO
        self.coins = 0
        self.show = "o"

    def become(self, state: MarioState, show: str) -> None:
        """Switch to ``state`` and draw Mario as ``show``."""
        self.state = state
        self.show = show

    def add_coins(self, amount: int) -> None:
        self.coins += amount

    def run_left(self) -> None:
        self.position.add_x(-1)

    def run_right(self) -> None:
        self.position.add_x(1)

    def die(self) -> None:
        self.config.mario_alive = False
        print("Mario Die")

    def got_mushroom(self) -> None:
        self.state.got_mushroom(self)

    def got_fire_flower(self) -> None:
        self.state.got_fire_flower(self)

    def got_feather(self) -> None:
        self.state.got_feather(self)

    def got_attack(self) -> None:
        self.state.got_attack(self)


class Command(ABC):
    """An action bound to a key."""

    @abstractmethod
    def execute(self, mario: Mario) -> None:
        """Apply the action to ``mario``."""


class RunLeftCommand(Command):
    """Step left unless already at the left edge."""

    def execute(self, mario: Mario) -> None:
        if mario.position.x > 0:
            mario.run_left()


class RunRightCommand(Command):
    """Step right unless already at the right edge."""

    def execute(self, mario: Mario) -> None:
        if mario.position.x < GameConfig.WIDTH:
            mario.run_right()


TIP = "1 Mushroom; 2 FireFlower; 3 Feather; 4 Monster"

_TOUCH_ACTIONS = {
    MarioTool.MUSHROOM: Mario.got_mushroom,
    MarioTool.FIRE_FLOWER: Mario.got_fire_flower,
    MarioTool.FEATHER: Mario.got_feather,
    MarioTool.ATTACK: Mario.got_attack,
}


class Board:
    """The playing field: Mario, the tools lying about, and key bindings."""

    def __init__(self, config: GameConfig | None = None, start: Position | None = None) -> None:
        self.config = config if config is not None else GameConfig()
        self.mario = Mario(start if start is not None else Position(3, 0), self.config)
        self.commands: dict[str, Command] = {
            "a": RunLeftCommand(),
            "d": RunRightCommand(),
        }
        self.tools: dict[MarioTool, Position] = {
            MarioTool.MUSHROOM: self.to_screen(Position(20, 0)),
            MarioTool.FIRE_FLOWER: self.to_screen(Position(40, 0)),
            MarioTool.FEATHER: self.to_screen(Position(60, 0)),
            MarioTool.ATTACK: self.to_screen(Position(80, 0)),
        }

    def to_screen(self, position: Position) -> Position:
        """Turn game coordinates (y up from the ground) into screen rows."""
        return Position(position.x, GameConfig.HEIGHT - position.y)

    def handle_input(self, key: str) -> bool:
        """Apply one key press; return False once the game should end."""
        keep_going = key != GameConfig.QUIT
        command = self.commands.get(key)
        if command is not None:
            command.execute(self.mario)
        self.touch_tools()
        return keep_going and self.config.mario_alive

    def touch_tools(self) -> list[MarioTool]:
        """Trigger every tool under Mario; return the tools touched."""
        here = self.to_screen(self.mario.position)
        touched = [tool for tool, pos in self.tools.items() if pos == here]
        for tool in touched:
            _TOUCH_ACTIONS[tool](self.mario)
        return touched

    def show_item(self, x: int, y: int) -> str:
        """The character drawn at screen cell ``(x, y)``."""
        cell = Position(x, y)
        result = " "
        for tool, pos in self.tools.items():
            if pos == cell:
                result = tool_symbol(tool)
                break
        if self.to_screen(self.mario.position) == cell:
            result = self.mario.show
        return result

    def render(self) -> str:
        """The whole screen: a tip line followed by the board rows."""
        rows = [
            "".join(self.show_item(x, y) for x in range(GameConfig.WIDTH + 1))
            for y in range(GameConfig.HEIGHT + 1)
        ]
        return "\n".join([TIP, *rows])