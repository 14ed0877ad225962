from enum import IntEnum


class Player(IntEnum):
    ONE = 1
    TWO = 2

    @property
    def opponent(self) -> "Player":
        return Player.TWO if self is Player.ONE else Player.ONE

    @property
    def symbol(self) -> str:
        return "X" if self is Player.ONE else "O"
