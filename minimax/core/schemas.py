from pydantic import BaseModel, ConfigDict

from .enums import Player


class Move(BaseModel):
    # Frozen so moves are hashable and compare by value
    model_config = ConfigDict(frozen=True)

    player: Player
    column: int

    def __str__(self) -> str:
        return f"P{int(self.player)} -> column {self.column}"
