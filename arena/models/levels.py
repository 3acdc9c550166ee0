"""Character level tiers."""

from enum import IntEnum

from arena.config import LEVEL_POINTS_STEP


class CharacterLevel(IntEnum):
    """Level tier with its creation point budget."""

    LEVEL_1 = 1
    LEVEL_2 = 2
    LEVEL_3 = 3
    LEVEL_4 = 4
    LEVEL_5 = 5
    LEVEL_6 = 6
    LEVEL_7 = 7
    LEVEL_8 = 8
    LEVEL_9 = 9
    LEVEL_10 = 10

    @property
    def points(self) -> int:
        """Total points a character of this tier may spend on health, attack and its resource."""
        return self.value * LEVEL_POINTS_STEP

    @classmethod
    def from_points(cls, points: int) -> "CharacterLevel":
        """Resolve a point budget back to its tier."""
        for level in cls:
            if level.points == points:
                return level
        raise ValueError(f"No character level has a budget of {points} points")
