"""Direction algebra for labeled topic relations.

Each direction carries a signed magnitude; inverting a direction negates it.
WON has magnitude 0 and is therefore its own inverse.
"""

from enum import Enum

from topictalk.core.errors import ConfigError


class Direction(int, Enum):
    """Relation kinds between two topics."""

    NORTH = 1
    SOUTH = -1
    EAST = 2
    WEST = -2
    NORTHEAST = 3
    SOUTHWEST = -3
    NORTHWEST = 4
    SOUTHEAST = -4
    CONTAIN = 5
    INSIDE = -5
    HOSTED = 6
    WAS_HOSTED_AT = -6
    WON = 0

    def invert(self) -> "Direction":
        """Return the paired inverse direction."""
        return Direction(-self.value)

    @property
    def label(self) -> str:
        """Lowercase relation label, e.g. ``was_hosted_at``."""
        return self.name.lower()

    @property
    def is_spatial(self) -> bool:
        """Compass and containment directions (as opposed to event relations)."""
        return self not in EVENT_DIRECTIONS


EVENT_DIRECTIONS = frozenset({Direction.HOSTED, Direction.WAS_HOSTED_AT, Direction.WON})

# Scan order used by the query parser. Must stay in lockstep with Direction.
DIRECTION_WORDS: tuple[str, ...] = (
    "inside",
    "contain",
    "north",
    "east",
    "west",
    "south",
    "northeast",
    "northwest",
    "southeast",
    "southwest",
    "hosted",
    "was_hosted_at",
    "won",
)


def invert(direction: Direction) -> Direction:
    """Return the inverse of ``direction``."""
    return direction.invert()


def normalize_relation(label: str) -> str:
    """Normalize a free-text relation label for comparison.

    Lowercases, trims, and treats spaces and dashes as underscores, so
    ``"Was Hosted At"`` and ``"was_hosted_at"`` compare equal.
    """
    text = label.strip().lower()
    for sep in (" ", "-"):
        text = text.replace(sep, "_")
    return text


def _build_relation_table(words: tuple[str, ...]) -> dict[str, Direction]:
    table: dict[str, Direction] = {}
    for word in words:
        try:
            table[normalize_relation(word)] = Direction[word.upper()]
        except KeyError:
            raise ConfigError(f"Direction word '{word}' has no matching Direction") from None

    missing = set(Direction) - set(table.values())
    if missing:
        names = ", ".join(sorted(d.name for d in missing))
        raise ConfigError(f"Directions without a direction word: {names}")
    return table


RELATION_TABLE: dict[str, Direction] = _build_relation_table(DIRECTION_WORDS)


def parse_relation(label: str | None) -> Direction | None:
    """Map a relation label to its Direction, or None for non-directional labels."""
    if not label:
        return None
    return RELATION_TABLE.get(normalize_relation(label))
