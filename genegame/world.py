"""Toroidal tile grid holding food and occupancy.

The World owns a fixed ``width x height`` array of tiles, stored row-major.
Tiles only ever store a creature's *handle*, never the creature itself: the
EntityStore is the single owner of creature data, and the grid is a spatial
index over it.

Addressing does NOT wrap. Callers normalise coordinates with
``wrap_position()`` first, which is what every directional opcode does.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from genegame.config.world import STARTING_TILE_FOOD
from genegame.entity_ids import EntityHandle


@dataclass
class Tile:
    """One grid cell.

    Attributes:
        food: Food units lying on the tile.
        occupant: Handle of the creature standing here, if any.
    """

    food: int = STARTING_TILE_FOOD
    occupant: Optional[EntityHandle] = None

    @property
    def is_occupied(self) -> bool:
        return self.occupant is not None


def wrap_position(
    position: Tuple[int, int],
    delta: Tuple[int, int],
    size: Tuple[int, int],
) -> Tuple[int, int]:
    """Apply a single-step delta and wrap the result onto the torus.

    Each delta component must be in ``{-1, 0, 1}``. A coordinate that goes
    negative re-enters at ``bound - 1``; one that reaches the bound re-enters
    at ``coordinate - bound``.

    Args:
        position: Current ``(x, y)``, already inside the grid.
        delta: Step ``(dx, dy)``.
        size: Grid ``(width, height)``.

    Returns:
        The adjusted ``(x, y)`` inside ``[0, width) x [0, height)``.
    """

    def _wrap(value: int, bound: int) -> int:
        if value < 0:
            return bound - 1
        if value >= bound:
            return value - bound
        return value

    (x, y), (dx, dy), (width, height) = position, delta, size
    return _wrap(x + dx, width), _wrap(y + dy, height)


class World:
    """Fixed-size toroidal grid of tiles.

    Example:
        world = World(800, 600)
        tile = world.tile_at_mut(10, 20)
        tile.food -= 5
    """

    def __init__(self, width: int, height: int, starting_food: int = STARTING_TILE_FOOD) -> None:
        """Create the grid with every tile at ``starting_food`` and unoccupied.

        Args:
            width: Grid width in tiles (>= 1)
            height: Grid height in tiles (>= 1)
            starting_food: Initial food on each tile
        """
        if width < 1 or height < 1:
            raise ValueError(f"World must be at least 1x1, got {width}x{height}")
        self._width = width
        self._height = height
        self._tiles: List[Tile] = [Tile(food=starting_food) for _ in range(width * height)]

    def size(self) -> Tuple[int, int]:
        """Return ``(width, height)``."""
        return self._width, self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _index(self, x: int, y: int) -> int:
        assert 0 <= x < self._width and 0 <= y < self._height, f"({x}, {y}) is off the grid"
        return y * self._width + x

    def tile_at(self, x: int, y: int) -> Tile:
        """Return the tile at pre-normalised coordinates (read access)."""
        return self._tiles[self._index(x, y)]

    def tile_at_mut(self, x: int, y: int) -> Tile:
        """Return the tile at pre-normalised coordinates for mutation.

        Same tile as ``tile_at()``; kept separate so writers are easy to find.
        """
        return self._tiles[self._index(x, y)]

    def contains(self, x: int, y: int) -> bool:
        """Whether ``(x, y)`` lies on the grid (no wrapping)."""
        return 0 <= x < self._width and 0 <= y < self._height

    def neighbor(self, x: int, y: int, delta: Tuple[int, int]) -> Tuple[int, int]:
        """Wrapped coordinates one step from ``(x, y)`` along ``delta``."""
        return wrap_position((x, y), delta, (self._width, self._height))

    def iter_tiles(self) -> Iterator[Tuple[int, int, Tile]]:
        """Yield ``(x, y, tile)`` in row-major order."""
        for index, tile in enumerate(self._tiles):
            y, x = divmod(index, self._width)
            yield x, y, tile

    def living_occupant_count(self) -> int:
        """Count occupied tiles (diagnostic full scan)."""
        return sum(1 for tile in self._tiles if tile.occupant is not None)

    def total_food(self) -> int:
        """Sum of food across every tile."""
        return sum(tile.food for tile in self._tiles)
