from dataclasses import dataclass
from typing import Iterator, List, Tuple


@dataclass(frozen=True)
class Tile:
    """A rectangle of pixels rendered as one unit of work."""
    index: int
    x0: int
    y0: int
    width: int
    height: int

    @property
    def x1(self) -> int:
        return self.x0 + self.width

    @property
    def y1(self) -> int:
        return self.y0 + self.height

    def pixels(self) -> Iterator[Tuple[int, int]]:
        """(x, y) pairs in row-major order."""
        for y in range(self.y0, self.y1):
            for x in range(self.x0, self.x1):
                yield x, y


def make_tiles(width: int, height: int, tile_width: int, tile_height: int) -> List[Tile]:
    """
    Partition a width x height image into disjoint tiles, scanning rows of
    tiles from the top. Tiles on the right and bottom edges are clipped.
    """
    tiles = []
    for y in range(0, height, tile_height):
        for x in range(0, width, tile_width):
            tiles.append(Tile(
                index=len(tiles),
                x0=x,
                y0=y,
                width=min(tile_width, width - x),
                height=min(tile_height, height - y),
            ))
    return tiles
