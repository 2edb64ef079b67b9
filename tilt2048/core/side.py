"""
Sides of the board a tilt can be directed to.
"""

from enum import Enum


class Side(Enum):
    """
    One of the four sides of the board.

    The value of each member is the number of counter-clockwise quarter turns
    (``numpy.rot90`` ``k``) that bring a board stored as ``[col, row]`` into a view where
    "up" (increasing row) points to that side.
    """

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @classmethod
    def parse(cls, value: 'Side | str') -> 'Side':
        """
        Convert a side or a side name into a side.

        Parameters
        ----------
        value : Side | str
            A side, its name (``north``, ``n``, ...) or an arrow name (``up``, ``down``, ``left``, ``right``).
            Names are case-insensitive.

        Returns
        -------
        Side
            The matching side.

        Raises
        ------
        ValueError
            If the value doesn't name a side.
        """
        if isinstance(value, Side):
            return value
        if isinstance(value, str):
            side = _SIDE_NAMES.get(value.strip().lower())
            if side is not None:
                return side
        raise ValueError(f'Invalid side: {value!r}.')


_SIDE_NAMES = {
    'north': Side.NORTH,
    'n': Side.NORTH,
    'up': Side.NORTH,
    'east': Side.EAST,
    'e': Side.EAST,
    'right': Side.EAST,
    'south': Side.SOUTH,
    's': Side.SOUTH,
    'down': Side.SOUTH,
    'west': Side.WEST,
    'w': Side.WEST,
    'left': Side.WEST,
}

