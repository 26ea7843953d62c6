"""
Enumeration of every cell coordinate inside an inclusive index box.
"""

from typing import Iterator, List, Sequence, Type, Union

from ..core.types import CellIndex


def increment_index(index: List[int], imin: Sequence[int], imax: Sequence[int]) -> int:
    """
    Advance ``index`` in place to the next coordinate of the box.

    Axis 0 varies fastest. An axis that passes ``imax`` is reset to ``imin``
    and carries into the next axis.

    Returns
    -------
    int
        0 if ``index`` is a new coordinate inside the box, 1 if the whole box
        wrapped around (``index`` is back at ``imin``)
    """
    for k in range(len(index)):
        index[k] += 1
        if index[k] > imax[k]:
            index[k] = imin[k]
        else:
            return 0
    return 1


class IndexRange:
    """
    Inclusive N-dimensional box of cell coordinates.

    Iterating yields every coordinate in the box exactly once, axis 0
    fastest. The range is restartable: each ``iter()`` starts over from
    ``imin``. Coordinates are plain tuples unless ``index_type`` asks for a
    grid's CellIndex type.
    """

    def __init__(
        self,
        imin: Sequence[int],
        imax: Sequence[int],
        index_type: Union[Type[tuple], Type[CellIndex]] = tuple,
    ):
        assert len(imin) == len(imax), "imin and imax differ in dimension"
        assert all(lo <= hi for lo, hi in zip(imin, imax)), f"inverted range {imin} > {imax}"
        self.imin = index_type(int(c) for c in imin)
        self.imax = index_type(int(c) for c in imax)
        self.index_type = index_type

    def __iter__(self) -> Iterator[tuple]:
        current = list(self.imin)
        while True:
            yield self.index_type(current)
            if increment_index(current, self.imin, self.imax) != 0:
                return

    def __len__(self) -> int:
        count = 1
        for lo, hi in zip(self.imin, self.imax):
            count *= hi - lo + 1
        return count

    def __contains__(self, index) -> bool:
        if len(index) != len(self.imin):
            return False
        return all(lo <= i <= hi for i, lo, hi in zip(index, self.imin, self.imax))

    def __repr__(self) -> str:
        return f"IndexRange({list(self.imin)}, {list(self.imax)})"
