"""Positional path parameters.

A request path is split on ``/`` and every non-empty segment becomes a
parameter, indexed by the order it appeared in::

    parse_path("/items/bike/")  -> {"0": "items", "1": "bike"}
    parse_path("//a//b/")       -> {"0": "a", "1": "b"}
    parse_path("/")             -> {}
"""

from collections.abc import Iterator, Mapping


class PathParams(Mapping[str, str]):
    """Ordered path segments with a string-keyed mapping view.

    Keys are the stringified 0-based positions (``"0"``, ``"1"``, ...).
    ``segments`` gives the plain tuple; ``at(i)`` indexes it directly.
    Compares equal to any mapping with the same items.
    """

    __slots__ = ("_segments",)

    def __init__(self, segments: tuple[str, ...] = ()) -> None:
        self._segments = segments

    def __getitem__(self, key: str) -> str:
        if isinstance(key, str) and key.isascii() and key.isdigit() and key == str(int(key)):
            index = int(key)
            if index < len(self._segments):
                return self._segments[index]
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        return (str(i) for i in range(len(self._segments)))

    def __len__(self) -> int:
        return len(self._segments)

    def __repr__(self) -> str:
        return f"PathParams({dict(self)!r})"

    @property
    def segments(self) -> tuple[str, ...]:
        """The segments in path order."""
        return self._segments

    def at(self, index: int) -> str:
        """Segment at *index*; raises ``IndexError`` when out of range."""
        return self._segments[index]


def parse_path(path: str) -> PathParams:
    """Split *path* on ``/`` into positional parameters.

    Empty segments (leading, trailing, or repeated slashes) are dropped
    and do not consume an index.
    """
    return PathParams(tuple(segment for segment in path.split("/") if segment))
