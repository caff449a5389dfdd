"""Request headers as a read-only, case-insensitive mapping."""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType


class Headers(Mapping[str, str]):
    """Case-insensitive view over ASGI header pairs.

    Names are lowercased and values decoded (latin-1) once, when the
    request is built. Lookup returns the first value sent for a name;
    ``get_all`` returns every value in arrival order.
    """

    __slots__ = ("_index",)

    def __init__(self, raw: Iterable[tuple[bytes, bytes]] = ()) -> None:
        index: dict[str, list[str]] = {}
        for name, value in raw:
            index.setdefault(name.decode("latin-1").lower(), []).append(value.decode("latin-1"))
        self._index = MappingProxyType({name: tuple(values) for name, values in index.items()})

    def __getitem__(self, name: str) -> str:
        return self._index[name.lower()][0]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"Headers({dict(self)!r})"

    def get_all(self, name: str) -> tuple[str, ...]:
        """Every value sent for *name*, or ``()``."""
        return self._index.get(name.lower(), ())
