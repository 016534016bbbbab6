"""Index-keyed component storage, iterated in index order."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, TypeVar

C = TypeVar("C")


class SparseArray(Generic[C]):
    """Maps entity indices to components.

    Iteration yields ``(index, component)`` pairs sorted by index, over a
    snapshot, so the array may be changed while it is being walked.
    """

    def __init__(self, component_type: Callable[..., C] | None = None) -> None:
        self.component_type = component_type
        self._data: dict[int, C] = {}

    def __getitem__(self, index: int) -> C:
        try:
            return self._data[index]
        except KeyError:
            raise KeyError(f"no component at index {index}") from None

    def __iter__(self) -> Iterator[tuple[int, C]]:
        return iter([(index, self._data[index]) for index in sorted(self._data)])

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, index: object) -> bool:
        return index in self._data

    def insert_at(self, pos: int, component: C) -> C:
        """Store ``component`` at ``pos`` unless one is already there.

        Returns the component that ends up stored at ``pos``.
        """
        return self._data.setdefault(pos, component)

    def emplace_at(self, pos: int, *args: Any, **kwargs: Any) -> C:
        """Build a component from the arguments and store it at ``pos``."""
        if self.component_type is None:
            raise TypeError("this array has no component type to construct")
        if pos in self._data:
            return self._data[pos]
        return self.insert_at(pos, self.component_type(*args, **kwargs))

    def erase(self, pos: int) -> None:
        """Remove the component at ``pos``; a missing index is ignored."""
        self._data.pop(pos, None)

    def index_of(self, component: C) -> int:
        """Return the index at which this very component object is stored."""
        for index, stored in self._data.items():
            if stored is component:
                return index
        raise ValueError("component is not stored in this array")

    def has(self, pos: int) -> bool:
        return pos in self._data