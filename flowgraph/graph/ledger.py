"""Parallel bookkeeping of logical edges and their visual connector handles."""

from typing import Generic, Iterator, TypeVar

E = TypeVar("E")
H = TypeVar("H")


class IndexedLedger(Generic[E, H]):
    """Two parallel arenas: logical edges and the connector handles drawn for them.

    Position ``i`` of the handle arena always belongs to position ``i`` of the
    edge arena. Edges are looked up by value, handles by identity, since a
    collaborator's handles need not define equality.
    """

    def __init__(self) -> None:
        self._edges: list[E] = []
        self._handles: list[H] = []

    def __len__(self) -> int:
        return len(self._edges)

    def __contains__(self, edge: object) -> bool:
        return self.index_of(edge) is not None  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[E]:
        return iter(list(self._edges))

    @property
    def edges(self) -> list[E]:
        """Get a copy of the logical edges in insertion order."""
        return list(self._edges)

    @property
    def handles(self) -> list[H]:
        """Get a copy of the connector handles in insertion order."""
        return list(self._handles)

    def pairs(self) -> list[tuple[E, H]]:
        """Get ``(edge, handle)`` pairs in insertion order."""
        return list(zip(self._edges, self._handles))

    def is_aligned(self) -> bool:
        """Check that every edge has exactly one handle slot."""
        return len(self._edges) == len(self._handles)

    def append(self, edge: E, handle: H) -> int:
        """Append an edge together with its handle.

        Returns:
            The index both were stored at.
        """
        self._edges.append(edge)
        self._handles.append(handle)
        return len(self._edges) - 1

    def index_of(self, edge: E) -> int | None:
        """Get the index of the first edge equal to ``edge``."""
        for index, existing in enumerate(self._edges):
            if existing == edge:
                return index
        return None

    def handle_at(self, index: int) -> H:
        """Get the handle stored alongside the edge at ``index``.

        Raises:
            IndexError: If no handle is stored at ``index``.
        """
        if not 0 <= index < len(self._handles):
            raise IndexError(f"ledger has no handle at index {index}")
        return self._handles[index]

    def position_of_handle(self, handle: H) -> int | None:
        """Get the index of ``handle`` by identity."""
        for index, existing in enumerate(self._handles):
            if existing is handle:
                return index
        return None

    def remove_at(self, index: int) -> tuple[E, H]:
        """Remove the edge and the handle at ``index`` together.

        Raises:
            IndexError: If either arena has no entry at ``index``.
        """
        if not (0 <= index < len(self._edges) and index < len(self._handles)):
            raise IndexError(f"ledger has no entry at index {index}")
        return self._edges.pop(index), self._handles.pop(index)
