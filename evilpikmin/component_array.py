"""Densely packed storage for one component type."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, List, Tuple, TypeVar

T = TypeVar("T")

Compare = Callable[[Any, Any, int, int, Any], int]


class ComponentArray(Generic[T]):
    """Component data kept contiguous, with a two-way entity/index mapping.

    Removing an entity moves the last component into the freed slot, so
    indexes stay dense but are not stable across removals.
    """

    def __init__(self) -> None:
        self._components: List[T] = []
        self._entities: List[int] = []
        self._index_of: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._components)

    def __contains__(self, entity: object) -> bool:
        return entity in self._index_of

    def __iter__(self) -> Iterator[Tuple[int, T]]:
        """Yield ``(entity, data)`` pairs in storage order."""
        return iter(list(zip(self._entities, self._components)))

    def add_entity(self, entity: int, data: T) -> None:
        """Store ``data`` for ``entity`` at the end of the array."""
        if entity in self._index_of:
            raise ValueError(f"entity {entity} already has a component here")
        self._index_of[entity] = len(self._components)
        self._entities.append(entity)
        self._components.append(data)

    def remove_entity(self, entity: int) -> None:
        """Drop the entity's data, filling the hole with the last component."""
        try:
            index = self._index_of[entity]
        except KeyError:
            raise KeyError(f"entity {entity} has no component here") from None
        self.swap(index, len(self._components) - 1)
        self._components.pop()
        self._entities.pop()
        del self._index_of[entity]

    def get(self, entity: int) -> T:
        """Return the entity's component data."""
        try:
            return self._components[self._index_of[entity]]
        except KeyError:
            raise KeyError(f"entity {entity} has no component here") from None

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._components):
            raise IndexError(f"component index {index} out of range")

    def get_from_index(self, index: int) -> T:
        """Return the component stored at ``index``."""
        self._check_index(index)
        return self._components[index]

    def entity_at(self, index: int) -> int:
        """Return the entity owning the component at ``index``."""
        self._check_index(index)
        return self._entities[index]

    def entity_destroyed(self, entity: int) -> None:
        self.remove_entity(entity)

    def swap(self, idx1: int, idx2: int) -> None:
        """Exchange two slots, keeping the entity mapping in step."""
        self._check_index(idx1)
        self._check_index(idx2)
        comps, ents = self._components, self._entities
        comps[idx1], comps[idx2] = comps[idx2], comps[idx1]
        ents[idx1], ents[idx2] = ents[idx2], ents[idx1]
        self._index_of[ents[idx1]] = idx1
        self._index_of[ents[idx2]] = idx2

    def insertion_sort(self, compare: Compare, ecs: Any) -> None:
        """Partially order the array with ``compare``.

        For each position ``i`` the pass walks back from ``i - 1`` towards
        slot 1, calling ``compare(c[k-1], c[k], entity[k-1], entity_i, ecs)``
        and swapping ``k-1`` and ``k`` while it returns 1. The entity handed
        as the fourth argument is the one that sat at ``i`` when the pass
        started.
        """
        for i in range(1, len(self._components)):
            anchor = self._entities[i]
            for k in range(i - 1, 0, -1):
                verdict = compare(
                    self._components[k - 1],
                    self._components[k],
                    self._entities[k - 1],
                    anchor,
                    ecs,
                )
                if verdict != 1:
                    break
                self.swap(k - 1, k)

    def describe(self) -> str:
        """Return a listing of every slot and the entity that owns it."""
        lines = [f"Num of components: {len(self)}"]
        lines.extend(
            f"Component {index} (entity {entity})"
            for index, entity in enumerate(self._entities)
        )
        return "\n".join(lines)