"""Entities, component storage and systems."""

from __future__ import annotations

from typing import Any, Callable

from starforge.errors import InvalidArgument, InvalidComponent
from starforge.sparse_array import SparseArray


class Entity(int):
    """Handle to an entity: an index into the component arrays."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Entity({int(self)})"


System = Callable[..., Any]


class Registry:
    """Owns entities, their components and the systems that act on them.

    Arguments given to ``add_system`` and ``run_single_system`` that are
    classes stand for component types. They are replaced by the matching
    ``SparseArray`` each time the system runs. Any other argument is passed
    through unchanged. The function always receives the registry first.
    """

    def __init__(self) -> None:
        super().__init__()
        self._components: dict[type, SparseArray] = {}
        self._entity_size = 0
        self._free_entities: list[int] = []
        self._systems: list[Callable[[], None]] = []

    # Components

    def register_component(self, component_type: type) -> SparseArray:
        """Create a fresh, empty array for ``component_type`` and return it."""
        array: SparseArray = SparseArray(component_type)
        self._components[component_type] = array
        return array

    def get_components(self, component_type: type) -> SparseArray:
        """Return the array of a registered component type."""
        try:
            return self._components[component_type]
        except KeyError:
            raise InvalidComponent() from None

    # Entities

    def _is_alive(self, index: int) -> bool:
        return 0 < index <= self._entity_size and index not in self._free_entities

    def spawn_entity(self) -> Entity:
        """Create an entity, reusing the most recently freed index first."""
        if not self._free_entities:
            self._entity_size += 1
            return Entity(self._entity_size)
        return Entity(self._free_entities.pop())

    def entity_from_index(self, index: int) -> Entity:
        """Return the live entity with this index."""
        if not self._is_alive(index):
            raise InvalidArgument("The index is not valid")
        return Entity(index)

    def kill_entity(self, entity: int) -> None:
        """Destroy an entity and every component it holds."""
        if not self._is_alive(entity):
            raise InvalidArgument("The entity is not valid")
        for array in self._components.values():
            array.erase(int(entity))
        self._free_entities.append(int(entity))

    def kill_all_entities(self) -> None:
        """Destroy every entity and reset index allocation."""
        for index in range(self._entity_size + 1):
            try:
                self.kill_entity(index)
            except InvalidArgument:
                continue
        self._entity_size = 0
        self._free_entities.clear()

    # Components of entities

    def add_component(self, entity: int, component: Any) -> Any:
        """Attach ``component`` to ``entity`` and return the stored component."""
        component_type = type(component)
        if component_type not in self._components:
            raise InvalidComponent()
        array = self._components[component_type]
        if array.has(int(entity)):
            raise InvalidArgument("The entity already has the component")
        if not self._is_alive(entity):
            raise InvalidArgument("The entity is not valid")
        return array.insert_at(int(entity), component)

    def emplace_component(
        self, entity: int, component_type: type, *args: Any, **kwargs: Any
    ) -> Any:
        """Build a ``component_type`` from the arguments and attach it."""
        if component_type not in self._components:
            raise InvalidComponent()
        if not self._is_alive(entity):
            raise InvalidArgument("The entity is not valid")
        return self._components[component_type].emplace_at(int(entity), *args, **kwargs)

    def remove_component(self, entity: int, component_type: type) -> None:
        """Detach a component; nothing happens if the entity lacks it."""
        array = self.get_components(component_type)
        array.erase(int(entity))

    # Systems

    def _resolve(self, args: tuple[Any, ...]) -> list[Any]:
        return [self.get_components(arg) if isinstance(arg, type) else arg for arg in args]

    def add_system(self, function: System, *args: Any) -> Callable[[], None]:
        """Register a system and return a callable that unregisters it."""

        def system() -> None:
            function(self, *self._resolve(args))

        self._systems.append(system)

        def remove() -> None:
            for position, stored in enumerate(self._systems):
                if stored is system:
                    del self._systems[position]
                    return

        return remove

    def clear_systems(self) -> None:
        self._systems.clear()

    def run_systems(self) -> None:
        """Run every system in the order it was added."""
        for system in list(self._systems):
            system()

    def run_single_system(self, function: System, *args: Any) -> Any:
        """Run ``function`` once, as a system, without registering it."""
        return function(self, *self._resolve(args))