"""Systems and the manager that keeps their entity sets current."""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple, Type, TypeVar

from evilpikmin.component_manager import ComponentManager
from evilpikmin.config import MAX_COMPONENTS, MAX_SYSTEMS

logger = logging.getLogger(__name__)

S = TypeVar("S", bound="System")


class System:
    """Base class for systems; holds the entities matching its signature."""

    def __init__(self) -> None:
        self.registered_entities: set[int] = set()
        self.component_manager: Optional[ComponentManager] = None

    def __iter__(self) -> Iterator[int]:
        """Iterate registered entities in ascending order."""
        return iter(sorted(self.registered_entities))

    def __len__(self) -> int:
        return len(self.registered_entities)

    def __contains__(self, entity: object) -> bool:
        return entity in self.registered_entities

    def register_entity(self, entity: int) -> None:
        self.registered_entities.add(entity)

    def remove_entity(self, entity: int) -> None:
        self.registered_entities.discard(entity)


class SystemManager:
    """Matches entity signatures against system signatures."""

    def __init__(self, component_manager: ComponentManager) -> None:
        self.component_manager = component_manager
        self._systems: List[Tuple[System, int]] = []

    def add_system(self, system_type: Type[S], signature: int) -> S:
        """Create and register a system of ``system_type``."""
        if len(self._systems) >= MAX_SYSTEMS:
            raise RuntimeError(f"cannot register more than {MAX_SYSTEMS} systems")
        logger.info(
            "Registering system '%s' with signature %s",
            system_type.__name__,
            format(signature, f"0{MAX_COMPONENTS}b"),
        )
        system = system_type()
        system.component_manager = self.component_manager
        self._systems.append((system, signature))
        return system

    def entity_changed(self, entity: int, signature: int) -> None:
        """Register or drop ``entity`` from each system by its new signature."""
        for system, wanted in self._systems:
            if wanted & signature == wanted:
                system.register_entity(entity)
            else:
                system.remove_entity(entity)

    def entity_removed(self, entity: int) -> None:
        for system, _ in self._systems:
            system.remove_entity(entity)