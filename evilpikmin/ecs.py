"""The entity-component-system world."""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, Type, TypeVar, Union

from evilpikmin.collisions import Collider, CollisionShapeType
from evilpikmin.component_array import ComponentArray
from evilpikmin.component_manager import ComponentManager
from evilpikmin.components import CompSig, Position, ScanningFor
from evilpikmin.config import MAX_COMPONENTS, MAX_ENTITIES
from evilpikmin.system import System, SystemManager

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=System)

_EXISTS_BIT = 1 << CompSig.EXISTS


def make_signature(*args: int) -> int:
    """Build a signature bit mask with the given component indexes set."""
    signature = 0
    for index in args:
        index = int(index)
        if not 0 <= index < MAX_COMPONENTS:
            raise ValueError(f"component index {index} outside 0..{MAX_COMPONENTS - 1}")
        signature |= 1 << index
    return signature


class ECS:
    """Entities as integer ids, each with a signature of owned components."""

    def __init__(self) -> None:
        self._free_ids: deque[int] = deque(range(MAX_ENTITIES))
        self._signatures: dict[int, int] = {}
        self.component_manager = ComponentManager()
        self.system_manager = SystemManager(self.component_manager)

    # Entities

    def add_entity(self) -> int:
        """Take the next free id and mark it as existing."""
        if not self._free_ids:
            raise RuntimeError(f"all {MAX_ENTITIES} entity ids are in use")
        entity = self._free_ids.popleft()
        self._signatures[entity] = _EXISTS_BIT
        return entity

    def remove_entity(self, entity: int) -> None:
        """Drop every component of ``entity`` and free its id."""
        if not self.exists(entity):
            logger.warning("Entity [%d] does not exist, so it cannot be removed", entity)
            return
        self.component_manager.entity_removed(entity, self._signatures[entity])
        self.system_manager.entity_removed(entity)
        self._signatures[entity] = 0
        self._free_ids.append(entity)

    def signature(self, entity: int) -> int:
        return self._signatures.get(entity, 0)

    def exists(self, entity: int) -> bool:
        return bool(self.signature(entity) & _EXISTS_BIT)

    def has_component(self, entity: int, component_type: type) -> bool:
        index = self.component_manager.signature_index(component_type)
        return self.exists(entity) and bool(self.signature(entity) >> index & 1)

    def has_components(self, entity: int, signature: int) -> bool:
        return self.exists(entity) and self.signature(entity) & signature == signature

    def has_any_components(self, entity: int, signature: int) -> bool:
        return self.exists(entity) and self.signature(entity) & signature != 0

    # Components

    def register_component(self, component_type: type, index: int) -> None:
        self.component_manager.add_component(component_type, index)

    def add_component(self, entity: int, data) -> None:
        """Attach ``data`` to ``entity``; its type picks the component slot."""
        component_type = type(data)
        index = self.component_manager.signature_index(component_type)
        signature = self.signature(entity)
        if signature >> index & 1:
            raise ValueError(
                f"entity [{entity}] already has {component_type.__name__}"
            )
        self.component_manager.component_array(component_type).add_entity(entity, data)
        signature |= 1 << index
        self._signatures[entity] = signature
        self.system_manager.entity_changed(entity, signature)

    def remove_component(self, entity: int, component_type: type) -> None:
        """Detach a component; does nothing if the entity lacks it."""
        index = self.component_manager.signature_index(component_type)
        signature = self.signature(entity)
        if not signature >> index & 1:
            return
        self.component_manager.component_array(component_type).remove_entity(entity)
        signature &= ~(1 << index)
        self._signatures[entity] = signature
        self.system_manager.entity_changed(entity, signature)

    def component(self, entity: int, component_type: type):
        """Return the entity's component of ``component_type``."""
        if not self.has_component(entity, component_type):
            raise KeyError(f"entity [{entity}] has no {component_type.__name__}")
        return self.component_manager.component_data(component_type, entity)

    def component_array(self, component_type: type) -> ComponentArray:
        return self.component_manager.component_array(component_type)

    # Systems

    def register_system(
        self, system_type: Type[S], signature: Union[int, Iterable[int]]
    ) -> S:
        """Register a system; ``signature`` is a bit mask or component indexes."""
        if not isinstance(signature, int):
            signature = make_signature(*signature)
        return self.system_manager.add_system(system_type, signature)

    # Debug output

    def describe_entity(self, entity: int) -> str:
        """Return a summary of the entity's signature and component states."""
        signature = self.signature(entity)
        # Index 0 only marks existence and has no registered component.
        indexes = [i for i in range(1, MAX_COMPONENTS) if signature >> i & 1]
        names = "".join(
            f"{self.component_manager.type_from_index(i).__name__}, " for i in indexes
        )
        lines = [f"[{entity}] {format(signature, f'0{MAX_COMPONENTS}b')}: {names}"]
        for index in indexes:
            state = self.describe_component(entity, index)
            if state:
                lines.append(state)
        return "\n".join(lines)

    def describe_component(self, entity: int, index: int) -> str:
        """Return the state of one component, or "" if it has no description."""
        index = int(index)
        if not self.signature(entity) >> index & 1:
            name = self.component_manager.type_from_index(index).__name__
            return f"Entity ({entity}) does not have component {name}"
        if index == CompSig.POSITION:
            pos = self.component(entity, Position)
            return f"[{entity}] Position: {pos.x:g}, {pos.y:g}"
        if index == CompSig.COLLIDER:
            col = self.component(entity, Collider)
            if col.shape_type is CollisionShapeType.CIRCLE:
                circle = col.shape
                shape_name = "circle"
                body = f"{circle.x:g}, {circle.y:g}, {circle.radius:g}"
            else:
                shape_name = "Not in debugger collider print out yet"
                body = ""
            return f"[{entity}] Collider: {shape_name} {{{body}}} - {int(col.identifier)}"
        if index == CompSig.SCANNING_FOR:
            scan = self.component(entity, ScanningFor)
            parts = "".join(
                f"{int(value)} ({rng:g}), "
                for value, rng in zip(scan.sought_scan_values, scan.max_range)
            )
            return f"[{entity}] is scanning for: {parts}"
        return ""