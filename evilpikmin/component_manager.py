"""Registry of component arrays keyed by signature index."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from evilpikmin.component_array import ComponentArray
from evilpikmin.config import MAX_COMPONENTS

logger = logging.getLogger(__name__)


class ComponentManager:
    """Owns one ``ComponentArray`` per registered component type."""

    def __init__(self) -> None:
        self._arrays: list[Optional[ComponentArray]] = [None] * MAX_COMPONENTS
        self._index_of_type: Dict[type, int] = {}
        self._type_at: Dict[int, type] = {}

    def add_component(self, component_type: type, signature_index: int) -> None:
        """Register ``component_type`` at ``signature_index``."""
        index = int(signature_index)
        if not 0 <= index < MAX_COMPONENTS:
            raise ValueError(
                f"component signature index {index} outside 0..{MAX_COMPONENTS - 1}"
            )
        if self._arrays[index] is not None:
            raise ValueError(f"a component is already registered at index {index}")
        if component_type in self._index_of_type:
            raise ValueError(f"{component_type.__name__} is already registered")
        self._arrays[index] = ComponentArray()
        self._index_of_type[component_type] = index
        self._type_at[index] = component_type
        logger.info("Added component %s at index %d", component_type.__name__, index)

    def component_data(self, component_type: type, entity: int):
        return self.component_array(component_type).get(entity)

    def component_array(self, component_type: type) -> ComponentArray:
        array = self._arrays[self.signature_index(component_type)]
        assert array is not None
        return array

    def signature_index(self, component_type: type) -> int:
        try:
            return self._index_of_type[component_type]
        except KeyError:
            raise KeyError(
                f"component {component_type.__name__} is not registered"
            ) from None

    def type_from_index(self, index: int) -> type:
        try:
            return self._type_at[int(index)]
        except KeyError:
            raise KeyError(f"no component registered at index {index}") from None

    def entity_removed(self, entity: int, signature: int) -> None:
        """Drop ``entity`` from every array whose bit is set in ``signature``."""
        for index, array in enumerate(self._arrays):
            if array is not None and signature >> index & 1:
                array.entity_destroyed(entity)