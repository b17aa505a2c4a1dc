"""Box selection of units with the mouse."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Hashable, Iterable, Optional, Tuple

from .lerp import Position


class Selected:
    """The set of currently selected entities."""

    def __init__(self) -> None:
        self._entities: set = set()

    def entities(self) -> FrozenSet[Hashable]:
        return frozenset(self._entities)

    def add(self, entity: Hashable) -> None:
        self._entities.add(entity)

    def __contains__(self, entity: object) -> bool:
        return entity in self._entities

    def __len__(self) -> int:
        return len(self._entities)


def is_inside(point: Position, first: Position, second: Position) -> bool:
    """Whether ``point`` lies strictly within the box spanned by the corners."""
    x, y = point.x, point.y
    return (
        (x < first.x and y < first.y and x > second.x and y > second.y)
        or (x < first.x and y > first.y and x > second.x and y < second.y)
        or (x > first.x and y < first.y and x < second.x and y > second.y)
    )


@dataclass
class SelectionBox:
    """A selection rectangle given by two corners."""

    first: Position = field(default_factory=Position)
    second: Position = field(default_factory=Position)

    def move(
        self,
        mouse_pos: Optional[Position],
        just_pressed: bool,
        just_released: bool,
    ) -> None:
        """Move the first corner to the cursor on press or release."""
        if mouse_pos is None:
            return
        if just_pressed:
            self.first = mouse_pos
        if just_released:
            self.first = mouse_pos

    def select_units(
        self,
        units: Iterable[Tuple[Hashable, Position]],
        selected: Selected,
    ) -> None:
        """Add every unit inside the box to ``selected``."""
        for entity, position in units:
            if entity in selected:
                continue
            if is_inside(position, self.first, self.second):
                selected.add(entity)