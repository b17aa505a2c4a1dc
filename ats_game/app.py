"""Units that glide to commanded targets, with a pygame front end."""

from __future__ import annotations

import argparse
import random
import time
from dataclasses import dataclass, field
from typing import Any, Hashable, Iterable, List, Mapping, Optional

from .lerp import Lerp, LerpPoint, Position
from .mouse_world_position import Camera2d, MouseWorldPosition
from .selection_box import Selected, SelectionBox

COMMAND_TRAVEL_SECONDS = 10.0
SPAWN_TRAVEL_SECONDS = 1.0
SPAWN_RANGE = 200.0
UNIT_COUNT = 2
FALLBACK_SIZE = 16


@dataclass
class Unit:
    """A unit whose position follows its timeline."""

    lerp: Lerp[Position]
    position: Position = field(default_factory=Position)
    image: Any = None

    def update(self, now: float) -> Position:
        value = self.lerp.current_value(now)
        if value is not None:
            self.position = value
        return self.position


def spawn_units(image: Any, now: float, rng: Optional[random.Random] = None) -> List[Unit]:
    """Create the starting units, each heading to a random nearby point."""
    rng = rng or random.Random()
    units = []
    for _ in range(UNIT_COUNT):
        target = Position(rng.random() * SPAWN_RANGE, rng.random() * SPAWN_RANGE)
        lerp = Lerp(
            [
                LerpPoint(Position(0.0, 0.0), now),
                LerpPoint(target, now + SPAWN_TRAVEL_SECONDS),
            ]
        )
        units.append(Unit(lerp, image=image))
    return units


def command_units(
    units: Mapping[Hashable, Unit],
    selected: Iterable[Hashable],
    mouse_pos: Optional[Position],
    now: float,
) -> None:
    """Send every selected unit towards ``mouse_pos``."""
    if mouse_pos is None:
        return
    for entity in selected:
        unit = units.get(entity)
        if unit is None:
            continue
        unit.lerp.insert_point_delete_later(mouse_pos, now + COMMAND_TRAVEL_SECONDS)


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="ats", description="Move units with the mouse.")
    parser.add_argument("--width", type=int, default=1280)
    parser.add_argument("--height", type=int, default=720)
    parser.add_argument("--image", default="assets/tiles.png")
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    return parser.parse_args(argv)


def _load_image(path):
    import pygame

    if not path:
        return None
    try:
        return pygame.image.load(path).convert_alpha()
    except (pygame.error, OSError):
        return None


def _draw(screen, camera, units, image):
    import pygame

    screen.fill((0, 0, 0))
    for unit in units:
        sx, sy = camera.world_to_viewport(unit.position)
        centre = (round(sx), round(sy))
        if image is not None:
            screen.blit(image, image.get_rect(center=centre))
        else:
            rect = pygame.Rect(0, 0, FALLBACK_SIZE, FALLBACK_SIZE)
            rect.center = centre
            pygame.draw.rect(screen, (255, 255, 255), rect)


def main(argv=None) -> int:
    import pygame

    args = _parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption("ats")
        image = _load_image(args.image)
        camera = Camera2d(viewport_width=args.width, viewport_height=args.height)
        units = dict(enumerate(spawn_units(image, time.monotonic(), random.Random(args.seed))))
        mouse = MouseWorldPosition()
        box = SelectionBox()
        selected = Selected()
        clock = pygame.time.Clock()
        frame = 0
        running = True
        while running and (args.frames is None or frame < args.frames):
            left_pressed = left_released = right_pressed = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if event.button == 1:
                        left_pressed = True
                    elif event.button == 3:
                        right_pressed = True
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    left_released = True

            now = time.monotonic()
            cursor = pygame.mouse.get_pos() if pygame.mouse.get_focused() else None
            mouse.update(cursor, camera)
            box.move(mouse.get(), left_pressed, left_released)
            box.select_units(((e, u.position) for e, u in units.items()), selected)
            if right_pressed:
                command_units(units, selected.entities(), mouse.get(), now)
            for unit in units.values():
                unit.update(now)

            _draw(screen, camera, units.values(), image)
            pygame.display.flip()
            clock.tick(args.fps)
            frame += 1
    finally:
        pygame.quit()
    return 0