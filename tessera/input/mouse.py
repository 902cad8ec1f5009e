from dataclasses import dataclass, field
from typing import Optional

import pygame

from tessera.types import Vector2

LEFT_BUTTON = 1


@dataclass
class MousePos:
    """Cursor position recorded when the drag started."""

    prev_pos: Vector2 = field(default_factory=Vector2.zero)

    def calculate_delta(self, current_pos: Vector2) -> Vector2:
        return self.prev_pos - current_pos


class MouseDrag:
    """
    Left-button drag tracker. Feed it every pygame event; the delta is
    measured from where the button went down, not from the last frame.
    """

    def __init__(self, button: int = LEFT_BUTTON) -> None:
        self.button = button
        self.anchor = MousePos()
        self.current_pos = Vector2.zero()
        self.dragging = False

    def process_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == self.button:
            pos = Vector2(float(event.pos[0]), float(event.pos[1]))
            self.anchor.prev_pos = pos
            self.current_pos = pos
            self.dragging = True

        elif event.type == pygame.MOUSEBUTTONUP and event.button == self.button:
            self.dragging = False

        elif event.type == pygame.MOUSEMOTION and self.dragging:
            self.current_pos = Vector2(float(event.pos[0]), float(event.pos[1]))

    def delta(self) -> Optional[Vector2]:
        """Offset of the cursor from the drag start, or None when idle."""
        if not self.dragging:
            return None
        return self.anchor.calculate_delta(self.current_pos)
