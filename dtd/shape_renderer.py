"""Drawing of lines, circles, grids and rectangles."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from .geometry import Rect, ScreenCoord, Vector
from .subrenderer import WINDOW_SIZE, Subrenderer

OUTLINE_THICKNESS = 2


@dataclass(frozen=True)
class Color:
    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
CIRCLE_FILL = Color(200, 0, 0, 128)


class ShapeRenderer(Subrenderer):
    """Draws simple shapes for debugging and health bars."""

    def __init__(self) -> None:
        super().__init__(None)

    def draw_line(self, start: ScreenCoord, end: ScreenCoord, color: Color = BLACK) -> None:
        pygame.draw.line(
            self.surface, color.rgba, (int(start.x), int(start.y)), (int(end.x), int(end.y))
        )

    def draw_circle(self, center: ScreenCoord, radius: float) -> None:
        """Half-transparent red disc with a one pixel red outline around it."""
        position = (int(center.x), int(center.y))
        size = round(radius)
        pygame.draw.circle(self.surface, CIRCLE_FILL.rgba, position, size)
        pygame.draw.circle(self.surface, RED.rgba, position, size + 1, width=1)

    def draw_grid(self, grid_size: int) -> None:
        """Black grid lines every grid_size pixels across the window."""
        if grid_size <= 0:
            raise ValueError("grid size must be positive")
        width, height = WINDOW_SIZE
        for row in range(height // grid_size + 1):
            self.draw_line(Vector(0, row * grid_size), Vector(width, row * grid_size))
        for column in range(width // grid_size + 1):
            self.draw_line(Vector(column * grid_size, 0), Vector(column * grid_size, height))

    def draw_rect(self, rect: Rect, outline_color: Color) -> None:
        """White rectangle with an outline."""
        self._draw_rectangle(rect, outline_color, WHITE)

    def draw_fill_rect(self, rect: Rect, outline_color: Color, fill_color: Color) -> None:
        self._draw_rectangle(rect, outline_color, fill_color)

    def _draw_rectangle(self, rect: Rect, outline_color: Color, fill_color: Color) -> None:
        area = pygame.Rect(round(rect.x), round(rect.y), round(rect.width), round(rect.height))
        area.normalize()
        if area.width and area.height:
            self.surface.fill(fill_color.rgba, area)
        pygame.draw.rect(
            self.surface,
            outline_color.rgba,
            area.inflate(2 * OUTLINE_THICKNESS, 2 * OUTLINE_THICKNESS),
            width=OUTLINE_THICKNESS,
        )