"""Mapping between screen pixels and points of the complex plane."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Vec2i:
    """Integer 2-D vector, used for screen sizes and pixel positions."""

    x: int = 0
    y: int = 0


@dataclass
class Vec2d:
    """Floating-point 2-D vector."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Plane:
    """A view onto the complex plane.

    ``screen`` is the size of the view in pixels, ``offset`` shifts the plane,
    ``scale`` is pixels per unit at zoom 1, and ``zoom`` multiplies the scale.
    The screen's y axis points down, the plane's points up.
    """

    screen: Vec2i = field(default_factory=Vec2i)
    offset: Vec2d = field(default_factory=Vec2d)
    scale: float = 1.0
    zoom: float = 1.0

    def to_screen(self, x: float, y: float) -> Vec2d:
        """Return the screen position of the plane point ``(x, y)``."""
        factor = self.scale * self.zoom
        return Vec2d(
            (x + self.offset.x) * factor,
            -((y + self.offset.y) * factor),
        )

    def from_screen_no_offset(self, x: float, y: float) -> Vec2d:
        """Convert a screen distance to a plane distance, ignoring the offset."""
        return Vec2d(
            x / self.scale / self.zoom,
            -y / self.scale / self.zoom,
        )

    def from_screen(self, x: float, y: float) -> Vec2d:
        """Return the plane point under the screen position ``(x, y)``."""
        return Vec2d(
            (x / self.scale / self.zoom) - self.offset.x,
            -(y / self.scale / self.zoom) - self.offset.y,
        )

    def zoom_around(self, mouse_x: float, mouse_y: float, dz: float) -> None:
        """Change the zoom by ``dz`` keeping the point under the mouse fixed.

        Mouse coordinates are whole pixels; fractional parts are dropped.
        """
        mx, my = int(mouse_x), int(mouse_y)
        before = self.from_screen_no_offset(mx, my)
        self.zoom += dz
        after = self.from_screen_no_offset(mx, my)
        self.offset.x += after.x - before.x
        self.offset.y += after.y - before.y