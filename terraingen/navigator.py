"""Mouse-driven camera navigation: middle-button panning and scroll zooming."""

from __future__ import annotations

from enum import IntEnum

import numpy as np

from terraingen.camera import Camera

_ZOOM_SPEED = 5.0


class MouseButton(IntEnum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class ButtonAction(IntEnum):
    RELEASE = 0
    PRESS = 1
    REPEAT = 2


def _vec(v) -> tuple[float, float, float]:
    return (float(v[0]), float(v[1]), float(v[2]))


class ViewNavigator:
    """Moves a camera in response to mouse events."""

    def __init__(self) -> None:
        position = np.array([256.0, 150.0, 600.0])
        front = np.array([256.0, 0.0, 256.0]) - position
        self.camera = Camera(
            position=_vec(position),
            front=_vec(front / np.linalg.norm(front)),
            up=(0.0, 1.0, 0.0),
        )
        self.dragging = False
        self.last_x = 0.0
        self.last_y = 0.0
        self.pan_speed = 0.01

    def handle_mouse_button(self, button, action, cursor=None) -> None:
        """Start or stop a pan drag; cursor is the (x, y) pointer position at the event."""
        if button != MouseButton.MIDDLE:
            return
        if action == ButtonAction.PRESS:
            self.dragging = True
            if cursor is not None:
                self.last_x, self.last_y = float(cursor[0]), float(cursor[1])
        elif action == ButtonAction.RELEASE:
            self.dragging = False

    def handle_scroll(self, yoffset: float) -> None:
        """Move the camera along its viewing direction."""
        position = np.asarray(self.camera.position) + np.asarray(self.camera.front) * (
            float(yoffset) * _ZOOM_SPEED
        )
        self.camera.position = _vec(position)

    def handle_cursor(self, xpos: float, ypos: float) -> None:
        """Pan the camera while dragging."""
        if not self.dragging:
            return
        dx = float(xpos) - self.last_x
        dy = float(ypos) - self.last_y
        front = np.asarray(self.camera.front, dtype=np.float64)
        up = np.asarray(self.camera.up, dtype=np.float64)
        right = np.cross(front, up)
        right = right / np.linalg.norm(right)
        position = np.asarray(self.camera.position, dtype=np.float64)
        position = position - right * dx * self.pan_speed + up * dy * self.pan_speed
        self.camera.position = _vec(position)
        self.last_x = float(xpos)
        self.last_y = float(ypos)