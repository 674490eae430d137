"""Interactive state of the wireframe viewer and its keyboard handling."""

from __future__ import annotations

from enum import IntEnum

from wirefdf.geometry import Camera, ViewMode
from wirefdf.heightmap import HeightMap
from wirefdf.raster import Canvas, render

TRANSLATE = 5
ROTATION_STEP = 0.02


class Key(IntEnum):
    """Key codes understood by the viewer."""

    ESC = 65307
    MINUS = 45
    PLUS = 61
    MINUS_NUM = 65453
    PLUS_NUM = 65451
    UP = 65362
    DOWN = 65364
    LEFT = 65361
    RIGHT = 65363
    ONE = 49
    TWO = 50
    THREE = 51
    FOUR = 52
    A = 97
    D = 100
    W = 119
    S = 115
    Q = 113
    E = 101
    Z = 122
    X = 120


_VIEWS = {Key.TWO: ViewMode.TOP, Key.THREE: ViewMode.FRONT, Key.FOUR: ViewMode.SIDE}


class Viewer:
    """A height map, a camera and the canvas they are drawn on."""

    def __init__(
        self,
        hmap: HeightMap,
        camera: Camera | None = None,
        canvas: Canvas | None = None,
    ) -> None:
        self.hmap = hmap
        self.camera = camera if camera is not None else Camera()
        self.canvas = canvas if canvas is not None else Canvas()
        self.frames = 0

    def redraw(self) -> None:
        """Render the map onto the canvas."""
        render(self.canvas, self.camera, self.hmap)
        self.frames += 1

    def _done(self, handled: bool) -> bool:
        if handled:
            self.redraw()
        return handled

    def handle_move(self, keycode: int) -> bool:
        """Zoom or pan; return whether the key was used."""
        camera = self.camera
        handled = True
        if keycode in (Key.PLUS, Key.PLUS_NUM):
            camera.zoom += TRANSLATE
        elif keycode in (Key.MINUS, Key.MINUS_NUM):
            camera.zoom -= TRANSLATE
        elif keycode == Key.UP:
            camera.position_y -= TRANSLATE
        elif keycode == Key.DOWN:
            camera.position_y += TRANSLATE
        elif keycode == Key.LEFT:
            camera.position_x -= TRANSLATE
        elif keycode == Key.RIGHT:
            camera.position_x += TRANSLATE
        else:
            handled = False
        return self._done(handled)

    def handle_view(self, keycode: int) -> bool:
        """Switch projection; the isometric view also resets rotation."""
        camera = self.camera
        handled = True
        if keycode in _VIEWS:
            camera.mode = _VIEWS[Key(keycode)]
        elif keycode == Key.ONE:
            camera.mode = ViewMode.ISOMETRIC
            camera.alpha = camera.theta = camera.gamma = 0.0
        else:
            handled = False
        return self._done(handled)

    def handle_rotation(self, keycode: int) -> bool:
        """Turn the model about one of its axes."""
        camera = self.camera
        handled = True
        if keycode == Key.A:
            camera.gamma += ROTATION_STEP
        elif keycode == Key.D:
            camera.gamma -= ROTATION_STEP
        elif keycode == Key.W:
            camera.alpha += ROTATION_STEP
        elif keycode == Key.S:
            camera.alpha -= ROTATION_STEP
        elif keycode == Key.Q:
            camera.theta -= ROTATION_STEP
        elif keycode == Key.E:
            camera.theta += ROTATION_STEP
        else:
            handled = False
        return self._done(handled)

    def handle_transform(self, keycode: int) -> bool:
        """Raise (Z) or lower (X) every non-zero height."""
        step = (keycode == Key.Z) - (keycode == Key.X)
        if step:
            self.hmap.shift_heights(step)
        return self._done(bool(step))

    def handle_key(self, keycode: int) -> bool:
        """Dispatch one key press; return False when the viewer should close."""
        if keycode == Key.ESC:
            return False
        self.handle_move(keycode)
        self.handle_view(keycode)
        self.handle_rotation(keycode)
        self.handle_transform(keycode)
        return True