"""
Batched renderer for flat-colored rectangles.

Collects rectangles and renders them in a single draw call.
Coordinates are world units with the origin at the center of the
viewport and y pointing up.
"""

from __future__ import annotations

from dataclasses import dataclass
import struct

import moderngl
import numpy as np


SHAPE_VERTEX_SHADER = """
#version 330 core

in vec2 in_position;
in vec4 in_color;

out vec4 v_color;

uniform mat4 u_projection;

void main() {
    gl_Position = u_projection * vec4(in_position, 0.0, 1.0);
    v_color = in_color;
}
"""

SHAPE_FRAGMENT_SHADER = """
#version 330 core

in vec4 v_color;

out vec4 fragColor;

void main() {
    fragColor = v_color;
}
"""


@dataclass
class Rect:
    """
    Rectangle data for batching.

    x, y is the center of the rectangle.
    """
    x: float
    y: float
    width: float
    height: float
    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0


class ShapeBatch:
    """
    Batched rectangle renderer.

    Usage:
        batch.begin()
        batch.draw(Rect(0, 0, 20, 20))
        batch.draw_rect(-370, 0, 20, 120, (1, 1, 1, 1))
        batch.end()
    """

    MAX_SHAPES = 4096

    # Vertex format: position(2) + color(4) = 6 floats
    VERTEX_SIZE = 6
    FLOATS_PER_SHAPE = 6 * VERTEX_SIZE  # 6 vertices per shape (2 triangles)

    def __init__(
        self,
        ctx: moderngl.Context,
        width: float,
        height: float,
        max_shapes: int = MAX_SHAPES,
    ):
        self.ctx = ctx
        self.max_shapes = max_shapes

        self.program = ctx.program(
            vertex_shader=SHAPE_VERTEX_SHADER,
            fragment_shader=SHAPE_FRAGMENT_SHADER,
        )

        buffer_size = max_shapes * self.FLOATS_PER_SHAPE * 4  # 4 bytes per float
        self.vbo = ctx.buffer(reserve=buffer_size, dynamic=True)

        self.vao = ctx.vertex_array(
            self.program,
            [(self.vbo, '2f 4f', 'in_position', 'in_color')],
        )

        self._vertices: list[float] = []
        self._shape_count = 0
        self._drawing = False

        self._projection = self._ortho_matrix(width, height)

    @property
    def shape_count(self) -> int:
        """Shapes queued since the last flush."""
        return self._shape_count

    def set_projection(self, width: float, height: float) -> None:
        """Set the visible area, centered on the origin."""
        self._projection = self._ortho_matrix(width, height)

    def begin(self) -> None:
        """Begin a new batch."""
        if self._drawing:
            raise RuntimeError("ShapeBatch.begin() called while already drawing")

        self._drawing = True
        self._vertices.clear()
        self._shape_count = 0

    def end(self) -> None:
        """End the batch and render all shapes."""
        if not self._drawing:
            raise RuntimeError("ShapeBatch.end() called without begin()")

        self._flush()
        self._drawing = False

    def draw(self, rect: Rect) -> None:
        """Queue a rectangle."""
        if not self._drawing:
            raise RuntimeError("ShapeBatch.draw() called without begin()")

        if self._shape_count >= self.max_shapes:
            self._flush()

        self._add_rect_vertices(rect)
        self._shape_count += 1

    def draw_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0),
    ) -> None:
        """Queue a rectangle centered on (x, y)."""
        self.draw(Rect(x, y, width, height, *color))

    def _add_rect_vertices(self, rect: Rect) -> None:
        """Generate vertices for a rectangle."""
        half_w = rect.width / 2
        half_h = rect.height / 2

        left, right = rect.x - half_w, rect.x + half_w
        bottom, top = rect.y - half_h, rect.y + half_h
        r, g, b, a = rect.r, rect.g, rect.b, rect.a

        # Triangle 1: bottom-left, bottom-right, top-right
        self._vertices.extend([
            left, bottom, r, g, b, a,
            right, bottom, r, g, b, a,
            right, top, r, g, b, a,
        ])
        # Triangle 2: bottom-left, top-right, top-left
        self._vertices.extend([
            left, bottom, r, g, b, a,
            right, top, r, g, b, a,
            left, top, r, g, b, a,
        ])

    def _flush(self) -> None:
        """Flush the current batch to GPU."""
        if self._shape_count == 0:
            return

        data = struct.pack(f'{len(self._vertices)}f', *self._vertices)
        self.vbo.write(data)

        self.program['u_projection'].write(self._projection.tobytes())
        self.vao.render(moderngl.TRIANGLES, vertices=self._shape_count * 6)

        self._vertices.clear()
        self._shape_count = 0

    @staticmethod
    def _ortho_matrix(width: float, height: float) -> np.ndarray:
        """Create a center-origin, y-up orthographic projection matrix."""
        left, right = -width / 2, width / 2
        bottom, top = -height / 2, height / 2
        near, far = -1, 1

        matrix = np.array([
            [2 / (right - left), 0, 0, -(right + left) / (right - left)],
            [0, 2 / (top - bottom), 0, -(top + bottom) / (top - bottom)],
            [0, 0, -2 / (far - near), -(far + near) / (far - near)],
            [0, 0, 0, 1],
        ], dtype='f4')

        # GLSL expects column-major data
        return np.ascontiguousarray(matrix.T)
