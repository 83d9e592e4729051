"""
Pygame surface overlay composited over the ModernGL frame.

UI is drawn with pygame onto a transparent surface, uploaded into
a texture and drawn as a fullscreen quad after the world.
"""

from __future__ import annotations

import struct

import moderngl
import pygame


OVERLAY_VERTEX_SHADER = """
#version 330 core

in vec2 in_pos;
in vec2 in_uv;

out vec2 v_uv;

void main() {
    gl_Position = vec4(in_pos, 0.0, 1.0);
    v_uv = in_uv;
}
"""

OVERLAY_FRAGMENT_SHADER = """
#version 330 core

in vec2 v_uv;

out vec4 fragColor;

uniform sampler2D u_texture;

void main() {
    fragColor = texture(u_texture, v_uv);
}
"""


def create_fullscreen_quad(ctx: moderngl.Context, program: moderngl.Program) -> moderngl.VertexArray:
    """
    Create a fullscreen quad.

    Returns a VAO that renders a quad covering the entire screen.
    """
    vertices = struct.pack('24f',
        # pos      uv
        -1, -1,    0, 0,
         1, -1,    1, 0,
         1,  1,    1, 1,
        -1, -1,    0, 0,
         1,  1,    1, 1,
        -1,  1,    0, 1,
    )

    vbo = ctx.buffer(vertices)
    return ctx.vertex_array(program, [(vbo, '2f 2f', 'in_pos', 'in_uv')])


class SurfaceOverlay:
    """
    Transparent pygame surface drawn on top of the frame.

    Usage:
        overlay.clear()
        renderer.draw_text("3", 200, 20)   # renderer targets overlay.surface
        overlay.draw()
    """

    def __init__(self, ctx: moderngl.Context, width: int, height: int):
        self.ctx = ctx
        self.program = ctx.program(
            vertex_shader=OVERLAY_VERTEX_SHADER,
            fragment_shader=OVERLAY_FRAGMENT_SHADER,
        )
        self.vao = create_fullscreen_quad(ctx, self.program)
        self.surface: pygame.Surface
        self.texture: moderngl.Texture
        self._allocate(width, height)

    @property
    def size(self) -> tuple[int, int]:
        """Overlay size in pixels."""
        return self._size

    def _allocate(self, width: int, height: int) -> None:
        self._size = (width, height)
        self.surface = pygame.Surface((width, height), pygame.SRCALPHA)
        self.texture = self.ctx.texture((width, height), 4)
        self.texture.filter = (moderngl.NEAREST, moderngl.NEAREST)

    def resize(self, width: int, height: int) -> None:
        """Reallocate the surface and texture for a new window size."""
        if (width, height) == self._size:
            return
        self.texture.release()
        self._allocate(width, height)

    def clear(self) -> None:
        """Make the whole overlay transparent."""
        self.surface.fill((0, 0, 0, 0))

    def draw(self) -> None:
        """Upload the surface and draw it over the current frame."""
        # Flip rows: pygame is top-down, OpenGL textures are bottom-up
        data = pygame.image.tobytes(self.surface, "RGBA", True)
        self.texture.write(data)
        self.texture.use(0)
        self.program['u_texture'].value = 0
        self.vao.render(moderngl.TRIANGLES)
