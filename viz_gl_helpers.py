import ctypes
import numpy as np
import OpenGL.GL as gl
from OpenGL.GL.shaders import compileProgram, compileShader

from viz_shaders import LINES_VERT, LINES_FRAG


def _create_lines_program():
    return compileProgram(compileShader(LINES_VERT, gl.GL_VERTEX_SHADER), compileShader(LINES_FRAG, gl.GL_FRAGMENT_SHADER))


def _setup_lines(verts):
    """Upload an (N,6) position+colour array once; returns (vao, vbo, vertex count)."""
    verts = np.ascontiguousarray(verts, dtype=np.float32)
    if verts.ndim != 2 or verts.shape[1] != 6:
        raise RuntimeError("line vertices must be shaped (N,6)")

    float_size = np.float32().nbytes
    stride = 6 * float_size

    vao = gl.glGenVertexArrays(1)
    gl.glBindVertexArray(vao)

    vbo = gl.glGenBuffers(1)
    gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vbo)
    gl.glBufferData(gl.GL_ARRAY_BUFFER, verts.nbytes, verts, gl.GL_STATIC_DRAW)

    gl.glEnableVertexAttribArray(0)
    gl.glVertexAttribPointer(0, 3, gl.GL_FLOAT, gl.GL_FALSE, stride, ctypes.c_void_p(0))

    gl.glEnableVertexAttribArray(1)
    gl.glVertexAttribPointer(1, 3, gl.GL_FLOAT, gl.GL_FALSE, stride, ctypes.c_void_p(3 * float_size))

    gl.glBindVertexArray(0)
    gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)

    return vao, vbo, verts.shape[0]


def _draw_lines(loc_mvp, loc_alpha, mvp, vao, count, alpha=1.0):
    gl.glUniformMatrix4fv(loc_mvp, 1, gl.GL_FALSE, mvp.astype(np.float32, copy=False))
    gl.glUniform1f(loc_alpha, float(alpha))
    gl.glBindVertexArray(vao)
    gl.glDrawArrays(gl.GL_LINES, 0, count)
    gl.glBindVertexArray(0)
