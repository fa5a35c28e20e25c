"""glfw/OpenGL host: samples input, runs the camera and spin systems, draws the scene as lines."""
import logging

import glfw
import OpenGL.GL as gl

from CameraCon import update_orbit_cameras, update_zoom
from viz_config import ControlConfig
from viz_geometry import axes_vertices, cube_vertices, grid_vertices
from viz_gl_helpers import _create_lines_program, _draw_lines, _setup_lines
from viz_input import InputAccumulator
from viz_spin import update_spin
from viz_world import PLANE_COLOR

logger = logging.getLogger(__name__)

PLANE_ALPHA = 0.2


def run_viewer(world, config=None, width=1200, height=800, title="Orbit viewer (RMB orbit, MMB pan, wheel zoom)"):
    if config is None:
        config = ControlConfig()

    if not glfw.init():
        raise RuntimeError("Failed to init GLFW")

    try:
        glfw.window_hint(glfw.CONTEXT_VERSION_MAJOR, 3)
        glfw.window_hint(glfw.CONTEXT_VERSION_MINOR, 3)
        glfw.window_hint(glfw.OPENGL_PROFILE, glfw.OPENGL_CORE_PROFILE)
        glfw.window_hint(glfw.OPENGL_FORWARD_COMPAT, glfw.TRUE)

        window = glfw.create_window(width, height, title, None, None)
        if not window:
            raise RuntimeError("Failed to create window")

        glfw.make_context_current(window)
        glfw.swap_interval(1)

        _run_loop(window, world, config)
    finally:
        glfw.terminate()


def _run_loop(window, world, config):
    inputs = InputAccumulator()
    paused = False

    def on_mouse_button(win, button, action, mods):
        if action == glfw.PRESS:
            inputs.handle_button(button, True)
        elif action == glfw.RELEASE:
            inputs.handle_button(button, False)

    def on_cursor_pos(win, xpos, ypos):
        inputs.handle_cursor(xpos, ypos)

    def on_cursor_enter(win, entered):
        if not entered:
            inputs.reset_cursor()

    def on_scroll(win, xoff, yoff):
        inputs.handle_scroll(yoff)

    def on_key(win, key, scancode, action, mods):
        nonlocal paused
        if action != glfw.PRESS:
            return
        if key == glfw.KEY_ESCAPE:
            glfw.set_window_should_close(win, True)
        elif key == glfw.KEY_SPACE:
            paused = not paused
            logger.info("spin %s", "paused" if paused else "resumed")

    glfw.set_mouse_button_callback(window, on_mouse_button)
    glfw.set_cursor_pos_callback(window, on_cursor_pos)
    glfw.set_cursor_enter_callback(window, on_cursor_enter)
    glfw.set_scroll_callback(window, on_scroll)
    glfw.set_key_callback(window, on_key)

    prog = _create_lines_program()
    gl.glUseProgram(prog)
    loc_mvp = gl.glGetUniformLocation(prog, "uMVP")
    loc_alpha = gl.glGetUniformLocation(prog, "uAlpha")

    axes_vao, _, axes_count = _setup_lines(axes_vertices())
    grid_vao, _, grid_count = _setup_lines(grid_vertices(color=PLANE_COLOR))
    cube_buffers = {}
    for ent_id, ent in world.rotatables():
        cube_buffers[ent_id] = _setup_lines(cube_vertices(color=ent.color))

    gl.glEnable(gl.GL_DEPTH_TEST)
    gl.glEnable(gl.GL_BLEND)
    gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)

    last_time = glfw.get_time()

    while not glfw.window_should_close(window):
        glfw.poll_events()

        now = glfw.get_time()
        elapsed = max(0.0, now - last_time)
        last_time = now

        frame = inputs.snapshot(elapsed)
        cameras = world.orbit_cameras()
        update_orbit_cameras(frame, cameras, config)
        update_zoom(frame, cameras, config)
        update_spin(0.0 if paused else frame.elapsed_seconds, world.rotatables())

        w, h = glfw.get_framebuffer_size(window)
        gl.glViewport(0, 0, w, h)
        gl.glClearColor(0.02, 0.02, 0.04, 1.0)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)

        cam = world.active_camera()
        if cam is not None:
            aspect = w / max(1, h)
            # pyrr matrices are row-vector (v @ M), so the chain reads model -> view -> projection
            vp = cam.transform.view_matrix() @ cam.projection.matrix(aspect)

            _draw_lines(loc_mvp, loc_alpha, vp, axes_vao, axes_count)

            for ent_id, ent in world.rotatables():
                if ent_id not in cube_buffers:
                    cube_buffers[ent_id] = _setup_lines(cube_vertices(color=ent.color))
                vao, _, count = cube_buffers[ent_id]
                _draw_lines(loc_mvp, loc_alpha, ent.transform.model_matrix() @ vp, vao, count)

            gl.glDepthMask(gl.GL_FALSE)
            _draw_lines(loc_mvp, loc_alpha, vp, grid_vao, grid_count, alpha=PLANE_ALPHA)
            gl.glDepthMask(gl.GL_TRUE)

        glfw.swap_buffers(window)
