"""Line-list vertex data for the demo scene. Each vertex row is x, y, z, r, g, b."""
import numpy as np

AXIS_EXTENT = 3000.0


def axes_vertices(extent=AXIS_EXTENT):
    e = float(extent)
    return np.array([
        [-e, 0.0, 0.0, 1.0, 0.0, 0.0],
        [ e, 0.0, 0.0, 1.0, 0.0, 0.0],
        [0.0, -e, 0.0, 0.0, 1.0, 0.0],
        [0.0,  e, 0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, -e, 0.0, 0.0, 1.0],
        [0.0, 0.0,  e, 0.0, 0.0, 1.0],
    ], dtype=np.float32)


def grid_vertices(size=50.0, subdivisions=10, color=(0.0, 0.6, 0.77)):
    """Ground grid on y = 0; `subdivisions` interior cuts per side, like a subdivided plane mesh."""
    half = 0.5 * float(size)
    ticks = np.linspace(-half, half, subdivisions + 2)
    rows = []
    for t in ticks:
        rows.append([t, 0.0, -half, *color])
        rows.append([t, 0.0,  half, *color])
        rows.append([-half, 0.0, t, *color])
        rows.append([ half, 0.0, t, *color])
    return np.array(rows, dtype=np.float32)


def cube_vertices(size=1.0, color=(1.0, 1.0, 1.0)):
    h = 0.5 * float(size)
    corners = np.array([[x, y, z] for x in (-h, h) for y in (-h, h) for z in (-h, h)])
    rows = []
    # edges join corners that differ in exactly one coordinate
    for i in range(8):
        for j in range(i + 1, 8):
            if np.count_nonzero(corners[i] != corners[j]) == 1:
                rows.append([*corners[i], *color])
                rows.append([*corners[j], *color])
    return np.array(rows, dtype=np.float32)
