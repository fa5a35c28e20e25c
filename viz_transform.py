import numpy as np
import pyrr

X_AXIS = np.array([1.0, 0.0, 0.0])
Y_AXIS = np.array([0.0, 1.0, 0.0])
Z_AXIS = np.array([0.0, 0.0, 1.0])
WORLD_UP = Y_AXIS


def axis_rotation(axis, angle):
    """Quaternion (x, y, z, w) for a right-handed rotation of `angle` radians about `axis`."""
    return pyrr.quaternion.create_from_axis_rotation(np.asarray(axis, dtype=np.float64), float(angle))


class Transform:
    """
    Position + orientation of an entity.

    Orientation is a pyrr-style quaternion (x, y, z, w). The local frame
    follows the usual GL camera convention: +X right, +Y up, -Z forward.
    """
    __slots__ = ("position", "orientation")

    def __init__(self, position=(0.0, 0.0, 0.0), orientation=None):
        self.position = np.array(position, dtype=np.float64)
        if orientation is None:
            self.orientation = pyrr.quaternion.create(dtype=np.float64)
        else:
            self.orientation = np.array(orientation, dtype=np.float64)

    @classmethod
    def from_xyz(cls, x, y, z):
        return cls(position=(x, y, z))

    def __repr__(self):
        return f"Transform(position={self.position.tolist()}, orientation={self.orientation.tolist()})"

    def copy(self):
        return Transform(self.position.copy(), self.orientation.copy())

    # ---------- local axes ----------

    def rotate_vector(self, vec):
        return pyrr.quaternion.apply_to_vector(self.orientation, np.asarray(vec, dtype=np.float64))

    def right(self):
        return self.rotate_vector(X_AXIS)

    def up(self):
        return self.rotate_vector(Y_AXIS)

    def forward(self):
        return self.rotate_vector(-Z_AXIS)

    # ---------- mutation ----------

    def look_at(self, target, up=WORLD_UP):
        """Turn so that -Z points at `target` and +X stays perpendicular to `up`."""
        target = np.asarray(target, dtype=np.float64)
        up = np.asarray(up, dtype=np.float64)

        back = self.position - target
        n = np.linalg.norm(back)
        back = back / n if n > 0.0 else Z_AXIS.copy()

        right = np.cross(up, back)
        n = np.linalg.norm(right)
        if n > 1e-9:
            right = right / n
        else:
            # forward parallel to up; any perpendicular axis will do
            helper = X_AXIS if abs(back[0]) < 0.9 else Y_AXIS
            right = np.cross(helper, back)
            right = right / np.linalg.norm(right)

        true_up = np.cross(back, right)
        # basis vectors as columns
        basis = np.column_stack((right, true_up, back))
        self.orientation = pyrr.quaternion.normalise(pyrr.quaternion.create_from_matrix(basis))
        return self

    def rotate_local(self, axis, angle):
        """Rotate about one of this transform's own axes (right-multiplied)."""
        self.orientation = pyrr.quaternion.cross(self.orientation, axis_rotation(axis, angle))

    def rotate_local_x(self, angle):
        self.rotate_local(X_AXIS, angle)

    def rotate_local_y(self, angle):
        self.rotate_local(Y_AXIS, angle)

    def rotate_local_z(self, angle):
        self.rotate_local(Z_AXIS, angle)

    # ---------- matrices ----------

    def model_matrix(self, dtype=np.float32):
        """4x4 model matrix in pyrr's row-vector layout (v @ M), ready for glUniformMatrix4fv."""
        m = np.identity(4, dtype=np.float64)
        m[0, :3] = self.right()
        m[1, :3] = self.up()
        m[2, :3] = -self.forward()
        m[3, :3] = self.position
        return m.astype(dtype, copy=False)

    def view_matrix(self, dtype=np.float32):
        eye = self.position
        return pyrr.matrix44.create_look_at(eye, eye + self.forward(), self.up(), dtype=dtype)
