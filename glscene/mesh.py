"""Indexed triangle meshes and a textured cube built from one."""

from __future__ import annotations

from dataclasses import dataclass

from glscene.geometry import Vector3

Triangle = tuple[int, int, int]


def _check_faces(name: str, faces: tuple[Triangle, ...], limit: int) -> None:
    for number, face in enumerate(faces):
        if len(face) != 3:
            raise ValueError(f"{name}[{number}] must hold 3 indices, got {len(face)}")
        for index in face:
            if not 0 <= index < limit:
                raise ValueError(
                    f"{name}[{number}] refers to index {index}, outside 0..{limit - 1}"
                )


@dataclass(frozen=True)
class Mesh:
    """Vertices, normals and texture coordinates with per-triangle indices.

    Each triangle has three vertex indices, three normal indices and three
    UV indices; the three index lists run in parallel.
    """

    vertices: tuple[Vector3, ...]
    normals: tuple[Vector3, ...]
    uvs: tuple[tuple[float, float], ...]
    faces: tuple[Triangle, ...]
    normal_faces: tuple[Triangle, ...]
    uv_faces: tuple[Triangle, ...]

    def __post_init__(self) -> None:
        for name in ("vertices", "normals", "uvs", "faces", "normal_faces", "uv_faces"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        object.__setattr__(self, "faces", tuple(tuple(f) for f in self.faces))
        object.__setattr__(self, "normal_faces", tuple(tuple(f) for f in self.normal_faces))
        object.__setattr__(self, "uv_faces", tuple(tuple(f) for f in self.uv_faces))

        if len(self.normal_faces) != len(self.faces):
            raise ValueError("normal_faces must have one entry per face")
        if len(self.uv_faces) != len(self.faces):
            raise ValueError("uv_faces must have one entry per face")
        _check_faces("faces", self.faces, len(self.vertices))
        _check_faces("normal_faces", self.normal_faces, len(self.normals))
        _check_faces("uv_faces", self.uv_faces, len(self.uvs))

    def face_count(self) -> int:
        """Return the number of triangles."""
        return len(self.faces)


_CUBE_FACES: tuple[Triangle, ...] = (
    (0, 2, 1), (1, 2, 3),  # front
    (1, 3, 5), (5, 3, 7),  # right
    (4, 6, 0), (0, 6, 2),  # left
    (4, 0, 5), (5, 0, 1),  # top
    (2, 6, 3), (3, 6, 7),  # bottom
    (5, 7, 4), (4, 7, 6),  # back
)

_CUBE_NORMALS = (
    Vector3(0.0, 0.0, 1.0),   # front
    Vector3(1.0, 0.0, 0.0),   # right
    Vector3(-1.0, 0.0, 0.0),  # left
    Vector3(0.0, 1.0, 0.0),   # top
    Vector3(0.0, -1.0, 0.0),  # bottom
    Vector3(0.0, 0.0, -1.0),  # back
)

_CUBE_UVS = (
    (0.25, 0.33), (0.50, 0.33), (0.25, 0.66), (0.50, 0.66),
    (0.25, 0.00), (0.50, 0.00), (0.25, 0.66), (0.50, 0.66),
    # Duplicated in UV space so the side and back faces map correctly.
    (0.00, 0.33), (0.00, 0.66), (0.75, 0.33), (0.75, 0.66),
    (1.00, 0.33), (1.00, 0.66),
)

_CUBE_UV_FACES: tuple[Triangle, ...] = (
    (0, 2, 1), (1, 2, 3),       # front
    (1, 3, 10), (10, 3, 11),    # right
    (8, 9, 0), (0, 9, 2),       # left
    (4, 0, 5), (5, 0, 1),       # top
    (2, 6, 3), (3, 6, 7),       # bottom
    (10, 11, 12), (12, 11, 13), # back
)


def build_textured_cube(cube_size: float = 2.0) -> Mesh:
    """Build a cube resting on y = 0, centred on the Y axis, with cross-layout UVs."""
    half = cube_size / 2.0
    vertices = (
        Vector3(-half, cube_size, half),   # front top left
        Vector3(half, cube_size, half),    # front top right
        Vector3(-half, 0.0, half),         # front bottom left
        Vector3(half, 0.0, half),          # front bottom right
        Vector3(-half, cube_size, -half),  # back top left
        Vector3(half, cube_size, -half),   # back top right
        Vector3(-half, 0.0, -half),        # back bottom left
        Vector3(half, 0.0, -half),         # back bottom right
    )
    normal_faces = tuple((side, side, side) for side in range(6) for _ in range(2))
    return Mesh(
        vertices=vertices,
        normals=_CUBE_NORMALS,
        uvs=_CUBE_UVS,
        faces=_CUBE_FACES,
        normal_faces=normal_faces,
        uv_faces=_CUBE_UV_FACES,
    )