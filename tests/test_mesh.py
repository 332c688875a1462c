import pytest

from glscene.geometry import Vector3
from glscene.mesh import Mesh, build_textured_cube


def test_cube_has_twelve_triangles():
    cube = build_textured_cube(2.0)
    assert cube.face_count() == 12
    assert len(cube.vertices) == 8


def test_cube_counts_match_source_layout():
    cube = build_textured_cube()
    assert len(cube.normals) == 6
    assert len(cube.uvs) == 14


@pytest.mark.parametrize("size", [1.0, 2.0, 5.5])
def test_cube_vertices_span_size(size):
    cube = build_textured_cube(size)
    xs = {v.x for v in cube.vertices}
    ys = {v.y for v in cube.vertices}
    zs = {v.z for v in cube.vertices}
    assert xs == {-size / 2.0, size / 2.0}
    assert ys == {0.0, size}
    assert zs == {-size / 2.0, size / 2.0}


def test_front_face_uses_front_normal():
    cube = build_textured_cube()
    first_normal = cube.normals[cube.normal_faces[0][0]]
    assert first_normal == Vector3(0.0, 0.0, 1.0)


def test_normals_are_unit_length():
    cube = build_textured_cube()
    for normal in cube.normals:
        assert normal.length() == pytest.approx(1.0)


def test_each_triangle_lies_on_its_face_plane():
    cube = build_textured_cube(2.0)
    for face, normal_face in zip(cube.faces, cube.normal_faces):
        normal = cube.normals[normal_face[0]]
        heights = {round(cube.vertices[i].dot(normal), 9) for i in face}
        assert len(heights) == 1


def test_uvs_within_unit_square():
    cube = build_textured_cube()
    for u, v in cube.uvs:
        assert 0.0 <= u <= 1.0
        assert 0.0 <= v <= 1.0


def test_every_face_has_parallel_indices():
    cube = build_textured_cube()
    assert len(cube.faces) == len(cube.normal_faces) == len(cube.uv_faces)
    used = {i for face in cube.faces for i in face}
    assert used == set(range(8))


def test_mesh_rejects_out_of_range_vertex_index():
    with pytest.raises(ValueError):
        Mesh(
            vertices=(Vector3(), Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0)),
            normals=(Vector3(0.0, 0.0, 1.0),),
            uvs=((0.0, 0.0),),
            faces=((0, 1, 3),),
            normal_faces=((0, 0, 0),),
            uv_faces=((0, 0, 0),),
        )


def test_mesh_rejects_mismatched_index_lists():
    with pytest.raises(ValueError):
        Mesh(
            vertices=(Vector3(), Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0)),
            normals=(Vector3(0.0, 0.0, 1.0),),
            uvs=((0.0, 0.0),),
            faces=((0, 1, 2),),
            normal_faces=(),
            uv_faces=((0, 0, 0),),
        )


def test_mesh_rejects_short_triangle():
    with pytest.raises(ValueError):
        Mesh(
            vertices=(Vector3(), Vector3(1.0, 0.0, 0.0)),
            normals=(Vector3(0.0, 0.0, 1.0),),
            uvs=((0.0, 0.0),),
            faces=((0, 1),),
            normal_faces=((0, 0, 0),),
            uv_faces=((0, 0, 0),),
        )


def test_custom_mesh_face_count():
    mesh = Mesh(
        vertices=[Vector3(), Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0)],
        normals=[Vector3(0.0, 0.0, 1.0)],
        uvs=[(0.0, 0.0)],
        faces=[[0, 1, 2]],
        normal_faces=[[0, 0, 0]],
        uv_faces=[[0, 0, 0]],
    )
    assert mesh.face_count() == 1
    assert mesh.faces == ((0, 1, 2),)