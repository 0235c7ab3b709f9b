import numpy as np

from atlas2obj.processors.converters import ObjSerializer
from atlas2obj.processors.converters.obj_serializer import format_number
from atlas2obj.types import Mesh


def make_mesh(triangles=(0, 1, 2)) -> Mesh:
    return Mesh(
        name="leaf",
        vertices=np.array([[1.0, 2.0, 0.0], [0.5, -0.5, 0.0], [-0.25, 0.75, 0.0]]),
        normals=np.tile([0.0, 0.0, -1.0], (3, 1)),
        uv=np.array([[0.0, 1.0], [1.0, 0.0], [0.5, 0.5]]),
        triangles=np.array(triangles),
        colors=np.ones((3, 4)),
    )


def test_serialize_layout():
    text = ObjSerializer().serialize(make_mesh())

    assert text == (
        "g leaf\n"
        "v -1 2 0\n"
        "v -0.5 -0.5 0\n"
        "v 0.25 0.75 0\n"
        "\n"
        "vn -0 0 -1\n"
        "vn -0 0 -1\n"
        "vn -0 0 -1\n"
        "\n"
        "vt 0 1\n"
        "vt 1 0\n"
        "vt 0.5 0.5\n"
        "\n"
        "f 2/2/2 1/1/1 3/3/3\n"
    )


def test_face_permutation_is_second_first_third():
    mesh = make_mesh(triangles=(0, 1, 2, 2, 0, 1))
    faces = [line for line in ObjSerializer().serialize(mesh).splitlines() if line.startswith("f ")]
    assert faces == ["f 2/2/2 1/1/1 3/3/3", "f 1/1/1 3/3/3 2/2/2"]


def test_serialize_is_deterministic():
    mesh = make_mesh()
    serializer = ObjSerializer()
    assert serializer.serialize(mesh).encode() == serializer.serialize(mesh).encode()


def test_no_materials_or_smoothing_groups():
    text = ObjSerializer().serialize(make_mesh())
    assert "usemtl" not in text
    assert "mtllib" not in text
    assert "\ns " not in text


def test_format_number_shortest_single_precision():
    assert format_number(0.1) == "0.1"
    assert format_number(2.0) == "2"
    assert format_number(-0.5126953125) == "-0.5126953"
