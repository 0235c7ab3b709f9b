# atlas2obj/processors/converters/obj_serializer.py
from typing import List
import numpy as np
from atlas2obj.types import Mesh


def format_number(value: float) -> str:
    """단정밀도 최단 표기 (0 → '0', -0.0 → '-0', 0.5 → '0.5')"""
    return np.format_float_positional(np.float32(value), unique=True, trim='-')


class ObjSerializer:
    """
    Mesh → Wavefront OBJ 텍스트.
    OBJ 좌표계는 x 축이 반대이므로 위치/법선의 x 를 반전하고,
    면은 (두 번째, 첫 번째, 세 번째) 순서로 기록합니다.
    """

    def serialize(self, mesh: Mesh) -> str:
        lines: List[str] = [f"g {mesh.name}"]

        for x, y, z in mesh.vertices:
            lines.append(f"v {format_number(-x)} {format_number(y)} {format_number(z)}")
        lines.append("")

        for x, y, z in mesh.normals:
            lines.append(f"vn {format_number(-x)} {format_number(y)} {format_number(z)}")
        lines.append("")

        for u, v in mesh.uv:
            lines.append(f"vt {format_number(u)} {format_number(v)}")
        lines.append("")

        tris = mesh.triangles
        for i in range(0, len(tris) - len(tris) % 3, 3):
            a, b, c = int(tris[i]) + 1, int(tris[i + 1]) + 1, int(tris[i + 2]) + 1
            lines.append(f"f {b}/{b}/{b} {a}/{a}/{a} {c}/{c}/{c}")

        return "\n".join(lines) + "\n"
