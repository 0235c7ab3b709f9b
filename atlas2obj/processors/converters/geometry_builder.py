# atlas2obj/processors/converters/geometry_builder.py
from typing import Sequence
import numpy as np
from atlas2obj.config import Config
from atlas2obj.errors import MalformedArrayError, TriangleIndexError
from atlas2obj.types import AtlasSize, FrameRecord, IntTuple, Mesh

BACK_NORMAL = (0.0, 0.0, -1.0)
WHITE = (1.0, 1.0, 1.0, 1.0)


class GeometryBuilder:
    """
    FrameRecord + 원시 정수 배열 → 메쉬 (위치/UV/삼각형/법선/색상).

    좌표계:
    - 이미지 픽셀 좌표 (원점 좌상단, y 아래로 증가)
    - 메쉬 좌표 (원점 = pivot, y 위로 증가, 단위 = pixels / pixels_per_unit)
    - UV (원점 좌하단)
    """

    def __init__(self, pixels_per_unit: float = Config.PIXELS_PER_UNIT, validate_indices: bool = True):
        if pixels_per_unit <= 0:
            raise ValueError(f"pixels_per_unit must be positive, got {pixels_per_unit}")
        self.pixels_per_unit = float(pixels_per_unit)
        self.validate_indices = validate_indices

    def build(self, name: str, frame: FrameRecord,
              raw_vertices: Sequence[IntTuple], raw_uv: Sequence[IntTuple],
              raw_triangles: Sequence[IntTuple], atlas_size: AtlasSize) -> Mesh:
        vertices = self._positions(name, frame, raw_vertices)
        uv = self._uvs(name, raw_uv, atlas_size)
        if len(uv) != len(vertices):
            raise MalformedArrayError(
                f"Shape '{name}': {len(vertices)} vertices but {len(uv)} UV coordinates")

        triangles = self._triangles(name, raw_triangles, len(vertices))
        n = len(vertices)

        return Mesh(
            name=name,
            vertices=vertices,
            normals=np.tile(np.array(BACK_NORMAL), (n, 1)),
            uv=uv,
            triangles=triangles,
            colors=np.tile(np.array(WHITE), (n, 1)),
        )

    def _positions(self, name: str, frame: FrameRecord, raw: Sequence[IntTuple]) -> np.ndarray:
        pts = self._as_pairs(name, "vertices", raw)

        # 1. pivot 기준으로 원점 이동
        pivot_offset = np.array([frame.pivot.x * frame.source_size.w,
                                 frame.pivot.y * frame.source_size.h])
        centered = (pts - pivot_offset) / self.pixels_per_unit

        # 2. y 반전 (이미지 y 는 아래 방향)
        positions = np.zeros((len(pts), 3))
        positions[:, 0] = centered[:, 0]
        positions[:, 1] = -centered[:, 1]
        return positions

    def _uvs(self, name: str, raw: Sequence[IntTuple], atlas_size: AtlasSize) -> np.ndarray:
        pts = self._as_pairs(name, "verticesUV", raw)
        uv = np.empty_like(pts)
        uv[:, 0] = pts[:, 0] / atlas_size.w
        uv[:, 1] = 1.0 - pts[:, 1] / atlas_size.h
        return uv

    def _triangles(self, name: str, raw: Sequence[IntTuple], vertex_count: int) -> np.ndarray:
        flat = np.array([index for tri in raw for index in tri], dtype=np.int64)
        if not self.validate_indices:
            return flat

        for i, tri in enumerate(raw):
            if len(tri) != 3:
                raise TriangleIndexError(f"Shape '{name}': triangle {i} has {len(tri)} indices {tri}")

        bad = (flat < 0) | (flat >= vertex_count)
        if bad.any():
            first = int(np.argmax(bad))
            raise TriangleIndexError(
                f"Shape '{name}': triangle {first // 3} references vertex {int(flat[first])}, "
                f"but the shape has {vertex_count} vertices")
        return flat

    @staticmethod
    def _as_pairs(name: str, field: str, raw: Sequence[IntTuple]) -> np.ndarray:
        for i, pair in enumerate(raw):
            if len(pair) != 2:
                raise MalformedArrayError(f"Shape '{name}': {field}[{i}] is not an (x, y) pair: {pair}")
        return np.array(raw, dtype=np.float64).reshape(len(raw), 2)
