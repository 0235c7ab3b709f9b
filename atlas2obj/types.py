# atlas2obj/types.py
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

IntTuple = Tuple[int, ...]


@dataclass(frozen=True)
class AtlasSize:
    w: int
    h: int


@dataclass(frozen=True)
class AtlasMetadata:
    size: AtlasSize
    image: Optional[str] = None
    scale: Optional[str] = None


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    w: int
    h: int


@dataclass(frozen=True)
class SourceSize:
    w: int
    h: int


@dataclass(frozen=True)
class Pivot:
    x: float
    y: float


@dataclass
class FrameRecord:
    """TexturePacker 프레임 하나의 메타데이터 (vertices/verticesUV/triangles 는 별도 파싱)"""
    name: str
    frame: Rect
    rotated: bool
    trimmed: bool
    sprite_source_size: Rect
    source_size: SourceSize
    pivot: Pivot


@dataclass
class RawVertexArrays:
    vertices: List[IntTuple] = field(default_factory=list)
    uv: List[IntTuple] = field(default_factory=list)
    triangles: List[IntTuple] = field(default_factory=list)


@dataclass
class Mesh:
    name: str
    vertices: np.ndarray     # (N, 3)
    normals: np.ndarray      # (N, 3)
    uv: np.ndarray           # (N, 2)
    triangles: np.ndarray    # (3M,)
    colors: np.ndarray       # (N, 4)

    @property
    def triangle_count(self) -> int:
        return len(self.triangles) // 3


@dataclass(frozen=True)
class ObjDocument:
    name: str
    filename: str
    text: str
