# atlas2obj/processors/converters/atlas_converter.py
from pathlib import Path
from typing import List, Sequence
from atlas2obj.config import Config
from atlas2obj.types import Mesh, ObjDocument
from atlas2obj.utils import Log, TextFileHandler, log_lifecycle
from .atlas_scanner import AtlasTextScanner
from .geometry_builder import GeometryBuilder
from .obj_serializer import ObjSerializer


class AtlasConverter:
    """
    export 한 개 → shape 별 OBJ 문서.
    중간에 하나라도 실패하면 예외를 그대로 전파합니다 (부분 결과 없음).
    """

    def __init__(self, pixels_per_unit: float = Config.PIXELS_PER_UNIT,
                 validate_indices: bool = True, header_lines: int = Config.HEADER_LINES):
        self.scanner = AtlasTextScanner(header_lines=header_lines)
        self.builder = GeometryBuilder(pixels_per_unit=pixels_per_unit, validate_indices=validate_indices)
        self.serializer = ObjSerializer()

    @log_lifecycle
    def create_meshes(self, lines: Sequence[str]) -> List[Mesh]:
        # size 가 없으면 UV 계산이 불가능하므로 shape 파싱 전에 확인
        metadata = self.scanner.find_metadata(lines)
        Log.info(f"Atlas size: {metadata.size.w}x{metadata.size.h}"
                 + (f" ({metadata.image})" if metadata.image else ""))

        meshes = []
        for frame, raw in self.scanner.parse_shapes(lines):
            meshes.append(self.builder.build(
                frame.name, frame, raw.vertices, raw.uv, raw.triangles, metadata.size))
        return meshes

    def create_objs(self, meshes: Sequence[Mesh]) -> List[str]:
        return [self.serializer.serialize(mesh) for mesh in meshes]

    def convert(self, lines: Sequence[str]) -> List[ObjDocument]:
        meshes = self.create_meshes(lines)
        return [
            ObjDocument(name=mesh.name, filename=f"{mesh.name}{Config.OBJ_EXTENSION}", text=text)
            for mesh, text in zip(meshes, self.create_objs(meshes))
        ]

    def convert_file(self, filepath: Path) -> List[ObjDocument]:
        return self.convert(TextFileHandler.read_lines(filepath))
