# atlas2obj/processors/converters/atlas_scanner.py
import json
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple
from atlas2obj.config import Config
from atlas2obj.errors import MalformedArrayError, MissingMetadataError, StructuralDecodeError
from atlas2obj.types import AtlasMetadata, AtlasSize, FrameRecord, RawVertexArrays
from atlas2obj.utils import JsonHandler, Log
from .array_parser import ArrayLiteralParser
from .record_decoder import ShapeRecordDecoder


@dataclass
class ShapeScanContext:
    """shape 하나를 읽는 동안만 존재하는 버퍼"""
    label: str
    structural_lines: List[str] = field(default_factory=list)
    array_lines: Dict[str, str] = field(default_factory=dict)


class AtlasTextScanner:
    """
    TexturePacker json export 를 줄 단위로 읽어 shape 별 (FrameRecord, RawVertexArrays) 로 분리합니다.

    - "<name>.png": 로 끝나는 줄에서 shape 시작
    - vertices / verticesUV / triangles 줄은 별도 버퍼로 분리 (ArrayLiteralParser)
    - 나머지 줄은 JSON 으로 재조립하여 ShapeRecordDecoder 로 전달
    - "}," 또는 "}}," 줄에서 shape 종료
    """

    META_OPEN = '"meta": {'
    CLOSING_TOKENS = ("},", "}},")
    IMAGE_EXTENSION = re.compile(r"\.(png|jpe?g|bmp|tga|gif|webp)$", re.IGNORECASE)

    def __init__(self, header_lines: int = Config.HEADER_LINES):
        self.header_lines = header_lines
        self.decoder = ShapeRecordDecoder()

    # ------------------------------------------------------------------
    # meta
    # ------------------------------------------------------------------
    def read_metadata(self, lines: Sequence[str], label: str) -> Optional[str]:
        """마지막 meta 블록에서 label 항목의 원문 값을 반환 (없으면 None)"""
        meta_line = -1
        for i in range(len(lines) - 1, -1, -1):
            if lines[i].strip() == self.META_OPEN:
                meta_line = i
                break

        if meta_line < 0:
            return None

        label_start = f'"{label}": '
        for line in lines[meta_line + 1:]:
            stripped = line.strip()
            if stripped.startswith(label_start):
                value = stripped[len(label_start):]
                return value[:-1] if value.endswith(",") else value
        return None

    def find_size(self, lines: Sequence[str]) -> AtlasSize:
        raw = self.read_metadata(lines, "size")
        if not raw:
            raise MissingMetadataError("Atlas export has no meta 'size' entry")

        try:
            data = JsonHandler.loads(raw)
            size = AtlasSize(w=int(data["w"]), h=int(data["h"]))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            raise MissingMetadataError(f"Unreadable meta 'size' entry {raw!r}: {e}") from e

        if size.w <= 0 or size.h <= 0:
            raise MissingMetadataError(f"Atlas size must be positive, got {size.w}x{size.h}")
        return size

    def find_metadata(self, lines: Sequence[str]) -> AtlasMetadata:
        image = self.read_metadata(lines, "image")
        scale = self.read_metadata(lines, "scale")
        return AtlasMetadata(
            size=self.find_size(lines),
            image=image.strip('"') if image else None,
            scale=scale.strip('"') if scale else None,
        )

    # ------------------------------------------------------------------
    # shapes
    # ------------------------------------------------------------------
    def parse_shapes(self, lines: Sequence[str]) -> List[Tuple[FrameRecord, RawVertexArrays]]:
        shapes = []
        used_names = set()
        context: Optional[ShapeScanContext] = None

        for line in lines[self.header_lines:]:
            if line.rstrip().endswith(":"):
                if context is not None:
                    raise StructuralDecodeError(f"Shape '{context.label}' is not closed before {line.strip()!r}")
                label = self._unique_name(used_names, self.clean_label(line))
                used_names.add(label)
                context = ShapeScanContext(label=label)
                continue

            if context is None:
                continue

            if line.strip() in self.CLOSING_TOKENS:
                shapes.append(self._finish_shape(context))
                context = None
                continue

            field_name = self._array_field(line)
            if field_name:
                context.array_lines[field_name] = line
            else:
                context.structural_lines.append(line)

        if context is not None:
            raise StructuralDecodeError(f"Shape '{context.label}' is not closed before end of file")
        return shapes

    def clean_label(self, line: str) -> str:
        label = line.strip()
        if label.endswith(":"):
            label = label[:-1]
        label = label.strip().strip('"').strip()
        label = self.IMAGE_EXTENSION.sub("", label)
        if not label:
            raise StructuralDecodeError(f"Shape label is empty: {line.strip()!r}")

        # 하위 폴더 이름("folder/hero")은 허용, 출력 디렉토리 밖을 가리키는 경로는 거부
        segments = label.replace("\\", "/").split("/")
        if label.startswith(("/", "\\")) or any(seg in ("", ".", "..") for seg in segments):
            raise StructuralDecodeError(f"Shape label is not a relative file name: {label!r}")
        return label

    def _finish_shape(self, context: ShapeScanContext) -> Tuple[FrameRecord, RawVertexArrays]:
        # 마지막 필드의 후행 쉼표는 JsonHandler 가 정리
        json_text = "".join(context.structural_lines) + "}"
        try:
            record = self.decoder.decode(json_text)
        except StructuralDecodeError as e:
            raise StructuralDecodeError(f"Shape '{context.label}': {e}") from e
        record.name = context.label

        arrays = {}
        for field_name in ArrayLiteralParser.FIELDS:
            line = context.array_lines.get(field_name)
            if line is None:
                raise MalformedArrayError(f"Shape '{context.label}' has no '{field_name}' field")
            try:
                arrays[field_name] = ArrayLiteralParser.parse_field(line, field_name)
            except MalformedArrayError as e:
                raise MalformedArrayError(f"Shape '{context.label}' field '{field_name}': {e}") from e

        raw = RawVertexArrays(
            vertices=arrays[ArrayLiteralParser.FIELD_VERTICES],
            uv=arrays[ArrayLiteralParser.FIELD_VERTICES_UV],
            triangles=arrays[ArrayLiteralParser.FIELD_TRIANGLES],
        )
        return record, raw

    @staticmethod
    def _array_field(line: str) -> Optional[str]:
        for field_name in ArrayLiteralParser.FIELDS:
            if ArrayLiteralParser.matches(line, field_name):
                return field_name
        return None

    @staticmethod
    def _unique_name(used: set, base_name: str) -> str:
        if base_name not in used:
            return base_name

        dup_count = 1
        new_name = f"{base_name}_dup_{dup_count}"
        while new_name in used:
            dup_count += 1
            new_name = f"{base_name}_dup_{dup_count}"
        Log.warning(f"Duplicate shape name '{base_name}' renamed to '{new_name}'")
        return new_name
