# atlas2obj/processors/converters/__init__.py
"""
Converters Sub-package
======================
TexturePacker 아틀라스 export(json)를 읽어 shape 별 메쉬를 만들고
Wavefront OBJ 텍스트로 저장하는 로직을 담당합니다.

Modules:
--------
1. array_parser.py (ArrayLiteralParser)
   - "vertices": [[x,y], [x,y]] 형태의 한 줄 배열을 정수 튜플로 파싱.

2. record_decoder.py (ShapeRecordDecoder)
   - shape 블록 JSON → FrameRecord (frame, sourceSize, pivot 등).

3. atlas_scanner.py (AtlasTextScanner)
   - meta 의 size 탐색, shape 블록 분리, 배열 필드 분기.

4. geometry_builder.py (GeometryBuilder)
   - pivot 기준 위치 변환, UV 정규화, 삼각형 인덱스 검증.

5. obj_serializer.py (ObjSerializer)
   - Mesh → OBJ 텍스트 (x 반전, 1-based 면 인덱스).

6. atlas_converter.py (AtlasConverter)
   - 위 단계를 묶은 파이프라인 (export 한 개 단위).

7. batch_processor.py (BatchProcessor)
   - 입력 디렉토리 순회, OBJ 저장 및 오래된 OBJ 정리.
"""

from .array_parser import ArrayLiteralParser
from .record_decoder import ShapeRecordDecoder
from .atlas_scanner import AtlasTextScanner, ShapeScanContext
from .geometry_builder import GeometryBuilder
from .obj_serializer import ObjSerializer
from .atlas_converter import AtlasConverter
from .batch_processor import BatchProcessor, BatchResult

__all__ = [
    "ArrayLiteralParser",
    "ShapeRecordDecoder",
    "AtlasTextScanner",
    "ShapeScanContext",
    "GeometryBuilder",
    "ObjSerializer",
    "AtlasConverter",
    "BatchProcessor",
    "BatchResult"
]
