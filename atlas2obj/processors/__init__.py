"""
Processors Package
==================
아틀라스 → OBJ 변환 파이프라인의 핵심 로직을 제공하는 패키지입니다.
크게 '데이터 변환(Converters)'과 '시각화(Visualizers)' 두 가지 서브 패키지로 구성됩니다.

Sub-packages:
-------------
1. converters
   - TexturePacker export 를 읽어 shape 별 메쉬/OBJ 를 생성하고 저장합니다.
   - 주요 모듈: atlas_scanner, geometry_builder, obj_serializer, batch_processor

2. visualizers
   - 변환된 메쉬를 3D Wireframe 형태로 미리보기 합니다.
   - 주요 모듈: batch_visualizer, mesh_visualizer
"""

# 사용 예: from atlas2obj.processors import BatchProcessor, BatchVisualizer

from .converters import AtlasConverter, BatchProcessor
from .visualizers import BatchVisualizer, MeshVisualizer

__all__ = [
    "AtlasConverter",
    "BatchProcessor",
    "BatchVisualizer",
    "MeshVisualizer"
]
