# atlas2obj/processors/visualizers/__init__.py
"""
Visualizers Sub-package
=======================
변환된 메쉬를 사용자에게 시각적으로 보여주는 로직을 담당합니다.

Modules:
--------
- mesh_visualizer.py: 삼각형 추출, 인접 색상 구분 및 Matplotlib 렌더링 (MeshVisualizer)
- batch_visualizer.py: 입력 디렉토리 순회 및 순차적 미리보기 실행 (BatchVisualizer)
"""

from .mesh_visualizer import MeshVisualizer
from .batch_visualizer import BatchVisualizer

__all__ = ["MeshVisualizer", "BatchVisualizer"]
