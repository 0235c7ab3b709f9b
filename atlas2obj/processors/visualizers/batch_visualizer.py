from pathlib import Path
from typing import Optional
from atlas2obj.config import Config
from atlas2obj.errors import AtlasError
from atlas2obj.processors.converters import AtlasConverter
from atlas2obj.utils import TextFileHandler, Log
from .mesh_visualizer import MeshVisualizer


class BatchVisualizer:
    """
    입력 디렉토리의 아틀라스 export 를 메쉬로 변환하여 3D 그래프로 미리보기 합니다.
    """

    def __init__(self, input_dir: Optional[Path] = None, pixels_per_unit: float = Config.PIXELS_PER_UNIT):
        self.input_dir = Path(input_dir) if input_dir else Config.INPUT_DIR
        self.converter = AtlasConverter(pixels_per_unit=pixels_per_unit)

    def run(self, show: bool = True):
        Log.section("Mesh Preview Phase")

        atlas_files = sorted(self.input_dir.glob(Config.FILE_PATTERN))
        if not atlas_files:
            Log.warning("No atlas exports to preview.")
            return

        Log.info(f"Previewing {len(atlas_files)} atlas exports. Close the window to continue.")

        for filepath in atlas_files:
            Log.info(f"Visualizing: {filepath.name}")
            try:
                meshes = self.converter.create_meshes(TextFileHandler.read_lines(filepath))
            except AtlasError as e:
                # 미리보기는 배치 변환과 달리 다음 파일로 진행
                Log.error(f"Preview skipped ({filepath.name}): {e}")
                continue

            MeshVisualizer(meshes).process(show=show)
