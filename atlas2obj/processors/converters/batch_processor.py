# atlas2obj/processors/converters/batch_processor.py
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional
from atlas2obj.config import Config
from atlas2obj.errors import AtlasError
from atlas2obj.utils import TextFileHandler, measure_time, Log
from .atlas_converter import AtlasConverter


@dataclass
class BatchResult:
    written: Dict[str, List[Path]] = field(default_factory=dict)
    deleted: Dict[str, List[Path]] = field(default_factory=dict)
    failed: List[Path] = field(default_factory=list)


class BatchProcessor:
    """
    배치 처리 관리자: 입력 디렉토리의 아틀라스 export 를 모두 OBJ 로 변환
    """

    def __init__(self, input_dir: Optional[Path] = None, output_dir: Optional[Path] = None,
                 pixels_per_unit: float = Config.PIXELS_PER_UNIT, continue_on_error: bool = False):
        self.input_dir = Path(input_dir) if input_dir else Config.INPUT_DIR
        self.output_dir = Path(output_dir) if output_dir else Config.OUTPUT_DIR
        self.io = TextFileHandler()
        self.converter = AtlasConverter(pixels_per_unit=pixels_per_unit)
        self.continue_on_error = continue_on_error

    def run(self) -> BatchResult:
        Log.section("Batch Processing Started")
        result = BatchResult()
        files = sorted(self.input_dir.glob(Config.FILE_PATTERN))

        if not files:
            Log.warning(f"No atlas exports found in {self.input_dir}")
            return result

        self.output_dir.mkdir(parents=True, exist_ok=True)
        for filepath in files:
            try:
                self._process_single_file(filepath, result)
            except AtlasError as e:
                Log.error(f"{filepath.name}: {e}")
                if not self.continue_on_error:
                    raise
                result.failed.append(filepath)

        Log.section(f"Processing Complete. Total files: {len(files)} (failed: {len(result.failed)})")
        return result

    @staticmethod
    def atlas_name(filepath: Path) -> str:
        stem = filepath.stem
        if stem.endswith(Config.ATLAS_SUFFIX) and stem != Config.ATLAS_SUFFIX:
            return stem[:-len(Config.ATLAS_SUFFIX)]
        return stem

    @measure_time
    def _process_single_file(self, filepath: Path, result: BatchResult):
        Log.info(f"Processing: {filepath.name}...")

        # 변환이 끝나기 전에는 디스크를 건드리지 않음
        documents = self.converter.convert_file(filepath)
        Log.info(f"-> Generated {len(documents)} meshes")

        atlas = self.atlas_name(filepath)
        target_dir = self.output_dir / f"{atlas}{Config.OBJ_DIR_SUFFIX}"
        target_dir.mkdir(parents=True, exist_ok=True)

        # 1. 이번 export 에 없는 오래된 OBJ 삭제 (하위 폴더 포함, 상대 경로로 비교)
        keep = {Path(doc.filename).as_posix() for doc in documents}
        stale = sorted(p for p in target_dir.rglob(f"*{Config.OBJ_EXTENSION}")
                       if p.relative_to(target_dir).as_posix() not in keep)
        result.deleted[atlas] = self.io.delete_files(stale)

        # 2. OBJ 저장 ("folder/hero" 같은 shape 는 하위 폴더에 저장)
        written = []
        for doc in documents:
            path = target_dir / doc.filename
            path.parent.mkdir(parents=True, exist_ok=True)
            self.io.save_text(path, doc.text)
            written.append(path)
        result.written[atlas] = written

        Log.info(f"-> {len(written)} OBJ files saved to: {target_dir.name}")
