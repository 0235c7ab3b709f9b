# atlas2obj/utils/file_manager.py

import json
import re
from pathlib import Path
from typing import Any, Iterable, List
from atlas2obj.config import Config
from atlas2obj.utils.logger import Log

_TRAILING_COMMA_OBJ = re.compile(r',\s*}')
_TRAILING_COMMA_ARR = re.compile(r',\s*]')


class JsonHandler:
    @staticmethod
    def clean(content: str) -> str:
        """후행 쉼표(Trailing Comma) 제거"""
        content = _TRAILING_COMMA_OBJ.sub('}', content)
        return _TRAILING_COMMA_ARR.sub(']', content)

    @staticmethod
    def loads(content: str) -> Any:
        # json.JSONDecodeError 는 호출자가 도메인 에러로 변환한다
        return json.loads(JsonHandler.clean(content))


class TextFileHandler:
    @staticmethod
    def read_lines(filepath: Path, encoding: str = Config.ENCODING) -> List[str]:
        try:
            with open(filepath, 'r', encoding=encoding) as f:
                return f.read().splitlines()
        except OSError as e:
            Log.error(f"Failed to read ({filepath.name}): {e}")
            raise

    @staticmethod
    def save_text(filepath: Path, content: str, encoding: str = Config.ENCODING) -> None:
        try:
            # newline='' : OBJ 는 플랫폼과 무관하게 '\n' 로 저장
            with open(filepath, 'w', encoding=encoding, newline='') as f:
                f.write(content)
            Log.success(f"Saved: {filepath.name}")
        except OSError as e:
            Log.error(f"Failed to save ({filepath.name}): {e}")
            raise

    @staticmethod
    def delete_files(filepaths: Iterable[Path]) -> List[Path]:
        deleted = []
        for filepath in filepaths:
            Log.warning(f"Delete file: {filepath}")
            filepath.unlink()
            deleted.append(filepath)
        return deleted
