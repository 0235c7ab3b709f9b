"""
Utilities Package
=================
프로젝트 전반에서 사용되는 공통 보조 기능(Cross-cutting Concerns)을 제공하는 패키지입니다.
아틀라스 파싱/메쉬 생성 로직과는 독립적으로 동작합니다.

포함된 모듈 (Modules):
----------------------
1. file_manager.py
   - JsonHandler: 후행 쉼표(Trailing Comma) 정제 후 JSON 디코딩.
   - TextFileHandler: 아틀라스 텍스트 읽기, OBJ 저장, 오래된 파일 삭제.

2. logger.py
   - Log: ANSI Escape Code를 활용한 컬러 콘솔 로깅 (Info, Success, Error, Warning, Trace 등).

3. decorators.py
   - measure_time: 함수 실행 시간 측정 및 성능 로깅.
   - log_lifecycle: 함수 호출의 시작과 끝을 추적(Trace)하여 로깅.
"""

from .logger import Log
from .file_manager import JsonHandler, TextFileHandler
from .decorators import measure_time, log_lifecycle

__all__ = [
    "JsonHandler",
    "TextFileHandler",
    "Log",
    "measure_time",
    "log_lifecycle"
]
