# atlas2obj/config.py
from pathlib import Path


class Config:
    """프로젝트 전체에서 사용되는 설정 및 상수 정의"""

    # 프로젝트 루트 경로 계산 (이 파일의 위치 기준)
    BASE_DIR = Path(__file__).resolve().parent.parent

    # 데이터 입출력 경로
    INPUT_DIR = BASE_DIR / "data" / "input"
    OUTPUT_DIR = BASE_DIR / "data" / "output"

    # 처리 대상 파일 패턴 (TexturePacker json export)
    FILE_PATTERN = "*.json"
    ATLAS_SUFFIX = "_atlas"

    # 출력 파일
    OBJ_EXTENSION = ".obj"
    OBJ_DIR_SUFFIX = "_OBJ"

    # 인코딩 설정
    ENCODING = "utf-8"

    # 2048 px 아틀라스 = 21 유닛 (게임 월드 스케일에 맞춘 값)
    PIXELS_PER_UNIT = 2048.0 / 21.0

    # export 상단 구조 라인 수 ('{"frames": {' 와 빈 줄)
    HEADER_LINES = 2
