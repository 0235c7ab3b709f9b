"""
atlas2obj
=========
TexturePacker 폴리곤 아틀라스 export(json)를 shape 별 Wavefront OBJ 메쉬로 변환합니다.

Packages:
---------
- processors: 변환(converters) 및 미리보기(visualizers)
- utils: 로깅, 파일 입출력, 데코레이터
- config / errors / types: 설정, 예외, 데이터 모델
"""

__version__ = "0.1.0"
