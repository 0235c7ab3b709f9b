# atlas2obj/main.py
import sys
import traceback

# 패키지 레벨(__init__.py)에서 노출된 클래스 임포트
from atlas2obj.config import Config
from atlas2obj.processors import BatchProcessor, BatchVisualizer
from atlas2obj.utils import Log

# ==========================================
# 1. 글로벌 예외 핸들러 정의
# ==========================================
def global_exception_handler(exc_type, exc_value, exc_traceback):
    """
    프로그램 내에서 잡히지 않은(Uncaught) 모든 예외를 여기서 처리합니다.
    """
    if issubclass(exc_type, KeyboardInterrupt):
        Log.warning("작업이 사용자에 의해 중단되었습니다. (KeyboardInterrupt)")
        sys.exit(0)

    error_msg = f"{exc_type.__name__}: {exc_value}"
    Log.error(f"변환 중 오류로 프로그램이 종료됩니다.\n{'-'*60}")

    traceback_details = "".join(traceback.format_tb(exc_traceback))
    print(f"{Log.FAIL}{traceback_details}{error_msg}{Log.RESET}", file=sys.stderr)
    print(f"{'-'*60}", file=sys.stderr)

# ==========================================
# 2. Main 실행
# ==========================================
def main():
    # 예외 훅 등록
    sys.excepthook = global_exception_handler

    # ==========================================
    # [설정] 사용자 파라미터
    # ==========================================

    # 1. 픽셀 → 유닛 변환 비율 (기본: 2048 px = 21 유닛)
    PIXELS_PER_UNIT = Config.PIXELS_PER_UNIT
    # 2. 한 export 가 실패해도 나머지 파일 변환을 계속할지 여부
    CONTINUE_ON_ERROR = False
    # 3. 변환 후 메쉬 미리보기 (Matplotlib 창)
    ENABLE_PREVIEW = False

    # ==========================================

    processor = BatchProcessor(
        pixels_per_unit=PIXELS_PER_UNIT,
        continue_on_error=CONTINUE_ON_ERROR
    )
    result = processor.run()

    if ENABLE_PREVIEW:
        visualizer = BatchVisualizer(pixels_per_unit=PIXELS_PER_UNIT)
        visualizer.run()

    return 1 if result.failed else 0

if __name__ == "__main__":
    sys.exit(main())
