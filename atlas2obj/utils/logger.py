# atlas2obj/utils/logger.py
import sys


class Log:
    """
    Console logger for the atlas → OBJ pipeline (ANSI colors).
    Errors go to stderr so batch output can be piped without losing them.
    """

    # ANSI Colors
    HEADER = '\033[95m'      # Purple
    BLUE = '\033[94m'        # Blue
    CYAN = '\033[96m'        # Cyan
    GREEN = '\033[92m'       # Green
    WARNING = '\033[93m'     # Yellow
    FAIL = '\033[91m'        # Red
    BOLD = '\033[1m'         # Bold
    RESET = '\033[0m'        # Reset to default

    # False 이면 trace 메시지를 출력하지 않음
    verbose = True

    @staticmethod
    def _emit(msg: str, color: str = "", stream=None):
        stream = stream or sys.stdout
        if color:
            print(f"{color}{msg}{Log.RESET}", file=stream)
        else:
            print(msg, file=stream)

    @staticmethod
    def info(msg: str):
        """General information (White/Default)"""
        Log._emit(f"  [Info] {msg}")

    @staticmethod
    def trace(msg: str):
        """Lifecycle tracing (Cyan)"""
        if Log.verbose:
            Log._emit(f"  [Trace] {msg}", Log.CYAN)

    @staticmethod
    def success(msg: str):
        """Success messages (Green)"""
        Log._emit(f"[Success] {msg}", Log.GREEN)

    @staticmethod
    def warning(msg: str):
        """Warning messages (Yellow)"""
        Log._emit(f"[Warning] {msg}", Log.WARNING)

    @staticmethod
    def error(msg: str):
        """Error messages (Red, stderr)"""
        Log._emit(f"  [Error] {msg}", Log.FAIL, sys.stderr)

    @staticmethod
    def performance(msg: str):
        """Performance metrics (Purple)"""
        Log._emit(f"  [Perf]  {msg}", Log.HEADER)

    @staticmethod
    def section(msg: str):
        """Section Divider (Bold Blue)"""
        Log._emit(f"\n=== {msg} ===", Log.BLUE + Log.BOLD)
