import datetime
import enum
import os
import sys
import traceback
from colorama import Fore, Style, init

# Initialize Colorama
init(autoreset=True)

LOG_DIR = os.environ.get(
    "BUILDGRINDER_LOG_DIR",
    os.path.join(os.path.expanduser("~"), ".buildgrinder", "logs"),
)


class LogLevel(enum.IntEnum):
    DEBUG = 10
    INFO = 20
    LIFECYCLE = 25
    WARNING = 30
    ERROR = 40

    @classmethod
    def parse(cls, value):
        """Accept a LogLevel, a level name or a level number."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown log level: {value!r}") from None


_COLORS = {
    LogLevel.DEBUG: Fore.WHITE + Style.DIM,
    LogLevel.INFO: Fore.CYAN,
    LogLevel.LIFECYCLE: Fore.CYAN,
    LogLevel.WARNING: Fore.YELLOW,
    LogLevel.ERROR: Fore.RED,
}


class Logger:
    def __init__(self, threshold=None, log_dir=None):
        if threshold is None:
            threshold = os.environ.get("BUILDGRINDER_LOG_LEVEL", "LIFECYCLE")
        self.threshold = LogLevel.parse(threshold)
        self.log_dir = log_dir or LOG_DIR
        self.log_file = os.path.join(
            self.log_dir,
            f"buildgrinder_{datetime.datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        )

    def _get_timestamp(self):
        return datetime.datetime.now().strftime("%H:%M:%S")

    def _write(self, log_message):
        try:
            os.makedirs(self.log_dir, exist_ok=True)
            with open(self.log_file, "a") as f:
                f.write(log_message)
        except OSError as e:
            print(f"{Fore.YELLOW}Could not write log file {self.log_file}: {e}{Style.RESET_ALL}", file=sys.stderr)

    def _log(self, level, message, color, stream=None, prefix="", show_timestamp=True):
        stream = stream or sys.stdout
        if show_timestamp:
            timestamp = self._get_timestamp()
            log_message = f"[{timestamp}] [{level}] {prefix}{message}\n"
            print(f"{color}{Style.BRIGHT}[{timestamp}]{Style.RESET_ALL} {prefix}{message}{Style.RESET_ALL}", file=stream)
        else:
            log_message = f"[{level}] {prefix}{message}\n"
            print(f"{color}{prefix}{message}{Style.RESET_ALL}", file=stream)

        self._write(log_message)

    def is_enabled(self, level):
        return LogLevel.parse(level) >= self.threshold

    def log(self, level, message):
        """Log a message at the given level, if the threshold lets it through."""
        level = LogLevel.parse(level)
        if not self.is_enabled(level):
            return
        stream = sys.stderr if level >= LogLevel.WARNING else sys.stdout
        self._log(level.name, message, _COLORS[level], stream=stream)

    def info(self, message):
        self.log(LogLevel.INFO, message)

    def lifecycle(self, message):
        self.log(LogLevel.LIFECYCLE, message)

    def step_info(self, message, indent=0):
        if not self.is_enabled(LogLevel.LIFECYCLE):
            return
        prefix = " " * indent
        self._log("", message, Fore.CYAN, prefix=prefix, show_timestamp=False)

    def success(self, message):
        if not self.is_enabled(LogLevel.LIFECYCLE):
            return
        self._log("SUCCESS", message, Fore.GREEN, prefix=f"{Style.BRIGHT}✓ {Style.RESET_ALL}{Fore.GREEN}")

    def warning(self, message):
        if not self.is_enabled(LogLevel.WARNING):
            return
        self._log("WARNING", message, Fore.YELLOW, stream=sys.stderr,
                  prefix=f"{Style.BRIGHT}⚠ {Style.RESET_ALL}{Fore.YELLOW}")

    def error(self, message):
        self._log("ERROR", message, Fore.RED, stream=sys.stderr,
                  prefix=f"{Style.BRIGHT}✖ {Style.RESET_ALL}{Fore.RED}")

    def debug(self, message):
        self.log(LogLevel.DEBUG, message)

    # -------- Exception logging --------
    def exception(self, exc_type, exc_value, exc_traceback):
        self.error(f"An unhandled exception occurred: {exc_value}")
        formatted_lines = traceback.format_exception(exc_type, exc_value, exc_traceback)
        for line in formatted_lines:
            for sub_line in line.splitlines():
                if sub_line.strip():
                    self._log("TRACEBACK", f">> {sub_line}", Fore.RED, stream=sys.stderr)


# ---------------- Helper ----------------
logger = Logger()

def get_latest_log_file():
    """Return the path to the latest log file."""
    if not os.path.isdir(LOG_DIR):
        return None
    log_files = [os.path.join(LOG_DIR, f) for f in os.listdir(LOG_DIR) if f.endswith(".log")]
    if not log_files:
        return None
    return max(log_files, key=os.path.getctime)
