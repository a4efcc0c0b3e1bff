"""Constants and default values for service-reports."""

# ==================== DISPLAY CONSTANTS ====================

# Width of banner separator lines (used across CLI output)
BANNER_WIDTH: int = 60

TQDM_BAR_FORMAT = "{l_bar}{bar}| {n_fmt} [{elapsed}]"

# ==================== INPUT / OUTPUT ====================

# Hierarchy separator in raw service names and its replacement
SERVICE_PATH_SEPARATOR: str = "/"
SERVICE_NAMESPACE_SEPARATOR: str = "."

OUTPUT_ENCODING: str = "utf-8"

# Names no longer than this are only combined on exact or instance-suffix matches
MIN_FUZZY_NAME_LENGTH: int = 5

# ==================== LOGGING DEFAULTS ====================

LOG_FILE_MAX_BYTES: int = 10 * 1024 * 1024  # 10MB max per log file
LOG_FILE_BACKUP_COUNT: int = 5  # Number of backup log files to keep
VALID_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS: tuple[str, ...] = ("text", "json")

# ==================== ENVIRONMENT ====================

ENV_ZIPKIN_URL = "ZIPKIN_URL"
ENV_OUTPUT_DIR = "SERVICE_REPORTS_OUTPUT_DIR"
ENV_LOG_LEVEL = "LOG_LEVEL"

# ==================== EXIT CODES ====================

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
