"""Fixed settings for the csproj patcher. Only the log level can be changed from outside (via $LOG_LEVEL)."""

PROJECT_FILE_PATTERN = "*.csproj"
MAX_PROJECT_FILES = 3
HELP_FLAG = "--help"

TARGET_FRAMEWORK = "net48"
LEGACY_FRAMEWORK_MARKER = "net4"  # only frameworks containing this get bumped
DEBUG_TYPE = "embedded"
LANG_VERSION = "Latest"

TARGET_ENCODING = "utf-8-sig"  # UTF-8 with BOM

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
