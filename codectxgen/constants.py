"""Application-wide constants: defaults, limits, formats and patterns."""

from datetime import timedelta

APP_NAME = "code-context-generator"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = "High-Performance Code Context Generation Tool"

DEFAULT_CONFIG_FILE = "config.yaml"
DEFAULT_FORMAT = "xml"
DEFAULT_OUTPUT_DIR = ""
DEFAULT_FILENAME_TEMPLATE = "context_{{.timestamp}}.{{.extension}}"
DEFAULT_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
MAX_FILE_SIZE_DEFAULT = 10 * 1024 * 1024

MAX_FILE_SIZE_LIMIT = 100 * 1024 * 1024
DEFAULT_MAX_DEPTH = 0  # unlimited
BUFFER_SIZE = 32 * 1024
MAX_CONCURRENCY = 10
CHANNEL_BUFFER_SIZE = 100

DEFAULT_MIN_CHARS = 1
DEFAULT_MAX_SUGGESTIONS = 10
DEFAULT_SHOW_HIDDEN = False
DEFAULT_SHOW_SIZE = True
DEFAULT_SHOW_MODIFIED = False

FORMAT_XML = "xml"
FORMAT_JSON = "json"
FORMAT_TOML = "toml"
FORMAT_MARKDOWN = "markdown"

ERR_MSG_CONFIG_LOAD = "配置文件加载失败"
ERR_MSG_CONFIG_VALIDATE = "配置验证失败"
ERR_MSG_FILE_READ = "文件读取失败"
ERR_MSG_FILE_WRITE = "文件写入失败"
ERR_MSG_FORMAT_GENERATE = "格式生成失败"
ERR_MSG_PATH_INVALID = "路径无效"
ERR_MSG_PERMISSION_DENIED = "权限不足"
ERR_MSG_FILE_TOO_LARGE = "文件过大"

DEFAULT_TIMEOUT = timedelta(seconds=30)
FILE_WATCH_INTERVAL = timedelta(seconds=1)
PROGRESS_UPDATE_INTERVAL = timedelta(milliseconds=100)

PATTERN_HIDDEN_FILE = r"^\."
PATTERN_GITIGNORE = r"^\.gitignore$"
PATTERN_CONFIG_FILE = r"^config\.(yaml|yml|json|toml)$"
PATTERN_TEMPLATE_VAR = r"\{\{\.(\w+)\}\}"

ENV_PREFIX = "CODE_CONTEXT_"

DEFAULT_EXCLUDE_PATTERNS = (
    "*.tmp",
    "*.log",
    "*.swp",
    ".*",
    "node_modules/",
    "target/",
    "dist/",
    "build/",
    ".env",
    ".git/",
    ".vscode/",
    ".idea/",
    "__pycache__/",
    "*.pyc",
    ".venv",
    "*.class",
)

SUPPORTED_FORMATS = (
    FORMAT_XML,
    FORMAT_JSON,
    FORMAT_TOML,
    FORMAT_MARKDOWN,
)