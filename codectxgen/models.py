"""Core data types: file trees, configuration, options and errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any, Optional

from .git_models import GitIntegrationConfig, GitIntegrationData
from .security_types import SecurityConfig


@dataclass
class FileInfo:
    """A single file and, optionally, its contents."""

    name: str = ""
    path: str = ""
    content: str = ""
    size: int = 0
    mod_time: Optional[datetime] = None
    is_dir: bool = False
    is_hidden: bool = False
    is_binary: bool = False


@dataclass
class FolderInfo:
    """A directory with the files and folders it holds."""

    name: str = ""
    path: str = ""
    files: list[FileInfo] = field(default_factory=list)
    folders: list[FolderInfo] = field(default_factory=list)
    mod_time: Optional[datetime] = None
    is_hidden: bool = False
    size: int = 0
    count: int = 0


@dataclass
class ContextData:
    """Everything gathered for one generated context."""

    files: list[FileInfo] = field(default_factory=list)
    folders: list[FolderInfo] = field(default_factory=list)
    file_count: int = 0
    folder_count: int = 0
    total_size: int = 0
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class ContextDataWithGit(ContextData):
    """Context data together with git repository information."""

    git_integration: GitIntegrationData = field(default_factory=GitIntegrationData)


@dataclass
class WalkResult:
    """The outcome of walking a directory tree."""

    files: list[FileInfo] = field(default_factory=list)
    folders: list[FolderInfo] = field(default_factory=list)
    file_count: int = 0
    folder_count: int = 0
    total_size: int = 0
    root_path: str = ""
    scan_duration: str = ""


@dataclass
class FormatConfig:
    """Settings of one output format."""

    enabled: bool = False
    structure: dict[str, Any] = field(default_factory=dict)
    fields: dict[str, str] = field(default_factory=dict)
    template: str = ""
    formatting: Any = field(default_factory=dict)
    encoding: str = ""


class XMLContentHandling(str, Enum):
    """How file contents are placed inside XML output."""

    ESCAPED = "escaped"
    CDATA = "cdata"
    RAW = "raw"


@dataclass
class XMLFormattingConfig:
    """Layout options of XML output."""

    indent: str = ""
    declaration: bool = False
    encoding: str = ""
    content_handling: XMLContentHandling = XMLContentHandling.ESCAPED


@dataclass
class XMLFormatConfig(FormatConfig):
    """XML format settings, with tag names and XML-specific formatting."""

    formatting: XMLFormattingConfig = field(default_factory=XMLFormattingConfig)
    root_tag: str = ""
    file_tag: str = ""
    folder_tag: str = ""
    files_tag: str = ""


@dataclass
class FormatsConfig:
    """Settings of every output format."""

    xml: XMLFormatConfig = field(default_factory=XMLFormatConfig)
    json: FormatConfig = field(default_factory=FormatConfig)
    toml: FormatConfig = field(default_factory=FormatConfig)
    markdown: FormatConfig = field(default_factory=FormatConfig)


@dataclass
class FieldFilter:
    """Field names to include or exclude from output."""

    include: list[str] = field(default_factory=list)
    exclude: list[str] = field(default_factory=list)


@dataclass
class FieldProcessing:
    """Transformations applied to field values."""

    max_length: int = 0
    add_line_numbers: bool = False
    trim_whitespace: bool = False
    code_highlight: bool = False


@dataclass
class FieldsConfig:
    """Field renaming, filtering and processing."""

    custom_names: dict[str, str] = field(default_factory=dict)
    filter: FieldFilter = field(default_factory=FieldFilter)
    processing: FieldProcessing = field(default_factory=FieldProcessing)


@dataclass
class FiltersConfig:
    """Which files are taken into a context."""

    max_file_size: str = ""
    exclude_patterns: list[str] = field(default_factory=list)
    include_patterns: list[str] = field(default_factory=list)
    max_depth: int = 0
    follow_symlinks: bool = False
    exclude_binary: bool = False


@dataclass
class AISummaryConfig:
    """AI summary settings; template is default, minimal or detailed."""

    enabled: bool = False
    template: str = ""


@dataclass
class AIInstructionsConfig:
    """Instructions for AI consumers, inline or read from a file."""

    enabled: bool = False
    file_path: str = ""
    content: str = ""


@dataclass
class OutputConfig:
    """Where and how output is written."""

    format: str = ""
    file_path: str = ""
    encoding: str = ""
    default_format: str = ""
    output_dir: str = ""
    filename_template: str = ""
    timestamp_format: str = ""
    include_metadata: bool = False
    ai_optimized: bool = False
    ai_summary: AISummaryConfig = field(default_factory=AISummaryConfig)
    ai_instructions: AIInstructionsConfig = field(default_factory=AIInstructionsConfig)


@dataclass
class SelectorConfig:
    """What the file selector displays."""

    show_hidden: bool = False
    show_size: bool = False
    show_modified: bool = False


@dataclass
class UIConfig:
    """User-interface settings."""

    theme: str = ""
    show_progress: bool = False
    show_size: bool = False
    show_date: bool = False
    show_preview: bool = False
    selector: SelectorConfig = field(default_factory=SelectorConfig)


@dataclass
class SelectOptions:
    """Options for selecting files; depth controls recursion."""

    include_patterns: list[str] = field(default_factory=list)
    exclude_patterns: list[str] = field(default_factory=list)
    max_depth: int = 0
    show_hidden: bool = False
    sort_by: str = ""


@dataclass
class WalkOptions:
    """Options for walking a directory tree.

    ``selected_files`` overrides pattern matching when non-empty;
    ``multiple_files`` and ``pattern_file`` come from the command line.
    """

    max_depth: int = 0
    max_file_size: int = 0
    exclude_patterns: list[str] = field(default_factory=list)
    include_patterns: list[str] = field(default_factory=list)
    follow_symlinks: bool = False
    show_hidden: bool = False
    exclude_binary: bool = False
    selected_files: list[str] = field(default_factory=list)
    multiple_files: list[str] = field(default_factory=list)
    pattern_file: str = ""


@dataclass
class FileProcessingConfig:
    """How individual files are processed."""

    include_hidden: bool = False
    max_file_size: int = 0
    max_depth: int = 0
    exclude_patterns: list[str] = field(default_factory=list)
    include_patterns: list[str] = field(default_factory=list)
    include_content: bool = False
    include_hash: bool = False


@dataclass
class PerformanceConfig:
    """Worker, buffer and cache settings."""

    max_workers: int = 0
    buffer_size: int = 0
    cache_enabled: bool = False
    cache_size: int = 0


@dataclass
class LoggingConfig:
    """Log level and log file rotation."""

    level: str = ""
    file_path: str = ""
    max_size: int = 0
    max_backups: int = 0
    max_age: int = 0


@dataclass
class Config:
    """The complete application configuration."""

    formats: FormatsConfig = field(default_factory=FormatsConfig)
    fields: FieldsConfig = field(default_factory=FieldsConfig)
    filters: FiltersConfig = field(default_factory=FiltersConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    file_processing: FileProcessingConfig = field(default_factory=FileProcessingConfig)
    performance: PerformanceConfig = field(default_factory=PerformanceConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)
    git: GitIntegrationConfig = field(default_factory=GitIntegrationConfig)


@dataclass
class CLIOptions:
    """Options given on the command line."""

    format: str = ""
    output: str = ""
    config: str = ""
    exclude: list[str] = field(default_factory=list)
    include: list[str] = field(default_factory=list)
    max_depth: int = 0
    follow_symlinks: bool = False
    output_dir: str = ""
    filename_template: str = ""
    validate_config: bool = False


class ErrorType(IntEnum):
    """Category of an application error."""

    CONFIG = 0
    FILE_SYSTEM = 1
    FORMAT = 2
    VALIDATION = 3
    PERMISSION = 4
    NETWORK = 5
    UNKNOWN = 6

    def __str__(self) -> str:
        return _ERROR_TYPE_NAMES.get(self, "UnknownError")


_ERROR_TYPE_NAMES = {
    ErrorType.CONFIG: "ConfigError",
    ErrorType.FILE_SYSTEM: "FileSystemError",
    ErrorType.FORMAT: "FormatError",
    ErrorType.VALIDATION: "ValidationError",
    ErrorType.PERMISSION: "PermissionError",
    ErrorType.NETWORK: "NetworkError",
}


class AppError(Exception):
    """An application error with a category, an optional cause and context."""

    def __init__(
        self,
        error_type: ErrorType,
        message: str,
        cause: Optional[BaseException] = None,
        context: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.error_type = error_type
        self.message = message
        self.cause = cause
        self.context = dict(context) if context else {}
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.error_type}: {self.message} (caused by: {self.cause})"
        return f"{self.error_type}: {self.message}"