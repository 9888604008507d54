"""Data types shared by the security scanner, its detectors and reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import IntEnum
from typing import Protocol, runtime_checkable


class SeverityLevel(IntEnum):
    """How serious a finding is; higher values are more severe."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2
    CRITICAL = 3

    def __str__(self) -> str:
        return self.name.lower()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


class ScanLevel(IntEnum):
    """Depth of a security scan."""

    BASIC = 0
    STANDARD = 1
    COMPREHENSIVE = 2


@dataclass
class DetectorConfig:
    """Which detector families are switched on."""

    credentials: bool = False
    sql_injection: bool = False
    xss: bool = False
    path_traversal: bool = False
    quality: bool = False


@dataclass
class HardcodedCredentialsConfig:
    """Settings for the hard-coded credentials detector."""

    enabled: bool = False
    severity_threshold: SeverityLevel = SeverityLevel.LOW
    patterns: list[str] = field(default_factory=list)


@dataclass
class VulnerabilityConfig:
    """Settings for vulnerability detectors."""

    enabled: bool = False
    severity_threshold: SeverityLevel = SeverityLevel.LOW


@dataclass
class QualityConfig:
    """Settings for code-quality detectors."""

    enabled: bool = False
    severity_threshold: SeverityLevel = SeverityLevel.LOW


@dataclass
class ExclusionRule:
    """A pattern excluded from scanning, with the reason why."""

    pattern: str = ""
    reason: str = ""


@dataclass
class ExclusionConfig:
    """Files and name patterns that the scanner skips."""

    files: list[str] = field(default_factory=list)
    patterns: list[str] = field(default_factory=list)
    rules: list[ExclusionRule] = field(default_factory=list)


@dataclass
class ReportingConfig:
    """How a report is written."""

    format: str = ""
    output_file: str = ""
    include_details: bool = False
    show_statistics: bool = False


@dataclass
class SecurityConfig:
    """Top-level security scan configuration."""

    enabled: bool = False
    fail_on_critical: bool = False
    scan_level: str = ""
    report_format: str = ""
    detectors: DetectorConfig = field(default_factory=DetectorConfig)
    exclusions: ExclusionConfig = field(default_factory=ExclusionConfig)
    reporting: ReportingConfig = field(default_factory=ReportingConfig)


@dataclass
class ScanSummary:
    """Counts of files and findings in a scan."""

    total_files: int = 0
    scanned_files: int = 0
    issues_found: int = 0
    critical_issues: int = 0
    high_issues: int = 0
    medium_issues: int = 0
    low_issues: int = 0


@dataclass
class ScanStatistics:
    """Timing figures of a scan."""

    total_time: timedelta = field(default_factory=timedelta)
    average_time: timedelta = field(default_factory=timedelta)
    files_per_sec: float = 0.0
    memory_usage: int = 0


@dataclass
class SecurityIssue:
    """A single finding reported by a detector."""

    id: str = ""
    type: str = ""
    severity: SeverityLevel = SeverityLevel.LOW
    message: str = ""
    file: str = ""
    line: int = 0
    column: int = 0
    snippet: str = ""
    recommendation: str = ""
    confidence: float = 0.0


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SecurityReport:
    """The outcome of a scan: summary, findings and statistics."""

    scan_id: str = ""
    timestamp: datetime = field(default_factory=_now)
    scan_duration: timedelta = field(default_factory=timedelta)
    summary: ScanSummary = field(default_factory=ScanSummary)
    issues: list[SecurityIssue] = field(default_factory=list)
    statistics: ScanStatistics = field(default_factory=ScanStatistics)
    config: SecurityConfig = field(default_factory=SecurityConfig)


@runtime_checkable
class SecurityDetector(Protocol):
    """Anything that inspects file content and reports findings."""

    name: str
    supported_languages: list[str]

    def detect(self, file_path: str, content: str) -> list[SecurityIssue]:
        """Findings in ``content``, which was read from ``file_path``."""
        ...