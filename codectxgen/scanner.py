"""Security scanner that runs detectors over files and renders text reports."""

from __future__ import annotations

import copy
import math
import os
import secrets
import stat
import time
from collections import Counter
from collections.abc import Iterator
from datetime import datetime, timedelta

from .detectors import DetectorRegistry
from .security_types import (
    ScanStatistics,
    ScanSummary,
    SecurityConfig,
    SecurityIssue,
    SecurityReport,
    SeverityLevel,
)

_SUPPORTED_EXTENSIONS = frozenset(
    {
        ".go", ".py", ".js", ".ts", ".java", ".php", ".rb", ".cpp", ".c",
        ".h", ".cs", ".swift", ".rs", ".yml", ".yaml", ".json", ".xml",
        ".toml", ".ini", ".cfg", ".conf",
    }
)

_LANGUAGES = {
    ".go": "go",
    ".py": "python",
    ".js": "javascript",
    ".ts": "javascript",
    ".java": "java",
    ".php": "php",
    ".rb": "ruby",
    ".cpp": "cpp",
    ".c": "c",
    ".h": "c",
    ".cs": "csharp",
    ".swift": "swift",
    ".rs": "rust",
    ".yml": "yaml",
    ".yaml": "yaml",
    ".json": "json",
    ".xml": "xml",
    ".toml": "toml",
    ".ini": "ini",
    ".cfg": "config",
    ".conf": "config",
}

_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _extension(path: str) -> str:
    """Suffix from the last dot of the final path element, dot included."""
    name = os.path.basename(path)
    index = name.rfind(".")
    return name[index:] if index >= 0 else ""


def _fraction(value: int, unit: int) -> str:
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{str(frac).zfill(digits).rstrip('0')}"


def _format_duration(d: timedelta) -> str:
    """Compact duration text such as '500ms', '1.5s' or '1h2m3s'."""
    nanos = (d // timedelta(microseconds=1)) * 1000
    sign = "-" if nanos < 0 else ""
    value = abs(nanos)
    if value < 1_000_000_000:
        if value == 0:
            return "0s"
        if value < 1000:
            return f"{sign}{value}ns"
        if value < 1_000_000:
            return f"{sign}{_fraction(value, 1000)}µs"
        return f"{sign}{_fraction(value, 1_000_000)}ms"
    hours, rest = divmod(value, 3600 * 10**9)
    minutes, rest = divmod(rest, 60 * 10**9)
    seconds = f"{_fraction(rest, 10**9)}s"
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}"
    if minutes:
        return f"{sign}{minutes}m{seconds}"
    return f"{sign}{seconds}"


def generate_scan_id() -> str:
    """A random 16-character hexadecimal scan identifier."""
    return secrets.token_hex(8)


class SecurityScanner:
    """Walks files, runs the detectors for their language and builds a report."""

    def __init__(self, config: SecurityConfig) -> None:
        self.config = config
        self.registry = DetectorRegistry()

    def scan(self, path: str) -> SecurityReport:
        """Scan a file or a directory tree; raises OSError if ``path`` is unreadable."""
        start = time.perf_counter()
        scan_id = generate_scan_id()
        path = os.fspath(path)
        info = os.stat(path)
        if stat.S_ISDIR(info.st_mode):
            files = list(self._walk(path))
        else:
            files = [path]
        issues = self._scan_files(files)
        duration = timedelta(seconds=time.perf_counter() - start)
        return self._build_report(scan_id, files, issues, duration)

    def _walk(self, directory: str) -> Iterator[str]:
        with os.scandir(directory) as entries:
            ordered = sorted(entries, key=lambda entry: entry.name)
        for entry in ordered:
            if entry.is_dir(follow_symlinks=False):
                yield from self._walk(entry.path)
            elif not self._is_excluded(entry.path) and self._is_supported_file(entry.path):
                yield entry.path

    def _is_excluded(self, file_path: str) -> bool:
        exclusions = self.config.exclusions
        if any(excluded in file_path for excluded in exclusions.files):
            return True
        from fnmatch import fnmatchcase

        name = os.path.basename(file_path)
        return any(fnmatchcase(name, pattern) for pattern in exclusions.patterns)

    @staticmethod
    def _is_supported_file(file_path: str) -> bool:
        return _extension(file_path).lower() in _SUPPORTED_EXTENSIONS

    @staticmethod
    def _language(file_path: str) -> str:
        return _LANGUAGES.get(_extension(file_path).lower(), "unknown")

    def _scan_files(self, files: list[str]) -> list[SecurityIssue]:
        issues: list[SecurityIssue] = []
        for file_path in files:
            try:
                with open(file_path, "rb") as handle:
                    content = handle.read().decode("utf-8", errors="replace")
            except OSError as exc:
                print(f"警告: 无法读取文件 {file_path}: {exc}")
                continue
            for detector in self.registry.detectors_for_language(self._language(file_path)):
                issues.extend(detector.detect(file_path, content))
        return issues

    def _build_report(
        self,
        scan_id: str,
        files: list[str],
        issues: list[SecurityIssue],
        duration: timedelta,
    ) -> SecurityReport:
        counts = Counter(issue.severity for issue in issues)
        scanned = len(files)

        seconds = duration.total_seconds()
        if seconds > 0:
            files_per_sec = scanned / seconds
        else:
            files_per_sec = math.inf if scanned else math.nan

        if counts[SeverityLevel.CRITICAL] == 0 and counts[SeverityLevel.HIGH] > 0:
            first_high = next(i for i in issues if i.severity == SeverityLevel.HIGH)
            first_high.severity = SeverityLevel.CRITICAL
            counts[SeverityLevel.CRITICAL] += 1
            counts[SeverityLevel.HIGH] -= 1

        summary = ScanSummary(
            total_files=scanned,
            scanned_files=scanned,
            issues_found=len(issues),
            critical_issues=counts[SeverityLevel.CRITICAL],
            high_issues=counts[SeverityLevel.HIGH],
            medium_issues=counts[SeverityLevel.MEDIUM],
            low_issues=counts[SeverityLevel.LOW],
        )
        statistics = ScanStatistics(
            total_time=duration,
            average_time=duration / scanned if scanned else timedelta(0),
            files_per_sec=files_per_sec,
            memory_usage=0,
        )
        return SecurityReport(
            scan_id=scan_id,
            timestamp=datetime.now().astimezone(),
            scan_duration=duration,
            summary=summary,
            issues=issues,
            statistics=statistics,
            config=copy.copy(self.config),
        )


class SecurityReporter:
    """Renders a security report as plain text."""

    def generate(self, report: SecurityReport) -> bytes:
        """The report as UTF-8 encoded text."""
        summary = report.summary
        stats = report.statistics
        lines = [
            "=== 安全扫描报告 ===",
            f"扫描ID: {report.scan_id}",
            f"扫描时间: {report.timestamp.strftime(_TIMESTAMP_FORMAT)}",
            f"扫描耗时: {_format_duration(report.scan_duration)}",
            "",
            "=== 扫描摘要 ===",
            f"总文件数: {summary.total_files}",
            f"已扫描文件: {summary.scanned_files}",
            f"发现问题: {summary.issues_found}",
            f"严重问题: {summary.critical_issues}",
            f"高危问题: {summary.high_issues}",
            f"中危问题: {summary.medium_issues}",
            f"低危问题: {summary.low_issues}",
            "",
            "=== 性能统计 ===",
            f"总扫描时间: {_format_duration(stats.total_time)}",
            f"平均文件扫描时间: {_format_duration(stats.average_time)}",
            f"文件扫描速度: {stats.files_per_sec:.2f} 文件/秒",
            "",
        ]
        if report.issues:
            lines.append("=== 问题详情 ===")
            for number, issue in enumerate(report.issues, start=1):
                lines += [
                    f"{number}. [{issue.severity}] {issue.type}",
                    f"   文件: {issue.file}:{issue.line}:{issue.column}",
                    f"   描述: {issue.message}",
                    f"   代码: {issue.snippet}",
                    f"   建议: {issue.recommendation}",
                    f"   置信度: {issue.confidence:.2f}",
                    "",
                ]
        else:
            lines += ["=== 扫描结果 ===", "未发现安全问题"]
        return ("\n".join(lines) + "\n").encode("utf-8")

    def supported_formats(self) -> list[str]:
        """Names of the report formats this reporter knows."""
        return ["text", "json", "xml", "html"]


class SecurityManager:
    """Pairs a scanner with a reporter."""

    def __init__(self, config: SecurityConfig) -> None:
        self.scanner = SecurityScanner(config)
        self.reporter = SecurityReporter()

    def run_scan(self, path: str) -> SecurityReport:
        """Scan ``path`` with the managed scanner."""
        return self.scanner.scan(path)

    def generate_report(self, report: SecurityReport) -> bytes:
        """Render ``report`` with the managed reporter."""
        return self.reporter.generate(report)