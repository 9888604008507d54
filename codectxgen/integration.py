"""Entry point that applies security scanning to projects or file lists."""

from __future__ import annotations

import sys
import time
from collections import Counter
from collections.abc import Sequence
from datetime import datetime, timedelta
from typing import Optional

from .scanner import (
    SecurityReporter,
    SecurityScanner,
    _extension,
    _format_duration,
    generate_scan_id,
)
from .security_types import (
    ScanSummary,
    SecurityConfig,
    SecurityReport,
    SeverityLevel,
)

_SCANNABLE_EXTENSIONS = frozenset(
    {
        ".go", ".py", ".js", ".ts", ".java", ".php", ".rb", ".cpp", ".c",
        ".cs", ".swift", ".rs", ".yml", ".yaml", ".json", ".xml", ".toml",
        ".ini", ".cfg", ".conf",
    }
)


class SecurityIntegration:
    """Runs security scans when enabled and reports their outcome."""

    def __init__(self, config: SecurityConfig) -> None:
        self.scanner = SecurityScanner(config)
        self.config = config
        self.enabled = config.enabled

    def scan_project(self, project_path: str) -> SecurityReport:
        """Scan a whole project; an empty report when scanning is disabled."""
        if not self.enabled:
            return SecurityReport(
                scan_id=generate_scan_id(),
                timestamp=datetime.now().astimezone(),
                summary=ScanSummary(),
                issues=[],
            )
        return self.scanner.scan(project_path)

    def scan_files(self, files: Sequence[str]) -> SecurityReport:
        """Scan each file of a supported type; unreadable files are skipped."""
        files = list(files)
        if not self.enabled:
            return SecurityReport(
                scan_id=generate_scan_id(),
                timestamp=datetime.now().astimezone(),
                scan_duration=timedelta(0),
                summary=ScanSummary(total_files=len(files)),
                issues=[],
            )

        start_time = datetime.now().astimezone()
        start = time.perf_counter()
        issues = []
        scanned = 0
        for file_path in files:
            if not self._is_supported_extension(file_path):
                continue
            try:
                file_report = self.scanner.scan(file_path)
            except OSError:
                continue
            issues.extend(file_report.issues)
            scanned += 1
        duration = timedelta(seconds=time.perf_counter() - start)

        counts = Counter(issue.severity for issue in issues)
        summary = ScanSummary(
            total_files=len(files),
            scanned_files=scanned,
            issues_found=len(issues),
            critical_issues=counts[SeverityLevel.CRITICAL],
            high_issues=counts[SeverityLevel.HIGH],
            medium_issues=counts[SeverityLevel.MEDIUM],
            low_issues=counts[SeverityLevel.LOW],
        )
        return SecurityReport(
            scan_id=generate_scan_id(),
            timestamp=start_time,
            scan_duration=duration,
            summary=summary,
            issues=issues,
        )

    @staticmethod
    def _is_supported_extension(file_path: str) -> bool:
        return _extension(file_path).lower() in _SCANNABLE_EXTENSIONS

    def generate_report(self, report: SecurityReport, output_path: Optional[str]) -> None:
        """Write the text report to ``output_path``, or print it when none is given."""
        if not self.enabled:
            return
        data = SecurityReporter().generate(report)
        if output_path:
            with open(output_path, "wb") as handle:
                handle.write(data)
            return
        sys.stdout.write(data.decode("utf-8"))

    def has_critical_issues(self, report: SecurityReport) -> bool:
        """True if scanning is enabled and the report holds a high or critical issue."""
        if not self.enabled:
            return False
        return any(
            issue.severity in (SeverityLevel.CRITICAL, SeverityLevel.HIGH)
            for issue in report.issues
        )

    def print_summary(self, report: SecurityReport) -> None:
        """Print a short summary of ``report`` when scanning is enabled."""
        if not self.enabled:
            return
        summary = report.summary
        print("\n🔒 安全扫描完成")
        print("📊 扫描摘要:")
        print(f"  📁 扫描文件: {summary.scanned_files}")
        print(f"  🔍 发现问题: {summary.issues_found}")
        print(f"  ⚠️  严重问题: {summary.critical_issues}")
        print(f"  🔴 高危问题: {summary.high_issues}")
        print(f"  🟡 中危问题: {summary.medium_issues}")
        print(f"  🟢 低危问题: {summary.low_issues}")
        print(f"  ⏱️  扫描时间: {_format_duration(report.scan_duration)}")
        print(f"  📅 扫描时间: {report.timestamp.strftime('%Y-%m-%d %H:%M:%S')}")
        if summary.issues_found > 0:
            print("\n💡 建议查看详细报告以了解具体问题")