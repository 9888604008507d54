import re
from datetime import datetime, timedelta

import pytest

from codectxgen.scanner import (
    SecurityManager,
    SecurityReporter,
    SecurityScanner,
    generate_scan_id,
)
from codectxgen.security_types import (
    ExclusionConfig,
    ScanStatistics,
    ScanSummary,
    SecurityConfig,
    SecurityIssue,
    SecurityReport,
    SeverityLevel,
)

CRED_LINE = 'password = "password"\n'


@pytest.fixture
def project(tmp_path):
    (tmp_path / "app.go").write_text("package main\n" + CRED_LINE)
    (tmp_path / "notes.txt").write_text(CRED_LINE)
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "clean.py").write_text("print(1)\n")
    return tmp_path


def _summary_consistent(report):
    s = report.summary
    return s.issues_found == len(report.issues) and (
        s.critical_issues + s.high_issues + s.medium_issues + s.low_issues
        == s.issues_found
    )


def test_scan_directory_finds_credentials(project):
    report = SecurityScanner(SecurityConfig()).scan(str(project))
    assert report.summary.total_files == 2
    assert report.summary.scanned_files == 2
    assert [i.id for i in report.issues] == ["CREDENTIALS_001"]
    issue = report.issues[0]
    assert issue.file == str(project / "app.go")
    assert issue.line == 2
    assert issue.severity == SeverityLevel.CRITICAL
    assert _summary_consistent(report)


def test_first_high_issue_is_escalated(tmp_path):
    (tmp_path / "cfg.py").write_text('password = "password"\ntoken = "token"\n')
    report = SecurityScanner(SecurityConfig()).scan(str(tmp_path))
    assert [i.severity for i in report.issues] == [
        SeverityLevel.CRITICAL,
        SeverityLevel.HIGH,
    ]
    assert report.summary.critical_issues == 1
    assert report.summary.high_issues == 1
    assert _summary_consistent(report)


def test_language_without_detectors_reports_nothing(tmp_path):
    (tmp_path / "main.c").write_text(CRED_LINE)
    report = SecurityScanner(SecurityConfig()).scan(str(tmp_path))
    assert report.summary.scanned_files == 1
    assert report.issues == []


def test_exclusion_by_pattern(project):
    config = SecurityConfig(exclusions=ExclusionConfig(patterns=["*.go"]))
    report = SecurityScanner(config).scan(str(project))
    assert report.summary.total_files == 1
    assert report.issues == []


def test_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        SecurityScanner(SecurityConfig()).scan(str(tmp_path / "missing"))


def test_single_file_scan(project):
    report = SecurityScanner(SecurityConfig()).scan(str(project / "app.go"))
    assert report.summary.total_files == 1
    assert report.issues[0].type == "HardcodedCredentials"


def test_empty_directory_has_zero_average(tmp_path):
    report = SecurityScanner(SecurityConfig()).scan(str(tmp_path))
    assert report.summary.total_files == 0
    assert report.statistics.average_time == timedelta(0)
    assert report.statistics.total_time == report.scan_duration


def test_report_carries_copy_of_config(project):
    config = SecurityConfig(scan_level="standard")
    report = SecurityScanner(config).scan(str(project))
    assert report.config == config
    assert report.config is not config


def test_generate_scan_id_is_random_hex():
    first, second = generate_scan_id(), generate_scan_id()
    assert re.fullmatch(r"[0-9a-f]{16}", first)
    assert first != second


def test_reporter_without_issues():
    report = SecurityReport(scan_id="abc", timestamp=datetime(2024, 1, 2, 3, 4, 5))
    text = SecurityReporter().generate(report).decode("utf-8")
    assert text.startswith("=== 安全扫描报告 ===\n")
    assert "扫描ID: abc\n" in text
    assert "扫描时间: 2024-01-02 03:04:05\n" in text
    assert "未发现安全问题" in text


def test_reporter_with_issue_and_durations():
    issue = SecurityIssue(
        id="CREDENTIALS_001",
        type="HardcodedCredentials",
        severity=SeverityLevel.CRITICAL,
        message="检测到硬编码的敏感凭证信息",
        file="app.go",
        line=2,
        column=1,
        snippet="x",
        recommendation="r",
        confidence=0.85,
    )
    report = SecurityReport(
        scan_id="id",
        scan_duration=timedelta(minutes=1, seconds=30),
        summary=ScanSummary(issues_found=1, critical_issues=1),
        issues=[issue],
        statistics=ScanStatistics(average_time=timedelta(milliseconds=500)),
    )
    text = SecurityReporter().generate(report).decode("utf-8")
    assert "1. [critical] HardcodedCredentials\n" in text
    assert "   文件: app.go:2:1\n" in text
    assert "   置信度: 0.85\n" in text
    assert "扫描耗时: 1m30s\n" in text
    assert "平均文件扫描时间: 500ms\n" in text
    assert "未发现安全问题" not in text


def test_supported_formats():
    assert SecurityReporter().supported_formats() == ["text", "json", "xml", "html"]


def test_manager_round_trip(project):
    manager = SecurityManager(SecurityConfig())
    report = manager.run_scan(str(project))
    text = manager.generate_report(report).decode("utf-8")
    assert f"扫描ID: {report.scan_id}\n" in text
    assert "HardcodedCredentials" in text