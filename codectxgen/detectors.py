"""Line-based detectors for credentials, injection, XSS, traversal and quality problems."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import Optional

from .security_types import SecurityDetector, SecurityIssue, SeverityLevel

_COMMON_LANGUAGES = ("go", "python", "javascript", "java", "php", "ruby")


class BaseDetector:
    """Name and supported languages shared by every detector."""

    def __init__(self, name: str, supported_languages: Iterable[str]) -> None:
        self.name = name
        self.supported_languages = list(supported_languages)

    def _scan(
        self,
        file_path: str,
        content: str,
        patterns: Sequence[re.Pattern],
        *,
        one_per_line: bool,
        issue_id: str,
        issue_type: str,
        severity: SeverityLevel,
        message: str,
        recommendation: str,
        confidence: float,
    ) -> list[SecurityIssue]:
        """Report every pattern match per line, or only the first when ``one_per_line``."""
        issues: list[SecurityIssue] = []
        for number, line in enumerate(content.split("\n"), start=1):
            for pattern in patterns:
                match = pattern.search(line)
                if match is None:
                    continue
                issues.append(
                    SecurityIssue(
                        id=issue_id,
                        type=issue_type,
                        severity=severity,
                        message=message,
                        file=file_path,
                        line=number,
                        column=line.find(match.group(0)) + 1,
                        snippet=line.strip(),
                        recommendation=recommendation,
                        confidence=confidence,
                    )
                )
                if one_per_line:
                    break
        return issues


class CredentialsDetector(BaseDetector):
    """Finds credentials assigned as string literals."""

    _PATTERNS = tuple(
        re.compile(p, re.IGNORECASE)
        for p in (
            r"""(password|passwd|pwd)\s*=\s*['"][^'"]+['"]""",
            r"""(api[_-]?key|apikey)\s*=\s*['"][^'"]+['"]""",
            r"""(secret|token)\s*=\s*['"][^'"]+['"]""",
            r"""(aws[_-]?access[_-]?key|aws[_-]?secret[_-]?key)\s*=\s*['"][^'"]+['"]""",
            r"""(database|db)[_-]?(password|passwd)\s*=\s*['"][^'"]+['"]""",
        )
    )

    def __init__(self) -> None:
        super().__init__("hardcoded_credentials", _COMMON_LANGUAGES)

    def detect(self, file_path: str, content: str) -> list[SecurityIssue]:
        """At most one finding per line holding a hard-coded credential."""
        return self._scan(
            file_path,
            content,
            self._PATTERNS,
            one_per_line=True,
            issue_id="CREDENTIALS_001",
            issue_type="HardcodedCredentials",
            severity=SeverityLevel.HIGH,
            message="检测到硬编码的敏感凭证信息",
            recommendation="使用环境变量或安全的配置管理系统存储敏感信息",
            confidence=0.85,
        )


class SQLInjectionDetector(BaseDetector):
    """Finds SQL built by string concatenation or formatting."""

    _PATTERNS = tuple(
        re.compile(p, re.IGNORECASE)
        for p in (
            r"(SELECT|INSERT|UPDATE|DELETE).*\+.*",
            r"fmt\.Sprintf",
            r"query\(.*\+.*",
            r"exec\(.*\+.*",
        )
    )

    def __init__(self) -> None:
        super().__init__("sql_injection", _COMMON_LANGUAGES)

    def detect(self, file_path: str, content: str) -> list[SecurityIssue]:
        """At most one finding per line that looks like an injectable query."""
        return self._scan(
            file_path,
            content,
            self._PATTERNS,
            one_per_line=True,
            issue_id="SQL_INJECTION_001",
            issue_type="SQLInjection",
            severity=SeverityLevel.HIGH,
            message="检测到可能的SQL注入漏洞",
            recommendation="使用参数化查询或预编译语句来防止SQL注入",
            confidence=0.75,
        )


class XSSDetector(BaseDetector):
    """Finds DOM writes and dynamic code evaluation."""

    _PATTERNS = tuple(
        re.compile(p, re.IGNORECASE)
        for p in (
            r"innerHTML\s*=\s*",
            r"document\.write\(",
            r"eval\(",
            r"setTimeout\(.*\+",
            r"setInterval\(.*\+",
        )
    )

    def __init__(self) -> None:
        super().__init__("xss_vulnerabilities", _COMMON_LANGUAGES)

    def detect(self, file_path: str, content: str) -> list[SecurityIssue]:
        """One finding for every matching pattern on every line."""
        return self._scan(
            file_path,
            content,
            self._PATTERNS,
            one_per_line=False,
            issue_id="XSS_001",
            issue_type="XSSVulnerability",
            severity=SeverityLevel.MEDIUM,
            message="检测到可能的XSS漏洞",
            recommendation="对用户输入进行适当的转义和验证",
            confidence=0.70,
        )


class PathTraversalDetector(BaseDetector):
    """Finds relative parent references and concatenated file paths."""

    _PATTERNS = tuple(
        re.compile(p, re.IGNORECASE)
        for p in (
            r"\.\./",
            r"\.\.\\\\",
            r"file:.*\+",
            r"open\(.*\+",
            r"readFile\(.*\+",
        )
    )

    def __init__(self) -> None:
        super().__init__("path_traversal", _COMMON_LANGUAGES)

    def detect(self, file_path: str, content: str) -> list[SecurityIssue]:
        """One finding for every matching pattern on every line."""
        return self._scan(
            file_path,
            content,
            self._PATTERNS,
            one_per_line=False,
            issue_id="PATH_TRAVERSAL_001",
            issue_type="PathTraversal",
            severity=SeverityLevel.HIGH,
            message="检测到可能的路径遍历漏洞",
            recommendation="对文件路径进行规范化处理，并限制访问范围",
            confidence=0.80,
        )


class QualityDetector(BaseDetector):
    """Finds unused variables and commented-out error handling."""

    _DECLARATION = re.compile(r"(var|let|const)\s+(\w+)\s*=", re.IGNORECASE | re.ASCII)

    def __init__(self) -> None:
        super().__init__("code_quality", _COMMON_LANGUAGES)

    def detect(self, file_path: str, content: str) -> list[SecurityIssue]:
        """Findings for variables named only once and for ignored errors."""
        issues: list[SecurityIssue] = []
        for number, line in enumerate(content.split("\n"), start=1):
            match = self._DECLARATION.search(line)
            if match is not None:
                var_name = match.group(2)
                if content.count(var_name) <= 1:
                    issues.append(
                        SecurityIssue(
                            id="QUALITY_001",
                            type="UnusedVariable",
                            severity=SeverityLevel.LOW,
                            message="检测到未使用的变量",
                            file=file_path,
                            line=number,
                            column=line.find(var_name) + 1,
                            snippet=line.strip(),
                            recommendation="移除未使用的变量或确保其被正确使用",
                            confidence=0.65,
                        )
                    )
            if "//" in line and "错误" in line and "忽略" in line:
                issues.append(
                    SecurityIssue(
                        id="QUALITY_002",
                        type="IncompleteErrorHandling",
                        severity=SeverityLevel.MEDIUM,
                        message="检测到不完整的错误处理",
                        file=file_path,
                        line=number,
                        column=1,
                        snippet=line.strip(),
                        recommendation="确保错误被正确处理，避免忽略错误",
                        confidence=0.70,
                    )
                )
        return issues


class DetectorRegistry:
    """Detectors by name, preloaded with every built-in detector."""

    def __init__(self) -> None:
        self._detectors: dict[str, SecurityDetector] = {}
        for detector in (
            CredentialsDetector(),
            SQLInjectionDetector(),
            XSSDetector(),
            PathTraversalDetector(),
            QualityDetector(),
        ):
            self.register(detector)

    def register(self, detector: SecurityDetector) -> None:
        """Add ``detector``, replacing any detector of the same name."""
        self._detectors[detector.name] = detector

    def get(self, name: str) -> Optional[SecurityDetector]:
        """The detector called ``name``, or None."""
        return self._detectors.get(name)

    def all_detectors(self) -> list[SecurityDetector]:
        """Every registered detector."""
        return list(self._detectors.values())

    def detectors_for_language(self, language: str) -> list[SecurityDetector]:
        """Detectors supporting ``language``, compared without regard to case."""
        wanted = language.casefold()
        return [
            detector
            for detector in self._detectors.values()
            if any(lang.casefold() == wanted for lang in detector.supported_languages)
        ]