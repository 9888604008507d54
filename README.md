# codectxgen

Helpers for collecting code context, and a small pattern-based security
scanner for source files and directory trees. The package has no
dependencies outside the standard library.

## Installation

```
pip install codectxgen
```

## Modules

- `codectxgen.textutils`: `truncate_string`, `pad_string`, `pad_left`,
  `pad_center`, `remove_duplicates`, `split_lines`, `join_lines`,
  `count_lines`, and `normalize_line_endings` /
  `normalize_line_endings_bytes`, which convert line breaks to CRLF on
  Windows and to LF elsewhere.
- `codectxgen.timeutils`: `format_duration` (for example `"1.5m"`),
  `parse_time` (RFC 3339, `YYYY-MM-DD HH:MM:SS`, `YYYY-MM-DD`, `HH:MM:SS`,
  `YYYY/MM/DD`; raises `ValueError` otherwise) and `format_file_size`
  (for example `"1.5 KB"`).
- `codectxgen.validation`: `is_valid_filename`, `is_valid_path` and
  `safe_path_join`, which raises `ValueError` for an element containing
  `..` or a result outside the base.
- `codectxgen.regexutils`: `match_pattern`, `find_matches` and
  `replace_pattern` (groups referenced as `$1`, `$name` or `${name}`);
  invalid patterns raise `ValueError`.
- `codectxgen.paths`: `normalize_path`, `get_relative_path`,
  `get_absolute_path`, `is_sub_path` and `get_common_path`.
- `codectxgen.charsets`: `detect_encoding` returns an encoding name
  (`utf-8`, `utf-16le`, `utf-16be`, `gbk` or `ansi`) and the bytes with any
  byte-order mark removed; `convert_to_utf8` decodes them;
  `get_encoding_decoder` returns a `codecs.CodecInfo`.
- `codectxgen.files`: `file_exists`, `directory_exists`, `get_file_hash`
  (MD5 hex digest), `get_file_size`, `get_file_mod_time`, `is_text_file`,
  `is_binary_file`, and `read_file_content` /
  `read_file_content_with_encoding`, which return `(text, is_binary)`,
  raise `ValueError` when a positive size limit is exceeded, and give the
  placeholder text `[二进制文件]` for binary files.
- `codectxgen.colors`: the `Color` enum and `colorize`, `error_color`,
  `success_color`, `warning_color`, `info_color`.
- `codectxgen.constants`: default values, limits, supported format names
  and default exclude patterns.
- `codectxgen.models`, `codectxgen.git_models`, `codectxgen.security_types`:
  data classes for file trees, configuration, git information, security
  findings and reports, plus `AppError` with its `ErrorType`.
- `codectxgen.detectors`: `CredentialsDetector`, `SQLInjectionDetector`,
  `XSSDetector`, `PathTraversalDetector`, `QualityDetector` and a
  `DetectorRegistry` preloaded with all of them.
- `codectxgen.scanner`: `SecurityScanner`, `SecurityReporter`,
  `SecurityManager` and `generate_scan_id`.
- `codectxgen.integration`: `SecurityIntegration`, which scans only when
  the configuration has `enabled=True`.

## Scanning

```python
from codectxgen.security_types import SecurityConfig
from codectxgen.scanner import SecurityManager

manager = SecurityManager(SecurityConfig(enabled=True))
report = manager.run_scan("path/to/project")
print(manager.generate_report(report).decode("utf-8"))
```

`SecurityScanner.scan` accepts a file or a directory. In a directory it
visits files with a supported extension, skipping paths that contain an
entry of `config.exclusions.files` or whose name matches a glob in
`config.exclusions.patterns`. Detectors run only for the languages they
support (Go, Python, JavaScript/TypeScript, Java, PHP, Ruby). When a scan
finds high-severity issues but no critical one, the first high-severity
issue is raised to critical in the report.

Scanning a selection of files and printing a summary:

```python
from codectxgen.security_types import SecurityConfig
from codectxgen.integration import SecurityIntegration

integration = SecurityIntegration(SecurityConfig(enabled=True))
report = integration.scan_files(["app.py", "db.go"])
integration.print_summary(report)
if integration.has_critical_issues(report):
    raise SystemExit(1)
```

Files that cannot be read are skipped. `generate_report(report, path)`
writes the text report to `path`, or prints it when `path` is empty or
`None`.

Detectors can also run on their own:

```python
from codectxgen.detectors import DetectorRegistry

registry = DetectorRegistry()
for detector in registry.detectors_for_language("python"):
    for issue in detector.detect("example.py", 'password = "password"'):
        print(issue.line, issue.type, issue.message)
```

## What the package does not do

- It has no command-line tool; everything is used from Python.
- It does not walk a project to produce context documents, and it writes
  no XML, JSON, TOML or Markdown output. The configuration data classes in
  `codectxgen.models` describe such settings, but nothing in the package
  loads configuration files or acts on them.
- It does not read git repositories; `codectxgen.git_models` only holds
  the data types.
- Reports are plain text only. `SecurityReporter.supported_formats()`
  lists `text`, `json`, `xml` and `html`, but `generate` always renders
  text.