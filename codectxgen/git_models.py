"""Data types describing git repository information and statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class CommitInfo:
    """A single commit."""

    hash: str = ""
    author: str = ""
    email: str = ""
    date: Optional[datetime] = None
    message: str = ""
    files: list[str] = field(default_factory=list)
    insertions: int = 0
    deletions: int = 0


@dataclass
class GitInfo:
    """Basic facts about a repository."""

    is_git_repo: bool = False
    repository_path: str = ""
    current_branch: str = ""
    remote_url: str = ""
    commit_count: int = 0
    last_commit: Optional[CommitInfo] = None


@dataclass
class TimeRange:
    """A span of time between two instants."""

    start: Optional[datetime] = None
    end: Optional[datetime] = None


@dataclass
class GitHistory:
    """A list of commits with their contributors and time span."""

    commits: list[CommitInfo] = field(default_factory=list)
    total_commits: int = 0
    time_range: TimeRange = field(default_factory=TimeRange)
    contributors: list[str] = field(default_factory=list)


@dataclass
class FileDiff:
    """Changes made to one file; status is added, modified or deleted."""

    file_path: str = ""
    status: str = ""
    insertions: int = 0
    deletions: int = 0
    diff: str = ""


@dataclass
class CommitDiff:
    """The file changes of one commit."""

    commit_hash: str = ""
    files: list[FileDiff] = field(default_factory=list)
    total_changes: int = 0


@dataclass
class CommitStats:
    """Aggregate commit figures."""

    total_commits: int = 0
    avg_commits_per_day: float = 0.0
    busiest_day: str = ""


@dataclass
class AuthorStat:
    """Contribution figures of one author."""

    name: str = ""
    commits: int = 0
    changes: int = 0
    percentage: float = 0.0


@dataclass
class FileStat:
    """Change figures of one file."""

    file_path: str = ""
    changes: int = 0
    insertions: int = 0
    deletions: int = 0


@dataclass
class GitStats:
    """Repository statistics over a period."""

    time_period: TimeRange = field(default_factory=TimeRange)
    commit_stats: CommitStats = field(default_factory=CommitStats)
    author_stats: list[AuthorStat] = field(default_factory=list)
    file_stats: list[FileStat] = field(default_factory=list)
    activity_heatmap: dict[str, int] = field(default_factory=dict)


@dataclass
class GitStatsConfig:
    """Statistics settings; time_period is a span such as 1y, 6m or 30d."""

    enabled: bool = False
    time_period: str = ""
    authors_top: int = 0
    files_top: int = 0


@dataclass
class GitFilters:
    """Restrictions on which commits are considered."""

    authors: list[str] = field(default_factory=list)
    paths: list[str] = field(default_factory=list)
    since: str = ""
    until: str = ""


@dataclass
class GitIntegrationConfig:
    """Settings for including git data; diff_format is unified, context or raw."""

    enabled: bool = False
    include_logs: bool = False
    log_count: int = 0
    include_diffs: bool = False
    diff_format: str = ""
    stats: GitStatsConfig = field(default_factory=GitStatsConfig)
    filters: GitFilters = field(default_factory=GitFilters)


@dataclass
class GitIntegrationData:
    """Git data attached to a generated context; absent parts are None."""

    git_info: Optional[GitInfo] = None
    git_history: Optional[GitHistory] = None
    git_diffs: list[CommitDiff] = field(default_factory=list)
    git_stats: Optional[GitStats] = None