import dataclasses
from datetime import datetime, timezone

from codectxgen.git_models import (
    AuthorStat,
    CommitDiff,
    CommitInfo,
    CommitStats,
    FileDiff,
    FileStat,
    GitFilters,
    GitHistory,
    GitInfo,
    GitIntegrationConfig,
    GitIntegrationData,
    GitStats,
    GitStatsConfig,
    TimeRange,
)


def test_git_info_defaults():
    info = GitInfo()
    assert info.is_git_repo is False
    assert info.last_commit is None
    assert info.commit_count == 0


def test_git_info_holds_commit():
    when = datetime(2023, 1, 1, 12, tzinfo=timezone.utc)
    commit = CommitInfo(hash="abc", author="dev", email="dev@example.com", date=when)
    info = GitInfo(is_git_repo=True, last_commit=commit)
    assert info.last_commit.email == "dev@example.com"
    assert info.last_commit.date == when


def test_commit_info_lists_not_shared():
    a = CommitInfo()
    b = CommitInfo()
    a.files.append("main.go")
    assert b.files == []


def test_history_roundtrip_through_asdict():
    history = GitHistory(
        commits=[CommitInfo(hash="abc", files=["a.go"], insertions=3)],
        total_commits=1,
        contributors=["dev"],
    )
    data = dataclasses.asdict(history)
    rebuilt = GitHistory(
        commits=[CommitInfo(**c) for c in data["commits"]],
        total_commits=data["total_commits"],
        time_range=TimeRange(**data["time_range"]),
        contributors=data["contributors"],
    )
    assert rebuilt == history


def test_commit_diff_holds_files():
    diff = CommitDiff(
        commit_hash="abc",
        files=[FileDiff(file_path="a.go", status="modified", insertions=2, deletions=1)],
        total_changes=3,
    )
    assert diff.files[0].status == "modified"
    assert diff.total_changes == diff.files[0].insertions + diff.files[0].deletions


def test_git_stats_defaults_independent():
    a = GitStats()
    b = GitStats()
    a.activity_heatmap["Monday"] = 4
    a.author_stats.append(AuthorStat(name="dev"))
    a.file_stats.append(FileStat(file_path="a.go"))
    assert b.activity_heatmap == {}
    assert b.author_stats == []
    assert b.file_stats == []
    assert b.commit_stats == CommitStats()


def test_integration_config_nested_defaults():
    config = GitIntegrationConfig()
    assert config.stats == GitStatsConfig()
    assert config.filters == GitFilters()
    assert config.enabled is False


def test_integration_config_filters_not_shared():
    a = GitIntegrationConfig()
    b = GitIntegrationConfig()
    a.filters.authors.append("dev")
    a.stats.enabled = True
    assert b.filters.authors == []
    assert b.stats.enabled is False


def test_integration_config_replace():
    config = GitIntegrationConfig(diff_format="unified")
    changed = dataclasses.replace(config, include_logs=True, log_count=10)
    assert changed.diff_format == "unified"
    assert changed.log_count == 10
    assert config.include_logs is False


def test_integration_data_defaults():
    data = GitIntegrationData()
    assert data.git_info is None
    assert data.git_history is None
    assert data.git_stats is None
    assert data.git_diffs == []


def test_time_range_equality():
    start = datetime(2023, 1, 1, tzinfo=timezone.utc)
    end = datetime(2023, 2, 1, tzinfo=timezone.utc)
    assert TimeRange(start, end) == TimeRange(start=start, end=end)
    assert TimeRange(start, end) != TimeRange(end, start)