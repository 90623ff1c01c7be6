"""Tests for the workspace directory inventory."""

from tenex_tasks.inventory import list_projects


class TestListProjects:
    def test_lists_directories_only(self, workspace):
        (workspace / "Shipyard-rux5kf").mkdir()
        (workspace / "Backend-ab12").mkdir()
        (workspace / "notes.txt").write_text("not a project")

        assert sorted(list_projects(workspace)) == ["Backend-ab12", "Shipyard-rux5kf"]

    def test_skips_hidden_directories(self, workspace):
        (workspace / ".git").mkdir()
        (workspace / "Shipyard-rux5kf").mkdir()

        assert list_projects(workspace) == ["Shipyard-rux5kf"]

    def test_empty_root(self, workspace):
        assert list_projects(workspace) == []

    def test_missing_root(self, tmp_path, caplog):
        assert list_projects(tmp_path / "missing") == []
        assert "Error reading project directories" in caplog.text
