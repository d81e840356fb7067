"""Tests for the top-level CLI assembly and module sub-commands."""

from budgeteer.cli.main import app


def test_main_app_help(cli_runner):
    result = cli_runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Budget tracking" in result.output


def test_version_output(cli_runner):
    result = cli_runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_unknown_command(cli_runner):
    result = cli_runner.invoke(app, ["nonexistent"])
    assert result.exit_code != 0


def test_sub_apps_registered(cli_runner):
    result = cli_runner.invoke(app, ["--help"])
    assert "projects" in result.output
    assert "stats" in result.output


def test_migrate(cli_runner, monkeypatch, tmp_path):
    monkeypatch.setenv("BUDGETEER_DATABASE", str(tmp_path / "cli.db"))
    result = cli_runner.invoke(app, ["migrate"])
    assert result.exit_code == 0
    assert "migration complete" in result.output
    assert (tmp_path / "cli.db").exists()


class TestProjectsCommands:
    def test_list_empty(self, cli_runner, mock_db):
        result = cli_runner.invoke(app, ["projects", "list"])
        assert result.exit_code == 0
        assert "No projects found" in result.output

    def test_create_then_list(self, cli_runner, mock_db):
        assert cli_runner.invoke(app, ["projects", "create", "Apollo"]).exit_code == 0
        result = cli_runner.invoke(app, ["projects", "list"])
        assert "Apollo" in result.output
        assert "1 project(s)" in result.output

    def test_add_budget_and_person_and_book(self, cli_runner, mock_db, seed_project):
        result = cli_runner.invoke(
            app, ["projects", "add-budget", "1", "Backend", "--total", "1000", "--tag", "dev"]
        )
        assert result.exit_code == 0
        assert mock_db.execute("SELECT total_cents FROM budgets").fetchone()[0] == 1000_00

        assert cli_runner.invoke(app, ["projects", "add-person", "1", "Alice", "--rate", "800"]).exit_code == 0
        result = cli_runner.invoke(
            app, ["projects", "book", "1", "1", "240", "--date", "2024-03-06", "--rate", "800"]
        )
        assert result.exit_code == 0
        row = mock_db.execute("SELECT * FROM work_records").fetchone()
        assert row["minutes"] == 240
        assert row["daily_rate_cents"] == 800_00

    def test_book_plan_record(self, cli_runner, mock_db, seed_people, seed_budgets):
        result = cli_runner.invoke(app, ["projects", "book", "1", "1", "60", "--plan"])
        assert result.exit_code == 0
        assert mock_db.execute("SELECT COUNT(*) FROM plan_records").fetchone()[0] == 1

    def test_book_negative_minutes(self, cli_runner, mock_db, seed_people, seed_budgets):
        result = cli_runner.invoke(app, ["projects", "book", "1", "1", "--", "-5"])
        assert result.exit_code == 1


class TestStatsCommands:
    def test_weekly_burn(self, cli_runner, mock_db, seed_project):
        result = cli_runner.invoke(app, ["stats", "weekly-burn", "1", "--weeks", "3"])
        assert result.exit_code == 0
        assert result.output.count("0.00 EUR") == 6

    def test_budget_stats(self, cli_runner, mock_db, seed_budgets):
        result = cli_runner.invoke(app, ["stats", "budget", "1", "--count", "2", "--monthly"])
        assert result.exit_code == 0
        assert "Target" in result.output

    def test_budget_stats_zero_periods(self, cli_runner, mock_db, seed_budgets):
        result = cli_runner.invoke(app, ["stats", "budget", "1", "--count", "0"])
        assert result.exit_code == 0
        assert "Target" in result.output
        assert not any(ch.isdigit() for ch in result.output)

    def test_notifications(self, cli_runner, mock_db, seed_project):
        result = cli_runner.invoke(app, ["stats", "notifications", "1"])
        assert result.exit_code == 0
        assert "[EmptyWorkRecordsNotification]" in result.output
