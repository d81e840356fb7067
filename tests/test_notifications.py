"""Tests for notification detection and message formatting."""

from datetime import date

import pytest

from budgeteer.notifications import (
    EmptyPlanRecordsNotification,
    EmptyWorkRecordsNotification,
    MissingBudgetTotalNotification,
    MissingContractForBudgetNotification,
    MissingDailyRateForBudgetNotification,
    MissingDailyRateNotification,
    describe,
    format_notification,
    get_notifications_for_budget,
    get_notifications_for_project,
)


class TestFormatting:
    def test_missing_daily_rate_formats_dates(self):
        message = format_notification(
            MissingDailyRateNotification(1, "Alice", date(2024, 3, 1), date(2024, 3, 15))
        )
        assert "Alice" in message
        assert "01.03.2024" in message
        assert "15.03.2024" in message

    def test_missing_budget_total(self):
        message = format_notification(MissingBudgetTotalNotification(2, "Design"))
        assert "Design" in message

    def test_missing_daily_rate_for_budget(self):
        message = format_notification(
            MissingDailyRateForBudgetNotification(2, "Design", date(2024, 1, 2), date(2024, 1, 3))
        )
        assert "Design" in message
        assert "02.01.2024" in message

    @pytest.mark.parametrize("notification", [
        EmptyWorkRecordsNotification(),
        EmptyPlanRecordsNotification(),
        MissingContractForBudgetNotification(1, "Backend"),
    ])
    def test_every_variant_has_a_message(self, notification):
        assert format_notification(notification)

    def test_unknown_variant_is_a_programming_error(self):
        with pytest.raises(AssertionError):
            format_notification(object())


class TestProjectNotifications:
    def test_empty_project(self, memory_db, seed_project):
        found = get_notifications_for_project(memory_db, seed_project)
        assert found == [EmptyWorkRecordsNotification(), EmptyPlanRecordsNotification()]

    def test_budget_problems_in_name_order(self, memory_db, seed_records):
        found = get_notifications_for_project(memory_db, 1)
        assert found == [
            MissingContractForBudgetNotification(1, "Backend"),
            MissingBudgetTotalNotification(2, "Design"),
            MissingContractForBudgetNotification(2, "Design"),
        ]

    def test_work_without_daily_rate(self, memory_db, seed_records):
        memory_db.executemany(
            "INSERT INTO work_records (person_id, budget_id, date, minutes, daily_rate_cents) "
            "VALUES (2, 1, ?, 60, 0)",
            [("2024-03-01",), ("2024-03-04",)],
        )
        found = get_notifications_for_project(memory_db, 1)
        assert MissingDailyRateNotification(2, "Bob", date(2024, 3, 1), date(2024, 3, 4)) in found

    def test_budget_with_contract_and_total_is_quiet(self, memory_db, seed_records):
        memory_db.execute("INSERT INTO contracts (id, project_id, name) VALUES (1, 1, 'Main')")
        memory_db.execute("UPDATE budgets SET contract_id = 1, total_cents = 100")
        found = get_notifications_for_project(memory_db, 1)
        assert found == []


class TestBudgetNotifications:
    def test_missing_rate_for_budget(self, memory_db, seed_records):
        memory_db.execute(
            "INSERT INTO work_records (person_id, budget_id, date, minutes, daily_rate_cents) "
            "VALUES (1, 2, '2024-03-02', 60, 0)"
        )
        found = get_notifications_for_budget(memory_db, 2)
        assert found[0] == MissingDailyRateForBudgetNotification(
            2, "Design", date(2024, 3, 2), date(2024, 3, 2)
        )
        assert MissingBudgetTotalNotification(2, "Design") in found

    def test_unknown_budget(self, memory_db):
        assert get_notifications_for_budget(memory_db, 42) == []


def test_describe(memory_db, seed_project):
    described = describe(get_notifications_for_project(memory_db, seed_project))
    assert [d["type"] for d in described] == [
        "EmptyWorkRecordsNotification",
        "EmptyPlanRecordsNotification",
    ]
    assert all(d["message"] for d in described)
