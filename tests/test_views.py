from habit_tracker.models import Category
from habit_tracker.views import (
    category_chart_data,
    category_completion_counts,
    completion_percent,
    completion_ratio,
    history_rows,
    is_done,
    streak,
)


def test_completion_ratio_empty(today):
    assert completion_ratio([], today) == 0
    assert completion_percent([], today) == 0


def test_completion_ratio(make_habit, today):
    habits = [make_habit("a", days=[today]), make_habit("b"), make_habit("c", days=[today])]
    assert completion_ratio(habits, today) == 2 / 3
    assert completion_percent(habits, today) == 67
    assert completion_ratio(habits, "2026-10-18") == 0


def test_category_counts_include_empty_categories(make_habit, today):
    habits = [
        make_habit("a", category=Category.WORK, days=[today]),
        make_habit("b", category=Category.WORK, days=[today]),
        make_habit("c", category=Category.HEALTH),
    ]
    counts = category_completion_counts(habits, today)
    assert counts == {Category.HEALTH: 0, Category.WORK: 2, Category.LEARNING: 0}
    assert list(counts) == [Category.HEALTH, Category.WORK, Category.LEARNING]


def test_category_counts_for_subset(make_habit, today):
    habits = [make_habit("a", category=Category.WORK, days=[today])]
    assert category_completion_counts(habits, today, [Category.LEARNING]) == {Category.LEARNING: 0}


def test_category_chart_data(make_habit, today):
    habits = [make_habit("a", category=Category.LEARNING, days=[today])]
    assert category_chart_data(habits, today) == [
        {"name": "Health", "value": 0, "color": "#34d399"},
        {"name": "Work", "value": 0, "color": "#3b82f6"},
        {"name": "Learning", "value": 1, "color": "#facc15"},
    ]


def test_streak_counts_unbroken_run(make_habit, today):
    habit = make_habit("a", days=["2026-10-17", "2026-10-18", today])
    assert streak(habit, today) == 3


def test_streak_stops_at_first_gap(make_habit, today):
    habit = make_habit("a", days=["2026-10-17", today])
    assert streak(habit, today) == 1


def test_streak_is_zero_without_today(make_habit, today):
    habit = make_habit("a", days=["2026-10-16", "2026-10-17", "2026-10-18"])
    assert streak(habit, today) == 0


def test_streak_across_month_boundary(make_habit):
    habit = make_habit("a", days=["2026-02-27", "2026-02-28", "2026-03-01"])
    assert streak(habit, "2026-03-01") == 3


def test_history_rows(make_habit):
    habit = make_habit("a", days=["2026-10-18"])
    days = ["2026-10-17", "2026-10-18", "2026-10-19"]
    assert history_rows(habit, days) == [
        ("2026-10-17", False),
        ("2026-10-18", True),
        ("2026-10-19", False),
    ]
    assert is_done(habit, "2026-10-18")


def test_completion_percent_rounds_halves_up(make_habit, today):
    habits = [make_habit(str(i)) for i in range(8)]
    one_done = [make_habit("x", days=[today])] + habits[1:]
    five_done = [make_habit(str(i), days=[today]) for i in range(5)] + habits[5:]
    assert completion_percent(one_done, today) == 13
    assert completion_percent(five_done, today) == 63
