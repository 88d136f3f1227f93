from habit_tracker.dates import parse_day_key, shift_day_key
from habit_tracker.models import CATEGORIES, CATEGORY_COLORS


def is_done(habit, day):
    return habit.is_done(day)


def completion_ratio(habits, day):
    if not habits:
        return 0.0
    done = sum(1 for habit in habits if habit.is_done(day))
    return done / len(habits)


def completion_percent(habits, day):
    # halves round up, so 1 of 8 shows 13%
    return int(completion_ratio(habits, day) * 100 + 0.5)


def category_completion_counts(habits, day, categories=CATEGORIES):
    counts = {category: 0 for category in categories}
    for habit in habits:
        if habit.category in counts and habit.is_done(day):
            counts[habit.category] += 1
    return counts


def category_chart_data(habits, day):
    return [
        {"name": category.value, "value": count, "color": CATEGORY_COLORS[category]}
        for category, count in category_completion_counts(habits, day).items()
    ]


def streak(habit, today):
    """Days in a row, ending with ``today``, on which the habit was done."""
    parse_day_key(today)
    count = 0
    day = today
    while habit.is_done(day):
        count += 1
        day = shift_day_key(day, -1)
    return count


def history_rows(habit, days):
    return [(day, habit.is_done(day)) for day in days]
