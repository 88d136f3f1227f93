import logging

from flask import Flask, abort, current_app, jsonify, redirect, render_template, request, url_for

from habit_tracker.config import AppConfig
from habit_tracker.dates import last_n_days, today_key
from habit_tracker.errors import InvalidCategoryError, InvalidDayKeyError, InvalidFilterError, StorageWriteError
from habit_tracker.filters import apply_filters
from habit_tracker.models import CATEGORIES, CATEGORY_COLORS
from habit_tracker.storage import JsonFileStorage
from habit_tracker.store import HabitStore
from habit_tracker.views import category_chart_data, completion_percent, history_rows, streak

logger = logging.getLogger(__name__)


def create_app(config=None, storage=None):
    config = config or AppConfig()
    if storage is None:
        storage = JsonFileStorage(config.storage.path, config.storage.key)

    app = Flask(__name__, template_folder="templates")
    app.config["HABITS"] = config
    app.extensions["habit_store"] = HabitStore(storage, tz=config.timezone)

    register_routes(app)
    return app


def get_store():
    return current_app.extensions["habit_store"]


def get_today():
    return today_key(current_app.config["HABITS"].timezone)


VIEW_ARGS = ("status", "category", "expanded")


def view_args():
    """Filter and expansion state to carry across a POST-redirect."""
    return {name: request.args[name] for name in VIEW_ARGS if request.args.get(name)}


def filtered_habits(today):
    status = request.args.get("status", "all")
    category = request.args.get("category", "all")
    try:
        habits = apply_filters(get_store().habits, status, category, today)
    except InvalidFilterError as e:
        abort(400, description=str(e))
    return habits, status, category


def register_routes(app):
    @app.errorhandler(StorageWriteError)
    def storage_write_failed(error):
        logger.error("Saving habits failed: %s", error)
        return "Could not save habits", 500

    @app.route("/", methods=["GET"])
    def index():
        today = get_today()
        habits, status, category = filtered_habits(today)
        expanded = request.args.get("expanded")
        history_days = last_n_days(current_app.config["HABITS"].history_days, today)

        rows = []
        for habit in habits:
            rows.append({
                "habit": habit,
                "color": CATEGORY_COLORS[habit.category],
                "done": habit.is_done(today),
                "streak": streak(habit, today),
                "history": history_rows(habit, history_days) if habit.id == expanded else None,
            })

        all_habits = get_store().habits
        return render_template(
            "index.html",
            rows=rows,
            categories=CATEGORIES,
            status=status,
            category=category,
            expanded=expanded,
            view_args=view_args(),
            now_date=today,
            percent=completion_percent(all_habits, today),
            chart=category_chart_data(all_habits, today),
        )

    @app.route("/add", methods=["POST"])
    def add():
        name = request.form.get("name", "")
        category = request.form.get("category", CATEGORIES[0].value)
        try:
            get_store().add(name, category)
        except InvalidCategoryError as e:
            abort(400, description=str(e))
        return redirect(url_for("index", **view_args()))

    @app.route("/delete/<habit_id>", methods=["POST"])
    def delete(habit_id):
        get_store().remove(habit_id)
        return redirect(url_for("index", **view_args()))

    @app.route("/done/<habit_id>", methods=["POST"])
    def mark_done(habit_id):
        day = request.form.get("day") or get_today()
        try:
            get_store().toggle_day(habit_id, day)
        except InvalidDayKeyError as e:
            abort(400, description=str(e))
        return redirect(url_for("index", **view_args()))

    @app.route("/api/habits", methods=["GET"])
    def api_habits():
        today = get_today()
        habits, status, category = filtered_habits(today)
        all_habits = get_store().habits
        return jsonify({
            "today": today,
            "status": status,
            "category": category,
            "percent": completion_percent(all_habits, today),
            "chart": category_chart_data(all_habits, today),
            "habits": [
                dict(habit.to_dict(), streak=streak(habit, today), doneToday=habit.is_done(today))
                for habit in habits
            ],
        })
