from datetime import date, timedelta

from taskboard.schemas.state import AppState, SearchFilters
from taskboard.services import board_engine as engine
from taskboard.services.due_dates import is_overdue, is_today, is_this_week, week_window
from taskboard.services.query_service import (
    board_summaries,
    columns_for_board,
    filter_tasks,
    group_by_column,
)

# Dimanche: la fenêtre de la semaine va du 12 au 18 mai 2024
SUNDAY = date(2024, 5, 12)


def build_board():
    result = engine.create_board(AppState(), "Board", "", "alice")
    board_id = result.entity_id
    result = engine.create_column(result.state, "To Do", board_id)
    todo = result.entity_id
    result = engine.create_column(result.state, "Done", board_id)
    done = result.entity_id
    return result.state, board_id, todo, done


def add(state, column_id, title, due, **fields):
    result = engine.create_task(state, column_id, title, due, **fields)
    return result.state, result.entity_id


def dated_board():
    state, board_id, todo, done = build_board()
    state, yesterday = add(state, todo, "yesterday", SUNDAY - timedelta(days=1))
    state, today = add(state, todo, "today", SUNDAY)
    state, soon = add(state, done, "in 3 days", SUNDAY + timedelta(days=3))
    state, later = add(state, done, "in 10 days", SUNDAY + timedelta(days=10))
    return state, board_id, {"yesterday": yesterday, "today": today, "soon": soon, "later": later}


# ========== DUE DATES ==========
def test_week_window_starts_on_sunday():
    assert week_window(SUNDAY) == (date(2024, 5, 12), date(2024, 5, 18))
    assert week_window(date(2024, 5, 15)) == (date(2024, 5, 12), date(2024, 5, 18))
    assert week_window(date(2024, 5, 18)) == (date(2024, 5, 12), date(2024, 5, 18))


def test_due_date_helpers():
    assert is_overdue(date(2024, 5, 11), SUNDAY)
    assert not is_overdue(SUNDAY, SUNDAY)
    assert is_today(SUNDAY, SUNDAY)
    assert not is_today(date(2024, 5, 13), SUNDAY)
    assert is_this_week(date(2024, 5, 18), SUNDAY)
    assert not is_this_week(date(2024, 5, 19), SUNDAY)
    assert not is_this_week(date(2024, 5, 11), SUNDAY)


# ========== FILTERS ==========
def test_filter_overdue():
    state, board_id, ids = dated_board()
    tasks = filter_tasks(state, board_id, SearchFilters(due_date_filter="overdue"), today=SUNDAY)
    assert [t.id for t in tasks] == [ids["yesterday"]]


def test_filter_today():
    state, board_id, ids = dated_board()
    tasks = filter_tasks(state, board_id, SearchFilters(due_date_filter="today"), today=SUNDAY)
    assert [t.id for t in tasks] == [ids["today"]]


def test_filter_week():
    state, board_id, ids = dated_board()
    tasks = filter_tasks(state, board_id, SearchFilters(due_date_filter="week"), today=SUNDAY)
    assert [t.id for t in tasks] == [ids["today"], ids["soon"]]


def test_filter_all_returns_board_tasks_in_order():
    state, board_id, ids = dated_board()
    tasks = filter_tasks(state, board_id, today=SUNDAY)
    assert [t.id for t in tasks] == [ids["yesterday"], ids["today"], ids["soon"], ids["later"]]


def test_search_is_case_insensitive():
    state, board_id, todo, _ = build_board()
    state, report = add(state, todo, "Write Report", SUNDAY)
    state, _ = add(state, todo, "Call Bob", SUNDAY)

    tasks = filter_tasks(state, board_id, SearchFilters(search_term="report"), today=SUNDAY)
    assert [t.id for t in tasks] == [report]


def test_search_matches_description():
    state, board_id, todo, _ = build_board()
    state, task_id = add(state, todo, "Groceries", SUNDAY, description="Buy MILK")
    tasks = filter_tasks(state, board_id, SearchFilters(search_term="milk"), today=SUNDAY)
    assert [t.id for t in tasks] == [task_id]


def test_filter_priority_and_search_combined():
    state, board_id, todo, done = build_board()
    state, wanted = add(state, todo, "Fix login bug", SUNDAY, priority="high")
    state, _ = add(state, todo, "Fix typo", SUNDAY, priority="low")
    state, _ = add(state, done, "Deploy", SUNDAY, priority="high")

    filters = SearchFilters(search_term="fix", priority="high")
    tasks = filter_tasks(state, board_id, filters, today=SUNDAY)
    assert [t.id for t in tasks] == [wanted]


def test_filter_ignores_other_boards():
    state, board_id, todo, _ = build_board()
    state, mine = add(state, todo, "mine", SUNDAY)
    result = engine.create_board(state, "Other", "", "bob")
    other = result.entity_id
    result = engine.create_column(result.state, "X", other)
    state, _ = add(result.state, result.entity_id, "theirs", SUNDAY)

    assert [t.id for t in filter_tasks(state, board_id, today=SUNDAY)] == [mine]


# ========== GROUPING ==========
def test_group_by_column_keeps_task_order():
    state, board_id, todo, done = build_board()
    state, a = add(state, todo, "a", SUNDAY)
    state, b = add(state, todo, "b", SUNDAY)
    state = engine.reorder_task(state, b, 0).state

    columns = columns_for_board(state, board_id)
    grouped = group_by_column(filter_tasks(state, board_id, today=SUNDAY), columns)

    assert [c.id for c in columns] == [todo, done]
    assert [t.id for t in grouped[todo]] == [b, a]
    assert grouped[done] == []


def test_board_summaries_count_columns():
    state, board_id, _, _ = build_board()
    result = engine.create_board(state, "Empty", "", "bob")

    summaries = board_summaries(result.state)

    assert [(board.id, count) for board, count in summaries] == [(board_id, 2), (result.entity_id, 0)]
