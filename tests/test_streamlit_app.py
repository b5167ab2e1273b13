"""
Tests for the Streamlit page
============================
Runs app/streamlit_app.py headless with AppTest against in-memory storage.
"""
import json
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from shiftboard.models.status import ShiftStatus

APP_PATH = Path(__file__).parent.parent / "app" / "streamlit_app.py"


@pytest.fixture
def app(tmp_path, monkeypatch):
    config = tmp_path / "board.json"
    config.write_text(json.dumps({"storage": "memory", "log_file": None}), encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SHIFTBOARD_CONFIG", str(config))
    at = AppTest.from_file(str(APP_PATH), default_timeout=60)
    at.run()
    assert not at.exception
    return at


def test_rename_through_sidebar(app):
    app.button(key="edit_1").click().run()
    app.text_input(key="edit_name_1").input("田中太郎")
    app.button(key="save_1").click().run()

    assert not app.exception
    assert app.session_state["board"].roster.get("1").name == "田中太郎"
    assert not any(t.key == "edit_name_1" for t in app.text_input)


def test_cell_click_toggles(app):
    board = app.session_state["board"]
    month = board.current_month
    app.button(key=f"cell_{month}_2_0").click().run()

    assert not app.exception
    assert board.schedule.get_status(month, "2", 0) == ShiftStatus.OFF


def test_add_staff_button(app):
    app.button(key="add_staff").click().run()
    assert len(app.session_state["board"].roster) == 4
