import pytest

from projman.project import Params, create_project, read_project_file
from projman.ui.create_project import CreateProjectScreen
from projman.ui.widgets import AppContext, Navigation


@pytest.fixture
def ctx(tmp_path):
    return AppContext(base_dir=tmp_path, player=lambda p, e: None, launcher=lambda a: None)


def type_text(screen, text):
    for ch in text:
        screen.handle_key(ch)


def fill(screen, values):
    for index, value in enumerate(values):
        type_text(screen, value)
        if index < len(values) - 1:
            screen.handle_key("tab")


def test_focus_cycles_forward_and_back(ctx):
    screen = CreateProjectScreen(ctx)
    screen.handle_key("shift+tab")
    assert screen.focused_index == 3
    screen.handle_key("tab")
    assert screen.focused_index == 0
    assert [f.focused for f in screen.inputs] == [True, False, False, False]


def test_typing_goes_to_focused_field_only(ctx):
    screen = CreateProjectScreen(ctx)
    type_text(screen, "abc")
    assert [f.value for f in screen.inputs] == ["abc", "", "", ""]


def test_enter_moves_to_next_field(ctx):
    screen = CreateProjectScreen(ctx)
    assert screen.handle_key("enter") is screen
    assert screen.focused_index == 1
    assert screen.done is False


def test_missing_id_or_name_is_rejected(ctx):
    screen = CreateProjectScreen(ctx)
    screen.handle_key("up")
    screen.handle_key("enter")
    assert screen.message == "❌ ID and Name are required"
    assert "❌ ID and Name are required" in screen.render()
    assert list(ctx.base_dir.iterdir()) == []


def test_submit_creates_project(ctx):
    screen = CreateProjectScreen(ctx)
    fill(screen, ["new-1", "New", "Desc", "a, b"])
    screen.handle_key("enter")
    assert screen.done is True
    assert screen.message == "✅ Project NEW-1 created!"
    assert screen.render().startswith("✅ Project NEW-1 created!")
    project = read_project_file(ctx.base_dir, "NEW-1")
    assert project.name == "New"
    assert project.description == "Desc"
    assert project.status == "active"
    assert project.tags == ["a", "b"]


def test_existing_project_reports_error(ctx):
    create_project(ctx.base_dir, Params(id="DUP", name="First"))
    screen = CreateProjectScreen(ctx)
    fill(screen, ["DUP", "Second", "", ""])
    screen.handle_key("enter")
    assert screen.done is False
    assert screen.message.startswith("❌ ")
    assert "DUP" in screen.message


def test_escape_returns_to_menu(ctx):
    assert CreateProjectScreen(ctx).handle_key("esc") is Navigation.MAIN_MENU