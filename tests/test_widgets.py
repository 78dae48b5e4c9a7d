from projman.config import Config
from projman.ui.widgets import AppContext, TextInput


def type_text(field, text):
    for ch in text:
        field.handle_key(ch)


def test_typing_inserts_characters():
    field = TextInput(focused=True)
    type_text(field, "abc")
    assert field.value == "abc"


def test_unfocused_input_ignores_keys():
    field = TextInput()
    assert field.handle_key("a") is False
    assert field.value == ""


def test_char_limit_stops_input():
    field = TextInput(char_limit=3, focused=True)
    type_text(field, "abcdef")
    assert field.value == "abc"


def test_backspace_removes_last_character():
    field = TextInput(focused=True)
    type_text(field, "abc")
    field.handle_key("backspace")
    assert field.value == "ab"


def test_insert_at_cursor_after_left():
    field = TextInput(focused=True)
    type_text(field, "ac")
    field.handle_key("left")
    field.handle_key("b")
    assert field.value == "abc"


def test_ctrl_u_clears_before_cursor():
    field = TextInput(focused=True)
    type_text(field, "hello")
    field.handle_key("ctrl+u")
    assert field.value == ""


def test_unknown_key_not_consumed():
    field = TextInput(focused=True)
    assert field.handle_key("tab") is False
    assert field.value == ""


def test_focus_and_blur():
    field = TextInput()
    field.focus()
    assert field.focused is True
    field.blur()
    assert field.focused is False


def test_render_shows_placeholder_when_empty():
    field = TextInput(placeholder="Enter Project ID")
    assert field.render().endswith("Enter Project ID")


def test_render_shows_value_instead_of_placeholder():
    field = TextInput(placeholder="Enter Project ID", focused=True)
    type_text(field, "xyz")
    rendered = field.render()
    assert "xyz" in rendered
    assert "Enter Project ID" not in rendered


def test_render_respects_width():
    field = TextInput(width=3, value="abcdef")
    rendered = field.render()
    assert rendered.endswith("def")
    assert "abc" not in rendered


def test_context_play_passes_enabled_flag():
    calls = []
    ctx = AppContext(config=Config(sounds_enabled=True), player=lambda p, e: calls.append((p, e)))
    ctx.play("beep.wav")
    ctx.config.sounds_enabled = False
    ctx.play("beep.wav")
    assert calls == [("beep.wav", True), ("beep.wav", False)]