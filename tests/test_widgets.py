import io

import pytest

from kata.widgets import Button, Label, Widget, Window, main


def _render(widget):
    buffer = io.StringIO()
    widget.draw_into(buffer)
    return buffer.getvalue()


def test_widget_is_abstract():
    with pytest.raises(TypeError):
        Widget()


def test_label_width_is_longest_line():
    assert Label("ab\nabcd\nx").width() == len("abcd")


def test_empty_label_has_zero_width():
    assert Label("").width() == 0


def test_label_draws_its_text_on_a_line():
    assert _render(Label("hello")) == "hello\n"


def test_button_is_wider_than_its_label():
    button = Button("Click me!")
    assert button.width() - Label("Click me!").width() == 8


def test_button_frame():
    button = Button("Click me!")
    lines = _render(button).splitlines()
    assert len(lines) == 3
    assert lines[0] == lines[-1]
    assert set(lines[0][1:-1]) == {"-"}
    assert all(len(line) == button.width() + 2 for line in lines)
    assert lines[1].startswith("|") and lines[1].endswith("|")
    assert lines[1][1:-1].strip() == "Click me!"


def test_window_lines_have_window_width():
    window = Window("Rust GUI Demo 1.23")
    window.add_widget(Label("This is a small text GUI demo."))
    window.add_widget(Button("Click me!"))
    lines = _render(window).splitlines()
    assert all(len(line) == window.width() for line in lines)
    assert lines[0] == lines[-1]
    assert lines[1][2:-2].strip() == "Rust GUI Demo 1.23"
    assert set(lines[2][1:-1]) == {"="}
    assert lines[3][2:-2].rstrip() == "This is a small text GUI demo."


def test_empty_window_width_follows_title():
    window = Window("Title")
    assert window.width() == len("Title") + 4
    assert len(_render(window).splitlines()) == 4


def test_window_title_centering_puts_extra_space_on_right():
    window = Window("ab")
    window.add_widget(Label("abcde"))
    lines = _render(window).splitlines()
    assert lines[1] == "|  ab   |"


def test_draw_prints_with_trailing_blank_line(capsys):
    window = Window("T")
    window.draw()
    out = capsys.readouterr().out
    assert out == _render(window) + "\n"
    assert out.endswith("\n\n")


def test_main_draws_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Rust GUI Demo 1.23" in out
    assert "Click me!" in out