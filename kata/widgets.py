"""Drawing a small text user interface made of nested widgets."""

from __future__ import annotations

import abc
import argparse
import io
from typing import Optional, Sequence, TextIO


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _center(text: str, width: int) -> str:
    padding = max(width - len(text), 0)
    left = padding // 2
    return " " * left + text + " " * (padding - left)


class Widget(abc.ABC):
    """Something that can be drawn as lines of text."""

    @abc.abstractmethod
    def width(self) -> int:
        """Return the natural width of the widget."""

    @abc.abstractmethod
    def draw_into(self, buffer: TextIO) -> None:
        """Write the widget's lines into ``buffer``."""

    def draw(self) -> None:
        """Draw the widget on standard output."""
        buffer = io.StringIO()
        self.draw_into(buffer)
        print(buffer.getvalue())


class Label(Widget):
    """A piece of text, possibly spanning several lines."""

    def __init__(self, label: str) -> None:
        self.label = label

    def width(self) -> int:
        return max((len(line) for line in _lines(self.label)), default=0)

    def draw_into(self, buffer: TextIO) -> None:
        buffer.write(f"{self.label}\n")


class Button(Widget):
    """A framed label with some padding around it."""

    def __init__(self, label: str) -> None:
        self.label = Label(label)

    def width(self) -> int:
        return self.label.width() + 8

    def draw_into(self, buffer: TextIO) -> None:
        width = self.width()
        label = io.StringIO()
        self.label.draw_into(label)
        border = f"+{'-' * width}+\n"
        buffer.write(border)
        for line in _lines(label.getvalue()):
            buffer.write(f"|{_center(line, width)}|\n")
        buffer.write(border)


class Window(Widget):
    """A titled frame holding other widgets stacked vertically."""

    def __init__(self, title: str) -> None:
        self.title = title
        self.widgets: list[Widget] = []

    def add_widget(self, widget: Widget) -> None:
        """Append ``widget`` to the window's contents."""
        self.widgets.append(widget)

    def _inner_width(self) -> int:
        widest = max((widget.width() for widget in self.widgets), default=0)
        return max(len(self.title), widest)

    def width(self) -> int:
        return self._inner_width() + 4

    def draw_into(self, buffer: TextIO) -> None:
        inner = io.StringIO()
        for widget in self.widgets:
            widget.draw_into(inner)

        width = self._inner_width()
        border = f"+-{'-' * width}-+\n"
        buffer.write(border)
        buffer.write(f"| {_center(self.title, width)} |\n")
        buffer.write(f"+={'=' * width}=+\n")
        for line in _lines(inner.getvalue()):
            buffer.write(f"| {line.ljust(width)} |\n")
        buffer.write(border)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Draw a demo window with a label and a button."""
    argparse.ArgumentParser(description=main.__doc__).parse_args(argv)
    window = Window("Rust GUI Demo 1.23")
    window.add_widget(Label("This is a small text GUI demo."))
    window.add_widget(Button("Click me!"))
    window.draw()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())