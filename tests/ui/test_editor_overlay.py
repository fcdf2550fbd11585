#!/usr/bin/env python3
"""
Unit тесты для ui/editor.py
"""

from prompt_toolkit import Application
from prompt_toolkit.application import create_app_session
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from ai_terminal.ui.editor import build_editor_application, insert_soft_tab


class TestSoftTab:
    """Тесты для insert_soft_tab"""

    def test_inserts_two_spaces_at_cursor(self):
        assert insert_soft_tab("abc", 1) == ("a  bc", 3)

    def test_replaces_selection(self):
        """Выделенный текст заменяется двумя пробелами"""
        assert insert_soft_tab("hello world", 5, 11) == ("hello  ", 7)

    def test_reversed_selection(self):
        assert insert_soft_tab("hello world", 11, 5) == ("hello  ", 7)

    def test_at_end(self):
        assert insert_soft_tab("", 0) == ("  ", 2)


def test_build_editor_application():
    """Приложение собирается без терминала"""
    with create_pipe_input() as pipe_input:
        with create_app_session(input=pipe_input, output=DummyOutput()):
            app = build_editor_application("/home/user/README.md", "text")
    assert isinstance(app, Application)
    assert app.full_screen
