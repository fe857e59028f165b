"""Tests for echor_fixtures.echo."""

from echor_fixtures.echo import render_echo


class TestRenderEcho:
    def test_single_word_gets_trailing_newline(self):
        assert render_echo(["Hello there"]) == "Hello there\n"

    def test_words_joined_by_one_space(self):
        assert render_echo(["Hello", "there"]) == "Hello there\n"

    def test_embedded_spaces_preserved(self):
        assert render_echo(["Hello  there"], newline=False) == "Hello  there"

    def test_no_newline_concatenates_words(self):
        # No separator in no-newline mode, unlike newline mode
        assert render_echo(["Hello", "there"], newline=False) == "Hellothere"

    def test_empty_words(self):
        assert render_echo([]) == "\n"
        assert render_echo([], newline=False) == ""
