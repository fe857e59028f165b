"""The output primitive the fixtures are rendered with."""


def render_echo(words: list[str], newline: bool = True) -> str:
    """Render *words* the way ``echo`` prints them.

    With *newline*, words are separated by one space and a trailing
    ``\\n`` is appended.  Without it, words are concatenated with no
    separator and nothing is appended; ``hello2.n.txt`` depends on this.
    """
    if newline:
        return " ".join(words) + "\n"
    return "".join(words)
