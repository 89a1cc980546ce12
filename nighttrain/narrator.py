import time

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

THEME = Theme({
    "info": "bold #b0d8e3",       # Pale Cyan
    "text": "default",            # Adaptive
    "dim": "dim",                 # Grey
    "warning": "bold #ffafaf",    # Soft red
    "success": "bold #a3be8c",    # Soft green
})


class Narrator:
    """
    The Narrator is the VOICE of the game.
    The Director hands it finished lines in order; how they appear is its own business.
    """

    def emit(self, line, instant=False):
        raise NotImplementedError

    def clear(self):
        pass


class BufferNarrator(Narrator):
    """Keeps every line in memory. Used by tests and scripted playthroughs."""

    def __init__(self):
        self.lines = []
        self.clears = 0

    def emit(self, line, instant=False):
        self.lines.append(line)

    def clear(self):
        self.clears += 1

    def take(self):
        lines, self.lines = self.lines, []
        return lines

    @property
    def text(self):
        return "\n".join(self.lines)


class ConsoleNarrator(Narrator):
    def __init__(self, console=None, text_speed=0.015):
        """
        Prints to a rich Console. Non-instant lines are typed out one character
        at a time; a text_speed of 0 prints everything at once.
        """
        self.console = console or Console(theme=THEME)
        self.text_speed = text_speed

    def emit(self, line, instant=False):
        style = self._style_for(line)

        if instant or not self.text_speed or not line:
            self.console.print(Text(line, style=style))
            return

        for char in line:
            self.console.print(Text(char, style=style), end="")
            self.console.file.flush()
            time.sleep(self.text_speed)
        self.console.print()

    def clear(self):
        self.console.clear()

    def _style_for(self, line):
        if line.startswith("> "):
            return "dim"
        if line.startswith("🏅") or line.startswith("Ending unlocked"):
            return "success"
        if line.startswith("Chapter "):
            return "info"
        return "text"
