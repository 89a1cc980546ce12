CUES = ("click", "unlock")


class SilentAudio:
    """Default audio backend: remembers what it was asked to do and plays nothing."""

    def __init__(self):
        self.volume = None
        self.cues = []

    def play_cue(self, name):
        if name not in CUES:
            raise ValueError(f"Unknown cue: {name}")
        self.cues.append(name)

    def set_ambient_volume(self, level):
        self.volume = max(0.0, min(1.0, level))


class TerminalAudio(SilentAudio):
    """Rings the terminal bell when something unlocks."""

    def __init__(self, console):
        super().__init__()
        self.console = console

    def play_cue(self, name):
        super().play_cue(name)
        if name == "unlock":
            self.console.bell()
