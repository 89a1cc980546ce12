import logging

logger = logging.getLogger(__name__)


class Tracker:
    def __init__(self, state, narrator):
        """
        The Tracker owns the achievement and ending ledgers of a run.
        Unlocking something twice is a silent no-op.
        """
        self.state = state
        self.narrator = narrator

    def unlock_achievement(self, name):
        if name in self.state.achievements:
            return False
        self.state.achievements.append(name)
        logger.debug("Achievement unlocked: %s", name)
        self.narrator.emit(f"🏅 Achievement unlocked: {name}", instant=True)
        return True

    def unlock_ending(self, name):
        """Records the ending. Announcing it is left to the scene that earned it."""
        if name in self.state.endings_unlocked:
            return False
        self.state.endings_unlocked.append(name)
        logger.debug("Ending recorded: %s", name)
        return True

    def finish_run(self):
        self.state.latch("game_over")
        for line, instant in self.summary_lines():
            self.narrator.emit(line, instant=instant)

    def summary_lines(self):
        lines = [("", False), ("Summary:", False)]

        if self.state.achievements:
            lines.append(("Achievements earned this run:", False))
            lines.extend((f"- {name}", False) for name in self.state.achievements)
        else:
            lines.append(("No achievements earned this run.", False))

        if self.state.endings_unlocked:
            lines.append(("Endings unlocked so far:", False))
            lines.extend((f"- {name}", False) for name in self.state.endings_unlocked)

        lines.append(("Restart the game to play again.", True))
        return lines
