import logging

from nighttrain.audio import SilentAudio
from nighttrain.chapters import CompartmentChapter, StationChapter
from nighttrain.listener import Listener
from nighttrain.story_data import (
    ACHIEVEMENT_WRONG_UNIVERSE,
    EASTER_EGG_LINES,
    GAME_OVER_LINE,
    KICK_DOOR_LINES,
    UNKNOWN_COMMAND_LINE,
    VOLUME_DEFAULT,
)
from nighttrain.tracker import Tracker

logger = logging.getLogger(__name__)

CHAPTER_TOOLS = ("help", "look", "examine", "take", "use", "move", "solve", "call")


class Director:
    def __init__(self, campaign_db, session_state, narrator, audio=None):
        """
        The Director is the STATE MACHINE.
        It reads one command at a time, routes it to the current chapter, and is
        the only way anything touches the session state.
        """
        self.campaign = campaign_db
        self.state = session_state
        self.narrator = narrator
        self.audio = audio or SilentAudio()
        self.listener = Listener()
        self.tracker = Tracker(session_state, narrator)
        self.chapters = {
            1: CompartmentChapter(self),
            2: StationChapter(self),
        }

    @property
    def chapter(self):
        return self.chapters[self.state.chapter]

    # ==========================================================
    # 1. THE INPUT BOUNDARY
    # ==========================================================
    def begin(self):
        """Opens the run with the first chapter's intro."""
        self._play_intro(self.state.chapter)
        self.set_volume(VOLUME_DEFAULT)

    def handle(self, raw):
        """
        Takes one raw line of player input. Returns the parsed tool call, or
        None when nothing ran.
        """
        user_input = (raw or "").strip()
        if not user_input:
            return None

        self.cue("click")

        if self.state.game_over:
            self.narrator.emit(GAME_OVER_LINE)
            return None

        self.narrator.emit(f"> {user_input}", instant=True)

        command = self.listener.parse(user_input)
        self.execute(command)
        return command

    # ==========================================================
    # 2. THE MASTER ROUTER
    # ==========================================================
    def execute(self, command):
        tool = command.get('tool')
        params = command.get('parameters', {})
        args = params.get('args', [])

        logger.debug("Chapter %s / %s: %s %s", self.state.chapter, self.state.scene, tool, args)

        if tool == 'easter_egg':
            self.easter_egg(params.get('kind'))
        elif tool == 'inventory':
            self.show_inventory()
        elif tool == 'clues':
            self.show_clues()
        elif tool in CHAPTER_TOOLS:
            getattr(self.chapter, tool)(args)
        else:
            self.narrator.emit(UNKNOWN_COMMAND_LINE)

    # ==========================================================
    # 3. CHAPTER-INDEPENDENT COMMANDS
    # ==========================================================
    def easter_egg(self, kind):
        if kind == "kick door":
            line = KICK_DOOR_LINES[self.state.chapter]
        else:
            line = EASTER_EGG_LINES.get(kind, "Nothing special happens.")
        self.narrator.emit(line)
        self.tracker.unlock_achievement(ACHIEVEMENT_WRONG_UNIVERSE)

    def show_inventory(self):
        if not self.state.inventory:
            self.narrator.emit("You are carrying nothing.")
        else:
            self.narrator.emit("Inventory: " + ", ".join(self.state.inventory))

    def show_clues(self):
        if not self.state.clues:
            self.narrator.emit("You have not recorded any clues yet.")
            return
        self.narrator.emit("Clues:")
        for clue in self.state.clues:
            self.narrator.emit(f"- {clue}")

    # ==========================================================
    # 4. TRANSITIONS
    # ==========================================================
    def start_chapter(self, number):
        chapter_data = self.campaign['manifest']['chapters'][number]
        self.state.advance_chapter(number, chapter_data['start_scene'])
        logger.debug("Entering chapter %s at %s", number, self.state.scene)

        self.narrator.clear()
        self._play_intro(number)

    def _play_intro(self, number):
        for line, instant in self.campaign['manifest']['chapters'][number].get('intro', []):
            self.narrator.emit(line, instant=instant)

    # ==========================================================
    # 5. AUDIO (fire-and-forget)
    # ==========================================================
    def cue(self, name):
        try:
            self.audio.play_cue(name)
        except Exception as e:
            logger.debug("Audio cue '%s' failed: %s", name, e)

    def set_volume(self, level):
        try:
            self.audio.set_ambient_volume(level)
        except Exception as e:
            logger.debug("Ambient volume %.2f failed: %s", level, e)
