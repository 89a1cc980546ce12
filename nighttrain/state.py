import copy

from nighttrain.story_data import CHAPTER_SCENES, COMPARTMENT_START

LATCHES = (
    # Chapter 1
    "phone_taken",
    "saw_encoded_message",
    "decoded_message",
    "door_unlocked",
    # Chapter 2
    "c2_clock_awakened",
    "c2_symbols_stabilized",
    "c2_map_revealed",
    "c2_machine_awake",
    "c2_ticket_taken",
    "c2_gate_opened",
    # Global
    "game_over",
)


class GameState:
    def __init__(self):
        """
        The GameState is the SAVE FILE of one run.
        Flags are one-way latches and every list is append-only, so nothing
        recorded during a run is ever taken back.
        """
        self.chapter = 1
        self.scene = COMPARTMENT_START

        self.inventory = []
        self.clues = []
        self.achievements = []
        self.endings_unlocked = []

        for name in LATCHES:
            setattr(self, name, False)

    # ==========================================================
    # 1. LATCHES
    # ==========================================================
    def latch(self, name):
        """Flips a flag to True. Returns False if it was already set."""
        if name not in LATCHES:
            raise KeyError(f"Unknown flag: {name}")
        if getattr(self, name):
            return False
        setattr(self, name, True)
        return True

    # ==========================================================
    # 2. APPEND-ONLY LEDGERS
    # ==========================================================
    def add_item(self, item):
        return self._append_unique(self.inventory, item)

    def has_item(self, item):
        return item in self.inventory

    def add_clue(self, clue):
        return self._append_unique(self.clues, clue)

    def has_clue(self, clue):
        return clue in self.clues

    def _append_unique(self, ledger, entry):
        if entry in ledger:
            return False
        ledger.append(entry)
        return True

    # ==========================================================
    # 3. LOCATION
    # ==========================================================
    def move_to(self, scene):
        if scene not in CHAPTER_SCENES[self.chapter]:
            raise ValueError(f"Scene '{scene}' is not part of chapter {self.chapter}")
        self.scene = scene

    def advance_chapter(self, chapter, start_scene):
        if chapter <= self.chapter:
            raise ValueError(f"Cannot go from chapter {self.chapter} to chapter {chapter}")
        self.chapter = chapter
        self.move_to(start_scene)

    def snapshot(self):
        data = {
            "chapter": self.chapter,
            "scene": self.scene,
            "inventory": self.inventory,
            "clues": self.clues,
            "achievements": self.achievements,
            "endings_unlocked": self.endings_unlocked,
        }
        for name in LATCHES:
            data[name] = getattr(self, name)
        return copy.deepcopy(data)
