# ==========================================
# PUZZLE CONSTANTS
# ==========================================
ENCODED_MESSAGE = "WKH GRRU FRGH LV 5731"
DECODED_MESSAGE = "THE DOOR CODE IS 5731"
DOOR_CODE = "5731"
NOTE_TEXT = "SHIFT LETTERS BACK BY 3"
POSTER_PHRASE = "THE STATION OPENS WHEN TIME MOVES."

NOTE_ITEM = "note"
PHONE_ITEM = "phone"
TICKET_ITEM = "strange ticket"

CALL_TARGETS = ("unknown", "number", "sender")

# ==========================================
# CLUES
# ==========================================
CLUE_ENCODED_MESSAGE = "Encoded phone message"
CLUE_SHIFT_HINT = "Shift -3 hint"
CLUE_SHIFT_PATTERN = "Alphabet shift pattern"
CLUE_DOOR_CODE = "Door code 5731"

CLUE_SILENT_PASSENGERS = "Silent passengers"
CLUE_LIVING_SYMBOLS = "Living symbols"
CLUE_STATION_PHRASE = "Station opens when time moves"
CLUE_MAP = "Map: Platform Echo"
CLUE_CLOCK = "Clock ticked once"
CLUE_MACHINE = "Ticket machine awake"
CLUE_TICKET = "Ticket: Platform Echo"

# ==========================================
# ACHIEVEMENTS & ENDINGS
# ==========================================
ACHIEVEMENT_WRONG_UNIVERSE = "Wrong Universe"
ACHIEVEMENT_CODEBREAKER = "Codebreaker"
ACHIEVEMENT_MINIMALIST = "Minimalist Escape"
ACHIEVEMENT_OFF_THE_MAP = "Off The Map"

ENDING_STANDARD = "Standard Escape"
ENDING_OFF_THE_MAP = "Off The Map"
ENDING_STATION = "Station Walkthrough"

# ==========================================
# SCENES
# ==========================================
COMPARTMENT_START = "scene1"
STATION_START = "platform"

CHAPTER_SCENES = {
    1: ("scene1", "seat-area", "window-area", "door-area"),
    2: ("platform", "poster-area", "board-area", "clock-area", "machine-area", "gate-area"),
}

# Destination word -> (scene, transition line)
COMPARTMENT_MOVES = {
    "seat": ("seat-area", "You move closer to the seat and luggage rack."),
    "window": ("window-area", "You stand by the window, the outside rushing past."),
    "door": ("door-area", "You move to the compartment door and inspect the lock."),
    "compartment": ("scene1", "You step back to the center of the compartment."),
    "back": ("scene1", "You step back to the center of the compartment."),
}

STATION_MOVES = {
    "platform": ("platform", "You walk back to the center of the platform."),
    "poster": ("poster-area", "You move toward the tall poster with shifting symbols."),
    "board": ("board-area", "You walk over to the flickering station map board."),
    "map": ("board-area", "You walk over to the flickering station map board."),
    "clock": ("clock-area", "You stand beneath the silent station clock."),
    "machine": ("machine-area", "You walk to the old ticket machine by the wall."),
    "gate": ("gate-area", "You approach the narrow gate at the far end of the platform."),
    "exit": ("gate-area", "You approach the narrow gate at the far end of the platform."),
}

# ==========================================
# EASTER EGGS
# ==========================================
EASTER_EGG_VERBS = ("cry", "sleep", "sing", "dance")

EASTER_EGG_LINES = {
    "cry": "You consider crying, but the universe remains deeply unimpressed.",
    "sleep": "You close your eyes for a second. Sadly, problems do not uninstall themselves.",
    "sing": "You hum a shaky tune. No one claps. Brutal.",
    "dance": "You do a tiny victory dance. Zero progress, mild serotonin.",
}

KICK_DOOR_LINES = {
    1: "You kick the compartment door. It does not open. Your foot files a complaint.",
    2: "You kick the invisible line where a train used to be. It achieves precisely nothing.",
}

# ==========================================
# AMBIENT AUDIO LEVELS
# ==========================================
VOLUME_DEFAULT = 0.4
VOLUME_STANDARD_ESCAPE = 0.15
VOLUME_OFF_THE_MAP = 0.1
VOLUME_STATION_WALKTHROUGH = 0.12

GAME_OVER_LINE = "The story has reached its end. Restart to begin again."
UNKNOWN_COMMAND_LINE = "The world ignores that command."
