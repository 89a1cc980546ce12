"""
Puzzle gates. Pure reads of GameState; nothing here mutates it.
"""
from nighttrain.story_data import (
    CALL_TARGETS,
    CLUE_LIVING_SYMBOLS,
    CLUE_SHIFT_HINT,
    DOOR_CODE,
    ENCODED_MESSAGE,
    NOTE_ITEM,
    PHONE_ITEM,
)

# ==========================================
# CHAPTER 1: COMPARTMENT
# ==========================================

def can_read_note(state):
    return state.has_item(NOTE_ITEM)


def can_take_note(state):
    return state.scene == "seat-area"


def is_cipher_solution(text):
    return text.strip() == ENCODED_MESSAGE


def is_bare_door_code(text):
    return text.strip() == DOOR_CODE


def had_cipher_hint(state):
    """The note or its hint means the cipher was not cracked unaided."""
    return state.has_item(NOTE_ITEM) or state.has_clue(CLUE_SHIFT_HINT)


def door_unlock_ready(state):
    return state.decoded_message and state.scene == "door-area"


def earns_minimalist_escape(state):
    return not state.has_item(NOTE_ITEM)


def call_blocker(state):
    """Returns why a call cannot be placed, or None when it can."""
    if not state.has_item(PHONE_ITEM):
        return "no_phone"
    if not state.decoded_message:
        return "not_decoded"
    return None


def is_sender_call(target):
    target = target.strip().lower()
    return not target or target in CALL_TARGETS


# ==========================================
# CHAPTER 2: STATION
# ==========================================

def poster_stage(state):
    """first_glimpse -> stabilizing -> stable"""
    if state.c2_symbols_stabilized:
        return "stable"
    if state.has_clue(CLUE_LIVING_SYMBOLS):
        return "stabilizing"
    return "first_glimpse"


def map_board_stage(state):
    """
    The board is legible only once the clock has ticked AND the symbols hold still.
    blocked -> partial -> ready -> revealed
    """
    if state.c2_map_revealed:
        return "revealed"
    if not state.c2_clock_awakened:
        return "blocked"
    if not state.c2_symbols_stabilized:
        return "partial"
    return "ready"


def machine_stage(state):
    """dormant -> ready -> awake -> spent"""
    if state.c2_machine_awake:
        return "spent" if state.c2_ticket_taken else "awake"
    if state.c2_map_revealed and state.c2_clock_awakened:
        return "ready"
    return "dormant"


def ticket_blocker(state):
    if state.scene != "machine-area":
        return "wrong_scene"
    if not state.c2_machine_awake:
        return "machine_asleep"
    if state.c2_ticket_taken:
        return "already_taken"
    return None


def gate_stage(state):
    """sealed -> waiting -> open"""
    if state.c2_gate_opened:
        return "open"
    if state.c2_ticket_taken:
        return "waiting"
    return "sealed"


def holds_ticket(state):
    return any("ticket" in item.lower() for item in state.inventory)
