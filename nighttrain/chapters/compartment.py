from nighttrain import gates
from nighttrain.chapters.base import Chapter
from nighttrain.story_data import (
    ACHIEVEMENT_CODEBREAKER,
    ACHIEVEMENT_MINIMALIST,
    ACHIEVEMENT_OFF_THE_MAP,
    CLUE_DOOR_CODE,
    CLUE_ENCODED_MESSAGE,
    CLUE_SHIFT_HINT,
    CLUE_SHIFT_PATTERN,
    COMPARTMENT_MOVES,
    DECODED_MESSAGE,
    DOOR_CODE,
    ENCODED_MESSAGE,
    ENDING_OFF_THE_MAP,
    ENDING_STANDARD,
    NOTE_ITEM,
    NOTE_TEXT,
    PHONE_ITEM,
    VOLUME_OFF_THE_MAP,
    VOLUME_STANDARD_ESCAPE,
)


class CompartmentChapter(Chapter):
    """
    Chapter 1: a locked train compartment.
    The phone carries a shifted message; decoding it opens the door, or the line
    to whoever sent it.
    """

    number = 1
    moves = COMPARTMENT_MOVES
    move_prompt = "Move where? Seat, window, or door."
    unknown_area_line = "That area does not exist in this compartment."
    help_lines = (
        "Available commands:",
        "- look",
        "- examine <object>",
        "- take <item>",
        "- use <item> [on <target>]",
        "- solve <coded message> / decode <coded message>",
        "- inventory / inv",
        "- clues",
        "- move <area> (seat, window, door)",
        "- call <target> (when you have the phone)",
    )

    def scene_variant(self, scene_id):
        if scene_id == "scene1":
            return "default" if self.state.phone_taken else "phone_on_table"
        if scene_id == "door-area":
            return "unlocked" if self.state.door_unlocked else "locked"
        return "default"

    # ==========================================================
    # 1. EXAMINE (does not move the player)
    # ==========================================================
    def examine(self, args):
        if not args:
            self.say("Examine what?")
            return

        target = " ".join(args).lower()

        if "phone" in target:
            self._examine_phone()
        elif "seat" in target:
            self.say("The seat cushion is slightly torn. A folded note sticks out.")
            self.say("You might be able to take the note.")
        elif "note" in target:
            self._examine_note()
        elif "window" in target:
            self.say('On the lower corner of the window, someone scratched: "A→D, B→E, C→F" with an arrow pointing back.')
            self.state.add_clue(CLUE_SHIFT_PATTERN)
        elif "door" in target:
            if not self.state.door_unlocked:
                self.say("The door lock blinks impatiently. It expects a 4 digit code.")
                self.say("Maybe the phone message is related. Try to solve it.")
            else:
                self.say("The door is unlocked. You can leave this compartment whenever you are ready.")
        else:
            self.say("You do not notice anything special about that.")

    def _examine_phone(self):
        if not self.state.phone_taken:
            self.say("The old phone is cracked but still working. A notification lights up the screen.")
            self.say(f'On the screen you see a message: "{ENCODED_MESSAGE}"')
        else:
            self.say("You check the phone in your hand. The message still reads:")
            self.say(f'"{ENCODED_MESSAGE}"')
        self.state.add_clue(CLUE_ENCODED_MESSAGE)
        self.state.latch("saw_encoded_message")

    def _examine_note(self):
        if not gates.can_read_note(self.state):
            self.say("You can see part of the note, but you have not taken it yet. Try taking the note.")
            return
        self.say(f'You unfold the note. It reads: "{NOTE_TEXT}".')
        self.state.add_clue(CLUE_SHIFT_HINT)

    # ==========================================================
    # 2. TAKE
    # ==========================================================
    def take(self, args):
        if not args:
            self.say("Take what?")
            return

        item = " ".join(args).lower()

        if "phone" in item:
            if self.state.phone_taken:
                self.say("You already have the phone.")
                return
            self.state.latch("phone_taken")
            self.state.add_item(PHONE_ITEM)
            self.say("You pick up the phone. It feels slightly warm.")
        elif "note" in item:
            if not gates.can_take_note(self.state):
                self.say("You do not see any note here.")
                return
            if self.state.has_item(NOTE_ITEM):
                self.say("You already took the note.")
                return
            self.state.add_item(NOTE_ITEM)
            self.say("You pull out the crumpled note from the seat.")
        else:
            self.say("You cannot take that.")

    # ==========================================================
    # 3. USE
    # ==========================================================
    def use(self, args):
        if not args:
            self.say("Use what?")
            return

        full = " ".join(args).lower()
        item, _, _target = full.partition(" on ")

        if not any(held.lower() == item for held in self.state.inventory):
            self.say("You do not have that item.")
            return

        if item == PHONE_ITEM:
            if gates.door_unlock_ready(self.state):
                self.say("You double check the phone. The decoded message confirms the door code.")
                self.say(f"You type {DOOR_CODE} into the keypad.")
                self._unlock_door_standard()
            elif self.state.decoded_message:
                self.say("You stare at the decoded message. There is also an option to call back the unknown sender.")
                self.say("Maybe try: call unknown")
            else:
                self.say("You stare at the phone. The coded message still bothers you.")
        elif item == NOTE_ITEM:
            self.say(f'You read the note again: "{NOTE_TEXT}".')
        else:
            self.say("Using that item does not seem to do anything helpful.")

    # ==========================================================
    # 4. SOLVE / CALL
    # ==========================================================
    def solve(self, args):
        text = " ".join(args)
        if not text:
            self.say("Solve what? Try typing the coded message from the phone.")
            return

        if gates.is_cipher_solution(text):
            unaided = not gates.had_cipher_hint(self.state)
            self.state.latch("decoded_message")
            self.state.add_clue(CLUE_DOOR_CODE)
            self.say("You mentally shift each letter back by 3.")
            self.say(f'The message becomes: "{DECODED_MESSAGE}"')
            self.say(f"So the door code is {DOOR_CODE}. Try going to the door using move door.")
            if unaided:
                self.tracker.unlock_achievement(ACHIEVEMENT_CODEBREAKER)
        elif gates.is_bare_door_code(text):
            self.say("You know the digits, but you should prove it. Use the encoded message itself in solve.")
        else:
            self.say("You try to decode it, but something does not click. Check your clues again.")

    def call(self, args):
        blocker = gates.call_blocker(self.state)
        if blocker == "no_phone":
            self.say("You have nothing to call with.")
            return
        if blocker == "not_decoded":
            self.say("You do not know who to call. The phone only shows the strange coded message.")
            return

        if gates.is_sender_call(" ".join(args)):
            self._secret_path_to_station()
        else:
            self.say("You try to dial, but the only available option is to call back the unknown sender.")
            self.say("Maybe just type: call unknown")

    # ==========================================================
    # 5. ENDINGS
    # ==========================================================
    def _unlock_door_standard(self):
        if not self.state.latch("door_unlocked"):
            self.say("The door is already unlocked.")
            return

        self.director.set_volume(VOLUME_STANDARD_ESCAPE)
        self.director.cue("unlock")

        if gates.earns_minimalist_escape(self.state):
            self.tracker.unlock_achievement(ACHIEVEMENT_MINIMALIST)
        self.tracker.unlock_ending(ENDING_STANDARD)

        self.say("The lock beeps, then turns green. The door unlocks with a soft click.")
        self.say("For a moment, the constant noise of the train feels quieter.")
        self.say("You step into the corridor, leaving the locked compartment behind.")
        self.say(f"Ending unlocked: {ENDING_STANDARD}.", instant=True)

        self.tracker.finish_run()

    def _secret_path_to_station(self):
        self.director.set_volume(VOLUME_OFF_THE_MAP)
        self.director.cue("unlock")

        self.tracker.unlock_ending(ENDING_OFF_THE_MAP)
        self.tracker.unlock_achievement(ACHIEVEMENT_OFF_THE_MAP)

        self.say("You tap the option to call back the unknown number.")
        self.say("The line connects instantly. No ringtone, no greeting. Just the low hum of the train.")
        self.say('A distorted voice whispers: "You solved it faster than expected."')
        self.say("The compartment around you flickers, as if reality is buffering.")
        self.say("When the world stabilizes, the door slides open on its own.")
        self.say("Beyond it is not a normal station.")
        self.say(f"Ending unlocked: {ENDING_OFF_THE_MAP}. The real story starts now.", instant=True)

        # The run goes on in the next chapter
        self.director.start_chapter(2)
