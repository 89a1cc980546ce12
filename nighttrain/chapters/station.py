from nighttrain import gates
from nighttrain.chapters.base import Chapter
from nighttrain.story_data import (
    CLUE_CLOCK,
    CLUE_LIVING_SYMBOLS,
    CLUE_MACHINE,
    CLUE_MAP,
    CLUE_SILENT_PASSENGERS,
    CLUE_STATION_PHRASE,
    CLUE_TICKET,
    ENDING_STATION,
    POSTER_PHRASE,
    STATION_MOVES,
    TICKET_ITEM,
    VOLUME_STATION_WALKTHROUGH,
)


class StationChapter(Chapter):
    """
    Chapter 2: the station of silent faces.
    Looking closely is how the station wakes up, so examine both moves the
    player and advances the puzzle chain clock -> poster -> board -> machine -> gate.
    """

    number = 2
    moves = STATION_MOVES
    move_prompt = "Move where? (platform, poster, board, clock, machine, gate)"
    help_lines = (
        "Available commands (Station):",
        "- look",
        "- examine <object>",
        "- take <item>",
        "- use <item>",
        "- inventory / inv",
        "- clues",
        "- move <area> (platform, poster, board, clock, machine, gate)",
    )

    def scene_variant(self, scene_id):
        if scene_id == "board-area":
            return "legible" if self.state.c2_map_revealed else "blurred"
        if scene_id == "machine-area":
            return "glowing" if self.state.c2_machine_awake else "dark"
        if scene_id == "gate-area":
            return "carrying_ticket" if self.state.c2_ticket_taken else "sealed"
        return "default"

    # ==========================================================
    # 1. EXAMINE (the progression engine)
    # ==========================================================
    def examine(self, args):
        if not args:
            self.say("Examine what?")
            return

        target = " ".join(args).lower()

        if any(word in target for word in ("passenger", "people", "crowd")):
            self.say("The passengers sit unnaturally still. When you look at any one of them, their heads tilt slightly, like they are listening to a voice you cannot hear.")
            self.state.add_clue(CLUE_SILENT_PASSENGERS)
        elif "poster" in target or "symbols" in target:
            self.state.move_to("poster-area")
            self._examine_poster()
        elif "board" in target or "map" in target:
            self.state.move_to("board-area")
            self._examine_board()
        elif "clock" in target:
            self.state.move_to("clock-area")
            self._examine_clock()
        elif "machine" in target or "ticket" in target:
            self.state.move_to("machine-area")
            self._examine_machine()
        elif "gate" in target or "exit" in target:
            self.state.move_to("gate-area")
            self._examine_gate()
        else:
            self.say("You do not notice anything special about that.")

    def _examine_poster(self):
        stage = gates.poster_stage(self.state)

        if stage == "first_glimpse":
            self.say("You step closer to the poster. Symbols cascade like falling letters, rearranging themselves whenever you try to focus.")
            self.say("For a second, you glimpse an English phrase beneath the symbols, but it slips away.")
            self.state.add_clue(CLUE_LIVING_SYMBOLS)
        elif stage == "stabilizing":
            self.say("You focus harder. The symbols slow down enough to form a phrase:")
            self.say(f'"{POSTER_PHRASE}"', instant=True)
            self.state.latch("c2_symbols_stabilized")
            self.state.add_clue(CLUE_STATION_PHRASE)
        else:
            self.say(f'The poster now holds steady: "{POSTER_PHRASE}"')

    def _examine_board(self):
        stage = gates.map_board_stage(self.state)

        if stage == "blocked":
            self.say("The map flickers. Lines and station names blur out of recognition.")
            self.say("It feels like the station is refusing to show you the routes until something else changes.")
        elif stage == "partial":
            self.say("The map sharpens for a moment, but the symbols on the signs still clash with it.")
            self.say("Maybe the poster with shifting symbols is connected.")
        elif stage == "ready":
            self.state.latch("c2_map_revealed")
            self.say("The board hums once, then stabilizes.")
            self.say("You can finally read the routes:")
            self.say('- "LINE 0: ORIGIN"')
            self.say('- "LINE ∞: RETURN"')
            self.say('- "PLATFORM: ECHO"')
            self.say('A small note at the bottom reads: "Ticket required: ONE WHO REMEMBERS."')
            self.state.add_clue(CLUE_MAP)
        else:
            self.say("The map calmly shows impossible routes, as if you have always known them.")

    def _examine_clock(self):
        if self.state.latch("c2_clock_awakened"):
            self.say("The clock hands are frozen at 00:00. No ticking. No motion.")
            self.say("You stare at it long enough that for a heartbeat, you hear a single tick.")
            self.state.add_clue(CLUE_CLOCK)
        else:
            self.say("The clock now reads 00:01. It seems to move only when truly observed.")

    def _examine_machine(self):
        stage = gates.machine_stage(self.state)

        if stage == "dormant":
            self.say("The machine is cold and lifeless. A faint symbol above it matches the ones on the posters.")
            self.say("Maybe the station needs to be 'awake' before this responds.")
        elif stage == "ready":
            self.state.latch("c2_machine_awake")
            self.say("As you approach, the ticket machine flickers to life.")
            self.say('On the screen, a single option appears: "ISSUE PASS TO PLATFORM ECHO".')
            self.say("A narrow slot below waits patiently.")
            self.state.add_clue(CLUE_MACHINE)
        elif stage == "awake":
            self.say('The screen still shows: "ISSUE PASS TO PLATFORM ECHO".')
            self.say("Something tells you it will respond if you try to take a ticket.")
        else:
            self.say("The machine screen is blank again, as if it has done its job.")

    def _examine_gate(self):
        stage = gates.gate_stage(self.state)

        if stage == "sealed":
            self.say("The narrow gate is sealed. A dull scanner sits at hand level, pulsing with a symbol you now recognize from the map.")
            self.say("It feels like it expects a specific ticket.")
        elif stage == "waiting":
            self.say("The scanner pulses brighter whenever your hand nears your pocket, where the strange ticket rests.")
            self.say('Maybe you should "use ticket" here.')
        else:
            self.say("The gate stands open. Beyond it, a staircase descends into a light that does not behave like light.")

    # ==========================================================
    # 2. TAKE / USE
    # ==========================================================
    def take(self, args):
        if not args:
            self.say("Take what?")
            return

        if "ticket" not in " ".join(args).lower():
            self.say("That does not seem like something you can take.")
            return

        blocker = gates.ticket_blocker(self.state)
        if blocker == "wrong_scene":
            self.say("You do not see any ticket here.")
        elif blocker == "machine_asleep":
            self.say("Nothing comes out of the machine.")
        elif blocker == "already_taken":
            self.say("You already took the strange ticket.")
        else:
            self.state.latch("c2_ticket_taken")
            self.state.add_item(TICKET_ITEM)
            self.say("You reach out. With a soft mechanical sigh, a thin ticket slides out of the slot.")
            self.say('It is warm to the touch. The text on it reads: "PLATFORM ECHO — ONE WHO REMEMBERS."')
            self.state.add_clue(CLUE_TICKET)

    def use(self, args):
        if not args:
            self.say("Use what?")
            return

        if "ticket" not in " ".join(args).lower():
            self.say("Using that does not seem to have any effect here.")
            return

        if not gates.holds_ticket(self.state):
            self.say("You pat your pockets. No ticket yet.")
            return
        if self.state.scene != "gate-area":
            self.say("You hold up the ticket, but nothing nearby reacts.")
            self.say("Maybe the gate at the far end of the platform is where it belongs.")
            return
        if self.state.c2_gate_opened:
            self.say("The gate is already open. The station has accepted your passage.")
            return

        self._walk_through_gate()

    # ==========================================================
    # 3. ENDING
    # ==========================================================
    def _walk_through_gate(self):
        self.state.latch("c2_gate_opened")
        self.director.set_volume(VOLUME_STATION_WALKTHROUGH)
        self.director.cue("unlock")

        self.say("You press the ticket gently against the scanner.")
        self.say("For a heartbeat, the symbols on the station signs and the ones on the ticket sync perfectly.")
        self.say("The gate unlocks with a tone that feels more like a thought than a sound.")
        self.say("Beyond the gate, a staircase descends into a soft, bending light.")
        self.say("You step through, and the station watches you go.")
        self.say(f"Ending unlocked: {ENDING_STATION}.", instant=True)

        self.tracker.unlock_ending(ENDING_STATION)
        self.tracker.finish_run()
