import logging

logger = logging.getLogger(__name__)


class Chapter:
    """
    One story arc: its scenes, its verbs, and the flags it is allowed to flip.
    Subclasses fill in the scene-specific handlers; the shared plumbing lives here.
    """

    number = None
    moves = {}
    help_lines = ()
    move_prompt = "Move where?"
    unknown_area_line = "That area does not exist here."

    def __init__(self, director):
        self.director = director

    @property
    def state(self):
        return self.director.state

    @property
    def tracker(self):
        return self.director.tracker

    def say(self, line, instant=False):
        self.director.narrator.emit(line, instant=instant)

    def describe(self, scene_id, variant="default"):
        scene = self.director.campaign['scenes'][scene_id]
        for line in scene['description'][variant]:
            self.say(line)

    def scene_variant(self, scene_id):
        return "default"

    # ==========================================================
    # SHARED VERBS
    # ==========================================================
    def help(self, args):
        for line in self.help_lines:
            self.say(line)

    def look(self, args):
        if args:
            return self.examine(args)
        scene_id = self.state.scene
        self.describe(scene_id, self.scene_variant(scene_id))

    def move(self, args):
        if not args:
            self.say(self.move_prompt)
            return

        destination = self.moves.get(args[0].lower())
        if destination is None:
            self.say(self.unknown_area_line)
            return

        scene_id, transition_line = destination
        self.state.move_to(scene_id)
        logger.debug("Chapter %s: moved to %s", self.number, scene_id)
        self.say(transition_line)
        self.look([])

    def examine(self, args):
        raise NotImplementedError

    def take(self, args):
        raise NotImplementedError

    def use(self, args):
        raise NotImplementedError

    def solve(self, args):
        self.say("There is nothing here to solve like that.")

    def call(self, args):
        self.say("There is no signal here.")
