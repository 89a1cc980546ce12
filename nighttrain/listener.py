from nighttrain.story_data import EASTER_EGG_VERBS

# Spoken verb -> tool name
VERB_TABLE = {
    "help": "help",
    "look": "look",
    "examine": "examine",
    "inspect": "examine",
    "take": "take",
    "grab": "take",
    "use": "use",
    "solve": "solve",
    "decode": "solve",
    "inventory": "inventory",
    "inv": "inventory",
    "clues": "clues",
    "move": "move",
    "go": "move",
    "call": "call",
}


class Listener:
    """
    Maps a raw command line to a tool call using fixed verb rules.
    No grammar, no guessing: the first word picks the tool, the rest are its arguments.
    """

    def parse(self, user_input):
        parts = user_input.split()
        if not parts:
            return None

        verb = parts[0].lower()
        args = parts[1:]
        phrase = " ".join(args)

        # Easter eggs are heard before anything else, in every chapter
        if verb in EASTER_EGG_VERBS:
            return self._tool("easter_egg", verb, args, kind=verb)
        if verb == "kick" and "door" in phrase.lower():
            return self._tool("easter_egg", verb, args, kind="kick door")

        tool = VERB_TABLE.get(verb)
        if tool is None:
            return self._tool("unknown", verb, args)
        return self._tool(tool, verb, args)

    def _tool(self, tool, verb, args, **extra):
        parameters = {"verb": verb, "args": args, "phrase": " ".join(args)}
        parameters.update(extra)
        return {"tool": tool, "parameters": parameters}
