import unittest

from nighttrain import gates
from nighttrain.state import GameState


class TestCompartmentGates(unittest.TestCase):
    def setUp(self):
        self.state = GameState()

    def test_cipher_is_exact_after_trimming(self):
        self.assertTrue(gates.is_cipher_solution("  WKH GRRU FRGH LV 5731 "))
        self.assertFalse(gates.is_cipher_solution("WKH  GRRU FRGH LV 5731"))
        self.assertFalse(gates.is_cipher_solution("wkh grru frgh lv 5731"))
        self.assertTrue(gates.is_bare_door_code("5731"))

    def test_cipher_hint_from_note_or_clue(self):
        self.assertFalse(gates.had_cipher_hint(self.state))
        self.state.add_clue("Shift -3 hint")
        self.assertTrue(gates.had_cipher_hint(self.state))

        other = GameState()
        other.add_item("note")
        self.assertTrue(gates.had_cipher_hint(other))
        self.assertFalse(gates.earns_minimalist_escape(other))

    def test_door_needs_decoding_and_position(self):
        self.state.latch("decoded_message")
        self.assertFalse(gates.door_unlock_ready(self.state))
        self.state.move_to("door-area")
        self.assertTrue(gates.door_unlock_ready(self.state))

    def test_call_blockers(self):
        self.assertEqual(gates.call_blocker(self.state), "no_phone")
        self.state.add_item("phone")
        self.assertEqual(gates.call_blocker(self.state), "not_decoded")
        self.state.latch("decoded_message")
        self.assertIsNone(gates.call_blocker(self.state))

    def test_sender_call_targets(self):
        for target in ["", "unknown", "Number", "SENDER "]:
            self.assertTrue(gates.is_sender_call(target), target)
        for target in ["mom", "unknown sender", "911"]:
            self.assertFalse(gates.is_sender_call(target), target)


class TestStationGates(unittest.TestCase):
    def setUp(self):
        self.state = GameState()
        self.state.advance_chapter(2, "platform")

    def test_map_needs_clock_and_symbols(self):
        self.assertEqual(gates.map_board_stage(self.state), "blocked")

        self.state.latch("c2_symbols_stabilized")
        self.assertEqual(gates.map_board_stage(self.state), "blocked")

        self.state.latch("c2_clock_awakened")
        self.assertEqual(gates.map_board_stage(self.state), "ready")

        self.state.latch("c2_map_revealed")
        self.assertEqual(gates.map_board_stage(self.state), "revealed")

    def test_partial_map(self):
        self.state.latch("c2_clock_awakened")
        self.assertEqual(gates.map_board_stage(self.state), "partial")

    def test_machine_needs_map_and_clock(self):
        self.assertEqual(gates.machine_stage(self.state), "dormant")
        self.state.latch("c2_map_revealed")
        self.assertEqual(gates.machine_stage(self.state), "dormant")
        self.state.latch("c2_clock_awakened")
        self.assertEqual(gates.machine_stage(self.state), "ready")
        self.state.latch("c2_machine_awake")
        self.assertEqual(gates.machine_stage(self.state), "awake")
        self.state.latch("c2_ticket_taken")
        self.assertEqual(gates.machine_stage(self.state), "spent")

    def test_poster_stages(self):
        self.assertEqual(gates.poster_stage(self.state), "first_glimpse")
        self.state.add_clue("Living symbols")
        self.assertEqual(gates.poster_stage(self.state), "stabilizing")
        self.state.latch("c2_symbols_stabilized")
        self.assertEqual(gates.poster_stage(self.state), "stable")

    def test_ticket_blockers(self):
        self.assertEqual(gates.ticket_blocker(self.state), "wrong_scene")
        self.state.move_to("machine-area")
        self.assertEqual(gates.ticket_blocker(self.state), "machine_asleep")
        self.state.latch("c2_machine_awake")
        self.assertIsNone(gates.ticket_blocker(self.state))
        self.state.latch("c2_ticket_taken")
        self.assertEqual(gates.ticket_blocker(self.state), "already_taken")

    def test_gate_stages(self):
        self.assertEqual(gates.gate_stage(self.state), "sealed")
        self.state.latch("c2_ticket_taken")
        self.assertEqual(gates.gate_stage(self.state), "waiting")
        self.state.latch("c2_gate_opened")
        self.assertEqual(gates.gate_stage(self.state), "open")

    def test_gates_do_not_mutate(self):
        before = self.state.snapshot()
        for check in (gates.map_board_stage, gates.machine_stage, gates.poster_stage,
                      gates.gate_stage, gates.ticket_blocker, gates.holds_ticket):
            check(self.state)
        self.assertEqual(self.state.snapshot(), before)


if __name__ == '__main__':
    unittest.main()
