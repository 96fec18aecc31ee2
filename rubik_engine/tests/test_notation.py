import unittest

from rubik_engine.core import Face, Move
from rubik_engine.core.errors import InvalidMoveNotation
from rubik_engine.logic.notation import ALL_TOKENS, format_sequence, parse_notation


class TestParseNotation(unittest.TestCase):
    def test_sexy_move(self):
        self.assertEqual(
            parse_notation("R U R' U'"),
            [Move.R, Move.U, Move.R_PRIME, Move.U_PRIME],
        )

    def test_empty_and_blank_input(self):
        self.assertEqual(parse_notation(""), [])
        self.assertEqual(parse_notation("   \t\n "), [])

    def test_unknown_token(self):
        with self.assertRaises(InvalidMoveNotation) as ctx:
            parse_notation("X")
        self.assertEqual(ctx.exception.token, "X")

    def test_first_bad_token_is_reported(self):
        with self.assertRaises(InvalidMoveNotation) as ctx:
            parse_notation("R U Q Z")
        self.assertEqual(ctx.exception.token, "Q")

    def test_whitespace_runs(self):
        self.assertEqual(parse_notation("  F2\t\tD'\n B "), [Move.F2, Move.D_PRIME, Move.B])

    def test_case_sensitive(self):
        for tok in ("r", "u'", "f2"):
            with self.assertRaises(InvalidMoveNotation):
                parse_notation(tok)

    def test_rejects_extended_suffixes(self):
        for tok in ("R2'", "R3", "R''", "M", "x", "R’"):
            with self.assertRaises(InvalidMoveNotation) as ctx:
                parse_notation(f"U {tok}")
            self.assertEqual(ctx.exception.token, tok)

    def test_notation_error_is_value_error(self):
        with self.assertRaises(ValueError):
            parse_notation("R E")

    def test_all_tokens(self):
        self.assertEqual(len(ALL_TOKENS), 18)
        self.assertEqual(len(set(ALL_TOKENS)), 18)
        self.assertEqual(parse_notation(" ".join(ALL_TOKENS)), list(Move))


class TestMoveVocabulary(unittest.TestCase):
    def test_move_attributes(self):
        self.assertEqual(Move.R.face, Face.R)
        self.assertEqual(Move.R.turns, 1)
        self.assertEqual(Move.R_PRIME.turns, 3)
        self.assertTrue(Move.B2.is_half_turn)
        self.assertFalse(Move.B2.is_quarter_turn)
        self.assertEqual(str(Move.L_PRIME), "L'")

    def test_for_face(self):
        self.assertEqual(Move.for_face(Face.D, 2), Move.D2)
        self.assertEqual(Move.for_face(Face.D, -1), Move.D_PRIME)
        with self.assertRaises(ValueError):
            Move.for_face(Face.D, 4)


class TestFormatSequence(unittest.TestCase):
    def test_format(self):
        self.assertEqual(format_sequence([Move.F, Move.U2, Move.L_PRIME]), "F U2 L'")
        self.assertEqual(format_sequence([]), "")

    def test_parse_of_formatted_text(self):
        text = "R U R' U' R' F R2 U' R' U' R U R' F'"
        self.assertEqual(format_sequence(parse_notation(text)), text)


if __name__ == "__main__":
    unittest.main()
