import io
import json
import os
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

from PySide6.QtCore import QCoreApplication

from rubik_engine import config
from rubik_engine.__main__ import main as cli_main
from rubik_engine.core import CubeState
from rubik_engine.core.types import Move
from rubik_engine.logic.move_engine import apply_move


def _run(*argv):
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = cli_main(list(argv))
    return code, out.getvalue(), err.getvalue()


class TestMain(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = QCoreApplication.instance() or QCoreApplication([])

    def test_sexy_move_repeated_six_times(self):
        code, out, _ = _run("R U R' U'", "--repeat", "6")
        self.assertEqual(code, 0)
        self.assertIn("Estado: resuelto", out)

    def test_json_output(self):
        code, out, _ = _run("R", "--json")
        self.assertEqual(code, 0)
        first = out.splitlines()[0]
        self.assertEqual(CubeState.deserialize(first), apply_move(CubeState.solved(), Move.R))

    def test_from_state(self):
        start = apply_move(CubeState.solved(), Move.U)
        code, out, _ = _run("U'", "--from-state", start.serialize())
        self.assertEqual(code, 0)
        self.assertIn("Estado: resuelto", out)

    def test_invalid_notation_exit_code(self):
        code, _, err = _run("R X")
        self.assertEqual(code, 2)
        self.assertIn("X", err)

    def test_invalid_state_exit_code(self):
        code, _, _ = _run("--from-state", json.dumps([0] * 54))
        self.assertEqual(code, 2)

    def test_negative_repeat_exit_code(self):
        code, _, err = _run("R", "--repeat", "-3")
        self.assertEqual(code, 2)
        self.assertIn("--repeat", err)

    def test_unknown_log_level_exit_code(self):
        with mock.patch.dict(os.environ, {config.LOG_LEVEL_ENV: "foo"}):
            code, _, err = _run("R")
        self.assertEqual(code, 2)
        self.assertIn(config.LOG_LEVEL_ENV, err)

    def test_deeply_nested_state_exit_code(self):
        code, _, _ = _run("--from-state", "[" * 100000)
        self.assertEqual(code, 2)

    def test_scramble(self):
        code, out, _ = _run("--scramble", "10")
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("Scramble: "))


if __name__ == "__main__":
    unittest.main()
