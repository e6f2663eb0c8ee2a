import io
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import start_shell


class StartShellArgsTest(unittest.TestCase):
    def test_env_and_cli_parsing(self):
        env = {"BSTDICT_INPUT": "env.txt", "BSTDICT_LOG_LEVEL": "info"}
        with patch.dict(os.environ, env, clear=True):
            args = start_shell.parse_args([])
            self.assertEqual(args.input_file, "env.txt")
            self.assertEqual(args.log_level, "INFO")

            args = start_shell.parse_args(["cli.txt", "--log-level", "debug"])
            self.assertEqual(args.input_file, "cli.txt")
            self.assertEqual(args.log_level, "DEBUG")

    def test_missing_input_is_a_usage_error(self):
        with patch.dict(os.environ, {}, clear=True):
            with patch("sys.stderr", new_callable=io.StringIO):
                with self.assertRaises(SystemExit) as cm:
                    start_shell.parse_args([])
        self.assertEqual(cm.exception.code, 2)


class StartShellMainTest(unittest.TestCase):
    def test_main_runs_commands_until_exit(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "input.txt")
            with open(path, "w", encoding="utf-8") as f:
                f.write("cat\nA small feline\n")
            buf = io.StringIO()
            with patch("builtins.input", side_effect=["define cat", "exit", "define dog"]):
                with redirect_stdout(buf):
                    status = start_shell.main([path])
            self.assertEqual(status, 0)
            self.assertEqual(buf.getvalue(), "A small feline\n")

    def test_main_stops_at_end_of_input(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "input.txt")
            with open(path, "w", encoding="utf-8") as f:
                f.write("cat\nA small feline\n")
            with patch("builtins.input", side_effect=["first", EOFError]):
                with redirect_stdout(io.StringIO()) as buf:
                    status = start_shell.main([path])
            self.assertEqual(status, 0)
            self.assertEqual(buf.getvalue(), "cat,1,A small feline\n")

    def test_main_loads_latin1_seed_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "input.txt")
            with open(path, "wb") as f:
                f.write("chat\n/ch\u00e2t\n".encode("latin-1"))
            buf = io.StringIO()
            with patch("builtins.input", side_effect=["translate chat", "exit"]):
                with redirect_stdout(buf):
                    status = start_shell.main([path])
            self.assertEqual(status, 0)
            self.assertEqual(buf.getvalue(), "ch\u00e2t\n")

    def test_main_reports_unreadable_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            buf = io.StringIO()
            with redirect_stdout(buf):
                status = start_shell.main([os.path.join(tmpdir, "missing.txt")])
            self.assertEqual(status, 1)
            self.assertTrue(buf.getvalue().startswith("Error reading file: "))

    def test_main_reports_dictionary_error(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "input.txt")
            with open(path, "w", encoding="utf-8") as f:
                f.write("cat\nfeline\nCat\nagain\n")
            buf = io.StringIO()
            with redirect_stdout(buf):
                status = start_shell.main([path])
            self.assertEqual(status, 1)
            self.assertEqual(
                buf.getvalue(),
                "Dictionary error: Record with the same key already exists.\n",
            )


if __name__ == "__main__":
    unittest.main()
