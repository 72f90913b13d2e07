import unittest
import io
import sys
import os
from contextlib import redirect_stdout

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from tile_maze.main import main


class TestCLI(unittest.TestCase):
    def run_cli(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(list(argv))
        return code, out.getvalue()

    def test_generate_and_solve(self):
        code, out = self.run_cli("generate", "--rows", "9", "--cols", "11",
                                 "--algo", "kruskal", "--seed", "3",
                                 "--solve", "0", "0", "--stats")
        self.assertEqual(code, 0)
        lines = out.strip("\n").split("\n")
        self.assertEqual(len(lines), 9)
        self.assertTrue(all(len(line) == 11 for line in lines))
        self.assertIn(".", out)

    def test_no_print(self):
        code, out = self.run_cli("generate", "--algo", "prim", "--no-print")
        self.assertEqual(code, 0)
        self.assertEqual(out, "")

    def test_errors_exit_with_status_2(self):
        code, _ = self.run_cli("generate", "--rows", "4")
        self.assertEqual(code, 2)
        code, _ = self.run_cli("generate", "--rows", "5", "--cols", "5", "--solve", "3", "0")
        self.assertEqual(code, 2)

    def test_benchmark(self):
        code, out = self.run_cli("benchmark", "--size", "21")
        self.assertEqual(code, 0)
        for name in ("backtrack", "bfs", "prim", "kruskal"):
            self.assertIn(name, out)

    def test_no_command(self):
        code, out = self.run_cli()
        self.assertEqual(code, 0)
        self.assertIn("usage", out)


if __name__ == '__main__':
    unittest.main()
