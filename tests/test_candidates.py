import io
import unittest

from sessh.core.candidates import display, display_sessions, printable, resolve
from sessh.core.errors import OutOfRange


class ResolveTests(unittest.TestCase):
    def test_index_arithmetic_over_both_lists(self):
        cases = [
            ([], []),
            (["s1"], []),
            ([], ["t1", "t2"]),
            (["s1", "s2"], ["t1"]),
            (["s1", "s2", "s3"], ["t1", "t2", "t3", "t4"]),
        ]
        for sessions, trusted in cases:
            total = len(sessions) + len(trusted)
            for index in range(-2, total + 3):
                if 1 <= index <= len(sessions):
                    self.assertEqual(resolve(index, sessions, trusted), sessions[index - 1])
                elif len(sessions) < index <= total:
                    self.assertEqual(
                        resolve(index, sessions, trusted),
                        trusted[index - 1 - len(sessions)],
                    )
                else:
                    with self.assertRaises(OutOfRange):
                        resolve(index, sessions, trusted)

    def test_last_trusted_host_is_reachable(self):
        self.assertEqual(resolve(3, ["a", "b"], ["c"]), "c")

    def test_out_of_range_reports_bound(self):
        with self.assertRaises(OutOfRange) as ctx:
            resolve(99, ["a", "b"], [])
        self.assertEqual(ctx.exception.index, 99)
        self.assertEqual(ctx.exception.upper, 2)


class DisplayTests(unittest.TestCase):
    def test_trusted_numbering_continues_after_sessions(self):
        out = io.StringIO()
        display(["alice@h1", "bob@h2"], ["h3", "h4"], out)
        lines = [line for line in out.getvalue().splitlines() if not line.startswith("-")]
        self.assertEqual(lines, ["1: alice@h1", "2: bob@h2", "3: h3", "4: h4"])

    def test_trusted_only_starts_at_one(self):
        out = io.StringIO()
        display([], ["h3"], out)
        self.assertEqual(out.getvalue(), "1: h3\n")

    def test_undecodable_entries_are_printable(self):
        entry = b"caf\xe9@h1".decode("utf-8", "surrogateescape")
        self.assertEqual(printable(entry), "caf\ufffd@h1")
        out = io.StringIO()
        display_sessions([entry], out)
        self.assertEqual(out.getvalue(), "1: caf\ufffd@h1\n")

    def test_display_sessions_empty(self):
        out = io.StringIO()
        display_sessions([], out)
        self.assertIn("no stored sessions", out.getvalue())


if __name__ == "__main__":
    unittest.main()
