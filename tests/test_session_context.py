import sys
import unittest
from dataclasses import FrozenInstanceError
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from gamingservices.models import SessionContext, SessionContextHolder


class TestSessionContextHolder(unittest.TestCase):
    def test_starts_empty(self) -> None:
        self.assertIsNone(SessionContextHolder().current)

    def test_set_current_replaces_previous(self) -> None:
        holder = SessionContextHolder()
        holder.set_current(SessionContext("t1"))
        holder.set_current(SessionContext("t2"))
        self.assertEqual(holder.current.context_id, "t2")

    def test_set_current_none_clears(self) -> None:
        holder = SessionContextHolder()
        holder.set_current(SessionContext("t1"))
        holder.set_current(None)
        self.assertIsNone(holder.current)

    def test_context_is_immutable(self) -> None:
        context = SessionContext("t1")
        with self.assertRaises(FrozenInstanceError):
            context.context_id = "t2"


if __name__ == "__main__":
    unittest.main()
