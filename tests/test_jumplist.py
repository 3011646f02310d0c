import unittest

from pagewise.core.constants import JumpDirection
from pagewise.core.jumplist import JumpEntry, Jumplist, bisect


def entry(page):
    return JumpEntry(page, 0.0, 0.0)


def pages(jumplist):
    return [e.page for e in jumplist.entries]


class JumplistTests(unittest.TestCase):
    def test_empty(self):
        jumplist = Jumplist()
        self.assertEqual(len(jumplist), 0)
        self.assertIsNone(jumplist.current())
        self.assertFalse(jumplist.backward())
        self.assertFalse(jumplist.forward())
        self.assertFalse(jumplist.replace(0, entry(1)))

    def test_save_starts_list_then_overwrites(self):
        jumplist = Jumplist()
        jumplist.save(entry(3))
        jumplist.save(entry(4))
        self.assertEqual(pages(jumplist), [4])
        self.assertEqual(jumplist.cursor, 0)

    def test_add_moves_cursor_to_tail(self):
        jumplist = Jumplist()
        jumplist.save(entry(0))
        jumplist.add(entry(5))
        jumplist.add(entry(9))
        self.assertEqual(pages(jumplist), [0, 5, 9])
        self.assertEqual(jumplist.current(), entry(9))
        self.assertFalse(jumplist.has_next())
        self.assertTrue(jumplist.has_previous())

    def test_back_and_forth(self):
        jumplist = Jumplist()
        jumplist.save(entry(1))
        jumplist.add(entry(2))
        self.assertTrue(jumplist.backward())
        self.assertEqual(jumplist.current(), entry(1))
        self.assertFalse(jumplist.backward())
        self.assertTrue(jumplist.forward())
        self.assertEqual(jumplist.current(), entry(2))

    def test_save_after_going_back_discards_forward_branch(self):
        jumplist = Jumplist()
        jumplist.save(entry(1))
        jumplist.add(entry(2))
        jumplist.backward()
        jumplist.save(entry(7))
        self.assertEqual(pages(jumplist), [7])
        self.assertFalse(jumplist.has_next())

    def test_add_after_going_back_discards_forward_branch(self):
        jumplist = Jumplist()
        for page in (1, 2, 3):
            jumplist.add(entry(page))
        jumplist.backward()
        jumplist.backward()
        jumplist.add(entry(8))
        self.assertEqual(pages(jumplist), [1, 8])
        self.assertEqual(jumplist.cursor, 1)

    def test_capacity_drops_oldest(self):
        jumplist = Jumplist(capacity=3)
        for page in range(1, 6):
            jumplist.add(entry(page))
        self.assertEqual(pages(jumplist), [3, 4, 5])
        self.assertEqual(jumplist.cursor, 2)

    def test_peek_and_replace_do_not_move_cursor(self):
        jumplist = Jumplist()
        for page in (1, 2, 3):
            jumplist.add(entry(page))
        self.assertEqual(jumplist.peek_back(2), entry(1))
        self.assertIsNone(jumplist.peek_back(3))
        self.assertTrue(jumplist.replace(1, entry(6)))
        self.assertEqual(pages(jumplist), [1, 6, 3])
        self.assertEqual(jumplist.cursor, 2)

    def test_clear(self):
        jumplist = Jumplist()
        jumplist.add(entry(1))
        jumplist.clear()
        self.assertEqual(len(jumplist), 0)
        self.assertEqual(jumplist.cursor, 0)


class BisectTests(unittest.TestCase):
    def test_repeated_bisection_narrows_interval(self):
        jumplist = Jumplist()
        current = 10
        visited = []
        for direction in "FFBFFFFF":
            direction = JumpDirection.FORWARD if direction == "F" else JumpDirection.BACKWARD
            current = bisect(jumplist, current, 100, direction)
            visited.append(current)
        self.assertEqual(visited, [54, 76, 65, 70, 73, 74, 75, 75])

    def test_first_forward_uses_rest_of_document(self):
        jumplist = Jumplist()
        self.assertEqual(bisect(jumplist, 10, 100, JumpDirection.FORWARD), 54)
        self.assertEqual(pages(jumplist), [10, 54])

    def test_first_backward_halves_towards_start(self):
        jumplist = Jumplist()
        self.assertEqual(bisect(jumplist, 10, 100, JumpDirection.BACKWARD), 5)

    def test_explicit_page_after_current_searches_forward(self):
        jumplist = Jumplist()
        self.assertEqual(bisect(jumplist, 10, 100, JumpDirection.BACKWARD, page=30), 64)
        self.assertEqual(pages(jumplist), [10, 30, 64])

    def test_explicit_page_before_current_searches_backward(self):
        jumplist = Jumplist()
        self.assertEqual(bisect(jumplist, 10, 100, JumpDirection.FORWARD, page=5), 2)

    def test_out_of_range_page_is_ignored(self):
        jumplist = Jumplist()
        self.assertEqual(bisect(jumplist, 10, 100, JumpDirection.FORWARD, page=400), 54)

    def test_empty_document_records_nothing(self):
        jumplist = Jumplist()
        self.assertEqual(bisect(jumplist, 0, 0, JumpDirection.FORWARD), 0)
        self.assertEqual(len(jumplist), 0)

    def test_single_page_document(self):
        for direction in JumpDirection:
            self.assertEqual(bisect(Jumplist(), 0, 1, direction), 0)

    def test_entry_factory_is_used(self):
        jumplist = Jumplist()
        bisect(
            jumplist, 2, 10, JumpDirection.FORWARD,
            entry_for=lambda page: JumpEntry(page, 1.0, 2.0),
        )
        self.assertEqual(jumplist.current(), JumpEntry(5, 1.0, 2.0))


if __name__ == "__main__":
    unittest.main()
