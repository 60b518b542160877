import threading
import unittest
from datetime import date

from lotostat.db import create_sql_store
from lotostat.repositories.draw_store import InMemoryDrawStore
from lotostat.repositories.records import Category, NewDraw


def make_draw(category, day, balls):
    return NewDraw(category, date.fromisoformat(day), *balls)


class DrawStoreContract:
    """Behaviour shared by every draw store; mixed into concrete test cases."""

    def make_store(self):
        raise NotImplementedError

    def setUp(self):
        self.store = self.make_store()

    def test_insert_assigns_increasing_ids(self):
        first = self.store.insert(make_draw(Category.GH18, "2024-01-01", [5, 12, 33, 47, 90]))
        second = self.store.insert(make_draw(Category.CIV10, "2024-01-02", [1, 2, 3, 4, 5]))

        self.assertEqual(first.id, 1)
        self.assertEqual(second.id, 2)
        self.assertEqual(first.category, Category.GH18)
        self.assertEqual(first.balls, (5, 12, 33, 47, 90))
        self.assertIsNotNone(first.created_at)

    def test_ids_are_not_reused_after_delete(self):
        first = self.store.insert(make_draw(Category.GH18, "2024-01-01", [1, 2, 3, 4, 5]))
        second = self.store.insert(make_draw(Category.GH18, "2024-01-02", [6, 7, 8, 9, 10]))
        self.assertTrue(self.store.delete_by_id(second.id))
        self.assertTrue(self.store.delete_by_id(first.id))

        third = self.store.insert(make_draw(Category.GH18, "2024-01-03", [11, 12, 13, 14, 15]))
        self.assertEqual(third.id, 3)

    def test_delete_missing_id_returns_false(self):
        self.assertFalse(self.store.delete_by_id(42))

        draw = self.store.insert(make_draw(Category.GH18, "2024-01-01", [1, 2, 3, 4, 5]))
        self.assertTrue(self.store.delete_by_id(draw.id))
        self.assertFalse(self.store.delete_by_id(draw.id))

    def test_get_by_id(self):
        draw = self.store.insert(make_draw(Category.CIV13, "2024-03-05", [10, 20, 30, 40, 50]))

        fetched = self.store.get_by_id(draw.id)
        self.assertIsNotNone(fetched)
        self.assertEqual(fetched.id, draw.id)
        self.assertEqual(fetched.draw_date, date(2024, 3, 5))
        self.assertIsNone(self.store.get_by_id(draw.id + 1))

    def test_list_by_category_sorted_newest_first(self):
        self.store.insert(make_draw(Category.GH18, "2024-01-02", [1, 2, 3, 4, 5]))
        self.store.insert(make_draw(Category.GH18, "2024-01-05", [6, 7, 8, 9, 10]))
        self.store.insert(make_draw(Category.CIV16, "2024-01-09", [11, 12, 13, 14, 15]))
        self.store.insert(make_draw(Category.GH18, "2024-01-01", [16, 17, 18, 19, 20]))

        dates = [d.draw_date.isoformat() for d in self.store.list_by_category(Category.GH18)]
        self.assertEqual(dates, ["2024-01-05", "2024-01-02", "2024-01-01"])
        self.assertEqual(len(self.store.list_by_category(Category.CIV16)), 1)
        self.assertEqual(self.store.list_by_category(Category.CIV10), [])

    def test_equal_dates_keep_insertion_order(self):
        a = self.store.insert(make_draw(Category.GH18, "2024-01-01", [1, 2, 3, 4, 5]))
        b = self.store.insert(make_draw(Category.GH18, "2024-01-02", [6, 7, 8, 9, 10]))
        c = self.store.insert(make_draw(Category.GH18, "2024-01-01", [11, 12, 13, 14, 15]))
        d = self.store.insert(make_draw(Category.GH18, "2024-01-02", [16, 17, 18, 19, 20]))

        ids = [draw.id for draw in self.store.list_by_category(Category.GH18)]
        self.assertEqual(ids, [b.id, d.id, a.id, c.id])

    def test_delete_all_in_category_leaves_others(self):
        self.store.insert(make_draw(Category.GH18, "2024-01-01", [1, 2, 3, 4, 5]))
        self.store.insert(make_draw(Category.GH18, "2024-01-02", [6, 7, 8, 9, 10]))
        kept = self.store.insert(make_draw(Category.CIV10, "2024-01-01", [1, 2, 3, 4, 5]))

        self.assertTrue(self.store.delete_all_in_category(Category.GH18))
        self.assertEqual(self.store.list_by_category(Category.GH18), [])
        self.assertEqual([d.id for d in self.store.list_by_category(Category.CIV10)], [kept.id])

    def test_delete_all_in_empty_category(self):
        self.assertTrue(self.store.delete_all_in_category(Category.CIV13))

    def test_accepts_category_token_strings(self):
        self.store.insert(make_draw("CIV16", "2024-01-01", [1, 2, 3, 4, 5]))

        draws = self.store.list_by_category("CIV16")
        self.assertEqual(len(draws), 1)
        self.assertIs(draws[0].category, Category.CIV16)


class InMemoryDrawStoreTests(DrawStoreContract, unittest.TestCase):
    def make_store(self):
        return InMemoryDrawStore()

    def test_concurrent_inserts_and_deletes_get_unique_ids(self):
        per_thread = 200
        results = []
        deleted = []

        def worker():
            ids = []
            removed = []
            for i in range(per_thread):
                balls = [1, 2, 3, 4, (i % 80) + 10]
                draw = self.store.insert(make_draw(Category.GH18, "2024-01-01", balls))
                ids.append(draw.id)
                # Every other draw is removed again; its id must stay retired.
                if i % 2:
                    removed.append(self.store.delete_by_id(draw.id))
                self.store.list_by_category(Category.GH18)
            results.append(ids)
            deleted.extend(removed)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(len(results), 8)
        self.assertEqual(deleted, [True] * (8 * per_thread // 2))
        all_ids = [draw_id for ids in results for draw_id in ids]
        self.assertEqual(len(all_ids), 8 * per_thread)
        self.assertEqual(len(set(all_ids)), len(all_ids))
        self.assertEqual(sorted(all_ids), list(range(1, 8 * per_thread + 1)))
        self.assertEqual(len(self.store.list_by_category(Category.GH18)), 8 * per_thread // 2)

        next_draw = self.store.insert(make_draw(Category.GH18, "2024-01-02", [1, 2, 3, 4, 5]))
        self.assertEqual(next_draw.id, 8 * per_thread + 1)

    def test_instances_are_isolated(self):
        self.store.insert(make_draw(Category.GH18, "2024-01-01", [1, 2, 3, 4, 5]))

        other = InMemoryDrawStore()
        self.assertEqual(other.list_by_category(Category.GH18), [])
        self.assertEqual(other.insert(make_draw(Category.GH18, "2024-01-01", [1, 2, 3, 4, 5])).id, 1)


class SqlDrawStoreTests(DrawStoreContract, unittest.TestCase):
    def make_store(self):
        return create_sql_store("sqlite://")


if __name__ == "__main__":
    unittest.main()
