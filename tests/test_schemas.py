import unittest
from datetime import date, datetime, timezone

from marshmallow import ValidationError

from lotostat.repositories.records import Category, Draw, NewDraw
from lotostat.schemas.draw import DrawCreateSchema, DrawSchema


def payload(**overrides):
    data = {
        "category": "GH18",
        "draw_date": "2024-01-01",
        "ball1": 5,
        "ball2": 12,
        "ball3": 33,
        "ball4": 47,
        "ball5": 90,
    }
    data.update(overrides)
    return data


class DrawCreateSchemaTests(unittest.TestCase):
    def setUp(self):
        self.schema = DrawCreateSchema()

    def test_loads_new_draw(self):
        new_draw = self.schema.load(payload())

        self.assertIsInstance(new_draw, NewDraw)
        self.assertIs(new_draw.category, Category.GH18)
        self.assertEqual(new_draw.draw_date, date(2024, 1, 1))
        self.assertEqual(new_draw.balls, (5, 12, 33, 47, 90))

    def test_rejects_unknown_category(self):
        with self.assertRaises(ValidationError) as ctx:
            self.schema.load(payload(category="LOTTO"))
        self.assertIn("category", ctx.exception.messages)

    def test_rejects_out_of_range_balls(self):
        for bad in (0, 91):
            with self.assertRaises(ValidationError) as ctx:
                self.schema.load(payload(ball3=bad))
            self.assertIn("ball3", ctx.exception.messages)

    def test_rejects_non_integer_balls(self):
        with self.assertRaises(ValidationError) as ctx:
            self.schema.load(payload(ball1="5"))
        self.assertIn("ball1", ctx.exception.messages)

    def test_rejects_duplicate_balls(self):
        with self.assertRaises(ValidationError) as ctx:
            self.schema.load(payload(ball2=5))
        self.assertEqual(ctx.exception.messages["balls"], ["All ball numbers must be unique"])

    def test_requires_every_field(self):
        data = payload()
        del data["ball5"]
        del data["draw_date"]
        with self.assertRaises(ValidationError) as ctx:
            self.schema.load(data)
        self.assertIn("ball5", ctx.exception.messages)
        self.assertIn("draw_date", ctx.exception.messages)


class DrawSchemaTests(unittest.TestCase):
    def test_dumps_stored_draw(self):
        draw = Draw(
            id=7,
            category=Category.CIV13,
            draw_date=date(2024, 2, 29),
            ball1=1,
            ball2=2,
            ball3=3,
            ball4=4,
            ball5=5,
            created_at=datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc),
        )

        dumped = DrawSchema().dump(draw)

        self.assertEqual(dumped["id"], 7)
        self.assertEqual(dumped["category"], "CIV13")
        self.assertEqual(dumped["draw_date"], "2024-02-29")
        self.assertEqual([dumped[f"ball{i}"] for i in range(1, 6)], [1, 2, 3, 4, 5])
        self.assertTrue(dumped["created_at"].startswith("2024-03-01T12:00:00"))


if __name__ == "__main__":
    unittest.main()
