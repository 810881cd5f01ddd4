"""Tests for the Rectangle model."""

from selectorkit import Rectangle


class TestRectangle:
    def test_fields(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self):
        assert Rectangle(10, 20).get_area() == 200

    def test_area_follows_mutation(self):
        r = Rectangle(10, 20)
        r.width = 5
        assert r.get_area() == 100
        r.height = 0
        assert r.get_area() == 0

    def test_float_dimensions(self):
        assert Rectangle(1.5, 2).get_area() == 3.0

    def test_equality(self):
        assert Rectangle(1, 2) == Rectangle(1, 2)
        assert Rectangle(1, 2) != Rectangle(2, 1)
