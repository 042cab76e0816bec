"""Unit tests for member metric collectors (MIF, MHF, AHF, AIF, POF)."""

import pytest

from oo_metrics.analysis.collectors.members import ahf, aif, mhf, mif, pof, ratio
from oo_metrics.analysis.model import ClassCollection, ClassDescriptor


@pytest.fixture
def shape_collection() -> ClassCollection:
    """Hierarchy with direct overrides and mixed visibility.

    Shape:   area, draw, _cache        | name, _id
    Circle:  area, _cache, radius      | name, radius
    Square:  draw, side                | _id, side
    """
    return ClassCollection.from_dict(
        {
            "Shape": {
                "methods": ["area", "draw", "_cache"],
                "attributes": ["name", "_id"],
            },
            "Circle": {
                "parent": "Shape",
                "methods": ["area", "_cache", "radius"],
                "attributes": ["name", "radius"],
            },
            "Square": {
                "parent": "Shape",
                "methods": ["draw", "side"],
                "attributes": ["_id", "side"],
            },
        }
    )


class TestRatio:
    def test_zero_denominator(self):
        assert ratio(0, 0) == 0.0
        assert ratio(5, 0) == 0.0

    def test_float_division(self):
        assert ratio(1, 3) == pytest.approx(1 / 3)
        assert isinstance(ratio(2, 2), float)


class TestSampleHierarchy:
    """Factor values for the Animal sample hierarchy."""

    def test_mif(self, animal_collection):
        # Dog/Cat override make_sound, but Mammal declares nothing directly
        assert mif(animal_collection) == 0.0

    def test_mhf(self, animal_collection):
        assert mhf(animal_collection) == pytest.approx(0.4)

    def test_ahf(self, animal_collection):
        assert ahf(animal_collection) == 0.0

    def test_aif(self, animal_collection):
        assert aif(animal_collection) == 0.0

    def test_pof(self, animal_collection):
        assert pof(animal_collection) == 0.0


class TestInheritanceFactors:
    """Test MIF and AIF."""

    def test_mif(self, shape_collection):
        # Circle: area, _cache match (2); Square: draw matches (1); total 8
        assert mif(shape_collection) == pytest.approx(3 / 8)

    def test_aif(self, shape_collection):
        # Circle: name (1); Square: _id (1); total 6
        assert aif(shape_collection) == pytest.approx(2 / 6)

    def test_direct_parent_only(self):
        """A grandparent method does not count when the parent omits it."""
        collection = ClassCollection.from_dict(
            {
                "A": {"methods": ["run"]},
                "B": {"parent": "A"},
                "C": {"parent": "B", "methods": ["run"]},
            }
        )
        assert mif(collection) == 0.0

    def test_counted_once_per_class_method(self):
        collection = ClassCollection.from_dict(
            {"A": {"methods": ["run", "run"]}, "B": {"parent": "A", "methods": ["run"]}}
        )
        assert mif(collection) == pytest.approx(1 / 3)

    def test_parent_outside_collection(self):
        base = ClassDescriptor("Base", methods=("run",), attributes=("x",))
        child = ClassDescriptor("Child", parent=base, methods=("run",), attributes=("x",))
        collection = ClassCollection([child])
        assert mif(collection) == 1.0
        assert aif(collection) == 1.0

    def test_empty(self):
        assert mif(ClassCollection()) == 0.0
        assert aif(ClassCollection()) == 0.0


class TestHidingFactors:
    """Test MHF and AHF."""

    def test_mhf(self, shape_collection):
        # _cache twice out of 8 methods
        assert mhf(shape_collection) == pytest.approx(2 / 8)

    def test_ahf(self, shape_collection):
        # _id twice out of 6 attributes
        assert ahf(shape_collection) == pytest.approx(2 / 6)

    def test_all_private(self):
        collection = ClassCollection.from_dict(
            {"A": {"methods": ["_a", "__b"], "attributes": ["_x"]}}
        )
        assert mhf(collection) == 1.0
        assert ahf(collection) == 1.0

    def test_no_members(self):
        collection = ClassCollection.from_dict({"A": {}, "B": {"parent": "A"}})
        assert mhf(collection) == 0.0
        assert ahf(collection) == 0.0


class TestPolymorphismFactor:
    """Test POF."""

    def test_pof(self, shape_collection):
        # Public methods: Shape area, draw; Circle area, radius; Square draw, side
        # Overridden public: Circle.area, Square.draw
        assert pof(shape_collection) == pytest.approx(2 / 6)

    def test_private_override_excluded(self):
        collection = ClassCollection.from_dict(
            {"A": {"methods": ["_hook"]}, "B": {"parent": "A", "methods": ["_hook"]}}
        )
        assert pof(collection) == 0.0
        assert mif(collection) == pytest.approx(1 / 2)

    def test_no_public_methods(self):
        collection = ClassCollection.from_dict({"A": {"methods": ["_a"]}})
        assert pof(collection) == 0.0


class TestFactorProperties:
    """Properties shared by every factor metric."""

    @pytest.mark.parametrize("metric", [mif, mhf, ahf, aif, pof])
    def test_bounded(self, metric, shape_collection, animal_collection):
        for collection in (shape_collection, animal_collection):
            assert 0.0 <= metric(collection) <= 1.0

    @pytest.mark.parametrize("metric", [mif, mhf, ahf, aif, pof])
    def test_idempotent(self, metric, shape_collection):
        before = shape_collection.to_dict()
        assert metric(shape_collection) == metric(shape_collection)
        assert shape_collection.to_dict() == before
