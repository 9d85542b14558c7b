from FD2NF.engine import RelationalSchema
from FD2NF.ir.models.dependency import FunctionalDependency


def _schema(*pairs):
    return RelationalSchema(FunctionalDependency(tuple(lhs), tuple(rhs)) for lhs, rhs in pairs)


def test_order_does_not_matter():
    first = _schema(("a", "b"), ("b", "c"))
    second = _schema(("b", "c"), ("a", "b"))
    assert first.equals(second)
    assert second.equals(first)


def test_dropping_a_needed_dependency():
    assert not _schema(("a", "b"), ("b", "a")).equals(_schema(("a", "b")))


def test_trivial_dependency_adds_nothing():
    assert _schema(("a", "b"), ("ab", "b")).equals(_schema(("a", "b")))


def test_derived_dependency_adds_nothing():
    assert _schema(("a", "b"), ("b", "c"), ("a", "c")).equals(_schema(("a", "b"), ("b", "c")))


def test_different_universes():
    assert not _schema(("a", "b")).equals(_schema(("a", "c")))


def test_other_types_are_not_equal():
    schema = _schema(("a", "b"))
    assert not schema.equals(None)
    assert not schema.equals([FunctionalDependency(("a",), ("b",))])


def test_equals_with_context():
    schema = _schema(("a", "b"), ("b", "c"))
    assert schema.equals(schema.minimal_cover(), context=schema.context())
