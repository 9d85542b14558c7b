from FD2NF.engine import RelationalSchema


def _schema(*pairs):
    return RelationalSchema.from_records({"lhs": lhs, "rhs": rhs} for lhs, rhs in pairs)


def test_three_candidate_keys():
    schema = _schema((["a"], ["b", "c", "d"]), (["b", "c"], ["a", "d"]), (["d"], ["b"]))
    keys = schema.candidate_keys()

    assert sorted(keys) == [("a",), ("b", "c"), ("c", "d")]
    assert len(set(keys)) == len(keys)
    for key in keys:
        assert schema.attribute_closure(key) == frozenset(schema.attributes())
        assert not schema.can_minimize(key)
    assert schema.prime_attributes() == frozenset({"a", "b", "c", "d"})


def test_cyclic_keys():
    schema = _schema((["a"], ["b"]), (["b"], ["a"]))
    assert sorted(schema.candidate_keys()) == [("a",), ("b",)]


def test_undetermined_attributes_form_the_only_key():
    schema = _schema((["a", "b"], ["c"]))
    assert schema.candidate_keys() == [("a", "b")]
    assert schema.prime_attributes() == frozenset({"a", "b"})


def test_shared_context_gives_same_keys():
    schema = _schema((["a"], ["b"]), (["b"], ["c"]))
    context = schema.context()
    assert schema.candidate_keys(context) == schema.candidate_keys() == [("a",)]
