"""Test building the update payload."""

from findorcreate.find_or_create import UpdateMode, build_update


def test_mode_from_options():
    assert UpdateMode.from_options({}) is UpdateMode.INSERT_ONLY
    assert UpdateMode.from_options({'upsert': False}) is UpdateMode.INSERT_ONLY
    assert UpdateMode.from_options({'upsert': True}) is UpdateMode.FULL_UPSERT


def test_insert_only_wraps_document():
    update = build_update(UpdateMode.INSERT_ONLY, {'name': 'Barbarus'})
    assert update == {'$setOnInsert': {'name': 'Barbarus'}}


def test_insert_only_nested_document():
    """Nested values are set whole, and only on insert."""
    doc = {'gear': {'sword': 1}, 'tags': ['cimmerian']}
    update = build_update(UpdateMode.INSERT_ONLY, doc)
    assert update == {'$setOnInsert': doc}


def test_empty_document():
    assert build_update(UpdateMode.INSERT_ONLY, None) == {'$setOnInsert': {}}
    assert build_update(UpdateMode.FULL_UPSERT, {}) == {'$setOnInsert': {}}


def test_upsert_plain_document():
    update = build_update(UpdateMode.FULL_UPSERT, {'name': 'Marcus'})
    assert update == {'$set': {'name': 'Marcus'}}


def test_upsert_operators_kept():
    doc = {'$inc': {'age': 1}, '$set': {'name': 'Marcus'}}
    assert build_update(UpdateMode.FULL_UPSERT, doc) == doc


def test_upsert_mixed_document():
    """Plain fields join the $set operator."""
    doc = {'$set': {'name': 'Marcus'}, 'age': 17}
    update = build_update(UpdateMode.FULL_UPSERT, doc)
    assert update == {'$set': {'name': 'Marcus', 'age': 17}}


def test_upsert_does_not_mutate_document():
    doc = {'$set': {'name': 'Marcus'}, 'age': 17}
    build_update(UpdateMode.FULL_UPSERT, doc)
    assert doc == {'$set': {'name': 'Marcus'}, 'age': 17}


def test_defaults_fill_missing_paths():
    update = build_update(
        UpdateMode.INSERT_ONLY,
        {'tags': []},
        query={'name': 'Valeria', '$or': [{'age': 1}]},
        insert_defaults={'name': 'x', 'tags': ['y'], 'age': 18, 'rank': 1})
    assert update == {'$setOnInsert': {'tags': [], 'age': 18, 'rank': 1}}


def test_defaults_skip_conflicting_paths():
    """Defaults never touch a parent or child of an updated path."""
    update = build_update(
        UpdateMode.FULL_UPSERT,
        {'$set': {'gear.sword': 2}},
        insert_defaults={'gear': {}, 'gear.sword.name': 'x', 'gearbox': 1})
    assert update == {
        '$set': {'gear.sword': 2},
        '$setOnInsert': {'gearbox': 1},
    }


def test_defaults_skip_and_equality():
    """Equality conditions nested in $and are set by the query on insert."""
    update = build_update(
        UpdateMode.INSERT_ONLY,
        None,
        query={'$and': [{'name': 'Valeria'}, {'age': {'$eq': 30}}]},
        insert_defaults={'name': 'x', 'age': 18, 'rank': 1})
    assert update == {'$setOnInsert': {'rank': 1}}


def test_defaults_fill_range_conditions():
    """A range condition sets no value, so the default still applies."""
    update = build_update(
        UpdateMode.INSERT_ONLY,
        None,
        query={'name': 'Valeria', 'rank': {'$gte': 3}},
        insert_defaults={'rank': 5, 'age': 18})
    assert update == {'$setOnInsert': {'rank': 5, 'age': 18}}


def test_defaults_skip_rename_target():
    update = build_update(
        UpdateMode.FULL_UPSERT,
        {'$rename': {'nick': 'alias'}},
        insert_defaults={'alias': 'none', 'nick': 'none', 'age': 18})
    assert update == {
        '$rename': {'nick': 'alias'},
        '$setOnInsert': {'age': 18},
    }
