import logging

import pytest

from json_batch_csv.flattening import flatten_document
from json_batch_csv.scalarize import RECURSE, format_primitive, scalarize


class TestScalarize:

    def test_null_is_empty(self):
        assert scalarize(None) == ''

    def test_primitive_array_joined_with_newlines(self):
        assert scalarize(['x', 'y']) == 'x\ny'
        assert scalarize([1, None, True]) == '1\n\ntrue'

    def test_empty_array_is_empty(self):
        assert scalarize([]) == ''

    def test_array_with_objects_is_compact_json(self):
        assert scalarize([{'n': 1}]) == '[{"n":1}]'
        assert scalarize([1, [2, 3]]) == '[1,[2,3]]'

    def test_compact_json_keeps_non_ascii(self):
        assert scalarize([{'city': 'Zürich'}]) == '[{"city":"Zürich"}]'

    def test_scalars(self):
        assert scalarize('text') == 'text'
        assert scalarize(42) == '42'
        assert scalarize(1.5) == '1.5'
        assert scalarize(False) == 'false'

    def test_empty_object_is_empty(self):
        assert scalarize({}) == ''

    def test_non_empty_object_recurses(self):
        assert scalarize({'a': 1}) is RECURSE

    def test_integral_float_has_no_decimal_point(self):
        assert format_primitive(2.0) == '2'
        assert format_primitive(-0.25) == '-0.25'

    @pytest.mark.parametrize('value, expected', [
        (0.000001, '0.000001'),
        (1e-7, '1e-7'),
        (123.456, '123.456'),
        (1e20, '100000000000000000000'),
        (1.2345678901234568e+20, '123456789012345680000'),
        (1e21, '1e+21'),
        (-1.5e-10, '-1.5e-10'),
        (0.0, '0'),
        (float('inf'), 'Infinity'),
    ])
    def test_floats_use_javascript_layout(self, value, expected):
        assert format_primitive(value) == expected


class TestFlattenDocument:

    def test_nested_objects_use_dotted_keys(self):
        doc = {'user': {'name': 'Ann', 'address': {'city': 'Oslo'}}, 'id': 7}
        assert flatten_document(doc) == {
            'user.name': 'Ann',
            'user.address.city': 'Oslo',
            'id': '7',
        }

    def test_keys_keep_encounter_order(self):
        doc = {'z': 1, 'a': {'y': 2, 'b': 3}, 'm': 4}
        assert list(flatten_document(doc)) == ['z', 'a.y', 'a.b', 'm']

    def test_arrays(self):
        assert flatten_document({'tags': ['x', 'y']}) == {'tags': 'x\ny'}
        assert flatten_document({'tags': [{'n': 1}]}) == {'tags': '[{"n":1}]'}

    def test_null_and_empty_object(self):
        assert flatten_document({'a': None, 'b': {}}) == {'a': '', 'b': ''}

    def test_deep_nesting(self):
        doc = {'l1': {'l2': {'l3': {'l4': 'value'}}}}
        assert flatten_document(doc) == {'l1.l2.l3.l4': 'value'}

    def test_empty_document(self):
        assert flatten_document({}) == {}

    def test_non_object_root_goes_to_value_column(self):
        assert flatten_document([1, 2]) == {'value': '1\n2'}
        assert flatten_document('hello') == {'value': 'hello'}
        assert flatten_document(None) == {'value': ''}

    def test_colliding_paths_keep_last_value_first_position(self, caplog):
        doc = {'a.b': 1, 'c': 2, 'a': {'b': 3}}
        with caplog.at_level(logging.WARNING, logger='json_batch_csv.flattening'):
            flat = flatten_document(doc)
        assert list(flat) == ['a.b', 'c']
        assert flat['a.b'] == '3'
        assert "'a.b'" in caplog.text

    def test_does_not_mutate_document(self):
        doc = {'a': {'b': [1, 2]}}
        flatten_document(doc)
        assert doc == {'a': {'b': [1, 2]}}

    def test_deep_nesting_beyond_recursion_limit(self):
        depth = 5000
        doc = 'leaf'
        for _ in range(depth):
            doc = {'a': doc}
        doc['b'] = 1

        flat = flatten_document(doc)
        deep_key = '.'.join(['a'] * depth)
        assert flat == {deep_key: 'leaf', 'b': '1'}
        assert list(flat) == [deep_key, 'b']
