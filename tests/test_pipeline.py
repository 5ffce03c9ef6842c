import csv
import io

import pytest

from json_batch_csv.errors import ConversionError, ParseError, ReadError
from json_batch_csv.pipeline import convert_documents, convert_files
from json_batch_csv.profile_mapping import PROFILE_HEADERS


def read_back(text):
    return list(csv.reader(io.StringIO(text, newline='')))


class TestConvertDocuments:

    def test_end_to_end_scenario(self):
        result = convert_documents([{'a': 1, 'b': 2}, {'b': 3, 'c': 4, 'a': 5}])
        assert result.header == ['a', 'b', 'c']
        assert read_back(result.csv_text) == [['a', 'b', 'c'], ['1', '2', ''], ['5', '3', '4']]
        assert result.csv_text == '"a","b","c"\r\n"1","2",""\r\n"5","3","4"'

    def test_rows_are_complete(self):
        docs = [{'id': 1, 'user': {'name': 'A'}}, {'id': 2, 'tags': ['x', 'y']}, {'extra': None}]
        result = convert_documents(docs)
        assert result.header == ['id', 'tags', 'user.name', 'extra']
        for row in result.rows:
            assert list(row) == result.header
        assert result.rows[2] == {'id': '', 'user.name': '', 'tags': '', 'extra': ''}
        assert result.row_count == 3
        assert result.column_count == 4

    def test_header_is_exact_union(self):
        docs = [{'a': {'b': 1}}, {'c': [1]}, {'a': {'d': 2}, 'c': 3}]
        result = convert_documents(docs)
        assert sorted(result.header) == ['a.b', 'a.d', 'c']

    def test_same_input_same_output(self):
        docs = [{'b': 1, 'a': {'x': 1}}, {'q': 1, 'a': {'y': 2}}, {'z': [{'k': 'v'}]}]
        first = convert_documents(docs).csv_text
        second = convert_documents(docs).csv_text
        assert first == second

    def test_empty_batch(self):
        with pytest.raises(ConversionError, match='Add some JSON files first'):
            convert_documents([])

    def test_profile_strategy(self):
        result = convert_documents([{'name': 'Ann', 'website': 'https://x.com/ann'}], strategy='profile')
        assert result.header == PROFILE_HEADERS
        assert result.rows[0]['social_links'] == 'https://x.com/ann'
        assert result.strategy == 'profile'

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match='Unknown row strategy'):
            convert_documents([{}], strategy='nope')

    def test_payload_has_bom(self):
        result = convert_documents([{'name': 'Zoë'}])
        assert result.payload() == '\ufeff"name"\r\n"Zoë"'.encode('utf-8')
        assert result.summary() == '1 row(s), 1 column(s).'


class TestConvertFiles:

    def test_reads_files_in_given_order(self, write_json):
        paths = [
            write_json('one.json', {'a': 1, 'b': 2}),
            write_json('two.json', '\ufeff{"b": 3, "c": 4, "a": 5}', raw=True),
        ]
        result = convert_files(paths)
        assert result.header == ['a', 'b', 'c']
        assert result.rows[1] == {'a': '5', 'b': '3', 'c': '4'}

        reversed_result = convert_files(list(reversed(paths)))
        assert reversed_result.header == ['b', 'c', 'a']

    def test_invalid_file_aborts_run(self, write_json):
        paths = [write_json('good.json', {'a': 1}), write_json('bad.json', 'not json', raw=True)]
        with pytest.raises(ParseError, match='bad.json'):
            convert_files(paths)

    def test_unreadable_file_aborts_run(self, write_json, tmp_path):
        paths = [write_json('good.json', {'a': 1}), str(tmp_path / 'missing.json')]
        with pytest.raises(ReadError, match='missing.json'):
            convert_files(paths)

    def test_no_files(self):
        with pytest.raises(ConversionError):
            convert_files([])
