import json
import os
import pytest
from csvjson.errors import RowSkip
from csvjson.utils.csv2json import process_line, get_json_func, json_path_for

headers = ['COL1', 'COL2', 'COL3']

def test_process_line_keeps_header_order():
    record = process_line(['b', 'a', 'c'], ['1', '2', '3'])
    assert(list(record.keys()) == ['b', 'a', 'c'])
    assert(record == {'a': '2', 'b': '1', 'c': '3'})

def test_process_line_length_mismatch():
    with pytest.raises(RowSkip):
        process_line(headers, ['1', '2'])
    with pytest.raises(RowSkip):
        process_line(headers, ['1', '2', '3', '4'])

def test_compact_json():
    js, brk = get_json_func(False)
    assert(brk == '')
    assert(js(process_line(headers, ['1', '2', '3'])) == '{"COL1":"1","COL2":"2","COL3":"3"}')

def test_pretty_json():
    js, brk = get_json_func(True)
    assert(brk == '\n')
    assert(js({'COL1': '1', 'COL2': '2'}) == '   {\n      "COL1": "1",\n      "COL2": "2"\n   }')

def test_non_ascii_kept():
    js, _ = get_json_func(False)
    out = js({'name': 'Zoë "q"'})
    assert(out == '{"name":"Zoë \\"q\\""}')
    assert(json.loads(out) == {'name': 'Zoë "q"'})

def test_json_path_for():
    assert(json_path_for('data.csv') == 'data.json')
    assert(json_path_for(os.path.join('some', 'dir', 'x.csv')) == os.path.join('some', 'dir', 'x.json'))
    assert(json_path_for(os.path.join('a.csv', 'b.csv')) == os.path.join('a.csv', 'b.json'))
