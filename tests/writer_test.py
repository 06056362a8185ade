import threading
import pytest
from csvjson.channel import Channel
from csvjson.writer import write_json_file

data = [
    {'COL1': '1', 'COL2': '2', 'COL3': '3'},
    {'COL1': '4', 'COL2': '5', 'COL3': '6'},
]

COMPACT = '[{"COL1":"1","COL2":"2","COL3":"3"},{"COL1":"4","COL2":"5","COL3":"6"}]'

PRETTY = '''[
   {
      "COL1": "1",
      "COL2": "2",
      "COL3": "3"
   },
   {
      "COL1": "4",
      "COL2": "5",
      "COL3": "6"
   }
]'''

def _write(tmp_path, records, pretty):
    ch = Channel()
    done = threading.Event()
    def produce():
        for r in records:
            ch.send(r)
        ch.close()
    t = threading.Thread(target=produce)
    t.start()
    csv_path = tmp_path / 'out.csv'
    n = write_json_file(str(csv_path), ch, done, pretty)
    t.join()
    assert(done.is_set())
    assert(n == len(records))
    return (tmp_path / 'out.json').read_text(encoding='utf-8')

@pytest.mark.parametrize('pretty, want', [(False, COMPACT), (True, PRETTY)])
def test_write_json_file(tmp_path, pretty, want):
    assert(_write(tmp_path, data, pretty) == want)

def test_empty_compact(tmp_path):
    assert(_write(tmp_path, [], False) == '[]')

def test_empty_pretty(tmp_path):
    assert(_write(tmp_path, [], True) == '[\n\n]')

def test_single_record(tmp_path):
    assert(_write(tmp_path, data[:1], False) == '[{"COL1":"1","COL2":"2","COL3":"3"}]')
