import json

import pytest


@pytest.fixture
def write_json(tmp_path):
    """Write `data` (or raw text) to a file under tmp_path and return its path."""
    def _write(name, data, raw=False, encoding='utf-8'):
        path = tmp_path / name
        text = data if raw else json.dumps(data)
        path.write_bytes(text.encode(encoding))
        return str(path)
    return _write
