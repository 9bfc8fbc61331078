import json
from pathlib import Path

import pytest

from lstypes import codec

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def lsif_lines() -> list:
    return (FIXTURES / "main.lsif").read_text(encoding="utf-8").splitlines()


@pytest.fixture
def roundtrip():
    """Decode `payload` as `tp`, re-encode it and return both results."""

    def _roundtrip(tp, payload):
        value = codec.decode(tp, payload)
        encoded = codec.encode(value, tp)
        assert json.loads(json.dumps(encoded)) == encoded
        return value, encoded

    return _roundtrip
