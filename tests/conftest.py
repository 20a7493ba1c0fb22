import sys
from pathlib import Path

import pytest

# project root = the directory above "tests"
root = Path(__file__).resolve().parents[1]
src = root / "src"

# put src/ on sys.path (if missing)
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("BANKCHECK_ENV", "BANKCHECK_LOG_LEVEL", "BANKCHECK_LOG_JSON", "BANKCHECK_PRINTABLE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
