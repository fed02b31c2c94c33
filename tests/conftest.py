import sys
from pathlib import Path

import pytest

# Ensure the 'src' directory is on sys.path for imports in tests
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def claims():
    return [
        {"address": "0x123", "data": [1, 2]},
        {"address": "0x456", "data": ["3", "0x4"]},
        {"address": "1110", "data": [5]},
        {"address": "0xfcf82721182afe347961aeb44f289c3ab6144ddc", "data": [233]},
        {"address": "0x789", "data": [10, 20, 30, 40, 50]},
    ]
