from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (SRC, ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from tests.shared.payloads import VALID_API_KEY  # noqa: E402


@pytest.fixture(scope="session")
def api_key() -> str:
    return VALID_API_KEY
