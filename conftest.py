from __future__ import annotations

import sys
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
for path in (BASE_DIR / "backend", BASE_DIR / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))
