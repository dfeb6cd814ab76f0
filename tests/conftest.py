# tests/conftest.py

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the repo root is on sys.path so `import boxpath` works without an install.
PROJECT_ROOT = Path(__file__).resolve().parents[1]

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
