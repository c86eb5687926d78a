from __future__ import annotations

from pathlib import Path
import sys

# The converters package and the flat batch modules live under src/.
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))
