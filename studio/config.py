# studio/config.py — paths, grid size, feature flags
# ----------------------------------------------------------------

from __future__ import annotations
import os
from pathlib import Path

# -----------------------------
# Paths (assets live next to the entry script)
# -----------------------------
BASE = Path(__file__).resolve().parent.parent
ASSETS = BASE / "streamlit_repo" / "assets"

# --- Board grid ---
GRID_ROWS = 5
GRID_COLS = 10

# --- Feature flags ---
SHOW_CONSTELLATION_CHART = True   # star map next to the mode cards
SHOW_LAB = True                   # studio lab cards
SHOW_STATUS = True                # studio status + contact strip
DEFAULT_MODE = "brand"

CONTACT_EMAIL = "aeneas.studio@example.com"
PLACEHOLDER_IMAGE = "https://picsum.photos/seed/{seed}/{w}/{h}"

LOG_LEVEL = os.environ.get("STUDIO_LOG_LEVEL", "INFO").upper()


def asset_path(src: str) -> Path:
    """Map a web-root style source ("/work/x.jpg") onto the assets folder."""
    return ASSETS / src.lstrip("/")
