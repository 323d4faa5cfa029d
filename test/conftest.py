from __future__ import annotations

import os
from pathlib import Path

# Load dotenv files early so test fixtures can read settings via os.getenv
try:  # pragma: no cover
    from dotenv import load_dotenv

    TEST_ROOT = Path(__file__).resolve().parent
    load_dotenv(TEST_ROOT / ".env", override=False)
except Exception:
    pass

# Point the application at in-memory SQLite before any unitracker module builds its engine
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["DATABASE_AUTO_CREATE"] = "true"
os.environ["LOGFIRE_ENABLED"] = "false"
os.environ.setdefault("UNITRACKER_TIMEZONE", "UTC")
