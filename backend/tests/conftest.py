"""Root conftest — shared test configuration."""

import os

# Ensure tests never touch a real database or emit JSON logs
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")
