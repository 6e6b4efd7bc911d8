"""Root test configuration: isolate tests from the developer's environment"""

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop DOCSTORE_* variables so settings come only from what each test sets."""
    for name in ("APP_NAME", "SEED_FILE", "LOG_LEVEL", "OUTPUT_FORMAT"):
        monkeypatch.delenv(f"DOCSTORE_{name}", raising=False)
