"""Root conftest: shared test configuration."""

import os

# Keep test runs independent of any developer .env
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "INFO")
