"""Root conftest — shared test configuration."""

import os

# Tests never pick up a deployment's site root or JSON log setup
os.environ.pop("SITE_ROOT", None)
os.environ.pop("SUPPORT_URL", None)
os.environ.setdefault("LOG_FORMAT", "text")
