"""Site Paths — build tenant file paths and verify they stay inside the site root.

Invariants:
    - Paths are normalized before the containment check
    - Containment is a strict prefix test against root + separator
      (the root itself, and siblings like /srv/sites-old, are outside)

Design Decisions:
    - os.path string functions, no resolve(): containment is checked on the
      normalized string independently of host validation (ADR: second layer)
"""

import os

INDEX_FILENAME = "index.html"


def normalize_root(root: str) -> str:
    return os.path.normpath(os.path.abspath(root))


def tenant_index_path(root: str, host: str) -> str:
    site_dir = os.path.join(root, host)
    return os.path.normpath(os.path.join(site_dir, INDEX_FILENAME))


def landing_page_path(root: str) -> str:
    return os.path.join(root, INDEX_FILENAME)


def is_within_root(path: str, root: str) -> bool:
    prefix = root if root.endswith(os.sep) else root + os.sep
    return path.startswith(prefix)
