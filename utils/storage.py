"""
Resume file storage.

The service only needs two operations from an object store: put bytes under a
key, and hand back a URL the owner can open. LocalResumeStorage keeps files on
disk under RESUME_STORAGE_DIR; a hosted bucket can implement the same methods.
"""

import re
import time
import uuid
from pathlib import Path
from typing import Optional

from config.settings import settings

_PROJECT_ROOT = Path(__file__).resolve().parents[1]


def slugify_file_name(name: Optional[str]) -> str:
    return re.sub(r"[^a-zA-Z0-9.\-_]", "_", name or "resume.pdf")


def build_resume_key(prefix: str, form_id: int, filename: Optional[str]) -> str:
    """Object key: <owner id | "public">/<form id>/<epoch ms>_<random>_<slugified name>"""
    stamp = int(time.time() * 1000)
    return f"{prefix}/{form_id}/{stamp}_{uuid.uuid4().hex[:8]}_{slugify_file_name(filename)}"


class LocalResumeStorage:
    """Stores uploaded resumes on the local filesystem."""

    def __init__(self, root_dir: Optional[str] = None):
        root = Path(root_dir or settings.RESUME_STORAGE_DIR)
        self.root = root if root.is_absolute() else (_PROJECT_ROOT / root)

    def upload(self, key: str, content: bytes, content_type: str = "application/pdf") -> str:
        dest = self.root / key
        dest.parent.mkdir(parents=True, exist_ok=True)
        # "x" refuses to overwrite an existing object
        with dest.open("xb") as f:
            f.write(content)
        return key

    def url_for(self, key: str, expires_in: int = 3600) -> str:
        # Local files never expire; expires_in is honoured by hosted stores
        return (self.root / key).resolve().as_uri()
