"""Persist settings into a dotenv file."""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path


def update_env_file(path: str | Path, values: Mapping[str, str]) -> None:
    """Write ``KEY=value`` pairs into a dotenv file.

    Existing assignments of a key are replaced in place, missing keys are
    appended and the file is created if absent. Running it twice with
    the same values leaves the file unchanged.
    """
    env_path = Path(path)
    content = env_path.read_text(encoding="utf-8") if env_path.exists() else ""

    for key, value in values.items():
        pattern = re.compile(rf"^{re.escape(key)}=.*$", re.MULTILINE)
        line = f"{key}={value}"
        if pattern.search(content):
            content = pattern.sub(lambda _match: line, content)
        else:
            if content and not content.endswith("\n"):
                content += "\n"
            content += f"{line}\n"

    env_path.write_text(content, encoding="utf-8")
