"""Discovery of key pairs in the SSH directory."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from sshkm.core.config import COMMENT_PREFIX, PUBLIC_KEY_SUFFIX, Environment
from sshkm.core.exceptions import KeyFileError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SSHKey:
    name: str
    path: Path
    created: datetime
    comment: str = ""

    @property
    def created_display(self) -> str:
        """RFC 3339 timestamp in local time."""
        return self.created.astimezone().isoformat(timespec="seconds")


def read_comment(path: Path) -> str:
    """Return the text after the first ``Comment: `` line, or an empty string."""
    for line in path.read_text(errors="replace").split("\n"):
        if line.startswith(COMMENT_PREFIX):
            return line[len(COMMENT_PREFIX):]
    return ""


def scan_keys(env: Environment) -> list[SSHKey]:
    """List the public key files in the SSH directory.

    The modification time of each ``.pub`` file stands in for the key's
    creation time. Keys come back in directory enumeration order.

    Raises:
        KeyFileError: If the SSH directory or a key file cannot be read
    """
    ssh_dir = env.ssh_dir
    keys: list[SSHKey] = []
    try:
        with os.scandir(ssh_dir) as entries:
            for entry in entries:
                if not entry.is_file() or not entry.name.endswith(PUBLIC_KEY_SUFFIX):
                    continue
                path = Path(entry.path)
                created = datetime.fromtimestamp(entry.stat().st_mtime, tz=timezone.utc)
                keys.append(
                    SSHKey(
                        name=entry.name[: -len(PUBLIC_KEY_SUFFIX)],
                        path=path,
                        created=created,
                        comment=read_comment(path),
                    )
                )
    except OSError as exc:
        raise KeyFileError(f"Failed to scan SSH directory {ssh_dir}: {exc}") from exc

    logger.debug("Found %d public key(s) in %s", len(keys), ssh_dir)
    return keys
