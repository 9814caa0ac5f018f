from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from sshkm.core.exceptions import EnvironmentResolutionError

SSH_DIR_NAME = ".ssh"
CONFIG_FILE_NAME = "config"
PUBLIC_KEY_SUFFIX = ".pub"
COMMENT_PREFIX = "Comment: "

KEYGEN_COMMAND = "ssh-keygen"
KDF_ROUNDS = 100


@dataclass(frozen=True)
class Environment:
    """Home and working directory that all path resolution is relative to."""

    home: Path
    cwd: Path

    @classmethod
    def current(cls) -> "Environment":
        """Build an Environment for the invoking user and process."""
        try:
            home = Path.home()
        except (KeyError, RuntimeError) as exc:
            raise EnvironmentResolutionError(f"Cannot determine home directory: {exc}") from exc
        try:
            cwd = Path.cwd()
        except OSError as exc:
            raise EnvironmentResolutionError(f"Cannot determine working directory: {exc}") from exc
        return cls(home=home, cwd=cwd)

    @property
    def ssh_dir(self) -> Path:
        return self.home / SSH_DIR_NAME

    @property
    def config_path(self) -> Path:
        return self.ssh_dir / CONFIG_FILE_NAME

    def expand_path(self, path: str) -> str:
        """Expand a leading ``~`` to the home directory, else make *path* absolute.

        Only the bare ``~`` prefix is understood; ``~user`` forms are treated as
        a path component under the current user's home, the same as ``~/user``.
        """
        if path.startswith("~"):
            return os.path.normpath(os.path.join(str(self.home), path[1:].lstrip("/")))
        return os.path.normpath(os.path.join(str(self.cwd), path))

    def key_path(self, key: str) -> Path:
        """Resolve a key argument: absolute paths pass through, names live in ssh_dir."""
        if os.path.isabs(key):
            return Path(key)
        return self.ssh_dir / key


def ensure_ssh_dir(env: Environment) -> Path:
    """Create the SSH directory if it doesn't exist."""
    env.ssh_dir.mkdir(mode=0o700, parents=True, exist_ok=True)
    return env.ssh_dir
