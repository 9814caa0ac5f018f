"""SSH key generation and removal."""

from __future__ import annotations

import logging
import subprocess
import time
from pathlib import Path

from sshkm.core.config import (
    KDF_ROUNDS,
    KEYGEN_COMMAND,
    PUBLIC_KEY_SUFFIX,
    Environment,
    ensure_ssh_dir,
)
from sshkm.core.exceptions import KeyFileError, KeyGenerationError

logger = logging.getLogger(__name__)

# Menu choice -> (key type, label), strongest first.
KEY_TYPES: dict[str, tuple[str, str]] = {
    "1": ("ed25519", "best"),
    "2": ("rsa", "better"),
    "3": ("ecdsa", "good"),
    "4": ("dsa", "bad"),
}
DEFAULT_KEY_TYPE = "ed25519"


def key_type_for_choice(choice: str) -> str:
    """Map a menu answer to a key type; anything unrecognised means ed25519."""
    entry = KEY_TYPES.get(choice.strip())
    return entry[0] if entry else DEFAULT_KEY_TYPE


def default_key_name(now: float | None = None) -> str:
    timestamp = int(time.time() if now is None else now)
    return f"id_ed25519_{timestamp}"


def keygen_command(key_type: str, key_path: Path, comment: str) -> list[str]:
    return [
        KEYGEN_COMMAND,
        "-o",
        "-a",
        str(KDF_ROUNDS),
        "-t",
        key_type,
        "-f",
        str(key_path),
        "-C",
        comment,
    ]


def generate_key(env: Environment, key_type: str, name: str, comment: str) -> Path:
    """Run ssh-keygen for a new key pair in the SSH directory.

    ssh-keygen shares the terminal so it can ask for a passphrase.

    Args:
        env: Environment to resolve the SSH directory from
        key_type: Algorithm passed to ``ssh-keygen -t``
        name: Filename of the private key
        comment: Key comment passed to ``ssh-keygen -C``

    Returns:
        Path of the private key

    Raises:
        KeyGenerationError: If ssh-keygen is missing or exits non-zero
    """
    key_path = env.key_path(name)
    cmd = keygen_command(key_type, key_path, comment)
    try:
        ensure_ssh_dir(env)
        logger.debug("Running %s", cmd)
        subprocess.run(cmd, check=True)
    except subprocess.CalledProcessError as exc:
        raise KeyGenerationError(
            f"{KEYGEN_COMMAND} exited with status {exc.returncode} for key '{name}'"
        ) from exc
    except OSError as exc:
        raise KeyGenerationError(f"Failed to run {KEYGEN_COMMAND}: {exc}") from exc
    return key_path


def delete_key(env: Environment, key: str) -> Path:
    """Delete a key pair.

    Both the private key and its ``.pub`` companion must exist; nothing is
    removed otherwise.

    Args:
        env: Environment to resolve relative key names against
        key: Key name under the SSH directory, or an absolute private key path

    Returns:
        Resolved path of the deleted private key

    Raises:
        KeyFileError: If either file is missing or cannot be removed
    """
    private_path = env.key_path(key)
    public_path = private_path.with_name(private_path.name + PUBLIC_KEY_SUFFIX)

    for path in (private_path, public_path):
        if not path.is_file():
            raise KeyFileError(f"Key file not found: {path}")

    try:
        private_path.unlink()
        public_path.unlink()
    except OSError as exc:
        raise KeyFileError(f"Failed to remove key files for '{key}': {exc}") from exc

    logger.debug("Removed %s and %s", private_path, public_path)
    return private_path
