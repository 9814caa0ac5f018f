import os

import pytest

from sshkm.core.config import Environment


@pytest.fixture
def env(tmp_path):
    """An Environment rooted in a temp directory, with an empty ~/.ssh."""
    home = tmp_path / "home"
    cwd = tmp_path / "work"
    (home / ".ssh").mkdir(parents=True)
    cwd.mkdir()
    return Environment(home=home, cwd=cwd)


@pytest.fixture
def make_key(env):
    """Create a private/public key file pair in the isolated ~/.ssh."""

    def _make(name: str, comment: str | None = None, mtime: float | None = None):
        private_path = env.ssh_dir / name
        public_path = env.ssh_dir / f"{name}.pub"
        private_path.write_text("FAKE PRIVATE KEY")
        body = "ssh-ed25519 AAAAC3NzaC1lZDI1NTE5AAAAIFakeKeyForTesting\n"
        if comment is not None:
            body = f"---- BEGIN SSH2 PUBLIC KEY ----\nComment: {comment}\n{body}"
        public_path.write_text(body)
        if mtime is not None:
            os.utime(public_path, (mtime, mtime))
        return private_path

    return _make
