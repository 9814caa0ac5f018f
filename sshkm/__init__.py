"""sshkm — manage local SSH keys and their host mappings."""

__version__ = "0.1.0"
