"""Shared plumbing for sshkm commands."""

from __future__ import annotations

import functools
from typing import Any, Callable

import click

from sshkm.core.config import Environment
from sshkm.core.console import error
from sshkm.core.exceptions import KeyManagerError


def get_env() -> Environment:
    """Return the Environment on the root click context, resolving it on first use."""
    root = click.get_current_context().find_root()
    if root.obj is None:
        root.obj = Environment.current()
    return root.obj


def env_command(func: Callable[..., Any]) -> Callable[..., Any]:
    """Pass the Environment as the first argument and turn sshkm errors into exit codes."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(get_env(), *args, **kwargs)
        except KeyManagerError as exc:
            error(str(exc))
            raise SystemExit(exc.exit_code) from exc

    return wrapper
