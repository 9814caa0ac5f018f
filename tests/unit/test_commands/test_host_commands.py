import pytest
from click.testing import CliRunner

from sshkm.main import cli


@pytest.fixture
def runner():
    return CliRunner()


def test_config_prints_file(runner, env):
    env.config_path.write_text("Host web\n  IdentityFile /k/web\n  User [deploy]\n")
    result = runner.invoke(cli, ["config"], obj=env)
    assert result.exit_code == 0
    assert "Host web" in result.output
    assert "User [deploy]" in result.output


def test_config_missing_file_exits_with_io_code(runner, env):
    result = runner.invoke(cli, ["config"], obj=env)
    assert result.exit_code == 4
    assert "Failed to read SSH config" in result.output


def test_map_writes_config(runner, env):
    env.config_path.write_text("Host zeta\n  IdentityFile /k/zeta\n")
    result = runner.invoke(cli, ["map", "~/.ssh/id_a", "alpha"], obj=env)
    assert result.exit_code == 0
    assert "Mapped key ~/.ssh/id_a to host alpha" in result.output
    assert env.config_path.read_text() == (
        "Host alpha\n  IdentityFile ~/.ssh/id_a\n\nHost zeta\n  IdentityFile /k/zeta\n"
    )


def test_map_creates_missing_config(runner, env):
    result = runner.invoke(cli, ["map", "/k/id_a", "web"], obj=env)
    assert result.exit_code == 0
    assert env.config_path.read_text() == "Host web\n  IdentityFile /k/id_a\n"


def test_map_refuses_second_key(runner, env):
    env.config_path.write_text("Host web\n  IdentityFile /k/id_a\n")
    result = runner.invoke(cli, ["map", "/k/id_b", "web"], obj=env)
    assert result.exit_code == 0
    assert "already has a key mapped" in result.output
    assert env.config_path.read_text() == "Host web\n  IdentityFile /k/id_a\n"


def test_map_requires_host(runner, env):
    result = runner.invoke(cli, ["map", "/k/id_a"], obj=env)
    assert result.exit_code == 2
    assert "Missing argument" in result.output


def test_unmap_removes_entry(runner, env):
    env.config_path.write_text("Host web\n  IdentityFile /k/id_a\n")
    result = runner.invoke(cli, ["unmap", "/k/id_a", "web"], obj=env)
    assert result.exit_code == 0
    assert "Unmapped key /k/id_a from host web" in result.output
    assert env.config_path.read_text() == "Host web\n"


def test_unmap_accepts_tilde_path(runner, env):
    env.config_path.write_text("Host web\n  IdentityFile ~/.ssh/id_a\n")
    result = runner.invoke(cli, ["unmap", "~/.ssh/id_a", "web"], obj=env)
    assert result.exit_code == 0
    assert env.config_path.read_text() == "Host web\n"


def test_unmap_not_mapped_warns_and_keeps_file(runner, env):
    original = "# hand written\nHost web\n  IdentityFile /k/id_a\n"
    env.config_path.write_text(original)
    result = runner.invoke(cli, ["unmap", "/k/other", "web"], obj=env)
    assert result.exit_code == 0
    assert "is not mapped to host web" in result.output
    assert env.config_path.read_text() == original


def test_unmap_then_map(runner, env):
    env.config_path.write_text("Host web\n  IdentityFile /k/id_a\n")
    runner.invoke(cli, ["unmap", "/k/id_a", "web"], obj=env)
    result = runner.invoke(cli, ["map", "/k/id_b", "web"], obj=env)
    assert result.exit_code == 0
    assert env.config_path.read_text() == "Host web\n  IdentityFile /k/id_b\n"
