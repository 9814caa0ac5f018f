from datetime import datetime, timedelta, timezone
from pathlib import Path

from sshkm.core.inventory import SSHKey
from sshkm.core.usage import find_multiple_mappings, find_unused_keys, format_age, is_key_used

NOW = datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)


def _key(name: str) -> SSHKey:
    return SSHKey(name=name, path=Path(f"/home/u/.ssh/{name}.pub"), created=NOW)


class TestUnusedKeys:
    def test_unmapped_key_is_unused(self):
        keys = [_key("a"), _key("b")]
        config = {"h": ["/home/u/.ssh/a"]}
        assert [k.name for k in find_unused_keys(keys, config)] == ["b"]

    def test_match_is_by_basename_only(self):
        keys = [_key("a")]
        config = {"h": ["/some/other/dir/a"]}
        assert find_unused_keys(keys, config) == []

    def test_pub_reference_does_not_count(self):
        keys = [_key("a")]
        config = {"h": ["/home/u/.ssh/a.pub"]}
        assert [k.name for k in find_unused_keys(keys, config)] == ["a"]

    def test_all_unused_with_empty_config(self):
        keys = [_key("a"), _key("b")]
        assert find_unused_keys(keys, {}) == keys

    def test_is_key_used(self):
        config = {"h": ["/home/u/.ssh/a"]}
        assert is_key_used(_key("a"), config)
        assert not is_key_used(_key("b"), config)


class TestMultipleMappings:
    def test_shared_key_is_reported(self):
        config = {"h1": ["k"], "h2": ["k"], "h3": ["other"]}
        assert find_multiple_mappings(config) == {"k": ["h1", "h2"]}

    def test_hosts_in_config_order(self):
        config = {"zeta": ["k"], "alpha": ["k"], "mid": ["k"]}
        assert find_multiple_mappings(config) == {"k": ["zeta", "alpha", "mid"]}

    def test_no_shared_keys(self):
        assert find_multiple_mappings({"h1": ["a"], "h2": ["b"]}) == {}

    def test_same_key_twice_on_one_host(self):
        assert find_multiple_mappings({"h1": ["a", "a"]}) == {"a": ["h1", "h1"]}


class TestFormatAge:
    def test_hours(self):
        assert format_age(NOW - timedelta(hours=5, minutes=30), NOW) == "5.5 hours ago"

    def test_days(self):
        assert format_age(NOW - timedelta(days=3, hours=12), NOW) == "3.5 days ago"

    def test_boundary_is_days(self):
        assert format_age(NOW - timedelta(hours=24), NOW) == "1.0 days ago"
