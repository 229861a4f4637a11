import os

import pytest

from lslens.utils.owner_cache import OwnerCache, system_group_name, system_user_name


class CountingResolver:
    def __init__(self, prefix):
        self.prefix = prefix
        self.calls = []

    def __call__(self, ident):
        self.calls.append(ident)
        return f"{self.prefix}{ident}"


@pytest.fixture
def resolvers():
    return CountingResolver("user"), CountingResolver("group")


@pytest.fixture
def cache(resolvers):
    users, groups = resolvers
    return OwnerCache(user_resolver=users, group_resolver=groups)


def test_lookup_misses_return_none(cache):
    assert cache.lookup_user(1000) is None
    assert cache.lookup_group(100) is None


def test_populate_then_lookup(cache, resolvers):
    cache.populate_user(0, "root")
    cache.populate_group(0, "wheel")
    assert cache.lookup_user(0) == "root"
    assert cache.lookup_group(0) == "wheel"
    assert cache.resolve_user(0) == "root"
    assert resolvers[0].calls == []


def test_resolve_calls_resolver_once(cache, resolvers):
    users, groups = resolvers
    assert cache.resolve_user(1000) == "user1000"
    assert cache.resolve_user(1000) == "user1000"
    assert cache.resolve_group(20) == "group20"
    assert cache.resolve_group(20) == "group20"
    assert users.calls == [1000]
    assert groups.calls == [20]
    assert cache.lookup_user(1000) == "user1000"


def test_user_and_group_maps_are_separate(cache):
    cache.populate_user(5, "alice")
    assert cache.lookup_group(5) is None


def test_clear(cache, resolvers):
    cache.resolve_user(1)
    cache.clear()
    assert cache.lookup_user(1) is None
    cache.resolve_user(1)
    assert resolvers[0].calls == [1, 1]


def test_separate_caches_do_not_share_state(resolvers):
    first = OwnerCache(*resolvers)
    second = OwnerCache(*resolvers)
    first.populate_user(7, "seven")
    assert second.lookup_user(7) is None


@pytest.mark.skipif(os.name == 'nt', reason="POSIX account database only")
def test_system_resolvers_fall_back_to_id():
    # ids this large are not assigned on normal systems
    assert system_user_name(4_000_000_000) == "4000000000"
    assert system_group_name(4_000_000_000) == "4000000000"
