"""Shared test fixtures."""

import pytest

from memkv.stores import MemoryStore

APP_KEYS = {
    "/app/db/pass": "foo",
    "/app/db/user": "admin",
    "/app/port": "443",
    "/app/url": "app.example.com",
    "/app/vhosts/host1": "app.example.com",
    "/app/upstream/host1": "203.0.113.0.1:8080",
    "/app/upstream/host1/domain": "app.example.com",
    "/app/upstream/host2": "203.0.113.0.2:8080",
    "/app/upstream/host2/domain": "app.example.com",
}

SERVICE_KEYS = {
    "/deis/database/user": "user",
    "/deis/database/pass": "pass",
    "/deis/services/key": "value",
    "/deis/services/notaservice/foo": "bar",
    "/deis/services/srv1/node1": "10.244.1.1:80",
    "/deis/services/srv1/node2": "10.244.1.2:80",
    "/deis/services/srv1/node3": "10.244.1.3:80",
    "/deis/services/srv2/node1": "10.244.2.1:80",
    "/deis/services/srv2/node2": "10.244.2.2:80",
}


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def app_store():
    s = MemoryStore()
    for k, v in APP_KEYS.items():
        s.set(k, v)
    return s


@pytest.fixture
def service_store():
    s = MemoryStore()
    for k, v in SERVICE_KEYS.items():
        s.set(k, v)
    return s
