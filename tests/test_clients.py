"""
Tests for the HTTP product client and the Trino client wrapper.
"""

import pytest
import requests
from tenacity import wait_none

from radar_precip.db import ddl
from radar_precip.db import trino_client as trino_mod
from radar_precip.ingestion import product_client as product_mod


class FakeResponse:
    def __init__(self, content, status=200):
        self.content = content
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} error")


@pytest.fixture
def no_retry_wait(monkeypatch):
    monkeypatch.setattr(product_mod.ProductClient._get.retry, "wait", wait_none())


class TestProductClient:
    def test_fetch_product(self, monkeypatch):
        calls = []

        def fake_get(url, headers=None, timeout=None):
            calls.append((url, headers, timeout))
            return FakeResponse(b"\x00\x01")

        monkeypatch.setattr(product_mod.requests, "get", fake_get)
        client = product_mod.ProductClient("https://example.test/products/", "tok", timeout_s=5)

        assert client.fetch_product("sn.last") == b"\x00\x01"
        assert calls == [("https://example.test/products/sn.last", {"token": "tok"}, 5)]

    def test_no_token_header_when_unset(self, monkeypatch):
        seen = {}

        def fake_get(url, headers=None, timeout=None):
            seen["headers"] = headers
            return FakeResponse(b"")

        monkeypatch.setattr(product_mod.requests, "get", fake_get)
        product_mod.ProductClient("https://example.test", "").fetch_product("x")
        assert seen["headers"] == {}

    def test_transient_failures_are_retried(self, monkeypatch, no_retry_wait):
        responses = [FakeResponse(b"", status=503), FakeResponse(b"", status=502), FakeResponse(b"ok")]
        calls = []

        def fake_get(url, headers=None, timeout=None):
            calls.append(url)
            return responses.pop(0)

        monkeypatch.setattr(product_mod.requests, "get", fake_get)
        client = product_mod.ProductClient("https://example.test", "")

        assert client.fetch_product("x") == b"ok"
        assert len(calls) == 3

    def test_persistent_failure_raises_http_error(self, monkeypatch, no_retry_wait):
        calls = []

        def fake_get(url, headers=None, timeout=None):
            calls.append(url)
            return FakeResponse(b"", status=500)

        monkeypatch.setattr(product_mod.requests, "get", fake_get)
        client = product_mod.ProductClient("https://example.test", "")

        with pytest.raises(requests.HTTPError):
            client.fetch_product("x")
        assert len(calls) == 5


class FakeCursor:
    def __init__(self, fail=False):
        self.fail = fail
        self.closed = False
        self.sql = None

    def execute(self, sql):
        if self.fail:
            raise RuntimeError("boom")
        self.sql = sql

    def fetchall(self):
        return [(True,)]

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.closed = False

    def cursor(self):
        return self._cursor

    def close(self):
        self.closed = True


class TestTrinoClient:
    def test_execute_returns_rows_and_closes(self, monkeypatch):
        cur = FakeCursor()
        conn = FakeConnection(cur)
        captured = {}

        def fake_connect(**kwargs):
            captured.update(kwargs)
            return conn

        monkeypatch.setattr(trino_mod, "connect", fake_connect)
        client = trino_mod.TrinoClient("localhost", 8080, "pipeline", "iceberg", "radar")

        assert client.execute(ddl.create_schema("radar")) == [(True,)]
        assert cur.sql == "CREATE SCHEMA IF NOT EXISTS radar"
        assert cur.closed and conn.closed
        assert "auth" not in captured

    def test_execute_closes_on_failure(self, monkeypatch):
        cur = FakeCursor(fail=True)
        conn = FakeConnection(cur)
        monkeypatch.setattr(trino_mod, "connect", lambda **kwargs: conn)
        client = trino_mod.TrinoClient("localhost", 8080, "pipeline", "iceberg", "radar")

        with pytest.raises(RuntimeError):
            client.execute("SELECT 1")
        assert cur.closed and conn.closed

    def test_password_enables_basic_auth(self, monkeypatch):
        captured = {}

        def fake_connect(**kwargs):
            captured.update(kwargs)
            return FakeConnection(FakeCursor())

        monkeypatch.setattr(trino_mod, "connect", fake_connect)
        trino_mod.TrinoClient("h", 443, "u", "c", "s", password="secret").execute("SELECT 1")

        assert captured["http_scheme"] == "https"
        assert captured["auth"] is not None


def test_radials_table_ddl():
    sql = ddl.create_radials_table("radar", "precip_radials")
    assert "CREATE TABLE IF NOT EXISTS radar.precip_radials" in sql
    assert "precip_rates_in_per_hr ARRAY(DOUBLE)" in sql
