"""svcdiscovery console command (environment resolver only, no network)."""
import json

import pytest
from typer.testing import CliRunner

from svcdiscovery.cli.main import app

runner = CliRunner()


@pytest.fixture
def orders_env(monkeypatch):
    for key in ("DISCOVERY_PROTO", "DISCOVERY_RESOLVERS", "DISCOVERY_SCHEMES", "DISCOVERY_MAX_ATTEMPTS"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("ORDERS_SERVICE_HOST", "10.0.0.7")
    monkeypatch.setenv("ORDERS_SERVICE_PORT_API", "8080")


def test_resolve_with_scheme(orders_env):
    result = runner.invoke(app, ["resolve", "api", "orders", "--resolver", "env", "--scheme", "api=http"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "http://10.0.0.7:8080"


def test_resolve_json(orders_env):
    result = runner.invoke(app, ["resolve", "api", "orders", "-r", "env", "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"url": "//10.0.0.7:8080", "scheme": "", "host": "10.0.0.7:8080"}


def test_resolve_schemes_from_env(orders_env, monkeypatch):
    monkeypatch.setenv("DISCOVERY_RESOLVERS", "env")
    monkeypatch.setenv("DISCOVERY_SCHEMES", "api=https")
    result = runner.invoke(app, ["resolve", "api", "orders"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "https://10.0.0.7:8080"


def test_resolve_failure_exits_1(orders_env):
    result = runner.invoke(app, ["resolve", "metrics", "orders", "-r", "env"])
    assert result.exit_code == 1
    assert "ORDERS_SERVICE_PORT_METRICS" in result.output


def test_invalid_configuration_exits_2(orders_env):
    result = runner.invoke(app, ["resolve", "api", "orders", "-r", "consul"])
    assert result.exit_code == 2
    assert "unknown resolver" in result.output


def test_invalid_proto_exits_2(orders_env):
    result = runner.invoke(app, ["resolve", "api", "orders", "-r", "dns", "--proto", "sctp"])
    assert result.exit_code == 2


def test_env_names():
    result = runner.invoke(app, ["env-names", "prt_name", "srv-name"])
    assert result.exit_code == 0
    assert result.output.split() == ["SRV_NAME_SERVICE_HOST", "SRV_NAME_SERVICE_PORT_PRT_NAME"]
