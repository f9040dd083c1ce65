"""Environment variable resolver."""
import re

import pytest
from hypothesis import given, strategies as st

from svcdiscovery import EnvResolver, HostNotConfigured, PortNotConfigured, normalize_name
from svcdiscovery.env import host_variable, port_variable

HOST_VAR = "SRV_NAME_SERVICE_HOST"
PORT_VAR = "SRV_NAME_SERVICE_PORT_PRT_NAME"


def test_variable_names():
    assert host_variable("srv-name") == HOST_VAR
    assert port_variable("prt_name", "srv-name") == PORT_VAR


@pytest.mark.parametrize(
    "name, expected",
    [
        ("srv-name", "SRV_NAME"),
        ("orders.default", "ORDERSDEFAULT"),
        ("grpc-web_2", "GRPC_WEB_2"),
        ("straße", "STRAE"),
        ("ı-svc", "I_SVC"),
        ("", ""),
    ],
)
def test_normalize_name(name, expected):
    assert normalize_name(name) == expected


@given(st.text())
def test_normalized_names_are_valid_variable_parts(name):
    assert re.fullmatch(r"[A-Z0-9_]*", normalize_name(name))


@given(st.text())
def test_normalize_is_idempotent(name):
    once = normalize_name(name)
    assert normalize_name(once) == once


def test_both_variables_set():
    resolver = EnvResolver({HOST_VAR: "1.2.3.4", PORT_VAR: "12345"})
    url = resolver.resolve("prt_name", "srv-name")

    assert url.host == "1.2.3.4:12345"
    assert url.scheme == ""
    assert str(url.with_scheme("http")) == "http://1.2.3.4:12345"


def test_host_not_set():
    with pytest.raises(HostNotConfigured) as exc_info:
        EnvResolver({PORT_VAR: "12345"}).resolve("prt_name", "srv-name")
    err = exc_info.value
    assert err.variable == HOST_VAR
    assert HOST_VAR in str(err)
    assert "srv-name" in str(err)


def test_host_empty_counts_as_unset():
    with pytest.raises(HostNotConfigured):
        EnvResolver({HOST_VAR: "", PORT_VAR: "12345"}).resolve("prt_name", "srv-name")


def test_port_not_set():
    with pytest.raises(PortNotConfigured) as exc_info:
        EnvResolver({HOST_VAR: "1.2.3.4"}).resolve("prt_name", "srv-name")
    err = exc_info.value
    assert err.variable == PORT_VAR
    assert PORT_VAR in str(err)
    assert "srv-name" in str(err) and "prt_name" in str(err)


def test_defaults_to_process_environment(monkeypatch):
    monkeypatch.setenv(HOST_VAR, "10.0.0.1")
    monkeypatch.setenv(PORT_VAR, "8080")
    assert EnvResolver().resolve("prt_name", "srv-name").host == "10.0.0.1:8080"
