from __future__ import annotations

import pytest

from livegen.kernel.errors import MalformedStatementError
from livegen.statements.models import (
    ConnectStatement,
    DeclareStatement,
    PortRef,
    parse_statement,
    parse_statements,
)


def test_parse_declare_with_camel_case_keys() -> None:
    stmt = parse_statement(
        {"action": "declare", "variantCode": "Tick", "instanceName": "t", "initialPorts": {"incr": 0.1}}
    )
    assert stmt == DeclareStatement(variant_code="Tick", instance_name="t", initial_ports={"incr": 0.1})


def test_parse_declare_without_initial_ports() -> None:
    stmt = parse_statement({"action": "declare", "variant_code": "Log", "instance_name": "log"})
    assert isinstance(stmt, DeclareStatement)
    assert stmt.initial_ports == {}


def test_parse_connect() -> None:
    stmt = parse_statement(
        {
            "action": "connect",
            "source": {"generator": "t", "port": "tick"},
            "destination": {"generator": "log", "port": "value0"},
        }
    )
    assert isinstance(stmt, ConnectStatement)
    assert stmt.source == PortRef(generator="t", port="tick")


def test_parse_legacy_shapes() -> None:
    decl = parse_statement({"action": "gen-decl", "type": "Trig", "name": "s", "params": {"frequency": 2}})
    wire = parse_statement(
        {"action": "wire-expr", "from": {"generator": "s", "port": "sin"}, "to": {"generator": "p", "port": "x"}}
    )
    assert decl == DeclareStatement(variant_code="Trig", instance_name="s", initial_ports={"frequency": 2})
    assert wire.destination == PortRef(generator="p", port="x")


@pytest.mark.parametrize(
    "raw",
    [
        {"action": "declare", "variantCode": "Tick"},
        {"action": "declare", "variantCode": "", "instanceName": "t"},
        {"action": "declare", "variantCode": "Tick", "instanceName": "t", "bogus": 1},
        {"action": "connect", "source": {"generator": "t"}, "destination": {"generator": "m", "port": "a"}},
        {"action": "unknown"},
        {"variantCode": "Tick", "instanceName": "t"},
        ["declare"],
        "declare Tick t",
    ],
)
def test_malformed_statements_are_rejected(raw) -> None:
    with pytest.raises(MalformedStatementError):
        parse_statement(raw, index=4)


def test_error_carries_statement_index() -> None:
    with pytest.raises(MalformedStatementError) as exc_info:
        parse_statements([{"action": "declare", "variantCode": "Tick", "instanceName": "t"}, {"action": "nope"}])
    assert exc_info.value.statement_index == 1
    assert str(exc_info.value).startswith("statements[1]:")


def test_statement_list_must_be_a_list() -> None:
    with pytest.raises(MalformedStatementError):
        parse_statements("declare Tick t")


def test_parsed_models_pass_through() -> None:
    stmt = DeclareStatement(variant_code="Tick", instance_name="t")
    assert parse_statements([stmt]) == [stmt]
