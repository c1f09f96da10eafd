from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Annotated, Any, Literal, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from livegen.kernel.errors import MalformedStatementError

# Statement models describe what an external script parser hands to the graph builder.


class PortRef(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    generator: str = Field(min_length=1)
    port: str = Field(min_length=1)


class DeclareStatement(BaseModel):
    # Instantiate a generator variant under a unique name, optionally seeding port values.
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)
    action: Literal["declare"] = "declare"
    variant_code: str = Field(
        min_length=1,
        validation_alias=AliasChoices("variantCode", "variant_code"),
    )
    instance_name: str = Field(
        min_length=1,
        validation_alias=AliasChoices("instanceName", "instance_name"),
    )
    initial_ports: dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("initialPorts", "initial_ports"),
    )


class ConnectStatement(BaseModel):
    # Wire source port -> destination port; both generators must be declared earlier.
    model_config = ConfigDict(extra="forbid", frozen=True)
    action: Literal["connect"] = "connect"
    source: PortRef
    destination: PortRef


Statement = Annotated[Union[DeclareStatement, ConnectStatement], Field(discriminator="action")]

_STATEMENT_ADAPTER: TypeAdapter[DeclareStatement | ConnectStatement] = TypeAdapter(Statement)


def parse_statement(raw: object, *, index: int | None = None) -> DeclareStatement | ConnectStatement:
    if isinstance(raw, (DeclareStatement, ConnectStatement)):
        return raw
    if not isinstance(raw, Mapping):
        raise MalformedStatementError("statement must be a mapping", statement_index=index)
    try:
        return _STATEMENT_ADAPTER.validate_python(_normalize_legacy(dict(raw)))
    except ValidationError as exc:
        raise MalformedStatementError(_describe(exc), statement_index=index) from exc


def parse_statements(raw: Sequence[object]) -> list[DeclareStatement | ConnectStatement]:
    # Validate the whole list up front so a malformed tail never leaves a half-built graph.
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
        raise MalformedStatementError("statements must be a list")
    return [parse_statement(item, index=idx) for idx, item in enumerate(raw)]


def _normalize_legacy(raw: dict[str, Any]) -> dict[str, Any]:
    # The browser sketch parser emitted gen-decl / wire-expr records; map them to the current shape.
    action = raw.get("action")
    if action == "gen-decl":
        normalized: dict[str, Any] = {
            "action": "declare",
            "variantCode": raw.get("type"),
            "instanceName": raw.get("name"),
        }
        if raw.get("params"):
            normalized["initialPorts"] = raw["params"]
        return normalized
    if action == "wire-expr":
        return {"action": "connect", "source": raw.get("from"), "destination": raw.get("to")}
    return raw


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(item) for item in error["loc"])
        parts.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    return "; ".join(parts)
