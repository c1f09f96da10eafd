from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

from livegen.kernel.environment import Environment
from livegen.kernel.errors import (
    BuildError,
    CycleError,
    DuplicateGeneratorError,
    UnknownGeneratorError,
    UnknownPortError,
    UnknownVariantError,
)
from livegen.kernel.generator import Generator
from livegen.kernel.port import Port, wire
from livegen.kernel.registry import Registry
from livegen.statements import models as statement_models

# Factories turn (variant code, instance name, environment) into a fresh generator.
GeneratorFactory = Callable[[str, str, Environment], Generator]


@dataclass(frozen=True, slots=True)
class GraphBuilder:
    # GraphBuilder turns an ordered statement list into a new, unpublished Registry.
    # Every generator and wire it creates is fresh, so a failure cannot touch the active graph.
    factory: GeneratorFactory
    env: Environment
    allow_cycles: bool = True

    def build(self, statements: Sequence[object]) -> Registry:
        # Validate all statement shapes before instantiating anything.
        parsed = statement_models.parse_statements(statements)

        generators: dict[str, Generator] = {}
        for idx, statement in enumerate(parsed):
            if isinstance(statement, statement_models.DeclareStatement):
                self._declare(generators, statement, idx)
            elif isinstance(statement, statement_models.ConnectStatement):
                self._connect(generators, statement, idx)

        registry = Registry(generators)
        if not self.allow_cycles:
            _assert_acyclic(registry)
        return registry

    def _declare(self, generators: dict[str, Generator], stmt: statement_models.DeclareStatement, idx: int) -> None:
        name = stmt.instance_name
        if name in generators:
            raise DuplicateGeneratorError(name, statement_index=idx)
        try:
            generator = self.factory(stmt.variant_code, name, self.env)
        except UnknownVariantError as exc:
            raise UnknownVariantError(exc.code, statement_index=idx) from exc
        except Exception as exc:  # noqa: BLE001 - wrap with explicit error
            raise BuildError(f"failed to create generator '{name}': {exc}", statement_index=idx) from exc

        # Initial values bypass wiring: same effect as an immediate update on the port.
        for port_name, value in stmt.initial_ports.items():
            port = _lookup_port(generator, name, port_name, idx)
            try:
                port.update(value)
            except Exception as exc:  # noqa: BLE001 - wrap with explicit error
                raise BuildError(
                    f"failed to set initial value of '{name}.{port_name}': {exc}", statement_index=idx
                ) from exc
        generators[name] = generator

    def _connect(self, generators: dict[str, Generator], stmt: statement_models.ConnectStatement, idx: int) -> None:
        source = _resolve(generators, stmt.source, idx)
        destination = _resolve(generators, stmt.destination, idx)
        wire(source, destination)


def _resolve(generators: dict[str, Generator], ref: statement_models.PortRef, idx: int) -> Port:
    # Connections may only reference generators declared earlier in the same script.
    generator = generators.get(ref.generator)
    if generator is None:
        raise UnknownGeneratorError(ref.generator, statement_index=idx)
    return _lookup_port(generator, ref.generator, ref.port, idx)


def _lookup_port(generator: Generator, gen_name: str, port_name: str, idx: int) -> Port:
    port = generator.ports.get(port_name)
    if port is None:
        raise UnknownPortError(gen_name, port_name, statement_index=idx)
    return port


def _assert_acyclic(registry: Registry) -> None:
    # Depth-first cycle detection over port-level wiring edges, with an explicit
    # stack so long chains do not hit the interpreter recursion limit.
    adjacency: dict[tuple[str, str], list[tuple[str, str]]] = {}
    for src_gen, src_port, dst_gen, dst_port in registry.edges():
        adjacency.setdefault((src_gen, src_port), []).append((dst_gen, dst_port))
        adjacency.setdefault((dst_gen, dst_port), [])

    visiting: set[tuple[str, str]] = set()
    visited: set[tuple[str, str]] = set()

    for root in list(adjacency.keys()):
        if root in visited:
            continue
        visiting.add(root)
        stack: list[tuple[tuple[str, str], Iterator[tuple[str, str]]]] = [(root, iter(adjacency[root]))]
        while stack:
            node, successors = stack[-1]
            nxt = next(successors, None)
            if nxt is None:
                stack.pop()
                visiting.remove(node)
                visited.add(node)
            elif nxt in visiting:
                raise CycleError(f"cyclic wiring detected at port '{nxt[0]}.{nxt[1]}'")
            elif nxt not in visited:
                visiting.add(nxt)
                stack.append((nxt, iter(adjacency[nxt])))
