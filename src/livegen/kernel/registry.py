from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from livegen.kernel.errors import UnknownGeneratorError
from livegen.kernel.generator import Generator
from livegen.kernel.port import Port

Edge = tuple[str, str, str, str]


@dataclass(frozen=True, slots=True)
class Registry:
    # Registry is an immutable, registration-ordered mapping of instance name -> generator.
    # It is replaced wholesale by a successful rebuild and never patched.
    _generators: Mapping[str, Generator] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_generators", MappingProxyType(dict(self._generators)))

    @classmethod
    def empty(cls) -> Registry:
        return cls()

    def get(self, name: str) -> Generator:
        try:
            return self._generators[name]
        except KeyError:
            raise UnknownGeneratorError(name) from None

    def names(self) -> list[str]:
        return list(self._generators)

    def generators(self) -> list[Generator]:
        return list(self._generators.values())

    def __contains__(self, name: object) -> bool:
        return name in self._generators

    def __iter__(self) -> Iterator[Generator]:
        return iter(self._generators.values())

    def __len__(self) -> int:
        return len(self._generators)

    def edges(self) -> list[Edge]:
        # The wiring is only stored in subscriber lists; walk them to recover it.
        owners: dict[int, tuple[str, str]] = {}
        for gen_name, generator in self._generators.items():
            for port_name, port in generator.ports.items():
                owners[id(port)] = (gen_name, port_name)

        edges: list[Edge] = []
        for gen_name, generator in self._generators.items():
            for port_name, port in generator.ports.items():
                for subscriber in port.subscribers:
                    dst = owners.get(id(subscriber))
                    if dst is None:
                        # Subscribers outside this registry are not part of the graph.
                        continue
                    edges.append((gen_name, port_name, dst[0], dst[1]))
        return edges

    def port(self, generator: str, port: str) -> Port:
        return self.get(generator).port(port)
