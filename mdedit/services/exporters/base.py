from __future__ import annotations

from dataclasses import dataclass, field

from mdedit.domain.interfaces import IExporter, IExporterRegistry


@dataclass
class ExporterRegistryInst(IExporterRegistry):
    """
    Per-container table of export strategies, keyed by exporter name.

    Each Container owns one; feature flags decide what goes in. Registering a
    second exporter under a taken name is a wiring mistake unless `replace`
    is passed explicitly.
    """

    _by_name: dict[str, IExporter] = field(default_factory=dict)

    def register(self, exporter: IExporter, *, replace: bool = False) -> None:
        if not replace and exporter.name in self._by_name:
            raise ValueError(f"Exporter already registered: {exporter.name!r}")
        self._by_name[exporter.name] = exporter

    def get(self, name: str) -> IExporter:
        return self._by_name[name]

    def find(self, name: str) -> IExporter | None:
        return self._by_name.get(name)

    def names(self) -> list[str]:
        return list(self._by_name)

    def all(self) -> list[IExporter]:
        return list(self._by_name.values())
