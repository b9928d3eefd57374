"""Provider record describing per-architecture debug outputs of an Apple binary.

The record exposes a single field, ``outputs_map``::

    {arch: {output_kind: artifact, ...}, ...}

where ``arch`` is an Apple architecture such as ``arm64`` or ``armv7`` and
``output_kind`` is one of the stable :class:`OutputKind` identifiers, e.g.
``{"arm64": {"bitcode_symbols": ..., "dsym_binary": ...}}``.

Records are assembled with :class:`Builder` and are immutable once built, so
they can be shared freely between readers.
"""

from __future__ import annotations

import json
import os
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import ClassVar

import cbor2

from debugoutputs.errors import ExportError, ValidationError
from debugoutputs.models import Artifact, ArtifactRef, OutputKind
from debugoutputs.observability import StructuredLogger
from debugoutputs.policy import BuilderPolicy, ensure_architecture_allowed

PROVIDER_NAME = "AppleDebugOutputs"
SCHEMA_VERSION = 1

_NO_OUTPUTS: Mapping[str, Artifact] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class DebugOutputsRecord:
    """Frozen ``arch -> output_kind -> artifact`` lookup table."""

    outputs_map: Mapping[str, Mapping[str, Artifact]] = field(default_factory=dict)

    provider_name: ClassVar[str] = PROVIDER_NAME

    def __post_init__(self) -> None:
        object.__setattr__(self, "outputs_map", _freeze(self.outputs_map))

    def __len__(self) -> int:
        return len(self.outputs_map)

    def __contains__(self, arch: object) -> bool:
        return arch in self.outputs_map

    def __iter__(self) -> Iterator[str]:
        return iter(self.outputs_map)

    @property
    def architectures(self) -> tuple[str, ...]:
        return tuple(sorted(self.outputs_map))

    def outputs_for(self, arch: str) -> Mapping[str, Artifact]:
        return self.outputs_map.get(arch, _NO_OUTPUTS)

    def artifact_for(self, *, arch: str, output_kind: OutputKind | str) -> Artifact | None:
        kind = _coerce_kind(output_kind)
        return self.outputs_for(arch).get(kind.identifier)

    def to_payload(self) -> dict[str, object]:
        return {
            "provider": PROVIDER_NAME,
            "schema_version": SCHEMA_VERSION,
            "outputs_map": {
                arch: {
                    kind: _render_artifact(artifact, arch=arch, kind=kind)
                    for kind, artifact in sorted(by_kind.items())
                }
                for arch, by_kind in sorted(self.outputs_map.items())
            },
        }

    def to_json(self, path: str | Path | None = None) -> str:
        encoded = json.dumps(self.to_payload(), indent=2, sort_keys=True) + "\n"
        if path is not None:
            Path(path).write_text(encoded, encoding="utf-8")
        return encoded

    def to_cbor(self, path: str | Path | None = None) -> bytes:
        encoded = cbor2.dumps(self.to_payload(), canonical=True)
        if path is not None:
            Path(path).write_bytes(encoded)
        return encoded


@dataclass(slots=True)
class Builder:
    """Accumulates debug outputs per architecture and freezes them on :meth:`build`.

    A builder may be built more than once; every call snapshots the outputs
    added so far, and later :meth:`add_output` calls never show up in records
    that were already returned.
    """

    policy: BuilderPolicy = field(default_factory=BuilderPolicy)
    logger: StructuredLogger = field(default_factory=StructuredLogger)
    _outputs_by_arch: dict[str, dict[str, Artifact]] = field(
        default_factory=dict, init=False, repr=False
    )

    @classmethod
    def create(
        cls,
        *,
        policy: BuilderPolicy | None = None,
        logger: StructuredLogger | None = None,
    ) -> Builder:
        return cls(
            policy=policy if policy is not None else BuilderPolicy(),
            logger=logger if logger is not None else StructuredLogger(),
        )

    def add_output(
        self,
        arch: str,
        output_kind: OutputKind | str,
        artifact: Artifact,
    ) -> Builder:
        """Record *artifact* as the *output_kind* output of *arch*.

        A second output of the same kind for the same architecture replaces
        the first one.
        """
        kind = _coerce_kind(output_kind)
        ensure_architecture_allowed(policy=self.policy, arch=arch)

        by_kind = self._outputs_by_arch.setdefault(arch, {})
        replaced = kind.identifier in by_kind
        by_kind[kind.identifier] = artifact

        self.logger.log(
            operation="add_output",
            arch=arch,
            output_kind=kind.identifier,
            message=f"Registered {kind.identifier} output for {arch}.",
            extra={"replaced": replaced},
        )
        return self

    def build(self) -> DebugOutputsRecord:
        record = DebugOutputsRecord(self._outputs_by_arch)
        self.logger.log(
            operation="build",
            arch=None,
            output_kind=None,
            message=f"Built {PROVIDER_NAME} record.",
            extra={"architectures": len(record)},
        )
        return record


def _coerce_kind(output_kind: OutputKind | str) -> OutputKind:
    if isinstance(output_kind, OutputKind):
        return output_kind
    return OutputKind.from_identifier(output_kind)


def _freeze(
    outputs: Mapping[str, Mapping[str, Artifact]],
) -> Mapping[str, Mapping[str, Artifact]]:
    frozen: dict[str, Mapping[str, Artifact]] = {}
    for arch, by_kind in outputs.items():
        if not by_kind:
            raise ValidationError(
                "Architecture entry has no debug outputs.",
                hint="Only architectures with at least one output may appear in outputs_map.",
                context={"arch": arch, "operation": "freeze"},
            )
        frozen[arch] = MappingProxyType(
            {_coerce_kind(kind).identifier: artifact for kind, artifact in by_kind.items()}
        )
    return MappingProxyType(frozen)


def _render_artifact(artifact: Artifact, *, arch: str, kind: str) -> object:
    if isinstance(artifact, ArtifactRef):
        rendered: dict[str, str] = {"path": str(artifact.path)}
        if artifact.digest is not None:
            rendered["digest"] = artifact.digest
        if artifact.owner is not None:
            rendered["owner"] = artifact.owner
        return rendered
    if isinstance(artifact, str):
        return artifact
    if isinstance(artifact, os.PathLike):
        path = os.fspath(artifact)
        if isinstance(path, str):
            return path
    raise ExportError(
        "Artifact cannot be rendered for export.",
        hint="Use ArtifactRef, str, or a str-based path for exported records.",
        context={"arch": arch, "output_kind": kind, "type": type(artifact).__name__},
    )


__all__ = [
    "Builder",
    "DebugOutputsRecord",
    "PROVIDER_NAME",
    "SCHEMA_VERSION",
]
