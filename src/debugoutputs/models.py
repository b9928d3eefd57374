"""Core typed values for per-architecture debug outputs."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from debugoutputs.errors import ValidationError

KNOWN_ARCHITECTURES = (
    "arm64",
    "arm64_32",
    "arm64e",
    "armv7",
    "armv7k",
    "armv7s",
    "i386",
    "x86_64",
)


class OutputKind(StrEnum):
    """Debug artifact categories produced per architecture.

    The string values are the inner keys of ``outputs_map`` and are part of
    the public contract consumed by other build rules.
    """

    BITCODE_SYMBOLS = "bitcode_symbols"
    DSYM_BINARY = "dsym_binary"
    LINKMAP = "linkmap"

    @property
    def identifier(self) -> str:
        return self.value

    @classmethod
    def from_identifier(cls, text: str) -> OutputKind:
        try:
            return cls(text)
        except ValueError as exc:
            raise ValidationError(
                f"Unknown debug output kind {text!r}.",
                hint="Use one of: " + ", ".join(kind.value for kind in cls) + ".",
                context={"output_kind": text, "operation": "from_identifier"},
            ) from exc


@dataclass(frozen=True, slots=True)
class ArtifactRef:
    """A build-produced file, identified by its output path."""

    path: Path
    digest: str | None = None
    owner: str | None = None

    @classmethod
    def of(cls, path: str | os.PathLike[str], *, digest: str | None = None) -> ArtifactRef:
        return cls(path=Path(path), digest=digest)


Artifact = ArtifactRef | str | os.PathLike


__all__ = [
    "Artifact",
    "ArtifactRef",
    "KNOWN_ARCHITECTURES",
    "OutputKind",
]
