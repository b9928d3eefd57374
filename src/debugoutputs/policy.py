"""Policy configuration and enforcement helpers."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Literal

from debugoutputs.errors import PolicyError, ValidationError
from debugoutputs.models import KNOWN_ARCHITECTURES

UnknownArchitecturePolicy = Literal["allow", "warn", "error"]


@dataclass(frozen=True, slots=True)
class BuilderPolicy:
    reject_empty_architecture: bool = True
    unknown_architecture_policy: UnknownArchitecturePolicy = "allow"


def ensure_architecture_allowed(*, policy: BuilderPolicy, arch: str) -> None:
    if not arch.strip():
        if policy.reject_empty_architecture:
            raise ValidationError(
                "Architecture identifier must not be empty.",
                hint="Pass an architecture such as 'arm64' or 'x86_64'.",
                context={"arch": repr(arch), "operation": "add_output"},
            )
        return

    if arch in KNOWN_ARCHITECTURES or policy.unknown_architecture_policy == "allow":
        return

    message = f"Architecture {arch!r} is not a known Apple architecture."
    if policy.unknown_architecture_policy == "error":
        raise PolicyError(
            message,
            hint="Relax policy.unknown_architecture_policy to 'warn' or 'allow'.",
            context={"arch": arch, "operation": "add_output"},
        )
    warnings.warn(message, UserWarning, stacklevel=3)


__all__ = [
    "BuilderPolicy",
    "UnknownArchitecturePolicy",
    "ensure_architecture_allowed",
]
