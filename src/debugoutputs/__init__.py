"""Public package entrypoint for the Apple debug outputs provider."""

from .errors import DebugOutputsError, ErrorCode, ExportError, PolicyError, ValidationError
from .models import KNOWN_ARCHITECTURES, Artifact, ArtifactRef, OutputKind
from .observability import StructuredLogger
from .policy import BuilderPolicy
from .provider import PROVIDER_NAME, SCHEMA_VERSION, Builder, DebugOutputsRecord

__all__ = [
    "Artifact",
    "ArtifactRef",
    "Builder",
    "BuilderPolicy",
    "DebugOutputsError",
    "DebugOutputsRecord",
    "ErrorCode",
    "ExportError",
    "KNOWN_ARCHITECTURES",
    "OutputKind",
    "PROVIDER_NAME",
    "PolicyError",
    "SCHEMA_VERSION",
    "StructuredLogger",
    "ValidationError",
]
