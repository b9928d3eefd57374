"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from debugoutputs import ArtifactRef, Builder, StructuredLogger


@pytest.fixture
def logger() -> StructuredLogger:
    return StructuredLogger()


@pytest.fixture
def builder(logger: StructuredLogger) -> Builder:
    """Provide a builder whose log records can be inspected."""
    return Builder.create(logger=logger)


@pytest.fixture
def artifact() -> Callable[[str, str], ArtifactRef]:
    """Return a factory for per-architecture artifact references."""

    def make(arch: str, name: str) -> ArtifactRef:
        return ArtifactRef(path=Path("bazel-out") / arch / name)

    return make
