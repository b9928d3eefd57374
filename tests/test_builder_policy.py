import warnings

import pytest

from debugoutputs import Builder, BuilderPolicy, OutputKind
from debugoutputs.errors import PolicyError, ValidationError
from debugoutputs.policy import ensure_architecture_allowed


@pytest.mark.parametrize("arch", ["", "   "])
def test_empty_architecture_is_rejected_by_default(arch: str) -> None:
    builder = Builder.create()

    with pytest.raises(ValidationError):
        builder.add_output(arch, OutputKind.LINKMAP, "map")

    assert builder.build().outputs_map == {}


def test_empty_architecture_check_can_be_disabled() -> None:
    policy = BuilderPolicy(reject_empty_architecture=False)

    record = Builder.create(policy=policy).add_output("", OutputKind.LINKMAP, "map").build()

    assert record.outputs_map == {"": {"linkmap": "map"}}


def test_unknown_architecture_is_allowed_by_default() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        record = Builder.create().add_output("riscv64", OutputKind.LINKMAP, "map").build()

    assert "riscv64" in record


def test_unknown_architecture_warns_under_warn_policy() -> None:
    builder = Builder.create(policy=BuilderPolicy(unknown_architecture_policy="warn"))

    with pytest.warns(UserWarning, match="riscv64"):
        builder.add_output("riscv64", OutputKind.LINKMAP, "map")

    assert "riscv64" in builder.build()


def test_unknown_architecture_errors_under_error_policy() -> None:
    builder = Builder.create(policy=BuilderPolicy(unknown_architecture_policy="error"))

    with pytest.raises(PolicyError) as excinfo:
        builder.add_output("riscv64", OutputKind.LINKMAP, "map")

    assert excinfo.value.context["arch"] == "riscv64"
    assert builder.build().outputs_map == {}


def test_known_architecture_passes_strict_policy() -> None:
    policy = BuilderPolicy(unknown_architecture_policy="error")

    ensure_architecture_allowed(policy=policy, arch="arm64e")
    ensure_architecture_allowed(policy=policy, arch="x86_64")
