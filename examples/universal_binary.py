"""Collect the debug outputs of a fat iOS binary and export them for other rules."""

from pathlib import Path

from debugoutputs import ArtifactRef, Builder, BuilderPolicy, OutputKind


def collect_debug_outputs(build_dir: Path) -> None:
    builder = Builder.create(policy=BuilderPolicy(unknown_architecture_policy="warn"))

    for arch in ("arm64", "armv7"):
        arch_dir = build_dir / arch
        builder.add_output(
            arch,
            OutputKind.DSYM_BINARY,
            ArtifactRef(path=arch_dir / "App_dsym_binary", owner="//app:App"),
        )
        builder.add_output(
            arch, OutputKind.BITCODE_SYMBOLS, ArtifactRef.of(arch_dir / "App.bcsymbolmap")
        )
        builder.add_output(arch, "linkmap", arch_dir / "App.linkmap")

    record = builder.build()
    dsym = record.artifact_for(arch="arm64", output_kind=OutputKind.DSYM_BINARY)
    print(f"{record.provider_name}: {', '.join(record.architectures)} (arm64 dSYM: {dsym})")

    record.to_json(build_dir / "debug_outputs.json")
    builder.logger.to_json_lines(build_dir / "debug_outputs.log.jsonl")


if __name__ == "__main__":
    collect_debug_outputs(Path("build"))
