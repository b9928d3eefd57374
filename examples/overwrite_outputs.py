"""Show that a later output of the same kind replaces an earlier one."""

from debugoutputs import Builder, OutputKind


def main() -> None:
    builder = Builder.create()
    builder.add_output("x86_64", OutputKind.LINKMAP, "bazel-out/x86_64/App.linkmap.stale")
    builder.add_output("x86_64", OutputKind.LINKMAP, "bazel-out/x86_64/App.linkmap")
    first = builder.build()

    builder.add_output("arm64", OutputKind.LINKMAP, "bazel-out/arm64/App.linkmap")
    second = builder.build()

    print(dict(first.outputs_for("x86_64")))
    print(first.architectures, second.architectures)


if __name__ == "__main__":
    main()
