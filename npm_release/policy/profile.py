"""
ReleaseProfile — everything about a release that is fixed at design time.

Core stages take their inputs from the profile and hold no opinions of
their own.  Renaming the package, adding a shim or shipping another
auxiliary file is a profile change, not a code change.
"""
from dataclasses import dataclass
from typing import Tuple

from npm_release.core.finalize import AuxiliaryFile
from npm_release.core.shims import ModuleMapping, ShimEntry, ShimScope
from npm_release.io.schema import Bugs, ManifestTemplate, Person, Repository

# Deno.test files and integration suites are test code, not library code.
DEFAULT_TEST_PATTERN = "**/*(*.test|integration).{ts,tsx,js,mjs,jsx}"


@dataclass(frozen=True)
class ReleaseProfile:
    """Describes one npm package release."""

    # Identity
    profile_id: str

    # Compiler inputs
    entry_points: Tuple[str, ...]
    out_dir: str
    manifest: ManifestTemplate
    test_pattern: str = DEFAULT_TEST_PATTERN
    compiler_lib: Tuple[str, ...] = ("ESNext",)
    deno_shims: Tuple[ShimEntry, ...] = ()
    mappings: Tuple[ModuleMapping, ...] = ()

    # Post-build
    auxiliary_files: Tuple[AuxiliaryFile, ...] = ()

    @property
    def publish_hint(self) -> str:
        return f"cd {self.out_dir} && npm publish && cd .."

    @classmethod
    def v0(cls) -> "ReleaseProfile":
        """The @capgo/s3-lite-client release from ./mod.ts."""
        return cls(
            profile_id="deno-to-npm-s3-lite-client",
            entry_points=("./mod.ts",),
            out_dir="npm",
            test_pattern=DEFAULT_TEST_PATTERN,
            compiler_lib=("ESNext", "DOM"),
            deno_shims=(ShimEntry(capability="test", scope=ShimScope.DEV),),
            mappings=(
                ModuleMapping(specifier="node:stream/web", name="node:stream/web"),
            ),
            manifest=ManifestTemplate(
                name="@capgo/s3-lite-client",
                description="This is a lightweight S3 client for Node.js and Deno.",
                license="MIT",
                repository=Repository(
                    type="git",
                    url="git+https://github.com/riderx/deno-s3-lite-client.git",
                ),
                bugs=Bugs(url="https://github.com/riderx/deno-s3-lite-client/issues"),
                engines={"node": ">=20"},
                author=Person(
                    name="Martin Donadieu",
                    url="https://martin.solos.ventures/d",
                ),
                contributors=[
                    "Braden MacDonald <martindonadieu@gmail.com> (https://github.com/bradenmacdonald/)",
                    "Martin Donadieu <martindonadieu@gmail.com> (https://martin.solos.ventures/)",
                ],
                dev_dependencies={"@types/node": "^20.11.1"},
                keywords=["api", "lite", "amazon", "minio", "cloud", "s3", "storage"],
            ),
            auxiliary_files=(
                AuxiliaryFile(source="LICENSE", destination="LICENSE"),
                AuxiliaryFile(source="README.md", destination="README.md"),
            ),
        )
