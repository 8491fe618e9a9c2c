"""
Shim configurator — Deno globals and module specifiers for Node.

Two kinds of declarations, both handed to the compiler untouched:
  1. Deno shims — substitute a Deno-only global capability (``Deno.test``)
     with a Node implementation, everywhere or only in test code.
  2. Module mappings — redirect a specifier to a named npm/Node module.

Nothing here compiles anything; the output is an in-memory ShimConfig.
"""
from dataclasses import dataclass
from enum import Enum, unique
from typing import Any, Dict, Optional, Sequence, Tuple, Union


@unique
class ShimScope(str, Enum):
    ALWAYS = "always"   # library and test code
    DEV = "dev"         # test code only

    def to_option(self) -> Union[bool, str]:
        """Value in dnt's shim option shape (``true`` or ``"dev"``)."""
        if self is ShimScope.ALWAYS:
            return True
        return self.value


@dataclass(frozen=True)
class ShimEntry:
    """Substitution for one Deno-native capability, e.g. ``test``."""

    capability: str
    scope: ShimScope


@dataclass(frozen=True)
class ModuleMapping:
    """Redirect *specifier* to the module called *name* in the npm package."""

    specifier: str
    name: str
    version: Optional[str] = None
    sub_path: Optional[str] = None
    peer_dependency: bool = False

    def to_option(self) -> Dict[str, Any]:
        opt: Dict[str, Any] = {"name": self.name}
        if self.version is not None:
            opt["version"] = self.version
        if self.sub_path is not None:
            opt["subPath"] = self.sub_path
        if self.peer_dependency:
            opt["peerDependency"] = True
        return opt


@dataclass(frozen=True)
class ShimConfig:
    deno_shims: Tuple[ShimEntry, ...] = ()
    mappings: Tuple[ModuleMapping, ...] = ()

    def to_shim_options(self) -> Dict[str, Any]:
        if not self.deno_shims:
            return {}
        return {
            "deno": {s.capability: s.scope.to_option() for s in self.deno_shims}
        }

    def to_mapping_options(self) -> Dict[str, Dict[str, Any]]:
        return {m.specifier: m.to_option() for m in self.mappings}


def configure_shims(
    deno_shims: Sequence[ShimEntry],
    mappings: Sequence[ModuleMapping],
) -> ShimConfig:
    """
    Freeze shim and mapping declarations into a ShimConfig.

    Raises ValueError if a capability or specifier is declared twice.
    """
    seen_caps = set()
    for shim in deno_shims:
        if shim.capability in seen_caps:
            raise ValueError(f"Duplicate shim for capability '{shim.capability}'")
        seen_caps.add(shim.capability)

    seen_specs = set()
    for mapping in mappings:
        if mapping.specifier in seen_specs:
            raise ValueError(f"Duplicate mapping for specifier '{mapping.specifier}'")
        seen_specs.add(mapping.specifier)

    return ShimConfig(deno_shims=tuple(deno_shims), mappings=tuple(mappings))
