"""Upgrade manifest for security-sensitive packages.

Given a package graph (the package manager's store, behind ``PackageGraph``),
compute what to build to ship the latest upstream release of each
security-sensitive package: the upgraded packages themselves, plus every
direct dependent with its inputs rewritten to the upgraded versions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Protocol, Tuple

logger = logging.getLogger(__name__)

SECURITY_SENSITIVE_PACKAGES: Tuple[str, ...] = (
    "curl",
    "expat",
    "ghostscript",
    "gnupg",
    "gnutls",
    "libgcrypt",
    "libssh",
    "libxml2",
    "nss",
    "openssh",
    "openssl",
    "sudo",
    "xz",
    "zlib",
)


@dataclass(frozen=True)
class Package:
    name: str
    version: str


@dataclass(frozen=True)
class ManifestEntry:
    name: str
    version: str
    output: str = "out"


@dataclass(frozen=True)
class Manifest:
    entries: Tuple[ManifestEntry, ...] = field(default=())


class PackageGraph(Protocol):
    """What the package manager has to offer for this computation."""

    def lookup(self, name: str) -> Package:
        """Current package called NAME; raises ``LookupError`` if there is none."""
        ...

    def upgrade(self, package: Package) -> Package:
        """PACKAGE at its latest upstream version."""
        ...

    def dependents(self, packages: Iterable[Package]) -> List[Package]:
        """Packages that directly depend on any of PACKAGES."""
        ...

    def rewrite_inputs(self, package: Package, replacements: Mapping[Package, Package]) -> Package:
        """PACKAGE with each input found in REPLACEMENTS swapped for its value."""
        ...


def upgrade_manifest(
    graph: PackageGraph,
    names: Iterable[str] = SECURITY_SENSITIVE_PACKAGES,
) -> Manifest:
    """Manifest of the upgraded NAMES and their rewritten dependents."""
    originals = [graph.lookup(name) for name in names]
    replacements: Dict[Package, Package] = {p: graph.upgrade(p) for p in originals}
    for old, new in replacements.items():
        if old != new:
            logger.debug("Upgrading %s %s -> %s", old.name, old.version, new.version)

    dependents = [
        graph.rewrite_inputs(p, replacements)
        for p in graph.dependents(originals)
        if p not in replacements
    ]

    packages = list(replacements.values()) + dependents
    unique = {(p.name, p.version): p for p in packages}
    entries = tuple(
        ManifestEntry(name=name, version=version) for name, version in sorted(unique)
    )
    logger.debug(
        "Manifest: %d upgraded package(s), %d dependent(s)", len(replacements), len(dependents)
    )
    return Manifest(entries)
