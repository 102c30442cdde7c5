"""A description of software packages and a builder for them."""

from __future__ import annotations

import argparse
import enum
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Sequence


class Language(enum.Enum):
    """The language a package is written in."""

    RUST = "Rust"
    JAVA = "Java"
    PERL = "Perl"


@dataclass(frozen=True)
class Dependency:
    """A dependency on a package at a version expression."""

    name: str
    version_expression: str


@dataclass
class Package:
    """A representation of a software package."""

    name: str
    version: str = "0.1"
    authors: list[str] = field(default_factory=list)
    dependencies: list[Dependency] = field(default_factory=list)
    language: Optional[Language] = None

    def as_dependency(self) -> Dependency:
        """Return this package as a dependency for building other packages."""
        return Dependency(self.name, self.version)


class PackageBuilder:
    """A builder for a Package. Use ``build()`` to create the Package itself."""

    def __init__(self, name: str) -> None:
        self._package = Package(str(name))

    def version(self, version: str) -> "PackageBuilder":
        """Set the package version."""
        self._package.version = str(version)
        return self

    def authors(self, authors: Iterable[str]) -> "PackageBuilder":
        """Set the package authors."""
        self._package.authors = list(authors)
        return self

    def dependency(self, dependency: Dependency) -> "PackageBuilder":
        """Add an additional dependency."""
        self._package.dependencies.append(dependency)
        return self

    def language(self, language: Language) -> "PackageBuilder":
        """Set the language. If not set, the language is None."""
        self._package.language = language
        return self

    def build(self) -> Package:
        """Return the package described so far."""
        return replace(
            self._package,
            authors=list(self._package.authors),
            dependencies=list(self._package.dependencies),
        )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build a few example packages and print them."""
    argparse.ArgumentParser(description=main.__doc__).parse_args(argv)
    base64 = PackageBuilder("base64").version("0.13").build()
    print(f"base64: {base64!r}")
    log = PackageBuilder("log").version("0.4").language(Language.RUST).build()
    print(f"log: {log!r}")
    serde = (
        PackageBuilder("serde")
        .authors(["djmitche"])
        .version("4.0")
        .dependency(base64.as_dependency())
        .dependency(log.as_dependency())
        .build()
    )
    print(f"serde: {serde!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())