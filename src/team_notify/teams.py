"""The project's teams: who looks after which files.

Teams are declared first, members second.  A member line names every team the
person belongs to; adding yourself to a team means adding its id there.

Scope entries are either exact paths (``ExactPath``) or regular expressions
(``pattern``).  Expressions are searched, so anchor them with ``^``/``$``.
"""

from __future__ import annotations

import functools

from team_notify.application.registry import Registry, RegistryBuilder
from team_notify.domain import ExactPath, Person, pattern


def _define_teams(b: RegistryBuilder) -> None:
    b.define_team(
        "bootstrap",
        name="Bootstrap",
        scope=[
            ExactPath("gnu/packages/commencement.scm"),
            ExactPath("gnu/packages/mes.scm"),
        ],
    )

    b.define_team(
        "core",
        name="Core / Tools / Internals",
        scope=[
            pattern(r"^guix/scripts/"),
            pattern(r"^guix/store/"),
            ExactPath("guix/build/utils.scm"),
            ExactPath("guix/derivations.scm"),
            ExactPath("guix/gexp.scm"),
            ExactPath("guix/grafts.scm"),
            ExactPath("guix/monads.scm"),
            ExactPath("guix/packages.scm"),
            ExactPath("guix/profiles.scm"),
            ExactPath("guix/store.scm"),
            ExactPath("guix/ui.scm"),
        ],
    )

    b.define_team(
        "core-packages",
        name="Core packages",
        description="Core packages: the GNU tool chain, Guile, Coreutils, etc.",
        scope=[
            ExactPath("gnu/packages/base.scm"),
            ExactPath("gnu/packages/bootstrap.scm"),
            ExactPath("gnu/packages/commencement.scm"),
            ExactPath("gnu/packages/cross-base.scm"),
            ExactPath("gnu/packages/gcc.scm"),
            ExactPath("gnu/packages/guile.scm"),
            ExactPath("gnu/packages/make-bootstrap.scm"),
            pattern(r"^gnu/packages/patches/glibc.*"),
            ExactPath("guix/build/gnu-build-system.scm"),
            ExactPath("guix/build-system/gnu.scm"),
        ],
    )

    b.define_team(
        "documentation",
        name="Documentation",
        description="Documentation: the manual and cookbook.",
        scope=[
            pattern(r"^doc/.*\.texi$"),
            ExactPath("doc/build.scm"),
            ExactPath("doc/htmlxref.cnf"),
        ],
    )

    b.define_team(
        "emacs",
        name="Emacs team",
        description="The extensible, customizable text editor and its ecosystem.",
        scope=[
            pattern(r"^gnu/packages/emacs(-.+|)\.scm$"),
            ExactPath("guix/build/emacs-build-system.scm"),
            ExactPath("guix/build/emacs-utils.scm"),
            ExactPath("guix/build-system/emacs.scm"),
            ExactPath("guix/import/elpa.scm"),
            ExactPath("guix/scripts/import/elpa.scm"),
        ],
    )

    b.define_team(
        "games",
        name="Games and Toys",
        description="Packaging programs for amusement.",
        scope=[
            ExactPath("gnu/packages/games.scm"),
            ExactPath("gnu/packages/game-development.scm"),
            ExactPath("gnu/packages/minetest.scm"),
            ExactPath("gnu/packages/esolangs.scm"),
            ExactPath("gnu/packages/motti.scm"),
            ExactPath("guix/build-system/minetest.scm"),
        ],
    )

    b.define_team(
        "gnome",
        name="Gnome team",
        description="The Gnome desktop environment, along with core technologies such as GLib/GIO, GTK, GStreamer and Webkit.",
        scope=[
            ExactPath("gnu/packages/glib.scm"),
            ExactPath("gnu/packages/gstreamer.scm"),
            ExactPath("gnu/packages/gtk.scm"),
            ExactPath("gnu/packages/gnome.scm"),
            ExactPath("gnu/packages/gnome-xyz.scm"),
            ExactPath("gnu/packages/webkit.scm"),
            ExactPath("guix/build/glib-or-gtk-build-system.scm"),
            ExactPath("guix/build/meson-build-system.scm"),
        ],
    )

    b.define_team(
        "haskell",
        name="Haskell team",
        description="GHC, Hugs, Haskell packages, the \"hackage\" and \"stackage\" importers, and the haskell-build-system.",
        scope=[
            pattern(r"^gnu/packages/haskell(-.+|)\.scm$"),
            ExactPath("gnu/packages/purescript.scm"),
            ExactPath("guix/build/haskell-build-system.scm"),
            ExactPath("guix/build-system/haskell.scm"),
            ExactPath("guix/import/cabal.scm"),
            ExactPath("guix/import/hackage.scm"),
            ExactPath("guix/import/stackage.scm"),
            ExactPath("guix/scripts/import/hackage.scm"),
        ],
    )

    b.define_team(
        "home",
        name="Team for \"Guix Home\"",
        scope=[
            pattern(r"^(gnu|guix/scripts)/home(\.scm$|/)"),
            pattern(r"^tests/guix-home"),
            ExactPath("gnu/system/shadow.scm"),
            ExactPath("guix/build/utils.scm"),
        ],
    )

    b.define_team(
        "installer",
        name="Installer script and system installer",
        scope=[
            pattern(r"^gnu/installer(\.scm$|/)"),
        ],
    )

    b.define_team(
        "java",
        name="Java and Maven team",
        description="The JDK and JRE, the Maven build system, Java packages, the ant-build-system, and the maven-build-system.",
        scope=[
            pattern(r"^gnu/packages/(java(-.+|)|maven(-.+|))\.scm$"),
            ExactPath("guix/build/ant-build-system.scm"),
            ExactPath("guix/build/java-utils.scm"),
            ExactPath("guix/build/maven-build-system.scm"),
            pattern(r"^guix/build/maven/"),
            ExactPath("guix/build-system/ant.scm"),
            ExactPath("guix/build-system/maven.scm"),
        ],
    )

    b.define_team(
        "julia",
        name="Julia team",
        description="The Julia language, Julia packages, and the julia-build-system.",
        scope=[
            pattern(r"^gnu/packages/julia(-.+|)\.scm$"),
            ExactPath("guix/build/julia-build-system.scm"),
            ExactPath("guix/build-system/julia.scm"),
        ],
    )

    b.define_team(
        "kernel",
        name="Linux-libre kernel team",
        scope=[
            ExactPath("gnu/build/linux-modules.scm"),
            ExactPath("gnu/packages/linux.scm"),
            ExactPath("gnu/tests/linux-modules.scm"),
            ExactPath("guix/build/linux-module-build-system.scm"),
            ExactPath("guix/build-system/linux-module.scm"),
        ],
    )

    b.define_team(
        "lisp",
        name="Lisp team",
        description="Common Lisp and similar languages, Common Lisp packages and the asdf-build-system.",
        scope=[
            pattern(r"^gnu/packages/lisp(-.+|)\.scm$"),
            ExactPath("guix/build/asdf-build-system.scm"),
            ExactPath("guix/build/lisp-utils.scm"),
            ExactPath("guix/build-system/asdf.scm"),
        ],
    )

    b.define_team(
        "mentors",
        name="Mentors",
        description="A group of mentors who chaperone contributions by newcomers.",
    )

    b.define_team(
        "mozilla",
        name="Mozilla",
        description="Taking care of Icedove and Web Browsers based on Mozilla Thunderbird and Firefox.",
        scope=[
            ExactPath("gnu/build/icecat-extension.scm"),
            ExactPath("gnu/packages/browser-extensions.scm"),
            ExactPath("gnu/packages/gnuzilla.scm"),
            pattern(r"^gnu/packages/patches/icecat-.*\.patch$"),
            ExactPath("gnu/packages/librewolf.scm"),
            ExactPath("gnu/packages/tor-browsers.scm"),
        ],
    )

    b.define_team(
        "ocaml",
        name="OCaml and Dune team",
        description="The OCaml language, the Dune build system, OCaml packages, the \"opam\" importer, and the ocaml-build-system.",
        scope=[
            ExactPath("gnu/packages/ocaml.scm"),
            ExactPath("gnu/packages/coq.scm"),
            ExactPath("guix/build/ocaml-build-system.scm"),
            ExactPath("guix/build/dune-build-system.scm"),
            ExactPath("guix/build-system/ocaml.scm"),
            ExactPath("guix/build-system/dune.scm"),
            ExactPath("guix/import/opam.scm"),
            ExactPath("guix/scripts/import/opam.scm"),
        ],
    )

    b.define_team(
        "python",
        name="Python team",
        description="Python, Python packages, the \"pypi\" importer, and the python-build-system.",
        scope=[
            ExactPath("gnu/packages/django.scm"),
            ExactPath("gnu/packages/jupyter.scm"),
            pattern(r"^gnu/packages/python(-.+|)\.scm$"),
            ExactPath("gnu/packages/sphinx.scm"),
            ExactPath("gnu/packages/tryton.scm"),
            ExactPath("guix/build/pyproject-build-system.scm"),
            ExactPath("guix/build-system/pyproject.scm"),
            ExactPath("guix/build/python-build-system.scm"),
            ExactPath("guix/build-system/python.scm"),
            ExactPath("guix/import/pypi.scm"),
            ExactPath("guix/scripts/import/pypi.scm"),
            ExactPath("tests/pypi.scm"),
        ],
    )

    b.define_team(
        "r",
        name="R team",
        description="The R language, CRAN and Bioconductor repositories.",
        scope=[
            pattern(r"^gnu/packages/(bioconductor|cran)\.scm$"),
            ExactPath("guix/build/r-build-system.scm"),
            ExactPath("guix/build-system/r.scm"),
            ExactPath("guix/import/cran.scm"),
            ExactPath("guix/scripts/import/cran.scm"),
            ExactPath("tests/cran.scm"),
        ],
    )

    b.define_team(
        "ruby",
        name="Ruby team",
        scope=[
            ExactPath("gnu/packages/ruby.scm"),
            ExactPath("guix/build/ruby-build-system.scm"),
            ExactPath("guix/build-system/ruby.scm"),
            ExactPath("guix/import/gem.scm"),
            ExactPath("guix/scripts/import/gem.scm"),
            ExactPath("tests/gem.scm"),
        ],
    )

    b.define_team(
        "rust",
        name="Rust",
        scope=[
            pattern(r"^gnu/packages/(crates|rust)(-.+|)\.scm$"),
            ExactPath("gnu/packages/sequoia.scm"),
            ExactPath("guix/build/cargo-build-system.scm"),
            ExactPath("guix/build/cargo-utils.scm"),
            ExactPath("guix/build-system/cargo.scm"),
            ExactPath("guix/import/crate.scm"),
            ExactPath("guix/scripts/import/crate.scm"),
            ExactPath("tests/crate.scm"),
        ],
    )

    b.define_team(
        "science",
        name="Science team",
        description="The main science disciplines and fields related packages (e.g. Astronomy, Chemistry, Math, Physics etc.)",
        scope=[
            ExactPath("gnu/packages/algebra.scm"),
            ExactPath("gnu/packages/astronomy.scm"),
            ExactPath("gnu/packages/chemistry.scm"),
            ExactPath("gnu/packages/geo.scm"),
            ExactPath("gnu/packages/maths.scm"),
            ExactPath("gnu/packages/statistics.scm"),
        ],
    )

    b.define_team(
        "translations",
        name="Translations",
        scope=[
            pattern(r"^po/"),
            ExactPath("etc/news.scm"),
        ],
    )


def _define_members(b: RegistryBuilder) -> None:
    b.define_member(Person("Alma Reyes", "alma.reyes@example.org"), "python", "science", "mentors")
    b.define_member(Person("Bastien Laurent", "bastien@example.org"), "core", "bootstrap", "core-packages")
    b.define_member(Person("Chidi Okafor", "chidi.okafor@example.org"), "rust", "mentors")
    b.define_member(Person("Dana Whitfield", "dana@example.org"), "emacs", "lisp")
    b.define_member(Person("Eleni Papadaki", "eleni@example.org"), "haskell", "ocaml")
    b.define_member(Person("Fumiko Sato", "fumiko@example.org"), "translations", "documentation")
    b.define_member(Person("Gustav Lindqvist", "gustav@example.org"), "gnome", "mozilla")
    b.define_member(Person("Hamid Rahimi", "hamid@example.org"), "kernel", "installer", "core")
    b.define_member(Person("Ines Carvalho", "ines@example.org"), "java", "julia")
    b.define_member(Person("Jonas Becker", "jonas.becker@example.org"), "home", "installer")
    b.define_member(Person("Kalinda Moore", "kalinda@example.org"), "r", "science")
    b.define_member(Person("Lior Ben-David", "lior@example.org"), "ruby", "mentors")
    b.define_member(Person("Marta Nowak", "marta@example.org"), "games", "documentation")
    b.define_member(Person("Nguyen, Thi Lan", "lan.nguyen@example.org"), "python", "julia")
    b.define_member(Person("Oskar Halvorsen", "oskar@example.org"), "rust", "core-packages")
    b.define_member(Person("Priya Raman", "priya@example.org"), "gnome", "mentors")
    # Listed under both addresses on purpose: work for core, personal for mozilla.
    b.define_member(Person("Quentin Marchal", "qmarchal@work.example.com"), "core")
    b.define_member(Person("Quentin Marchal", "quentin@example.org"), "mozilla", "bootstrap")


@functools.lru_cache(maxsize=1)
def default_registry() -> Registry:
    """The project's registry, built once per process."""
    builder = RegistryBuilder()
    _define_teams(builder)
    _define_members(builder)
    return builder.build()
