"""Minimal launcher for the study site build.

Delegates to ``studysite.program_build_site``; kept at the project root so
the site can be built from a checkout without installing the package.

Usage:
    python build_site.py [--output DIR] [--no-strict] [--check-assets]

"""

from __future__ import annotations


def entry_point(argv: list[str] | None = None) -> int:
    """Run the site build and return its exit code.

    The import is performed inside the function to avoid importing the
    whole pipeline at module import time.
    """
    from studysite.program_build_site import main

    return main(argv)


if __name__ == "__main__":
    raise SystemExit(entry_point())
