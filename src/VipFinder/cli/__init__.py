"""CLI package for VipFinder command orchestration.

Click definitions live in ``ui``, command logic in ``commands`` and lifecycle
handling in ``runner``.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from VipFinder.cli.runner import CommandRunner
from VipFinder.cli.ui import cli


def main() -> None:
    """Run VipFinder CLI.

    Entry point referenced by the console script in pyproject.toml.
    """
    cli()
