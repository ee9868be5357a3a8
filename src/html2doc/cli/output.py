"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/html2doc/cli/output.py
import argparse
import sys
from typing import TextIO

from html2doc.exceptions import DependencyError


def check_rich_available() -> bool:
    """Check if Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def should_use_rich_output(
    args: argparse.Namespace, raise_on_missing: bool = False, stream: TextIO | None = None
) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    raise_on_missing : bool, default False
        Raise DependencyError if rich is not installed
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    Returns
    -------
    bool
        True if Rich output should be used

    Notes
    -----
    Rich output is used when:
    - The --rich flag is set
    - AND either --force-rich is set OR stdout is a TTY
    - AND Rich library is available

    """
    if not args.rich:
        return False

    if not check_rich_available():
        if raise_on_missing:
            raise DependencyError(
                converter_name="rich-output",
                missing_packages=[("rich", "")],
                message="Rich output requires the optional 'rich' dependency. Install with: pip install html2doc[rich]",
            )
        return False

    if getattr(args, "force_rich", False):
        return True

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def print_rich_outline(outline: str, indent: str, title: str = "html2doc") -> None:
    """Print an outline as a rich tree, nesting lines by their indentation.

    Parameters
    ----------
    outline : str
        Output of ``OutlineRenderer.render_to_string``
    indent : str
        Indentation unit the outline was rendered with
    title : str, default "html2doc"
        Label of the tree root

    """
    from rich.console import Console
    from rich.markup import escape
    from rich.tree import Tree

    root = Tree(f"[bold]{escape(title)}[/bold]")
    stack: list[Tree] = [root]
    for line in outline.splitlines():
        stripped = line.lstrip(indent[:1] or " ")
        depth = (len(line) - len(stripped)) // max(len(indent), 1)
        del stack[depth + 1 :]
        label = escape(stripped)
        if stripped.startswith('"'):
            label = f"[green]{label}[/green]"
        elif stripped.startswith("Paragraph"):
            label = f"[cyan]{label}[/cyan]"
        stack.append(stack[-1].add(label))

    Console().print(root)
