"""Remove temporary files left by interrupted runs."""

from pathlib import Path

import click
from rich.markup import escape

from rangefix.pipeline.ui import console
from rangefix.utils.error_handler import handle_exceptions
from rangefix.utils.temp_manager import TempManager


@click.command("clean")
@click.help_option("-h", "--help")
@click.argument(
    "root",
    required=False,
    default=".",
    type=click.Path(exists=True, path_type=Path),
)
@handle_exceptions
def clean(root):
    """Delete stale <file>.go.new.* files under ROOT.

    rangefix writes each fixed file to a temporary sibling and renames it
    into place. A run killed between the two steps can leave the temporary
    file behind; the original is untouched. This command removes them.
    """
    removed = TempManager.cleanup_stale_temp_files(root)
    for path in removed:
        console.print(f"removed [path]{escape(str(path))}[/path]", highlight=False, soft_wrap=True)
    console.print(f"[success]{len(removed)} stale temporary file(s) removed[/success]")
