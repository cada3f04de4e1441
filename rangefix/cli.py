"""rangefix CLI - Main entry point and command registration hub."""
# ruff: noqa: E402 - Intentional lazy loading: commands imported after cli group definition

import click

from rangefix import __version__


@click.group()
@click.version_option(version=__version__, prog_name="rangefix")
@click.help_option("-h", "--help")
def cli():
    """rangefix - Rewrite Go counting loops as range-over-int loops

    \b
    QUICK START:
      rangefix fix --dry-run    # See which files would change
      rangefix fix              # Rewrite them in place
      rangefix clean            # Remove leftovers from an interrupted run

    \b
    For detailed options: rangefix <command> --help"""
    pass


from rangefix.commands.clean import clean
from rangefix.commands.fix import fix

cli.add_command(fix)
cli.add_command(clean)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
