"""
Command-line interface for man_files.

Lists the manual page files under <home>/../usr/share/man and, with
--fishpath, <home>/../usr/share/fish/man.
"""

import click

from man_files import __version__
from man_files.config import HomeDirectoryError, get_home_dir, get_man_roots
from man_files.discovery import count_man_files, iter_man_files
from man_files.output import OutputMode, format_file, format_summary, select_mode

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.command(
    context_settings=CONTEXT_SETTINGS,
    epilog="The base man directory (<home>/../usr/share/man) is always scanned.",
)
@click.option(
    "-c",
    "--count",
    is_flag=True,
    default=False,
    help="Print the number of files in each directory instead of listing them",
)
@click.option(
    "-f",
    "--fishpath",
    is_flag=True,
    default=False,
    help="Also scan the fish man directory (<home>/../usr/share/fish/man)",
)
@click.option(
    "-n",
    "--names",
    is_flag=True,
    default=False,
    help="Print file names instead of full paths",
)
@click.version_option(version=__version__, prog_name="man_files")
def main(count: bool, fishpath: bool, names: bool) -> None:
    """
    List manual page files.

    Prints every file found one level inside the subdirectories of each
    man directory. Listing order follows the filesystem and is not sorted.
    --count takes precedence over --names.

    \b
    Examples:
        - 'man_files': Print full paths of all base man page files
        - 'man_files -n': Print file names only
        - 'man_files -c -f': Print file counts for both directories
    """
    mode = select_mode(count=count, names=names)

    try:
        home = get_home_dir()
    except HomeDirectoryError as e:
        click.secho(
            f"Error: Could not determine home directory: {e}", fg="red", err=True
        )
        raise click.Abort()

    roots = get_man_roots(home, fishpath=fishpath)

    if mode is OutputMode.COUNT:
        totals = [(root, count_man_files(root)) for root in roots]
        for root, total in totals:
            click.echo(format_summary(root, total))
        return

    for root in roots:
        for man_file in iter_man_files(root):
            click.echo(format_file(man_file, mode))
