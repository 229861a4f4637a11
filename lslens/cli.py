"""
Listing Lens (lslens) - Directory Listing Ordering Tool
Command Line Interface
"""
import click
import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict, List, Optional, TextIO

from rich.console import Console
from rich.table import Table

from lslens.config.config_manager import ConfigManager, config_command
from lslens.core.comparators import resolve_sort_mode, sort_records
from lslens.core.records import FileRecord, SortMode
from lslens.utils.exceptions import InvalidRecordError, LsLensException
from lslens.utils.owner_cache import OwnerCache
from lslens.utils.size_formatter import SizeFormatter

LOG_FORMAT = '%(asctime)s - %(levelname)s: %(message)s'


def _merge_config_with_kwargs(saved_config: dict, kwargs: dict) -> dict:
    """Merge saved config with CLI kwargs, prioritizing non-None CLI values"""
    final_config = saved_config.copy()

    for key, value in kwargs.items():
        if value is not None and not (isinstance(value, bool) and value is False):
            final_config[key] = value

    return final_config


def _setup_logging(log_path: Optional[str]) -> None:
    if log_path:
        logging.basicConfig(filename=log_path, level=logging.INFO, format=LOG_FORMAT, force=True)
    else:
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)


def load_records(stream: TextIO) -> List[FileRecord]:
    """
    Read a JSON array of record objects

    Raises:
        json.JSONDecodeError: if the input is not JSON
        InvalidRecordError: if the input is not an array or a record is malformed
    """
    data = json.load(stream)
    if not isinstance(data, list):
        raise InvalidRecordError("input must be a JSON array of records")
    return [FileRecord.from_dict(item, index) for index, item in enumerate(data)]


def _format_time(mod_time: Any) -> str:
    if isinstance(mod_time, datetime):
        return mod_time.strftime('%Y-%m-%d %H:%M:%S')
    try:
        return datetime.fromtimestamp(mod_time).strftime('%Y-%m-%d %H:%M:%S')
    except (OverflowError, OSError, TypeError, ValueError):
        return str(mod_time)


def _owner_columns(record: FileRecord, owners: Optional[OwnerCache]) -> List[str]:
    if owners is None:
        return []
    user = owners.resolve_user(record.uid) if record.uid is not None else "-"
    group = owners.resolve_group(record.gid) if record.gid is not None else "-"
    return [user, group]


def _echo_text(records: List[FileRecord], human_readable: bool, owners: Optional[OwnerCache]) -> None:
    for record in records:
        size = SizeFormatter.format_size(record.size, human_readable)
        prefix = " ".join(_owner_columns(record, owners))
        line = f"{size:>8} {record.full_name}{record.indicator}"
        click.echo(f"{prefix} {line}" if prefix else line)


def _print_table(records: List[FileRecord], human_readable: bool, owners: Optional[OwnerCache]) -> None:
    table = Table(show_header=True)
    if owners is not None:
        table.add_column("Owner", style="bold")
        table.add_column("Group", style="bold")
    table.add_column("Size", justify="right", style="light_green")
    table.add_column("Modified", style="dim cyan")
    table.add_column("Name", style="cyan")

    for record in records:
        table.add_row(
            *_owner_columns(record, owners),
            SizeFormatter.format_size(record.size, human_readable),
            _format_time(record.mod_time),
            f"{record.full_name}{record.indicator}",
        )

    Console().print(table)


def _echo_json(records: List[FileRecord], human_readable: bool, owners: Optional[OwnerCache]) -> None:
    results = []
    for record in records:
        entry: Dict[str, Any] = record.to_dict()
        entry["size_text"] = SizeFormatter.format_size(record.size, human_readable)
        if owners is not None:
            entry["owner"], entry["group"] = _owner_columns(record, owners)
        results.append(entry)
    click.echo(json.dumps(results, indent=2))


@click.group(context_settings=dict(help_option_names=['-h', '--help']))
def cli():
    """lslens - Directory Listing Ordering Tool"""
    pass


@cli.command(name='sort')
@click.argument('source', type=click.File('r'), default='-', required=False)
@click.option('-A', '--alpha', is_flag=True, help='Sort alphabetically by name and extension')
@click.option('-S', '--size', is_flag=True, help='Sort by size, largest first')
@click.option('-t', '--time', is_flag=True, help='Sort by modification time, newest first')
@click.option('-X', '--extension', is_flag=True, help='Sort alphabetically by extension')
@click.option('-v', '--version-sort', is_flag=True, help='Natural sort of (version) numbers within names')
@click.option('--sort-by', type=click.Choice([mode.value for mode in SortMode]),
              help='Sort order when no sort flag is given')
@click.option('-H', '--human-readable', is_flag=True, help='Show sizes as 1.5K, 3.0M, ...')
@click.option('--output-format', type=click.Choice(list(ConfigManager.OUTPUT_FORMATS)))
@click.option('--owners', 'show_owners', is_flag=True, help='Show owner and group names')
@click.option('--log', 'log_path', type=click.Path(), help='Log file path')
def sort_command(source, alpha, size, time, extension, version_sort, **kwargs):
    """Order the JSON records in SOURCE (default: stdin) and print them."""
    saved_config = ConfigManager.load_config()
    final_config = _merge_config_with_kwargs(saved_config, kwargs)
    _setup_logging(final_config.get('log_path'))

    mode = resolve_sort_mode(
        alpha=alpha,
        size=size,
        time=time,
        extension=extension,
        natural=version_sort,
    )
    if mode is SortMode.DEFAULT:
        mode = ConfigManager.sort_mode(final_config)

    try:
        records = load_records(source)
    except (json.JSONDecodeError, LsLensException) as e:
        logging.error(f"Could not read records: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    logging.info(f"Sorting {len(records)} records by {mode.value}")
    ordered = sort_records(records, mode)

    human_readable = bool(final_config.get('human_readable'))
    owners = OwnerCache() if final_config.get('show_owners') else None
    output_format = final_config.get('output_format', 'text')

    if output_format == 'table':
        _print_table(ordered, human_readable, owners)
    elif output_format == 'json':
        _echo_json(ordered, human_readable, owners)
    else:
        _echo_text(ordered, human_readable, owners)


@cli.command()
@click.argument('action', type=click.Choice(['view', 'reset', 'set']), required=False)
@click.argument('key', required=False)
@click.argument('value', required=False)
def config(action, key=None, value=None):
    """Manage lslens configuration."""
    if not action:
        click.echo("Usage: lslens config [view|reset|set] [key] [value]")
        return
    config_command(action, key, value)


def main():
    """Entry point for the CLI."""
    cli(prog_name="lslens")


if __name__ == '__main__':
    main()
