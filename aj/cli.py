"""aj - jump to frequently visited directories."""

import click

from .completions import complete_directory
from .config import (
    ConfigError,
    get_data_path,
    get_max_candidates,
    is_case_sensitive,
    set_verbosity,
    use_atomic_write,
)
from .matcher import resolve
from .shell import get_snippet, supported_shells
from .store import StoreError, WeightStore
from .utils import log_info, log_verbose


def _open_store() -> WeightStore:
    try:
        data_path = get_data_path()
    except ConfigError as e:
        raise click.ClickException(str(e))
    log_verbose(f"Store: {data_path}")
    return WeightStore.open(data_path, atomic=use_atomic_write())


def _jump(query: str) -> None:
    try:
        with _open_store() as store:
            target = resolve(
                query,
                store,
                limit=get_max_candidates(),
                case_sensitive=is_case_sensitive(),
            )
    except StoreError as e:
        raise click.ClickException(str(e))
    log_verbose(f"{query!r} -> {target}")
    click.echo(target, nl=False)


def _add(directory: str) -> None:
    try:
        with _open_store() as store:
            weight = store.add(directory)
    except StoreError as e:
        raise click.ClickException(str(e))
    log_verbose(f"Recorded {directory} (weight {weight:.3f})")


def _stat() -> None:
    store = _open_store()
    entries = sorted(store.items(), key=lambda item: -item[1])
    for path, weight in entries:
        click.echo(f"{weight:>10.3f}  {path}")
    click.echo(f"{'-' * 10}")
    click.echo(f"{sum(store.weights()):>10.3f}  total ({len(store)} directories)")


@click.command(context_settings={"help_option_names": ["--help"]})
@click.argument("directory", required=False, shell_complete=complete_directory)
@click.option("--add", "add_dir", metavar="DIRECTORY", help="Record a visit to DIRECTORY.")
@click.option("--stat", is_flag=True, help="Show stored directories and weights.")
@click.option(
    "--init",
    "init_shell",
    type=click.Choice(supported_shells()),
    help="Print shell integration code.",
)
@click.option(
    "--verbosity",
    type=click.IntRange(0, 3),
    help="Save log verbosity (0-3) to the config file.",
)
def main(directory: str | None, add_dir: str | None, stat: bool,
         init_shell: str | None, verbosity: int | None):
    """Automatically jump to directory passed as an argument.

    DIRECTORY is a fuzzy query matched against previously visited
    directories. The best match is printed, or "." when nothing matches.

    Examples:
        aj proj              # print best match for "proj"
        aj --add "$PWD"      # record a visit
        eval "$(aj --init bash)"
    """
    actions = [
        directory is not None,
        add_dir is not None,
        stat,
        init_shell is not None,
        verbosity is not None,
    ]
    if sum(actions) == 0:
        raise click.UsageError("Missing DIRECTORY or --add DIRECTORY.")
    if sum(actions) > 1:
        raise click.UsageError("Use only one of DIRECTORY, --add, --stat, --init, --verbosity.")

    if directory is not None:
        _jump(directory)
    elif add_dir is not None:
        _add(add_dir)
    elif stat:
        _stat()
    elif init_shell is not None:
        click.echo(get_snippet(init_shell), nl=False)
    else:
        set_verbosity(verbosity)
        log_info(f"Verbosity set to {verbosity}")


if __name__ == "__main__":
    main()
