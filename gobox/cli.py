"""The gobox command line: fetch, track and reuse Go packages."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path

import click

from . import messages as msg
from .models import Package
from .storage import PackageStore
from .utils import file_exists, sort_packages


def _say(text: str, color: str | None = None, nl: bool = True) -> None:
    click.secho(text, fg=color, err=True, nl=nl)


def _store() -> PackageStore:
    return click.get_current_context().ensure_object(PackageStore)


def _run_go(*args: str) -> bool:
    try:
        result = subprocess.run(
            ["go", *args],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        return False
    return result.returncode == 0


def _install(store: PackageStore, package_name: str) -> bool:
    """Run 'go get' for a package and record it; report progress as it goes."""
    click.secho(msg.STATUS_INSTALLING_PACKAGE % package_name, fg="blue", nl=False)
    if not _run_go("get", package_name):
        click.secho(msg.ERR_PACKAGE_INSTALL_FAILED % package_name, fg="red", nl=False)
        return False
    try:
        store.save_package(package_name)
    except (OSError, ValueError):
        _say(msg.ERR_PACKAGE_SAVE_FAILED % package_name, "red")
        return False
    click.secho(msg.SUCCESS_PACKAGE_INSTALLED % package_name, fg="green", nl=False)
    return True


def _load_sorted(store: PackageStore, ascending: bool) -> list[Package]:
    return sort_packages(store.load_packages(), "last_used", ascending)


def _choose_one(message: str, options: list[str]) -> str:
    for number, option in enumerate(options, 1):
        click.echo(f"  {number}) {option}")
    choice = click.prompt(message, type=click.IntRange(1, len(options)))
    return options[choice - 1]


def _choose_many(message: str, options: list[str]) -> list[str]:
    def parse(raw: str) -> list[int]:
        picked = set()
        for token in raw.replace(",", " ").split():
            if not token.isdigit() or not 1 <= int(token) <= len(options):
                raise click.BadParameter(f"{token!r} is not one of the listed numbers")
            picked.add(int(token))
        return sorted(picked)

    for number, option in enumerate(options, 1):
        click.echo(f"  {number}) {option}")
    chosen = click.prompt(
        f"{message} (numbers separated by commas, blank for none)",
        default="",
        show_default=False,
        value_proc=parse,
    )
    return [options[number - 1] for number in chosen]


@click.group(
    help="Gobox helps you fetch, track, and reuse Go packages easily.\n"
    "It provides commands like 'get', 'list', 'remove', and 'init' to "
    "streamline your Go project workflow.",
    short_help="Manage and reuse Go packages easily",
)
def cli() -> None:
    """Manage and reuse Go packages easily."""
    # Make sure every subcommand shares one package store.
    click.get_current_context().ensure_object(PackageStore)


@cli.command(
    "get",
    short_help="Download and save a Go package",
    help="Fetches a Go package using 'go get' and saves it in the gobox "
    "storage for future use.",
)
@click.argument("package_name")
def get(package_name: str) -> None:
    """Fetch a package and record it."""
    store = _store()
    base = Path.cwd().name

    if not file_exists("go.mod"):
        try:
            create = click.confirm(msg.ERR_NO_GO_MOD_FOUND, default=True)
        except click.Abort:
            _say(msg.ERR_PROMPT_FAILED, "red")
            return
        if not create:
            _say(msg.ERR_OPERATION_ABORTED, "yellow")
            return
        if not _run_go("mod", "init", base):
            _say(msg.ERR_GO_MOD_INIT_FAILED)
            return
        _say(msg.SUCCESS_GO_MOD_CREATED, "green")

    _install(store, package_name)


@cli.command(
    "init",
    short_help="Initialize a new Go project",
    help="Sets up a new Go project with a go.mod file and optionally installs "
    "selected packages from the gobox storage.",
)
@click.argument("project_name", required=False)
def init_project(project_name: str | None) -> None:
    """Create a Go module and install chosen saved packages into it."""
    store = _store()
    _say(msg.STATUS_PROJECT_INITIALIZING, "blue")

    cwd = Path.cwd()
    project_path = cwd / project_name if project_name else cwd
    if project_path.is_dir() and any(project_path.iterdir()):
        _say(msg.ERR_PROJECT_ALREADY_EXISTS, "red")
        return

    module_name = project_path.name
    try:
        module_name = click.prompt(msg.PROMPT_MODULE_NAME, default=module_name)
    except click.Abort:
        pass

    try:
        packages = _load_sorted(store, ascending=False)
    except (OSError, ValueError):
        packages = []

    try:
        project_path.mkdir(mode=0o755, parents=True, exist_ok=True)
        os.chdir(project_path)
    except OSError:
        pass

    if not _run_go("mod", "init", module_name):
        _say(msg.ERR_GO_MOD_INIT_FAILED, "red")
        return
    _say(msg.SUCCESS_GO_MOD_CREATED, "green")

    if not packages:
        _say(msg.STATUS_NO_PACKAGES_FOUND, "yellow")
    else:
        try:
            selected = _choose_many(
                msg.PROMPT_SELECT_PACKAGES_TO_INSTALL, [pkg.name for pkg in packages]
            )
        except click.Abort:
            selected = []
        for name in selected:
            if not _install(store, name):
                return

    _say(msg.SUCCESS_PROJECT_INITIALIZED % module_name, "green")


@cli.command(
    "list",
    short_help="List all installed packages",
    help="Lists all Go packages that have been installed and saved using gobox, "
    "along with usage statistics.",
)
def list_packages() -> None:
    """Show saved packages, most recently used first."""
    try:
        packages = _load_sorted(_store(), ascending=False)
    except (OSError, ValueError):
        _say(msg.ERR_LOADING_PACKAGES_FAILED, "red")
        return

    if not packages:
        _say(msg.STATUS_NO_PACKAGES_FOUND, "yellow")
        return

    _say("Installed packages:", "bright_blue")
    for number, pkg in enumerate(packages, 1):
        _say(
            f"{click.style('[', fg='bright_cyan')}{number}{click.style(']', fg='bright_cyan')} "
            f"{click.style(pkg.name, fg='green')} "
            f"{click.style('last used:', fg='magenta')} "
            f"{click.style(pkg.last_used.strftime('%Y-%m-%d %H:%M:%S'), fg='bright_magenta')}"
        )
        _say(
            f"     ↳ {click.style('Used', fg='blue')} "
            f"{click.style(f'{pkg.usage_count} times', fg='yellow')}"
        )


@cli.command(
    "remove",
    short_help="Remove a saved package",
    help="Removes a Go package from the gobox storage. The actual package is not "
    "uninstalled from your current project.",
)
def remove() -> None:
    """Pick a saved package and forget it."""
    store = _store()
    try:
        packages = _load_sorted(store, ascending=True)
    except (OSError, ValueError):
        _say(msg.ERR_LOADING_PACKAGES_FAILED, "red")
        return

    if not packages:
        _say(msg.STATUS_NO_PACKAGES_FOUND, "yellow")
        return

    try:
        selected = _choose_one(msg.PROMPT_REMOVE_PACKAGE, [pkg.name for pkg in packages])
        confirmed = click.confirm(msg.PROMPT_CONFIRM_PACKAGE_REMOVAL, default=False)
    except click.Abort:
        _say(msg.ERR_PROMPT_FAILED, "red")
        return

    if not confirmed:
        _say(msg.STATUS_PACKAGE_REMOVAL_CANCELLED, "yellow")
        return

    try:
        store.remove_package(selected)
    except (OSError, ValueError):
        _say(msg.ERR_REMOVE_PACKAGE_FAILED % selected, "red", nl=False)
        return

    _say(msg.SUCCESS_PACKAGE_REMOVED % selected, "green")


def main(argv: list[str] | None = None) -> None:
    """Prepare storage, then run the command line."""
    try:
        store = PackageStore()
        store.init()
    except (OSError, ValueError) as exc:
        print("Error:", exc)
        raise SystemExit(1) from exc
    cli.main(args=argv, prog_name="gobox", obj=store)