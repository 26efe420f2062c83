"""Command-line inspection of component slot registries.

The ``slotkit`` console script loads a component type by import path and
prints its registered slots as a Rich table. With ``--validate`` every slot
content class is resolved, so misconfigured slots fail here instead of on
the first write during rendering.

Examples
--------
>>> # In shell
>>> slotkit inspect tests._components:SlotsComponent --validate
"""

from __future__ import annotations

import argparse
import importlib
import logging
import os
from typing import Sequence

from rich.console import Console
from rich.table import Table

from slotkit.config import DEFAULT_LOG_LEVEL, LOG_DIR, LOG_FILENAME_CLI, LOG_FORMAT
from slotkit.exceptions import ConfigurationError, InvalidContentClassError
from slotkit.slots.slotable import Slotable

logger = logging.getLogger(__name__)


def configure_logging(level: str = DEFAULT_LOG_LEVEL, enable_file: bool = True) -> None:
    r"""Configure logging output for the slotkit CLI.

    Sets up a console handler and, optionally, a file handler under
    ``LOG_DIR``. File handler failures are suppressed so the CLI still runs on
    read-only checkouts.

    Parameters
    ----------
    level : str, optional
        Logging level name, e.g. "DEBUG" or "INFO".
    enable_file : bool, optional
        Whether to also log to ``LOG_DIR / LOG_FILENAME_CLI``.
    """
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if enable_file:
        try:
            LOG_DIR.mkdir(exist_ok=True)
            handlers.insert(
                0, logging.FileHandler(LOG_DIR / LOG_FILENAME_CLI, mode="a")
            )
        except OSError:
            logger.debug("File logging disabled: cannot write to %s", LOG_DIR)
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )


def load_component(target: str) -> type[Slotable]:
    """Import a slotable component type from ``module:Class``.

    Raises
    ------
    ConfigurationError
        If the target is malformed, cannot be imported, or is not slotable.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise ConfigurationError(
            f"Expected 'module:Component', got {target!r}", context={"target": target}
        )
    try:
        obj = importlib.import_module(module_name)
        for part in attr_path.split("."):
            obj = getattr(obj, part)
    except (ImportError, AttributeError) as exc:
        raise ConfigurationError(
            f"Cannot load {target!r}: {exc}", context={"target": target}
        ) from exc
    if not (isinstance(obj, type) and issubclass(obj, Slotable)):
        raise ConfigurationError(
            f"{target!r} is not a Slotable component type", context={"target": target}
        )
    return obj


def build_slot_table(component: type[Slotable]) -> Table:
    """Return a Rich table describing the slots of ``component``."""
    table = Table(
        title=f"Slots of {component.__qualname__}",
        show_header=True,
        header_style="bold blue",
    )
    table.add_column("Slot", style="bold")
    table.add_column("Accessor")
    table.add_column("Setter")
    table.add_column("Collection")
    table.add_column("Content class")
    table.add_column("Declared on")
    for config in component.registered_slots.values():
        table.add_row(
            config.name,
            config.accessor_name,
            config.name if config.collection else "-",
            "yes" if config.collection else "no",
            config.class_name,
            config.owner.__qualname__,
        )
    return table


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    Returns
    -------
    argparse.Namespace
        Parsed arguments with attributes ``command``, ``target``,
        ``validate`` and ``log_level``.
    """
    parser = argparse.ArgumentParser(
        prog="slotkit", description="Inspect component slot registries."
    )
    parser.add_argument(
        "--log-level", type=str, default=os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    inspect_parser = subparsers.add_parser(
        "inspect", help="Print the slots registered on a component type."
    )
    inspect_parser.add_argument("target", help="Component as 'module:Class'.")
    inspect_parser.add_argument(
        "--validate",
        action="store_true",
        help="Resolve every slot content class and fail on invalid ones.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Run the slotkit CLI and return the process exit code."""
    args = parse_arguments(argv)
    enable_file = not os.environ.get("DISABLE_FILE_LOGS")
    configure_logging(args.log_level, enable_file=enable_file)
    console = console or Console()

    try:
        component = load_component(args.target)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        console.print(exc.message, style="red", markup=False)
        return 2

    console.print(build_slot_table(component))
    if args.validate:
        try:
            resolved = component.validate_slots()
        except InvalidContentClassError as exc:
            logger.error("Slot validation failed: %s", exc)
            console.print(exc.message, style="red", markup=False)
            return 1
        console.print(f"[green]{len(resolved)} slot(s) valid[/green]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
