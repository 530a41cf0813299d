# SPDX-License-Identifier: BSD-2-Clause

import argparse
import inspect
import sys
import traceback
import logging

from pathlib import Path
from pprint import pformat
from typing import Dict, Tuple

from . import (
    PinMuxError,
    AssignResult,
    ConfigurationStore,
    DirectoryDelivery,
    export_configuration,
    load_chip_definition,
    sort_physical_pins,
    _parse_config,
)
from .config import resolve_path

logger = logging.getLogger(__name__)


class UnexpectedError(PinMuxError):
    pass

log_level = logging.WARNING


def load_store(config) -> Tuple[ConfigurationStore, Dict[str, AssignResult]]:
    """
    Load the configured chip and apply the assignments from pinmux.toml.

    Returns:
        The populated store and the assignments it rejected
    """
    store = ConfigurationStore()
    store.load_chip(load_chip_definition(resolve_path(config.pinmux.chip)))
    rejected = {}
    for pin_name, func in config.pinmux.pins.items():
        result = store.set_pin_function(pin_name, func)
        if not result:
            logger.warning(f"Ignoring [pinmux.pins] {pin_name} = \"{func}\": {result}")
            rejected[pin_name] = result
    return store, rejected


class PinsCommand:
    """List the physical pins of the chip and their configured functions."""

    def __init__(self, config):
        self.config = config

    def build_cli_parser(self, parser):
        pass

    def run_cli(self, args):
        store, _ = load_store(self.config)
        for pin in sort_physical_pins(store.physical_pins):
            func = store.get_pin_configuration(pin.name) or '-'
            print(f"{pin.number:>6}  {pin.name:<12} {store.get_pin_type(pin.name):<8} {func}")


class FunctionsCommand:
    """Show the functions a pin supports."""

    def __init__(self, config):
        self.config = config

    def build_cli_parser(self, parser):
        parser.add_argument("pin", help="Pin name, e.g. PA9")

    def run_cli(self, args):
        store, _ = load_store(self.config)
        functions = store.get_pin_functions(args.pin)
        if not functions:
            raise PinMuxError(
                f"Pin `{args.pin}` has no selectable functions on {store.current_chip.meta.name}"
            )
        selected = store.get_pin_configuration(args.pin)
        for func in functions:
            print(f"{'*' if func == selected else ' '} {func}")


class ExportCommand:
    """Export the pin configuration as a CSV report."""

    def __init__(self, config):
        self.config = config

    def build_cli_parser(self, parser):
        parser.add_argument(
            "--output-dir", default=None,
            help="directory to write the report to (default: [pinmux.export] directory)")
        parser.add_argument(
            "--strict", action="store_true",
            help="fail if any assignment in pinmux.toml is rejected")

    def run_cli(self, args):
        store, rejected = load_store(self.config)
        if args.strict and rejected:
            details = ", ".join(f"{k} ({v})" for k, v in rejected.items())
            raise PinMuxError(f"Rejected assignments in pinmux.toml: {details}")

        export = self.config.pinmux.export
        directory = Path(args.output_dir) if args.output_dir else resolve_path(export.directory)
        delivery = DirectoryDelivery(directory)
        report = export_configuration(store.current_chip, store.assignments,
                                      delivery=delivery, delimiter=export.delimiter)
        print(f"Exported pin configuration to {directory / report.filename}")


def run(argv=sys.argv[1:]):
    config = _parse_config()

    commands = {
        "pins": PinsCommand(config),
        "functions": FunctionsCommand(config),
        "export": ExportCommand(config),
    }

    parser = argparse.ArgumentParser(
        prog="pinmux",
        description="Configure and export microcontroller pin multiplexing")

    parser.add_argument(
        "--verbose", "-v",
        dest="log_level",
        action="count",
        default=0,
        help="increase verbosity of messages; can be supplied multiple times to increase verbosity"
    )
    parser.add_argument(
        "--log-file", help=argparse.SUPPRESS,
        default=None, action="store"
    )

    command_argument = parser.add_subparsers(dest="command", required=True)
    for command_name, command in commands.items():
        command_subparser = command_argument.add_parser(command_name, help=inspect.getdoc(command))
        command.build_cli_parser(command_subparser)

    args = parser.parse_args(argv)
    global log_level
    log_level = max(logging.WARNING - args.log_level * 10, 0)
    logging.getLogger().setLevel(logging.NOTSET)

    # Add stdout handler, with level as set
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(log_level)
    formatter = logging.Formatter('%(name)-13s: %(levelname)-8s %(message)s')
    console.setFormatter(formatter)
    logging.getLogger().addHandler(console)

    #Log to file with DEBUG level
    if args.log_file:
        filename = Path(args.log_file).absolute()
        print(f"> Logging to {str(filename)}")
        fh = logging.FileHandler(filename)
        fh.setLevel(logging.DEBUG)
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        fh.setFormatter(formatter)
        logging.getLogger().addHandler(fh)

    try:
        try:
            commands[args.command].run_cli(args)
        except PinMuxError:
            raise
        except Exception as e:
            # convert to PinMuxError so all handling is same.
            raise UnexpectedError(
                f"Unexpected error, please report it:\n"
                f"args =\n{pformat(args)}\n"
                f"traceback =\n{''.join(traceback.format_exception(e))}"
            ) from e
    except PinMuxError as e:
        print(f"Error while executing `{args.command}`: {e}")
        sys.exit(1)
