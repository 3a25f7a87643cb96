"""``sophone`` command-line front end."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import NoReturn

from pydantic import TypeAdapter, ValidationError

from sophone import api
from sophone.config import CLIConfig
from sophone.core.validator import classify
from sophone.models.carrier import OperatorInfo, WalletInfo
from sophone.models.result import ValidationSuccess

logger = logging.getLogger("sophone.cli")

USAGE = """\
sophone - Somali phone utilities

Usage:
  sophone validate <number>           Validate a phone number
  sophone format <number>             Format to local (0XXX XXX XXX)
  sophone e164 <number>               Format to E.164 (+252XXXXXXXXX)
  sophone international <number>      Format to international (+252 XX XXX XXXX)
  sophone operator <number>           Get operator name
  sophone wallet <number>             Get mobile-money wallet name
  sophone info <number>               Get detailed operator information
  sophone walletinfo <number>         Get detailed wallet information
  sophone operators                   List all operators
  sophone wallets                     List all wallets
  sophone batch <file>                Process numbers from file (one per line)
  sophone help                        Show this help

Options:
  --json                              Print JSON output
  -v, --verbose                       Enable debug logging

Examples:
  sophone validate "+252 61 123 4567"
  sophone format "0611234567"
  sophone wallet "0631234567"
  sophone batch numbers.txt"""

_NO_ARGUMENT = frozenset({"operators", "wallets"})

_operator_list = TypeAdapter(list[OperatorInfo])
_wallet_list = TypeAdapter(list[WalletInfo])


def _out(text: str) -> None:
    print(text)


def _err(text: str) -> None:
    print(text, file=sys.stderr)


def _fail_with_reason(number: str) -> int:
    issue = classify(number)
    if issue is not None:
        _err(f"✗ {issue.message}")
    return 1


def _cmd_validate(number: str, config: CLIConfig) -> int:
    result = api.validate(number)
    if config.json_output:
        _out(result.model_dump_json(indent=2))
        return 0 if result.ok else 1
    if isinstance(result, ValidationSuccess):
        _out("✓ valid")
        return 0
    _out("✗ invalid")
    _err(f"  {result.error.message}")
    return 1


def _simple(
    func: Callable[[str], str | None], missing: str = "unknown"
) -> Callable[[str, CLIConfig], int]:
    """Print the result of a safe entry point, or the validation reason."""

    def command(number: str, config: CLIConfig) -> int:
        value = func(number)
        if value is None:
            if api.is_valid_somali_mobile(number):
                _out(missing)
                return 0
            return _fail_with_reason(number)
        _out(value)
        return 0

    return command


def _cmd_info(number: str, config: CLIConfig) -> int:
    if not api.is_valid_somali_mobile(number):
        return _fail_with_reason(number)
    info = api.get_operator_info_safe(number)
    if info is None:
        _out("No operator information available")
        return 0
    if config.json_output:
        _out(info.model_dump_json(indent=2))
        return 0
    _out(f"Operator: {info.name}")
    _out(f"Prefixes: {', '.join(info.prefixes)}")
    _out(f"Type: {info.type}")
    if info.website:
        _out(f"Website: {info.website}")
    if info.wallet:
        _out(f"Wallet: {info.wallet}")
    return 0


def _cmd_walletinfo(number: str, config: CLIConfig) -> int:
    if not api.is_valid_somali_mobile(number):
        return _fail_with_reason(number)
    info = api.get_wallet_info_safe(number)
    if info is None:
        _out("No wallet information available")
        return 0
    if config.json_output:
        _out(info.model_dump_json(indent=2))
        return 0
    _out(f"Wallet: {info.full_name} ({info.name})")
    _out(f"Operator: {info.operating_operator}")
    _out(f"Description: {info.description}")
    if info.features:
        _out(f"Features: {', '.join(info.features)}")
    if info.ussd_code:
        _out(f"USSD: {info.ussd_code}")
    if info.website:
        _out(f"Website: {info.website}")
    return 0


def _cmd_operators(_arg: str | None, config: CLIConfig) -> int:
    operators = api.get_all_operators()
    if config.json_output:
        _out(_operator_list.dump_json(operators, indent=2).decode())
        return 0
    _out("Available Operators:")
    for op in operators:
        _out(f"  {op.name} ({', '.join(op.prefixes)})")
        if op.website:
            _out(f"    Website: {op.website}")
    return 0


def _cmd_wallets(_arg: str | None, config: CLIConfig) -> int:
    wallets = api.get_all_wallets()
    if config.json_output:
        _out(_wallet_list.dump_json(wallets, indent=2).decode())
        return 0
    _out("Available Wallets:")
    for wallet in wallets:
        _out(f"  {wallet.full_name} ({wallet.operating_operator})")
        if wallet.ussd_code:
            _out(f"    USSD: {wallet.ussd_code}")
    return 0


def _read_numbers(path: Path) -> list[str]:
    return [line.strip() for line in path.read_text(encoding="utf-8").splitlines() if line.strip()]


def _cmd_batch(filename: str, config: CLIConfig) -> int:
    path = Path(filename)
    if not path.is_file():
        _err(f"✗ File not found: {filename}")
        return 1
    try:
        numbers = _read_numbers(path)
    except (OSError, UnicodeDecodeError) as exc:
        _err(f"✗ Cannot read file: {filename} ({exc})")
        return 1
    logger.debug("Read %d numbers from %s", len(numbers), path)
    results = api.validate_batch(numbers)

    if config.json_output:
        _out("[" + ",".join(r.model_dump_json() for r in results) + "]")
        return 0

    _out(f"Processing {len(numbers)} numbers from {filename}:\n")
    for result in results:
        if result.ok and result.value is not None:
            operator = result.value.operator or "unknown"
            _out(f"✓ {result.input} → {result.value.e164} ({operator})")
        elif result.error is not None:
            _out(f"✗ {result.input} → {result.error.message}")
    valid = sum(1 for r in results if r.ok)
    _out(f"\nSummary: {valid} valid, {len(results) - valid} invalid")
    return 0


_COMMANDS: dict[str, Callable[..., int]] = {
    "validate": _cmd_validate,
    "format": _simple(api.format_local_safe),
    "e164": _simple(api.normalize_e164_safe),
    "international": _simple(api.format_international_safe),
    "operator": _simple(api.get_operator_safe),
    "wallet": _simple(api.get_wallet_safe, missing="No wallet available"),
    "info": _cmd_info,
    "walletinfo": _cmd_walletinfo,
    "operators": _cmd_operators,
    "wallets": _cmd_wallets,
    "batch": _cmd_batch,
}


class _UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    """Report bad usage to ``main`` instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise _UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="sophone", add_help=False)
    parser.add_argument("command", nargs="?", default="help")
    parser.add_argument("argument", nargs="?", default=None)
    parser.add_argument("--json", dest="json_output", action="store_true", default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("-h", "--help", action="store_true")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    try:
        args, extra = _build_parser().parse_known_args(argv)
    except _UsageError as exc:
        _err(f"Error: {exc}")
        _err(USAGE)
        return 1
    if extra:
        logger.debug("Ignoring extra arguments: %s", extra)
    try:
        config = CLIConfig.from_env(
            json_output=args.json_output,
            log_level="DEBUG" if args.verbose else None,
        )
    except ValidationError as exc:
        _err(f"✗ Invalid configuration: {exc.errors()[0]['msg']}")
        return 1
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    if args.help or args.command == "help":
        _out(USAGE)
        return 0

    command = _COMMANDS.get(args.command)
    if command is None:
        _err(f"✗ Unknown command '{args.command}'\n")
        _err(USAGE)
        return 1

    if args.argument is None and args.command not in _NO_ARGUMENT:
        _err("Error: missing argument.")
        _err(USAGE)
        return 1

    return command(args.argument, config)


if __name__ == "__main__":
    sys.exit(main())
