from __future__ import annotations

import logging
from typing import List, NoReturn, Tuple

import typer
from rich.console import Console
from rich.markup import escape

from ..config import load_config
from ..core.logging_config import setup_logging
from ..detection.bic import Bic, find_bics
from ..detection.creditor import NO_BUSINESS_CODE, CreditorIdentifier, find_creditor_ids
from ..detection.iban import Iban, find_ibans
from ..errors import BankIdentifierError
from .version import package_version

cli = typer.Typer(add_completion=False, help="bankcheck: IBAN, BIC and creditor identifier validation")
console = Console(highlight=False)
log = logging.getLogger(__name__)


@cli.callback()
def _setup() -> None:
    cfg = load_config()
    setup_logging(cfg.log_level, cfg.log_json)
    log.debug("config: %s", cfg)


def _fail(e: BankIdentifierError) -> NoReturn:
    console.print(f"[red]INVALID[/red] {escape(str(e))}", soft_wrap=True)
    raise typer.Exit(code=1)


def _show(rows: List[Tuple[str, str]]) -> None:
    width = max(len(k) for k, _ in rows)
    for k, v in rows:
        console.print(f"[bold]{k.ljust(width)}[/bold]  {escape(v)}", soft_wrap=True)


def _show_iban(iban: Iban) -> None:
    printable = load_config().printable
    _show([
        ("iban", iban.to_printable_string() if printable else str(iban)),
        ("country", f"{iban.country_code} ({iban.country.label})"),
        ("check digits", iban.check_digits),
        ("bban", iban.bban),
    ])


def _show_creditor_id(ci: CreditorIdentifier) -> None:
    _show([
        ("creditor id", str(ci)),
        ("country", f"{ci.country_code} ({ci.country.label})"),
        ("check digits", ci.check_digits),
        ("business code", ci.business_code),
        ("national id", ci.national_identifier),
    ])


@cli.command("version", help="Print the tool version.")
def version() -> None:
    console.print(f"bankcheck {package_version()}")


@cli.command("iban", help="Validate an IBAN (compact or printable form) and show its parts.")
def iban(value: List[str] = typer.Argument(..., help="IBAN; groups may be given as separate arguments")) -> None:
    try:
        parsed = Iban(" ".join(value))
    except BankIdentifierError as e:
        _fail(e)
    _show_iban(parsed)


@cli.command("iban-build", help="Compute the check digits of an IBAN from its country and BBAN.")
def iban_build(
    country: str = typer.Option(..., "--country", "-c", help="ISO 3166-1 alpha-2 code"),
    bban: str = typer.Option(..., "--bban", "-b", help="Basic Bank Account Number"),
) -> None:
    try:
        built = Iban.from_parts(country, bban)
    except BankIdentifierError as e:
        _fail(e)
    _show_iban(built)


@cli.command("bic", help="Validate a BIC8 or BIC11 and show its parts.")
def bic(
    value: str = typer.Argument(..., help="BIC8 or BIC11"),
    test: bool = typer.Option(False, "--test", help="Show the matching test BIC instead"),
) -> None:
    try:
        parsed = Bic(value)
    except BankIdentifierError as e:
        _fail(e)
    if test:
        parsed = parsed.as_test_bic()
    _show([
        ("bic", str(parsed)),
        ("institution", parsed.institution_code),
        ("country", f"{parsed.country_code} ({parsed.country.label})"),
        ("location", parsed.location_code),
        ("branch", parsed.branch_code),
        ("test bic", "yes" if parsed.is_test_bic else "no"),
    ])


@cli.command("ci", help="Validate a SEPA creditor identifier and show its parts.")
def ci(value: List[str] = typer.Argument(..., help="Creditor identifier")) -> None:
    try:
        parsed = CreditorIdentifier(" ".join(value))
    except BankIdentifierError as e:
        _fail(e)
    _show_creditor_id(parsed)


@cli.command("ci-build", help="Compute the check digits of a creditor identifier.")
def ci_build(
    country: str = typer.Option(..., "--country", "-c", help="ISO 3166-1 alpha-2 code"),
    national_id: str = typer.Option(..., "--national-id", "-n", help="National identifier of the creditor"),
    business_code: str = typer.Option(NO_BUSINESS_CODE, "--business-code", "-b", help="Creditor business code"),
) -> None:
    try:
        built = CreditorIdentifier.from_parts(country, business_code, national_id)
    except BankIdentifierError as e:
        _fail(e)
    _show_creditor_id(built)


@cli.command("scan", help="List the valid IBANs, BICs and creditor identifiers found in a text.")
def scan(text: List[str] = typer.Argument(..., help="Text to scan")) -> None:
    joined = " ".join(text)
    rows = [("IBAN", v) for v in find_ibans(joined)]
    rows += [("BIC", v) for v in find_bics(joined)]
    rows += [("CI", v) for v in find_creditor_ids(joined)]
    log.info("scan: %d identifiers found", len(rows))
    if not rows:
        console.print("nothing found")
        raise typer.Exit(code=1)
    _show(rows)


def main() -> None:
    cli()


if __name__ == "__main__":
    cli()
