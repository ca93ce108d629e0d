from __future__ import annotations

import random
from pathlib import Path

import typer

from brazilian_documents.application.dtos.validate_request_dto import ValidateRequestDTO
from brazilian_documents.application.use_cases.benchmark_validation import BenchmarkValidationUseCase
from brazilian_documents.application.use_cases.generate_documents import GenerateDocumentsUseCase
from brazilian_documents.application.use_cases.validate_documents import ValidateDocumentsUseCase
from brazilian_documents.config import configure_logging, settings
from brazilian_documents.domain.errors import DocumentError
from brazilian_documents.domain.services import brazilian_document
from brazilian_documents.domain.value_objects.cnpj import Cnpj
from brazilian_documents.domain.value_objects.cpf import Cpf
from brazilian_documents.domain.value_objects.document_type import DocumentType

app = typer.Typer(help="Brazilian CPF/CNPJ validation CLI")


def _hint(value: str | None) -> DocumentType:
    try:
        return DocumentType.from_name(value or settings.default_hint)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


def _doc_type(value: str) -> DocumentType:
    doc_type = _hint(value)
    if doc_type is DocumentType.UNKNOWN:
        raise typer.BadParameter("must be 'cpf' or 'cnpj'")
    return doc_type


@app.callback()
def main(log_level: str = typer.Option(None, "--log-level", "-l", help="Overrides BRDOCS_LOG_LEVEL")) -> None:
    configure_logging(log_level)


@app.command()
def validate(
    value: str,
    hint: str = typer.Option(None, "--hint", "-t", help="cpf|cnpj, type tried first"),
) -> None:
    """Tells whether VALUE is a CPF or a CNPJ and prints it formatted."""
    try:
        parsed = brazilian_document.parse(value, _hint(hint))
    except DocumentError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{parsed.type.label}: {parsed.format('G')}")


@app.command("format")
def format_(
    value: str,
    style: str = typer.Option("G", "--style", "-s", help="S|B|G, or BS for CNPJ"),
    hint: str = typer.Option(None, "--hint", "-t"),
) -> None:
    try:
        parsed = brazilian_document.parse(value, _hint(hint))
        typer.echo(parsed.format(style))
    except DocumentError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)


@app.command("create-cpf")
def create_cpf(base: str) -> None:
    """Appends the check digits to a 9-digit BASE."""
    try:
        typer.echo(Cpf.create(base).format("G"))
    except DocumentError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)


@app.command("create-cnpj")
def create_cnpj(root: str, branch: str = typer.Argument(None, help="Omit to read ROOT as root+branch")) -> None:
    """Computes the check digits for ROOT (up to 8 chars) and BRANCH (up to 4)."""
    try:
        typer.echo(Cnpj.create(root, branch).format("G"))
    except DocumentError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)


@app.command()
def check(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    hint: str = typer.Option(None, "--hint", "-t"),
) -> None:
    """Validates every non-blank line of PATH; exits 1 when any is invalid."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise typer.BadParameter(f"not UTF-8 text: {path}", param_hint="PATH") from e
    values = tuple(line.strip() for line in text.splitlines() if line.strip())
    reports = ValidateDocumentsUseCase().execute(ValidateRequestDTO(values=values, hint=_hint(hint)))
    for r in reports:
        if r.valid:
            typer.echo(f"OK\t{r.document_type}\t{r.formatted}")
        else:
            reason = "ambiguous" if r.ambiguous else f"cpf={r.cpf_error} cnpj={r.cnpj_error}"
            typer.echo(f"INVALID\t{r.input}\t{reason}")
    invalid = sum(1 for r in reports if not r.valid)
    typer.echo(f"Processed: {len(reports)}, invalid: {invalid}")
    if invalid:
        raise typer.Exit(code=1)


@app.command()
def generate(
    doc_type: str = typer.Argument(..., help="cpf|cnpj"),
    count: int = typer.Option(1, "--count", "-n", min=1),
    alphanumeric: bool = typer.Option(False, "--alphanumeric", "-a", help="CNPJ root with letters"),
    seed: int = typer.Option(None, "--seed"),
) -> None:
    uc = GenerateDocumentsUseCase(random.Random(seed))
    for doc in uc.execute(_doc_type(doc_type), count, alphanumeric=alphanumeric):
        typer.echo(doc.format("G"))


@app.command()
def bench(
    doc_type: str = typer.Argument("cpf", help="cpf|cnpj"),
    count: int = typer.Option(None, "--count", "-n", min=1, help="Defaults to BRDOCS_BENCH_COUNT"),
) -> None:
    result = BenchmarkValidationUseCase().execute(_doc_type(doc_type), count or settings.bench_count)
    typer.echo(
        f"Tested {result.tested:,} {result.document_type}s. {result.valid:,} valid. "
        f"{result.checks_per_second:,.1f} checks/s"
    )
