"""CLI for form-object."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from form_object import __version__
from form_object.core.config import Outcome
from form_object.core.errors import FormClassNotFoundError
from form_object.core.form import FormObject
from form_object.io import read_jsonl, write_jsonl
from form_object.loader import load_form_class
from form_object.pipeline import process_batch

app = typer.Typer(
    name="form-object",
    help="Process submissions through declarative form objects.",
    no_args_is_help=True,
)
console = Console()

FormOption = Annotated[
    str,
    typer.Option(
        "--form",
        "-f",
        envvar="FORM_OBJECT_FORM",
        help="Form class reference, e.g. myapp.forms:SignupForm",
    ),
]


def version_callback(value: bool) -> None:
    if value:
        console.print(f"form-object version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-V", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log pipeline stages at DEBUG level"),
    ] = False,
) -> None:
    """form-object: declarative form processing."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def _load(reference: str) -> type[FormObject]:
    try:
        return load_form_class(reference)
    except FormClassNotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def run(
    form: FormOption,
    input_path: Annotated[
        Path,
        typer.Option("--in", "-i", help="Input JSONL file of raw submissions"),
    ],
    output_path: Annotated[
        Path,
        typer.Option("--out", "-o", help="Output JSONL file of processing results"),
    ],
) -> None:
    """Process every submission in a JSONL file through a form class."""
    if not input_path.exists():
        console.print(f"[red]Error:[/red] Input file not found: {input_path}")
        raise typer.Exit(1)

    form_class = _load(form)

    console.print(f"[bold]form-object[/bold] v{__version__}")
    console.print(f"  Form: {form_class.__module__}.{form_class.__qualname__}")
    console.print(f"  Input: {input_path}")
    console.print(f"  Output: {output_path}")

    skipped_lines: list[int] = []

    def skip_line(line_num: int, message: str) -> None:
        console.print(f"\n[yellow]Warning:[/yellow] {escape(message)}")
        skipped_lines.append(line_num)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        progress.add_task("Processing submissions...", total=None)
        results = process_batch(form_class, read_jsonl(input_path, on_error=skip_line))
        write_jsonl(output_path, results)

    valid_count = sum(1 for r in results if r.valid)
    invalid_count = len(results) - valid_count
    skipped_count = len(skipped_lines)

    console.print("\n[bold]Summary:[/bold]")
    console.print(f"  Submissions processed: {valid_count + invalid_count}")
    console.print(f"  [green]Valid:[/green] {valid_count}")
    if invalid_count:
        console.print(f"  [red]Invalid:[/red] {invalid_count}")
    if skipped_count:
        console.print(f"  [yellow]Skipped:[/yellow] {skipped_count}")


@app.command()
def describe(form: FormOption) -> None:
    """Show the fields, hooks and validators declared by a form class."""
    form_class = _load(form)
    config = form_class.form_config

    console.print(f"[bold]{form_class.__qualname__}[/bold] (model name: {form_class.model_name()})")

    fields = Table(title="Fields")
    fields.add_column("Field")
    fields.add_column("Label")
    fields.add_column("Default")
    for name in config.field_names:
        default = escape(repr(config.defaults[name])) if name in config.defaults else ""
        fields.add_row(name, form_class.human_attribute_name(name), default)
    console.print(fields)

    hooks = Table(title="Hooks")
    hooks.add_column("Stage")
    hooks.add_column("Methods")
    hooks.add_row("clean", ", ".join(("clean_data",) + config.cleaners))
    for outcome in Outcome:
        methods = (f"process_{outcome.value}",) + config.processors_for(outcome)
        hooks.add_row(outcome.value, ", ".join(methods))
    console.print(hooks)

    if config.validators:
        console.print("[bold]Validators:[/bold]")
        for validator in config.validators:
            console.print(f"  {validator!r}")
    else:
        console.print("[dim]No validators declared[/dim]")


if __name__ == "__main__":
    app()
