"""Validation rule CLI commands: list and check."""

import click

from formforge.core.errors import ValidatorError
from formforge.validation.validator import Validator


@click.group()
def rules():
    """Validation rule commands."""
    pass


@rules.command("list")
def list_cmd():
    """List the available rule names."""
    for name in Validator().list_rules():
        click.echo(name)


@rules.command()
@click.argument("value")
@click.argument("rule")
@click.argument("params", nargs=-1)
def check(value: str, rule: str, params: tuple[str, ...]):
    """Check VALUE against RULE, passing any PARAMS to the rule."""
    try:
        valid = Validator().validate(value, rule, *params)
    except ValidatorError as exc:
        click.echo(click.style(f"Error [{exc.code}]: {exc}", fg="red"), err=True)
        raise SystemExit(1)

    if valid:
        click.echo(click.style("valid", fg="green"))
    else:
        click.echo(click.style("invalid", fg="red"))
