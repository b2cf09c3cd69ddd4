"""FormForge CLI entry point."""

import logging

import click

from formforge.config import FormForgeConfig


@click.group()
@click.pass_context
def cli(ctx: click.Context):
    """FormForge: HTML forms from descriptions."""
    config = FormForgeConfig.from_env()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Register subcommand groups
from formforge.cli.forms_cmd import forms  # noqa: E402
from formforge.cli.rules_cmd import rules  # noqa: E402

cli.add_command(forms)
cli.add_command(rules)
