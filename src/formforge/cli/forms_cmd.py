"""Form CLI commands: validate, render and types."""

import logging
from pathlib import Path

import click
import yaml

from formforge.config import FormForgeConfig
from formforge.core.errors import FormForgeError
from formforge.fields.registry import get_default_registry
from formforge.forms.form import Form
from formforge.forms.loader import FormConfigLoader, read_form_file
from formforge.metadata.validator import check_form_file, validate_form_file, validate_forms_dir

logger = logging.getLogger(__name__)


def _config(ctx: click.Context) -> FormForgeConfig:
    return ctx.obj if isinstance(ctx.obj, FormForgeConfig) else FormForgeConfig.from_env()


@click.group()
def forms():
    """Form description commands."""
    pass


@forms.command()
@click.option(
    "--path",
    "target_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Validate a single file instead of the whole forms directory.",
)
@click.pass_context
def validate(ctx: click.Context, target_path: Path | None):
    """Validate form description files against the schema, then parse them."""
    config = _config(ctx)

    if target_path is not None:
        issues = validate_form_file(target_path)
        if not issues:
            issues = check_form_file(target_path)
    else:
        if not config.forms_path.is_dir():
            click.echo(f"Error: Forms directory not found at {config.forms_path}", err=True)
            raise SystemExit(1)
        issues = validate_forms_dir(config.forms_path, semantic=True)

    errors = [i for i in issues if i.severity == "error"]
    warnings = [i for i in issues if i.severity == "warning"]

    for issue in issues:
        colour = "red" if issue.severity == "error" else "yellow"
        click.echo(click.style(str(issue), fg=colour))

    if errors:
        click.echo(
            click.style(
                f"\n{len(errors)} error(s) found"
                + (f", {len(warnings)} warning(s)" if warnings else ""),
                fg="red",
                bold=True,
            )
        )
        raise SystemExit(1)

    if target_path is None:
        loader = FormConfigLoader(config.forms_path)
        loader.load_all()
        form_ids = loader.list_forms()
        click.echo(f"\nLoaded {len(form_ids)} forms:")
        for form_id in sorted(form_ids):
            click.echo(f"  ✓ {form_id} ({loader.sources[form_id].name})")

    click.echo(click.style("\nAll forms are valid.", fg="green", bold=True))


@forms.command()
@click.argument("path", type=click.Path(exists=True, path_type=Path))
@click.option("--form", "form_id", default=None, help="Form id, when PATH is a directory.")
@click.pass_context
def render(ctx: click.Context, path: Path, form_id: str | None):
    """Print the HTML for a form loaded from PATH (a file or a directory)."""
    config = _config(ctx)

    try:
        description = _load_description(path, form_id)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        click.echo(click.style(f"Error: cannot load forms from {path}: {exc}", fg="red"), err=True)
        raise SystemExit(1)
    if description is None:
        suffix = f" with id '{form_id}'" if form_id else ""
        click.echo(f"Error: no form found in {path}{suffix}", err=True)
        raise SystemExit(1)

    try:
        form = Form.parse(description)
        form.default_button_label = config.submit_label
        click.echo(form.render())
    except FormForgeError as exc:
        logger.debug("Rendering %s failed", path, exc_info=True)
        click.echo(click.style(f"Error [{exc.code}]: {exc}", fg="red"), err=True)
        raise SystemExit(1)


def _load_description(path: Path, form_id: str | None) -> dict | None:
    """Find one form description in a file or a directory of files."""
    if path.is_file():
        data = read_form_file(path)
        if not isinstance(data, dict) or not isinstance(data.get("form"), dict):
            return None
        description = dict(data["form"])
        description.setdefault("id", path.stem)
        if form_id is not None and description["id"] != form_id:
            return None
        return description

    loader = FormConfigLoader(path)
    loader.load_all()
    if form_id is None:
        form_ids = loader.list_forms()
        if len(form_ids) != 1:
            raise ValueError(f"{len(form_ids)} forms found; choose one with --form")
        form_id = form_ids[0]
    return loader.get_description(form_id)


@forms.command()
def types():
    """List the registered field types."""
    for name in get_default_registry().list_registered():
        click.echo(name)
