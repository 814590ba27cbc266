"""
Command line interface for entitygen.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from entitygen import __version__
from entitygen.codegen.diagnostics import Diagnostic, DiagnosticCollector, Severity
from entitygen.codegen.driver import EmissionDriver
from entitygen.codegen.filer import DirectoryFiler
from entitygen.codegen.templates import TemplateResolver
from entitygen.config import GeneratorSettings
from entitygen.core.errors import ConfigurationError
from entitygen.core.fields import build_field_table
from entitygen.discovery import discover_paths
from entitygen.logging import configure_logging


def _load_settings(config_path: Path | None) -> GeneratorSettings:
    settings = GeneratorSettings()
    if config_path is not None:
        settings = GeneratorSettings.from_properties(config_path, base=settings)
    return GeneratorSettings.from_env(base=settings)


def _echo_diagnostic(diagnostic: Diagnostic) -> None:
    color = "red" if diagnostic.severity == Severity.ERROR else None
    click.secho(str(diagnostic), fg=color, err=True)


@click.group()
@click.version_option(__version__, prog_name="entitygen")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Properties file with generator settings.",
)
@click.option("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR.")
@click.option("--log-format", type=click.Choice(["text", "json"]), default=None)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    log_level: str | None,
    log_format: str | None,
) -> None:
    """Generate implementation classes from accessor interfaces."""
    try:
        settings = _load_settings(config_path).with_overrides(
            log_level=log_level,
            log_format=log_format,
        )
    except ConfigurationError as e:
        raise click.ClickException(e.message) from e

    try:
        configure_logging(level=settings.log_level, format=settings.log_format)
    except ValueError as e:
        raise click.ClickException(f"Invalid logging settings: {e}") from e

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@main.command()
@click.argument("sources", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path))
@click.option(
    "--out",
    "-o",
    "out_dir",
    required=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory that receives generated sources.",
)
@click.option("--template", "template_name", default=None, help="Template name to render.")
@click.option(
    "--template-dir",
    "template_dirs",
    multiple=True,
    type=click.Path(exists=True, file_okay=False),
    help="Extra template directory, searched before the configured ones.",
)
@click.pass_context
def generate(
    ctx: click.Context,
    sources: tuple[Path, ...],
    out_dir: Path,
    template_name: str | None,
    template_dirs: tuple[str, ...],
) -> None:
    """Generate implementations for annotated interfaces in SOURCES."""
    settings: GeneratorSettings = ctx.obj["settings"]
    if template_dirs:
        settings = settings.with_overrides(
            template_path=(*template_dirs, *settings.template_path),
        )

    discovery_diagnostics = DiagnosticCollector(forward=_echo_diagnostic)
    batch = discover_paths(sources, discovery_diagnostics, marker=settings.marker_annotation)

    driver = EmissionDriver(
        TemplateResolver(settings),
        DirectoryFiler(out_dir, extension=settings.output_extension, encoding=settings.output_encoding),
        template_name=template_name,
        on_diagnostic=_echo_diagnostic,
    )
    result = driver.run(batch)

    click.secho(
        f"Generated {len(result.artifacts)} source file(s) in {out_dir}",
        fg="green" if result.ok else "yellow",
    )
    if result.errors or discovery_diagnostics.errors:
        sys.exit(1)


@main.command()
@click.argument("sources", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path))
@click.pass_context
def inspect(ctx: click.Context, sources: tuple[Path, ...]) -> None:
    """Print the fields inferred for each annotated interface in SOURCES."""
    settings: GeneratorSettings = ctx.obj["settings"]
    diagnostics = DiagnosticCollector(forward=_echo_diagnostic)
    batch = discover_paths(sources, diagnostics, marker=settings.marker_annotation)

    report = []
    for entry in batch:
        fields = build_field_table(entry.methods)
        report.append({
            "interface": entry.interface_name,
            "package": entry.package_name,
            "source": entry.source,
            "fields": [f.model_dump() for f in fields],
        })

    click.echo(json.dumps(report, indent=2))
    if diagnostics.errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
