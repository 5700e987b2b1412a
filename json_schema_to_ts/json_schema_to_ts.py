import asyncio
import json
import logging
from pathlib import Path

import click

from .acquisition import generate_interface_declarations, load_schema_text, parse_interface_response
from .cli_utils import reconstruct_command_line
from .pipeline import AtomicWriter, OutputMode, TypeGenConfig, json_schema_to_type
from .pipeline.errors import TypeGenError
from .utils import to_pascal_case


def parse_type_mapping(entries) -> dict[str, str]:
    """Parse repeated SOURCE=TARGET options into a mapping."""
    mapping = {}
    for entry in entries:
        source, sep, target = entry.partition("=")
        if not sep or not source.strip() or not target.strip():
            raise click.BadParameter(f"Expected SOURCE=TARGET, got {entry!r}", param_hint="--type-mapping")
        mapping[source.strip()] = target.strip()
    return mapping


@click.command()
@click.option("--name", "-n", default=None, type=str)
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--type-mapping",
    "-m",
    multiple=True,
    help="Map a source type name to a JSON Schema type, e.g. -m Date=string (repeatable)",
)
@click.option(
    "--interface",
    "is_interface",
    is_flag=True,
    default=False,
    help="PATH is a YApi interface API response; generate its request and response types",
)
@click.option("--force", is_flag=True, default=False, help="Overwrite OUTPUT if it exists")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", type=click.Path(exists=True, resolve_path=True))
@click.argument("output", required=False, default=None, type=click.Path(resolve_path=True))
def json_schema_to_ts(name, config, type_mapping, is_interface, force, verbose, path, output):
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    if config is not None:
        with open(config) as f:
            config = TypeGenConfig.from_dict(json.load(f))
    else:
        config = TypeGenConfig()

    # CLI mappings override the config file
    config.custom_type_mapping.update(parse_type_mapping(type_mapping))
    if force:
        config.output.mode = OutputMode.FORCE

    with open(path, encoding="utf-8") as f:
        text = f.read()

    try:
        if is_interface:
            interface = parse_interface_response(json.loads(text))
            out = asyncio.run(generate_interface_declarations(interface, config.custom_type_mapping, type_name=name))
        else:
            if name is None:
                name = to_pascal_case(Path(path).stem)
            schema = load_schema_text(text, config.custom_type_mapping)
            out = asyncio.run(json_schema_to_type(schema, name))
    except json.JSONDecodeError as e:
        raise click.ClickException(f"{path} is not valid JSON: {e}") from e
    except TypeGenError as e:
        raise click.ClickException(str(e)) from e

    if config.add_generation_comment:
        out = f"// Generated by {reconstruct_command_line(json_schema_to_ts)}\n\n{out}"
    out += "\n"

    if output is None:
        click.echo(out, nl=False)
        return

    writer = AtomicWriter()
    validate = config.output.validate_before_write
    try:
        if config.output.mode == OutputMode.FORCE:
            writer.write(Path(output), out, validate)
        else:
            writer.write_if_not_exists(Path(output), out, validate)
    except (FileExistsError, TypeGenError) as e:
        raise click.ClickException(str(e)) from e
