import sys
from datetime import date
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from vue_apollo_codegen.config import load_config_file, parse_overrides, resolve_config
from vue_apollo_codegen.documents import (
    collect_definitions,
    load_documents,
    load_schema,
    validate_documents,
)
from vue_apollo_codegen.fragment_graph import FragmentGraph
from vue_apollo_codegen.gen_logging import configure_gen_logging
from vue_apollo_codegen.naming import (
    composition_function_base,
    document_variable_name,
    fragment_variable_name,
    operation_kind,
)
from vue_apollo_codegen.plugin import plugin

console = Console(stderr=True)

# inspect table width when stdout is not a terminal
_PIPED_WIDTH = 200


def _stamp() -> str:
    return f"[{date.today().strftime('%Y-%m-%d')}]"


def _fail(context, action: str, error: Exception):
    console.print(f"{_stamp()} {action} failed with error(s): {error}", style="red", markup=False)
    context.exit(1)


def _resolve_options(config_path, overrides) -> dict:
    options = load_config_file(config_path) if config_path else {}
    options.update(parse_overrides(overrides))
    return options


def _near_operation_output(location: str, extension: str) -> Path:
    path = Path(location)
    return path.with_name(path.name.rsplit(".", 1)[0] + extension)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log every emitted definition.")
@click.option("-q", "--quiet", is_flag=True, help="Only log warnings and errors.")
@click.pass_context
def cli(context, verbose, quiet):
    context.ensure_object(dict)
    configure_gen_logging(verbose=verbose, quiet=quiet)


@cli.command("generate", help="Generate Vue composition functions for GraphQL documents.")
@click.pass_context
@click.argument("schema_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("document_paths", nargs=-1, required=True, type=click.Path(exists=True))
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False),
              help="YAML file with plugin options (a codegen.yml `config:` block works too).")
@click.option("--set", "overrides", multiple=True, metavar="KEY=VALUE",
              help="Override a plugin option, e.g. --set dedupeOperationSuffix=true")
@click.option("--out", "out_file", type=click.Path(dir_okay=False),
              help="Output file (default: stdout).")
@click.option("--near-operation-file", is_flag=True,
              help="Run once per document and write the result beside it.")
@click.option("--extension", default=".generated.ts", show_default=True,
              help="Extension of near-operation-file outputs.")
def generate(context, schema_path, document_paths, config_path, overrides, out_file,
             near_operation_file, extension):
    try:
        options = _resolve_options(config_path, overrides)
        resolve_config(options)  # fail fast on bad values before touching documents
        schema = load_schema(schema_path)
        documents = load_documents(document_paths)

        if near_operation_file:
            for document in documents:
                target = _near_operation_output(document.location, extension)
                output = plugin(schema, [document], options, {"outputFile": str(target)})
                target.write_text(output.render(), encoding="utf-8")
                console.print(f"{_stamp()} Generated {target}", style="green", markup=False)
            return

        output = plugin(schema, documents, options, {"outputFile": out_file or ""})
        if out_file:
            target = Path(out_file)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(output.render(), encoding="utf-8")
            console.print(f"{_stamp()} Generated {target}", style="green", markup=False)
        else:
            click.echo(output.render(), nl=False)
    except Exception as e:
        _fail(context, "Generate", e)


@cli.command("validate", help="Validate GraphQL documents against the schema.")
@click.pass_context
@click.argument("schema_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("document_paths", nargs=-1, required=True, type=click.Path(exists=True))
def validate(context, schema_path, document_paths):
    try:
        schema = load_schema(schema_path)
        documents = load_documents(document_paths)
        errors = validate_documents(schema, documents)
    except Exception as e:
        _fail(context, "Validation", e)
        return

    if errors:
        for error in errors:
            console.print(f"  - {error.message}", style="red", markup=False)
        console.print(f"{_stamp()} Validation failed with {len(errors)} error(s)", style="red")
        context.exit(1)
    console.print(f"{_stamp()} Documents validation success!", style="green")


@cli.command("inspect", help="List operations and fragments with the names generated for them.")
@click.pass_context
@click.argument("schema_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("document_paths", nargs=-1, required=True, type=click.Path(exists=True))
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--set", "overrides", multiple=True, metavar="KEY=VALUE")
def inspect_cmd(context, schema_path, document_paths, config_path, overrides):
    try:
        options = resolve_config(_resolve_options(config_path, overrides))
        load_schema(schema_path)
        collected = collect_definitions(load_documents(document_paths))
        graph = FragmentGraph(collected.fragments)
        ordered_fragments = graph.ordered()
    except Exception as e:
        _fail(context, "Inspect", e)
        return

    table = Table(title="Operations")
    table.add_column("Kind")
    table.add_column("Name", overflow="fold")
    table.add_column("Document", no_wrap=True)
    table.add_column("Composition function", no_wrap=True)
    for node in collected.operations:
        kind = operation_kind(node)
        name = node.name.value
        table.add_row(
            kind,
            name,
            document_variable_name(name, options),
            f"use{composition_function_base(name, kind, options)}",
        )

    fragments = Table(title="Fragments (declaration order)")
    fragments.add_column("Name", overflow="fold")
    fragments.add_column("Constant", no_wrap=True)
    fragments.add_column("Spreads", overflow="fold")
    for fragment in ordered_fragments:
        name = fragment.name.value
        fragments.add_row(name, fragment_variable_name(name, options), ", ".join(graph.spreads(name)))

    out = Console(width=None if sys.stdout.isatty() else _PIPED_WIDTH)
    out.print(table)
    out.print(fragments)


def main():
    cli(prog_name="vue-apollo-codegen")
