"""
Math and Citation Rendering CLI

Renders TeX math, citation lists and whole YAML documents to HTML fragments.

Commands:
    math    - Render one TeX snippet
    cite    - Render a citation list
    preview - Render a YAML document to a standalone HTML page

Examples:\n

    texmark math 'e^{i\\pi} + 1 = 0'                         # Inline MathML

    texmark math 'E = mc^2' --equation --label energy       # Numbered equation

    texmark math 'x^2' --png --png-engine mathtext          # PNG fallback

    texmark cite Weinberg:1967tq MR1234567 Foo              # Citation list

    texmark preview paper.yaml --output paper.html          # Whole document
"""

from pathlib import Path
from typing import List, Optional

import typer
from typing_extensions import Annotated

from texmark.contexts.document import (
    Citation,
    Document,
    InvalidDocumentStructureError,
    MathContent,
    MathKind,
    load_document,
)
from texmark.contexts.math import ConfigurationError, MathOptions, load_math_options
from texmark.contexts.math.logger import setup_math_logger
from texmark.contexts.rendering import FragmentAssembler
from texmark.contexts.rendering.logger import setup_rendering_logger

app = typer.Typer(
    help="Render TeX math, cross-references and citations to HTML fragments",
    add_completion=False,
    invoke_without_command=True,
)

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="YAML file with math options", exists=True, dir_okay=False),
]
MathEngineOption = Annotated[
    Optional[str], typer.Option("--math-engine", help="Engine used for MathML output")
]
PngEngineOption = Annotated[
    Optional[str], typer.Option("--png-engine", help="Engine used for PNG output")
]
MathMLOption = Annotated[
    Optional[bool], typer.Option("--mathml/--no-mathml", help="Enable MathML output")
]
PngOption = Annotated[Optional[bool], typer.Option("--png/--no-png", help="Enable PNG output")]


def _options(
    config: Optional[Path],
    math_engine: Optional[str],
    png_engine: Optional[str],
    mathml: Optional[bool],
    png: Optional[bool],
) -> MathOptions:
    try:
        return load_math_options(
            config,
            {
                "math_engine": math_engine,
                "png_engine": png_engine,
                "output_mathml": mathml,
                "output_png": png,
            },
        )
    except ValueError as e:
        typer.secho(f"Invalid configuration: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)


def _render_or_exit(assembler: FragmentAssembler, node) -> str:
    try:
        return assembler.to_html(node)
    except ConfigurationError as e:
        typer.secho(f"Configuration error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("math")
def math_command(
    source: Annotated[str, typer.Argument(help="TeX source without $ delimiters")],
    equation: Annotated[
        bool, typer.Option("--equation", "-e", help="Render as a display equation")
    ] = False,
    label: Annotated[
        Optional[str], typer.Option("--label", "-l", help="Equation label (numbered as (1))")
    ] = None,
    log_dir: Annotated[
        Optional[Path], typer.Option("--log-dir", help="Directory for the session log file")
    ] = None,
    config: ConfigOption = None,
    math_engine: MathEngineOption = None,
    png_engine: PngEngineOption = None,
    mathml: MathMLOption = None,
    png: PngOption = None,
):
    """
    Render a single TeX snippet.

    Examples:\n

        $ texmark math 'a^2 + b^2 = c^2'

        $ texmark math 'E = mc^2' --equation --label energy
    """
    options = _options(config, math_engine, png_engine, mathml, png)

    if label is not None and not equation:
        typer.secho("--label requires --equation", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)
    if log_dir is not None:
        setup_math_logger(log_dir, options.math_engine, options.png_engine)

    kind = MathKind.EQUATION if equation else MathKind.INLINE
    document = Document()
    number = None
    if label is not None:
        number = document.labels.add_equation(label, 1).number

    assembler = FragmentAssembler(document, options)
    typer.echo(_render_or_exit(assembler, MathContent(kind, source, label=label, number=number)))


@app.command("cite")
def cite_command(
    keys: Annotated[List[str], typer.Argument(help="Citation keys in order")],
):
    """
    Render a citation list.

    Examples:\n

        $ texmark cite Weinberg:1967tq MR1234567 Foo
    """
    assembler = FragmentAssembler(Document(), MathOptions())
    typer.echo(assembler.to_html(Citation(keys)))


@app.command("preview")
def preview_command(
    document_path: Annotated[
        Path, typer.Argument(help="YAML document description", exists=True, dir_okay=False)
    ],
    output: Annotated[
        Optional[Path], typer.Option("--output", "-o", help="Write the page here instead of stdout")
    ] = None,
    log_dir: Annotated[
        Optional[Path], typer.Option("--log-dir", help="Directory for the session log file")
    ] = None,
    config: ConfigOption = None,
    math_engine: MathEngineOption = None,
    png_engine: PngEngineOption = None,
    mathml: MathMLOption = None,
    png: PngOption = None,
):
    """
    Render a YAML document to a standalone HTML page.

    Unresolved references are reported but do not stop rendering.

    Examples:\n

        $ texmark preview paper.yaml --output paper.html

        $ texmark preview paper.yaml --png --png-engine mathtext --log-dir outs/logs
    """
    options = _options(config, math_engine, png_engine, mathml, png)
    if log_dir is not None:
        setup_rendering_logger(log_dir, options)

    try:
        document, nodes = load_document(document_path)
    except InvalidDocumentStructureError as e:
        typer.secho(f"Invalid document: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)

    assembler = FragmentAssembler(document, options)

    try:
        page = assembler.render_document(nodes)
    except ConfigurationError as e:
        typer.secho(f"Configuration error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if output is None:
        typer.echo(page)
    else:
        output.write_text(page, encoding="utf-8")
        typer.secho(f"Wrote {output}", fg=typer.colors.GREEN, err=True)

    issues = document.diagnostics.issues
    if issues:
        typer.secho(f"{len(issues)} unresolved reference(s):", fg=typer.colors.YELLOW, err=True)
        for issue in issues:
            typer.secho(f"  {issue}", fg=typer.colors.YELLOW, err=True)


if __name__ == "__main__":
    app()
