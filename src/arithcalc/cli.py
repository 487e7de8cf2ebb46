"""
arithcalc CLI.

Evaluates the expression given as positional arguments, or prints its
tree as a dot graph (``--dot``) or a terminal tree view (``--tree``):

    arithcalc 2 + 3 '*' 4
    arithcalc --dot '(1 + 2) * 3' | dot -Tpng > expr.png
"""

import logging
import platform
import sys
from pathlib import Path

import typer
from rich.console import Console

from arithcalc._version import get_version
from arithcalc.core.ast import format_number
from arithcalc.core.config import CalcConfig, load_config
from arithcalc.core.errors import ConfigError, EvalError, LexError, ParseError
from arithcalc.core.evaluator import evaluate
from arithcalc.core.graph import render_dot, render_tree
from arithcalc.core.parser import parse_expr

logger = logging.getLogger(__name__)

console = Console()


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"arithcalc version {get_version()}")
        typer.echo(
            f"Python {platform.python_implementation()} {platform.python_version()}"
            f" on {platform.system()} {platform.machine()}"
        )
        raise typer.Exit()


# =============================================================================
# Main Application
# =============================================================================

app = typer.Typer(
    help="Evaluate an arithmetic expression, or print its syntax tree.",
    add_completion=False,
)


# Unknown short options ("-2", "-(1+2)") are passed through as expression text
@app.command(context_settings={"ignore_unknown_options": True})
def calc_command(
    expression: list[str] | None = typer.Argument(
        None, help="Expression tokens, joined with spaces (e.g. 1 + 2)"
    ),
    dot: bool = typer.Option(
        False, "--dot", help="Print the syntax tree as a dot graph instead of evaluating"
    ),
    tree: bool = typer.Option(False, "--tree", help="Print the syntax tree for the terminal"),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Path to a TOML file with an [arithcalc] table"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug output to stderr"),
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """
    Parse EXPRESSION and print its value.

    Supports + - * / with the usual precedence, unary minus and parentheses.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            stream=sys.stderr,
        )

    if dot and tree:
        raise typer.BadParameter("--dot and --tree cannot be combined", param_hint="'--tree'")

    source = " ".join(expression or [])

    try:
        settings = load_config(config) if config else CalcConfig()
        ast = parse_expr(source, max_depth=settings.max_depth)

        if dot:
            logger.debug("Rendering dot graph")
            typer.echo(render_dot(ast, name=settings.graph_name))
        elif tree:
            logger.debug("Rendering tree view")
            console.print(render_tree(ast))
        else:
            typer.echo(format_number(evaluate(ast), settings.precision))

    except LexError as e:
        typer.echo(f"Lex error: {e}", err=True)
        raise typer.Exit(code=1)
    except ParseError as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(code=1)
    except EvalError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(code=1)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
