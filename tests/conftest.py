"""Shared pytest fixtures for arithcalc tests."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from arithcalc.core.ast import BinaryExpr, BinaryOp, Negate, Number


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def sum_tree() -> BinaryExpr:
    """Return the tree for ``1 + 2``."""
    return BinaryExpr(op=BinaryOp.ADD, left=Number(value=1), right=Number(value=2))


@pytest.fixture
def mixed_tree() -> BinaryExpr:
    """Return the tree for ``-(2 + 3) * 4``."""
    return BinaryExpr(
        op=BinaryOp.MUL,
        left=Negate(
            operand=BinaryExpr(op=BinaryOp.ADD, left=Number(value=2), right=Number(value=3))
        ),
        right=Number(value=4),
    )


@pytest.fixture
def write_config(tmp_path: Path):
    """Return a helper that writes a TOML config file and returns its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "arithcalc.toml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
