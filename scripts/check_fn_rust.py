"""Check that every method of the Rust `Resultish` API has a Python counterpart on `Outcome`."""

from collections.abc import Callable
from pathlib import Path
from typing import Any, Literal

import polars as pl
import rich

import resultish as rs

DATA = Path("scripts", "data")

RESULTISH_FN = {
    "as_mut",
    "as_ref",
    "from",
    "has_err",
    "has_ok",
    "lenient",
    "lenient_err",
    "lenient_ok",
    "map",
    "map_err",
    "strict",
    "strict_err",
    "strict_ok",
    "tuple",
}

RENAMED = {
    "from": "from_result",  # `from` is a reserved word in Python
    "has_err": "has_failure",
    "has_ok": "has_success",
    "lenient": "resolve_lenient",
    "lenient_err": "resolve_lenient_failure",
    "lenient_ok": "resolve_lenient_success",
    "map": "map_success",
    "map_err": "map_failure",
    "strict": "resolve_strict",
    "strict_err": "resolve_strict_failure",
    "strict_ok": "resolve_strict_success",
    "tuple": "to_tuple",  # `tuple` would shadow the builtin in annotations
}
"""Rust method name -> Python method name."""

PY_ONLY = frozenset({"from_parts", "into", "inspect"})
"""Methods with no Rust counterpart, on purpose.

The old Rust names kept as deprecated aliases are excluded through `RENAMED`.
"""


def _decorated(fn: Callable[..., Any]) -> Callable[..., Any]:
    if isinstance(fn, (staticmethod, classmethod)):
        return fn.__func__  # type: ignore[return-value]
    return fn


def _with_source(fn_name: str, src: Literal["python", "rust"]) -> tuple[str, str]:
    return (src, fn_name)


def _python_fns(dtype: type) -> list[tuple[str, str]]:
    return [
        _with_source(_decorated(obj).__name__, "python")
        for klass in dtype.mro()
        for obj in vars(klass).values()
        if callable(obj) or isinstance(obj, (staticmethod, classmethod))
    ]


def main(dtype: type, rust_fns: set[str], renamed: dict[str, str]) -> pl.DataFrame:
    """Report methods present on only one side and write them to a ndjson file."""
    fn: pl.Expr = pl.col("fn")
    ignored = sorted(PY_ONLY.union(renamed))
    rust = [_with_source(renamed.get(name, name), "rust") for name in rust_fns]
    unmatched = (
        pl.LazyFrame(_python_fns(dtype) + rust, schema=["source", "fn"], orient="row")
        .unique()
        .filter(
            fn.is_unique().and_(
                fn.str.starts_with("_").not_().and_(fn.is_in(ignored).not_())
            )
        )
        .sort(["source", "fn"])
        .collect()
    )
    DATA.mkdir(parents=True, exist_ok=True)
    unmatched.write_ndjson(DATA.joinpath(f"{dtype.__name__}_fns.ndjson"))
    return unmatched


if __name__ == "__main__":
    missing = main(rs.Outcome, RESULTISH_FN, RENAMED)
    if missing.is_empty():
        rich.print("[green]✓ Outcome covers the whole Resultish API[/green]")
    else:
        rich.print("[yellow]⚠️  Methods without a counterpart:[/yellow]")
        rich.print(missing)
        raise SystemExit(1)
