"""Check docstrings: balanced code fences, runnable examples, and public API coverage."""

import ast
import re
from collections.abc import Iterator
from pathlib import Path
from typing import NamedTuple, TypeIs

import rich
import rich.table
import rich.text

import resultish as rs

SRC_DIR = Path().joinpath("src", "resultish")
CODE_BLOCK_PATTERN = re.compile(r"^\s*```(\w*)", re.MULTILINE)
SKIP_DECORATORS = frozenset({"overload", "override", "deprecated", "wraps"})
type FunctionNode = ast.FunctionDef | ast.AsyncFunctionDef


class ErrorDetail(NamedTuple):
    """Detail of an error with its line number."""

    line_no: int
    message: str


class DocstringError(NamedTuple):
    """Errors found in the docstring of one function."""

    file_path: Path
    func_name: str
    errors: list[ErrorDetail]


def _is_function(node: ast.AST) -> TypeIs[FunctionNode]:
    return isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef))


def _decorator_names(node: FunctionNode | ast.ClassDef) -> set[str]:
    names: set[str] = set()
    for dec in node.decorator_list:
        target = dec.func if isinstance(dec, ast.Call) else dec
        match target:
            case ast.Name(id=name) | ast.Attribute(attr=name):
                names.add(name)
            case _:
                pass
    return names


def _api_functions(tree: ast.Module) -> Iterator[tuple[FunctionNode, bool]]:
    """Module-level functions and methods, flagged when they belong to a `@final` class.

    Methods of `@final` variants are documented on their base class.
    """
    for node in tree.body:
        if _is_function(node):
            yield node, False
        elif isinstance(node, ast.ClassDef):
            is_final = "final" in _decorator_names(node)
            for child in node.body:
                if _is_function(child):
                    yield child, is_final


def _check_file(file_path: Path) -> list[DocstringError]:
    try:
        tree = ast.parse(file_path.read_text(encoding="utf-8"))
    except SyntaxError:
        return []

    found: list[DocstringError] = []
    for node, exempt in _api_functions(tree):
        if _decorator_names(node) & SKIP_DECORATORS:
            continue
        match _process_node(node, exempt=exempt):
            case rs.Err(errors):
                found.append(DocstringError(file_path, node.name, errors))
            case _:
                pass
    return found


def _process_node(
    node: FunctionNode, *, exempt: bool
) -> rs.Result[None, list[ErrorDetail]]:
    is_public = not node.name.startswith("_")
    docstring = ast.get_docstring(node)
    if docstring is None:
        if is_public and not exempt:
            return rs.Err([ErrorDetail(node.lineno, "Missing docstring")])
        return rs.Ok(None)

    errors = _check_code_blocks(docstring, node.lineno)
    if "Example" in docstring and not any(
        lang == "python" for lang in CODE_BLOCK_PATTERN.findall(docstring)
    ):
        errors.append(
            ErrorDetail(node.lineno, "Example section without a ```python block")
        )
    return rs.Err(errors) if errors else rs.Ok(None)


def _check_code_blocks(docstring: str, start_line: int) -> list[ErrorDetail]:
    """Check that every code fence is closed and every closing fence was opened."""
    errors: list[ErrorDetail] = []
    stack: list[tuple[int, str]] = []
    for idx, line in enumerate(docstring.split("\n")):
        stripped = line.strip()
        match = CODE_BLOCK_PATTERN.search(stripped)
        if not match:
            continue
        if stripped == "```":
            if stack:
                stack.pop()
            else:
                errors.append(
                    ErrorDetail(
                        start_line + idx,
                        "Closing block ``` without matching opening",
                    )
                )
            continue
        stack.append((idx, match.group(1) or "plaintext"))
    errors.extend(
        ErrorDetail(start_line + idx, f"Unclosed ```{lang} block")
        for idx, lang in stack
    )
    return errors


def main() -> None:
    """Check all docstrings in the project."""
    rich.print(
        rich.text.Text("Checking docstrings in resultish sources...", style="cyan bold")
    )
    files = sorted(SRC_DIR.rglob("*.py"))
    rich.print(f"Checking {len(files)} py files...")
    all_errors = [error for path in files for error in _check_file(path)]

    if not all_errors:
        rich.print(rich.text.Text("[OK] No issues found!", style="green"))
        return

    table = rich.table.Table(title="Issues Found", show_header=True)
    table.add_column("File", style="cyan")
    table.add_column("Function", style="magenta")
    table.add_column("Error", style="red")
    for error in all_errors:
        table.add_row(
            f"{error.file_path.relative_to(Path())}:{error.errors[0].line_no}",
            error.func_name,
            "\n".join(detail.message for detail in error.errors),
        )
    rich.print(table)
    rich.print(
        rich.text.Text(f"\n[FAILED] Found {len(all_errors)} issue(s)", style="red")
    )
    raise SystemExit(1)


if __name__ == "__main__":
    main()
