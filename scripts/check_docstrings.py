"""Check that public functions are documented and docstring code blocks are closed."""

import ast
import re
from pathlib import Path
from typing import NamedTuple, TypeIs

import rich
import rich.table
import rich.text

import grouptools as gt

SRC_DIR = Path().joinpath("src", "grouptools")
CODE_BLOCK_PATTERN = re.compile(r"^```(\w*)", re.MULTILINE)
SKIP_DECORATORS = frozenset({"overload", "override", "wraps"})


class DocstringError(NamedTuple):
    """Error found in a docstring."""

    file_path: Path
    func_name: str
    line_no: int
    message: str


def _is_documentable(node: ast.AST) -> TypeIs[ast.FunctionDef | ast.AsyncFunctionDef]:
    return isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef))


def _is_public(node: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
    return not node.name.startswith("_")


def _has_skip_decorator(node: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
    return any(
        (isinstance(d, ast.Name) and d.id in SKIP_DECORATORS)
        or (isinstance(d, ast.Attribute) and d.attr in SKIP_DECORATORS)
        for d in node.decorator_list
    )


def _unclosed_blocks(docstring: str, start_line: int) -> list[tuple[int, str]]:
    errors: list[tuple[int, str]] = []
    stack: list[tuple[int, str]] = []
    for idx, line in enumerate(docstring.split("\n")):
        stripped = line.strip()
        match = CODE_BLOCK_PATTERN.search(stripped)
        if match is None:
            continue
        if stripped == "```":
            if stack:
                stack.pop()
            else:
                errors.append(
                    (start_line + idx, "Closing block ``` without matching opening")
                )
        else:
            stack.append((start_line + idx + 1, match.group(1) or "plaintext"))
    errors.extend((line_no, f"Unclosed ```{lang} block") for line_no, lang in stack)
    return errors


def _check_node(
    file_path: Path, node: ast.FunctionDef | ast.AsyncFunctionDef
) -> list[DocstringError]:
    docstring = ast.get_docstring(node)
    if docstring is None:
        return [DocstringError(file_path, node.name, node.lineno, "Missing docstring")]
    return [
        DocstringError(file_path, node.name, line_no, message)
        for line_no, message in _unclosed_blocks(docstring, node.lineno)
    ]


def _check_file(file_path: Path) -> list[DocstringError]:
    try:
        tree = ast.parse(file_path.read_text(encoding="utf-8"))
    except SyntaxError:
        return []
    documentable, _ = gt.partition(ast.walk(tree), _is_documentable)
    public, _ = gt.partition(
        documentable, lambda n: _is_public(n) and not _has_skip_decorator(n)
    )
    return [error for node in public for error in _check_node(file_path, node)]


def main() -> None:
    """Check all docstrings in the project."""
    rich.print(rich.text.Text("Checking docstrings...", style="cyan bold"))
    files = gt.Seq(SRC_DIR.rglob("*.py"))
    rich.print(f"Checking {files.length()} py files...")

    by_file = gt.group_by(
        (error for path in files for error in _check_file(path)),
        lambda e: e.file_path.relative_to(Path()),
    )
    if not by_file:
        rich.print(rich.text.Text("[OK] No issues found!", style="green"))
        return

    table = rich.table.Table(title="Issues Found", show_header=True)
    table.add_column("File", style="cyan")
    table.add_column("Function", style="magenta")
    table.add_column("Error", style="red")
    for path, errors in by_file.items():
        for error in errors:
            table.add_row(f"{path}:{error.line_no}", error.func_name, error.message)
    rich.print(table)
    total = sum(len(errors) for errors in by_file.values())
    rich.print(rich.text.Text(f"\n[FAILED] Found {total} issue(s)", style="red"))
    raise SystemExit(1)


if __name__ == "__main__":
    main()
