"""
Interactive REPL for TINYC.

Each entry is executed as a sequence of statements against a variable store
that persists across entries, so declarations made on one line can be printed
on the next. Entries spanning several lines are collected while braces are
unbalanced. An entry that starts with a program header (`int main(`) is run as
a complete program with a fresh store.

Commands:
    exit, quit      Leave the REPL.
    vars            List the variable store.
    reset           Clear the variable store.
    verbose-mode    Toggle token tracing.
"""

import re
import sys

from tinyc.tinyc_errors import TinycError
from tinyc.tinyc_interpreter import Interpreter, Variable

PROGRAM_HEADER = re.compile(r"^int\s+[A-Za-z]\w*\s*\(")


def format_variables(variables: dict[str, Variable]) -> str:
    if not variables:
        return "(no variables)"
    lines = []
    for name, var in sorted(variables.items()):
        shown = "<uninitialized>" if var.value is None else repr(var.value)
        lines.append(f"{var.type.value:>8} {name} = {shown}")
    return "\n".join(lines)


def run_entry(src: str, variables: dict[str, Variable], verbose: bool = False) -> None:
    """Runs one REPL entry, mutating `variables` in place.

    Raises:
        TinycError: If the entry fails to lex, parse or evaluate.
    """
    trace = sys.stderr if verbose else None
    if PROGRAM_HEADER.match(src):
        Interpreter(src, trace=trace).parse()
        return
    Interpreter(src, trace=trace, variables=variables).run_statements()


def count_braces(line: str, in_string: bool = False) -> tuple[int, bool]:
    """Returns the net `{` minus `}` count outside string literals, and whether
    the line ends inside an open string.
    """
    depth = 0
    escaped = False
    for ch in line:
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
    return depth, in_string


def read_entry() -> str:
    src_lines: list[str] = []
    brace_count = 0
    in_string = False
    while True:
        prompt = ">>> " if not src_lines else "... "
        line = input(prompt)
        src_lines.append(line)
        depth, in_string = count_braces(line, in_string)
        brace_count += depth
        if brace_count <= 0:
            break
    return "\n".join(src_lines).strip()


def start_repl(verbose: bool = False) -> None:
    print("TINYC REPL. Type 'exit' or 'quit' to leave.")
    variables: dict[str, Variable] = {}

    while True:
        try:
            src = read_entry()
        except (EOFError, KeyboardInterrupt):
            print("\nExiting TINYC REPL.")
            return

        if not src or src.startswith("//"):
            continue
        if src in ("exit", "quit"):
            print("Exiting TINYC REPL.")
            return
        if src == "vars":
            print(format_variables(variables))
            continue
        if src == "reset":
            variables.clear()
            print("[ok] >>> Variables cleared.")
            continue
        if src == "verbose-mode":
            verbose = not verbose
            print(f"[mode] >>> Verbose mode {'ON' if verbose else 'OFF'}")
            continue

        try:
            run_entry(src, variables, verbose=verbose)
        except TinycError as e:
            print(f"[error] >>> {e}")
