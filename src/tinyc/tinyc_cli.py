"""
TINYC CLI Entrypoint.

This module provides the command-line interface for running TINYC programs.

Features:
    - Read source from a file or an inline string.
    - Run the program, printing `println` output as it executes.
    - Dump the token stream instead of running.
    - Trace every matched token to stderr.
    - Launch an interactive REPL.

Example usage:
    tinyc hello.tc
    tinyc -s 'int main() { println("hi"); }'
    tinyc hello.tc --tokens
    tinyc --repl

Functions:
    run_tinyc(source: str, is_string: bool = False, tokens: bool = False, verbose: bool = False) -> None:
        Executes the full TINYC pipeline (read → lex/parse/evaluate → status).

    main(argv: list[str] | None = None) -> int:
        Parses CLI arguments, dispatches, and returns the process exit status.
"""

import argparse
import sys

from tinyc.tinyc_errors import TinycError
from tinyc.tinyc_interpreter import Interpreter
from tinyc.tinyc_lexer import CharacterStream, Lexer

SUCCESS_MESSAGE = "Program parsed successfully."


def run_tinyc(
    source: str,
    is_string: bool = False,
    tokens: bool = False,
    verbose: bool = False,
) -> None:
    """
    Run the TINYC toolchain on a program.

    Args:
        source (str): Path to the program file, or the program itself with `is_string`.
        is_string (bool): If True, treats `source` as raw code instead of a file path.
        tokens (bool): If True, prints the token stream instead of running the program.
        verbose (bool): If True, traces every matched token to stderr.

    Raises:
        OSError: If the source file cannot be read.
        TinycError: On the first lexical, syntax or semantic error.

    Side Effects:
        - Prints `println` output, then the success message, to stdout.
    """
    # 1. Read source
    if not is_string:
        with open(source, encoding="utf-8") as f:
            source = f.read()

    lexer = Lexer(CharacterStream(source))

    # 2. Token dump
    if tokens:
        for tok in lexer:
            print(f"{tok.line}:{tok.col}\t{tok!r}")
        return

    # 3. Parse and evaluate in one pass
    interpreter = Interpreter(lexer, trace=sys.stderr if verbose else None)
    interpreter.parse()
    print(SUCCESS_MESSAGE)


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the TINYC CLI.

    Launches the REPL if no source is given or `--repl` is passed; otherwise
    runs the program. Errors are reported on stderr as `Error: <message>`.

    Returns:
        int: 0 on success, 1 on any error.
    """
    parser = argparse.ArgumentParser(prog="tinyc")
    parser.add_argument("source", nargs="?", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "--tokens", action="store_true", help="Print the token stream and exit"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Trace matched tokens to stderr"
    )
    parser.add_argument(
        "--repl", action="store_true", help="Launch interactive REPL"
    )

    args = parser.parse_args(argv)

    if args.repl or args.source is None:
        from tinyc.tinyc_repl import start_repl

        start_repl(verbose=args.verbose)
        return 0

    try:
        run_tinyc(
            source=args.source,
            is_string=args.string,
            tokens=args.tokens,
            verbose=args.verbose,
        )
    except OSError:
        print(f"Error: Could not open input file '{args.source}'", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(
            f"Error: Input file '{args.source}' is not valid UTF-8 ({e.reason})",
            file=sys.stderr,
        )
        return 1
    except TinycError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
