#!/usr/bin/env python3
"""
MindMeld command line interpreter.

    mindmeld program.mm              paired source, direct execution
    mindmeld -s -t program.mm        switch-mode source, tokenized execution
    mindmeld --trace program.mm      print every step to stderr
"""

import argparse
import logging
import sys
from typing import List, Optional

from mindmeld.config import RunConfig, load_config
from mindmeld.console import Console, TerminalConsole
from mindmeld.debugger import StepTracer
from mindmeld.errors import ConfigError, MindMeldError, SourceUnreadable
from mindmeld.runner import run_program
from mindmeld.sanitizer import Sanitizer
from mindmeld.source import prompt_for_path, read_source

EXIT_OK = 0
EXIT_UNREADABLE = 1
EXIT_FAILED = 2

PAUSE_PROMPT = "Press any key to continue..."


def pause(console: Console):
    print(PAUSE_PROMPT, flush=True)
    console.read_key()


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="mindmeld", description="Run a MindMeld (two-cursor BrainFuck) program")
    ap.add_argument("path", nargs="?", help="Source file; prompted for if omitted")
    ap.add_argument("-s", "--switch", action="store_true", default=None,
                    help="Switch-mode source: a bare A or B selects the cursor for following operations")
    ap.add_argument("-t", "--tokenize", action="store_true", default=None,
                    help="Precompute loop jumps and run the tokenized interpreter")
    ap.add_argument("--config", help="YAML file with run options")
    ap.add_argument("--max-steps", type=int, help="Stop after this many instructions")
    ap.add_argument("--tape-size", type=int, help="Number of tape cells (default 30000)")
    ap.add_argument("--trace", action="store_true", help="Print every step to stderr")
    ap.add_argument("--quiet-instructions", action="store_true",
                    help="Do not print the sanitized instruction stream before running")
    ap.add_argument("--no-pause", action="store_true", help="Exit without waiting for a key")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return ap


def resolve_config(args: argparse.Namespace) -> RunConfig:
    """Defaults < YAML file < MINDMELD_* environment < command line flags."""
    config = load_config(args.config) if args.config else RunConfig()
    config = RunConfig.from_env(base=config)
    return config.merged(
        switch_mode=args.switch,
        tokenized=args.tokenize,
        max_steps=args.max_steps,
        tape_size=args.tape_size,
        show_instructions=False if args.quiet_instructions else None,
        pause_on_exit=False if args.no_pause else None,
    )


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    console = console if console is not None else TerminalConsole()

    try:
        config = resolve_config(args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILED

    try:
        path = args.path or prompt_for_path()
    except EOFError:
        print("No source path given", file=sys.stderr)
        if config.pause_on_exit:
            pause(console)
        return EXIT_UNREADABLE

    try:
        source = read_source(path)
    except SourceUnreadable as e:
        print(e, file=sys.stderr)
        if config.pause_on_exit:
            pause(console)
        return EXIT_UNREADABLE

    if config.show_instructions:
        print(Sanitizer(config).sanitize(source), flush=True)

    tracer = StepTracer() if args.trace else None
    try:
        result = run_program(source, config, console, tracer)
    except MindMeldError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return EXIT_FAILED

    if result.hit_step_limit:
        print(f"\nStopped after {result.steps} steps", file=sys.stderr)
    print()
    if config.pause_on_exit:
        pause(console)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
