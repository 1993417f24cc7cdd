import logging
from typing import Optional

from mindmeld.config import RunConfig
from mindmeld.console import Console, TerminalConsole
from mindmeld.interpreter import DirectInterpreter, ExecutionResult, TokenizedInterpreter, Tracer
from mindmeld.sanitizer import Sanitizer
from mindmeld.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


def run_program(source: str, config: Optional[RunConfig] = None, console: Optional[Console] = None,
                tracer: Optional[Tracer] = None) -> ExecutionResult:
    """Sanitize raw source and execute it with the strategy selected by config.

    Exactly one interpreter runs per call. Without a console the program
    talks to the terminal.
    """
    config = config or RunConfig()
    console = console if console is not None else TerminalConsole()
    stream = Sanitizer(config).sanitize(source)

    if config.tokenized:
        tokens = Tokenizer().tokenize(stream)
        result = TokenizedInterpreter(config, console, tracer).run(tokens)
    else:
        result = DirectInterpreter(config, console, tracer).run(stream)

    logger.debug("Finished after %d steps, %d bytes of output", result.steps, len(result.output))
    return result
