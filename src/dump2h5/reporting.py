"""Reporting of fatal run errors to the user."""

import logging
import sys
from typing import Optional, TextIO

logger = logging.getLogger(__name__)


class ErrorReporter:
    """Writes ``<program>: <message>`` lines for errors that end a run.

    The command-line entry point owns one instance and is the only
    place that turns an exception into an exit status.
    """

    def __init__(self, program_name: str, stream: Optional[TextIO] = None):
        self.program_name = program_name
        self.stream = stream if stream is not None else sys.stderr

    def fatal(self, exc: BaseException) -> int:
        """Report ``exc`` and return the exit status to use."""
        logger.debug('run aborted', exc_info=exc)
        message = str(exc).rstrip('\n')
        self.stream.write(f'{self.program_name}: {message}\n')
        self.stream.flush()
        return 1
