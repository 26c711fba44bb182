# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
# 
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

import logging
from os import getenv, getpid

class MultiLineFormatter(logging.Formatter):
    """Logging formatter that repeats the record prefix on every line.

    Tracebacks and multi-line messages (the generator's page summary, for
    example) otherwise lose the timestamp and logger name after the first line,
    which makes them hard to grep out of gunicorn's combined output.
    """
    def format(self, record):
        message = record.getMessage()
        if "\n" not in message:
            return super().format(record)

        lines = []
        for line in message.splitlines():
            line_record = logging.makeLogRecord(record.__dict__)
            line_record.msg = line
            line_record.args = None
            line_record.exc_info = line_record.exc_text = line_record.stack_info = None
            lines.append(super().format(line_record))
        if record.exc_info:
            lines.append(self.formatException(record.exc_info))
        return "\n".join(lines)

class WorkerIdFilter(logging.Filter):
    """Adds a ``worker_id`` attribute so the format string can show which process logged."""

    def filter(self, record):
        worker_id = getenv("GUNICORN_WORKER_ID")
        record.worker_id = f"worker{worker_id}" if worker_id else f"PID {getpid()}"
        return True

def configure_logging(level: int) -> logging.Handler:
    """Install the shared stream handler on the root logger and return it."""
    formatter = MultiLineFormatter('[%(worker_id)s] %(asctime)-21s %(levelname)-8s %(name)-12s | %(message)s', datefmt="%Y-%m-%d %H:%M:%S")
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    handler.addFilter(WorkerIdFilter())
    logging.basicConfig(level=level, handlers=[handler])
    logging.getLogger("blog").setLevel(level)
    return handler
