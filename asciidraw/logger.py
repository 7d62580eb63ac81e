# logger.py

import os, sys, logging
from typing import Optional
from functools import partial

class Logger:
    def __init__(self, name: str, logging_enabled: bool = False, log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        # The named logger is process-wide; drop whatever an earlier instance attached.
        self.close()
        if logging_enabled:
            self._logger.setLevel(logging.DEBUG)
            self._logger.propagate = True
            self._logger.addHandler(self._create_handler(log_file))
        else:
            self._logger.setLevel(logging.NOTSET)
            self._logger.propagate = False
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    def _create_handler(self, log_file: Optional[str]) -> logging.Handler:
        """Build a handler for the log file; "-" logs to stdout."""
        if log_file == "-":
            handler = logging.StreamHandler(sys.stdout)
        else:
            if not log_file:
                project_root = os.path.dirname(os.path.dirname(__file__))
                log_file = os.path.join(project_root, 'logs', 'asciidraw_debug.log')
            os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
            handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
        return handler

    def close(self) -> None:
        """Detach and close every handler on the underlying logger."""
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
