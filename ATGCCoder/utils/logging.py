import logging
import sys
from typing import Optional, Union


class ATGCLogger:
    def __init__(self, name: str = "ATGCCoder", level: int = logging.INFO):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)

        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s",
            datefmt="%H:%M:%S"
        )
        handler.setFormatter(formatter)

        if not self.logger.hasHandlers():
            self.logger.addHandler(handler)

    def set_level(self, level: Union[int, str]) -> None:
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
        self.logger.setLevel(level)
        for handler in self.logger.handlers:
            handler.setLevel(level)

    def info(self, msg: str) -> None:
        self.logger.info(msg)

    def debug(self, msg: str) -> None:
        self.logger.debug(msg)

    def warning(self, msg: str) -> None:
        self.logger.warning(msg)

    def error(self, msg: str) -> None:
        self.logger.error(msg)

    def transform(self, operation: str, source: str, n_in: int, n_out: int, **kwargs) -> None:
        msg = f"{operation} | {source} | in: {n_in} | out: {n_out}"
        for k, v in kwargs.items():
            if isinstance(v, float):
                msg += f" | {k}: {v:.4f}"
            else:
                msg += f" | {k}: {v}"
        self.debug(msg)


_logger: Optional[ATGCLogger] = None

def get_logger() -> ATGCLogger:
    global _logger
    if _logger is None:
        _logger = ATGCLogger()
    return _logger
