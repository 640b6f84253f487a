"""
日誌與計時工具

所有模組透過 get_logger() 取得 "segkit.<name>" 子 logger。
套件預設只掛 NullHandler，import 本套件不會輸出任何內容；
需要輸出時由應用程式設定 logging，或呼叫 setup_logger() / enable_debug_logging()。

使用方式:
    from segkit.utils.logger import get_logger, TimingContext

    logger = get_logger("dictionary.trie")
    with TimingContext("load_dictionary", logger):
        ...
"""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Callable, Optional

ROOT_LOGGER_NAME = "segkit"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

_timing_enabled = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得套件內的 logger

    Args:
        name: 子模組名稱，例如 "dictionary.trie"；
              已帶 "segkit" 前綴的名稱（如 __name__）會原樣使用

    Returns:
        logging.Logger
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    為套件 logger 掛上一個 StreamHandler（重複呼叫只會調整等級）

    Args:
        level: 日誌等級
        fmt: 日誌格式

    Returns:
        logging.Logger: 套件根 logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler) and getattr(handler, "_segkit_handler", False):
            handler.setLevel(level)
            return logger

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    handler._segkit_handler = True
    logger.addHandler(handler)
    return logger


def enable_debug_logging() -> logging.Logger:
    """開啟 DEBUG 等級輸出（會顯示每次詞典命中與識別結果）"""
    return setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> logging.Logger:
    """開啟計時輸出：TimingContext 會以 INFO 等級記錄耗時"""
    global _timing_enabled
    _timing_enabled = True
    return setup_logger(level=logging.INFO)


class TimingContext:
    """
    計時 context manager

    離開區塊時以指定等級記錄耗時，並呼叫可選的回呼 (operation, elapsed)。
    若已呼叫 enable_timing_logging()，等級會提升為 INFO。

    範例:
        >>> with TimingContext("add_all", logger, logging.DEBUG):
        ...     dictionary.add_all(words)
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger("timing")
        self.level = level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        level = max(self.level, logging.INFO) if _timing_enabled else self.level
        self.logger.log(level, f"[Timing] {self.operation}: {self.elapsed * 1000:.2f} ms")
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    TimingContext 的裝飾器版本

    Args:
        operation: 記錄用名稱，預設為函數的 __qualname__
        level: 日誌等級
    """

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__
        logger = get_logger(func.__module__)

        @wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, logger, level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
