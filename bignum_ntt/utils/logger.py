# -*- coding: utf-8 -*-
import logging

from ..config import Config

def setup_logger(name, level=None):
    """
    获取带统一格式的日志记录器。
    多次调用不会重复添加 handler。
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(Config.LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level or Config.LOG_LEVEL)
    return logger
