# utils模块初始化文件

from .logger import setup_logger

__all__ = ['setup_logger']
