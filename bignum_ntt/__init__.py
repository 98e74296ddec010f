# bignum_ntt 包初始化文件

from .config import Config
from .arithmetic import (
    ErrorKind, MultiplicationError, InvalidOperandError, OperandTooLargeError,
    ConvolutionTooLargeError, MultiplyResult,
    multiply, square, try_multiply, try_square,
)

__version__ = "0.1.0"

__all__ = [
    'Config',
    'ErrorKind', 'MultiplicationError', 'InvalidOperandError', 'OperandTooLargeError',
    'ConvolutionTooLargeError', 'MultiplyResult',
    'multiply', 'square', 'try_multiply', 'try_square',
]
