# arithmetic模块初始化文件

from .errors import (
    ErrorKind, MultiplicationError, InvalidOperandError, OperandTooLargeError,
    ConvolutionTooLargeError, MultiplyResult,
)
from .multiplier import convolution_power, multiply, square, try_multiply, try_square

__all__ = [
    'ErrorKind', 'MultiplicationError', 'InvalidOperandError', 'OperandTooLargeError',
    'ConvolutionTooLargeError', 'MultiplyResult',
    'convolution_power', 'multiply', 'square', 'try_multiply', 'try_square',
]
