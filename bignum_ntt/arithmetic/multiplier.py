# -*- coding: utf-8 -*-
"""
Module 5: Multiply / Square Orchestration
文件路径: bignum_ntt/arithmetic/multiplier.py

大整数乘法 = 十进制数字多项式的卷积 + 进位规范化：
数字串 -> 系数数组 -> 前向 NTT -> 逐点乘法 -> 逆向 NTT -> 归一化 -> 数字串

每次调用相互独立, 不保留任何状态。所有检查都在分配数组之前完成。
"""

from ..config import Config
from ..codec.digits import is_number, encode, decode
from ..transform.ntt import ntt_engine
from ..transform.convolution import pointwise_multiply, normalize
from ..utils.logger import setup_logger
from .errors import (
    MultiplicationError, InvalidOperandError, OperandTooLargeError,
    ConvolutionTooLargeError, MultiplyResult,
)

logger = setup_logger(__name__)

def convolution_power(result_length):
    """
    FFT 只处理长度为 2^k 的序列。
    找到最小的 k 使结果 (result_length 位) 能放入长度 2^k 的数组, 且 k >= 2。
    """
    k = max(Config.MIN_CONVOLUTION_POWER, (result_length - 1).bit_length())
    if k > Config.MAX_CONVOLUTION_POWER:
        raise ConvolutionTooLargeError(
            f"Too large convolution length: 2^{k} > 2^{Config.MAX_CONVOLUTION_POWER}")
    return k

def multiply(value1, value2, validate=False):
    """
    计算两个十进制数字串的乘积。

    validate=False 时 (默认, 性能优先) 调用方保证输入是合法的数字串。
    结果不含前导零, 除非结果就是 "0"。
    """
    if validate and not (is_number(value1) and is_number(value2)):
        logger.info("rejected operands: not decimal digit strings")
        raise InvalidOperandError("Invalid operands")

    # 只有两个操作数都超长时才拒绝：卷积系数上界取决于较短的操作数
    limit = Config.MAX_OPERANDS_LENGTH
    if len(value1) > limit and len(value2) > limit:
        logger.info("rejected operands: %d and %d digits exceed %d", len(value1), len(value2), limit)
        raise OperandTooLargeError("Maximum operands size exceeded")

    k = convolution_power(len(value1) + len(value2))
    length = 1 << k
    logger.debug("multiply %d x %d digits, convolution length 2^%d", len(value1), len(value2), k)

    array1 = encode(value1, length)
    array2 = encode(value2, length)

    # 卷积结果写入第一个数组
    ntt_engine.forward(array1)
    ntt_engine.forward(array2)
    pointwise_multiply(array1, array2)

    # 第二个数组不再需要, 提前释放
    del array2

    ntt_engine.inverse(array1)
    normalize(array1, k)

    return decode(array1)

def square(value, validate=False):
    """
    计算数字串的平方。
    只需一个数组和两次 NTT (乘法需要两个数组和三次 NTT)。
    """
    if validate and not is_number(value):
        logger.info("rejected operand: not a decimal digit string")
        raise InvalidOperandError("Invalid operand")

    if len(value) > Config.MAX_OPERANDS_LENGTH:
        logger.info("rejected operand: %d digits exceed %d", len(value), Config.MAX_OPERANDS_LENGTH)
        raise OperandTooLargeError("Maximum operand size exceeded")

    k = convolution_power(2 * len(value))
    length = 1 << k
    logger.debug("square %d digits, convolution length 2^%d", len(value), k)

    array = encode(value, length)

    ntt_engine.forward(array)
    pointwise_multiply(array, array)

    ntt_engine.inverse(array)
    normalize(array, k)

    return decode(array)

def try_multiply(value1, value2, validate=False):
    """
    同 multiply, 但不抛出异常, 返回 MultiplyResult
    """
    try:
        return MultiplyResult.success(multiply(value1, value2, validate))
    except MultiplicationError as e:
        return MultiplyResult.failure(e)

def try_square(value, validate=False):
    """
    同 square, 但不抛出异常, 返回 MultiplyResult
    """
    try:
        return MultiplyResult.success(square(value, validate))
    except MultiplicationError as e:
        return MultiplyResult.failure(e)
