# -*- coding: utf-8 -*-
"""
Module 2: Digit Codec
文件路径: bignum_ntt/codec/digits.py

十进制数字串 <-> 多项式系数数组 的相互转换。
数字串按 a0 + a1 * 10 + a2 * 10^2 + ... 的形式存放, 数组下标 i 对应 10^i。
"""

import numpy as np

_ZERO = ord('0')

def is_number(value):
    """
    判断 value 是否为非空的 ASCII 十进制数字串。
    """
    if not isinstance(value, str) or len(value) == 0:
        return False
    return value.isascii() and value.isdigit()

def encode(value, length):
    """
    将数字串按从低位到高位的顺序放入长度为 length 的 uint64 数组。
    数组剩余部分为 0。
    """
    if length < len(value):
        raise ValueError(f"Array length {length} is shorter than the operand ({len(value)} digits)")

    array = np.zeros(length, dtype=np.uint64)
    digits = np.frombuffer(value.encode('ascii'), dtype=np.uint8)
    array[:len(digits)] = digits[::-1] - _ZERO
    return array

def decode(array):
    """
    将卷积得到的系数数组规范化为十进制数字串。

    从最低位 (下标 0) 开始逐位处理, 把超出 [0..9] 的部分进位到高位。
    最后一位之后剩余的进位继续拆成数字, 然后去掉前导零。
    """
    digits = []
    carry = 0
    for coefficient in np.asarray(array).tolist():
        carry += coefficient
        digits.append(chr(_ZERO + carry % 10))
        carry //= 10

    while carry:
        digits.append(chr(_ZERO + carry % 10))
        carry //= 10

    result = ''.join(reversed(digits)).lstrip('0')
    return result or '0'
