# -*- coding: utf-8 -*-
"""
Module 4: Convolution Engine
文件路径: bignum_ntt/transform/convolution.py

卷积定理：两个序列 Fourier 像的逐点乘积是它们卷积的 Fourier 像,
在有限域 F(P) 上同样成立。
"""

import numpy as np

from ..config import Config
from ..field.tables import pow2_inverse
from .ntt import ntt_engine

_P = np.uint64(Config.PRIME)

def pointwise_multiply(array1, array2):
    """
    频域逐点乘法, 结果原地写入 array1。
    array1 与 array2 可以是同一个数组 (求平方)。
    """
    if array1.shape != array2.shape:
        raise ValueError(f"Length mismatch: {array1.shape} vs {array2.shape}")
    np.multiply(array1, array2, out=array1)
    np.remainder(array1, _P, out=array1)
    return array1

def normalize(array, k):
    """
    逆变换后的结果需要乘以 1/2^k, 在 F(P) 中即乘以 2^k 的逆元。
    """
    np.multiply(array, np.uint64(pow2_inverse(k)), out=array)
    np.remainder(array, _P, out=array)
    return array

def cyclic_convolve(coeffs1, coeffs2):
    """
    计算两个等长 (2 的幂) 系数序列在 F(P) 上的循环卷积。
    输入为任意整数列表, 先约减到 [0, P)。
    """
    if len(coeffs1) != len(coeffs2):
        raise ValueError(f"Length mismatch: {len(coeffs1)} vs {len(coeffs2)}")

    a = np.array([c % Config.PRIME for c in coeffs1], dtype=np.uint64)
    b = np.array([c % Config.PRIME for c in coeffs2], dtype=np.uint64)

    ntt_engine.forward(a)
    ntt_engine.forward(b)
    pointwise_multiply(a, b)
    ntt_engine.inverse(a)
    normalize(a, len(a).bit_length() - 1)
    return [int(x) for x in a]
