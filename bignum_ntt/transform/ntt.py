# -*- coding: utf-8 -*-
"""
Module 3: Modular Butterfly Transform - Number Theoretic Transform (NTT)
文件路径: bignum_ntt/transform/ntt.py

本模块实现了有限域 F(P), P = 3 * 2^30 + 1 上的快速傅里叶变换。
采用 radix-2 Cooley-Tukey 的 Decimation-In-Frequency 变体 (递归实现)：

    标准 FFT:             (x0, x4, x2, x6, x1, x5, x3, x7) --> (y0, y1, y2, y3, y4, y5, y6, y7)
    Decimation-In-Frequency: (x0, x1, x2, x3, x4, x5, x6, x7) --> (y0, y4, y2, y6, y1, y5, y3, y7)

前向变换接受自然顺序输入, 输出为位反转顺序。由于频域结果只用于逐点乘法,
随后的逆变换会自行恢复自然顺序, 所以整个过程不需要任何重排。
"""

import numpy as np

from ..config import Config
from ..field.math_utils import mod_add, mod_sub
from ..field.tables import UNITY_ROOTS, UNITY_ROOTS_INVERSE, MAX_CONVOLUTION_POWER
from ..utils.logger import setup_logger

logger = setup_logger(__name__)


class NTT:
    def __init__(self):
        self.p = Config.PRIME
        self._p = np.uint64(self.p)

        # 只读引用, 不复制
        self.roots = UNITY_ROOTS
        self.roots_inv = UNITY_ROOTS_INVERSE

    def _twiddles(self, root, count):
        """
        生成旋转因子 root^0, root^1, ..., root^(count-1) (count 为 2 的幂)。

        不做模幂运算：已得到前 m 个幂后, 乘以 root^m 得到接下来的 m 个,
        每个元素只需一次模乘。
        """
        tw = np.empty(count, dtype=np.uint64)
        tw[0] = 1
        filled = 1
        step = root
        while filled < count:
            tw[filled:2 * filled] = tw[:filled] * np.uint64(step) % self._p
            step = step * step % self.p
            filled *= 2
        return tw

    def _reduce(self, t):
        # t 属于 [0, 2P), 一次条件减法即可完成取模
        np.subtract(t, self._p, out=t, where=t >= self._p)
        return t

    def transform(self, array, start, length, root_index, inverse):
        """
        对 array[start:start+length] 原地执行 NTT。

        length 必须是 2 的幂, root_index 选取 length 次本原单位根
        (root_index = log2(length) - 2)。inverse=True 时使用单位根的逆元,
        且结果未乘以 1/length, 需由调用方归一化。

        蝶形运算 (H1, H2 为前后两半, W 为 length 次单位根):
            前向:  H'1(i) =  H1(i) + H2(i)
                   H'2(i) = (H1(i) - H2(i)) * W^i
            逆向:  H'1(i) =  H1(i) + W^i * H2(i)
                   H'2(i) =  H1(i) - W^i * H2(i)
        """
        half = length >> 1

        if length == 2:
            a1 = int(array[start])
            a2 = int(array[start + 1])
            array[start] = mod_add(a1, a2, self.p)
            array[start + 1] = mod_sub(a1, a2, self.p)
            return

        if length <= Config.TRANSFORM_CUTOFF:
            self._transform_levels(array[start:start + length], root_index, inverse)
            return

        if inverse:
            # 逆变换先递归, 再合并两半
            # 递归深度不超过 30
            self.transform(array, start, half, root_index - 1, True)
            self.transform(array, start + half, half, root_index - 1, True)

        self._butterflies(array[start:start + half], array[start + half:start + length], root_index, inverse)

        if not inverse:
            self.transform(array, start, half, root_index - 1, False)
            self.transform(array, start + half, half, root_index - 1, False)

    def _butterflies(self, first, second, root_index, inverse):
        """
        合并前后两半 first, second (形状 (..., half) 的视图, 原地写回)。
        half 为 1 时旋转因子恒为 1, 不查表。
        """
        half = first.shape[-1]
        tw = None
        if half > 1:
            root = self.roots_inv[root_index] if inverse else self.roots[root_index]
            tw = self._twiddles(root, half)

        if inverse and tw is not None:
            a2 = second * tw % self._p
        else:
            a2 = second

        t1 = self._reduce(first + a2)
        t2 = self._reduce(first + self._p - a2)

        first[...] = t1
        if inverse or tw is None:
            second[...] = t2
        else:
            second[...] = t2 * tw % self._p

    def _transform_levels(self, segment, root_index, inverse):
        """
        短序列不再递归：同一层的所有子段排成矩阵 (行数 = 子段数),
        一次 numpy 运算完成整层蝶形运算, 结果与递归版本完全相同。
        segment 必须是连续数组的视图, reshape 才不会复制。
        """
        if not segment.flags.c_contiguous:
            raise ValueError("NTT works in place on contiguous arrays only")
        length = len(segment)
        levels = length.bit_length() - 1
        order = reversed(range(levels)) if inverse else range(levels)
        for level in order:
            size = length >> level
            view = segment.reshape(-1, size)
            self._butterflies(view[:, :size >> 1], view[:, size >> 1:], root_index - level, inverse)

    def _power_of(self, array):
        length = len(array)
        k = length.bit_length() - 1
        if length < 2 or length != 1 << k or k > MAX_CONVOLUTION_POWER:
            raise ValueError(f"NTT length must be a power of two between 2 and 2^{MAX_CONVOLUTION_POWER}, got {length}")
        return k

    def forward(self, array):
        """
        前向 NTT (整个数组)
        输入: 自然顺序的系数 (uint64, 元素属于 [0, P))
        输出: 位反转顺序的频域值
        """
        k = self._power_of(array)
        logger.debug("forward NTT, length 2^%d", k)
        self.transform(array, 0, len(array), k - 2, False)
        return array

    def inverse(self, array):
        """
        逆向 NTT (整个数组), 未归一化
        输入: forward() 产生的位反转顺序频域值
        输出: 自然顺序的系数 * 2^k
        """
        k = self._power_of(array)
        logger.debug("inverse NTT, length 2^%d", k)
        self.transform(array, 0, len(array), k - 2, True)
        return array


# 单例模式：创建一个全局引擎实例供其他模块调用
ntt_engine = NTT()
