"""
测试模块：NTT 变换与卷积引擎
文件路径: tests/test_ntt.py

验证内容：
1. 前向 + 逆向 + 归一化 还原原始序列
2. 前向变换结果等于朴素 DFT 的位反转排列
3. 基于 NTT 的循环卷积与 Schoolbook 算法一致
"""

import random
import unittest
import numpy as np
from unittest.mock import patch

from bignum_ntt.config import Config
from bignum_ntt.field import unity_root
from bignum_ntt.transform import NTT, ntt_engine, pointwise_multiply, normalize, cyclic_convolve

P = Config.PRIME

def bit_reverse(i, bits):
    return int('{:0{width}b}'.format(i, width=bits)[::-1], 2)

def naive_dft(values, k):
    w = unity_root(k)
    n = len(values)
    return [sum(values[i] * pow(w, i * j, P) for i in range(n)) % P for j in range(n)]

def schoolbook_cyclic(a, b):
    n = len(a)
    result = [0] * n
    for i in range(n):
        for j in range(n):
            result[(i + j) % n] = (result[(i + j) % n] + a[i] * b[j]) % P
    return result

class TestNTT(unittest.TestCase):

    def setUp(self):
        self.rng = random.Random(2022)

    def random_array(self, length, high=P - 1):
        return np.array([self.rng.randint(0, high) for _ in range(length)], dtype=np.uint64)

    def test_round_trip(self):
        """
        inverse(forward(x)) / 2^k == x
        """
        for k in range(1, 11):
            original = self.random_array(1 << k)
            array = original.copy()
            ntt_engine.forward(array)
            ntt_engine.inverse(array)
            normalize(array, k)
            np.testing.assert_array_equal(array, original, err_msg=f"k={k}")

    def test_constant_sequence(self):
        array = np.full(4, 5, dtype=np.uint64)
        ntt_engine.forward(array)
        np.testing.assert_array_equal(array, [20, 0, 0, 0])

    def test_impulse(self):
        array = np.zeros(16, dtype=np.uint64)
        array[0] = 1
        ntt_engine.forward(array)
        np.testing.assert_array_equal(array, np.ones(16, dtype=np.uint64))

    def test_forward_matches_naive_dft(self):
        """
        DIF 输出为位反转顺序: 位置 bit_reverse(j) 上是第 j 个频率分量
        """
        for k in (2, 3, 5):
            n = 1 << k
            values = self.random_array(n)
            expected = naive_dft([int(v) for v in values], k)

            array = values.copy()
            ntt_engine.forward(array)
            for j in range(n):
                self.assertEqual(int(array[bit_reverse(j, k)]), expected[j], f"k={k}, j={j}")

    def test_values_stay_in_field(self):
        array = np.full(64, P - 1, dtype=np.uint64)
        ntt_engine.forward(array)
        self.assertTrue((array < P).all())
        ntt_engine.inverse(array)
        self.assertTrue((array < P).all())

    def test_segment_transform_leaves_rest_untouched(self):
        array = self.random_array(16)
        before = array.copy()
        ntt_engine.transform(array, 8, 8, 1, False)
        np.testing.assert_array_equal(array[:8], before[:8])

        segment = before[8:].copy()
        ntt_engine.forward(segment)
        np.testing.assert_array_equal(array[8:], segment)

    def test_invalid_length(self):
        engine = NTT()
        for length in (0, 1, 3, 12):
            with self.assertRaises(ValueError):
                engine.forward(np.zeros(length, dtype=np.uint64))

    def test_non_contiguous_rejected(self):
        with self.assertRaises(ValueError):
            ntt_engine.forward(np.zeros(16, dtype=np.uint64)[::2])

    def test_cutoff_does_not_change_result(self):
        """
        递归与按层向量化两种路径结果一致
        """
        print("\n=== 测试递归 / 向量化切换点 ===")
        for length in (256, 4096):
            values = self.random_array(length)
            expected = values.copy()
            ntt_engine.forward(expected)
            for cutoff in (1, 2, 4, 64, 1 << 12):
                with patch.object(Config, 'TRANSFORM_CUTOFF', cutoff):
                    array = values.copy()
                    ntt_engine.forward(array)
                    np.testing.assert_array_equal(array, expected, err_msg=f"cutoff={cutoff}")
                    ntt_engine.inverse(array)
                    normalize(array, length.bit_length() - 1)
                    np.testing.assert_array_equal(array, values, err_msg=f"cutoff={cutoff}")


class TestConvolution(unittest.TestCase):

    def setUp(self):
        self.rng = random.Random(1024)

    def test_cyclic_convolve_small_digits(self):
        for n in (4, 8, 16):
            a = [self.rng.randint(0, 9) for _ in range(n)]
            b = [self.rng.randint(0, 9) for _ in range(n)]
            self.assertEqual(cyclic_convolve(a, b), schoolbook_cyclic(a, b))

    def test_cyclic_convolve_full_field(self):
        a = [self.rng.randint(0, P - 1) for _ in range(32)]
        b = [self.rng.randint(0, P - 1) for _ in range(32)]
        self.assertEqual(cyclic_convolve(a, b), schoolbook_cyclic(a, b))

    def test_cyclic_wraps_around(self):
        # x^3 * x = x^4 = 1 (mod x^4 - 1)
        self.assertEqual(cyclic_convolve([0, 0, 0, 1], [0, 1, 0, 0]), [1, 0, 0, 0])

    def test_cyclic_convolve_length_mismatch(self):
        with self.assertRaises(ValueError):
            cyclic_convolve([1, 2, 3, 4], [1, 2])

    def test_pointwise_multiply(self):
        a = np.array([2, P - 1, 0, 7], dtype=np.uint64)
        b = np.array([3, P - 1, 5, 1], dtype=np.uint64)
        pointwise_multiply(a, b)
        np.testing.assert_array_equal(a, [6, 1, 0, 7])

    def test_pointwise_square_in_place(self):
        a = np.array([3, P - 2, 10, 0], dtype=np.uint64)
        pointwise_multiply(a, a)
        np.testing.assert_array_equal(a, [9, 4, 100, 0])

    def test_pointwise_length_mismatch(self):
        with self.assertRaises(ValueError):
            pointwise_multiply(np.zeros(4, dtype=np.uint64), np.zeros(8, dtype=np.uint64))

    def test_normalize(self):
        for k in (1, 4, 30):
            array = np.full(4, (1 << k) % P, dtype=np.uint64)
            normalize(array, k)
            np.testing.assert_array_equal(array, np.ones(4, dtype=np.uint64))


if __name__ == '__main__':
    unittest.main()
