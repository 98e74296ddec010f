# -*- coding: utf-8 -*-
"""
Module 1: Field Constants
文件路径: bignum_ntt/field/tables.py

有限域 F(P), P = 3 * 2^30 + 1 上的预计算常量表：
1. 2^2 ... 2^30 次本原单位根 (前向变换)
2. 上述单位根的逆元 (逆向变换)
3. 2^1 ... 2^30 的逆元 (逆变换后的归一化)

表在导入时一次性定义, 之后只读。
"""

from ..config import Config
from .math_utils import mod_inverse, mod_mul, two_adicity

PRIME = Config.PRIME
MAX_CONVOLUTION_POWER = Config.MAX_CONVOLUTION_POWER
MIN_CONVOLUTION_POWER = Config.MIN_CONVOLUTION_POWER
MAX_CONVOLUTION_LENGTH = Config.MAX_CONVOLUTION_LENGTH
MAX_OPERANDS_LENGTH = Config.MAX_OPERANDS_LENGTH

# UNITY_ROOTS[k - 2] 是 2^k 次本原单位根
UNITY_ROOTS = (
    2207278994, 613406496,  741264833,  122509875,  2746140649,
    1068583503, 708503697,  1363205573, 746485901,  494608121,
    3162603993, 1590401422, 2831319379, 2823078715, 1003735924,
    1287601835, 896867674,  1045839643, 1852389738, 212052632,
    52829935,   882575513,  3098264284, 891569319,  498210922,
    815730721,  28561,      169,        13,
)

# UNITY_ROOTS_INVERSE[k - 2] = UNITY_ROOTS[k - 2]^-1 mod P
UNITY_ROOTS_INVERSE = (
    1013946479, 1031213943, 2526611335, 3154294145, 1509186504,
    1952507014, 1656617218, 1960695667, 246573911,  531227837,
    2741813336, 1784637687, 2525118598, 1994068290, 1548750826,
    2147810961, 1278746392, 1122183331, 2491371943, 1063245489,
    1440618679, 2378738570, 658561260,  1732174135, 2825681409,
    160703398,  2824676726, 628996690,  1734506024,
)

# POWS_OF_2_INVERSE[k - 1] = (2^k)^-1 mod P
POWS_OF_2_INVERSE = (
    1610612737, 2415919105, 2818572289, 3019898881, 3120562177,
    3170893825, 3196059649, 3208642561, 3214934017, 3218079745,
    3219652609, 3220439041, 3220832257, 3221028865, 3221127169,
    3221176321, 3221200897, 3221213185, 3221219329, 3221222401,
    3221223937, 3221224705, 3221225089, 3221225281, 3221225377,
    3221225425, 3221225449, 3221225461, 3221225467, 3221225470,
)


def _check_power(k, lowest):
    if not lowest <= k <= MAX_CONVOLUTION_POWER:
        raise ValueError(f"2^{k} is outside the supported range 2^{lowest}..2^{MAX_CONVOLUTION_POWER}")


def unity_root(k):
    """2^k 次本原单位根, 2 <= k <= 30"""
    _check_power(k, MIN_CONVOLUTION_POWER)
    return UNITY_ROOTS[k - MIN_CONVOLUTION_POWER]


def unity_root_inverse(k):
    """2^k 次本原单位根的逆元, 2 <= k <= 30"""
    _check_power(k, MIN_CONVOLUTION_POWER)
    return UNITY_ROOTS_INVERSE[k - MIN_CONVOLUTION_POWER]


def pow2_inverse(k):
    """2^k 在 F(P) 中的逆元, 1 <= k <= 30"""
    _check_power(k, 1)
    return POWS_OF_2_INVERSE[k - 1]


def derive_root_tables(generator=Config.UNITY_ROOT_GENERATOR, p=PRIME):
    """
    由 2^30 次本原单位根重新计算三张常量表。

    若 w 是 2^k 次本原单位根, 则 w^2 是 2^(k-1) 次本原单位根,
    因此从 generator 出发逐次平方即可得到全部根 (从高次到低次)。

    返回 (roots, roots_inverse, pows_of_2_inverse), 与上面的表顺序一致。
    """
    if two_adicity(p) < MAX_CONVOLUTION_POWER:
        raise ValueError(f"F({p}) has no primitive 2^{MAX_CONVOLUTION_POWER}-th root of unity")

    roots = []
    w = generator % p
    for _ in range(MAX_CONVOLUTION_POWER - MIN_CONVOLUTION_POWER + 1):
        roots.append(w)
        w = mod_mul(w, w, p)
    roots.reverse()

    roots_inverse = [mod_inverse(w, p) for w in roots]
    pows_inverse = [mod_inverse(1 << k, p) for k in range(1, MAX_CONVOLUTION_POWER + 1)]
    return tuple(roots), tuple(roots_inverse), tuple(pows_inverse)
