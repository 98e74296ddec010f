# -*- coding: utf-8 -*-
from ..config import Config

P = Config.PRIME

def mod_inverse(a, p=P):
    """
    求 a 在素数域 F(p) 中的逆元 (费马小定理: a^(p-2) = a^-1 mod p)
    """
    if a % p == 0:
        raise ValueError(f'modular inverse of {a} mod {p} does not exist')
    return pow(a, p - 2, p)

def mod_add(a, b, p=P):
    # a, b 属于 [0, p), 和属于 [0, 2p), 一次条件减法即可
    t = a + b
    return t if t < p else t - p

def mod_sub(a, b, p=P):
    # 先加 p 防止出现负数
    t = a - b + p
    return t if t < p else t - p

def mod_mul(a, b, p=P):
    return a * b % p

def two_adicity(p=P):
    """
    计算 p - 1 中因子 2 的个数, 即域中本原单位根可达到的最大 2 的幂次。
    """
    n = p - 1
    adicity = 0
    while n & 1 == 0:
        adicity += 1
        n >>= 1
    return adicity
