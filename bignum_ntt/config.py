# -*- coding: utf-8 -*-
import os

class Config:
    """
    系统全局配置 - NTT 大整数乘法引擎
    """

    # --- 有限域参数 ---
    # P = 3 * 2^30 + 1, 乘法群阶 P - 1 = 3 * 2^30
    PRIME = 3 * (1 << 30) + 1

    # F(P) 中存在 2^30 次本原单位根, 因此 FFT 长度最大为 2^30
    MAX_CONVOLUTION_POWER = 30
    MAX_CONVOLUTION_LENGTH = 1 << MAX_CONVOLUTION_POWER

    # 根表从长度 4 开始 (长度 2 的蝶形运算不需要旋转因子)
    MIN_CONVOLUTION_POWER = 2

    # 长度不超过该值的子变换按层整体向量化, 不再逐段递归
    TRANSFORM_CUTOFF = 1 << 10

    # 13 是 F(P) 中的 2^30 次本原单位根, 其余根由逐次平方得到
    UNITY_ROOT_GENERATOR = 13

    # 十进制卷积系数最大为 min(n, m) * 9 * 9
    # 为避免系数在模 P 下回绕, 较小操作数的位数不能超过 Floor(P / 81) (约 4000 万位)
    MAX_OPERANDS_LENGTH = PRIME // 81

    # --- 日志参数 ---
    LOG_LEVEL = os.environ.get("BIGNUM_NTT_LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT = "[%(name)s] %(message)s"
