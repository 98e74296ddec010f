# field模块初始化文件

from .math_utils import mod_inverse, mod_add, mod_sub, mod_mul, two_adicity
from .tables import (
    PRIME, MAX_CONVOLUTION_POWER, MIN_CONVOLUTION_POWER, MAX_CONVOLUTION_LENGTH, MAX_OPERANDS_LENGTH,
    UNITY_ROOTS, UNITY_ROOTS_INVERSE, POWS_OF_2_INVERSE,
    unity_root, unity_root_inverse, pow2_inverse, derive_root_tables,
)

__all__ = [
    'mod_inverse', 'mod_add', 'mod_sub', 'mod_mul', 'two_adicity',
    'PRIME', 'MAX_CONVOLUTION_POWER', 'MIN_CONVOLUTION_POWER', 'MAX_CONVOLUTION_LENGTH', 'MAX_OPERANDS_LENGTH',
    'UNITY_ROOTS', 'UNITY_ROOTS_INVERSE', 'POWS_OF_2_INVERSE',
    'unity_root', 'unity_root_inverse', 'pow2_inverse', 'derive_root_tables',
]
