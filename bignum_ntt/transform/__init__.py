# transform模块初始化文件

from .ntt import NTT, ntt_engine
from .convolution import pointwise_multiply, normalize, cyclic_convolve

__all__ = ['NTT', 'ntt_engine', 'pointwise_multiply', 'normalize', 'cyclic_convolve']
