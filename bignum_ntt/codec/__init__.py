# codec模块初始化文件

from .digits import is_number, encode, decode

__all__ = ['is_number', 'encode', 'decode']
