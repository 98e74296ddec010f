# -*- coding: utf-8 -*-
from enum import Enum

class ErrorKind(Enum):
    INVALID_OPERAND = "invalid_operand"
    OPERAND_TOO_LARGE = "operand_too_large"
    CONVOLUTION_TOO_LARGE = "convolution_too_large"


class MultiplicationError(ValueError):
    """
    乘法入口处的参数错误基类, kind 标明具体错误类型
    """
    kind = None


class InvalidOperandError(MultiplicationError):
    # 操作数为空或包含非数字字符 (仅在 validate=True 时检查)
    kind = ErrorKind.INVALID_OPERAND


class OperandTooLargeError(MultiplicationError):
    # 卷积系数可能在模 P 下回绕
    kind = ErrorKind.OPERAND_TOO_LARGE


class ConvolutionTooLargeError(MultiplicationError):
    # 需要的变换长度超过 2^30
    kind = ErrorKind.CONVOLUTION_TOO_LARGE


class MultiplyResult:
    """
    乘法结果 (成功值或错误类型二选一), 供不使用异常的调用方按 error_kind 分支
    """
    def __init__(self, value=None, error_kind=None, message=None):
        self.value = value
        self.error_kind = error_kind
        self.message = message

    @classmethod
    def success(cls, value):
        return cls(value=value)

    @classmethod
    def failure(cls, error):
        return cls(error_kind=error.kind, message=str(error))

    @property
    def ok(self):
        return self.error_kind is None

    def unwrap(self):
        """
        返回结果值; 失败时重新抛出对应的异常
        """
        if self.ok:
            return self.value
        raise _ERRORS_BY_KIND[self.error_kind](self.message)

    def __repr__(self):
        if self.ok:
            return f"MultiplyResult(value={self.value!r})"
        return f"MultiplyResult(error_kind={self.error_kind}, message={self.message!r})"


_ERRORS_BY_KIND = {
    cls.kind: cls for cls in (InvalidOperandError, OperandTooLargeError, ConvolutionTooLargeError)
}
