# -*- coding: utf-8 -*-
"""
主应用程序入口文件
文件路径: main.py

简单的大整数乘法计算器：读取 x 和 y, 输出 x * y。
"""

from bignum_ntt import multiply, MultiplicationError


def main():
    """
    程序主入口函数
    """
    print("Simple multiplication calculator")

    x = input("x = ")
    y = input("y = ")

    try:
        result = multiply(x, y, validate=True)
        print("x * y = " + result)
    except MultiplicationError as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
