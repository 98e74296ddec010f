# -*- coding: utf-8 -*-
import argparse
import random
import sys
import time

from bignum_ntt import multiply, square


def random_operand(digits, rng):
    # 首位非零, 保证位数准确
    return str(rng.randint(1, 9)) + ''.join(rng.choice('0123456789') for _ in range(digits - 1))


def run_case(digits, rng, use_square):
    a = random_operand(digits, rng)
    b = a if use_square else random_operand(digits, rng)

    start = time.perf_counter()
    result = square(a) if use_square else multiply(a, b)
    ntt_time = time.perf_counter() - start

    start = time.perf_counter()
    expected = str(int(a) * int(b))
    int_time = time.perf_counter() - start

    return result == expected, ntt_time, int_time


def main():
    parser = argparse.ArgumentParser(description="NTT 大整数乘法性能测试 (与 Python int 对比)")

    parser.add_argument("--digits", "-d", type=int, nargs="+", default=[10, 100, 1000, 10000],
                        help="操作数位数 (可指定多个)")
    parser.add_argument("--repeat", "-r", type=int, default=3, help="每种位数的重复次数")
    parser.add_argument("--seed", "-s", type=int, default=None, help="随机种子")
    parser.add_argument("--square", action="store_true", help="测试平方而不是乘法")

    args = parser.parse_args()

    # int <-> str 转换在新版 Python 中有位数限制
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)

    rng = random.Random(args.seed)
    op = "square" if args.square else "multiply"

    print(f"{'digits':>10} | {'ntt ' + op + ' (s)':>20} | {'int (s)':>10} | check")
    print("-" * 60)

    failures = 0
    for digits in args.digits:
        if digits < 1:
            print(f"❌ 错误: 位数必须为正数 ({digits})")
            return 1
        for _ in range(args.repeat):
            ok, ntt_time, int_time = run_case(digits, rng, args.square)
            failures += 0 if ok else 1
            print(f"{digits:>10} | {ntt_time:>20.6f} | {int_time:>10.6f} | {'✅' if ok else '❌'}")

    if failures:
        print(f"\n❌ {failures} 个结果与 Python int 不一致")
        return 1
    print("\n✅ 所有结果与 Python int 一致")
    return 0


if __name__ == "__main__":
    sys.exit(main())
