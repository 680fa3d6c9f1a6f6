import random
import time


def get_random(seed=None) -> random.Random:
    """
    返回一个独立的随机数生成器：
      - seed 为 int：用该种子新建 Random；
      - seed 已是 Random：直接返回（沿调用链传递同一个生成器）；
      - seed 为 None：以当前时间为种子。
    """
    if isinstance(seed, random.Random):
        return seed
    if seed is None:
        seed = time.time_ns()
    return random.Random(seed)


def random_permutation(k: int, rng: random.Random):
    """Permutation of [0, k) by the Fisher-Yates shuffle."""
    permutation = list(range(k))
    for j in range(k - 1, -1, -1):
        target = rng.randrange(j + 1)
        permutation[j], permutation[target] = permutation[target], permutation[j]
    return permutation


def random_int_unequal_to(least: int, bound: int, not_value: int, rng: random.Random) -> int:
    """
    Random integer in [least, bound) that differs from ``not_value``.
    If ``not_value`` lies outside the range every value is allowed.
    """
    if least > not_value or bound <= not_value:
        return least + rng.randrange(bound - least)
    value = least + rng.randrange(bound - least - 1)
    return value + 1 if value >= not_value else value
