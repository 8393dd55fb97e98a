from __future__ import annotations
import math
import random
from decimal import Decimal
from typing import Iterable, List

def gcd(*values: int) -> int:
	# gcd(0, n) == |n|; gcd() == 0
	g = 0
	for v in values:
		g = math.gcd(g, int(v))
	return g

def lcm(*values: int) -> int:
	if len(values) == 0:
		return 1
	l = 1
	for v in values:
		v = abs(int(v))
		if v == 0:
			return 0
		l = l * v // math.gcd(l, v)
	return l

def decimal_places(value: Decimal) -> int:
	"""Number of digits after the decimal point, 0 for integral values."""
	exp = value.as_tuple().exponent
	return -exp if exp < 0 else 0

def random_int(low: int, high: int, exclude: Iterable[int] | None = None) -> int:
	"""Uniform integer in [low, high], avoiding the excluded values when possible."""
	excluded = set(exclude or ())
	choices: List[int] = [v for v in range(low, high + 1) if v not in excluded]
	if not choices:
		return random.randint(low, high)
	return random.choice(choices)
