#!/usr/bin/env python3

import sys
sys.path.append('..')

import logging
import math

from rpn_calc import eval_float, Function, CalcException

logging.basicConfig(level=logging.DEBUG)

vars = {
    "inc": lambda x: x + 1,
    "hypot": Function(math.hypot, 2),
    "life": 42,
}

for exp in ["1 + inc(1.5 + inc(2))", "hypot(3, 4) + life", "inc(2, 3)", "1 + $", "sqdist(1, 2)"]:
    try:
        print(exp, "=", eval_float(exp, vars))
    except CalcException as e:
        print(e)
