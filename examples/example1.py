#!/usr/bin/env python3

import sys
sys.path.append('..')

from rpn_calc import eval_float, eval_int, identifiers

vars = { "pi" : 3.14, "e" : 2.71, "x" : 4 }

print(eval_float("(3+2)*10+(42+15)*pi", vars))
print(eval_float("2x^2-3x+1.5", vars))
print(eval_int("1+2*2^3*4/(6-1)"))
print(list(identifiers("2pi x + e")))
