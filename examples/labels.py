#! /usr/bin/env python3

from tickplot import Labeller

ranges = [
    (-98, 18),
    (-25, 200),
    (0.01, 4.99),
    (17.3, 17.8),
    (1, 999),
]

loose = Labeller(loose=True)
tight = Labeller()
for a, b in ranges:
    for m in [2, 3, 5]:
        l1 = loose.search(a, b, m)
        l2 = tight.search(a, b, m)
        print(f"[{a:g}, {b:g}] m={m}:  "
              f"loose {l1.min:g}:{l1.step:g}:{l1.max:g}  "
              f"tight {l2.min:g}:{l2.step:g}:{l2.max:g}")
