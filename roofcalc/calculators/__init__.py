"""
Deterministic pricing core.

Pure Python math. No I/O, no state between calls.
Given structured roof parameters from the estimate form,
produce a cost breakdown and a derived roof size.
"""
