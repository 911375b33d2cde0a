"""
Shape calculators: deterministic weight engine.

Pure Python math. No I/O.
Given a Dimension Set, a unit and a density, produce a weight in kilograms.
"""
