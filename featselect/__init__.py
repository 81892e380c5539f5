"""Greedy forward selection and backward elimination of features, scored by leave-one-out nearest-neighbour accuracy."""

__version__ = "0.1.0"