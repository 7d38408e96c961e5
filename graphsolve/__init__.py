"""Solvers for classic graph and tree problems, with union-find and segment trees."""

__version__ = "0.1.0"