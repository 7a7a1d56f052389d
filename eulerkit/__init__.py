"""Solvers and helpers for number-theory, combinatorics and puzzle problems."""

__version__ = "0.1.0"