"""
######################################
Root finding (:mod:`dualnum.optimize`)
######################################

.. currentmodule:: dualnum.optimize

This module provides solvers for root finding.

Root finding
============

.. autosummary::
    :toctree: generated/

    newton

Miscellaneous
=============

.. autosummary::
    :toctree: generated/

    NewtonResult

"""

from .rootfinding import NewtonResult, newton

__all__ = [
    "NewtonResult",
    "newton",
]
