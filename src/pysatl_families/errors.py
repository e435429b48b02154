"""
Exceptions
==========

Exceptions raised by distribution construction and evaluation.

All of them derive from :class:`ValueError`: every failure reported by this
package is an invalid input, detected at the boundary of the call that
received it.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class InvalidParameterError(ValueError):
    """A parameter constraint of a family does not hold."""


class InvalidProbabilityError(ValueError):
    """A probability argument lies outside ``[0, 1]``."""


class EmptyInputError(ValueError):
    """An operation received no data where at least one value is required."""


__all__ = [
    "InvalidParameterError",
    "InvalidProbabilityError",
    "EmptyInputError",
]
