"""
Domain package for recordlens.

Exports the employee model and the seed set the default store is built from.
Keep this package focused on data definitions and validation concerns.
"""

from recordlens.domain.models import Employee
from recordlens.domain.seed import seed_employees

__all__ = [
    "Employee",
    "seed_employees",
]
