"""
Seed data loaded into the default record store at startup.
"""
from __future__ import annotations

from datetime import date
from typing import Tuple

from recordlens.domain.models import Employee


def seed_employees() -> Tuple[Employee, ...]:
    return (
        Employee(
            id=1,
            name="Alice",
            department="IT",
            salary=75000,
            joining_date=date(2018, 5, 20),
            projects=("Project A", "Project B"),
        ),
        Employee(
            id=2,
            name="Bob",
            department="HR",
            salary=50000,
            joining_date=date(2019, 3, 15),
            projects=("Recruitment", "Policy"),
        ),
        Employee(
            id=3,
            name="Charlie",
            department="IT",
            salary=80000,
            joining_date=date(2017, 7, 10),
            projects=("Project A", "Project C"),
        ),
        Employee(
            id=4,
            name="David",
            department="Finance",
            salary=60000,
            joining_date=date(2020, 1, 5),
            projects=("Budgeting",),
        ),
        Employee(
            id=5,
            name="Eva",
            department="HR",
            salary=55000,
            joining_date=date(2021, 11, 25),
            projects=("Policy", "Training"),
        ),
        Employee(
            id=6,
            name="Frank",
            department="Finance",
            salary=65000,
            joining_date=date(2016, 8, 30),
            projects=("Auditing", "Budgeting"),
        ),
    )


__all__ = ["seed_employees"]
