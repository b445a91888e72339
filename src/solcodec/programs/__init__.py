"""Built-in program definitions.

Each module declares one program's account layouts, instruction layouts and
account roles, and registers them on a ``Program``.
"""

from __future__ import annotations

from ..program import Program
from .account_data import account_data_program
from .counter import counter_program
from .favorites import favorites_program

PROGRAMS: dict[str, Program] = {
    program.name: program
    for program in (counter_program, favorites_program, account_data_program)
}

__all__ = [
    "PROGRAMS",
    "account_data_program",
    "counter_program",
    "favorites_program",
]
