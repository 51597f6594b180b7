"""
Argument normalisation for chicon.

The dispatcher never sees raw argv. It sees a canonical list in which
short option clusters are expanded, every option comes first, a single
separator follows, and the operands come last:

    in:  ["-ab", "--option1", "operand1", "--option2", "operand2"]
    out: ["-a", "-b", "--option1", "--option2", "--", "operand1", "operand2"]

No option takes a value and nothing is validated here. ["-!@#"] comes
back as ["-!", "-@", "-#"] and it is up to the dispatcher to reject it.
"""

from __future__ import annotations

from typing import Iterable, List

SEPARATOR = "--"


def normalize_arguments(arguments: Iterable[str]) -> List[str]:
    """
    Return the arguments reordered as options, separator, operands.

    The first raw "--" ends option parsing and is consumed; any later
    "--" is an ordinary operand. Hyphens inside a short option cluster
    (e.g. "-ab-cd") are dropped so that they never produce a false
    separator. A lone "-" expands to nothing.
    """

    options: List[str] = []
    operands: List[str] = []
    after_options = False

    for arg in arguments:
        if arg == SEPARATOR and not after_options:
            after_options = True
            continue

        if after_options or not arg.startswith("-"):
            operands.append(arg)
        elif arg.startswith("--"):
            options.append(arg)
        else:
            options.extend(f"-{char}" for char in arg[1:] if char != "-")

    return options + [SEPARATOR] + operands
