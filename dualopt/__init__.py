"""dualopt - forward-mode differentiated terms for nonlinear optimization."""

__version__ = "0.1.0"

# Dual-number engine
from .autodiff import (
    Dual,
    functions,
    gradient,
    hessian,
    read_first_order,
    read_second_order,
    seed_first_order,
    seed_second_order,
)

# Diagnostics and debug mode
from .diagnostics import (
    all_finite,
    assert_symmetric,
    debug_context,
    is_debug_enabled,
    is_debug_strict,
    is_symmetric,
    set_debug_enabled,
)

# Logging
from .logging import configure_logging, get_logger, log_level, set_log_level

# Line search and finite differences
from .optimize import (
    DerivativeCheck,
    approx_grad,
    approx_hessian,
    backtracking_line_search,
    check_term_derivatives,
)

# Terms
from .terms import AutoDiffTerm, SizedTerm, Term, TermObjective

__all__ = [
    "AutoDiffTerm",
    "DerivativeCheck",
    "Dual",
    "SizedTerm",
    "Term",
    "TermObjective",
    "all_finite",
    "approx_grad",
    "approx_hessian",
    "assert_symmetric",
    "backtracking_line_search",
    "check_term_derivatives",
    "configure_logging",
    "debug_context",
    "functions",
    "get_logger",
    "gradient",
    "hessian",
    "is_debug_enabled",
    "is_debug_strict",
    "is_symmetric",
    "log_level",
    "read_first_order",
    "read_second_order",
    "seed_first_order",
    "seed_second_order",
    "set_debug_enabled",
    "set_log_level",
]
