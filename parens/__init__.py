# Core type aliases for the Parens data model.
# Runtime values are plain Python objects (bool, float, str, list, None) plus
# the callable types in parens.types (Macro, Lambda, HostFunction). Code is a
# tree of Expr nodes from parens.reader.expressions.
#
# Naming guidance:
# - LispValue: Use in evaluator/runtime code to denote evaluated values.
# - MacroFn:   Python signature of a special form (scope, name, exprs) -> value.

from typing import Any, Callable

# Runtime value alias
LispValue = Any

# Special form implementation: receives the calling scope, the name used to
# reach it (empty if not called by name) and the unevaluated argument exprs.
MacroFn = Callable[..., LispValue]
