from __future__ import annotations

import logging
import threading
from typing import Callable, Iterable, Iterator

from parens import LispValue, config
from parens.evaluation.evaluator import evaluate
from parens.reader.expressions import Expr
from parens.reader.parser import parse
from parens.types.errors import ParensError
from parens.types.scope import Scope
from parens.builtin.core import register

logger = logging.getLogger(__name__)

ParseFn = Callable[[str, str], Expr]


def _default_parse(source: str, name: str) -> Expr:
    return parse(source, name)


def new_root_scope() -> Scope:
    """A fresh root scope with the core constants and special forms bound."""
    scope = Scope()
    register(scope)
    return scope


class Interpreter:
    """
    Parses and evaluates Parens source against one root scope kept across calls.
    Host code binds its own values and functions into `scope` before use.
    """

    def __init__(self, scope: Scope | None = None, parse_fn: ParseFn | None = None):
        config.apply_log_level()
        self.scope: Scope = scope if scope is not None else new_root_scope()
        self.parse_fn: ParseFn = parse_fn or _default_parse
        self._cancel = threading.Event()

    def execute(self, source: str, name: str | None = None) -> LispValue:
        """Parse and evaluate one submission; raises ParensError on failure."""
        name = name or config.get_source_name()
        logger.debug("executing %s", name)
        expr = self.parse_fn(source, name)
        try:
            return evaluate(expr, self.scope)
        except RecursionError:
            raise ParensError(f"{name}: nesting too deep") from None

    def cancel(self) -> None:
        """Stop `run` before its next submission. An in-flight one completes."""
        self._cancel.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    def run(
        self, sources: Iterable[str], name: str | None = None
    ) -> Iterator[tuple[LispValue, ParensError | None]]:
        """Execute submissions one at a time, yielding (value, error) for each.

        Failures are reported, not raised, so the session continues past them.
        Cancellation is checked only between submissions.
        """
        for source in sources:
            if self.cancelled:
                logger.debug("cancelled; not starting next submission")
                return
            if not source.strip():
                continue
            try:
                yield self.execute(source, name), None
            except ParensError as e:
                yield None, e


def format_result(value: LispValue) -> str:
    """Render a value for display: functions and macros are opaque."""
    if callable(value):
        return "func()"
    if value is None:
        return "nil"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
