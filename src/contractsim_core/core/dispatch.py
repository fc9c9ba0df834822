# src/contractsim_core/core/dispatch.py
"""
Circuit dispatchers: the calling surface that hides context plumbing.

A dispatcher is built from one circuit set of a contract artifact and a context
source. At construction it turns every circuit into a closure that reads the
current context, invokes the circuit and handles the returned context according
to the circuit kind:

- pure:   the returned context is discarded, only the result is returned;
- impure: the returned context is committed through the sink, then the
          result is returned.

The name -> closure table is built once and never changes. A dispatcher holds
no context of its own, so several dispatchers reading the same manager observe
the same sequence of committed contexts.
"""
import logging
from typing import Any, Callable, Dict, Iterator, Mapping, Tuple

from ..contract import CircuitFunction, ContextSink, ContextSource
from .base_enums import CircuitKind
from .exceptions import UnknownCircuitError

logger = logging.getLogger(__name__)


class CircuitDispatcher:
    """
    Base class holding the explicit name -> closure table.

    Circuits are reachable as attributes (`dispatcher.setVal(5)`) or by item
    (`dispatcher["setVal"](5)`). A circuit whose name shadows an attribute of
    the dispatcher itself is only reachable by item.
    """
    kind: CircuitKind

    def __init__(self, circuits: Mapping[str, CircuitFunction], context_source: ContextSource):
        self._context_source = context_source
        self._callables: Dict[str, Callable[..., Any]] = {
            name: self._bind(name, fn) for name, fn in circuits.items()
        }
        logger.debug(f"Built {self.kind} dispatcher over {len(self._callables)} circuit(s).")

    def _bind(self, name: str, fn: CircuitFunction) -> Callable[..., Any]:
        raise NotImplementedError

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self._callables)

    def __getitem__(self, name: str) -> Callable[..., Any]:
        try:
            return self._callables[name]
        except KeyError:
            raise UnknownCircuitError(circuit_name=name, kind=self.kind, available=self.names) from None

    def __getattr__(self, name: str) -> Callable[..., Any]:
        # Only reached when regular attribute lookup fails.
        if name.startswith("_"):
            raise AttributeError(name)
        return self[name]

    def __contains__(self, name: object) -> bool:
        return name in self._callables

    def __iter__(self) -> Iterator[str]:
        return iter(self._callables)

    def __len__(self) -> int:
        return len(self._callables)

    def __dir__(self):
        return sorted(set(super().__dir__()) | set(self._callables))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._callables)})"


class PureCircuitDispatcher(CircuitDispatcher):
    """Dispatches read-only circuits. Nothing a pure call returns is ever committed."""
    kind = CircuitKind.PURE

    def _bind(self, name: str, fn: CircuitFunction) -> Callable[..., Any]:
        def call(*args: Any) -> Any:
            context = self._context_source()
            logger.debug(f"Dispatching pure circuit '{name}'.")
            results = fn(context, *args)
            return results.result

        call.__name__ = name
        call.__qualname__ = f"{type(self).__name__}.{name}"
        return call


class ImpureCircuitDispatcher(CircuitDispatcher):
    """
    Dispatches state-mutating circuits. The context each call returns is
    committed before the result is handed back, so the next call (pure or
    impure) observes it. A call that raises commits nothing.
    """
    kind = CircuitKind.IMPURE

    def __init__(
        self,
        circuits: Mapping[str, CircuitFunction],
        context_source: ContextSource,
        commit: ContextSink,
    ):
        self._commit = commit
        super().__init__(circuits, context_source)

    def _bind(self, name: str, fn: CircuitFunction) -> Callable[..., Any]:
        def call(*args: Any) -> Any:
            context = self._context_source()
            logger.debug(f"Dispatching impure circuit '{name}'.")
            results = fn(context, *args)
            self._commit(results.context)
            logger.debug(f"Committed context produced by impure circuit '{name}'.")
            return results.result

        call.__name__ = name
        call.__qualname__ = f"{type(self).__name__}.{name}"
        return call
