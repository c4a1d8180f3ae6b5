"""DEBUG-level call tracing for the rewriting engine."""

from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])

_PACKAGE = __name__.rpartition(".")[0]

_repr = reprlib.Repr()
_repr.maxother = 120
_repr.maxstring = 80

_BRACKETS = {
    list: ("[", "]"),
    tuple: ("(", ")"),
    set: ("{", "}"),
    frozenset: ("frozenset({", "})"),
}


def _brief(value: Any, *, max_items: int = 6) -> str:
    """Render ``value`` for a log line, keeping large configurations short."""

    if type(value).__module__.startswith(_PACKAGE + "."):
        return str(value)
    if isinstance(value, dict):
        parts = [f"{_brief(k)}: {_brief(v)}" for k, v in list(value.items())[:max_items]]
        if len(value) > max_items:
            parts.append(f"... {len(value) - max_items} more")
        return "{" + ", ".join(parts) + "}"
    brackets = _BRACKETS.get(type(value))
    if brackets is not None:
        items = list(value)
        parts = [_brief(item) for item in items[:max_items]]
        if len(items) > max_items:
            parts.append(f"... {len(items) - max_items} more")
        return brackets[0] + ", ".join(parts) + brackets[1]
    try:
        return _repr.repr(value)
    except Exception as exc:  # pragma: no cover - repr of foreign objects
        return f"<repr-error {exc!r}>"


def _describe_call(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    rendered = [_brief(arg) for arg in args]
    rendered.extend(f"{key}={_brief(value)}" for key, value in kwargs.items())
    return ", ".join(rendered) if rendered else "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that logs entry, exit and failure of a call at DEBUG."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            logger.debug("-> %s(%s)", qualname, _describe_call(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.debug("!! %s raised", qualname, exc_info=True)
                raise
            if log_result:
                logger.debug("<- %s = %s", qualname, _brief(result))
            else:
                logger.debug("<- %s", qualname)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Wrap the public functions defined in a module with DEBUG call tracing."""

    module_name = namespace.get("__name__")
    if not isinstance(module_name, str):  # pragma: no cover - called from a module body
        module_name = __name__
    logger = logger or logging.getLogger(module_name)
    skip_set: Set[str] = set(skip or [])

    for name, value in list(namespace.items()):
        if name.startswith("_") or name in skip_set:
            continue
        if inspect.isfunction(value) and value.__module__ == module_name:
            namespace[name] = debug_log_call(logger, name=name)(value)
