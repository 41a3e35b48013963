"""
Inclusion conditions for navigation items.

An item declaration may carry ``"if"`` and ``"unless"`` options. Each holds a
zero-argument callable (or a list of them)::

    primary.item("admin", "Admin", "/admin/", {"if": lambda: user.is_staff})

Both keys are always stripped from the options, whatever the outcome, so a
constructed ``Item`` or a renderer never sees them.
"""

from .exceptions import InvalidConditionError

CONDITION_KEYS = ("if", "unless")


def _as_list(value):
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [v for v in value if v is not None]
    return [value]


def _check_callable(key, conditions):
    for condition in conditions:
        if not callable(condition):
            raise InvalidConditionError(
                f"The '{key}' option must be a callable or a list of callables, "
                f"got {condition!r}."
            )


def should_add_item(options) -> bool:
    """
    Evaluate and strip the ``if`` / ``unless`` conditions in *options*.

    *options* is mutated in place. The item is included iff every ``if``
    predicate returns truthy and no ``unless`` predicate does. Non-callable
    values raise ``InvalidConditionError`` before any predicate runs.
    """
    if options is None:
        return True

    if_conditions = _as_list(options.pop("if", None))
    unless_conditions = _as_list(options.pop("unless", None))

    _check_callable("if", if_conditions)
    _check_callable("unless", unless_conditions)

    return all(condition() for condition in if_conditions) and not any(
        condition() for condition in unless_conditions
    )
