"""
Decoder combinators.

A Decoder turns one record's State into a new State, or fails with a
message. Field decoders (``next_field``, ``field``) convert a raw string
and apply it to the accumulated value, which is normally a curried
constructor seeded by ``map_into``:

    person = map_into(
        Person,
        field("name", string) >> field("age", integer),
    )

Decoders hold no mutable state and can be reused for any number of
records.
"""

from __future__ import annotations

import inspect
from functools import reduce
from typing import TYPE_CHECKING, Any, TypeVar

from csvdecode.core.result import Err, Ok, Result

from .state import State, identity

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

A = TypeVar("A")

StepResult = Result[State, str]

PAST_END_OF_RECORD = "past end of record"
NO_DECODERS_SUCCEEDED = "no decoders succeeded"
NOT_CALLABLE = (
    "cannot apply a field value to a non-callable accumulator; "
    "wrap multi-field decoders in map_into"
)


class Decoder:
    """A composable step over a record's State."""

    __slots__ = ("_run", "name")

    def __init__(self, run: Callable[[State], StepResult], name: str = "decoder") -> None:
        self._run = run
        self.name = name

    def run(self, state: State) -> StepResult:
        return self._run(state)

    def then(self, other: Decoder) -> Decoder:
        """Run this decoder, then ``other`` on the resulting State."""
        first, second = self._run, other._run

        def run(state: State) -> StepResult:
            return first(state).and_then(second)

        return Decoder(run, f"{self.name} >> {other.name}")

    def __rshift__(self, other: Decoder) -> Decoder:
        return self.then(other)

    def decode_record(
        self,
        headers: Sequence[str],
        record: Sequence[str],
        seed: Any = identity,
    ) -> Result[Any, str]:
        """Decode one record, returning the final accumulated value."""
        return self._run(State.initial(headers, record, seed)).map(lambda s: s.value)

    def __repr__(self) -> str:
        return f"Decoder({self.name})"


def _apply(state: State, value: Any) -> StepResult:
    accumulated = state.value
    if not callable(accumulated):
        return Err(NOT_CALLABLE)
    return Ok(state.with_value(accumulated(value)))


# =============================================================================
# Field decoders
# =============================================================================


def next_field(convert: Callable[[str], Result[Any, str]]) -> Decoder:
    """Consume the first unvisited field and apply its converted value."""

    def run(state: State) -> StepResult:
        taken = state.take_next()
        if taken is None:
            return Err(PAST_END_OF_RECORD)
        (_, raw), rest = taken
        return convert(raw).and_then(lambda value: _apply(rest, value))

    return Decoder(run, "next_field")


def field(name: str, convert: Callable[[str], Result[Any, str]]) -> Decoder:
    """
    Consume the first unvisited field called ``name``.

    Lookup is by name, so ``field`` calls may appear in any order relative
    to the record's columns.
    """

    def run(state: State) -> StepResult:
        taken = state.take_named(name)
        if taken is None:
            return Err(f"no field named {name!r}")
        (_, raw), rest = taken
        return convert(raw).and_then(lambda value: _apply(rest, value))

    return Decoder(run, f"field({name!r})")


def ignore_next() -> Decoder:
    """Consume the next field without using it."""

    def run(state: State) -> StepResult:
        taken = state.take_next()
        if taken is None:
            return Err(PAST_END_OF_RECORD)
        return Ok(taken[1])

    return Decoder(run, "ignore_next")


def ignore_field(name: str) -> Decoder:
    """Consume the field called ``name`` without using it."""

    def run(state: State) -> StepResult:
        taken = state.take_named(name)
        if taken is None:
            return Err(f"no field named {name!r}")
        return Ok(taken[1])

    return Decoder(run, f"ignore_field({name!r})")


def _check(expected: str, taken: tuple[tuple[str, str], State]) -> StepResult:
    (_, raw), rest = taken
    if raw != expected:
        return Err(f"expected {expected!r} but found {raw!r}")
    return Ok(rest)


def assert_next(expected: str) -> Decoder:
    """Consume the next field, failing unless it equals ``expected``."""

    def run(state: State) -> StepResult:
        taken = state.take_next()
        if taken is None:
            return Err(PAST_END_OF_RECORD)
        return _check(expected, taken)

    return Decoder(run, f"assert_next({expected!r})")


def assert_field(name: str, expected: str) -> Decoder:
    """Consume the field called ``name``, failing unless it equals ``expected``."""

    def run(state: State) -> StepResult:
        taken = state.take_named(name)
        if taken is None:
            return Err(f"no field named {name!r}")
        return _check(expected, taken)

    return Decoder(run, f"assert_field({name!r})")


# =============================================================================
# Constant decoders
# =============================================================================


def succeed(value: Any) -> Decoder:
    """Apply a constant ``value`` without consuming a field."""
    return Decoder(lambda state: _apply(state, value), "succeed")


def fail(message: str) -> Decoder:
    """Always fail with ``message``."""
    return Decoder(lambda state: Err(message), "fail")


# =============================================================================
# Composition
# =============================================================================


def sequence(decoders: Iterable[Decoder]) -> Decoder:
    """Chain decoders left to right; an empty chain leaves the State as is."""
    return reduce(Decoder.then, decoders, Decoder(Ok, "pass"))


def one_of(decoders: Iterable[Decoder]) -> Decoder:
    """
    Try each decoder against the same starting State.

    The first success wins. Individual failure messages are discarded.
    """
    alternatives = tuple(decoders)

    def run(state: State) -> StepResult:
        for decoder in alternatives:
            result = decoder.run(state)
            if result.is_ok:
                return result
        return Err(NO_DECODERS_SUCCEEDED)

    return Decoder(run, "one_of")


def map_into(seed: Any, decoder: Decoder) -> Decoder:
    """
    Run ``decoder`` from ``seed``, then apply the result to the caller's accumulator.

    Callable seeds taking several arguments are curried, so each field
    decoder supplies one argument in order.
    """
    seeded = curry(seed) if callable(seed) else seed

    def run(state: State) -> StepResult:
        return decoder.run(state.with_value(seeded)).and_then(
            lambda inner: _apply(inner.with_value(state.value), inner.value)
        )

    return Decoder(run, f"map_into({decoder.name})")


def and_then(decoder: Decoder, fn: Callable[[Any], Decoder]) -> Decoder:
    """
    Decode a value, then pick the decoder for the remaining fields from it.

    ``decoder`` runs with an identity accumulator; ``fn`` receives its
    value and returns a decoder that continues with the caller's
    accumulator on the fields left over.
    """

    def run(state: State) -> StepResult:
        return decoder.run(state.with_value(identity)).and_then(
            lambda inner: fn(inner.value).run(inner.with_value(state.value))
        )

    return Decoder(run, f"and_then({decoder.name})")


# =============================================================================
# Converter helpers
# =============================================================================


def maybe(convert: Callable[[str], Result[A, str]]) -> Callable[[str], Result[A | None, str]]:
    """Wrap a converter so the empty string converts to ``None``."""

    def converter(raw: str) -> Result[A | None, str]:
        if raw == "":
            return Ok(None)
        return convert(raw)

    return converter


def curry(fn: Callable[..., Any], arity: int | None = None) -> Callable[..., Any]:
    """
    Turn an n-ary callable into a chain of one-argument callables.

    The inferred arity counts every named parameter, defaulted ones
    included, so each field decoder under ``map_into`` fills one of them.
    Keyword-only parameters (e.g. pydantic model fields) are passed by
    keyword once all arguments are collected.

    Args:
        fn: Function or class to curry
        arity: Number of arguments; inferred from the signature if None

    Returns:
        ``fn`` itself when it takes exactly one argument, or when its
        signature cannot be inspected or only has ``*args``

    Raises:
        ValueError: If ``fn`` takes no arguments at all
    """
    params: list[inspect.Parameter] | None = None
    if arity is None:
        params = _parameters(fn)
        if params == []:
            raise ValueError(
                f"cannot curry {fn!r}: it takes no arguments; use a constant seed instead"
            )
        arity = len(params) if params is not None else 1

    if arity <= 1:
        return fn

    def collect(args: tuple[Any, ...]) -> Callable[[Any], Any]:
        def step(arg: Any) -> Any:
            collected = (*args, arg)
            if len(collected) == arity:
                return _call(fn, params, collected)
            return collect(collected)

        return step

    return collect(())


def _parameters(fn: Callable[..., Any]) -> list[inspect.Parameter] | None:
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        # Builtins without an introspectable signature
        return None
    variadic = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
    named = [p for p in signature.parameters.values() if p.kind not in variadic]
    if not named and any(
        p.kind == inspect.Parameter.VAR_POSITIONAL for p in signature.parameters.values()
    ):
        return None
    return named


def _call(
    fn: Callable[..., Any],
    params: list[inspect.Parameter] | None,
    args: tuple[Any, ...],
) -> Any:
    if params is None:
        return fn(*args)
    positional = [a for p, a in zip(params, args) if p.kind != inspect.Parameter.KEYWORD_ONLY]
    keywords = {p.name: a for p, a in zip(params, args) if p.kind == inspect.Parameter.KEYWORD_ONLY}
    return fn(*positional, **keywords)
