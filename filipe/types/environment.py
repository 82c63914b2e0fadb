"""Runtime environment for Filipe.

The Environment stores bindings of names to (value, type tag, mutability)
triples and supports nested scopes via an `outer` link. Child scopes share
their parent by reference, so a write through any child lands in the scope
that owns the binding.
"""

from __future__ import annotations

from enum import Enum
from io import StringIO
from typing import Iterator, Optional

from filipe import Value
from filipe.types.errors import FilipeNameError, FilipeTypeError
from filipe.types.type_system import TypeTag, value_type


class ScopeKind(Enum):
    GLOBAL = "global"
    FUNCTION = "function"
    LOOP = "loop"
    IF_ELSE = "if-else"
    BLOCK = "block"


class Binding:
    """A name's value, its tracked type tag and whether it may be reassigned."""

    __slots__ = ("value", "type", "mutable")

    def __init__(self, value: Value, type_: TypeTag, mutable: bool = True):
        self.value = value
        self.type = type_
        self.mutable = mutable

    def __repr__(self) -> str:
        flag = "" if self.mutable else " const"
        return f"Binding({self.value!r}: {self.type}{flag})"


class Environment:
    """Hierarchical mapping from names to Bindings."""

    __slots__ = ("vars", "outer", "kind")

    def __init__(
        self,
        outer: Optional[Environment] = None,
        kind: ScopeKind | None = None,
    ):
        # dicts keep insertion order, which is the declaration order
        self.vars: dict[str, Binding] = {}
        self.outer: Environment | None = outer
        if kind is None:
            kind = ScopeKind.GLOBAL if outer is None else ScopeKind.BLOCK
        self.kind = kind

    def child(self, kind: ScopeKind = ScopeKind.BLOCK) -> Environment:
        """Create a new scope nested inside this one."""
        return Environment(self, kind)

    def define(
        self,
        name: str,
        value: Value,
        type_: TypeTag | None = None,
        mutable: bool = True,
    ) -> None:
        """Bind `name` in this exact scope.

        The stored tag defaults to the structural tag of `value` and must agree
        with it when given. Raises FilipeNameError if `name` is already bound in
        this scope; shadowing a binding from an outer scope is allowed.
        """
        if self.has(name):
            raise FilipeNameError(f"'{name}' is already declared")
        actual = value_type(value)
        if type_ is None:
            type_ = actual
        elif type_ != actual:
            raise FilipeTypeError(
                f"can't assign value of type '{actual}' to '{name}' of type '{type_}'"
            )
        self.vars[name] = Binding(value, type_, mutable)

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def is_declared(self, name: str) -> bool:
        return self.find(name) is not None

    def has(self, name: str) -> bool:
        """True if `name` is bound in this scope itself, ignoring parents."""
        return name in self.vars

    def resolve(self, name: str) -> Binding:
        """Return the Binding for `name`, walking outward.

        Raises FilipeNameError if the name is not declared anywhere in the chain.
        """
        env = self.find(name)
        if env is None:
            raise FilipeNameError(f"'{name}' is not declared")
        return env.vars[name]

    def lookup(self, name: str) -> Value:
        return self.resolve(name).value

    def type_of(self, name: str) -> TypeTag:
        return self.resolve(name).type

    def assign(self, name: str, value: Value) -> None:
        """Replace the value of an existing binding wherever it lives.

        The new value must carry the binding's stored tag and the binding must
        be mutable.
        """
        binding = self.resolve(name)
        new_type = value_type(value)
        if new_type != binding.type:
            raise FilipeTypeError(
                f"can't assign value of type '{binding.type}' to value of type '{new_type}'"
            )
        if not binding.mutable:
            raise FilipeNameError(f"'{name}' is not assignable")
        binding.value = value

    def update(self, mapping: dict[str, Binding]) -> None:
        """Bulk-define a mapping of name -> Binding in the current frame."""
        for name, binding in mapping.items():
            if name in self.vars:
                raise FilipeNameError(f"'{name}' is already declared")
            self.vars[name] = binding

    def chain(self) -> Iterator[Environment]:
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            frames = []
            for env in self.chain():
                with StringIO() as frame:
                    frame.write(f"{env.kind.value} ")
                    env._write_vars(frame)
                    frames.append(frame.getvalue())
            buffer.write(" -> ".join(frames))
            buffer.write(">")
            return buffer.getvalue()
