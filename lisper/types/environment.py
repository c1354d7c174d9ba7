"""Runtime environment for Lisper.

The Environment stores bindings of names to evaluated values and supports
nested scopes via an `outer` link. Frames are shared by reference: a closure
keeps the very frame it was created in, so later `def`s in that frame are
visible to it.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from lisper import Expression
from lisper.errors import UndefinedVariableError
from lisper.types.symbol import Symbol


def _key(name: Symbol | str) -> str:
    return name.id if isinstance(name, Symbol) else name


class Environment:
    """Hierarchical mapping from names to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Expression] = {}
        self.outer: Environment | None = outer

    @classmethod
    def extend(cls, parent: Environment) -> Environment:
        """Create a fresh, empty frame whose parent is `parent`."""
        return cls(outer=parent)

    def set(self, name: Symbol | str, value: Expression) -> None:
        """Bind `name` in this frame only, overwriting any previous binding."""
        self.vars[_key(name)] = value

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        key = _key(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol | str) -> Optional[Expression]:
        """Look up `name` along the chain; None when no frame binds it."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[_key(name)]

    def lookup(self, name: Symbol | str) -> Expression:
        """Like get(), but raises UndefinedVariableError on a miss."""
        env = self.find(name)
        if env is None:
            raise UndefinedVariableError(_key(name))
        return env.vars[_key(name)]

    def __contains__(self, name: Symbol | str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env: Optional[Environment] = self
            chain = []
            while env is not None:
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
