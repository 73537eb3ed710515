from typing import Any, Dict, Optional

from .errors import UndefinedVariableError


class Environment:
    """One scope frame: names (sigil stripped) bound to values, plus a link to
    the enclosing frame. A child never outlives the block that created it."""
    def __init__(self, parent: Optional['Environment'] = None):
        self.parent = parent
        self.values: Dict[str, Any] = {}

    def define(self, name: str, value: Any):
        # always binds here, shadowing any outer binding
        self.values[name] = value

    def get(self, name: str) -> Any:
        if name in self.values:
            return self.values[name]
        if self.parent is not None:
            return self.parent.get(name)
        raise UndefinedVariableError(name)

    def try_assign(self, name: str, value: Any) -> bool:
        """Rebind the nearest existing `name`; report whether one was found."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.values:
                env.values[name] = value
                return True
            env = env.parent
        return False

    def assign(self, name: str, value: Any):
        if not self.try_assign(name, value):
            raise UndefinedVariableError(name)

    @property
    def depth(self) -> int:
        return 0 if self.parent is None else self.parent.depth + 1
