"""变量表"""
import logging

import numpy as np

from core.errors import UnknownVariableError

logger = logging.getLogger(__name__)


class VariableStore:
    """标识符 -> float32 值，后写覆盖先写"""

    def __init__(self):
        self._values = {}

    def get(self, name):
        if name not in self._values:
            raise UnknownVariableError(name)
        return self._values[name]

    def set(self, name, value):
        self._values[name] = np.float32(value)
        logger.debug(f"Stored {name} = {self._values[name]}")

    def names(self):
        return list(self._values)

    def clear(self):
        self._values.clear()

    def __contains__(self, name):
        return name in self._values

    def __len__(self):
        return len(self._values)
