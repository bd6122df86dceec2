import copy
import logging
import sys
from typing import Any, Generic, TypeVar
import pydantic
from hypothesisapi.exceptions import BuilderError

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

_LOGGER = logging.getLogger(__name__)

M = TypeVar('M', bound=pydantic.BaseModel)


class BaseBuilder(Generic[M]):
    """
    Accumulates field values and validates them into a ``model_class`` instance.

    Setters may be called in any order; the last value given for a field wins.
    Fields never set take the model's declared default.
    Calling :meth:`build` several times is allowed and each call returns an independent value.
    """
    model_class: type[M]

    def __init__(self, **fields: Any) -> None:
        self._fields: dict[str, Any] = {}
        for name, value in fields.items():
            self._set(name, value)

    def _set(self, name: str, value: Any) -> Self:
        if name not in self.model_class.model_fields:
            raise BuilderError(f"{self.model_class.__name__} has no field '{name}'")
        self._fields[name] = value
        return self

    def build(self) -> M:
        """Validate the accumulated fields.

        Raises:
            BuilderError: If a value has the wrong type or violates a field constraint.
        """
        try:
            return self.model_class.model_validate(copy.deepcopy(self._fields))
        except pydantic.ValidationError as e:
            _LOGGER.debug(f"Could not build {self.model_class.__name__} from {self._fields}: {e}")
            raise BuilderError(str(e)) from e
