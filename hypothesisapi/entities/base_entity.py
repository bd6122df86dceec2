import logging
from typing import Any
from pydantic import ConfigDict, BaseModel

_LOGGER = logging.getLogger(__name__)


class BaseEntity(BaseModel):
    """
    Base class for all resources returned by the Hypothesis API.

    Unknown fields sent by the server are kept (and reported) instead of
    failing the whole response.
    """

    model_config = ConfigDict(extra='allow')  # Allow extra fields not defined in the model

    def asdict(self) -> dict[str, Any]:
        """Convert the entity to a dictionary, including unknown fields."""
        return self.model_dump(mode='json', by_alias=True)

    def asjson(self) -> str:
        """Convert the entity to a JSON string, including unknown fields."""
        return self.model_dump_json(by_alias=True)

    def model_post_init(self, __context: Any) -> None:
        if self.__pydantic_extra__:
            _LOGGER.warning(f"Unknown fields found in {self.__class__.__name__} "
                            f"fields: {self.__pydantic_extra__.keys()}. ")
