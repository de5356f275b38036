"""
LottieModel - common base for all decoded records.

Format keys are declared as field aliases, Python attributes use descriptive
snake_case names. Unknown keys are ignored so newer files still decode.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import DecodeError


class LottieModel(BaseModel):
    """Base model for decoded records."""

    model_config = ConfigDict(
        # Accept both format keys and attribute names
        populate_by_name=True,
        # Decoded documents are read-only by convention
        validate_assignment=False,
        # Keys this decoder does not model are skipped
        extra='ignore',
    )

    def to_dict(self) -> dict[str, Any]:
        """Encode to a dictionary using the format's keys."""
        return self.model_dump(by_alias=True, mode='json', exclude_none=True)

    @classmethod
    def from_dict(cls, data: Any):
        """
        Decode from already parsed JSON data.

        :raises DecodeError: On the first violation found
        """
        try:
            return cls.model_validate(data)
        except ValidationError as error:
            raise DecodeError.from_validation_error(error) from error
