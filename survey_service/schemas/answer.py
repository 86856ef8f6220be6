"""Answer submission schema - wire contract and stored document shape."""

import json
import re
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator, model_validator

_JSON_WHITESPACE = " \t\n\r"
_LONE_SURROGATE = re.compile(r"[\ud800-\udfff]")


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"invalid JSON constant {name}")


_decoder = json.JSONDecoder(parse_constant=_reject_constant)


class AnswerIn(BaseModel):
    """Submission body. Every field is optional and defaults to an empty string."""

    model_config = {"extra": "ignore"}

    answer1: str = ""
    answer2: str = ""
    answer3: str = ""

    @model_validator(mode="before")
    @classmethod
    def match_keys_case_insensitively(cls, data: Any) -> Any:
        # "Answer1" and "ANSWER1" fill answer1; on duplicates the last key wins
        if not isinstance(data, dict):
            return data
        names = {name.lower(): name for name in cls.model_fields}
        matched = {}
        for key, value in data.items():
            name = names.get(str(key).lower())
            if name is not None:
                matched[name] = value
        return matched

    @field_validator("answer1", "answer2", "answer3", mode="before")
    @classmethod
    def non_string_is_empty(cls, value: Any) -> str:
        if not isinstance(value, str):
            return ""
        # Lone surrogates from "\ud800" escapes cannot be BSON-encoded
        return _LONE_SURROGATE.sub("\ufffd", value)

    @classmethod
    def from_body(cls, raw: bytes) -> "AnswerIn":
        """Decode a request body. Malformed, empty, or non-object bodies give an all-empty answer.

        Only the first JSON value is read; anything after it is ignored.
        Invalid UTF-8 becomes U+FFFD instead of failing the whole body.
        """
        text = raw.decode("utf-8", "replace").lstrip(_JSON_WHITESPACE)
        try:
            data, _ = _decoder.raw_decode(text)
            return cls.model_validate(data)
        except (ValueError, ValidationError):
            return cls()

    def to_document(self) -> dict[str, str]:
        """Document for the answers collection. Stored keys are capitalized, unlike the wire names."""
        return {
            "Answer1": self.answer1,
            "Answer2": self.answer2,
            "Answer3": self.answer3,
        }
