import re
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .identifiers import PyObjectId

URL_FIELDS = ("picture", "github", "facebook", "instagram")

# http, https or ftp (or protocol-relative) with a public IPv4 address or a
# dotted host name ending in a TLD. Private and loopback ranges are rejected.
URL_PATTERN = re.compile(
    r"^(?:(?:(?:https?|ftp):)?//)"
    r"(?:\S+(?::\S*)?@)?"
    r"(?:"
    r"(?!(?:10|127)(?:\.\d{1,3}){3})"
    r"(?!(?:169\.254|192\.168)(?:\.\d{1,3}){2})"
    r"(?!172\.(?:1[6-9]|2\d|3[0-1])(?:\.\d{1,3}){2})"
    r"(?:[1-9]\d?|1\d\d|2[01]\d|22[0-3])"
    r"(?:\.(?:1?\d{1,2}|2[0-4]\d|25[0-5])){2}"
    r"(?:\.(?:[1-9]\d?|1\d\d|2[0-4]\d|25[0-4]))"
    r"|"
    r"(?:(?:[a-z0-9\u00a1-\uffff][a-z0-9\u00a1-\uffff_-]{0,62})?[a-z0-9\u00a1-\uffff]\.)+"
    r"(?:[a-z\u00a1-\uffff]{2,}\.?)"
    r")"
    r"(?::\d{2,5})?"
    r"(?:[/?#]\S*)?$",
    re.IGNORECASE,
)


def _is_url(value: str) -> bool:
    return URL_PATTERN.fullmatch(value) is not None


class ProfileDefinition(BaseModel):
    """Portfolio data for a user, in the shape accepted by ``ProfileRepository.define``."""

    model_config = ConfigDict(populate_by_name=True)

    username: str = ""
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    bio: str = ""
    interests: List[str] = Field(default_factory=list)
    flairs: List[str] = Field(default_factory=list)
    picture: str = ""
    title: str = ""
    github: str = ""
    facebook: str = ""
    instagram: str = ""

    @field_validator(*URL_FIELDS)
    @classmethod
    def _check_url(cls, value: str) -> str:
        # Empty means "not provided".
        if value and not _is_url(value):
            raise ValueError(f"{value!r} is not a valid URL")
        return value


class ProfileDocument(ProfileDefinition):
    """Canonical representation of a profile document stored in MongoDB."""

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    id: PyObjectId = Field(alias="_id")


__all__ = ["ProfileDefinition", "ProfileDocument", "URL_FIELDS"]
