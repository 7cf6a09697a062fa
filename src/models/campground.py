"""
Pydantic models for form validation and caller identity
"""
from typing import Any, Dict

from pydantic import BaseModel, Field, HttpUrl, field_validator


class Author(BaseModel):
    """
    Snapshot of the user who created a campground or comment
    """
    id: str
    username: str


class CurrentUser(BaseModel):
    """
    Identity of the authenticated caller, as stored in the session
    """
    id: str
    username: str

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v):
        """Session stores may hand back integer ids"""
        if v is None:
            return v
        return str(v)


class CampgroundCreate(BaseModel):
    """
    Fields accepted when creating a campground
    """
    name: str = Field(min_length=1, max_length=200)
    image: HttpUrl
    description: str = ""

    @field_validator('name', 'description', mode='before')
    @classmethod
    def strip_text(cls, v):
        """Surrounding whitespace is never meaningful in form fields"""
        if isinstance(v, str):
            return v.strip()
        return v

    def to_fields(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "image": str(self.image),
            "description": self.description,
        }


class CampgroundUpdate(CampgroundCreate):
    """
    Fields an owner may rewrite; author, id and slug are not among them
    """
    pass


def validation_messages(error) -> Dict[str, str]:
    """Flatten a pydantic ValidationError into {field: message}"""
    messages = {}
    for err in error.errors():
        field = str(err["loc"][0]) if err.get("loc") else "form"
        messages.setdefault(field, err["msg"])
    return messages
