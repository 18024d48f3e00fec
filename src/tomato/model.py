# src/tomato/model.py (Compiler Layer)
from __future__ import annotations

from enum import Enum

from bs4 import Tag
from pydantic import BaseModel, ConfigDict, Field

from tomato.errors import ConfigurationError


class Language(str, Enum):
    """Target languages the compiler can emit views in."""
    TYPESCRIPT = "ts"

    @classmethod
    def from_name(cls, name: str) -> "Language":
        try:
            return cls((name or "").strip().lower())
        except ValueError:
            raise ConfigurationError(f"Language '{name}' is not supported.") from None


class GeneratorOptions(BaseModel):
    """Names the generated code uses to reach the view runtime library."""
    model_config = ConfigDict(frozen=True)

    view_base_class: str = Field(default="View", description="Base class every generated view extends.")
    view_factory: str = Field(default="createView", description="Function creating a generic element view.")
    import_location: str = Field(default="../ts/util/q", description="Module the runtime is imported from.")


class GeneratedUnit(BaseModel):
    """The generated class text and extracted stylesheet of one template file."""
    model_config = ConfigDict(frozen=True)

    view_code: str
    style_code: str = ""


class LoadedTemplate(BaseModel):
    """A parsed template narrowed to its single root element."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    path: str
    root: Tag
    style_text: str = ""
