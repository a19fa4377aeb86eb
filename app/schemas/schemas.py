import enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ViewerStatus(str, enum.Enum):
    IDLE_NO_JOKE = "idle_no_joke"
    LOADING = "loading"
    LOADED = "loaded"
    LOADED_STALE = "loaded_stale"


class Joke(BaseModel):
    model_config = ConfigDict(extra="ignore")

    value: str
    id: Optional[str] = None
    url: Optional[str] = None
    icon_url: Optional[str] = None
    categories: List[str] = Field(default_factory=list)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class CategorySelection(BaseModel):
    category: str


class SelectorState(BaseModel):
    categories: List[str] = Field(default_factory=list)
    selected: str = ""
    error: Optional[str] = None
    loaded: bool = False


class ViewerState(BaseModel):
    title: str
    status: ViewerStatus
    category: str = ""
    loading: bool
    joke: str = ""
    selector: SelectorState
