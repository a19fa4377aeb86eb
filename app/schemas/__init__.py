from app.schemas.schemas import (  # noqa: F401
    CategorySelection,
    Joke,
    SelectorState,
    ViewerState,
    ViewerStatus,
)
