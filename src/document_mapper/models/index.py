"""Index declarations passed through to the store."""

from typing import Any, Dict, List, Tuple, Union

from pydantic import BaseModel, Field


class IndexDeclaration(BaseModel):
    """An index on a collection, handed to ``create_index`` as declared."""

    name: str = Field(description="Index name", min_length=1)
    keys: Union[str, List[Tuple[str, Any]]] = Field(description="Field name or list of (field, direction) pairs")
    options: Dict[str, Any] = Field(default_factory=dict, description="Extra create_index options such as unique")
