from typing import Union

from pydantic import BaseModel


class CategoryOut(BaseModel):
    """Fixed projection returned by GET /api/categories."""

    id: Union[int, str]
    name: str
