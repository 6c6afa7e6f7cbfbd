from pydantic import Field

from figureio.dto.base import BaseInfo


class Figure(BaseInfo):
    """Geometric figure record: a name and two dimensions."""

    name: str = Field(..., description="Name of the figure")
    width: float = Field(..., description="Width of the figure")
    height: float = Field(..., description="Height of the figure")
