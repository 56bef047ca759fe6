"""FastAPI dependency injection for planner services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from gridfinity.application.commands import CalculateGridsCommand


@lru_cache(maxsize=1)
def get_calculate_command() -> CalculateGridsCommand:
    """Get cached CalculateGridsCommand instance."""
    return CalculateGridsCommand()


# Type aliases for cleaner endpoint signatures
CalculateCommandDep = Annotated[CalculateGridsCommand, Depends(get_calculate_command)]
