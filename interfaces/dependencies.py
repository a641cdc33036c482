"""FastAPI dependencies backed by the Lagom container."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from lagom import Container

from infrastructure.di.container import create_container


@lru_cache
def get_container() -> Container:
    """Build the DI container once per process; tests override this dependency."""
    return create_container()


ContainerDep = Annotated[Container, Depends(get_container)]
