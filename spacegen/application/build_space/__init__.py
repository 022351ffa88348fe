"""Build-space application layer."""

from spacegen.application.build_space.dto import BuildSpaceRequest
from spacegen.application.build_space.use_case import BuildSpaceUseCase

__all__ = [
    "BuildSpaceRequest",
    "BuildSpaceUseCase",
]
