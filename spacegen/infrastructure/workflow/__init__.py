"""Build pipeline graph - LangGraph."""

from spacegen.infrastructure.workflow.emitter import EventEmitter
from spacegen.infrastructure.workflow.graph import (
    build_space_graph,
    compile_space_graph,
)

__all__ = ["EventEmitter", "build_space_graph", "compile_space_graph"]
