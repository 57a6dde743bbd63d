"""Application services package.

Contains the orchestration services shared by the task command and query
handlers: reference resolution, hydration and response assembly.
"""

from .fan_out import gather_all
from .logger import configure_logging
from .reference_resolver import ReferenceResolver
from .task_hydrator import TaskHydrator
from .task_orchestration_base import TaskOrchestrationBase
from .task_response_assembler import TaskResponseAssembler

__all__ = [
    "configure_logging",
    "gather_all",
    "ReferenceResolver",
    "TaskHydrator",
    "TaskOrchestrationBase",
    "TaskResponseAssembler",
]
