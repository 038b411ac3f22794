"""Editor support: session state, id minting and the JSON export format."""

from .export import dumps_workflow, export_workflow, load_workflow, loads_workflow, save_workflow
from .session import EditorSession

__all__ = [
    "EditorSession",
    "dumps_workflow",
    "export_workflow",
    "load_workflow",
    "loads_workflow",
    "save_workflow",
]
