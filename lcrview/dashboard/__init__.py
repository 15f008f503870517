"""Dashboard core: view state, transition function, projector, renderer, dispatcher."""

from lcrview.dashboard.commands import (
    Command,
    Completion,
    CreateWorkload,
    DeleteImage,
    FetchDetail,
    ListWorkloadPods,
    ListWorkloads,
    PullImage,
    RefreshImages,
    RefreshWorkloads,
    UpdateWorkload,
)
from lcrview.dashboard.controller import DashboardController, safe_transition, transition
from lcrview.dashboard.dispatcher import CommandDispatcher
from lcrview.dashboard.events import Completed, KeyPressed, Resized, RowHighlighted
from lcrview.dashboard.renderer import Frame, RenderConfig, Renderer
from lcrview.dashboard.view_state import ViewState, Viewport, initial_state

__all__ = [
    "Command",
    "CommandDispatcher",
    "Completed",
    "Completion",
    "CreateWorkload",
    "DashboardController",
    "DeleteImage",
    "FetchDetail",
    "Frame",
    "KeyPressed",
    "ListWorkloadPods",
    "ListWorkloads",
    "PullImage",
    "RefreshImages",
    "RefreshWorkloads",
    "RenderConfig",
    "Renderer",
    "Resized",
    "RowHighlighted",
    "UpdateWorkload",
    "ViewState",
    "Viewport",
    "initial_state",
    "safe_transition",
    "transition",
]
