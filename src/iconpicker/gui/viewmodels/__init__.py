from .base import BaseViewModel
from .icon_picker_viewmodel import IconPickerViewModel, PickerOptions
from .infinite_scroll import InfiniteScrollController, ScrollMetrics
from .load_state import LoadState, LoadStateMachine
from .scheduler import ImmediateScheduler, ManualScheduler, Scheduler
from .selection_state import SelectionState
from .signal import ObservableProperty, Signal

__all__ = [
    "BaseViewModel",
    "IconPickerViewModel",
    "ImmediateScheduler",
    "InfiniteScrollController",
    "LoadState",
    "LoadStateMachine",
    "ManualScheduler",
    "ObservableProperty",
    "PickerOptions",
    "Scheduler",
    "ScrollMetrics",
    "SelectionState",
    "Signal",
]
