from ._core.observable import Mode, Observable, ObservableSubscription
from ._core.observer import Observer, SimpleObserver, Subscription
from ._core.stage import FilterStage, MappingStage, StageObserver, TransformStage

__all__ = (
    "FilterStage",
    "MappingStage",
    "Mode",
    "Observable",
    "ObservableSubscription",
    "Observer",
    "SimpleObserver",
    "StageObserver",
    "Subscription",
    "TransformStage",
    "from_",
    "of",
    "throw_error",
)

from_ = Observable.from_
of = Observable.of
throw_error = Observable.throw_error
