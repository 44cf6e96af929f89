from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

In = TypeVar("In")
Out = TypeVar("Out")


class BatchStage(ABC, Generic[In, Out]):
    """One step of the salary pipeline.

    A stage accepts items of one batch (one person's day), and on flush hands
    back what the batch produced. Stages never call each other; the pipeline
    feeds one stage's flush output into the next stage.
    """

    @abstractmethod
    def accept(self, item: In) -> None:
        raise NotImplementedError

    @abstractmethod
    def flush(self) -> list[Out]:
        """Finish the current batch and reset for the next one.

        Returns an empty list when nothing was accepted since the last flush.
        """
        raise NotImplementedError

    def close(self) -> list[Out]:
        return self.flush()


class MultiStagePipeline:
    """Sequences accept/flush over an ordered list of stages."""

    def __init__(self, *stages: BatchStage):
        if not stages:
            raise ValueError("A pipeline needs at least one stage")
        self._stages = stages

    def accept(self, item: Any) -> None:
        self._stages[0].accept(item)

    def flush(self) -> list:
        items = self._stages[0].flush()
        for stage in self._stages[1:]:
            for item in items:
                stage.accept(item)
            items = stage.flush()
        return items
