"""Single-slot rendezvous between the sample producer and the render loop."""

from __future__ import annotations

from dataclasses import dataclass
from queue import Queue
from typing import Iterator, Optional, Union

from .models import Sample

_CLOSED = object()


@dataclass(frozen=True)
class _Failure:
    error: BaseException


class Handoff:
    """
    Carry one :class:`Sample` at a time from producer to consumer.

    :meth:`send` returns only after the consumer has taken the sample, so the
    producer can never run ahead of the renderer. The producer ends the stream
    with :meth:`close`, or with :meth:`fail` to have the consumer re-raise
    its error.
    """

    def __init__(self) -> None:
        self._queue: Queue[Union[Sample, _Failure, object]] = Queue(maxsize=1)

    def send(self, sample: Sample) -> None:
        self._queue.put(sample)
        self._queue.join()

    def receive(self) -> Optional[Sample]:
        """Block for the next sample; ``None`` once the stream is closed."""
        item = self._queue.get()
        self._queue.task_done()
        if item is _CLOSED:
            return None
        if isinstance(item, _Failure):
            raise item.error
        return item  # type: ignore[return-value]

    def close(self) -> None:
        self._queue.put(_CLOSED)

    def fail(self, error: BaseException) -> None:
        self._queue.put(_Failure(error))

    def __iter__(self) -> Iterator[Sample]:
        while True:
            sample = self.receive()
            if sample is None:
                return
            yield sample
