# coding: utf-8
"""
Copyright (c) 2019 The MITRE Corporation.
"""

import threading
from queue import Queue, Empty, Full

from csvjson.errors import PipelineAborted

__all__ = ['Channel']

_CLOSED = object()


class Channel(object):
    """
    Unbuffered single-producer, single-consumer FIFO hand-off between two threads.

    ``send`` returns only once the consumer has taken the item, so at most one
    item is in flight. ``close`` marks the end of the stream; iterating the
    channel yields items until then. ``abort`` wakes up both ends, which then
    raise :py:class:`PipelineAborted`.

    Parameters:
        poll_interval: Seconds between checks of the abort flag while blocked
    """
    def __init__(self, poll_interval: float = 0.05):
        self._queue = Queue(maxsize=1)
        self._taken = threading.Semaphore(0)
        self._aborted = threading.Event()
        self._closed = False
        self.poll_interval = poll_interval

    def abort(self):
        self._aborted.set()

    def _check_aborted(self, action):
        if self._aborted.is_set():
            raise PipelineAborted("channel aborted while {}".format(action))

    def _put(self, item):
        while True:
            self._check_aborted('sending')
            try:
                self._queue.put(item, timeout=self.poll_interval)
                return
            except Full:
                continue

    def send(self, item):
        if self._closed:
            raise ValueError("send on closed channel")
        self._put(item)
        while not self._taken.acquire(timeout=self.poll_interval):
            self._check_aborted('sending')

    def close(self):
        if self._closed:
            raise ValueError("close of closed channel")
        self._closed = True
        self._put(_CLOSED)

    def receive(self):
        """Block for the next item. Returns ``(item, True)``, or ``(None, False)`` once closed."""
        while True:
            self._check_aborted('receiving')
            try:
                item = self._queue.get(timeout=self.poll_interval)
            except Empty:
                continue
            if item is _CLOSED:
                # leave the marker so later receives also see the end of stream
                self._queue.put(_CLOSED)
                return None, False
            self._taken.release()
            return item, True

    def __iter__(self):
        while True:
            item, more = self.receive()
            if not more:
                return
            yield item
