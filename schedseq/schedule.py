# The MIT License (MIT)
#
# Copyright (c) 2020 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Ordered sequence of schedulable items which never conflict."""

import collections.abc
import datetime
import logging

from schedseq.common.error import ConflictError, UnsupportedOperationError, \
  EmptyScheduleError, error_if, error_if_none
from schedseq.common.interval import start_comparison

logger = logging.getLogger(__name__)

CONFLICT_MODES = ('contained', 'overlap')

_options = {
  'conflict': 'contained',
}

def set_options(**kwargs):
  """Set default options for new schedules."""
  for k, v in kwargs.items():
    if k not in _options:
      raise ValueError(f"unknown option: {k}")
    if k == 'conflict':
      error_if(v not in CONFLICT_MODES, f"unknown conflict mode '{v}'")
    _options[k] = v

def get_options():
  return dict(_options)

class Schedule(collections.abc.Sequence):
  """An always sorted (earlier to later) sequence of schedulable items.

     Items are any objects with `start`, `end` and `duration`
     (see `schedseq.common.interval.Schedulable`). Items are referenced,
     not copied: changing the start of an item after it has been added
     leaves the schedule in undefined state.

     Conflict modes:
       contained  item conflicts with a time frame if one of them
                  lies within the other; items which only straddle
                  the frame boundary are not reported
       overlap    any intersection of [start, end) ranges conflicts
  """

  start_comparison = staticmethod(start_comparison)

  def __init__(self, items=None, conflict=None):
    if conflict is None:
      conflict = _options['conflict']
    error_if(conflict not in CONFLICT_MODES, f"unknown conflict mode '{conflict}'")
    self.conflict = conflict
    self._items = []
    if items is not None:
      self.update(items)

  def _find_pos(self, item):
    # Invariant
    #   i < l, items[i].start <= item.start
    #   i > r, item.start < items[i].start

    l, r = 0, len(self._items) - 1
    while l <= r:
      m = (l + r) // 2
      if start_comparison(self._items[m], item) <= 0:
        l = m + 1
      else:
        r = m - 1

    return l

  def _conflicts(self, x, start, end):
    # Item lies within frame
    if start <= x.start and x.end <= end:
      return True
    # Frame lies within item
    if x.start <= start < x.end and end <= x.end:
      return True
    if self.conflict == 'overlap':
      return x.start < end and x.end > start
    return False

  def is_moment_free(self, moment):
    """Checks that nothing is scheduled at a given moment.

       Moments at item boundaries are free."""
    error_if_none(moment, 'moment')
    return not any(x.start < moment < x.end for x in self._items)

  def is_time_frame_free(self, start, end):
    """Checks that time frame is free of scheduled items.

       `end` may also be a timedelta, the duration of time frame."""
    error_if_none(start, 'start')
    error_if_none(end, 'end')
    if isinstance(end, datetime.timedelta):
      error_if(end < datetime.timedelta(0), f"duration {end} is negative")
      end = start + end
    error_if(start > end, f"time frame [{start}, {end}) is negative")
    return not any(self._conflicts(x, start, end) for x in self._items)

  def get_scheduled(self, moment):
    """Returns first item which covers moment (inclusive) or None."""
    error_if_none(moment, 'moment')
    for x in self._items:
      if x.start <= moment <= x.end:
        return x
      if x.start > moment:
        break
    return None

  def add(self, item):
    """Adds item to schedule or raises ConflictError if its time is taken."""
    error_if_none(item, 'item')
    error_if_none(item.start, 'item.start')
    if not self.is_time_frame_free(item.start, item.end):
      logger.debug(f"add: rejecting {item!r}, schedule has {len(self._items)} items")
      raise ConflictError(f"{item!r} conflicts with schedule", item=item)
    # Items with equal starts always conflict; ties only arise after
    # external moves, in which case keep insertion order
    i = self._find_pos(item)
    self._items.insert(i, item)
    logger.debug(f"add: inserted {item!r} at position {i}")

  def update(self, items):
    """Adds items one by one in given order.

       Stops at first conflict; items added before it stay in schedule."""
    error_if_none(items, 'items')
    n = 0
    for item in items:
      try:
        self.add(item)
      except ConflictError as e:
        logger.debug(f"update: stopping after {n} items")
        raise ConflictError("an item in the collection conflicted with the schedule",
                            item=item, cause=e) from e
      n += 1
    logger.debug(f"update: added {n} items")

  def insert(self, index, item):
    raise UnsupportedOperationError("positional insertion would break schedule order")

  def insert_range(self, index, items):
    raise UnsupportedOperationError("positional insertion would break schedule order")

  def __setitem__(self, index, item):
    raise UnsupportedOperationError("positional replacement would break schedule order")

  def __delitem__(self, index):
    raise UnsupportedOperationError("items can not be removed from schedule")

  @property
  def start(self):
    """Start of earliest item."""
    if not self._items:
      raise EmptyScheduleError("schedule is empty")
    return self._items[0].start

  @property
  def end(self):
    """End of latest-ending item."""
    if not self._items:
      raise EmptyScheduleError("schedule is empty")
    return max(x.end for x in self._items)

  def __getitem__(self, i):
    return self._items[i]

  def __len__(self):
    return len(self._items)

  def __iter__(self):
    return iter(self._items)

  def dump(self, p):
    p.writeln(f"Schedule ({len(self._items)} items, {self.conflict} conflicts)")
    with p:
      for x in self._items:
        p.writeln(f"{x.start} - {x.end} ({x.duration}): {x!r}")

  def __repr__(self):
    return ', '.join(repr(x) for x in self._items)
