# The MIT License (MIT)
#
# Copyright (c) 2020 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.
#
# This file contains APIs for describing and comparing time ranges.

import datetime
from typing import Protocol

from schedseq.common.error import error_if, error_if_none

class Schedulable(Protocol):
  """Anything which can be put into a schedule.

     Only `start` may be changed by the item's owner;
     `end` and `duration` are derived and `end >= start`."""

  start: datetime.datetime

  @property
  def end(self) -> datetime.datetime: ...

  @property
  def duration(self) -> datetime.timedelta: ...

def start_comparison(s1, s2) -> int:
  """Compares starts of two schedulable items.

     Returns -1 if s1 is earlier, 0 if starts are equal
     and 1 if s2 is earlier."""
  error_if(s1 is None or s1.start is None, "first item or its start is undefined")
  error_if(s2 is None or s2.start is None, "second item or its start is undefined")
  if s1.start == s2.start:
    return 0
  return 1 if s1.start > s2.start else -1

class Interval:
  """Represents interval of time [start, end)."""

  def __init__(self, start, end=None):
    error_if_none(start, 'start')
    if end is None:
      end = start
    error_if(end < start, f"end {end} is earlier than start {start}")
    self._start = start
    self._end = end

  @classmethod
  def from_duration(cls, start, duration):
    error_if_none(start, 'start')
    error_if_none(duration, 'duration')
    error_if(duration < datetime.timedelta(0), f"duration {duration} is negative")
    return cls(start, start + duration)

  @property
  def start(self):
    return self._start

  @start.setter
  def start(self, d):
    # Moving interval keeps its duration
    error_if_none(d, 'start')
    self._end = d + self.duration
    self._start = d

  @property
  def end(self):
    return self._end

  @property
  def duration(self):
    return self._end - self._start

  def before(self, i):
    return self._end <= i.start

  def after(self, i):
    return self._start >= i.end

  def overlaps(self, i):
    return not (self.before(i) or self.after(i))

  def contains(self, i):
    return self._start <= i.start and i.end <= self._end

  def __eq__(self, i):
    if not isinstance(i, Interval):
      return NotImplemented
    return self._start == i.start and self._end == i.end

  def __repr__(self):
    return '[%s, %s)' % (self._start, self._end)
