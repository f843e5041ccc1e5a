# The MIT License (MIT)
#
# Copyright (c) 2018-2020 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Error handling APIs."""

class ScheduleError(Exception):
  """Base class for all schedule errors."""

class ConflictError(ScheduleError):
  """Item can not be scheduled because its time frame is taken.

     When raised from bulk insertion, `cause` holds the conflict
     of the first item which failed."""

  def __init__(self, msg=None, item=None, cause=None):
    super().__init__(msg)
    self.msg = msg
    self.item = item
    self.cause = cause

  def __str__(self):
    s = self.msg or "schedule conflict"
    if self.cause is not None:
      s += f" ({self.cause})"
    return s

class UnsupportedOperationError(ScheduleError, NotImplementedError):
  """Operation would break ordering of schedule."""

class EmptyScheduleError(ScheduleError, LookupError):
  """Query needs a non-empty schedule."""

def error_if(cond, msg):
  """Raise ValueError if condition is true."""
  if cond:
    raise ValueError(msg)

def error_if_none(val, name):
  """Raise ValueError for undefined argument."""
  error_if(val is None, f"'{name}' is undefined")
