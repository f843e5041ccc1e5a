# The MIT License (MIT)
#
# Copyright (c) 2020 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Always-ordered schedules of time-bounded items which never conflict."""

from schedseq.common.error import ScheduleError, ConflictError, \
  UnsupportedOperationError, EmptyScheduleError
from schedseq.common.interval import Schedulable, Interval, start_comparison
from schedseq.schedule import Schedule, set_options, get_options
