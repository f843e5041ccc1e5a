# The MIT License (MIT)
#
# Copyright (c) 2018-2020 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Pretty-printing APIs."""

import sys

class Printer:
  """Indenting printer for schedule dumps."""

  def __init__(self, out=sys.stdout, tab='  '):
    self.out = out
    self.tab = tab
    self.depth = 0

  def __enter__(self):
    self.depth += 1
    return self

  def __exit__(self, type, value, traceback):
    self.depth -= 1
    assert self.depth >= 0

  def writeln(self, s=''):
    prefix = self.tab * self.depth
    for line in str(s).split('\n'):
      self.out.write((prefix + line if line else '') + '\n')
