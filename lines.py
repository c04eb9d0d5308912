"""
Candidate generation for a single line of a colored nonogram.

A clue is a list of (count, color) pairs. Runs of the same color must be
separated by at least one blank; runs of different colors may touch.

Placing the runs is a stars-and-bars problem: after taking out the colored
cells and the mandatory separators, the remaining blanks ("free spaces") are
spread around the runs. Every arrangement corresponds to picking which of
free_spaces + n_groups slots hold a run, so the candidates are exactly the
combinations of n_groups slots out of that total.
"""

from itertools import combinations
from math import comb


BLANK = -1
UNKNOWN = 0


def validate_clue(clue):
  for entry in clue:
    if len(entry) != 2:
      raise ValueError("Clue entries must be (count, color) pairs (got {}).".format(entry))

    count, color = entry
    if not isinstance(count, int) or count < 1:
      raise ValueError("Run lengths must be positive integers (got {}).".format(count))
    if not isinstance(color, int) or color < 1:
      raise ValueError("Colors must be integers of at least 1 (got {}).".format(color))


def choose(total, pick):
  """All ways to pick `pick` of range(total), in lexicographic order."""
  if pick <= 0:
    return []

  return [list(c) for c in combinations(range(total), pick)]


def tag_clue(clue):
  tagged = []
  previous = None

  for count, color in clue:
    tagged.append((count, color, color == previous))
    previous = color

  return tagged


def free_spaces(length, clue):
  tagged = tag_clue(clue)
  mandatory = sum(1 for _, _, same in tagged if same)
  colored = sum(count for count, _, _ in tagged)
  return length - mandatory - colored


def count_line_solns(length, clue):
  if not clue:
    return 1

  free = free_spaces(length, clue)
  if free < 0:
    return 0

  return comb(free + len(clue), len(clue))


def generate_line_solns(length, clue):
  if not clue:
    return [[BLANK] * length]

  validate_clue(clue)

  tagged = tag_clue(clue)
  n_groups = len(tagged)
  total_slots = free_spaces(length, clue) + n_groups

  solns = []
  for arrangement in choose(total_slots, n_groups):
    slots = [None] * total_slots
    for slot, run in zip(arrangement, tagged):
      slots[slot] = run

    line = []
    for slot in slots:
      if slot is None:
        line.append(BLANK)
        continue

      count, color, same = slot
      if same:
        line.append(BLANK)
      line.extend([color] * count)

    solns.append(line)

  return solns


def clue_from_line(line):
  """Reads the runs back out of a concrete line."""
  clue = []
  previous = BLANK

  for value in line:
    if value == UNKNOWN:
      raise ValueError("Cannot read a clue from a line with unknown cells ({}).".format(line))

    if value != BLANK:
      if value == previous:
        clue[-1][0] += 1
      else:
        clue.append([1, value])

    previous = value

  return clue
