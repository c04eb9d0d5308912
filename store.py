from collections import namedtuple

from lines import generate_line_solns


Move = namedtuple('Move', ['x', 'y', 'next'])  # board[x][y] = next


class CandidateStore(object):
  """
  Surviving candidate lines for every row and column.

  Candidate lists are indexed by line number and never re-grow. A line is
  retired (marked inactive) once its list is down to a single candidate.
  """

  def __init__(self, row_clues, column_clues):
    width = len(column_clues)
    height = len(row_clues)

    self.rows = [generate_line_solns(width, clue) for clue in row_clues]
    self.columns = [generate_line_solns(height, clue) for clue in column_clues]

    self.row_active = [True] * height
    self.column_active = [True] * width
    self.unsolved_rows = height
    self.unsolved_columns = width

  def active_rows(self):
    return [x for x, active in enumerate(self.row_active) if active]

  def active_columns(self):
    return [y for y, active in enumerate(self.column_active) if active]

  def retire_row(self, x):
    if self.row_active[x]:
      self.row_active[x] = False
      self.unsolved_rows -= 1

  def retire_column(self, y):
    if self.column_active[y]:
      self.column_active[y] = False
      self.unsolved_columns -= 1

  def conflict(self):
    """The first active line with no candidates left, as ('row' | 'column', index)."""
    for x in self.active_rows():
      if not self.rows[x]:
        return 'row', x

    for y in self.active_columns():
      if not self.columns[y]:
        return 'column', y

    return None

  def candidate_mass(self):
    mass = sum(len(self.rows[x]) for x in self.active_rows())
    mass += sum(len(self.columns[y]) for y in self.active_columns())
    return mass


def find_moves(lines, indices, to_move):
  """
  Moves for every position in `indices` on which all of `lines` agree.

  `to_move(position, value)` builds the Move, which lets rows and columns
  share this.
  """
  moves = []
  if not lines:
    return moves

  first = lines[0]
  for i in indices:
    if all(line[i] == first[i] for line in lines):
      moves.append(to_move(i, first[i]))

  return moves


def find_row_moves(x, active_columns, lines):
  return find_moves(lines, active_columns, lambda y, value: Move(x, y, value))


def find_column_moves(y, active_rows, lines):
  return find_moves(lines, active_rows, lambda x, value: Move(x, y, value))
