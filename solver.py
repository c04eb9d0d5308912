"""
A solver for colored nonograms that works by propagating line candidates.

Assumptions/conditions:

* Every row and column has a clue: an ordered list of (count, color) runs.
* Board cells are 0 (unknown), -1 (blank) or a color id (1 and up).
* Each line starts with every coloring that satisfies its own clue.

* A cell on which every candidate of a line agrees is forced. That is a move.
* Moves from the rows prune the columns they cross, and vice versa.
* When moves stop pruning anything, each (row, column) crossing keeps only the
  colors both sides still allow there. This is slower but catches more.
* A line whose candidates are down to one is solved and retired.

* A solution is found when every row (or every column) is retired.
* No guessing: a line with no candidates left, or a round where nothing gets
  pruned, means the puzzle cannot be solved this way.
"""

from lines import UNKNOWN, clue_from_line
from pruner import moves_for_column, moves_for_row, prune_column_by_moves, prune_mutual, prune_row_by_moves
from store import CandidateStore, Move, find_column_moves, find_row_moves


class Unsolvable(Exception):
  def __init__(self, message, unsolved_rows, unsolved_columns):
    super().__init__(message)
    self.message = message
    self.unsolved_rows = unsolved_rows
    self.unsolved_columns = unsolved_columns


def empty_board(height, width):
  return [[UNKNOWN] * width for _ in range(height)]


def rules_from_board(board):
  for row in board:
    if UNKNOWN in row:
      raise ValueError("Cannot make clues for a board with unknown cells.")

  width = len(board[0]) if board else 0
  return dict(
    row=[clue_from_line(row) for row in board],
    column=[clue_from_line([row[y] for row in board]) for y in range(width)],
  )


def check_board(board, height, width):
  if len(board) != height or any(len(row) != width for row in board):
    raise ValueError("Board must be {} rows of {} cells.".format(height, width))


class MoveCursor(object):
  """
  Produces the moves of one solve, one at a time.

  Each move is written to `board` as it is handed out. `next_move` returns
  None once there is nothing left; `solved` and `failure` tell the two
  endings apart. Iterating the cursor does the same but raises the failure.
  """

  def __init__(self, row_clues, column_clues, board=None, verbose=False, max_mutual_passes=-1):
    height = len(row_clues)
    width = len(column_clues)

    if board is None:
      board = empty_board(height, width)
    check_board(board, height, width)

    self.board = board
    self.verbose = verbose
    self.mutual_passes = max_mutual_passes

    self.store = CandidateStore(row_clues, column_clues)
    self.pending = []
    self.round_moves = None
    self.summary = []

    self.solved = False
    self.failure = None
    self.finished = False

    if self.verbose:
      print('starting candidates:')
      for x, lines in enumerate(self.store.rows):
        print(f'  row {x}: {len(lines)}')
      for y, lines in enumerate(self.store.columns):
        print(f'  column {y}: {len(lines)}')

    self.seed_from_board()
    self.check_conflict()

  def __iter__(self):
    return self

  def __next__(self):
    move = self.next_move()
    if move is not None:
      return move
    if self.failure is not None:
      raise self.failure
    raise StopIteration

  def seed_from_board(self):
    known = [Move(x, y, value) for x, row in enumerate(self.board) for y, value in enumerate(row) if value != UNKNOWN]
    if not known:
      return

    for x in self.store.active_rows():
      self.store.rows[x], _ = prune_row_by_moves(self.store.rows[x], moves_for_row(x, known))
    for y in self.store.active_columns():
      self.store.columns[y], _ = prune_column_by_moves(self.store.columns[y], moves_for_column(y, known))

  def fail(self, message):
    self.failure = Unsolvable(message, self.store.active_rows(), self.store.active_columns())
    self.finished = True

    if self.verbose:
      print('failed:', message)
      print('  unsolved rows:', self.failure.unsolved_rows)
      print('  unsolved columns:', self.failure.unsolved_columns)

  def check_conflict(self):
    conflict = self.store.conflict()
    if conflict is None:
      return False

    dim, index = conflict
    self.fail(f'{dim.capitalize()} {index} has no solutions')
    return True

  def finish(self):
    assert not any(UNKNOWN in row for row in self.board), 'solved with unknown cells left'
    self.solved = True
    self.finished = True

    if self.verbose:
      print('solved in', len(self.summary), 'rounds')

  def next_move(self):
    while True:
      while self.pending:
        move = self.pending.pop(0)
        if self.board[move.x][move.y] != UNKNOWN:
          continue

        self.board[move.x][move.y] = move.next
        self.summary[-1]['moves'] += 1
        return move

      if self.finished:
        return None

      if self.round_moves is not None:
        self.settle()
      if not self.finished:
        self.extract()

  def extract(self):
    store = self.store
    if not store.unsolved_rows or not store.unsolved_columns:
      self.finish()
      return

    active_rows = store.active_rows()
    active_columns = store.active_columns()

    row_moves = []
    for x in active_rows:
      row_moves.extend(find_row_moves(x, active_columns, store.rows[x]))

    column_moves = []
    for y in active_columns:
      column_moves.extend(find_column_moves(y, active_rows, store.columns[y]))

    self.summary.append(dict(
      rows=len(active_rows),
      columns=len(active_columns),
      candidates=store.candidate_mass(),
      moves=0,
      pruned=0,
    ))

    self.round_moves = (active_rows, active_columns, row_moves, column_moves)
    self.pending = row_moves + column_moves

  def settle(self):
    store = self.store
    active_rows, active_columns, row_moves, column_moves = self.round_moves
    self.round_moves = None
    step = self.summary[-1]

    pruned = 0
    for x in active_rows:
      if len(store.rows[x]) == 1:
        store.retire_row(x)
        pruned += 1
      elif not store.rows[x]:
        self.fail(f'Row {x} has no solutions')
        return
      else:
        store.rows[x], removed = prune_row_by_moves(store.rows[x], moves_for_row(x, column_moves))
        pruned += removed

    for y in active_columns:
      if len(store.columns[y]) == 1:
        store.retire_column(y)
        pruned += 1
      elif not store.columns[y]:
        self.fail(f'Column {y} has no solutions')
        return
      else:
        store.columns[y], removed = prune_column_by_moves(store.columns[y], moves_for_column(y, row_moves))
        pruned += removed

    step['pruned'] = pruned
    if self.verbose:
      print('round {}: {} rows, {} columns, {} candidates, {} moves, {} pruned'.format(
        len(self.summary), step['rows'], step['columns'], step['candidates'], step['moves'], pruned))

    if self.check_conflict() or pruned > 0:
      return

    if self.mutual_passes == 0:
      self.fail('Ran out of moves')
      return
    self.mutual_passes -= 1

    pruned = prune_mutual(store)
    step['mutual'] = pruned
    if self.verbose:
      print('  mutual pass pruned', pruned)

    if self.check_conflict():
      return
    if pruned == 0:
      self.fail('Ran out of moves')


class Puzzle(object):
  """
  # 5x5 heart
  rows = [
    [[1, 1], [1, 1]],
    [[5, 1]],
    [[5, 1]],
    [[3, 1]],
    [[1, 1]],
  ]
  columns = [
    [[2, 1]],
    [[4, 1]],
    [[4, 1]],
    [[4, 1]],
    [[2, 1]],
  ]
  """

  def __init__(self, rows, columns, verbose=False, max_mutual_passes=-1):
    self.rows = rows
    self.columns = columns
    self.verbose = verbose
    self.max_mutual_passes = max_mutual_passes

  @property
  def rules(self):
    return dict(row=self.rows, column=self.columns)

  def moves(self, board=None):
    return MoveCursor(self.rows, self.columns, board, verbose=self.verbose, max_mutual_passes=self.max_mutual_passes)

  def solve(self):
    cursor = self.moves()
    while cursor.next_move() is not None:
      pass

    failure = cursor.failure
    return dict(
      board=cursor.board,
      solved=cursor.solved,
      reason=failure.message if failure else None,
      unsolved=dict(
        rows=failure.unsolved_rows if failure else [],
        columns=failure.unsolved_columns if failure else [],
      ),
      summary=cursor.summary,
    )


def solve(rules, verbose=False, max_mutual_passes=-1):
  return Puzzle(rules['row'], rules['column'], verbose=verbose, max_mutual_passes=max_mutual_passes).solve()


def generate_moves(rules, board=None, verbose=False, max_mutual_passes=-1):
  return Puzzle(rules['row'], rules['column'], verbose=verbose, max_mutual_passes=max_mutual_passes).moves(board)
