def prune_by_moves(lines, moves, dim):
  """
  Drops the lines that disagree with any of `moves`.

  `dim` names the Move field holding the position along the line: 'y' for a
  row, 'x' for a column. Returns (kept lines, number removed).
  """
  kept = [line for line in lines if all(line[getattr(m, dim)] == m.next for m in moves)]
  return kept, len(lines) - len(kept)


def prune_row_by_moves(lines, moves):
  return prune_by_moves(lines, moves, 'y')


def prune_column_by_moves(lines, moves):
  return prune_by_moves(lines, moves, 'x')


def moves_for_row(x, moves):
  return [m for m in moves if m.x == x]


def moves_for_column(y, moves):
  return [m for m in moves if m.y == y]


def possible_colors(lines, i):
  return {line[i] for line in lines}


def prune_by_colors(lines, allowed, i):
  kept = [line for line in lines if line[i] in allowed]
  return kept, len(lines) - len(kept)


def prune_pair(row_lines, x, column_lines, y):
  """
  Arc consistency for the cell shared by row x and column y.

  Both sides keep only candidates whose value at the shared cell is also
  possible for the other side.
  """
  allowed = possible_colors(row_lines, y) & possible_colors(column_lines, x)

  row_kept, row_pruned = prune_by_colors(row_lines, allowed, y)
  column_kept, column_pruned = prune_by_colors(column_lines, allowed, x)
  return row_kept, column_kept, row_pruned + column_pruned


def prune_mutual(store):
  """One arc-consistency pass over every active (row, column) pair of the store."""
  pruned = 0
  active_columns = store.active_columns()

  for x in store.active_rows():
    for y in active_columns:
      store.rows[x], store.columns[y], removed = prune_pair(store.rows[x], x, store.columns[y], y)
      pruned += removed

  return pruned
