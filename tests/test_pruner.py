"""Tests for move pruning and mutual (arc-consistency) pruning."""

from hypothesis import given, strategies as st

from lines import generate_line_solns
from pruner import (
  moves_for_column,
  moves_for_row,
  possible_colors,
  prune_by_colors,
  prune_column_by_moves,
  prune_mutual,
  prune_pair,
  prune_row_by_moves,
)
from store import CandidateStore, Move


def test_prune_row_by_moves():
  lines = generate_line_solns(4, [[2, 1]])  # 3 candidates
  kept, removed = prune_row_by_moves(lines, [Move(0, 0, -1)])

  assert kept == [[-1, 1, 1, -1], [-1, -1, 1, 1]]
  assert removed == 1


def test_prune_column_by_moves_uses_row_index():
  lines = generate_line_solns(3, [[1, 1]])
  kept, removed = prune_column_by_moves(lines, [Move(2, 7, 1)])

  assert kept == [[-1, -1, 1]]
  assert removed == 2


def test_moves_for_line():
  moves = [Move(0, 1, 1), Move(1, 1, -1), Move(0, 2, 1)]
  assert moves_for_row(0, moves) == [Move(0, 1, 1), Move(0, 2, 1)]
  assert moves_for_column(1, moves) == [Move(0, 1, 1), Move(1, 1, -1)]


def test_prune_by_colors():
  lines = [[1, -1], [2, -1], [-1, 1]]
  assert possible_colors(lines, 0) == {1, 2, -1}

  kept, removed = prune_by_colors(lines, {1, -1}, 0)
  assert kept == [[1, -1], [-1, 1]]
  assert removed == 1


def test_prune_pair_intersects_both_sides():
  rows = [[1, -1], [2, -1]]
  columns = [[2, -1], [-1, 2]]

  row_kept, column_kept, removed = prune_pair(rows, 0, columns, 0)
  assert row_kept == [[2, -1]]
  assert column_kept == [[2, -1]]
  assert removed == 2


def test_prune_mutual_stalls_on_ambiguous_puzzle():
  """Two diagonal solutions: every crossing allows both values, so nothing goes."""
  store = CandidateStore([[[1, 1]], [[1, 1]]], [[[1, 1]], [[1, 1]]])
  assert prune_mutual(store) == 0
  assert [len(lines) for lines in store.rows + store.columns] == [2, 2, 2, 2]


line_sets = st.integers(min_value=1, max_value=4).flatmap(
  lambda length: st.lists(
    st.lists(st.sampled_from([-1, 1, 2]), min_size=length, max_size=length),
    min_size=1,
    max_size=6,
  )
)


@given(line_sets, line_sets, st.data())
def test_prune_pair_is_monotonic_and_idempotent(rows, columns, data):
  """Pruning a crossing never grows either side, and a second run removes nothing."""
  x = data.draw(st.integers(min_value=0, max_value=len(columns[0]) - 1))
  y = data.draw(st.integers(min_value=0, max_value=len(rows[0]) - 1))

  row_kept, column_kept, removed = prune_pair(rows, x, columns, y)
  assert len(row_kept) <= len(rows)
  assert len(column_kept) <= len(columns)
  assert removed == len(rows) - len(row_kept) + len(columns) - len(column_kept)

  _, _, removed_again = prune_pair(row_kept, x, column_kept, y)
  assert removed_again == 0


def test_prune_mutual_reaches_a_fixed_point():
  store = CandidateStore([[[1, 1]], [[2, 2]], []], [[[1, 1]], [[1, 1], [1, 2]], [[1, 2]]])
  mass = store.candidate_mass()

  while prune_mutual(store):
    assert store.candidate_mass() < mass
    mass = store.candidate_mass()

  assert prune_mutual(store) == 0
