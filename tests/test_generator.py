"""Tests for the puzzle generator and the puzzle-file runner."""

import random
from pathlib import Path

from generator import iteration, random_compressed, score_candidate, variants_of
from tester import read_index, run


TEST_DIR = Path(__file__).resolve().parents[1] / 'test'


def test_random_compressed_uses_probabilities():
  rng = random.Random(0)
  assert random_compressed(6, [[1.0, 0.0]] * 6, rng) == '......'
  assert random_compressed(6, [[0.0, 0.0, 1.0]] * 6, rng) == 'BBBBBB'

  mixed = random_compressed(50, [[0.5, 0.25, 0.25]] * 50, rng)
  assert len(mixed) == 50
  assert set(mixed) <= set('.AB')


def test_variants_change_one_cell():
  variants = list(variants_of('.A', 2))
  assert variants == ['AA', 'BA', '..', '.B']


def test_score_candidate_solves_heart():
  scored, result = score_candidate(5, '.A.A.AAAAAAAAAA.AAA...A..', 'seqnum')
  assert result['solved']
  assert scored > 0


def test_score_candidate_ambiguous_board():
  scored, result = score_candidate(2, 'A..A', 'seqnum')
  assert not result['solved']
  assert scored == -1


def test_iteration_returns_best(capsys):
  scored, compressed, result = iteration(3, 3, colors=2, rounds=2, rng=random.Random(3))

  assert len(compressed) == 9
  assert scored == score_candidate(3, compressed, 'seqnum')[0]
  assert 'Best of round 2' in capsys.readouterr().out


def test_tester_runs_bundled_puzzles(capsys):
  assert [name for _, name in read_index(TEST_DIR)] == ['heart.non', 'frame.non']

  results = run(directory=TEST_DIR)
  assert [ok for _, ok, _ in results] == [True, True]

  results = run('2', directory=TEST_DIR)
  assert [filename for filename, _, _ in results] == ['frame.non']
  assert 'Framed Square' in capsys.readouterr().out
