"""Tests for puzzle files: writing them with jinja2 and reading them back."""

from pathlib import Path

import pytest

from drawer import uncompress
from loader import load, parse_clue
from solver import rules_from_board
from writer import clue_text, render_level, render_svg, write_level


HEART_BOARD = uncompress('.A.A.AAAAAAAAAA.AAA...A..', 5)
TEST_DIR = Path(__file__).resolve().parents[1] / 'test'


def test_clue_text_round_trip():
  assert clue_text([[2, 1], [1, 3]]) == '2:1,1:3'
  assert clue_text([]) == ''
  assert parse_clue('2:1,1:3') == [[2, 1], [1, 3]]
  assert parse_clue('  ') == []


@pytest.mark.parametrize('text', ['2', '2:', 'x:1', '2:1;1:1'])
def test_parse_clue_rejects_bad_entries(text):
  with pytest.raises(ValueError):
    parse_clue(text)


def test_rules_from_board():
  rules = rules_from_board(HEART_BOARD)
  assert rules['row'] == [[[1, 1], [1, 1]], [[5, 1]], [[5, 1]], [[3, 1]], [[1, 1]]]
  assert rules['column'] == [[[2, 1]], [[4, 1]], [[4, 1]], [[4, 1]], [[2, 1]]]

  with pytest.raises(ValueError):
    rules_from_board([[1, 0]])


def test_render_level_round_trip():
  contents = render_level(HEART_BOARD, 'Hearts & Arrows', puzzle_id=7)

  assert '<ID>7</ID>' in contents
  assert 'Hearts &amp; Arrows' in contents
  assert '<SCORE>' in contents

  puzzle, name, solution = load(contents)
  assert name == 'Hearts & Arrows'
  assert solution == HEART_BOARD
  assert puzzle.rules == rules_from_board(HEART_BOARD)
  assert puzzle.solve()['board'] == HEART_BOARD


def test_render_level_without_solution():
  contents = render_level(HEART_BOARD, 'Heart', include_solution=False, score=1.5)

  assert '<SOLUTION>' not in contents
  assert '<SCORE>1.5</SCORE>' in contents
  assert load(contents)[2] is None


def test_load_rejects_incomplete_files():
  with pytest.raises(ValueError):
    load('<PUZZLE><ROWS></ROWS></PUZZLE>')


def test_load_rejects_mismatched_solution():
  contents = '<ROWS><CLUE>1:1</CLUE></ROWS><COLUMNS><CLUE>1:1</CLUE></COLUMNS><SOLUTION>AA</SOLUTION>'
  with pytest.raises(ValueError):
    load(contents)


def test_bundled_puzzles_load():
  for path in sorted(TEST_DIR.glob('*.non')):
    puzzle, name, solution = load(path.read_text())
    result = puzzle.solve()
    assert result['solved'], name
    assert result['board'] == solution


def test_write_level(tmp_path, monkeypatch):
  monkeypatch.chdir(tmp_path)
  name = write_level(HEART_BOARD, 'Little Heart', puzzle_id=3)

  assert Path(name).parent.name == 'puzzles'
  assert Path(name).name.endswith('_Little-Heart.non')
  assert Path(name).read_text() == (tmp_path / 'latest.non').read_text()


def test_render_svg():
  board = [[1, -1], [0, 2]]
  svg = render_svg(board, dict(row=[[[1, 1]], [[1, 2]]], column=[[[1, 1]], [[1, 2]]]), title='a < b')

  assert svg.count('<rect') == 4
  assert svg.count('<text') == 4
  assert 'a &lt; b' in svg
  assert '#cccccc' in svg
