import re
from html import unescape

from drawer import uncompress
from solver import Puzzle


def parse_clue(text):
  clue = []
  text = text.strip()
  if not text:
    return clue

  for entry in text.split(','):
    match = re.fullmatch(r'\s*(\d+):(\d+)\s*', entry)
    if not match:
      raise ValueError("Malformed clue entry {!r}.".format(entry))
    clue.append([int(match.group(1)), int(match.group(2))])

  return clue


def parse_clues(block):
  return [parse_clue(clue) for clue in re.findall('<CLUE>(.*?)</CLUE>', block, re.DOTALL)]


def load(contents, verbose=False):
  # Not parsing arbitrary XML here!
  rows_match = re.search('<ROWS>(.*?)</ROWS>', contents, re.DOTALL)
  columns_match = re.search('<COLUMNS>(.*?)</COLUMNS>', contents, re.DOTALL)
  if not rows_match or not columns_match:
    raise ValueError("Puzzle needs both <ROWS> and <COLUMNS>.")

  rows = parse_clues(rows_match.group(1))
  columns = parse_clues(columns_match.group(1))

  title_match = re.search('<TITLE>(.*?)</TITLE>', contents)
  name = unescape(title_match.group(1)) if title_match else ''

  solution = None
  solution_match = re.search('<SOLUTION>(.*?)</SOLUTION>', contents, re.DOTALL)
  if solution_match:
    solution = uncompress(solution_match.group(1).strip(), len(columns))
    if len(solution) != len(rows):
      raise ValueError("Solution has {} rows but the puzzle has {}.".format(len(solution), len(rows)))

  if verbose:
    print('rows:')
    for clue in rows:
      print(' ', clue)
    print('columns:')
    for clue in columns:
      print(' ', clue)

  return Puzzle(rows, columns, verbose=verbose), name, solution
