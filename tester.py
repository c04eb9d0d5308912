import os
import sys
import time

from loader import load
from scorer import score


def read_index(directory):
  filenames = []

  # this file solely consists of lines in the form "[id] [filename]"
  # where filenames are in that same folder
  with open(os.path.join(directory, 'index')) as index:
    for line in index.read().split('\n'):
      if not line.strip():
        continue

      id, name = line.strip().split(' ')
      filenames.append((id, name))

  return filenames


def run(level_id=None, verbose=False, directory='test'):
  # a shorthand to make it easy to test the latest puzzle you generated
  if level_id == '-1':
    filenames = ['../latest.non']

  else:
    filenames = [name for id, name in read_index(directory) if level_id is None or id == level_id]

  print('filenames:', filenames)
  results = []
  for index, filename in enumerate(filenames):
    with open(os.path.join(directory, filename)) as level:
      puzzle, name, expected = load(level.read(), verbose=verbose)

    st = time.time()
    result = puzzle.solve()
    et = time.time()

    if verbose:
      print('result:', result)
      print('')
      for step in result['summary']:
        print(' ', step)

    if verbose and not result['solved']:
      print('unsolved rows:', result['unsolved']['rows'])
      print('unsolved columns:', result['unsolved']['columns'])

    matches = expected is None or expected == result['board']
    scored = score(result, 'seqnum')
    print(f'{index + 1:3} {filename:20}: {et - st:.3f} seconds, solved {result["solved"]}, matches {matches}, score {scored:.3f} - {name}')
    results.append((filename, result['solved'] and matches, scored))

  return results


# python tester.py [puzzle_id [--verbose]]
# with no args, this runs the scorer on all puzzles defined in /test/index
# with a puzzle id, this runs the scorer on that one (defined in /test/index)
# --verbose enables a ton of debug print statements

if __name__ == '__main__':
  args = [arg for arg in sys.argv[1:] if arg != '--verbose']
  run(args[-1] if args else None, verbose=('--verbose' in sys.argv))
