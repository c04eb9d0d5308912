import sys
import json

from drawer import draw
from loader import load


if __name__ == '__main__':
  filename = sys.argv[1] if len(sys.argv) > 1 else 'latest.non'

  # load and solve the puzzle
  with open(filename) as f:
    puzzle, name, expected = load(f.read())
  solution = puzzle.solve()

  # write out the solution
  with open(filename + '.soln', 'w') as f:
    f.write(json.dumps(solution, indent=2))

  print(name)
  print(draw(solution['board']))

  if not solution['solved']:
    print(solution['reason'])
    print('unsolved rows:', solution['unsolved']['rows'])
    print('unsolved columns:', solution['unsolved']['columns'])
  elif expected is not None and expected != solution['board']:
    print('solution differs from the one stored in the file')
