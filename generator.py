import sys
import random
import operator

from drawer import uncompress
from scorer import score
from solver import Puzzle, rules_from_board


COLORS = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'


def score_candidate(width, compressed, score_method, max_mutual_passes=-1, verbose=False):
  board = uncompress(compressed, width)
  rules = rules_from_board(board)

  puzzle = Puzzle(rules['row'], rules['column'], verbose=verbose, max_mutual_passes=max_mutual_passes)
  result = puzzle.solve()

  # propagation never guesses, so a solved board is the only one the clues allow
  if result['solved'] and result['board'] != board:
    raise ValueError(f'Solver disagrees with the board it was built from: {compressed}')

  return score(result, score_method), result


def random_compressed(num, probabilities, rng=random):
  """`probabilities[i]` is [p(blank), p(A), p(B), ...] for cell i."""
  c = ''

  for index in range(num):
    r = rng.random()
    total = 0

    for char_index, p in enumerate(probabilities[index]):
      total += p
      if r <= total:
        c += '.' if char_index == 0 else COLORS[char_index - 1]
        break
    else:
      c += '.'

  return c


def variants_of(base, colors):
  chars = '.' + COLORS[:colors]

  for i in range(len(base)):
    for c in chars:
      if base[i] == c:
        continue

      yield base[:i] + c + base[i + 1:]


def iteration(width, height, score_method='seqnum', colors=1, max_mutual_passes=-1, rounds=None, rng=random):
  """
  Hill-climbs towards hard puzzles the solver can still finish.

  Each round starts from a random board and keeps taking the best one-cell
  change until nothing improves the score. Returns the best
  (score, compressed, result) seen; runs forever when `rounds` is None.
  """
  num = width * height
  probabilities = [0.5] + [0.5 / colors] * colors

  comp = operator.gt
  best = (-1, None, None)
  round_num = 0

  while rounds is None or round_num < rounds:
    round_num += 1

    base = random_compressed(num, [probabilities] * num, rng)
    base_score, base_result = score_candidate(width, base, score_method, max_mutual_passes)

    while 1:
      variants = {}
      for v in variants_of(base, colors):
        if v not in variants:
          variants[v] = score_candidate(width, v, score_method, max_mutual_passes)

      if not variants:
        break

      top = sorted(variants.items(), key=lambda x: x[1][0])[-1]
      if not comp(top[1][0], base_score):
        break

      base = top[0]
      base_score, base_result = top[1]

    output = 'Best of round {}: {} with score {}'.format(round_num, base, base_score)
    if base_score >= 0:
      steps = ''.join(['M' if 'mutual' in step else 'L' for step in base_result['summary']])
      output += f' and steps {steps}'
    print(output)

    if best[1] is None or comp(base_score, best[0]):
      best = (base_score, base, base_result)
      blank = (probabilities[0] + base.count('.') / num) / 2
      probabilities = [blank] + [(1 - blank) / colors] * colors
      print(' ^ Best so far!')

  return best


# python generator.py <width> <height> [colors] [rounds]

if __name__ == '__main__':
  print('argv:', sys.argv)

  width = int(sys.argv[1]) if len(sys.argv) > 1 else 5
  height = int(sys.argv[2]) if len(sys.argv) > 2 else width
  colors = int(sys.argv[3]) if len(sys.argv) > 3 else 1
  rounds = int(sys.argv[4]) if len(sys.argv) > 4 else None

  iteration(width, height, 'seqnum', colors=colors, rounds=rounds)
