from lines import BLANK, UNKNOWN


def tile(value, blank=' '):
  if value == UNKNOWN:
    return '?'
  if value == BLANK:
    return blank
  return chr(value + 64)


def draw(board):
  return '\n'.join(''.join(tile(value) for value in row) for row in board)


def compress(board):
  """One character per cell, row after row: '.' blank, '?' unknown, letters for colors."""
  return ''.join(tile(value, blank='.') for row in board for value in row)


def uncompress(compressed, width):
  if width <= 0 or len(compressed) % width:
    raise ValueError("Compressed board of length {} does not split into rows of {}.".format(len(compressed), width))

  values = []
  for c in compressed:
    if c == '.':
      values.append(BLANK)
    elif c == '?':
      values.append(UNKNOWN)
    elif 'A' <= c <= 'Z':
      values.append(ord(c) - 64)
    else:
      raise ValueError("Unknown cell character {!r}.".format(c))

  return [values[i:i + width] for i in range(0, len(values), width)]
