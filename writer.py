import os
import sys
import time
import datetime
from jinja2 import DictLoader, Environment, select_autoescape

from drawer import compress, uncompress
from lines import BLANK, UNKNOWN
from scorer import score
from solver import Puzzle, rules_from_board


LEVEL_TEMPLATE = '''<PUZZLE>
  <ID>{{ puzzle_id }}</ID>
  <TITLE>{{ title }}</TITLE>
  <WIDTH>{{ columns|length }}</WIDTH>
  <HEIGHT>{{ rows|length }}</HEIGHT>
{%- if score is not none %}
  <SCORE>{{ score }}</SCORE>
{%- endif %}
  <ROWS>
{%- for clue in rows %}
    <CLUE>{{ clue|clue_text }}</CLUE>
{%- endfor %}
  </ROWS>
  <COLUMNS>
{%- for clue in columns %}
    <CLUE>{{ clue|clue_text }}</CLUE>
{%- endfor %}
  </COLUMNS>
{%- if solution %}
  <SOLUTION>{{ solution }}</SOLUTION>
{%- endif %}
</PUZZLE>
'''

BOARD_TEMPLATE = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="{{ -margin }} {{ -margin }} {{ width + margin }} {{ height + margin }}">
  <title>{{ title }}</title>
{%- for cell in cells %}
  <rect x="{{ cell.x }}" y="{{ cell.y }}" width="{{ tile_size }}" height="{{ tile_size }}" fill="{{ cell.fill }}" stroke="#999999" stroke-width="0.2"/>
{%- endfor %}
{%- for hint in hints %}
  <text x="{{ hint.x }}" y="{{ hint.y }}" font-size="{{ font_size }}" text-anchor="end">{{ hint.text }}</text>
{%- endfor %}
</svg>
'''

PALETTE = ['#222222', '#d62728', '#1f77b4', '#2ca02c', '#ff7f0e', '#9467bd', '#8c564b', '#e377c2']


def clue_text(clue):
  return ','.join(f'{count}:{color}' for count, color in clue)


# Jinja2 setup stuff
env = Environment(
  loader=DictLoader({'level.xml': LEVEL_TEMPLATE, 'board.svg': BOARD_TEMPLATE}),
  autoescape=select_autoescape(['xml', 'svg']),
)
env.filters['clue_text'] = clue_text

level_template = env.get_template('level.xml')
board_template = env.get_template('board.svg')


def render_level(board, title, **parameters):
  params = dict(
    puzzle_id=int(time.time()),
    score=None,
    include_solution=True,
  )
  params.update(parameters)

  rules = rules_from_board(board)
  if params['score'] is None:
    result = Puzzle(rules['row'], rules['column']).solve()
    params['score'] = round(score(result, 'seqnum'), 3)

  return level_template.render(
    puzzle_id=params['puzzle_id'],
    title=title,
    score=params['score'],
    rows=rules['row'],
    columns=rules['column'],
    solution=compress(board) if params['include_solution'] else '',
  )


def render_svg(board, rules, title='', tile_size=10, palette=None):
  palette = palette or PALETTE
  height = len(board)
  width = len(board[0]) if board else 0

  cells = []
  for x, row in enumerate(board):
    for y, value in enumerate(row):
      if value == UNKNOWN:
        fill = '#cccccc'
      elif value == BLANK:
        fill = '#ffffff'
      else:
        fill = palette[(value - 1) % len(palette)]

      cells.append(dict(x=y * tile_size, y=x * tile_size, fill=fill))

  hints = []
  for x, clue in enumerate(rules['row']):
    hints.append(dict(x=-tile_size / 4, y=(x + 0.75) * tile_size, text=' '.join(str(count) for count, _ in clue)))
  for y, clue in enumerate(rules['column']):
    hints.append(dict(x=(y + 0.75) * tile_size, y=-tile_size / 4, text=' '.join(str(count) for count, _ in clue)))

  margin = tile_size * max([len(clue) for clue in rules['row'] + rules['column']] + [1])
  return board_template.render(
    title=title,
    cells=cells,
    hints=hints,
    tile_size=tile_size,
    font_size=tile_size / 2,
    width=width * tile_size,
    height=height * tile_size,
    margin=margin,
  )


def write_level(board, title, directory='puzzles', **parameters):
  level = render_level(board, title, **parameters)

  today = datetime.datetime.strftime(datetime.datetime.now(), '%Y%m%d')
  filename_safe_title = title.replace(' ', '-')

  os.makedirs(directory, exist_ok=True)
  name = os.path.join(directory, f'{today}_{filename_safe_title}.non')
  print(name)

  # Write to the filename and also the latest file, for immediate testing
  with open(name, 'w') as file:
    file.write(level)

  with open('latest.non', 'w') as file:
    file.write(level)

  return name


# python writer.py <width> <compressed> [title]
# <compressed> is a string of `.`, `A`-`Z` for the cells, row after row (blank or colored)

if __name__ == '__main__':
  width = int(sys.argv[1])
  board = uncompress(sys.argv[2], width)
  title = sys.argv[3] if len(sys.argv) > 3 else 'untitled'

  write_level(board, title)
