from math import log


def roundnum(result):
  total_score = 0
  for step in result['summary']:
    if 'mutual' in step:
      total_score += 1 + log(1 + step['mutual'])
    elif step['moves']:
      total_score += 1

  return total_score


def seqnum(result):
  total_score = 0
  mutual_count = 0

  for step in result['summary']:
    if step['moves']:
      total_score += 1

    if 'mutual' in step:
      mutual_count += 1
    elif mutual_count:
      # runs of back-to-back mutual passes weigh more than the same passes spread out
      total_score += mutual_count ** 2
      mutual_count = 0

  total_score += mutual_count ** 2
  return total_score


def score(result, method):
  if not result['solved']:
    return -1

  methods = dict(
    roundnum=roundnum,
    seqnum=seqnum,
  )

  return methods[method](result)
