"""
# Calendar cycle aggregation and address resolution.

# A calendar cycle is described as a tree of nodes, `(title, repeat, sub)`, where
# leaves hold the sequence of month lengths of a year. &aggregate annotates the
# tree with month and day totals so that &resolve can convert an address in one
# unit (months or days) into an address in the other without iterating over years.

# Used by &.gregorian to define the four hundred year Gregorian cycle.
"""
import itertools

def aggregate(node,
		chain=itertools.chain,
		accumulate=itertools.accumulate,
		isinstance=isinstance, int=int,
		tuple=tuple, range=range,
		len=len, sum=sum,
	):
	"""
	# Recursively total the months and days contained by &node.

	# Returns `(title, repeat, aggregates, fragment, totals)` where &fragment is the
	# `(months, days)` of a single repetition and &totals is &fragment multiplied
	# by &repeat.
	"""
	title, repeat, sub = node

	if isinstance(sub[0], int):
		# Leaf; month lengths of a year.
		days = tuple(accumulate(chain((0,), sub)))
		months = tuple(range(len(sub) + 1))
		agg = (months, days)
		fragment = (len(sub), days[-1])
	else:
		agg = tuple([aggregate(x) for x in sub])
		fragment = (
			sum([y[-1][0] for y in agg]),
			sum([y[-1][1] for y in agg]),
		)

	return (
		title, repeat, agg,
		fragment,
		(repeat * fragment[0], repeat * fragment[1]),
	)

def resolve(selectors, address, calendar,
		divmod=divmod, isinstance=isinstance,
		range=range, len=len, int=int,
	):
	"""
	# Resolve &address, expressed in the unit chosen by the first selector,
	# into the unit chosen by the second selector.

	# Returns `(cycles, resolved, remainder, span)` where &resolved is the address,
	# in output units, of the start of the containing month; &remainder is the
	# input quantity not consumed by &resolved; and &span is the length of the
	# containing month in output units.

	# [ Parameters ]
	# /selectors/
		# Pair of functions selecting the input and output components of a
		# `(months, days)` pair.
	# /address/
		# The address to resolve. Negative addresses resolve into prior cycles.
	# /calendar/
		# The product of &aggregate.
	"""
	iselect, oselect = selectors
	resolved = 0

	cycles, address = divmod(address, iselect(calendar[-1]))

	current = calendar
	while not isinstance(current[2][0][0], int):
		for sub in current[2]:
			title, repeat, inner, fragment, totals = sub
			total = iselect(totals)
			if address >= total:
				address -= total
				resolved += oselect(totals)
			else:
				# Partially consumed; descend into the repeated fragment.
				count, address = divmod(address, iselect(fragment))
				resolved += count * oselect(fragment)
				current = sub
				break
		else:
			raise RuntimeError("address exceeded cycle")

	iparts = iselect(current[2])
	oparts = oselect(current[2])
	for i in range(len(iparts) - 1):
		if iparts[i+1] > address:
			break

	return (cycles, resolved + oparts[i], address - iparts[i], oparts[i+1] - oparts[i])
