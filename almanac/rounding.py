"""
# Unit boundary arithmetic for local wall clock seconds.

# The functions here operate on seconds since the local epoch, 1970-01-01T00:00:00
# on the wall clock, so that boundaries are aligned with the calendar as seen in
# a zone. &types.Instant resolves the result back into its zone.

# [ Units ]

# Fixed: `second`, `minute`, `hour`, `day`, and `week`.
# Calendric: `month`, `quarter`, and `year`.
"""
from . import earth
from . import gregorian
from . import week

#: Number of months in each calendric unit.
unit_months = {
	'month': 1,
	'quarter': 3,
	'year': gregorian.months_in_year,
}

units = tuple(earth.unit_seconds) + tuple(unit_months)

def _check(unit):
	if unit not in earth.unit_seconds and unit not in unit_months:
		raise ValueError("unknown unit %r; expecting one of %s" %(unit, ', '.join(units)))

def floor(local:int, unit:str, week_start:int=0) -> int:
	"""
	# The &unit boundary at or before &local.

	# [ Parameters ]
	# /local/
		# Wall clock seconds since the local epoch.
	# /unit/
		# The name of the unit.
	# /week_start/
		# The first day of the week, zero being Sunday. Only used by `'week'`.
	"""
	_check(unit)
	days, seconds = earth.split(local)

	if unit == 'week':
		days -= week.day_of_week(days, week_start)
		return days * earth.seconds_in_day
	elif unit in earth.unit_seconds:
		return local - (local % earth.unit_seconds[unit])

	y, m, d = gregorian.date_from_unix_days(days)
	span = unit_months[unit]
	m = (((m - 1) // span) * span) + 1
	return gregorian.unix_days_from_date((y, m, 1)) * earth.seconds_in_day

def advance(boundary:int, unit:str) -> int:
	"""
	# The &unit boundary following &boundary.
	"""
	_check(unit)
	if unit in earth.unit_seconds:
		return boundary + earth.unit_seconds[unit]

	days = boundary // earth.seconds_in_day
	date = gregorian.add_months(gregorian.date_from_unix_days(days), unit_months[unit])
	return gregorian.unix_days_from_date(date) * earth.seconds_in_day

def ceiling(local:int, unit:str, week_start:int=0) -> int:
	"""
	# The &unit boundary at or after &local.
	# Values already on a boundary are returned unchanged.
	"""
	f = floor(local, unit, week_start)
	if f == local:
		return local
	return advance(f, unit)

def round(local:int, unit:str, week_start:int=0) -> int:
	"""
	# The nearest &unit boundary to &local; ties go to the ceiling.
	"""
	f = floor(local, unit, week_start)
	c = ceiling(local, unit, week_start)
	if c - local <= local - f:
		return c
	return f
