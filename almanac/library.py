"""
# Primary public module.

# Provides access to the value types, &CalendarDate, &Instant, &Duration, &Period,
# and &Interval, and constructors named after the order of the components they
# parse.

#!python
	from almanac import library as almanac
	d = almanac.mdy('January 31st, 2017')
	t = almanac.ymd_hms('2016-03-12 13:00:00', zone='America/New_York')
"""
import functools

from . import zones
from . import format

from .core import Error, ParseError, StructureError, IntegrityError, FieldError
from .core import UnknownZoneError, AmbiguousDurationError
from .types import CalendarDate, Instant, Duration, Period, Interval, Estimate
from .format import parse, parse_each
from .sysclock import now, today, elapsed

__shortname__ = 'almanac'

ymd = functools.partial(parse, order='ymd')
mdy = functools.partial(parse, order='mdy')
dmy = functools.partial(parse, order='dmy')
ydm = functools.partial(parse, order='ydm')
myd = functools.partial(parse, order='myd')
dym = functools.partial(parse, order='dym')

ymd_h = functools.partial(parse, order='ymd_h')
ymd_hm = functools.partial(parse, order='ymd_hm')
ymd_hms = functools.partial(parse, order='ymd_hms')
mdy_hm = functools.partial(parse, order='mdy_hm')
mdy_hms = functools.partial(parse, order='mdy_hms')
dmy_hm = functools.partial(parse, order='dmy_hm')
dmy_hms = functools.partial(parse, order='dmy_hms')

utc = zones.utc

def zone(name:str=None) -> zones.Zone:
	"""
	# Return a Zone object for localizing UTC instants and resolving local times.
	# &None selects the system's default zone.
	"""
	if name is None:
		return zones.database.default()
	return zones.database.lookup(name)

def iso(text:str, zone=None) -> Instant:
	"""
	# Parse an ISO-8601 timestamp.
	"""
	return format.parse_iso(text, zone=zone)

def unix(seconds, zone=None) -> Instant:
	"""
	# The instant &seconds after the Unix epoch.
	"""
	return Instant.from_unix(seconds, zone)

def range(start, stop, step):
	"""
	# Construct an iterator producing instants from &start toward &stop separated
	# by &step, a &Duration or a &Period.

	#!python
		pit = almanac.now()
		week_start = pit.update('day', 1, of='week').floor('day')
		this_week = almanac.range(week_start, week_start + Period(days=5), Period(days=1))
	"""
	return Interval(start, stop).points(step)
