"""
# POSIX TZ rule strings.

# TZif files of version two and later close with a TZ string, such as
# `EST5EDT,M3.2.0,M11.1.0`, describing the offsets that apply after the final
# recorded transition. Slim zone files stop recording transitions as soon as the
# rule can take over, so the rule must be evaluated in order to find the offsets
# of most contemporary instants.

#!python
	r = Rule.from_string('EST5EDT,M3.2.0,M11.1.0')
	utoff, abbreviation, isdst = r.find(1458000000)
"""
import re
import collections

from . import earth
from . import gregorian
from . import week

_name = r'(?:<([-+A-Za-z0-9]+)>|([A-Za-z]{3,}))'
_offset = r'([-+]?\d{1,3}(?::\d{1,2}){0,2})'
_rule = re.compile(
	'^' + _name + _offset +
	'(?:' + _name + _offset + '?' +
	'(?:,([^,]+),([^,]+))?' + ')?$'
)
_date = re.compile(r'^(?:J(\d{1,3})|(\d{1,3})|M(\d{1,2})\.(\d)\.(\d))(?:/(.+))?$')

#: A rule date: &kind is `'J'`, `'N'`, or `'M'`; &time is seconds after midnight.
Transition = collections.namedtuple('Transition', ('kind', 'fields', 'time'))

#: Default transition time: 02:00:00 local.
default_time = 2 * earth.seconds_in_hour

def parse_time(s:str) -> int:
	"""
	# Parse `[+-]hh[:mm[:ss]]` into signed seconds.
	"""
	sign = 1
	if s[:1] in '+-':
		if s[0] == '-':
			sign = -1
		s = s[1:]
	parts = [int(x) for x in s.split(':')]
	parts += [0] * (3 - len(parts))
	return sign * earth.seconds_from_timeofday(parts)

def parse_transition(s:str) -> Transition:
	m = _date.match(s)
	if m is None:
		raise ValueError("invalid rule date: " + repr(s))
	julian, zero, month, nth, weekday, time = m.groups()

	time = default_time if time is None else parse_time(time)
	if julian is not None:
		n = int(julian)
		if not 1 <= n <= 365:
			raise ValueError("julian day out of range: " + repr(s))
		return Transition('J', (n,), time)
	elif zero is not None:
		n = int(zero)
		if not 0 <= n <= 365:
			raise ValueError("day of year out of range: " + repr(s))
		return Transition('N', (n,), time)
	else:
		month, nth, weekday = int(month), int(nth), int(weekday)
		if not (1 <= month <= 12 and 1 <= nth <= 5 and 0 <= weekday <= 6):
			raise ValueError("month rule out of range: " + repr(s))
		return Transition('M', (month, nth, weekday), time)

def transition_day(transition:Transition, year:int) -> int:
	"""
	# The Unix day of the &transition in the given &year.
	"""
	first = gregorian.unix_days_from_date((year, 1, 1))
	kind = transition.kind

	if kind == 'J':
		# One-based, February 29 is never counted.
		n = transition.fields[0] - 1
		if gregorian.year_is_leap(year) and n >= 59:
			n += 1
		return first + n
	elif kind == 'N':
		return first + transition.fields[0]
	else:
		month, nth, weekday = transition.fields
		start = gregorian.unix_days_from_date((year, month, 1))
		last = gregorian.days_in_month(year, month)
		day = (weekday - week.day_of_week(start)) % week.days_in_week
		day += (nth - 1) * week.days_in_week
		while day >= last:
			# Fifth week designates the last occurrence.
			day -= week.days_in_week
		return start + day

class Rule(object):
	"""
	# Offsets of a zone described by a POSIX TZ string.

	# [ Properties ]
	# /standard/
		# The `(utoff, abbreviation, isdst)` triple of standard time.
	# /daylight/
		# The triple of daylight savings time or &None when the rule has no DST.
	# /start/
		# The &Transition into daylight savings time.
	# /end/
		# The &Transition out of daylight savings time.
	"""

	def __init__(self, standard, daylight=None, start=None, end=None, source=None):
		self.standard = standard
		self.daylight = daylight
		self.start = start
		self.end = end
		self.source = source

	def __repr__(self):
		return '<%s %r>' %(self.__class__.__name__, self.source)

	@classmethod
	def from_string(Class, source:str):
		"""
		# Parse a POSIX TZ string. Raises &ValueError if &source is malformed.
		"""
		m = _rule.match(source)
		if m is None:
			raise ValueError("invalid TZ rule: " + repr(source))

		sq, sname, soff, dq, dname, doff, start, end = m.groups()

		# POSIX offsets are positive west of Greenwich.
		std_utoff = -parse_time(soff)
		standard = (std_utoff, sq or sname, False)

		daylight = None
		if dq or dname:
			if doff is None:
				dst_utoff = std_utoff + earth.seconds_in_hour
			else:
				dst_utoff = -parse_time(doff)
			daylight = (dst_utoff, dq or dname, True)

			if start is None:
				# Rule omitted; US rules are the documented default.
				start, end = 'M3.2.0', 'M11.1.0'
			start = parse_transition(start)
			end = parse_transition(end)

		return Class(standard, daylight, start, end, source=source)

	def transitions(self, year:int):
		"""
		# The transitions occurring in &year as a sorted list of
		# `(unix_seconds, triple)` pairs.
		"""
		if self.daylight is None:
			return []

		std_utoff = self.standard[0]
		dst_utoff = self.daylight[0]

		# Transition times are expressed in the local time in effect prior to the change.
		into = (transition_day(self.start, year) * earth.seconds_in_day) + self.start.time - std_utoff
		out = (transition_day(self.end, year) * earth.seconds_in_day) + self.end.time - dst_utoff

		return sorted([(into, self.daylight), (out, self.standard)], key=lambda x: x[0])

	def find(self, seconds:int):
		"""
		# Identify the `(utoff, abbreviation, isdst)` triple in effect at the
		# given Unix time.
		"""
		if self.daylight is None:
			return self.standard

		days = (seconds + self.standard[0]) // earth.seconds_in_day
		year = gregorian.date_from_unix_days(days)[0]

		current = None
		for y in (year - 1, year, year + 1):
			for at, triple in self.transitions(y):
				if at <= seconds:
					current = triple
				else:
					return current or self.standard
		return current or self.standard
