"""
# Time domain classes for calendar dates, instants, and quantities of time.

#!python
	leap_day = types.CalendarDate.of(2016, 2, 29)
	meeting = types.Instant.of(2016, 3, 12, 13, zone='America/New_York')

	# Exact elapse; clock time shifts over the daylight savings transition.
	assert (meeting + types.Duration.of(day=1)).hour == 14

	# Calendar elapse; clock time is preserved.
	assert (meeting + types.Period(days=1)).hour == 13

# [ Elements ]

# /CalendarDate/
	# Days since 1970-01-01; a Gregorian `(year, month, day)` without a time of day.
# /Instant/
	# Seconds since the Unix epoch, UTC, paired with the &zones.Zone used for display.
# /Duration/
	# An exact count of seconds.
# /Period/
	# Independent counts of calendar units whose real length depends on where
	# they are applied.
# /Interval/
	# A concrete pair of &Instant values.
# /Estimate/
	# A ratio paired with a flag noting that it was derived from average unit lengths.

# CalendarDate, Instant, and Duration are &int subclasses. Comparisons between
# instants always operate on the UTC count, so instants displayed in different
# zones compare equal when they refer to the same moment.
"""
import logging
import operator
import fractions

from . import core
from . import earth
from . import gregorian
from . import rounding
from . import week
from . import zones

log = logging.getLogger(__name__)

# Average lengths used by estimates; the Gregorian cycle is exact over 400 years.
average_month = fractions.Fraction(gregorian.days_in_cycle * earth.seconds_in_day, gregorian.months_in_cycle)
average_year = average_month * gregorian.months_in_year

def _scalar(ob) -> bool:
	return isinstance(ob, int) and not isinstance(ob, (Duration, CalendarDate, Instant))

class Estimate(tuple):
	"""
	# A ratio, &value, qualified by whether it is &approximate.

	# Estimates are produced by ratios of quantities whose units do not have a
	# fixed relationship; one year over one day is approximately 365.2425.
	"""
	__slots__ = ()

	def __new__(Class, value, approximate):
		return super().__new__(Class, (fractions.Fraction(value), bool(approximate)))

	value = property(operator.itemgetter(0))
	approximate = property(operator.itemgetter(1))

	def __float__(self):
		return float(self.value)

	def __repr__(self):
		return '%s(%s, approximate=%r)' %(
			self.__class__.__name__, self.value, self.approximate
		)

class Duration(int):
	"""
	# An exact, signed, count of seconds.

	# Durations have no calendar semantics: a day is always 86400 seconds.
	"""
	__slots__ = ()
	unit = 'second'

	@classmethod
	def of(Class, *durations, week=0, day=0, hour=0, minute=0, second=0):
		"""
		# Construct a Duration from the sum of &durations and the unit keywords.
		"""
		total = sum(int(x) for x in durations)
		total += week * earth.seconds_in_week
		total += day * earth.seconds_in_day
		total += hour * earth.seconds_in_hour
		total += minute * earth.seconds_in_minute
		total += second
		if int(total) != total:
			raise core.FieldError('second', total, "durations are whole seconds")
		return Class(int(total))

	def select(self, part, of=None):
		"""
		# The number of whole &part units in the duration, or the number after
		# the last whole &of unit.

		#!python
			d = Duration.of(day=1, hour=2, minute=3)
			assert d.select('hour') == 26
			assert d.select('hour', 'day') == 2
		"""
		seconds = int(self)
		if of is not None:
			seconds %= earth.unit_seconds[of]
		return seconds // earth.unit_seconds[part]

	@property
	def start(self):
		return self.__class__(0)

	@property
	def stop(self):
		return self

	def __repr__(self):
		if self < 0:
			sign = '-'
			sub = -self
		else:
			sign = ''
			sub = self

		fields = []
		prev = None
		for x in ('day', 'hour', 'minute', 'second'):
			y = sub.select(x, prev)
			prev = x
			if y:
				fields.append('%s=%d' %(x, y))
		return '%s%s.of(%s)' %(sign, self.__class__.__name__, ', '.join(fields))

	def __str__(self):
		return '%ds' %(int(self),)

	def __neg__(self):
		return self.__class__(-int(self))

	def __pos__(self):
		return self

	def __abs__(self):
		return self.__class__(abs(int(self)))

	def __add__(self, other):
		# Plain integers are seconds.
		if isinstance(other, Duration) or _scalar(other):
			return self.__class__(int(self) + int(other))
		return NotImplemented
	__radd__ = __add__

	def __sub__(self, other):
		if isinstance(other, Duration) or _scalar(other):
			return self.__class__(int(self) - int(other))
		return NotImplemented

	def __rsub__(self, other):
		if _scalar(other):
			return self.__class__(int(other) - int(self))
		return NotImplemented

	def __mul__(self, other):
		if _scalar(other):
			return self.__class__(int(self) * other)
		return NotImplemented
	__rmul__ = __mul__

	def __floordiv__(self, other):
		if isinstance(other, Duration):
			return int(self) // int(other)
		if _scalar(other):
			return self.__class__(int(self) // other)
		return NotImplemented

	def __mod__(self, other):
		if isinstance(other, Duration):
			return self.__class__(int(self) % int(other))
		return NotImplemented

	def __truediv__(self, other):
		if isinstance(other, Duration):
			return fractions.Fraction(int(self), int(other))
		if isinstance(other, Period):
			return Period.of(second=int(self)) / other
		if _scalar(other):
			return fractions.Fraction(int(self), other)
		return NotImplemented

	def to_period(self):
		"""
		# Express the duration as a &Period of hours, minutes, and seconds.
		"""
		return Period.of(second=int(self)).normalize()

class Period(tuple):
	"""
	# Independent, signed, counts of calendar units.

	# Periods are applied to instants largest unit first and their real length
	# depends on the point they are applied to. Units are grouped into three
	# terms whose members convert exactly: months (years, months), days (weeks,
	# days), and seconds (hours, minutes, seconds).
	"""
	__slots__ = ()

	fields = ('years', 'months', 'weeks', 'days', 'hours', 'minutes', 'seconds')

	_aliases = {
		'year': 'years', 'month': 'months', 'week': 'weeks', 'day': 'days',
		'hour': 'hours', 'minute': 'minutes', 'second': 'seconds',
	}

	def __new__(Class, years=0, months=0, weeks=0, days=0, hours=0, minutes=0, seconds=0):
		values = (years, months, weeks, days, hours, minutes, seconds)
		for name, v in zip(Class.fields, values):
			if not isinstance(v, int) or isinstance(v, bool):
				raise core.FieldError(name, v, "period fields must be integers")
		return super().__new__(Class, tuple(int(x) for x in values))

	years = property(operator.itemgetter(0))
	months = property(operator.itemgetter(1))
	weeks = property(operator.itemgetter(2))
	days = property(operator.itemgetter(3))
	hours = property(operator.itemgetter(4))
	minutes = property(operator.itemgetter(5))
	seconds = property(operator.itemgetter(6))

	@classmethod
	def of(Class, *periods, **parts):
		"""
		# Construct a Period from the sum of &periods and the unit keywords.
		# Keywords may be singular or plural: `Period.of(month=1, days=2)`.
		"""
		fields = dict.fromkeys(Class.fields, 0)
		for p in periods:
			for k, v in zip(Class.fields, p):
				fields[k] += v
		for k, v in parts.items():
			name = Class._aliases.get(k, k)
			if name not in fields:
				raise TypeError("unknown period unit: " + repr(k))
			fields[name] += v
		return Class(**fields)

	def terms(self):
		"""
		# The period as `(months, days, seconds)`.
		"""
		return (
			self.years * gregorian.months_in_year + self.months,
			self.weeks * week.days_in_week + self.days,
			(self.hours * earth.seconds_in_hour) + (self.minutes * earth.seconds_in_minute) + self.seconds,
		)

	@property
	def calendric(self) -> bool:
		"""
		# Whether the period has units whose length depends on the calendar.
		"""
		months, days, seconds = self.terms()
		return bool(months or days)

	def normalize(self):
		"""
		# Carry seconds into minutes and hours, and months into years.
		# Days are not carried into months, nor hours into days.
		"""
		months, days, seconds = self.terms()
		sign = -1 if seconds < 0 else 1
		h, rem = divmod(abs(seconds), earth.seconds_in_hour)
		m, s = divmod(rem, earth.seconds_in_minute)
		msign = -1 if months < 0 else 1
		y, mo = divmod(abs(months), gregorian.months_in_year)
		return self.__class__(
			msign * y, msign * mo, 0, days,
			sign * h, sign * m, sign * s,
		)

	def __bool__(self):
		return any(self)

	def __repr__(self):
		fields = ['%s=%d' %(k, v) for k, v in zip(self.fields, self) if v]
		return '%s(%s)' %(self.__class__.__name__, ', '.join(fields))

	def __str__(self):
		"""
		# ISO-8601 duration form; `P1Y2M3DT4H5M6S`.
		"""
		date = ''.join('%d%s' %(v, c) for v, c in zip(self[:4], 'YMWD') if v)
		time = ''.join('%d%s' %(v, c) for v, c in zip(self[4:], 'HMS') if v)
		if not date and not time:
			return 'PT0S'
		return 'P' + date + ('T' + time if time else '')

	def __neg__(self):
		return self.__class__(*[-x for x in self])

	def __pos__(self):
		return self

	def __add__(self, other):
		if isinstance(other, Period):
			return self.__class__(*[x + y for x, y in zip(self, other)])
		return NotImplemented

	def __sub__(self, other):
		if isinstance(other, Period):
			return self.__class__(*[x - y for x, y in zip(self, other)])
		return NotImplemented

	def __mul__(self, other):
		if _scalar(other):
			return self.__class__(*[x * other for x in self])
		return NotImplemented
	__rmul__ = __mul__

	def __truediv__(self, other):
		if isinstance(other, Duration):
			other = Period.of(second=int(other))
		if not isinstance(other, Period):
			return NotImplemented
		return self.estimate(other)

	def estimate(self, other):
		"""
		# The ratio of the period to &other without an anchoring point in time.

		# When both periods consist of the same single term the ratio is exact;
		# one year over one month is twelve. Otherwise, average unit lengths are
		# used and the &Estimate is marked approximate.
		"""
		a = self.terms()
		b = other.terms()

		for i in range(3):
			if all(x == 0 for j, x in enumerate(a + b) if j % 3 != i):
				if b[i] == 0:
					raise ZeroDivisionError("period division by zero")
				return Estimate(fractions.Fraction(a[i], b[i]), False)

		numerator = _average_seconds(a)
		denominator = _average_seconds(b)
		if denominator == 0:
			raise ZeroDivisionError("period division by zero")
		r = Estimate(numerator / denominator, True)
		log.debug("approximate ratio of %r to %r: %s", self, other, float(r))
		return r

	def ratio(self, other, anchor=None):
		"""
		# The exact ratio of the period to &other.

		# Without an &anchor the ratio is only available when it does not depend on
		# the calendar; &core.AmbiguousDurationError is raised otherwise.

		# [ Parameters ]
		# /other/
			# The dividing &Period or &Duration.
		# /anchor/
			# The &Instant or &CalendarDate at which the period is applied.
		"""
		if anchor is None:
			e = self / other
			if e.approximate:
				raise core.AmbiguousDurationError(
					"ratio of %r to %r requires an anchor" %(self, other)
				)
			return e.value
		return Interval(anchor, anchor + self) / other

	def to_duration(self, anchor=None) -> Duration:
		"""
		# Convert the period into an exact &Duration.

		# Periods with calendar units require an &anchor.
		"""
		if anchor is None:
			if self.calendric:
				raise core.AmbiguousDurationError(
					"%r has calendar units; an anchor is required" %(self,)
				)
			return Duration(self.terms()[2])
		return Interval(anchor, anchor + self).length

def _average_seconds(terms):
	months, days, seconds = terms
	return (months * average_month) + (days * earth.seconds_in_day) + seconds

class CalendarDate(int):
	"""
	# A Gregorian calendar date stored as days since 1970-01-01.

	# Instances constructed from fields are validated; any integer day count is a
	# valid date. Updates return new instances and carry overflowing fields.
	"""
	__slots__ = ()
	unit = 'day'

	@classmethod
	def of(Class, year=None, month=1, day=1, *, date=None, iso=None):
		"""
		# Construct a validated date from its fields, a `(year, month, day)` tuple,
		# or an ISO-8601 date string.

		# Raises &core.FieldError for invalid fields.
		"""
		if iso is not None:
			from . import format
			return format.parse_iso_date(iso)
		if date is not None:
			year, month, day = date
		if year is None:
			raise TypeError("year is required")
		gregorian.validate(year, month, day)
		return Class(gregorian.unix_days_from_date((year, month, day)))

	@classmethod
	def from_days(Class, days:int):
		"""
		# The date &days after 1970-01-01.
		"""
		return Class(days)

	@classmethod
	def from_fields(Class, year, month=1, day=1):
		"""
		# Construct a date performing carry instead of validation.

		#!python
			assert CalendarDate.from_fields(2017, 13, 1) == CalendarDate.of(2018, 1, 1)
		"""
		return Class(gregorian.unix_days_from_date((year, month, day)))

	@property
	def date(self):
		return gregorian.date_from_unix_days(int(self))

	@property
	def year(self) -> int:
		return self.date[0]

	@property
	def month(self) -> int:
		return self.date[1]

	@property
	def day(self) -> int:
		return self.date[2]

	@property
	def day_of_year(self) -> int:
		return gregorian.day_of_year(self.date)

	@property
	def day_of_week(self) -> int:
		"""
		# Zero-based day of the week; Sunday is zero.
		"""
		return week.day_of_week(int(self))

	@property
	def is_leap_year(self) -> bool:
		return gregorian.year_is_leap(self.year)

	@property
	def days_in_month(self) -> int:
		y, m, d = self.date
		return gregorian.days_in_month(y, m)

	def weekday(self, abbreviated=False) -> str:
		return week.weekday_name(self.day_of_week, abbreviated)

	def month_name(self, abbreviated=False) -> str:
		names = gregorian.month_abbreviations if abbreviated else gregorian.month_names
		return names[self.month - 1]

	def select(self, part):
		"""
		# Retrieve a field or a container of fields: `'date'`, `'iso'`.
		"""
		if part == 'iso':
			return str(self)
		return getattr(self, part)

	def update(self, part, replacement, of=None):
		"""
		# Construct a new date with the field, &part, set to &replacement.

		# Out of range values carry: setting the month to thirteen moves to the
		# January of the following year.

		# [ Parameters ]
		# /part/
			# One of `'year'`, `'month'`, or `'day'`.
		# /replacement/
			# The new value of the field.
		# /of/
			# For `'day'`, the containing unit: `'month'` (default), `'week'`, or `'year'`.
		"""
		if part == 'day' and of == 'week':
			return self.__class__(int(self) + (replacement - self.day_of_week))
		if part == 'day' and of == 'year':
			return self.__class__.from_fields(self.year, 1, replacement)
		if of not in (None, 'month', 'year'):
			raise ValueError("unsupported containing unit: " + repr(of))
		return self.replace(**{part: replacement})

	def replace(self, **fields):
		"""
		# Construct a new date with the given fields replaced; overflow carries.
		"""
		y, m, d = self.date
		for k in fields:
			if k not in ('year', 'month', 'day'):
				raise TypeError("unknown date field: " + repr(k))
		y = fields.get('year', y)
		m = fields.get('month', m)
		d = fields.get('day', d)
		return self.__class__.from_fields(y, m, d)

	def at(self, hour=0, minute=0, second=0, zone=None):
		"""
		# The &Instant at the given time of day on this date in &zone.
		"""
		y, m, d = self.date
		return Instant.of(y, m, d, hour, minute, second, zone=zone)

	def instant(self, zone=None):
		"""
		# The first instant of the date in &zone; midnight UTC by default.
		"""
		z = zones.select(zone)
		return Instant(z.resolve(int(self) * earth.seconds_in_day), z)

	def floor(self, unit, week_start=0):
		return self._round(rounding.floor, unit, week_start)

	def ceiling(self, unit, week_start=0):
		return self._round(rounding.ceiling, unit, week_start)

	def round(self, unit, week_start=0):
		return self._round(rounding.round, unit, week_start)

	def _round(self, method, unit, week_start):
		if earth.unit_seconds.get(unit, earth.seconds_in_day) < earth.seconds_in_day:
			raise ValueError("dates cannot be rounded to " + repr(unit))
		local = int(self) * earth.seconds_in_day
		return self.__class__(method(local, unit, week_start) // earth.seconds_in_day)

	def __eq__(self, other):
		if isinstance(other, Instant):
			return False
		return super().__eq__(other)

	def __ne__(self, other):
		if isinstance(other, Instant):
			return True
		return super().__ne__(other)

	__hash__ = int.__hash__

	def __add__(self, other):
		if isinstance(other, Period):
			months, days, seconds = other.terms()
			if seconds:
				raise ValueError("cannot apply time units to a date: " + repr(other))
			date = gregorian.add_months(self.date, months)
			return self.__class__(gregorian.unix_days_from_date(date) + days)
		if isinstance(other, Duration):
			days, rem = earth.split(int(other))
			if rem:
				raise ValueError("duration is not a whole number of days: " + repr(other))
			return self.__class__(int(self) + days)
		if _scalar(other):
			# Plain integers are days.
			return self.__class__(int(self) + other)
		return NotImplemented
	__radd__ = __add__

	def __sub__(self, other):
		if isinstance(other, CalendarDate):
			return Duration((int(self) - int(other)) * earth.seconds_in_day)
		if isinstance(other, (Period, Duration)):
			return self + (-other)
		if _scalar(other):
			return self.__class__(int(self) - other)
		return NotImplemented

	def __rsub__(self, other):
		return NotImplemented

	def __str__(self):
		y, m, d = self.date
		return "%s%04d-%02d-%02d" %("-" if y < 0 else "", abs(y), m, d)

	def __repr__(self):
		return "%s.of(iso=%r)" %(self.__class__.__name__, str(self))

	def __format__(self, spec):
		if not spec:
			return str(self)
		return super().__format__(spec)

class Instant(int):
	"""
	# A point in time: seconds since the Unix epoch in UTC and the &zone
	# used to present it.

	# Equality, ordering, hashing, and subtraction use the UTC count only.
	# The clock fields, &year through &second, are local to the &zone.
	"""
	unit = 'second'

	def __new__(Class, seconds=0, zone=None):
		self = super().__new__(Class, seconds)
		self.__dict__['zone'] = zones.select(zone)
		return self

	def __setattr__(self, name, value):
		raise AttributeError("instants are immutable")

	def __delattr__(self, name):
		raise AttributeError("instants are immutable")

	def __reduce__(self):
		return (self.__class__, (int(self), self.zone))

	@classmethod
	def from_unix(Class, seconds, zone=None):
		"""
		# The instant &seconds after 1970-01-01T00:00:00Z.
		# Fractional seconds are floored.
		"""
		return Class(int(seconds // 1), zone)

	@classmethod
	def from_local(Class, local:int, zone=None):
		"""
		# The instant whose wall clock in &zone reads &local seconds since the
		# local epoch. Gaps shift forward and overlaps take the earlier instant.
		"""
		z = zones.select(zone)
		return Class(z.resolve(local), z)

	@classmethod
	def of(Class, year=None, month=1, day=1, hour=0, minute=0, second=0, zone=None, *, datetime=None, iso=None):
		"""
		# Construct a validated instant from its local fields in &zone.

		# A &second of sixty is accepted, and absorbed into the following minute.

		# [ Parameters ]
		# /datetime/
			# Tuple of `(year, month, day, hour, minute, second)`.
		# /iso/
			# ISO-8601 string; an offset in the string takes precedence over the
			# absence of a &zone.
		"""
		if iso is not None:
			from . import format
			return format.parse_iso(iso, zone=zone)
		if datetime is not None:
			year, month, day, hour, minute, second = (tuple(datetime) + (0, 0, 0))[:6]
		if year is None:
			raise TypeError("year is required")

		gregorian.validate(year, month, day)
		if not 0 <= hour < earth.hours_in_day:
			raise core.FieldError('hour', hour, "must be in 0..23")
		if not 0 <= minute < earth.minutes_in_hour:
			raise core.FieldError('minute', minute, "must be in 0..59")
		if not 0 <= second <= earth.seconds_in_minute:
			raise core.FieldError('second', second, "must be in 0..60")

		return Class.from_local(_local_from_fields(year, month, day, hour, minute, second), zone)

	@property
	def offset(self):
		"""
		# The &zones.Zone.Offset in effect at the instant.
		"""
		return self.zone.find(int(self))

	@property
	def local(self) -> int:
		"""
		# Wall clock seconds since the local epoch.
		"""
		return int(self) + self.offset.magnitude

	@property
	def datetime(self):
		"""
		# The local `(year, month, day, hour, minute, second)`.
		"""
		days, seconds = earth.split(self.local)
		return gregorian.date_from_unix_days(days) + earth.timeofday_from_seconds(seconds)

	@property
	def timeofday(self):
		return earth.timeofday_from_seconds(self.local)

	@property
	def date(self) -> CalendarDate:
		"""
		# The local calendar date.
		"""
		return CalendarDate(earth.split(self.local)[0])

	@property
	def year(self) -> int:
		return self.datetime[0]

	@property
	def month(self) -> int:
		return self.datetime[1]

	@property
	def day(self) -> int:
		return self.datetime[2]

	@property
	def hour(self) -> int:
		return self.timeofday[0]

	@property
	def minute(self) -> int:
		return self.timeofday[1]

	@property
	def second(self) -> int:
		return self.timeofday[2]

	@property
	def day_of_year(self) -> int:
		return self.date.day_of_year

	@property
	def day_of_week(self) -> int:
		return self.date.day_of_week

	def weekday(self, abbreviated=False) -> str:
		return self.date.weekday(abbreviated)

	def month_name(self, abbreviated=False) -> str:
		return self.date.month_name(abbreviated)

	def select(self, part):
		"""
		# Retrieve a local field or a container of fields: `'date'`,
		# `'timeofday'`, `'datetime'`, `'iso'`, or `'rfc'`.
		"""
		if part == 'iso':
			return self.format('iso8601')
		if part == 'rfc':
			return self.format('rfc1123')
		return getattr(self, part)

	def format(self, fmt='iso8601') -> str:
		from . import format
		return format.formatter(fmt)(self)

	def update(self, part, replacement, of=None):
		"""
		# Construct a new instant with the local field, &part, set to &replacement.

		# Out of range values roll over onto the larger units: setting the hour to
		# 400 advances the date by sixteen days and sets the hour to sixteen.

		# [ Parameters ]
		# /part/
			# One of `'year'`, `'month'`, `'day'`, `'hour'`, `'minute'`, or `'second'`.
		# /replacement/
			# The new value of the field.
		# /of/
			# For `'day'`, the containing unit: `'month'` (default), `'week'`, or `'year'`.
		"""
		if part == 'day' and of in ('week', 'year'):
			date = self.date.update(part, replacement, of=of)
			h, m, s = self.timeofday
			return self.__class__.from_local(
				_local_from_fields(*date.date, h, m, s), self.zone
			)
		return self.replace(**{part: replacement})

	def replace(self, **fields):
		"""
		# Construct a new instant with the given local fields replaced.
		# Fields are normalized with carry.
		"""
		names = ('year', 'month', 'day', 'hour', 'minute', 'second')
		current = dict(zip(names, self.datetime))
		for k, v in fields.items():
			if k not in current:
				raise TypeError("unknown instant field: " + repr(k))
			current[k] = v
		return self.__class__.from_local(
			_local_from_fields(*[current[k] for k in names]), self.zone
		)

	def with_zone(self, zone):
		"""
		# Re-display: the same instant presented in &zone.
		"""
		return self.__class__(int(self), zone)

	def force_zone(self, zone):
		"""
		# Re-label: the instant whose clock fields in &zone equal the clock fields
		# of this instant. Used to correct instants tagged with the wrong zone.
		"""
		return self.__class__.from_local(self.local, zone)

	def _boundaries(self, local):
		# The instants at which the wall clock reads &local; a skipped boundary
		# is shifted forward by the gap.
		return self.zone.candidates(local) or [self.zone.resolve(local)]

	def floor(self, unit, week_start=0):
		"""
		# The nearest &unit boundary at or before the instant.

		# When the boundary's wall clock time occurs twice, the occurrence
		# closest to the instant is chosen.
		"""
		pit = int(self)
		r = self._boundaries(rounding.floor(self.local, unit, week_start))
		prior = [x for x in r if x <= pit]
		return self.__class__(max(prior) if prior else min(r), self.zone)

	def ceiling(self, unit, week_start=0):
		"""
		# The nearest &unit boundary at or after the instant.

		# Inside a repeated hour, the second occurrence of the floor's wall clock
		# time may follow the instant and precede the next boundary.
		"""
		pit = int(self)
		f = rounding.floor(self.local, unit, week_start)
		r = self._boundaries(f) + self._boundaries(rounding.advance(f, unit))
		following = [x for x in r if x >= pit]
		if pit in following:
			return self
		return self.__class__(min(following), self.zone)

	def round(self, unit, week_start=0):
		"""
		# The nearest &unit boundary; ties go to the ceiling.
		"""
		f = self.floor(unit, week_start)
		c = self.ceiling(unit, week_start)
		if int(c) - int(self) <= int(self) - int(f):
			return c
		return f

	def leads(self, pit) -> bool:
		return int(self) < int(pit)

	def follows(self, pit) -> bool:
		return int(self) > int(pit)

	def measure(self, pit) -> Duration:
		"""
		# The &Duration from this instant to &pit.
		"""
		return Duration(int(pit) - int(self))

	def __eq__(self, other):
		if isinstance(other, CalendarDate):
			return False
		return super().__eq__(other)

	def __ne__(self, other):
		if isinstance(other, CalendarDate):
			return True
		return super().__ne__(other)

	__hash__ = int.__hash__

	def __add__(self, other):
		if isinstance(other, Duration):
			return self.__class__(int(self) + int(other), self.zone)
		if isinstance(other, Period):
			return self._elapse(other)
		if _scalar(other):
			# Plain integers are seconds.
			return self.__class__(int(self) + other, self.zone)
		return NotImplemented
	__radd__ = __add__

	def __sub__(self, other):
		if isinstance(other, Instant):
			return Duration(int(self) - int(other))
		if isinstance(other, (Duration, Period)):
			return self + (-other)
		if _scalar(other):
			return self.__class__(int(self) - other, self.zone)
		return NotImplemented

	def __rsub__(self, other):
		return NotImplemented

	def _elapse(self, period):
		# Months first with clamping, then days, then the clock.
		months, days, seconds = period.terms()
		y, m, d, hour, minute, second = self.datetime
		y, m, d = gregorian.add_months((y, m, d), months)
		local = _local_from_fields(y, m, d + days, hour, minute, second) + seconds
		return self.__class__.from_local(local, self.zone)

	def __str__(self):
		return self.format('iso8601')

	def __repr__(self):
		return "%s.of(iso=%r, zone=%r)" %(self.__class__.__name__, str(self), self.zone.name)

	def __format__(self, spec):
		if not spec:
			return str(self)
		return super().__format__(spec)

def _local_from_fields(year, month, day, hour, minute, second) -> int:
	days = gregorian.unix_days_from_date((year, month, day))
	return (days * earth.seconds_in_day) + earth.seconds_from_timeofday((hour, minute, second))

def _anchor(ob):
	if isinstance(ob, CalendarDate):
		return ob.instant()
	if isinstance(ob, Instant):
		return ob
	raise TypeError("interval bounds must be instants or dates: " + repr(ob))

class Interval(tuple):
	"""
	# A concrete span of time from &start, inclusive, to &end, exclusive.

	# If &end precedes &start, the interval is reversed and its &direction
	# is negative. &CalendarDate bounds are converted to midnight UTC.
	"""
	__slots__ = ()

	def __new__(Class, start, end):
		return super().__new__(Class, (_anchor(start), _anchor(end)))

	start = property(operator.itemgetter(0))
	end = property(operator.itemgetter(1))

	@property
	def direction(self) -> int:
		return -1 if self.end < self.start else 1

	@property
	def reversed(self) -> bool:
		return self.direction < 0

	@property
	def length(self) -> Duration:
		"""
		# The signed, exact, &Duration of the interval.
		"""
		return self.end - self.start

	@property
	def magnitude(self) -> Duration:
		return abs(self.length)

	def flip(self):
		return self.__class__(self.end, self.start)

	def shift(self, delta):
		"""
		# Move both bounds by a &Duration or &Period.
		"""
		return self.__class__(self.start + delta, self.end + delta)

	def __contains__(self, pit):
		lo, hi = sorted((int(self.start), int(self.end)))
		return lo <= int(_anchor(pit)) < hi

	def overlaps(self, other) -> bool:
		a0, a1 = sorted((int(self.start), int(self.end)))
		b0, b1 = sorted((int(other.start), int(other.end)))
		return a0 < b1 and b0 < a1

	def points(self, step):
		"""
		# Iterate through the instants from &start toward &end separated by &step,
		# a &Duration or &Period. Period steps are multiplied from &start so that
		# clamped days do not accumulate.
		"""
		if isinstance(step, Duration):
			if step <= 0:
				raise ValueError("step must be positive")
		elif not isinstance(step, Period) or not step:
			raise ValueError("step must be a non-zero Duration or Period")

		start = self.start
		if self.reversed:
			step = -step
		n = 0
		while True:
			pos = start + (step * n)
			if (pos >= self.end) if not self.reversed else (pos <= self.end):
				break
			yield pos
			n += 1

	def _count(self, period):
		# Largest n where start + n*period does not pass the end.
		if not period:
			raise ZeroDivisionError("interval division by an empty period")
		approx = _average_seconds(period.terms())
		if approx <= 0:
			raise ValueError("periods dividing an interval must be positive: " + repr(period))

		start, end = self.start, self.end
		n = max(int(fractions.Fraction(int(end) - int(start)) / approx) - 1, 0)
		while start + (period * (n + 1)) <= end:
			n += 1
		while n > 0 and start + (period * n) > end:
			n -= 1
		return n

	def __floordiv__(self, other):
		if isinstance(other, Duration):
			return int(self.length) // int(other)
		if isinstance(other, Period):
			if self.reversed:
				return -(self.flip() // other)
			return self._count(other)
		return NotImplemented

	def __truediv__(self, other):
		"""
		# The exact number of &other units contained by the interval.

		# Periods are counted by walking the calendar from &start, the
		# fraction of the final period is measured against its actual length.
		"""
		if isinstance(other, Duration):
			return fractions.Fraction(int(self.length), int(other))
		if isinstance(other, Period):
			if self.reversed:
				return -(self.flip() / other)
			n = self._count(other)
			lower = self.start + (other * n)
			upper = self.start + (other * (n + 1))
			return n + fractions.Fraction(int(self.end) - int(lower), int(upper) - int(lower))
		return NotImplemented

	def as_period(self) -> Period:
		"""
		# Decompose the interval into years, months, days, and time of day fields
		# by walking the calendar from &start in its zone.
		"""
		if self.reversed:
			return -self.flip().as_period()

		start = self.start
		end = self.end.with_zone(start.zone)

		sy, sm = start.datetime[:2]
		ey, em = end.datetime[:2]
		months = ((ey - sy) * gregorian.months_in_year) + (em - sm)
		while months > 0 and start + Period(months=months) > end:
			months -= 1
		a = start + Period(months=months)

		days = int(end.date) - int(a.date)
		while days > 0 and a + Period(days=days) > end:
			days -= 1
		b = a + Period(days=days)

		seconds = int(end) - int(b)
		h, rem = divmod(seconds, earth.seconds_in_hour)
		mi, s = divmod(rem, earth.seconds_in_minute)
		y, mo = divmod(months, gregorian.months_in_year)
		return Period(years=y, months=mo, days=days, hours=h, minutes=mi, seconds=s)

	def __repr__(self):
		return '%s(%r, %r)' %(self.__class__.__name__, self.start, self.end)

	def __str__(self):
		return '%s--%s' %(self.start, self.end)
