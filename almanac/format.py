"""
# Format and parse datetime strings.

# Primarily this module exposes four functions: &parser, &formatter, &parse,
# and &parse_each. &parser and &formatter provide access to datetime formats
# defined by a standard. &parse interprets free form text given the order of the
# date and time components: `'ymd'`, `'mdy_hm'`, and so on.

# While formatting instants can usually occur without error, parsing them from
# strings can result in a variety of errors. The parsers here raise subclasses of
# &core.ParseError: &core.StructureError when the text could not be divided into
# fields, and &core.IntegrityError when a field is out of range.

#!python
	from almanac import format
	format.parse('January 31st, 2017', 'mdy')
	format.parse('20170131123000', 'ymd_hms', zone='America/Chicago')
"""
import re
import logging
import functools
import collections

from . import core
from . import earth
from . import gregorian
from . import week
from . import zones

log = logging.getLogger(__name__)

rfc1123 = "{day_of_week}, {day:02} {month} {year:04} {hour:02}:{minute:02}:{second:02} GMT"
iso8601 = "{0}-{1:02}-{2:02}T{3:02}:{4:02}:{5:02}{6}"

models = {
	'rfc1123' : rfc1123,
	'iso8601' : iso8601,
}

_iso = re.compile(
	r'^\s*([+-]?\d{4,})-(\d{1,2})-(\d{1,2})'
	r'(?:[Tt ](\d{1,2}):(\d{2})(?::(\d{2})(?:[.,](\d+))?)?)?'
	r'\s*(?:([Zz])|([+-])(\d{2}):?(\d{2})(?::?(\d{2}))?)?\s*$'
)

def parse_rfc1123(s,
	len = len
):
	# be loose with the comma; don't break
	# if there's whitespace between the DOW and comma.
	comma = s.find(',')
	if comma == -1:
		raise ValueError('comma not found')
	day_of_week = s[:comma].strip()
	fields = s[comma+1:].strip().split()
	trail = fields[4:]
	day, month, year, time = fields[:4]
	hour, minute, second = time.split(':')

	if len(trail) != 1:
		raise ValueError('expecting a single zone designation')
	return (
		('day_of_week', day_of_week),
		('year', year),
		('month', month),
		('day', day),
		('hour', hour),
		('minute', minute),
		('second', second),
		('timezone', trail[0]),
	)

def parse_iso8601(s):
	m = _iso.match(s)
	if m is None:
		raise ValueError('not an ISO-8601 timestamp')

	(
		year, month, day,
		hour, minute, second, subsecond,
		zulu, sign, tzh, tzm, tzs
	) = m.groups()

	if zulu:
		zone = ('+', '0', '0', '0')
	elif sign:
		zone = (sign, tzh, tzm, tzs or '0')
	else:
		zone = None

	return (
		('year', year),
		('month', month),
		('day', day),
		('time', hour is not None),
		('hour', hour or '0'),
		('minute', minute or '0'),
		('second', second or '0'),
		# Whole second precision; subseconds are recognized and dropped.
		('subsecond', subsecond or '0'),
		('timezone', zone),
	)

parsers = {
	'rfc1123': parse_rfc1123,
	'iso8601': parse_iso8601,
}

def transform_iso8601(args):
	src, struct = args
	zone = struct['timezone']
	if zone is not None:
		sign, h, m, s = zone
		offset = earth.seconds_from_timeofday((int(h), int(m), int(s)))
		if sign == '-':
			offset = -offset
	else:
		offset = None

	return args + (
		(
			(
				int(struct['year']),
				int(struct['month']),
				int(struct['day']),
				int(struct['hour']),
				int(struct['minute']),
				int(struct['second']),
			),
			offset,
		),
	)

def transform_rfc1123(args, int = int):
	src, struct = args
	month = gregorian.month_name_to_number[struct['month'].lower()]
	return args + (
		(
			(
				int(struct['year']),
				month + 1, # for consistency with ISO.
				int(struct['day']),
				int(struct['hour']),
				int(struct['minute']),
				int(struct['second']),
			),
			0,
		),
	)

transformers = {
	'iso8601' : transform_iso8601,
	'rfc1123' : transform_rfc1123,
}

def validate_fields(args):
	src, struct, tup = args
	datetime, offset = tup
	validate_datetime(*datetime)
	return tup

def validate_rfc1123(args, weekdays = week.weekday_name_to_number):
	# check the integrity of the parse rfc1123 timestamp
	src, struct, tup = args

	if struct['timezone'].strip().lower() not in ('zulu', 'z', 'gmt', 'utc'):
		raise ValueError("timezone not GMT")

	dow = struct['day_of_week'].lower()
	if dow not in weekdays:
		raise ValueError("invalid day of week: " + dow)

	return validate_fields(args)

validators = {
	'rfc1123': validate_rfc1123,
	'iso8601': validate_fields,
}

aliases = {'http' : 'rfc1123', 'iso' : 'iso8601', 'rfc' : 'rfc1123'}

def validate_datetime(year, month, day, hour=0, minute=0, second=0):
	"""
	# Raise &core.FieldError if any of the fields are out of range.
	# A &second of sixty is permitted.
	"""
	gregorian.validate(year, month, day)
	if not 0 <= hour < earth.hours_in_day:
		raise core.FieldError('hour', hour, "must be in 0..23")
	if not 0 <= minute < earth.minutes_in_hour:
		raise core.FieldError('minute', minute, "must be in 0..59")
	if not 0 <= second <= earth.seconds_in_minute:
		raise core.FieldError('second', second, "must be in 0..60")

def _parse(fun, format):
	def EXCEPTION(src, fun = fun, format = format):
		try:
			return (src, dict(fun(src)))
		except core.ParseError:
			raise
		except Exception as e:
			parse_error = core.ParseError(src, format = format)
			parse_error.__cause__ = e
			raise parse_error
	functools.update_wrapper(EXCEPTION, fun)
	return EXCEPTION

def _structure(fun, format):
	def EXCEPTION(state):
		try:
			return fun(state)
		except core.StructureError:
			raise
		except Exception as e:
			struct_error = core.StructureError(state[0], format = format)
			struct_error.__cause__ = e
			raise struct_error
	functools.update_wrapper(EXCEPTION, fun)
	return EXCEPTION

def _integrity(fun, format):
	def EXCEPTION(state):
		try:
			return fun(state)
		except core.IntegrityError:
			raise
		except core.FieldError as e:
			integ_error = core.IntegrityError(state[0], format = format, token = e.value)
			integ_error.__cause__ = e
			raise integ_error
		except Exception as e:
			integ_error = core.IntegrityError(state[0], format = format)
			integ_error.__cause__ = e
			raise integ_error
	functools.update_wrapper(EXCEPTION, fun)
	return EXCEPTION

def parser(fmt, _deref = aliases.get):
	"""
	# Given a format identifier, return the function that can be used to parse
	# the formatted string into a `(datetime, offset)` pair.

	# The offset is the number of seconds east of UTC designated by the string,
	# or &None when the string has no zone designation.
	"""
	fmt = _deref(fmt, fmt)
	if fmt not in parsers:
		raise LookupError("unknown format: " + repr(fmt))

	def parser_composition(
		x,
		integ = _integrity(validators[fmt], fmt),
		struct = _structure(transformers[fmt], fmt),
		parse = _parse(parsers[fmt], fmt),
	):
		if not isinstance(x, str):
			raise core.ParseError(x, format = fmt)
		return integ(struct(parse(x)))
	return parser_composition

def format_rfc1123(pit, _fmt = models['rfc1123'].format,
	month_abbrev = gregorian.month_abbreviations.__getitem__,
	dow_abbrev = week.weekday_abbreviations.__getitem__,
):
	pit = pit.with_zone(zones.utc)
	y, m, d, h, min, s = pit.datetime

	return _fmt(
		year = y, month = month_abbrev(m-1).capitalize(), day = d,
		hour = h, minute = min, second = s,
		day_of_week = dow_abbrev(pit.day_of_week).capitalize(),
	)

def format_year(year:int) -> str:
	"""
	# Render &year with at least four digits; years before 1 BCE carry a sign.
	"""
	return '%s%04d' %('-' if year < 0 else '', abs(year))

def format_iso8601(pit, _fmt = models['iso8601'].format):
	y, m, d, h, min, s = pit.datetime
	return _fmt(format_year(y), m, d, h, min, s, pit.offset.iso())

formatters = {
	'rfc1123' : format_rfc1123,
	'iso8601' : format_iso8601,
}

def formatter(fmt, _deref = aliases.get):
	"""
	# Given a format identifier, return the function that can be used to format
	# an &types.Instant.
	"""
	return formatters[_deref(fmt, fmt)]

def parse_iso(text, zone=None):
	"""
	# Parse an ISO-8601 timestamp into an &types.Instant.

	# When the text designates an offset, the instant is identified by it and
	# presented in &zone, or in a fixed offset zone if &zone is &None. Otherwise,
	# the fields are local to &zone, UTC by default.
	"""
	from . import types

	datetime, offset = parser('iso8601')(text)
	local = _local(*datetime)

	if offset is None:
		return types.Instant.from_local(local, zone)

	pit = types.Instant(local - offset, zones.select(zones.fixed_name(offset)))
	if zone is not None:
		pit = pit.with_zone(zone)
	return pit

def parse_iso_date(text):
	"""
	# Parse an ISO-8601 calendar date, `YYYY-MM-DD`, into an &types.CalendarDate.
	"""
	from . import types

	src, struct = _parse(parse_iso8601, 'iso8601')(text)
	if struct['time'] or struct['timezone'] is not None:
		raise core.StructureError(text, format = 'iso8601-date')

	datetime, offset = _integrity(validate_fields, 'iso8601')(
		_structure(transform_iso8601, 'iso8601')((src, struct))
	)
	return types.CalendarDate.of(date = datetime[:3])

def _local(year, month, day, hour, minute, second):
	days = gregorian.unix_days_from_date((year, month, day))
	return (days * earth.seconds_in_day) + earth.seconds_from_timeofday((hour, minute, second))

# Component order parsing.

_order = re.compile(r'^([ymd]{3})(?:_(h|hm|hms))?$')
_token = re.compile(r'[A-Za-z]+|\d+')
_dotted_meridiem = re.compile(r'(?<![A-Za-z])([AaPp])\.\s?([Mm])\b\.?')

#: Widths of the fields of numeric-only input; years may also be two digits.
field_widths = {'y': 4, 'm': 2, 'd': 2, 'h': 2, 'n': 2, 's': 2}

#: Two digit years less than the pivot are in the twenty-first century.
year_pivot = 69

ordinal_suffixes = frozenset(['st', 'nd', 'rd', 'th'])
meridiems = {'am': 0, 'pm': 12}

def fields(order:str) -> str:
	"""
	# Convert a component order, `'ymd_hms'`, into a string of single character
	# field codes, `'ymdhns'`, where `n` is the minute.
	"""
	m = _order.match(order)
	if m is None or len(set(m.group(1))) != 3:
		raise ValueError("invalid component order: " + repr(order))
	date, time = m.groups()
	return date + (time or '').replace('m', 'n')

def tokenize(text):
	"""
	# Split &text into alphabetic and numeric tokens, discarding separators,
	# weekday names, ordinal suffixes, and the ISO-8601 `T` designator.
	# Meridiems are recognized as `am` and `pm`, or dotted: `a.m.` and `p.m.`.

	# Returns the tokens and the meridiem adjustment, if any.
	"""
	tokens = []
	meridiem = None
	text = _dotted_meridiem.sub(r'\1\2', text)
	for t in _token.findall(text):
		if t.isdigit():
			tokens.append(t)
			continue

		lt = t.lower()
		if lt in week.weekday_name_to_number or lt == 't':
			continue
		if lt in ordinal_suffixes and tokens and tokens[-1].isdigit():
			continue
		if lt in meridiems and meridiem is None:
			meridiem = (t, meridiems[lt])
			continue
		tokens.append(t)

	return tokens, meridiem

def split_digits(token:str, codes:str):
	"""
	# Divide a numeric-only &token into the fields designated by &codes.
	# Years are taken as four digits and then as two.
	"""
	for ywidth in (4, 2):
		widths = [ywidth if c == 'y' else field_widths[c] for c in codes]
		if sum(widths) == len(token):
			r = []
			i = 0
			for w in widths:
				r.append(token[i:i+w])
				i += w
			return r
	return None

def structure(text, codes):
	"""
	# Assign the tokens of &text to the fields designated by &codes.

	# Returns a mapping of field codes to `(token, value)` pairs.
	"""
	tokens, meridiem = tokenize(text)

	if len(tokens) == 1 and len(codes) > 1 and tokens[0].isdigit():
		split = split_digits(tokens[0], codes)
		if split is None:
			raise core.StructureError(text, format = codes, token = tokens[0])
		tokens = split

	if len(tokens) != len(codes):
		extra = tokens[len(codes)] if len(tokens) > len(codes) else None
		raise core.StructureError(text, format = codes, token = extra)

	r = {}
	for c, t in zip(codes, tokens):
		if t.isdigit():
			v = int(t)
			if c == 'y' and len(t) <= 2:
				v += 2000 if v < year_pivot else 1900
			r[c] = (t, v)
		elif c == 'm' and t.lower() in gregorian.month_name_to_number:
			r[c] = (t, gregorian.month_name_to_number[t.lower()] + 1)
		else:
			raise core.StructureError(text, format = codes, token = t)

	if meridiem is not None:
		if 'h' not in r:
			raise core.StructureError(text, format = codes, token = meridiem[0])
		r['p'] = meridiem

	return r

def integrity(text, codes, struct):
	"""
	# Validate the structured fields returning the `(year, month, day, hour,
	# minute, second)` tuple.
	"""
	def check(code, low, high):
		token, value = struct[code]
		if not low <= value <= high:
			raise core.IntegrityError(text, format = codes, token = token)
		return value

	year = struct['y'][1]
	month = check('m', 1, gregorian.months_in_year)
	day = check('d', 1, gregorian.days_in_month(year, month))

	hour = minute = second = 0
	if 'h' in struct:
		if 'p' in struct:
			hour = check('h', 1, 12) % 12 + struct['p'][1]
		else:
			hour = check('h', 0, earth.hours_in_day - 1)
	if 'n' in struct:
		minute = check('n', 0, earth.minutes_in_hour - 1)
	if 's' in struct:
		second = check('s', 0, earth.seconds_in_minute)

	return (year, month, day, hour, minute, second)

def parse(text, order, zone=None):
	"""
	# Parse &text whose components are given in &order.

	# [ Parameters ]
	# /text/
		# The string to parse. Any non-alphanumeric characters separate tokens.
	# /order/
		# The order of the components: a permutation of `ymd` optionally followed
		# by `_h`, `_hm`, or `_hms`.
	# /zone/
		# The zone of the time fields; UTC by default.

	# [ Returns ]
	# A &types.CalendarDate when &order has no time component, otherwise
	# a &types.Instant in &zone.
	"""
	from . import types

	codes = fields(order)
	if not isinstance(text, str):
		raise core.ParseError(text, format = order)

	try:
		struct = structure(text, codes)
	except core.ParseError:
		raise
	except Exception as e:
		struct_error = core.StructureError(text, format = order)
		struct_error.__cause__ = e
		raise struct_error

	datetime = integrity(text, codes, struct)
	if len(codes) == 3:
		return types.CalendarDate.of(date = datetime[:3])
	return types.Instant.from_local(_local(*datetime), zone)

#: The result of &parse_each.
Batch = collections.namedtuple('Batch', ('values', 'failures'))
Batch.__doc__ = """
# The &values parsed by &parse_each, &None where parsing failed, and the
# `(index, error)` pairs of the &failures.
"""

def parse_each(texts, order, zone=None) -> Batch:
	"""
	# Parse each of &texts with &parse. Failures do not interrupt the batch;
	# their position in &Batch.values is &None and the error is recorded
	# in &Batch.failures.
	"""
	values = []
	failures = []
	for i, text in enumerate(texts):
		try:
			values.append(parse(text, order, zone))
		except core.ParseError as err:
			values.append(None)
			failures.append((i, err))

	if failures:
		log.warning("%d of %d values could not be parsed as %r", len(failures), len(values), order)

	return Batch(values, failures)
