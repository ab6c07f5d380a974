"""
# Time zone views for moving instants in and out of local, wall clock, forms.

# A &Zone is an ordered sequence of transition times whose ranges correspond to a
# particular &Zone.Offset. Zones are loaded from the TZif files of the zone
# database and shared by every instant that refers to them.

#!python
	from almanac import zones
	z = zones.database.lookup('America/Los_Angeles')
	offset = z.find(1573000000)

# [ Configuration ]

# /`TZDIR`/
	# A directory searched for zone files before the system and packaged databases.
# /`TZ`/
	# The zone used by &Database.default; falls back to `/etc/localtime` and then UTC.

# [ Elements ]

# /database/
	# The process-wide &Database instance.
# /utc/
	# The UTC &Zone.
"""
import os
import re
import bisect
import logging
import pathlib
import functools
import zoneinfo
import importlib.resources

from . import core
from . import earth
from . import gregorian
from . import rules
from . import tzif

log = logging.getLogger(__name__)

class Zone(object):
	"""
	# An ordered sequence of transition times whose ranges correspond to a
	# particular offset.

	# [ Properties ]
	# /transitions/
		# Sorted Unix times at which the &offsets take effect.
	# /offsets/
		# The &Offset in effect from the corresponding transition onward.
	# /default/
		# The &Offset in effect before the first transition.
	# /leaps/
		# Leap second records of the zone file; informational.
	# /rule/
		# The &rules.Rule in effect after the last transition, if any.
	# /name/
		# The zone identifier.
	"""

	class Offset(tuple):
		"""
		# Offsets are constructed by a tuple of the form: `(offset, abbreviation, type)`.
		# Primarily, the type signifies whether or not the offset is daylight
		# savings or not.
		"""
		__slots__ = ()

		unit = 'second'

		@property
		def magnitude(self) -> int:
			"""
			# The offset in seconds from UTC.
			"""
			return self[0]

		@property
		def abbreviation(self) -> str:
			return self[1]

		@property
		def type(self) -> str:
			return self[2]

		@property
		def is_dst(self) -> bool:
			return self.type == 'dst'

		def __str__(self):
			return '%s%s%d' %(
				self.abbreviation,
				"+" if self.magnitude >= 0 else "-",
				abs(self.magnitude)
			)

		def __repr__(self):
			return '<%s(%s: %d)>' %(self.__class__.__name__, self.abbreviation, self.magnitude)

		def __int__(self):
			return self.magnitude

		def iso(self) -> str:
			"""
			# The offset in ISO-8601 form: `+hh:mm`, or `+hh:mm:ss` when
			# seconds are present.
			"""
			m = self.magnitude
			sign = '+' if m >= 0 else '-'
			h, m = divmod(abs(m), earth.seconds_in_hour)
			m, s = divmod(m, earth.seconds_in_minute)
			if s:
				return '%s%02d:%02d:%02d' %(sign, h, m, s)
			return '%s%02d:%02d' %(sign, h, m)

		@classmethod
		def from_tzinfo(Class, tzinfo):
			"""
			# Construct an Offset from a &.tzif.tzinfo tuple.
			"""
			return Class((
				tzinfo.tz_offset,
				tzinfo.tz_abbrev.decode('ascii'),
				'dst' if tzinfo.tz_isdst else 'std',
			))

		@classmethod
		def from_rule(Class, triple):
			utoff, abbreviation, isdst = triple
			return Class((utoff, abbreviation, 'dst' if isdst else 'std'))

	def __init__(self, transitions, offsets, default, leaps=(), name=None, rule=None):
		self.transitions = transitions
		self.offsets = offsets
		self.default = default
		self.leaps = leaps
		self.name = name
		self.rule = rule
		self._rule_offset = functools.lru_cache(maxsize=None)(self.Offset.from_rule)

	def __repr__(self):
		return '<%s: %s[%d/%d]>' %(
			self.__class__.__name__,
			self.name,
			len(self.transitions),
			len(self.offsets),
		)

	def __str__(self):
		return self.name

	def __reduce__(self):
		return (select, (self.name,))

	@property
	def fixed(self) -> bool:
		"""
		# Whether the zone has a single offset.
		"""
		return not self.transitions and (self.rule is None or self.rule.daylight is None)

	def find(self, pit, search=bisect.bisect):
		"""
		# Get the offset in effect at the Unix time, &pit.

		# Instants preceding the first transition receive the &default.
		# Instants following the last transition are evaluated with the &rule,
		# if the zone has one.
		"""
		idx = search(self.transitions, pit) - 1
		if idx == len(self.transitions) - 1 and self.rule is not None:
			return self._rule_offset(self.rule.find(int(pit)))
		if idx < 0:
			return self.default
		return self.offsets[idx]

	def slice(self, start, stop, search=bisect.bisect):
		"""
		# Get the transitions and offsets relevant to the period from &start to &stop.

		# Returns a list of `(transition, offset)` pairs beginning with the
		# transition in effect at &start, followed by the transitions that occur
		# before &stop.

		# [ Parameters ]
		# /start/
			# The start of the period.
		# /stop/
			# The end of the period.
		"""
		first = max(search(self.transitions, start) - 1, 0)
		last = search(self.transitions, stop)
		r = list(zip(self.transitions[first:last], self.offsets[first:last]))

		if self.rule is not None and self.rule.daylight is not None:
			floor = self.transitions[-1] if self.transitions else None
			first_year = gregorian.date_from_unix_days(earth.split(int(start))[0])[0]
			last_year = gregorian.date_from_unix_days(earth.split(int(stop))[0])[0]
			for year in range(first_year - 1, last_year + 1):
				for at, triple in self.rule.transitions(year):
					if floor is not None and at <= floor:
						continue
					if at >= stop:
						continue
					r.append((at, self._rule_offset(triple)))

			# Keep only the one in effect at start and those that follow.
			r.sort(key=lambda x: x[0])
			prior = [x for x in r if x[0] <= start]
			r = prior[-1:] + [x for x in r if x[0] > start]

		return r

	def localize(self, pit):
		"""
		# Given the Unix time, &pit, return the local wall clock seconds and
		# the &Offset used to produce them.
		"""
		offset = self.find(pit)
		return (int(pit) + offset.magnitude, offset)

	def candidates(self, local:int):
		"""
		# The Unix times whose local representation is &local, in ascending order.

		# Returns an empty list when &local falls into a gap, two times when it is
		# ambiguous, and one time otherwise.
		"""
		before = self.find(local - earth.seconds_in_day).magnitude
		after = self.find(local + earth.seconds_in_day).magnitude

		r = []
		for o in dict.fromkeys((before, after)):
			utc = local - o
			if self.find(utc).magnitude == o:
				r.append(utc)
		r.sort()
		return r

	def ambiguous(self, local:int) -> bool:
		"""
		# Whether the local wall clock time occurs twice.
		"""
		return len(self.candidates(local)) > 1

	def skipped(self, local:int) -> bool:
		"""
		# Whether the local wall clock time never occurs.
		"""
		return not self.candidates(local)

	def resolve(self, local:int) -> int:
		"""
		# Convert local wall clock seconds into a Unix time.

		# Ambiguous times resolve to the earlier instant. Skipped times are moved
		# forward by the length of the gap.
		"""
		r = self.candidates(local)
		if r:
			return r[0]

		# Use the offset in effect before the gap.
		return local - self.find(local - earth.seconds_in_day).magnitude

	@classmethod
	def fixed_offset(Class, seconds:int, abbreviation=None):
		"""
		# Construct a zone with a single, constant, offset.
		"""
		name = fixed_name(seconds)
		o = Class.Offset((seconds, abbreviation or name, 'std'))
		return Class([], [], o, (), name)

	@classmethod
	def from_rule(Class, source:str, name=None):
		"""
		# Construct a zone from a POSIX TZ string alone.
		"""
		rule = rules.Rule.from_string(source)
		default = Class.Offset.from_rule(rule.standard)
		return Class([], [], default, (), name or source, rule)

	@classmethod
	def from_tzif_data(Class, tzd, name=None, lru_cache=functools.lru_cache):
		# Re-use prior created offsets.
		zb = lru_cache(maxsize=None)(Class.Offset.from_tzinfo)

		offsets, transitions, leaps, footer = tzd

		transition_offsets = [zb(x[1]) for x in transitions]
		transition_points = [x[0] for x in transitions]

		# Time type zero applies prior to the first transition.
		default = offsets[0]

		rule = None
		if footer:
			try:
				rule = rules.Rule.from_string(footer)
			except ValueError:
				log.warning("zone %s has an unrecognized TZ rule: %r", name, footer)

		return Class(transition_points, transition_offsets, zb(default), leaps, name, rule)

	@classmethod
	def from_bytes(Class, data:bytes, name=None):
		"""
		# Construct a zone from the contents of a TZif file.
		# Raises &ValueError if &data is not TZif.
		"""
		tzd = tzif.get_timezone_data(data)
		if tzd is None:
			raise ValueError("not a TZif file: " + repr(name))
		return Class.from_tzif_data(tzd, name=name)

	@classmethod
	def from_file(Class, filepath, name=None):
		with open(filepath, 'rb') as f:
			return Class.from_bytes(f.read(), name=name or str(filepath))

def fixed_name(seconds:int) -> str:
	if seconds == 0:
		return 'UTC'
	return 'UTC' + Zone.Offset((seconds, '', 'std')).iso()

utc = Zone.fixed_offset(0)

# Identifiers that resolve to &utc without consulting the database.
utc_aliases = frozenset(['UTC', 'Etc/UTC', 'Z', 'Zulu', 'Etc/Zulu', 'UCT', 'Etc/UCT'])

_fixed = re.compile(r'^(?:UTC|GMT)?([+-])(\d{1,2})(?::?(\d{2}))?(?::?(\d{2}))?$')
_identifier = re.compile(r'^[A-Za-z0-9_+\-]+(?:/[A-Za-z0-9_+\-]+)*$')

def parse_fixed(identifier:str):
	"""
	# Parse identifiers of the form `UTC+hh:mm` into offset seconds.
	# Returns &None if &identifier is not a fixed offset.
	"""
	m = _fixed.match(identifier)
	if m is None:
		return None
	sign, h, mi, s = m.groups()
	seconds = earth.seconds_from_timeofday((int(h), int(mi or 0), int(s or 0)))
	return -seconds if sign == '-' else seconds

class Database(object):
	"""
	# The zone database: a read-only collection of TZif files found on a search path.

	# Zones are loaded on first lookup and retained for the life of the process.

	# [ Parameters ]
	# /paths/
		# Explicit sequence of directories to search. When &None, the search path
		# is `TZDIR`, &zoneinfo.TZPATH, and the zone files of the `tzdata`
		# distribution.
	"""

	def __init__(self, paths=None):
		self.paths = paths
		self.lookup = functools.lru_cache(maxsize=None)(self._lookup)

	def __repr__(self):
		return '<%s %r>' %(self.__class__.__name__, self.paths)

	def search_path(self):
		"""
		# The directories, as traversables, that will be searched for zone files.
		"""
		if self.paths is not None:
			return [pathlib.Path(x) for x in self.paths]

		r = []
		tzdir = os.environ.get(tzif.tzdirenviron)
		if tzdir:
			r.append(pathlib.Path(tzdir))

		r.extend(pathlib.Path(x) for x in zoneinfo.TZPATH)

		try:
			r.append(importlib.resources.files('tzdata').joinpath('zoneinfo'))
		except ImportError:
			log.debug("tzdata distribution is not available")

		return r

	def _read(self, identifier):
		parts = identifier.split('/')
		for root in self.search_path():
			path = root
			for x in parts:
				path = path.joinpath(x)
			try:
				if not path.is_file():
					continue
				data = path.read_bytes()
			except OSError as err:
				log.debug("could not read %s: %s", path, err)
				continue

			if data[:4] != tzif.magic:
				log.debug("not a TZif file: %s", path)
				continue

			log.debug("loading zone %s from %s", identifier, path)
			return data
		return None

	def _lookup(self, identifier:str) -> Zone:
		if not isinstance(identifier, str) or not identifier:
			raise core.UnknownZoneError(identifier, "identifier must be a non-empty string")

		if identifier in utc_aliases:
			return utc

		seconds = parse_fixed(identifier)
		if seconds is not None:
			return Zone.fixed_offset(seconds)

		if not _identifier.match(identifier) or '..' in identifier.split('/'):
			raise core.UnknownZoneError(identifier, "malformed identifier")

		data = self._read(identifier)
		if data is None:
			raise core.UnknownZoneError(identifier, "not present in the zone database")

		try:
			return Zone.from_bytes(data, name=identifier)
		except (ValueError, IndexError) as err:
			raise core.UnknownZoneError(identifier, "corrupt zone file") from err

	def identifiers(self):
		"""
		# The set of zone identifiers available on the search path.
		"""
		r = set()
		for root in self.search_path():
			root = pathlib.Path(str(root))
			if not root.is_dir():
				continue
			for path in root.rglob('*'):
				if not path.is_file() or '.' in path.name:
					continue
				try:
					with path.open('rb') as f:
						if f.read(4) != tzif.magic:
							continue
				except OSError:
					continue
				name = path.relative_to(root).as_posix()
				if name in ('localtime', 'posixrules', 'Factory'):
					continue
				r.add(name)
		return r

	def default(self) -> Zone:
		"""
		# The zone designated by the `TZ` environment variable, or the
		# system's `/etc/localtime`, or &utc.
		"""
		tz = os.environ.get(tzif.tzenviron)
		if tz:
			tz = tz.lstrip(':')
			if os.path.isabs(tz):
				try:
					return Zone.from_file(tz)
				except (OSError, ValueError) as err:
					log.debug("TZ file %s is unusable: %s", tz, err)
			else:
				try:
					return self.lookup(tz)
				except core.UnknownZoneError:
					try:
						return Zone.from_rule(tz)
					except ValueError:
						log.debug("TZ value %r is neither a zone nor a rule", tz)

		try:
			return Zone.from_file(tzif.tzdefault, name=_localtime_name())
		except (OSError, ValueError):
			return utc

def _localtime_name():
	# /etc/localtime is usually a symbolic link into the database.
	try:
		target = os.path.realpath(tzif.tzdefault)
	except OSError:
		return tzif.tzdefault
	marker = '/zoneinfo/'
	if marker in target:
		return target.split(marker, 1)[1]
	return tzif.tzdefault

database = Database()

def select(zone=None) -> Zone:
	"""
	# Designate a &Zone from a zone object, an identifier, or &None for UTC.
	"""
	if zone is None:
		return utc
	if isinstance(zone, Zone):
		return zone
	return database.lookup(zone)
