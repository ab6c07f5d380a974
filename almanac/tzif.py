"""
# Read TZif, time zone information, files (zic output).

# Version one files carry 32-bit transition times; versions two and later append a
# second header and data block with 64-bit times followed by a footer holding a
# POSIX TZ string that describes the offsets after the last transition.
# See tzfile(5).

# ! WARNING:
	# This module is intended for internal use only.
	# The returned structures are subject to change without warning.
"""
import struct
import collections

magic = b'TZif'
tzdefault = '/etc/localtime'
tzenviron = 'TZ'
tzdirenviron = 'TZDIR'

header_fields = (
	'tzh_ttisutcnt',   # The number of UT/local indicators stored in the file.
	'tzh_ttisstdcnt',  # The number of standard/wall indicators stored in the file.
	'tzh_leapcnt',     # The number of leap second records.
	'tzh_timecnt',     # The number of transition times.
	'tzh_typecnt',     # The number of local time types; never zero.
	'tzh_charcnt',     # The number of characters of abbreviation strings.
)
tzinfo_header = collections.namedtuple('tzinfo_header', header_fields)

# Magic, version, and fifteen reserved bytes precede the counts.
header_struct = struct.Struct("!4sc15x6l")
ttinfo_struct = struct.Struct("!lBB")

# Time sizes by block; the first block always uses 32-bit times.
time_formats = {
	4: ("!%dl", "!ll"),
	8: ("!%dq", "!ql"),
}

tzinfo = collections.namedtuple('tzinfo', (
	'tz_abbrev',
	'tz_offset',
	'tz_isdst',
	'tz_isstd',
	'tz_isgmt',
))

def block_size(header, timesize):
	"""
	# The number of bytes consumed by the data block described by &header.
	"""
	return (
		(header.tzh_timecnt * timesize) +
		header.tzh_timecnt +
		(header.tzh_typecnt * ttinfo_struct.size) +
		header.tzh_charcnt +
		(header.tzh_leapcnt * (timesize + 4)) +
		header.tzh_ttisstdcnt +
		header.tzh_ttisutcnt
	)

def parse_header(data, offset=0):
	mg, version, *counts = header_struct.unpack_from(data, offset)
	if mg != magic:
		return None, None
	return version, tzinfo_header(*counts)

def parse_block(data, offset, header, timesize):
	"""
	# Parse a data block starting at &offset.

	# Returns tuple of: `(transtimes, types, leaps, isstd, isgmt, timeinfo)`.
	"""
	timefmt, leapfmt = time_formats[timesize]

	n = header.tzh_timecnt
	transtimes = struct.unpack_from(timefmt % (n,), data, offset)
	offset += n * timesize

	# unsigned char indexes into the local time types
	types = tuple(bytes(data[offset:offset+n]))
	offset += n

	ttinfo = []
	for i in range(header.tzh_typecnt):
		ttinfo.append(ttinfo_struct.unpack_from(data, offset))
		offset += ttinfo_struct.size

	# Append a NUL terminator so that find() will not return -1.
	abbr = bytes(data[offset:offset+header.tzh_charcnt]) + b'\0'
	offset += header.tzh_charcnt

	leapstruct = struct.Struct(leapfmt)
	leaps = []
	for i in range(header.tzh_leapcnt):
		leaps.append(leapstruct.unpack_from(data, offset))
		offset += leapstruct.size

	isstd = tuple(bytes(data[offset:offset+header.tzh_ttisstdcnt]))
	offset += header.tzh_ttisstdcnt

	isgmt = tuple(bytes(data[offset:offset+header.tzh_ttisutcnt]))
	offset += header.tzh_ttisutcnt

	timeinfo = tuple([
		(abbr[idx:abbr.find(b'\0', idx)], gmtoff, isdst)
		for gmtoff, isdst, idx in ttinfo
	])

	return (transtimes, types, tuple(leaps), isstd, isgmt, timeinfo), offset

def parse(data):
	"""
	# Given TZif data, identify the version and unpack the timezone information.

	# Returns &None if &data is not TZif, otherwise the block fields and the footer:
	# `(transtimes, types, leaps, isstd, isgmt, timeinfo, footer)`.
	"""
	data = memoryview(data)
	if len(data) < header_struct.size:
		return None

	version, header = parse_header(data)
	if header is None:
		return None

	fields, offset = parse_block(data, header_struct.size, header, 4)
	footer = None

	if version not in (b'\0', b'1'):
		# Discard the first block in favor of the 64-bit data.
		version, header = parse_header(data, offset)
		if header is None:
			raise ValueError("second TZif header is missing")
		fields, offset = parse_block(data, offset + header_struct.size, header, 8)

		tail = bytes(data[offset:])
		if tail.startswith(b'\n'):
			end = tail.find(b'\n', 1)
			if end != -1:
				footer = tail[1:end].decode('ascii') or None

	return fields + (footer,)

def structure(tzif):
	"""
	# Given the fields from &parse, make a more accessible structure.

	# Returns `(types, transitions, leaps, footer)` where &transitions is a sorted
	# list of `(unix_seconds, tzinfo)` pairs.
	"""
	(transtimes, types, leaps, isstd, isgmt, timeinfo, footer) = tzif

	ltt = []
	for i, x in enumerate(timeinfo):
		ltt.append(tzinfo(
			tz_abbrev = x[0],
			tz_offset = x[1],
			tz_isdst = bool(x[2]),
			tz_isstd = bool(isstd[i]) if i < len(isstd) else False,
			tz_isgmt = bool(isgmt[i]) if i < len(isgmt) else False,
		))

	r = list(zip(transtimes, map(ltt.__getitem__, types)))
	r.sort(key = lambda x: x[0])
	return tuple(ltt), r, leaps, footer

def get_timezone_data(data):
	"""
	# Get the structured timezone data out of the TZif &data.
	# Returns &None if the data is not TZif.
	"""
	d = parse(data)
	if d is None:
		return None
	return structure(d)

if __name__ == '__main__':
	import sys
	for x in sys.argv[1:]:
		with open(x, 'rb') as f:
			d = get_timezone_data(f.read())
		if d is None:
			sys.stderr.write('not a timezone information file: ' + x + '\n')
			sys.exit(1)
		zones, transitions, leaps, footer = d
		for t in transitions:
			print(t)
		for z in zones:
			print(z)
		print(footer)
	sys.exit(0)
