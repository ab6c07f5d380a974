"""
# Print the transitions of a zone.

# Usage: `almanac-zone [identifier [start-year [stop-year]]]`

# Without an identifier, the system's default zone is used. When years are given,
# the transitions occurring in that range are printed, including those derived
# from the zone's rule.
"""
import sys

from .. import core
from .. import types
from .. import zones

def print_zone_transitions(zone, start=None, stop=None, file=sys.stdout):
	if start is None:
		pairs = zip(zone.transitions, zone.offsets)
	else:
		first = types.Instant.of(start, 1, 1)
		last = types.Instant.of(stop, 1, 1)
		pairs = zone.slice(int(first), int(last))

	for transition, offset in pairs:
		pit = types.Instant(transition, zone)
		file.write("%s: %s\n" %(pit.select('iso'), offset))

def main(argv=None, file=sys.stdout):
	if argv is None:
		argv = sys.argv[1:]

	name = argv[0] if argv else None
	years = [int(x) for x in argv[1:3]]

	try:
		zone = zones.database.lookup(name) if name else zones.database.default()
	except core.UnknownZoneError as err:
		sys.stderr.write(str(err) + "\n")
		return 1

	if years:
		start = years[0]
		stop = years[1] if len(years) > 1 else start + 1
		print_zone_transitions(zone, start, stop, file=file)
	else:
		print_zone_transitions(zone, file=file)
	return 0

if __name__ == '__main__':
	sys.exit(main())
