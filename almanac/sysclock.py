"""
# Typed System Clock access.

# The zone of &now and &today defaults to &zones.Database.default: the `TZ`
# environment variable, the system's `/etc/localtime`, or UTC.
"""
import time

from . import types
from . import zones

_real_clock_read = time.time_ns
_monotonic_clock_read = time.monotonic_ns

def now(zone=None, Instant=types.Instant) -> types.Instant:
	"""
	# Get the current point in time according to the system's real clock as
	# an &types.Instant presented in &zone.
	"""
	if zone is None:
		zone = zones.database.default()
	return Instant(_real_clock_read() // 1000000000, zone)

def today(zone=None) -> types.CalendarDate:
	"""
	# The current local date in &zone.
	"""
	return now(zone).date

def elapsed(Duration=types.Duration) -> types.Duration:
	"""
	# Snapshot of the system's monotonic clock in whole seconds. Returns a &types.Duration.
	"""
	return Duration(_monotonic_clock_read() // 1000000000)
