"""
# Earth day units of time and time of day arithmetic.

# All of the units here are fixed: days are exactly 86400 seconds as leap
# seconds are absorbed into the clock rather than counted.
"""
#: Number of seconds contained in a `minute`.
seconds_in_minute = 60

#: Number of minutes contained in an `hour`.
minutes_in_hour = 60

#: Number of hours contained in an earth `day`.
hours_in_day = 24

seconds_in_hour = seconds_in_minute * minutes_in_hour
seconds_in_day = seconds_in_hour * hours_in_day
seconds_in_week = seconds_in_day * 7

#: Fixed units in seconds.
unit_seconds = {
	'second': 1,
	'minute': seconds_in_minute,
	'hour': seconds_in_hour,
	'day': seconds_in_day,
	'week': seconds_in_week,
}

def seconds_from_timeofday(timeofday) -> int:
	"""
	# Convert `(hour, minute, second)` into seconds. Fields outside of their
	# usual range carry into the larger units, and may exceed a day.
	"""
	hour, minute, second = timeofday
	return (hour * seconds_in_hour) + (minute * seconds_in_minute) + second

def timeofday_from_seconds(seconds:int):
	"""
	# Split &seconds, modulo a day, into `(hour, minute, second)`.
	"""
	seconds %= seconds_in_day
	hour, seconds = divmod(seconds, seconds_in_hour)
	minute, second = divmod(seconds, seconds_in_minute)
	return (hour, minute, second)

def split(seconds:int):
	"""
	# Separate &seconds into whole days and the seconds of the final day.
	"""
	return divmod(seconds, seconds_in_day)
