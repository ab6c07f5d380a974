"""
# Proleptic Gregorian calendar functions and data.

# Days are counted from the first day of year zero, `(0, 1, 1)`, unless noted
# otherwise. Year zero is the year preceding 1 AD and, like every fourth
# centennial year, it is a leap year.

# Conversions into day counts perform carry: month and day fields outside
# of their usual range overflow onto the year and month.

#!python
	assert days_from_date((2017, 13, 1)) == days_from_date((2018, 1, 1))
	assert days_from_date((2017, 3, 0)) == days_from_date((2017, 2, 28))
"""
import operator
from . import calendar as callib
from . import core

#: Number of centuries in a gregorian cycle.
centuries_in_cycle = 4

#: Number of years in a century.
years_in_century = 100

#: English names of the months of the year.
month_names = (
	"january",
	"february",
	"march",
	"april",
	"may",
	"june",
	"july",
	"august",
	"september",
	"october",
	"november",
	"december",
)

#: Number of months in a year.
months_in_year = len(month_names)

#: Abbreviations of the month names.
month_abbreviations = tuple(x[:3] for x in month_names)

#: Names and abbreviations of the months associated with a zero-based index.
month_name_to_number = {
	month_names[i]: i for i in range(len(month_names))
}
month_name_to_number.update([
	(k[:3], v) for (k, v) in month_name_to_number.items()
])
month_name_to_number['sept'] = 8

#: Month lengths of a common year.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Month lengths of a leap year.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:]

# Four year pattern; leap year first.
leap_cycle = (
	('leap', 1, calendar_leap),
	('years', 3, calendar_year)
)

cycle = (
	'gregorian-cycle', 1, (
		# The cycle starts on a year divisible by four hundred.
		('first-century', 25, leap_cycle),

		# The first year of the remaining centuries is not a leap year.
		('centuries', 3, (
			('first-year-exception', 4, calendar_year),
			('regular-cycle', 24, leap_cycle),
		)),
	)
)

calendar = callib.aggregate(cycle)

def resolve_by_months(months,
		_select_months=operator.itemgetter(0),
		_select_days=operator.itemgetter(1),
		_calendar=calendar,
	):
	return callib.resolve((_select_months, _select_days), months, _calendar)

def resolve_by_days(days,
		_select_months=operator.itemgetter(0),
		_select_days=operator.itemgetter(1),
		_calendar=calendar,
	):
	return callib.resolve((_select_days, _select_months), days, _calendar)

#: Total number of months in a Gregorian cycle.
months_in_cycle = months_in_year * years_in_century * centuries_in_cycle

#: Total number of days in a Gregorian cycle.
days_in_cycle = calendar[-1][1]

def year_is_leap(year:int) -> bool:
	"""
	# Whether the given Gregorian &year is a leap year.
	"""
	return year % 4 == 0 and (year % 400 == 0 or year % 100 != 0)

def days_in_year(year:int) -> int:
	return 366 if year_is_leap(year) else 365

def days_in_month(year:int, month:int) -> int:
	"""
	# The number of days in the one-based &month of &year.
	"""
	table = calendar_leap if year_is_leap(year) else calendar_year
	return table[month - 1]

def carry_month(year:int, month:int):
	"""
	# Normalize a one-based &month outside of `1..12` onto the &year.
	"""
	y, m = divmod(month - 1, months_in_year)
	return (year + y, m + 1)

def month_from_days(days, _resolver=resolve_by_days):
	"""
	# Convert the given number of days to the month of the Gregorian cycle
	# that contains it. The remainder of days is not communicated.
	"""
	cycles, months, day, span = _resolver(days)
	return (cycles * months_in_cycle) + months

def days_from_month(months, _resolver=resolve_by_months):
	"""
	# Convert the given months to the number of days preceding the month.
	"""
	cycles, day_of_cycle, moy, span = _resolver(months)
	return (cycles * days_in_cycle) + day_of_cycle

def date_from_days(days, _resolver=resolve_by_days):
	"""
	# Convert the given days into a Gregorian date in the common form:
	# `(year, month, day)`.
	"""
	cycles, months, day, span = _resolver(days)
	year_of_cycle, moy = divmod(months, months_in_year)
	return ((cycles * 400) + year_of_cycle, moy + 1, day + 1)

def days_from_date(date, _resolver=resolve_by_months):
	"""
	# Convert a Gregorian date, `(year, month, day)`, to the number of days
	# leading up to the date. Overflowing months and days carry.
	"""
	year, month, day = date
	cycles, day_of_cycle, moy, span = _resolver((month - 1) + (year * months_in_year))
	return (cycles * days_in_cycle) + day_of_cycle + (day - 1)

def day_of_year(date) -> int:
	"""
	# The one-based ordinal of the &date within its year.
	"""
	year = date[0]
	return days_from_date(date) - days_from_date((year, 1, 1)) + 1

def validate(year, month, day):
	"""
	# Raise &core.FieldError if the date is not a valid Gregorian date.
	"""
	if not 1 <= month <= months_in_year:
		raise core.FieldError('month', month, "must be in 1..12")
	last = days_in_month(year, month)
	if not 1 <= day <= last:
		raise core.FieldError('day', day, "must be in 1..%d for %d-%02d" %(last, year, month))
	return (year, month, day)

def add_months(date, months:int):
	"""
	# Add &months to the &date clamping the day to the last day of
	# the resulting month.

	#!python
		assert add_months((2016, 1, 31), 1) == (2016, 2, 29)
		assert add_months((2017, 1, 31), 1) == (2017, 2, 28)
	"""
	year, month, day = date
	year, month = carry_month(year, month + months)
	return (year, month, min(day, days_in_month(year, month)))

#: Day offset of the Unix epoch, 1970-01-01, from `(0, 1, 1)`.
unix_epoch_days = days_from_date((1970, 1, 1))

def unix_days_from_date(date) -> int:
	return days_from_date(date) - unix_epoch_days

def date_from_unix_days(days:int):
	return date_from_days(days + unix_epoch_days)
