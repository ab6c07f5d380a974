"""
[ About ]
---------

almanac is a civil date and time package based on the built-in Python &int.
Instants are seconds since the Unix epoch and calendar dates are days since
1970-01-01; both are normal integers for ordering, hashing, and subtraction.
Instants carry the zone used to present their clock fields, but the zone
never changes the moment that they refer to.

Calendar Support:

	- Proleptic Gregorian

almanac's APIs are *not* compatible with the standard library's datetime module.

The surface functionality is provided by &.library:

#!/pl/python
	from almanac import library as almanac

[ Calendar Representation ]
---------------------------

Dates constructed from fields are validated.

#!/pl/python
	date = almanac.CalendarDate.of(1982, 5, 18)
	assert date.day == 18
	almanac.CalendarDate.of(2017, 2, 29) # FieldError

Updates do not validate; rather, fields with excess values overflow onto larger
units.

#!/pl/python
	assert date.update('month', 13) == almanac.CalendarDate.of(1983, 1, 18)

[ Parsing ]
-----------

Text is parsed given the order of its components. Any non-alphanumeric
characters separate the components; month names, ordinal suffixes, and
weekday names are recognized.

#!/pl/python
	almanac.mdy('January 31st, 2017')
	almanac.ymd('20170131')
	almanac.dmy_hm('31/01/2017 1:30 pm', zone='Europe/London')

Batches of text are parsed with &.format.parse_each. Failures are recorded
rather than raised.

[ Datetime Math ]
-----------------

&.types.Duration is an exact number of seconds. &.types.Period is a set of
calendar units whose length depends on where it is applied.

#!/pl/python
	t = almanac.Instant.of(2016, 3, 12, 13, zone='America/New_York')
	assert (t + almanac.Duration.of(day=1)).hour == 14
	assert (t + almanac.Period(days=1)).hour == 13

Month arithmetic clamps the day to the end of the month.

#!/pl/python
	d = almanac.CalendarDate.of(2016, 1, 31) + almanac.Period(months=1)
	assert d == almanac.CalendarDate.of(2016, 2, 29)

Intervals measure exactly.

#!/pl/python
	d = almanac.CalendarDate.of(2016, 1, 1)
	year = almanac.Interval(d, d + almanac.Period(years=1))
	assert year / almanac.Duration.of(day=1) == 366

[ Time Zones ]
--------------

Zones are read from the system's zone database, `TZDIR`, or the `tzdata` package.

#!/pl/python
	pit = almanac.now()
	la = pit.with_zone('America/Los_Angeles') # Same instant, new clock.
	fixed = la.force_zone('UTC') # Same clock, new instant.
"""
__pkg_bottom__ = True
