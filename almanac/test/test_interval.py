import fractions

from .. import types as module

day = module.Duration.of(day=1)

def test_year_in_days(test):
	# Not a context free constant.
	for year, days in [(2015, 365), (2016, 366), (2017, 365), (2000, 366), (1900, 365)]:
		d = module.CalendarDate.of(year, 1, 1)
		i = module.Interval(d, d + module.Period(years=1))
		test/(i / day) == days
		test/(i // day) == days

	# Spanning a leap day.
	d = module.CalendarDate.of(2015, 6, 1)
	test/(module.Interval(d, d + module.Period(years=1)) / day) == 366

def test_properties(test):
	a = module.Instant.of(2017, 1, 1)
	b = module.Instant.of(2017, 1, 2, 12)
	i = module.Interval(a, b)
	test/i.start == a
	test/i.end == b
	test/i.length == module.Duration.of(day=1, hour=12)
	test/i.direction == 1
	test/i.reversed == False
	test/(i / day) == fractions.Fraction(3, 2)
	test/(i // day) == 1

	r = i.flip()
	test/r.direction == -1
	test/r.reversed == True
	test/r.length == -module.Duration.of(day=1, hour=12)
	test/r.magnitude == module.Duration.of(day=1, hour=12)

def test_dates_as_bounds(test):
	i = module.Interval(module.CalendarDate.of(2017, 1, 1), module.CalendarDate.of(2017, 1, 2))
	test.isinstance(i.start, module.Instant)
	test/i.start == module.Instant.of(2017, 1, 1)
	test/TypeError ^ (lambda: module.Interval(0, 1))

def test_contains(test):
	a = module.Instant.of(2017, 1, 1)
	b = module.Instant.of(2017, 1, 2)
	i = module.Interval(a, b)
	test/(a in i) == True
	test/(b in i) == False
	test/(module.Instant.of(2017, 1, 1, 12) in i) == True
	test/(module.CalendarDate.of(2017, 1, 1) in i) == True
	test/(a in i.flip()) == True

def test_overlaps(test):
	jan = module.Interval(module.CalendarDate.of(2017, 1, 1), module.CalendarDate.of(2017, 2, 1))
	feb = module.Interval(module.CalendarDate.of(2017, 2, 1), module.CalendarDate.of(2017, 3, 1))
	mid = module.Interval(module.CalendarDate.of(2017, 1, 15), module.CalendarDate.of(2017, 2, 15))
	test/jan.overlaps(feb) == False
	test/jan.overlaps(mid) == True
	test/mid.overlaps(feb) == True

def test_shift(test):
	i = module.Interval(module.CalendarDate.of(2017, 1, 31), module.CalendarDate.of(2017, 2, 1))
	s = i.shift(module.Period(months=1))
	test/s.start == module.Instant.of(2017, 2, 28)
	test/s.end == module.Instant.of(2017, 3, 1)
	test/i.shift(day).start == module.Instant.of(2017, 2, 1)

def test_points(test):
	start = module.Instant.of(2017, 1, 1)
	i = module.Interval(start, start + module.Duration.of(day=3))
	pts = list(i.points(day))
	test/len(pts) == 3
	test/pts[0] == start
	test/pts[-1] == start + module.Duration.of(day=2)

	# Descending.
	pts = list(i.flip().points(day))
	test/pts[0] == i.end
	test/len(pts) == 3

	test/ValueError ^ (lambda: list(i.points(module.Duration(0))))
	test/ValueError ^ (lambda: list(i.points(module.Period())))

def test_points_months(test):
	# Multiples of the step are applied to the start; days do not drift.
	i = module.Interval(module.Instant.of(2016, 1, 31), module.Instant.of(2016, 6, 1))
	pts = [x.date.date for x in i.points(module.Period(months=1))]
	test/pts == [
		(2016, 1, 31),
		(2016, 2, 29),
		(2016, 3, 31),
		(2016, 4, 30),
		(2016, 5, 31),
	]

def test_period_division(test):
	y2016 = module.CalendarDate.of(2016, 1, 1)
	i = module.Interval(y2016, module.CalendarDate.of(2017, 1, 1))
	test/(i / module.Period(months=1)) == 12
	test/(i // module.Period(months=1)) == 12
	test/(i // module.Period(days=1)) == 366

	half = module.Interval(y2016, module.CalendarDate.of(2016, 1, 16))
	test/(half / module.Period(months=1)) == fractions.Fraction(15, 31)
	test/(half // module.Period(months=1)) == 0

	test/(i.flip() / module.Period(months=1)) == -12
	test/(i.flip() // module.Period(months=1)) == -12

	test/ZeroDivisionError ^ (lambda: i // module.Period())
	test/ValueError ^ (lambda: i // module.Period(months=-1))

def test_period_division_clamped(test):
	# One month from January 31st is February 29th.
	i = module.Interval(module.CalendarDate.of(2016, 1, 31), module.CalendarDate.of(2016, 2, 29))
	test/(i / module.Period(months=1)) == 1

def test_as_period(test):
	i = module.Interval(module.Instant.of(2016, 1, 31), module.Instant.of(2016, 3, 1, 12))
	test/i.as_period() == module.Period(months=1, days=1, hours=12)
	test/i.flip().as_period() == -module.Period(months=1, days=1, hours=12)

	d = module.CalendarDate.of(2015, 3, 15)
	i = module.Interval(d, module.CalendarDate.of(2017, 3, 14))
	test/i.as_period() == module.Period(years=1, months=11, days=27)

def test_daylight_savings_interval(test):
	t = module.Instant.of(2016, 3, 12, 13, zone='America/New_York')
	i = module.Interval(t, t + module.Period(days=1))
	test/(i / module.Duration.of(hour=1)) == 23
	test/(i / module.Period(days=1)) == 1
	test/i.as_period() == module.Period(days=1)
