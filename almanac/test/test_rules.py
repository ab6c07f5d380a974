from .. import rules
from .. import gregorian
from .. import earth

def test_parse_time(test):
	test/rules.parse_time('5') == 5 * 3600
	test/rules.parse_time('-3:30') == -((3 * 3600) + (30 * 60))
	test/rules.parse_time('+1:02:03') == 3723

def test_parse_transition(test):
	t = rules.parse_transition('M3.2.0')
	test/t.kind == 'M'
	test/t.fields == (3, 2, 0)
	test/t.time == 7200

	t = rules.parse_transition('J60/1')
	test/t == rules.Transition('J', (60,), 3600)

	t = rules.parse_transition('59')
	test/t.kind == 'N'

	test/ValueError ^ (lambda: rules.parse_transition('M13.1.0'))
	test/ValueError ^ (lambda: rules.parse_transition('J0'))
	test/ValueError ^ (lambda: rules.parse_transition('X'))

def test_transition_day(test):
	# Second Sunday of March 2017 and first Sunday of November 2017.
	day = rules.transition_day(rules.parse_transition('M3.2.0'), 2017)
	test/gregorian.date_from_unix_days(day) == (2017, 3, 12)
	day = rules.transition_day(rules.parse_transition('M11.1.0'), 2017)
	test/gregorian.date_from_unix_days(day) == (2017, 11, 5)

	# Last Sunday of October.
	day = rules.transition_day(rules.parse_transition('M10.5.0'), 2017)
	test/gregorian.date_from_unix_days(day) == (2017, 10, 29)

	# Julian days never count February 29th.
	day = rules.transition_day(rules.parse_transition('J60'), 2016)
	test/gregorian.date_from_unix_days(day) == (2016, 3, 1)
	day = rules.transition_day(rules.parse_transition('59'), 2016)
	test/gregorian.date_from_unix_days(day) == (2016, 2, 29)

def test_rule_standard_only(test):
	r = rules.Rule.from_string('JST-9')
	test/r.standard == (9 * 3600, 'JST', False)
	test/r.daylight == None
	test/r.find(0) == r.standard
	test/r.transitions(2017) == []

def test_rule_quoted_names(test):
	r = rules.Rule.from_string('<-03>3')
	test/r.standard == (-3 * 3600, '-03', False)

def test_rule_daylight(test):
	r = rules.Rule.from_string('EST5EDT,M3.2.0,M11.1.0')
	test/r.standard == (-18000, 'EST', False)
	test/r.daylight == (-14400, 'EDT', True)

	into, out = r.transitions(2017)
	test/into[0] == 1489302000
	test/into[1] == r.daylight
	test/out[1] == r.standard

	test/r.find(1489302000 - 1) == r.standard
	test/r.find(1489302000) == r.daylight
	test/r.find(out[0] - 1) == r.daylight
	test/r.find(out[0]) == r.standard

def test_rule_southern_hemisphere(test):
	# Daylight savings spans the new year.
	r = rules.Rule.from_string('AEST-10AEDT,M10.1.0,M4.1.0/3')
	jan = gregorian.unix_days_from_date((2017, 1, 15)) * earth.seconds_in_day
	jul = gregorian.unix_days_from_date((2017, 7, 15)) * earth.seconds_in_day
	test/r.find(jan) == r.daylight
	test/r.find(jul) == r.standard

def test_rule_default_dates(test):
	r = rules.Rule.from_string('EST5EDT')
	test/r.start == rules.parse_transition('M3.2.0')
	test/r.end == rules.parse_transition('M11.1.0')

def test_rule_invalid(test):
	test/ValueError ^ (lambda: rules.Rule.from_string(''))
	test/ValueError ^ (lambda: rules.Rule.from_string('5EST'))
