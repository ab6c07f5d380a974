import io

from .. import library as module
from .. import zones
from .. import sysclock
from .. import tzif
from ..bin import zone as zonebin

def test_constructors(test):
	d = module.CalendarDate.of(2017, 1, 31)
	test/module.ymd('2017-01-31') == d
	test/module.mdy('January 31st, 2017') == d
	test/module.dmy('31/01/2017') == d
	test/module.ydm('2017/31/01') == d
	test/module.myd('01 2017 31') == d
	test/module.dym('31 2017 01') == d

	t = module.Instant.of(2017, 1, 31, 12, 30, 15)
	test/module.ymd_hms('2017-01-31 12:30:15') == t
	test/module.ymd_hm('2017-01-31 12:30') == t.floor('minute')
	test/module.ymd_h('2017-01-31 12') == t.floor('hour')
	test/module.mdy_hms('01/31/2017 12:30:15') == t
	test/module.mdy_hm('01/31/2017 12:30 pm') == t.floor('minute')
	test/module.dmy_hms('31/01/2017 12:30:15') == t
	test/module.dmy_hm('31/01/2017 12:30') == t.floor('minute')

	n = module.ymd_hm('2017-01-31 07:30', zone='America/New_York')
	test/n == t.floor('minute')

def test_errors_exported(test):
	test.issubclass(module.ParseError, module.Error)
	test.issubclass(module.StructureError, module.ParseError)
	test.issubclass(module.IntegrityError, module.ParseError)
	test.issubclass(module.FieldError, ValueError)
	test.issubclass(module.UnknownZoneError, LookupError)
	test.issubclass(module.AmbiguousDurationError, ArithmeticError)

	with test/module.ParseError:
		module.ymd('2017-13-01')

def test_zone(test):
	test/module.zone('UTC') % module.utc
	test/module.zone('America/New_York').name == 'America/New_York'
	test/module.UnknownZoneError ^ (lambda: module.zone('Nowhere/Special'))

def test_iso_unix(test):
	t = module.iso('2017-01-31T12:30:15Z')
	test/t == module.unix(1485865815)
	test/module.unix(0).datetime == (1970, 1, 1, 0, 0, 0)
	test/module.unix(0, 'America/New_York').datetime == (1969, 12, 31, 19, 0, 0)

def test_range(test):
	start = module.CalendarDate.of(2017, 1, 29)
	days = list(module.range(start, start + module.Period(days=5), module.Period(days=1)))
	test/len(days) == 5
	test/[x.weekday(True) for x in days] == ['sun', 'mon', 'tue', 'wed', 'thu']

def test_now(test, monkeypatch):
	monkeypatch.setenv(tzif.tzenviron, 'UTC')
	t = module.now()
	test.isinstance(t, module.Instant)
	test/t.zone % zones.utc
	test/t > module.Instant.of(2020, 1, 1)

	n = module.now('America/New_York')
	test/n.zone.name == 'America/New_York'
	test/(n - t) < module.Duration.of(minute=1)

	test.isinstance(module.today('UTC'), module.CalendarDate)

def test_sysclock_fixed(test, monkeypatch):
	monkeypatch.setattr(sysclock, '_real_clock_read', lambda: 1485865815 * 1000000000 + 999)
	test/sysclock.now('UTC') == module.Instant.of(2017, 1, 31, 12, 30, 15)
	test/sysclock.today('America/New_York') == module.CalendarDate.of(2017, 1, 31)

	monkeypatch.setattr(sysclock, '_monotonic_clock_read', lambda: 5500000000)
	e = sysclock.elapsed()
	test.isinstance(e, module.Duration)
	test/e == 5

def test_zone_command(test):
	out = io.StringIO()
	test/zonebin.main(['America/New_York', '2017'], file=out) == 0
	lines = out.getvalue().splitlines()
	test/len(lines) == 3
	test/lines[0].startswith('2016-11-06T01:00:00-05:00') == True
	test/lines[1].startswith('2017-03-12T03:00:00-04:00') == True
	test/lines[2].startswith('2017-11-05T01:00:00-05:00') == True

def test_zone_command_unknown(test, capsys):
	test/zonebin.main(['Nowhere/Special'], file=io.StringIO()) == 1
	test/('Nowhere/Special' in capsys.readouterr().err) == True

def test_zone_command_fixed(test):
	out = io.StringIO()
	test/zonebin.main(['UTC'], file=out) == 0
	test/out.getvalue() == ''

def test_project_metadata(test):
	from .. import project
	test/project.name == module.__shortname__
	test/project.version == '.'.join(map(str, project.version_info))
