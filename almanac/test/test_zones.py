import pickle

from .. import core
from .. import zones
from .. import tzif
from . import samples

into, out = samples.eastern_transitions

def eastern():
	return zones.Zone.from_bytes(samples.eastern, name='Test/Eastern')

def test_offset(test):
	o = zones.Zone.Offset((-18000, 'EST', 'std'))
	test/o.magnitude == -18000
	test/o.abbreviation == 'EST'
	test/o.is_dst == False
	test/o.iso() == '-05:00'
	test/int(o) == -18000
	test/zones.Zone.Offset((19800, 'IST', 'std')).iso() == '+05:30'
	test/zones.Zone.Offset((0, 'UTC', 'std')).iso() == '+00:00'
	test/zones.Zone.Offset((-3723, 'X', 'std')).iso() == '-01:02:03'

def test_find(test):
	z = eastern()
	test/z.find(into - 1).abbreviation == 'EST'
	test/z.find(into).abbreviation == 'EDT'
	test/z.find(out - 1).magnitude == -14400
	test/z.find(out).magnitude == -18000
	# Before the first transition.
	test/z.find(0).abbreviation == 'EST'

def test_find_rule(test):
	z = eastern()
	# 2017-03-12T07:00:00Z; only described by the footer.
	test/z.rule.source == 'EST5EDT,M3.2.0,M11.1.0'
	test/z.find(1489302000 - 1).abbreviation == 'EST'
	test/z.find(1489302000).abbreviation == 'EDT'
	test/z.find(1489302000).is_dst == True

def test_find_without_rule(test):
	z = zones.Zone.from_bytes(samples.eastern_v1, name='Test/Eastern')
	test/z.rule == None
	test/z.find(1489302000).abbreviation == 'EST'

def test_slice(test):
	z = eastern()
	s = z.slice(into - 10, 1500000000)
	# Recorded transitions followed by those derived from the rule.
	test/[x[0] for x in s] == [into, out, 1489302000]
	test/[x[1].abbreviation for x in s] == ["EDT", "EST", "EDT"]

def test_slice_with_rule(test):
	z = eastern()
	start = 1483228800 # 2017-01-01
	stop = 1514764800 # 2018-01-01
	s = z.slice(start, stop)
	# The transition in effect at start followed by the two of 2017.
	test/len(s) == 3
	test/s[0][0] == out
	test/s[1][0] == 1489302000
	test/s[1][1].abbreviation == 'EDT'
	test/s[2][1].abbreviation == 'EST'

def test_localize(test):
	z = eastern()
	local, offset = z.localize(into)
	test/local == into - 14400
	test/offset.abbreviation == 'EDT'

def test_resolve_gap(test):
	z = eastern()
	# 2016-03-13T02:30 local does not exist.
	local = (into - 18000) + 1800
	test/z.skipped(local) == True
	test/z.candidates(local) == []
	# Moved forward by the length of the gap: 03:30 EDT.
	r = z.resolve(local)
	test/r == into + 1800
	test/z.localize(r)[0] == local + 3600

def test_resolve_overlap(test):
	z = eastern()
	# 2016-11-06T01:30 local occurs twice.
	local = (out - 14400) - 1800
	test/z.ambiguous(local) == True
	earlier, later = z.candidates(local)
	test/(later - earlier) == 3600
	test/z.resolve(local) == earlier
	test/earlier == out - 1800

def test_resolve_regular(test):
	z = eastern()
	local = 1000000
	test/z.ambiguous(local) == False
	test/z.skipped(local) == False
	test/z.resolve(local) == local + 18000

def test_fixed_offset(test):
	z = zones.Zone.fixed_offset(3600)
	test/z.name == 'UTC+01:00'
	test/z.fixed == True
	test/z.find(123456).magnitude == 3600
	test/z.resolve(3600) == 0
	test/zones.fixed_name(0) == 'UTC'
	test/zones.fixed_name(-19800) == 'UTC-05:30'

def test_parse_fixed(test):
	test/zones.parse_fixed('UTC+01:00') == 3600
	test/zones.parse_fixed('UTC-0530') == -19800
	test/zones.parse_fixed('+02') == 7200
	test/zones.parse_fixed('America/New_York') == None

def test_from_rule(test):
	z = zones.Zone.from_rule('EST5EDT,M3.2.0,M11.1.0')
	test/z.fixed == False
	test/z.find(1489302000).abbreviation == 'EDT'
	test/z.find(1489302000 - 1).abbreviation == 'EST'

def test_from_bytes_invalid(test):
	test/ValueError ^ (lambda: zones.Zone.from_bytes(b'x' * 64))

def test_database_paths(test, tmp_path):
	(tmp_path / 'Test').mkdir()
	(tmp_path / 'Test' / 'Eastern').write_bytes(samples.eastern)
	(tmp_path / 'Test' / 'Text').write_bytes(b'not a zone file')

	db = zones.Database([str(tmp_path)])
	z = db.lookup('Test/Eastern')
	test/z.name == 'Test/Eastern'
	test/z.find(into).abbreviation == 'EDT'
	# Cached.
	test/db.lookup('Test/Eastern') % z

	test/db.identifiers() == {'Test/Eastern'}

	with test/core.UnknownZoneError as exc:
		db.lookup('Test/Text')
	test/exc().identifier == 'Test/Text'

	test/core.UnknownZoneError ^ (lambda: db.lookup('Test/Missing'))

def test_database_rejects_paths(test, tmp_path):
	db = zones.Database([str(tmp_path)])
	test/core.UnknownZoneError ^ (lambda: db.lookup('../etc/passwd'))
	test/core.UnknownZoneError ^ (lambda: db.lookup('/etc/localtime'))
	test/core.UnknownZoneError ^ (lambda: db.lookup('Test/../Eastern'))
	test/core.UnknownZoneError ^ (lambda: db.lookup(''))
	test/LookupError ^ (lambda: db.lookup('Nowhere/Special'))

def test_database_utc(test, tmp_path):
	db = zones.Database([str(tmp_path)])
	test/db.lookup('UTC') % zones.utc
	test/db.lookup('Etc/UTC') % zones.utc
	test/db.lookup('Z') % zones.utc
	test/db.lookup('UTC+01:00').find(0).magnitude == 3600

def test_database_default(test, tmp_path, monkeypatch):
	(tmp_path / 'Test').mkdir()
	(tmp_path / 'Test' / 'Eastern').write_bytes(samples.eastern)
	db = zones.Database([str(tmp_path)])

	monkeypatch.setenv(tzif.tzenviron, 'Test/Eastern')
	test/db.default().name == 'Test/Eastern'

	monkeypatch.setenv(tzif.tzenviron, str(tmp_path / 'Test' / 'Eastern'))
	test/db.default().find(into).abbreviation == 'EDT'

	# Not an identifier; interpreted as a rule.
	monkeypatch.setenv(tzif.tzenviron, 'JST-9')
	test/db.default().find(0).magnitude == 9 * 3600

def test_database_tzdir(test, tmp_path, monkeypatch):
	monkeypatch.setenv(tzif.tzdirenviron, str(tmp_path))
	db = zones.Database()
	test/str(db.search_path()[0]) == str(tmp_path)

def test_select(test):
	test/zones.select(None) % zones.utc
	test/zones.select('UTC') % zones.utc
	z = eastern()
	test/zones.select(z) % z

def test_system_database(test):
	z = zones.database.lookup('America/New_York')
	test/z.name == 'America/New_York'
	test/zones.select('America/New_York') % z
	test/pickle.loads(pickle.dumps(z)) % z
	test/core.UnknownZoneError ^ (lambda: zones.select('Mars/Olympus_Mons'))
