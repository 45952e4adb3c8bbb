import os
import tempfile
from .. import library
from .. import project
from .. import tzif
from . import mock

def test_constructors(test):
	test/library.date(2009, 1, 1) == library.LocalDate.of(2009, 1, 1)
	test/library.datetime(2009, 1, 1, 12) == library.LocalDateTime.of(2009, 1, 1, 12)
	test/library.offset(-5) == library.Offset.from_seconds(-5 * 3600)
	test/library.offset() == library.UTC

def test_exports(test):
	test/library.WEEK_BASED_YEAR.name == 'WeekBasedYear'
	test/library.QUARTER_YEARS.name == 'QuarterYears'
	test/library.ISO.identifier == 'ISO'
	test/issubclass(library.RulesError, library.Error) == True
	test/library.date(2008, 12, 29).select(library.WEEK_BASED_YEAR) == 2009
	test/project.version == '0.1.0'
	test/library.__shortname__ == 'libtime'

def test_zone(test):
	d = test.exits.enter_context(tempfile.TemporaryDirectory())
	os.mkdir(os.path.join(d, 'Library'))
	with open(os.path.join(d, 'Library', 'Central'), 'wb') as f:
		f.write(mock.central_europe_tzif())

	saved = os.environ.get(tzif.tzdirenviron)
	def restore():
		if saved is None:
			os.environ.pop(tzif.tzdirenviron, None)
		else:
			os.environ[tzif.tzdirenviron] = saved
	test.exits.callback(restore)
	test.exits.callback(library.zone.cache_clear)
	os.environ[tzif.tzdirenviron] = d

	z = library.zone('Library/Central')
	test/z.identifier == 'Library/Central'
	test/library.zone('Library/Central') % z

	zdt = library.datetime(2009, 7, 1, 12).at_zone(z)
	test/str(zdt) == '2009-07-01T12:00+01:00[Library/Central]'
	zdt = library.datetime(2019, 7, 1, 12).at_zone(z)
	test/str(zdt) == '2019-07-01T12:00+02:00[Library/Central]'

	test/library.RulesError ^ (lambda: library.zone('Library/Missing'))

if __name__ == '__main__':
	import sys; from ...test import engine
	engine.execute(sys.modules[__name__])
