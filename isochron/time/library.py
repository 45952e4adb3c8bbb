"""
# Primary public module.

# Provides access to the value types, &Instant, &LocalDate, &LocalDateTime and
# &ZonedDateTime, the zone types, and the field and unit singletons.

#!syntax/python
	from isochron.time import library as libtime
	zdt = libtime.LocalDateTime.of(2009, 1, 1, 12).at_zone(libtime.zone('Europe/Paris'))
	assert zdt.select(libtime.WEEK_BASED_YEAR) == 2009
"""
import functools

from .errors import *
from .standard import *
from .isofields import (
	DAY_OF_QUARTER, QUARTER_OF_YEAR,
	WEEK_OF_WEEK_BASED_YEAR, WEEK_BASED_YEAR,
	QUARTER_YEARS, WEEK_BASED_YEARS,
)
from .ranges import ValueRange
from .chronology import Chronology, ISO
from .points import Instant, LocalDate, LocalDateTime
from .zone import Offset, Transition, Rules, Region, UTC
from .zoned import ZonedDateTime, resolve_best, resolve_instant
from .resolution import Builder, resolve
from .sysclock import now, today, instant

__shortname__ = 'libtime'

@functools.lru_cache()
def zone(name:str=None) -> Region:
	"""
	# Open the &Region &name; the system's default zone when &None.
	"""
	return Region.open(name)

def date(year, month, day) -> LocalDate:
	return LocalDate.of(year, month, day)

def datetime(year, month, day, hour=0, minute=0, second=0, nano=0) -> LocalDateTime:
	return LocalDateTime.of(year, month, day, hour, minute, second, nano)

def offset(hours=0, minutes=0, seconds=0) -> Offset:
	return Offset.of(hours, minutes, seconds)
