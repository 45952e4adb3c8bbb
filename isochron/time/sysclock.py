"""
# System clock access producing &points.Instant and zoned date-times.
"""
import time
from . import points
from . import zoned
from . import zone as zones
from . import chronology as chronologies

def _real_clock_read(time_ns=time.time_ns):
	return time_ns()

def instant(read=_real_clock_read) -> points.Instant:
	"""
	# The current point in time according to the system's real clock.
	"""
	return points.Instant.of(0, read())

def now(zone=None, chronology=None, read=_real_clock_read) -> zoned.ZonedDateTime:
	"""
	# The current &zoned.ZonedDateTime in &zone; UTC when &zone is &None.
	"""
	return zoned.resolve_instant(
		chronology or chronologies.ISO,
		instant(read),
		zone if zone is not None else zones.UTC,
	)

def today(zone=None, chronology=None, read=_real_clock_read) -> points.LocalDate:
	return now(zone, chronology, read).date

def elapsed(read=time.monotonic_ns) -> int:
	"""
	# Snapshot of the system's monotonic clock in nanoseconds.
	"""
	return read()
