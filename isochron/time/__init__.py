"""
[ About ]
---------

isochron is a calendar and time-zone calculation package. Given a point on the
time line, or a partial set of date and time fields, and the offset rules of a
zone, it produces validated date-time values.

Calendar Support:

	- Proleptic ISO-8601 (Gregorian)

The surface functionality is provided by &.library, referred to as `libtime`
throughout the examples in this documentation.

#!/pl/python
	from isochron.time import library as libtime

[ Zoned Date-Times ]
--------------------

A local date-time is resolved against a zone. Inside a gap, the local date-time
is moved forward by the length of the gap. Inside an overlap, the earlier offset
is chosen unless another valid offset is preferred.

#!/pl/python
	paris = libtime.zone('Europe/Paris')
	zdt = libtime.datetime(2019, 10, 27, 2, 30).at_zone(paris)
	assert str(zdt) == '2019-10-27T02:30+02:00[Europe/Paris]'
	assert str(zdt.later_offset_at_overlap()) == '2019-10-27T02:30+01:00[Europe/Paris]'

Fields are selected and updated through field singletons:

#!/pl/python
	zdt = zdt.update(libtime.HOUR_OF_DAY, 12)
	assert zdt.select(libtime.OFFSET_SECONDS) == 3600

[ ISO Fields ]
--------------

The week-based-year, its weeks and the quarters of the year are computed fields
that operate on any value exposing an epoch-day.

#!/pl/python
	d = libtime.date(2008, 12, 29)
	assert d.select(libtime.WEEK_BASED_YEAR) == 2009
	assert d.select(libtime.WEEK_OF_WEEK_BASED_YEAR) == 1

Partial fields are combined with a &.resolution.Builder:

#!/pl/python
	b = libtime.Builder()
	b.add(libtime.YEAR, 2009).add(libtime.QUARTER_OF_YEAR, 2).add(libtime.DAY_OF_QUARTER, 1)
	assert str(b.resolve().date()) == '2009-04-01'
"""
