"""
# Week based measures of time: days of seven, and the ISO-8601 week-based-year.

# Weekdays are numbered from one, Monday, to seven, Sunday. Functions taking a
# `dow0` parameter expect the zero-based form, Monday being zero.

# The week-based-year starts on the Monday of the week containing the first
# Thursday of the year; equivalently, the first week with at least four days
# in the new year.
"""
from . import gregorian

#: English names of the days of the week in ISO order.
weekday_names = (
	'monday',
	'tuesday',
	'wednesday',
	'thursday',
	'friday',
	'saturday',
	'sunday',
)

#: Total number of a days in a week.
days_in_week = len(weekday_names)

#: Map of weekday names and abbreviations to the one-based ISO number.
weekday_name_to_number = {
	weekday_names[i]: i + 1
	for i in range(days_in_week)
}
weekday_name_to_number.update([
	(k[:3], v) for (k,v) in weekday_name_to_number.items()
])

# 1970-01-01 was a Thursday.
epoch_weekday0 = 3

def day_of_week(epoch_day):
	"""
	# The one-based ISO day of week of the epoch-day.
	"""
	return ((epoch_day + epoch_weekday0) % days_in_week) + 1

def weeks_in(week_based_year):
	"""
	# The number of weeks, 52 or 53, in the given week-based-year.

	# A week-based-year has 53 weeks when January 1 is a Thursday, or
	# a Wednesday in a leap year.
	"""
	dow = day_of_week(gregorian.epoch_day(week_based_year, 1, 1))
	if dow == 4 or (dow == 3 and gregorian.year_is_leap(week_based_year)):
		return 53
	return 52

def week_based_year_of(year, doy, dow0):
	"""
	# The week-based-year of the date identified by its &year, one-based day of
	# year, &doy, and zero-based day of week, &dow0.
	"""
	if doy <= 3:
		if doy - dow0 < -2:
			# Belongs to the last week of the prior year.
			year -= 1
	elif doy >= 363:
		doy = doy - 363 - (1 if gregorian.year_is_leap(year) else 0)
		if doy - dow0 >= 0:
			# Belongs to the first week of the next year.
			year += 1
	return year

def week_of(year, doy, dow0):
	"""
	# The week of the week-based-year of the date identified by its &year,
	# one-based day of year, &doy, and zero-based day of week, &dow0.
	"""
	doy0 = doy - 1
	# Adjust to the Thursday of the week; three from Monday.
	doy_thu0 = doy0 + (3 - dow0)
	aligned_week = doy_thu0 // 7
	first_thu_doy0 = doy_thu0 - (aligned_week * 7)
	first_mon_doy0 = first_thu_doy0 - 3
	if first_mon_doy0 < -3:
		first_mon_doy0 += 7

	if doy0 < first_mon_doy0:
		# Last week of the prior week-based-year.
		return weeks_in(year - 1)

	week = ((doy0 - first_mon_doy0) // 7) + 1
	if week == 53:
		if not (first_mon_doy0 == -3 or (first_mon_doy0 == -2 and gregorian.year_is_leap(year))):
			week = 1
	return week

def week_date(epoch_day):
	"""
	# The `(week_based_year, week, day_of_week)` triple of the epoch-day.
	"""
	y, m, d = gregorian.date_from_epoch_day(epoch_day)
	doy = gregorian.day_of_year(y, m, d)
	dow = day_of_week(epoch_day)
	return (week_based_year_of(y, doy, dow - 1), week_of(y, doy, dow - 1), dow)
