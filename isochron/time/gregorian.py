"""
# Proleptic Gregorian calendar functions and data.

# Dates are converted to and from day counts by searching the 400 year Gregorian
# cycle. The cycle is described as a tree of month lengths that is aggregated
# once at import time; &resolve walks the aggregate to find the address of a
# day or month count.

# Day counts exposed by this module are epoch-days: the number of days since
# 1970-01-01.
"""
import itertools
import operator

#: Number of months in a year.
months_in_year = 12

#: Number of years in a Gregorian cycle.
years_in_cycle = 400

#: Definition of a year in terms of gregorian month-to-days.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Definition of a leap year in terms of gregorian month-to-days.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:] # Feb29

#: Leading days of each month, indexed by the zero-based month.
year_offsets = tuple(itertools.accumulate((0,) + calendar_year[:-1]))
leap_offsets = tuple(itertools.accumulate((0,) + calendar_leap[:-1]))

# Nodes take the form: (title, multiplier, sub)
leap_cycle = (
	('leap', 1, calendar_leap),
	('years', 3, calendar_year)
)

cycle = (
	'gregorian-cycle', 1, (
		# First century; normal leap cycle throughout.
		('first-century', 25, leap_cycle),

		# Subsequent three centuries in the cycle.
		# First year in century is leap exception.
		('centuries', 3, (
			('first-year-exception', 4, calendar_year),
			('regular-cycle', 24, leap_cycle),
		)),
	)
)

def aggregate(node, accumulate=itertools.accumulate):
	"""
	# Recursively calculate the total months and days consumed by the &node.

	# After aggregation, nodes take the form:
	# `(title, repeat, sub, (months, days), (repeat * months, repeat * days))`.
	"""
	title, repeat, sub = node

	if isinstance(sub[0], int):
		# leaf; a sequence of month lengths
		days = tuple(accumulate((0,) + tuple(sub)))
		months = tuple(range(len(sub) + 1))
		agg = (months, days)
		fragment = (len(sub), days[-1])
	else:
		agg = tuple([aggregate(x) for x in sub])
		fragment = (
			sum([x[-1][0] for x in agg]),
			sum([x[-1][1] for x in agg]),
		)

	return (title, repeat, agg, fragment, (repeat * fragment[0], repeat * fragment[1]))

calendar = aggregate(cycle)

def resolve(selectors, address, calendar=calendar):
	"""
	# Search the aggregated &calendar for the given &address.

	# &selectors is a pair of item getters; the first selects the input quantity
	# (months or days) and the second the output.

	# Returns `(cycles, output, remainder, length)` where `output` is the output
	# address of the final leaf entry, `remainder` is the input not consumed by it,
	# and `length` is the size of the entry in output units.
	"""
	select_in, select_out = selectors
	output = 0

	# align on a cycle
	cycles, address = divmod(address, select_in(calendar[-1]))

	current = calendar
	while not isinstance(current[2][0][0], int):
		for sub in current[2]:
			title, repeat, inner, fragment, totals = sub
			total = select_in(totals)
			if address >= total:
				# Completely consumed. Continue to next node.
				address -= total
				output += select_out(totals)
			else:
				# Consume the whole repetitions and enter the node.
				parts, address = divmod(address, select_in(fragment))
				output += parts * select_out(fragment)
				current = sub
				break
		else:
			raise RuntimeError("address out of cycle bounds")

	inputs = select_in(current[2])
	outputs = select_out(current[2])
	for i in range(len(inputs) - 1):
		if inputs[i+1] > address:
			break

	return (cycles, output + outputs[i], address - inputs[i], outputs[i+1] - outputs[i])

def resolve_by_months(months,
		_selectors=(operator.itemgetter(0), operator.itemgetter(1)),
	):
	return resolve(_selectors, months)

def resolve_by_days(days,
		_selectors=(operator.itemgetter(1), operator.itemgetter(0)),
	):
	return resolve(_selectors, days)

#: Total number of months in a Gregorian cycle.
months_in_cycle = months_in_year * years_in_cycle

# Find the number of days in the cycle using the resolve function.
r = resolve_by_months(months_in_cycle - 1)
days_in_cycle = r[1] + r[-1]
del r

def year_is_leap(y):
	"""
	# Given a gregorian calendar year, determine whether it is a leap year.
	"""
	return y % 4 == 0 and (y % 400 == 0 or not y % 100 == 0)

def days_in_year(y):
	return 366 if year_is_leap(y) else 365

def days_in_month(y, m):
	"""
	# The number of days in the one-based month &m of the year &y.
	"""
	if year_is_leap(y):
		return calendar_leap[m-1]
	return calendar_year[m-1]

def day_of_year(y, m, d):
	"""
	# One-based day of the year of the date.
	"""
	offsets = leap_offsets if year_is_leap(y) else year_offsets
	return offsets[m-1] + d

def date_from_day_of_year(y, doy):
	"""
	# Convert the one-based day of year, &doy, into a `(year, month, day)` tuple.
	# &doy is not validated.
	"""
	offsets = leap_offsets if year_is_leap(y) else year_offsets
	m = 12
	while m > 1 and offsets[m-1] >= doy:
		m -= 1
	return (y, m, doy - offsets[m-1])

def days_from_date(date, _resolver=resolve_by_months):
	"""
	# Convert a Gregorian date in the common form, (year, month, day), to the number
	# of days since 0000-01-01.
	"""
	year, month, day = date
	cycles, day_of_cycle, moy, length = _resolver((month - 1) + (year * months_in_year))
	return (cycles * days_in_cycle) + day_of_cycle + (day - 1)

def date_from_days(days, _resolver=resolve_by_days):
	"""
	# Convert a number of days since 0000-01-01 into a Gregorian date in the
	# common form: (year, month, day).
	"""
	cycles, months, day, length = _resolver(days)
	year_of_cycle, moy = divmod(months, months_in_year)
	return ((cycles * years_in_cycle) + year_of_cycle, moy + 1, day + 1)

#: Days between 0000-01-01 and 1970-01-01.
epoch_days = days_from_date((1970, 1, 1))

def epoch_day(y, m, d):
	"""
	# The epoch-day of the given date.
	"""
	return days_from_date((y, m, d)) - epoch_days

def date_from_epoch_day(days):
	"""
	# The `(year, month, day)` of the given epoch-day.
	"""
	return date_from_days(days + epoch_days)
