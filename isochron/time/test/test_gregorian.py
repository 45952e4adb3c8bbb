"""
# Proleptic Gregorian conversions.
"""
import itertools
from .. import gregorian

def test_year_is_leap(test):
	# hand picked years
	test/True == gregorian.year_is_leap(2000)
	test/False == gregorian.year_is_leap(1999)
	test/True == gregorian.year_is_leap(1996)
	test/True == gregorian.year_is_leap(1600)
	test/True == gregorian.year_is_leap(1200)
	test/False == gregorian.year_is_leap(1900)
	test/False == gregorian.year_is_leap(1800)
	test/False == gregorian.year_is_leap(1700)
	test/True == gregorian.year_is_leap(0)
	test/True == gregorian.year_is_leap(-4)
	test/False == gregorian.year_is_leap(-100)
	for x, i in zip(itertools.cycle((True, False, False, False)), range(1604, 1700)):
		test/x == gregorian.year_is_leap(i)

def test_cycle_totals(test):
	test/gregorian.days_in_cycle == 146097
	test/gregorian.months_in_cycle == 4800
	test/gregorian.calendar[-1] == (4800, 146097)

def test_resolve_by_months(test):
	# February of the first year of the cycle; a leap year.
	cycles, days, remainder, length = gregorian.resolve_by_months(1)
	test/cycles == 0
	test/days == 31
	test/remainder == 0
	test/length == 29

	# February of 1900; not a leap year.
	cycles, days, remainder, length = gregorian.resolve_by_months((1900 * 12) + 1)
	test/cycles == 4
	test/length == 28

def test_resolve_by_days(test):
	cycles, months, remainder, length = gregorian.resolve_by_days(59)
	test/months == 1 # February
	test/remainder == 28 # 29th
	test/length == 1 # months

	cycles, months, remainder, length = gregorian.resolve_by_days(-1)
	test/cycles == -1
	test/months == 4799
	test/remainder == 30

date_io_samples = [
	# whole cycle checks
	((2400,1,1), 6 * gregorian.days_in_cycle),
	((2000,1,1), 5 * gregorian.days_in_cycle),
	((1600,1,1), 4 * gregorian.days_in_cycle),
	((400,1,1), gregorian.days_in_cycle),
	((0,1,1), 0),
	((0,1,2), 1),
	((0,3,1), 60),
	((400,1,3), 2 + gregorian.days_in_cycle),
	((-1,12,31), -1),
	((-400,1,1), -gregorian.days_in_cycle),
]

def test_date_from_days(test):
	for date, days in date_io_samples:
		test/date == gregorian.date_from_days(days)

def test_days_from_date(test):
	for date, days in date_io_samples:
		test/days == gregorian.days_from_date(date)

def test_epoch_day(test):
	test/gregorian.epoch_day(1970, 1, 1) == 0
	test/gregorian.epoch_day(1970, 1, 2) == 1
	test/gregorian.epoch_day(1969, 12, 31) == -1
	test/gregorian.epoch_day(2000, 1, 1) == 10957
	test/gregorian.epoch_day(2009, 1, 1) == 14245
	test/gregorian.date_from_epoch_day(14245) == (2009, 1, 1)

def test_epoch_day_sequence(test):
	# Consecutive epoch-days are consecutive dates across leap boundaries.
	prior = gregorian.date_from_epoch_day(-800)
	for days in range(-799, 12000, 7):
		date = gregorian.date_from_epoch_day(days)
		test/gregorian.epoch_day(*date) == days
		test/date > prior
		prior = date

def test_day_of_year(test):
	test/gregorian.day_of_year(2009, 1, 1) == 1
	test/gregorian.day_of_year(2009, 3, 1) == 60
	test/gregorian.day_of_year(2008, 3, 1) == 61
	test/gregorian.day_of_year(2008, 12, 31) == 366
	test/gregorian.date_from_day_of_year(2008, 366) == (2008, 12, 31)
	test/gregorian.date_from_day_of_year(2009, 60) == (2009, 3, 1)
	test/gregorian.date_from_day_of_year(2008, 60) == (2008, 2, 29)
	test/gregorian.date_from_day_of_year(2008, 1) == (2008, 1, 1)

def test_days_in_month(test):
	test/gregorian.days_in_month(2008, 2) == 29
	test/gregorian.days_in_month(1900, 2) == 28
	test/gregorian.days_in_month(2009, 12) == 31
	test/gregorian.days_in_month(2009, 11) == 30
	test/gregorian.days_in_year(2008) == 366
	test/gregorian.days_in_year(2009) == 365

if __name__ == '__main__':
	import sys; from ...test import engine
	engine.execute(sys.modules[__name__])
