from .. import ranges
from .. import errors
from .. import standard

def test_of(test):
	r = ranges.ValueRange.of(1, 28, 31)
	test/r.minimum == 1
	test/r.largest_minimum == 1
	test/r.smallest_maximum == 28
	test/r.maximum == 31
	test/r.fixed == False
	test/ranges.ValueRange.of(1, 12).fixed == True

	test/ValueError ^ (lambda: ranges.ValueRange.of(5, 4))
	test/ValueError ^ (lambda: ranges.ValueRange.of(1, 31, 28))

def test_validate(test):
	r = ranges.ValueRange.of(1, 52, 53)
	test/r.validate(53, standard.DAY_OF_WEEK) == 53
	test/(1 in r) == True
	test/(0 in r) == False

	exc = test/errors.RangeError ^ (lambda: r.validate(54, standard.DAY_OF_WEEK))
	test/exc.value == 54
	test/exc.field == standard.DAY_OF_WEEK
	test/isinstance(exc, ValueError) == True
	test/str(exc) == "invalid value for DayOfWeek (valid values 1 - 52/53): 54"

def test_str(test):
	test/str(ranges.ValueRange.of(1, 28, 31)) == '1 - 28/31'
	test/str(ranges.ValueRange.of(0, 59)) == '0 - 59'

if __name__ == '__main__':
	import sys; from ...test import engine
	engine.execute(sys.modules[__name__])
