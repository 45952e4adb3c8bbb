import pytest
from isochron.test import core

@pytest.fixture
def test(request):
	"""
	# Provide the &core.Test instance taken by the test subjects.
	"""
	t = core.Test(request.node.name, request.function)
	with t.exits:
		yield t
