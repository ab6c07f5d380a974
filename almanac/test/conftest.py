"""
# Contention primitives for the almanac tests: &Test, &Contention, and &Absurdity.

# Test functions receive a &Test instance through the `test` fixture and state
# their expectations as contentions:

#!python
	def test_feature(test):
		test/feature() == expectation
		test//feature() == unexpected

		with test/ValueError as exc:
			raise ValueError("trapped")
		test.isinstance(exc(), ValueError)
"""
import builtins
import functools
import operator

import pytest

class Absurdity(AssertionError):
	"""
	# Exception raised by &Contention instances designating a failed assertion.
	"""

	# for re-constituting the expression
	operator_names_mapping = {
		'__eq__': '==',
		'__ne__': '!=',
		'__le__': '<=',
		'__ge__': '>=',
		'__lt__': '<',
		'__gt__': '>',
		'__mod__': 'is',
		'__lshift__': 'contains',
	}

	def __init__(self, operator, former, latter, inverse=None):
		self.operator = operator
		self.former = former
		self.latter = latter
		self.inverse = inverse
		super().__init__(operator, former, latter, inverse)

	def __str__(self):
		opchars = self.operator_names_mapping.get(self.operator, self.operator)
		prefix = ('not ' if self.inverse else '')
		return prefix + ' '.join((repr(self.former), opchars, repr(self.latter)))

def _contend(opname, op):
	def check(self, ob):
		x, y = self.object, ob
		if self.inverse:
			if op(x, y): raise self.test.Absurdity(opname, x, y, inverse=True)
		else:
			if not op(x, y): raise self.test.Absurdity(opname, x, y, inverse=False)
	check.__name__ = opname
	return check

class Contention(object):
	"""
	# Contentions are objects used by &Test objects to provide assertions.
	# Usually, contention instances are made by the true division operator of
	# &Test instances passed into the test functions.

	# True division, "/", is used as it has high operator precedence that allows assertion
	# expressions to be constructed using minimal syntax that lends to readable failure
	# conditions.
	"""
	__slots__ = ('test', 'object', 'storage', 'inverse')
	__hash__ = None

	def __init__(self, test, object, inverse=False):
		self.test = test
		self.object = object
		self.inverse = inverse

	__eq__ = _contend('__eq__', operator.eq)
	__ne__ = _contend('__ne__', operator.ne)
	__lt__ = _contend('__lt__', operator.lt)
	__le__ = _contend('__le__', operator.le)
	__gt__ = _contend('__gt__', operator.gt)
	__ge__ = _contend('__ge__', operator.ge)
	__mod__ = _contend('__mod__', operator.is_)

	# Containment: test/container << item
	__lshift__ = _contend('__lshift__', lambda x, y: y in x)

	##
	# Special cases for context manager exception traps.

	def __enter__(self, partial = functools.partial):
		return partial(getattr, self, 'storage', None)

	def __exit__(self, typ, val, tb):
		x = self.object
		y = self.storage = val
		if isinstance(y, pytest.skip.Exception):
			return

		if not isinstance(y, x): raise self.test.Absurdity("isinstance", x, y)
		return True # !!! Inhibiting raise.

	def __xor__(self, subject):
		"""
		# Contend that the &subject raises the given exception when it is called:

		#!python
			test/Exception ^ (lambda: subject())
		"""
		with self as exc:
			subject()
		return exc()
	__rxor__ = __xor__

class Test(object):
	"""
	# Provides interfaces for constructing and checking &Contention's using
	# a simple syntax.

	# [ Properties ]
	# /identifier/
		# The name of the test function.
	"""
	__slots__ = ('identifier',)

	Absurdity = Absurdity
	Contention = Contention

	def __init__(self, identifier):
		self.identifier = identifier

	def __truediv__(self, object):
		return self.Contention(self, object)

	def __rtruediv__(self, object):
		return self.Contention(self, object)

	def __floordiv__(self, object):
		return self.Contention(self, object, True)

	def __rfloordiv__(self, object):
		return self.Contention(self, object, True)

	def isinstance(self, *args):
		if not builtins.isinstance(*args):
			raise self.Absurdity("isinstance", *args, inverse=True)

	def issubclass(self, *args):
		if not builtins.issubclass(*args):
			raise self.Absurdity("issubclass", *args, inverse=True)

	def skip(self, condition):
		"""
		# Skip the test given that the provided &condition is &True.
		"""
		if condition:
			pytest.skip(str(condition))

	def fail(self, cause):
		pytest.fail(str(cause))

@pytest.fixture
def test(request):
	return Test(request.node.name)
