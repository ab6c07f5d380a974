"""
# Exception hierarchy shared by the almanac modules.

# All errors raised by the package descend from &Error. Parsing failures are
# &ParseError instances; the format module refines them into &StructureError,
# for text that could not be divided into fields, and &IntegrityError, for
# fields whose values are out of range.
"""

class Error(Exception):
	"""
	# Base class for all almanac errors.
	"""

class ParseError(Error, ValueError):
	"""
	# The source text could not be interpreted.

	# [ Properties ]
	# /source/
		# The object that was being parsed.
	# /format/
		# The identifier of the format or component order in use.
	# /token/
		# The token that could not be interpreted, if it was identified.
	"""

	def __init__(self, source, format=None, token=None):
		self.source = source
		self.format = format
		self.token = token
		super().__init__(source, format, token)

	def __str__(self):
		s = "could not parse %r" %(self.source,)
		if self.format is not None:
			s += " as " + str(self.format)
		if self.token is not None:
			s += "; invalid token %r" %(self.token,)
		return s

class StructureError(ParseError):
	"""
	# The tokens of the source could not be assigned to fields.
	"""

class IntegrityError(ParseError):
	"""
	# The fields were structured, but a value is out of range.
	"""

class FieldError(Error, ValueError):
	"""
	# A validating constructor was given an invalid component.
	"""

	def __init__(self, field, value, reason=None):
		self.field = field
		self.value = value
		self.reason = reason
		super().__init__(field, value, reason)

	def __str__(self):
		s = "invalid %s: %r" %(self.field, self.value)
		if self.reason:
			s += " (" + self.reason + ")"
		return s

class UnknownZoneError(Error, LookupError):
	"""
	# The zone identifier does not exist in the zone database.
	"""

	def __init__(self, identifier, reason=None):
		self.identifier = identifier
		self.reason = reason
		super().__init__(identifier, reason)

	def __str__(self):
		s = "unknown zone %r" %(self.identifier,)
		if self.reason:
			s += ": " + self.reason
		return s

class AmbiguousDurationError(Error, ArithmeticError):
	"""
	# A ratio or conversion involving calendar units was requested
	# without an anchoring point in time.
	"""
