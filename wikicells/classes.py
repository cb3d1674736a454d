import os

OK = 'ok'
NO_INPUT = 'no_input'
NOT_FOUND = 'not_found'
TRANSPORT_ERROR = 'transport_error'


class Locator(object):
	"""
	A wiki subject together with the language edition it lives in.

	Parameters
	----------
	language : str
		Language code of the edition ('en', 'de', ...).
	subject : str
		Title, category, file name, query or point of the locator.
	"""
	def __init__(self,language,subject):
		self.language = language
		self.subject  = subject

	def __repr__(self):
		return self.language+':'+self.subject

	def __eq__(self,other):
		if not isinstance(other,Locator):
			return NotImplemented
		return (self.language==other.language)&(self.subject==other.subject)

	def __hash__(self):
		return hash((self.language,self.subject))


class Result(list):
	"""
	Rows returned by every spreadsheet function.

	It is a plain list of rows (or of scalars for 1-D results) that also
	carries the status of the call. An empty Result is the "no data" value,
	its status tells why there is no data.
	"""
	def __init__(self,rows=(),status=OK):
		super(Result,self).__init__(rows)
		self.status = status

	@classmethod
	def ok(cls,rows):
		'''Builds a Result from rows, empty rows mean nothing was found.'''
		rows = list(rows)
		return cls(rows,OK if len(rows)!=0 else NOT_FOUND)

	@classmethod
	def empty(cls,status=NOT_FOUND):
		return cls([],status)

	@property
	def is_ok(self):
		return self.status == OK

	def __repr__(self):
		return 'Result('+list.__repr__(self)+', status='+repr(self.status)+')'


class Config(object):
	"""
	Configuration handed to every function call.

	Parameters
	----------
	language : str (default='en')
		Language used when a locator has no 'language:' prefix.
	user_agent : str
		Value of the User-Agent header sent with every request.
	timeout : float (default=30)
		Seconds to wait for the upstream service.
	fetch : callable (optional)
		fetch(url,config) -> str. Defaults to a requests based GET.
	"""
	def __init__(self,language='en',user_agent=None,timeout=30,fetch=None):
		self.language   = language
		self.user_agent = user_agent if user_agent is not None else 'wikicells (https://pypi.org/project/wikicells/)'
		self.timeout    = timeout
		self.fetch      = fetch

	@classmethod
	def from_env(cls,prefix='WIKICELLS_',fetch=None):
		'''
		Builds a Config from environment variables.
		Reads <prefix>LANGUAGE, <prefix>USER_AGENT and <prefix>TIMEOUT.
		'''
		timeout = os.environ.get(prefix+'TIMEOUT')
		return cls(language=os.environ.get(prefix+'LANGUAGE','en'),
					user_agent=os.environ.get(prefix+'USER_AGENT'),
					timeout=float(timeout) if timeout else 30,
					fetch=fetch)

	def replace(self,**kwargs):
		'''Returns a copy of the config with the given fields changed.'''
		d = {'language':self.language,'user_agent':self.user_agent,'timeout':self.timeout,'fetch':self.fetch}
		d.update(kwargs)
		return Config(**d)

	def __repr__(self):
		return 'Config(language='+repr(self.language)+', timeout='+repr(self.timeout)+')'


DEFAULT_CONFIG = Config()
