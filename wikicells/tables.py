from pandas import DataFrame
from .query import _isiter

# Column names of the tables returned by every function.
HEADERS = {'WIKISYNONYMS':['title'],
			'WIKIARTICLESAROUND':['title','lat','lon','dist'],
			'WIKITRANSLATE':['lang','title'],
			'WIKIEXPAND':['lang','title'],
			'WIKICOMMONSLINK':['url'],
			'WIKICATEGORYMEMBERS':['title'],
			'WIKISUBCATEGORIES':['title'],
			'WIKICATEGORIES':['title'],
			'WIKIINBOUNDLINKS':['title'],
			'WIKIOUTBOUNDLINKS':['title'],
			'WIKIMUTUALLINKS':['title'],
			'WIKIGEOCOORDINATES':['lat','lon'],
			'WIKILINKSEARCH':['title','url'],
			'WIKIDATAFACTS':['property','value'],
			'WIKIDATAQID':['qid'],
			'WIKIDATALABELS':['lang','label'],
			'WIKIDATADESCRIPTIONS':['lang','description'],
			'WIKIDATALOOKUP':['qid'],
			'WIKIPAGEVIEWS':['timestamp','views'],
			'WIKIPAGEVIEWSPERARTICLE':['timestamp','views'],
			'WIKIPAGEVIEWSAGGREGATE':['timestamp','views'],
			'WIKIPAGEVIEWSTOP':['title','views'],
			'WIKIUNIQUEDEVICES':['timestamp','devices'],
			'WIKIPAGEEDITS':['timestamp','delta'],
			'WIKISEARCH':['title','suggestion'],
			'GOOGLESUGGEST':['suggestion']}

def _columns(names,width):
	'''Cuts or extends names to width, extra columns are numbered.'''
	names = list(names[:width])
	for i in range(len(names),width):
		names.append(str(i))
	return names

def to_frame(result,name=None,columns=None):
	"""
	Converts the result of a function into a pandas DataFrame.

	Parameters
	----------
	result : Result or list
		Rows (or values, for 1-D results) returned by a function.
	name : str (optional)
		Spreadsheet name of the function ('WIKIPAGEVIEWS'), used to name the columns.
	columns : list (optional)
		Column names, take precedence over name.

	Returns
	-------
	df : pandas.DataFrame
		One row per row of the result. Ragged rows (WIKIEXPAND) are padded with None.
	"""
	rows = [list(row) if _isiter(row) else [row] for row in result]
	width = max([len(row) for row in rows]) if len(rows)!=0 else 0
	if columns is None:
		columns = HEADERS.get(name,[]) if name is not None else []
	if name == 'WIKIQUARRY':
		if len(rows) == 0:
			return DataFrame([])
		return DataFrame(rows[1:],columns=rows[0])
	rows = [row+[None]*(width-len(row)) for row in rows]
	return DataFrame(rows,columns=_columns(columns,width) if width else None)
