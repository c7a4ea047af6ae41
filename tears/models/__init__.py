from .catalog import Catalog, CatalogError, load_catalog, load_catalog_file
from .descriptors import Mood, Trust, UnknownDescriptor, pair_tag, situation_for
from .suggestion import Polarity, SituationContext, SuggestionItem, SuggestionResult
