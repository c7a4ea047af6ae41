from typing import Optional, Tuple

from .catalog_data import CATALOG_VERSION, SUGGESTIONS
from .models.catalog import Catalog, load_catalog
from .models.suggestion import Polarity, SituationContext, SuggestionItem, SuggestionResult


def matches(item: SuggestionItem, context: SituationContext) -> bool:
    """Universal items always match; tagged items need one shared tag."""
    return item.universal or not item.tags.isdisjoint(context.tags)


def explain(item: SuggestionItem, context: SituationContext) -> Optional[Tuple[str, ...]]:
    """The context tags that selected `item`, or None if it is not selected."""
    if not matches(item, context):
        return None
    return tuple(sorted(item.tags & context.tags))


def _rank_key(item: SuggestionItem):
    return item.priority, item.id


def select(catalog: Catalog, context: SituationContext) -> SuggestionResult:
    """Pick and order the do / don't suggestions for a situation."""
    chosen = {}
    for item in catalog:
        if item.id not in chosen and matches(item, context):
            chosen[item.id] = item

    do = sorted((i for i in chosen.values() if i.polarity is Polarity.DO), key=_rank_key)
    dont = sorted((i for i in chosen.values() if i.polarity is Polarity.DONT), key=_rank_key)
    return SuggestionResult(do=tuple(do), dont=tuple(dont))


def default_catalog() -> Catalog:
    return load_catalog(SUGGESTIONS, version=CATALOG_VERSION)
