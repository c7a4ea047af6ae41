import pytest
from tears.models import Catalog, CatalogError, Polarity, SuggestionItem, load_catalog, load_catalog_file
from tears.suggestion_engine import default_catalog


def entry(**overrides):
    data = {"id": "a", "text": "Stay away", "polarity": "do"}
    data.update(overrides)
    return data


def test_load_applies_defaults():
    catalog = load_catalog([entry()])
    item = catalog.get("a")
    assert item.polarity is Polarity.DO
    assert item.tags == frozenset()
    assert item.priority == 100
    assert item.paragraphs() == ()


@pytest.mark.parametrize("raw", ["dont", "Don't", "DONT"])
def test_polarity_spellings(raw):
    assert load_catalog([entry(polarity=raw)]).get("a").polarity is Polarity.DONT


def test_duplicate_ids_are_rejected_with_positions():
    with pytest.raises(CatalogError) as exc:
        load_catalog([entry(), entry(id="b"), entry(text="Other")])
    assert "'a'" in str(exc.value)
    assert "0 and 2" in str(exc.value)


def test_catalog_constructor_rejects_duplicates():
    item = SuggestionItem(id="a", text="A", polarity=Polarity.DO)
    with pytest.raises(CatalogError):
        Catalog([item, item])


@pytest.mark.parametrize("bad,message", [
    (entry(id=""), "'id'"),
    (entry(id=3), "'id'"),
    (entry(text="  "), "'text'"),
    (entry(polarity="maybe"), "polarity"),
    (entry(polarity=None), "polarity"),
    (entry(tags="anger"), "'tags'"),
    (entry(tags=["ok", ""]), "'tags'"),
    (entry(priority="1"), "'priority'"),
    (entry(priority=True), "'priority'"),
    (entry(detail=["x"]), "'detail'"),
    (entry(colour="blue"), "colour"),
    ("not a mapping", "expected an object"),
])
def test_malformed_entries_fail_fast(bad, message):
    with pytest.raises(CatalogError) as exc:
        load_catalog([entry(id="ok"), bad])
    assert message in str(exc.value)
    assert "entry 1" in str(exc.value)


def test_catalog_is_read_only_lookup():
    catalog = load_catalog([entry(tags=["x", "y"]), entry(id="b", tags=["y", "z"])], version="v1")
    assert len(catalog) == 2
    assert "a" in catalog and "missing" not in catalog
    assert catalog.get("missing") is None
    assert catalog.vocabulary() == ["x", "y", "z"]
    assert catalog.version == "v1"
    with pytest.raises(AttributeError):
        catalog.get("a").text = "changed"


def test_paragraphs_split_on_blank_lines():
    item = load_catalog([entry(detail="First.\n\nSecond line\n\n\n")]).get("a")
    assert item.paragraphs() == ("First.", "Second line")


def test_load_file_list_form(catalog_file):
    path = catalog_file([entry(), entry(id="b", polarity="dont")])
    catalog = load_catalog_file(path)
    assert len(catalog) == 2
    assert catalog.version == path


def test_load_file_object_form(catalog_file):
    path = catalog_file({"version": "7", "suggestions": [entry()]})
    assert load_catalog_file(path).version == "7"


def test_load_file_errors(tmp_path, catalog_file):
    with pytest.raises(CatalogError, match="Cannot read"):
        load_catalog_file(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(CatalogError, match="not valid JSON"):
        load_catalog_file(broken)

    with pytest.raises(CatalogError, match="'suggestions' list"):
        load_catalog_file(catalog_file({"items": []}))

    not_utf8 = tmp_path / "latin1.json"
    not_utf8.write_bytes(b'[{"id": "\xff", "text": "X", "polarity": "do"}]')
    with pytest.raises(CatalogError, match="not valid UTF-8"):
        load_catalog_file(not_utf8)

    too_deep = tmp_path / "deep.json"
    too_deep.write_text("[" * 100000 + "]" * 100000, encoding="utf-8")
    with pytest.raises(CatalogError, match="nested too deeply"):
        load_catalog_file(too_deep)


def test_default_catalog_is_valid():
    catalog = default_catalog()
    assert len(catalog) > 12
    assert "absent:closed" in catalog.vocabulary()
    assert any(i.universal for i in catalog)


def test_ids_are_stored_stripped():
    with pytest.raises(CatalogError, match="Duplicate suggestion id 'a'"):
        load_catalog([entry(id=" a"), entry(id="a ")])
    assert load_catalog([entry(id="  a  ")]).get("a") is not None
