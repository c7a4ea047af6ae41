import pytest
from tears.models import Mood, Trust, UnknownDescriptor, situation_for


def test_moods_are_ranked_one_to_six():
    assert [m.rank for m in Mood] == [1, 2, 3, 4, 5, 6]
    assert Mood.UNSETTLED.label == "Unsettled"
    assert Mood.UNSETTLED.tag == "unsettled"
    assert Mood.CLOSED.summary == "The person believes that trust no longer exists."


@pytest.mark.parametrize("raw,expected", [
    ("Calm", Mood.CALM),
    ("calm", Mood.CALM),
    (" HOPEFUL ", Mood.HOPEFUL),
    (1, Mood.ANGUISHED),
    ("3", Mood.CAUTIOUS),
])
def test_mood_parse(raw, expected):
    assert Mood.parse(raw) is expected


@pytest.mark.parametrize("raw", ["joyful", 0, 7, "10", "", True, "²", "٣x"])
def test_mood_parse_rejects_unknown(raw):
    with pytest.raises(UnknownDescriptor):
        Mood.parse(raw)


def test_trust_parse_and_tags():
    assert Trust.parse("Absent") is Trust.ABSENT
    assert Trust.PRESENT.tag == "trust-present"
    with pytest.raises(UnknownDescriptor):
        Trust.parse("sometimes")


def test_situation_for_builds_pair_tag():
    context = situation_for(Trust.ABSENT, Mood.CLOSED)
    assert context.to_list() == ["absent:closed", "closed", "trust-absent"]


def test_situation_for_with_one_side():
    assert situation_for(mood=Mood.CALM).to_list() == ["calm"]
    assert situation_for(trust=Trust.PRESENT).to_list() == ["trust-present"]
    assert len(situation_for()) == 0
