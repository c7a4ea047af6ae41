from enum import Enum

from .suggestion import SituationContext


class UnknownDescriptor(ValueError):
    pass


class Mood(Enum):
    """
    The mood the person is in.

    `rank` is the mood's position on a scale of 1 to 10. The variants stop
    at 6: the app is about bringing someone out of sadness, not about joy.
    """
    ANGUISHED = 1
    CLOSED = 2
    CAUTIOUS = 3
    UNSETTLED = 4
    CALM = 5
    HOPEFUL = 6

    @classmethod
    def parse(cls, value) -> "Mood":
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise UnknownDescriptor(f"Mood rank must be 1-{len(cls)}, got {value}") from None
        text = str(value).strip()
        if text.isdecimal():
            return cls.parse(int(text))
        try:
            return cls[text.upper()]
        except KeyError:
            raise UnknownDescriptor(f"Unknown mood: {value!r}") from None

    @property
    def rank(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def tag(self) -> str:
        return self.name.lower()

    @property
    def symptoms(self) -> str:
        return MOOD_TEXT[self][0]

    @property
    def summary(self) -> str:
        return MOOD_TEXT[self][1]

    @property
    def description(self) -> str:
        return MOOD_TEXT[self][2]

    def to_dict(self) -> dict:
        return {
            "rank": self.rank,
            "name": self.label,
            "tag": self.tag,
            "symptoms": self.symptoms,
            "summary": self.summary,
            "description": self.description,
        }


class Trust(Enum):
    """
    Whether the person trusts you.

    A good indicator is whether they have recently started a conversation
    with you.
    """
    ABSENT = "absent"
    PRESENT = "present"

    @classmethod
    def parse(cls, value) -> "Trust":
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownDescriptor(f"Unknown trust level: {value!r}") from None

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def tag(self) -> str:
        return f"trust-{self.value}"

    @property
    def description(self) -> str:
        return TRUST_TEXT[self]

    def to_dict(self) -> dict:
        return {"name": self.label, "tag": self.tag, "description": self.description}


# (symptoms, summary, description)
MOOD_TEXT = {
    Mood.ANGUISHED: (
        "Unresponsiveness to any interaction. Outbursts, self-harm.",
        "The person believes that to live is to suffer.",
        "Being awake is already experienced as emotional pain, so every stimulus is overwhelming.",
    ),
    Mood.CLOSED: (
        "Silence, eyes stare blankly. Little movement.",
        "The person believes that trust no longer exists.",
        "No promise of \"better\" gets through, usually because past attempts at improvement "
        "have ended in negative experiences. i.e. Don't make things worse",
    ),
    Mood.CAUTIOUS: (
        "One word answers, eyes assessing every detail.",
        "The person only trusts people who know how to empathize.",
        "The emotions are in a state that the person will hate doing anything an untrusted person says.",
    ),
    Mood.UNSETTLED: (
        "Asks for justification / to see evidence.",
        "The person is suspicious of people.",
        "Trust has been broken, but the person is willing to try and see if it can be mended.",
    ),
    Mood.CALM: (
        "No sad symptoms, smile takes conscious effort.",
        "The person believes life is okay.",
        "There is little / no bias towards things being positive or negative.",
    ),
    Mood.HOPEFUL: (
        "Smiles subconciously.",
        "The person believes there is good in life.",
        "The person believes goodness will happen when one works towards it.",
    ),
}

TRUST_TEXT = {
    Trust.ABSENT: "The person has not initiated a conversation with me recently.",
    Trust.PRESENT: "The person has initiated a conversation with me recently, with no obligation.",
}


def pair_tag(trust: Trust, mood: Mood) -> str:
    return f"{trust.value}:{mood.tag}"


def situation_for(trust=None, mood=None) -> SituationContext:
    """Tags for a trust/mood selection. Either side may be left out."""
    tags = set()
    if trust is not None:
        tags.add(trust.tag)
    if mood is not None:
        tags.add(mood.tag)
    if trust is not None and mood is not None:
        tags.add(pair_tag(trust, mood))
    return SituationContext.of(tags)
