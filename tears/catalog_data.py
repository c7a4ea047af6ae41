"""
Built-in suggestions.

Tags:
  trust-absent / trust-present   whether the person trusts you
  anguished ... hopeful          the person's mood
  <trust>:<mood>                 one exact situation, e.g. "absent:closed"
"""

CATALOG_VERSION = "2024.1"

_ASK_IF_THEY_WANT = (
    "If you are sure the person wants something (that isn't harmful), ask "
    "\"do you want ____\"?\n"
    "\n"
    "Make sure the conversation is paced such that they are able to handle it.\n"
    "\n"
    "Don't ask why, don't require an answer -- provide a way \"out\" (e.g. \"you "
    "don't have to answer\"). Asking such questions is perceived as \"justify "
    "yourself\", and may cause them to hate you (which they may not vocalize)."
)

SUGGESTIONS = [
    # ── trust absent ────────────────────────────────────────────
    {
        "id": "absent-anguished-stay-away",
        "text": "Stay away",
        "polarity": "do",
        "tags": ["absent:anguished"],
        "priority": 10,
        "detail": "As a \"stranger\", your presence pressurizes the person, and may aggravate "
                  "them, even when your motive is pure.\n"
                  "\n"
                  "It may be best to find someone whom they already trust.",
    },
    {
        "id": "absent-closed-stay-away",
        "text": "Stay away",
        "polarity": "do",
        "tags": ["absent:closed"],
        "priority": 10,
        "detail": "Leave a gift if you must (e.g. chocolate), but your presence pressurizes "
                  "the person.\n"
                  "\n"
                  "If they accept the gift in your absence, then that may be the beginning "
                  "of trust.",
    },
    {
        "id": "absent-cautious-ask-occasionally",
        "text": "Occasionally ask if they want something",
        "polarity": "do",
        "tags": ["absent:cautious"],
        "priority": 10,
        "detail": _ASK_IF_THEY_WANT,
    },
    {
        "id": "absent-unsettled-offer-to-listen",
        "text": "Ask, \"would you like to say anything?\", then wait.",
        "polarity": "do",
        "tags": ["absent:unsettled"],
        "priority": 10,
        "detail": "Just listen, don't problem solve -- you haven't established trust with "
                  "the person to do so.\n"
                  "\n"
                  "At this stage, you may have some rational conversation, but nothing that "
                  "would introduce too much emotional pressure.\n"
                  "\n"
                  "Be ready to leave them alone if that is what they want (they may not say it).",
    },
    {
        "id": "absent-calm-be-calm",
        "text": "Be calm / hopeful.",
        "polarity": "do",
        "tags": ["absent:calm"],
        "priority": 10,
        "detail": "Find some gentle fun -- the person is ready to explore.\n"
                  "\n"
                  "Be ready to leave them alone if that is what they want (they may not say it).",
    },
    {
        "id": "absent-hopeful-enjoy",
        "text": "Enjoy yourselves.",
        "polarity": "do",
        "tags": ["absent:hopeful"],
        "priority": 10,
        "detail": "Make new happy memories -- the person needs them.\n"
                  "\n"
                  "This is your chance to help them believe life can be good.",
    },
    # ── trust present ───────────────────────────────────────────
    {
        "id": "present-anguished-be-present",
        "text": "Be fully present with them",
        "polarity": "do",
        "tags": ["present:anguished"],
        "priority": 10,
        "detail": "Simply sit quietly with them and allow them to grieve.\n"
                  "\n"
                  "Any more than that may overwhelm the person.",
    },
    {
        "id": "present-closed-small-distance",
        "text": "Remain at a small distance",
        "polarity": "do",
        "tags": ["present:closed"],
        "priority": 10,
        "detail": "Leave a gift if you have one, to show that they are still someone you care "
                  "for; but allow a little distance -- your presence may feel like pressure to "
                  "the person in the moment.\n"
                  "\n"
                  "Distance allows them to settle, proximity allows them to feel cared for.",
    },
    {
        "id": "present-cautious-ask-occasionally",
        "text": "Occasionally ask if they want something",
        "polarity": "do",
        "tags": ["present:cautious"],
        "priority": 10,
        "detail": _ASK_IF_THEY_WANT,
    },
    {
        "id": "present-unsettled-offer-to-listen",
        "text": "Ask, \"would you like to say anything?\", then wait.",
        "polarity": "do",
        "tags": ["present:unsettled"],
        "priority": 10,
        "detail": "Listen, and if it feels right you may ask, \"Would you like some help with "
                  "it?\" (if you are able to help).\n"
                  "\n"
                  "At this stage, you may have some rational conversation, but nothing that "
                  "would introduce too much emotional pressure.",
    },
    {
        "id": "present-calm-be-calm",
        "text": "Be calm / hopeful.",
        "polarity": "do",
        "tags": ["present:calm"],
        "priority": 10,
        "detail": "Find some gentle fun -- the person is ready to explore.",
    },
    {
        "id": "present-hopeful-enjoy",
        "text": "Enjoy yourselves.",
        "polarity": "do",
        "tags": ["present:hopeful"],
        "priority": 10,
        "detail": "Make new happy memories -- the person needs them.\n"
                  "\n"
                  "Help them remember life can be good.",
    },
    # ── don't ───────────────────────────────────────────────────
    {
        "id": "dont-pressure-with-presence",
        "text": "Don't hover around them",
        "polarity": "dont",
        "tags": ["absent:anguished", "absent:closed", "present:closed"],
        "priority": 20,
        "detail": "Your presence pressurizes the person, and does not allow them to settle down.",
    },
    {
        "id": "dont-promise-better",
        "text": "Don't promise that things will get better",
        "polarity": "dont",
        "tags": ["closed"],
        "priority": 20,
        "detail": "No promise of \"better\" gets through. Don't make things worse.",
    },
    {
        "id": "dont-overwhelm",
        "text": "Don't add anything more than your quiet company",
        "polarity": "dont",
        "tags": ["anguished"],
        "priority": 20,
        "detail": "Every stimulus is overwhelming; any more than that may overwhelm the person.",
    },
    {
        "id": "dont-ask-why",
        "text": "Don't ask why, and don't require an answer",
        "polarity": "dont",
        "tags": ["cautious"],
        "priority": 20,
        "detail": "Such questions are perceived as \"justify yourself\", and may cause them to "
                  "hate you (which they may not vocalize).",
    },
    {
        "id": "dont-problem-solve",
        "text": "Don't problem solve",
        "polarity": "dont",
        "tags": ["absent:unsettled"],
        "priority": 20,
        "detail": "You haven't established trust with the person to do so.",
    },
    {
        "id": "dont-add-emotional-pressure",
        "text": "Don't bring up emotionally heavy topics",
        "polarity": "dont",
        "tags": ["unsettled"],
        "priority": 30,
        "detail": "Some rational conversation is fine, but nothing that would introduce too "
                  "much emotional pressure.",
    },
    {
        "id": "dont-tell-them-what-to-do",
        "text": "Don't tell them what to do",
        "polarity": "dont",
        "tags": ["trust-absent"],
        "priority": 40,
        "detail": "The person will hate doing anything an untrusted person says.",
    },
    # ── everyone ────────────────────────────────────────────────
    {
        "id": "let-them-be-alone",
        "text": "Be ready to leave them alone if that is what they want",
        "polarity": "do",
        "priority": 50,
        "detail": "They may not say it.",
    },
    {
        "id": "dont-take-it-personally",
        "text": "Don't take their silence personally",
        "polarity": "dont",
        "priority": 50,
    },
]
