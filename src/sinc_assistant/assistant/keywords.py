"""Static keyword tables for intent classification and entity extraction.

Every table is an ordered tuple; lookups walk it front to back and the first
hit wins.  Matching is plain substring containment on lowercased input, so
accented forms must be spelled out exactly as users type them.
"""

from __future__ import annotations

from typing import Tuple

GREETING_KEYWORDS: Tuple[str, ...] = (
    "ahoj",
    "čau",
    "dobrý den",
    "dobré ráno",
    "dobrý večer",
    "zdravím",
    "nazdar",
    "servus",
    "hello",
    "hi",
    "hey",
)

CALENDAR_ANALYSIS_KEYWORDS: Tuple[str, ...] = (
    "volno",
    "kdy mám volno",
    "prázdný kalendář",
    "volný termín",
    "volný den",
    "volné dny",
    "volný čas",
    "kdy můžu",
    "týden volno",
    "free time",
    "am i free",
)

MEETING_SUGGESTION_KEYWORDS: Tuple[str, ...] = (
    "pozvat",
    "kamarád",
    "kafe",
    "schůzka",
    "kdy se můžeme sejít",
    "sejít",
    "setkat",
    "navrhni termín",
)

EVENT_CREATION_KEYWORDS: Tuple[str, ...] = (
    "vytvoř",
    "přidej",
    "naplánuj",
    "událost",
    "schůzka",
    "meeting",
    "doktor",
    "lékař",
    "večeře",
    "oběd",
    "sport",
    "návštěva",
    "zítra",
    "pozítří",
    "dnes",
    "příští",
)

# (keyword, day offset); "příští měsíc" is resolved as a calendar month, not a day count.
NEXT_MONTH_KEYWORD = "příští měsíc"
RELATIVE_DATE_KEYWORDS: Tuple[Tuple[str, int], ...] = (
    ("zítra", 1),
    ("pozítří", 2),
    ("dnes", 0),
    ("příští týden", 7),
)

# Compound words come before "poledne" so "odpoledne" is not read as noon.
TIME_OF_DAY_KEYWORDS: Tuple[Tuple[str, str], ...] = (
    ("dopoledne", "10:00"),
    ("odpoledne", "14:00"),
    ("poledne", "12:00"),
    ("ráno", "09:00"),
    ("večer", "19:00"),
    ("noc", "22:00"),
)

TITLE_KEYWORDS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("schůzka", "meeting"), "Schůzka"),
    (("večeře", "dinner"), "Večeře"),
    (("oběd", "lunch"), "Oběd"),
    (("kafe", "coffee"), "Kafe"),
    (("sport", "cvičení"), "Sport"),
    (("doktor", "lékař"), "Doktor"),
    (("návštěva", "visit"), "Návštěva"),
)
DEFAULT_TITLE = "Událost"

CONFIRMATION_KEYWORDS: Tuple[str, ...] = ("ano", "yes", "ok", "dobře")
GROUP_KEYWORDS: Tuple[str, ...] = ("skupin", "group")

# Indexed by day of week with Sunday at 0.
WEEKDAY_LABELS: Tuple[str, ...] = ("Ne", "Po", "Út", "St", "Čt", "Pá", "So")

DEFAULT_CANDIDATE_TIMES: Tuple[str, ...] = ("09:00", "10:00", "11:00", "14:00", "15:00", "16:00", "17:00")
