"""Format A: national-institute program layout.

Real extracted text per race page (labels and values on separate lines):

    Carrera Programada:
    Reunión:  Día:  Distancia:  Carrera Nro:  Llamado:  Carrera Anual Nro.:  Hora:  Fecha:
    1400 mts.  1  4  76  01:25 p. m.  22/02/2026
    9  DOMINGO
    HANDICAP LIBRE...  Condición:
    Premio Bs.:  Bono $:
    50% al 1°  22% al 2°  12% al 3°  8% al 4°  6% al 5°  2% Prima Criador
    3600  37180
    N°  Ejemplar  Medic.  Kilos  Jinete  Implementos  Entrenador  P.P.
    1  QUALITY PRINCESS  BUT-LAX  53  RODRIGUEZ JEAN C  L.BZ.V.GR.LA.  RODRIGUEZ JOSE G  8
    JUEGOS: | GANADOR | PLACE | EXACTA | TRIFECTA | SUPERFECTA |
"""

import re

from programa.constants import DAY_OF_WEEK_PATTERN
from programa.models import GameType, PrizePool, SourceFormat
from programa.parsers.base import FormatStrategy
from programa.parsers.entry_table import ColumnEntryExtractor
from programa.parsers.meeting_header import MeetingHeaderExtractor
from programa.parsers.race_header import RaceHeaderExtractor, map_game_token
from programa.utils.text import parse_amount

_TIME = r"\d{1,2}:\d{2}\s*[ap]\.?\s*m\.?"

PERCENT_TOKEN_PATTERN = re.compile(
    r"(\d{1,3})\s*%\s*al\s*(\d)\s*[°ºo]?", re.IGNORECASE
)
BREEDER_BONUS_PATTERN = re.compile(r"(\d{1,3})\s*%\s*Prima\s+Criador", re.IGNORECASE)
PURSE_LABEL_PATTERN = re.compile(
    r"Premio\s+Bs\.?:?[ \t]*\n?[ \t]*(\d[\d.,]*)", re.IGNORECASE
)
BONUS_LABEL_PATTERN = re.compile(r"Bono\s+\$:?[ \t]*\n?[ \t]*(\d[\d.,]*)", re.IGNORECASE)
GAMES_LINE_PATTERN = re.compile(r"JUEGOS\s*[:|]\s*(.+)", re.IGNORECASE)


class FormatAMeetingExtractor(MeetingHeaderExtractor):
    """Meeting header for format A, read from the whole document."""

    MEETING_DAY_PATTERN = re.compile(
        rf"^[ \t]*(\d{{1,3}})[ \t]+({DAY_OF_WEEK_PATTERN})[ \t]*$",
        re.IGNORECASE | re.MULTILINE,
    )
    MEETING_NUMBER_PATTERN = re.compile(
        r"Reuni[oó]n:[ \t]*\n?[ \t]*(\d{1,3})\b", re.IGNORECASE
    )
    DAY_PATTERN = re.compile(
        rf"D[ií]a:[ \t]*\n?[ \t]*({DAY_OF_WEEK_PATTERN})", re.IGNORECASE
    )
    TRACK_PATTERN = re.compile(
        r"Hip[oó]dromo[ \t]+(.+?)[ \t]*(?:Direcci[oó]n|$)",
        re.IGNORECASE | re.MULTILINE,
    )


class FormatARaceHeaderExtractor(RaceHeaderExtractor):
    """Race header for format A."""

    # distance, race number, call number, annual race number, time
    COMBINED_VALUES_PATTERN = re.compile(
        rf"(\d{{3,4}})[ \t]*mts\.[ \t]*(\d{{1,2}})[ \t]+(\d{{1,2}})[ \t]+"
        rf"(\d{{1,4}})[ \t]+({_TIME})",
        re.IGNORECASE,
    )
    FIELD_PATTERNS = {
        "distance": re.compile(r"(\d{3,4})\s*mts\.", re.IGNORECASE),
        "race_number": re.compile(
            r"Carrera\s+Nro\.?:[ \t]*\n?[ \t]*(\d{1,2})\b", re.IGNORECASE
        ),
        "call_number": re.compile(
            r"Llamado:[ \t]*\n?[ \t]*(\d{1,2})\b", re.IGNORECASE
        ),
        "annual_race_number": re.compile(
            r"Carrera\s+Anual\s+Nro\.?:[ \t]*\n?[ \t]*(\d{1,4})\b", re.IGNORECASE
        ),
        "scheduled_time": re.compile(rf"({_TIME})", re.IGNORECASE),
    }

    def _read_prize_percentages(self, lines):
        placings: list[tuple[int, int]] = []
        breeder_bonus = None
        last_index = None
        for index, line in enumerate(lines):
            tokens = PERCENT_TOKEN_PATTERN.findall(line)
            breeder = BREEDER_BONUS_PATTERN.search(line)
            if not tokens and not breeder:
                continue
            placings.extend((int(place), int(percent)) for percent, place in tokens)
            if breeder and breeder_bonus is None:
                breeder_bonus = int(breeder.group(1))
            last_index = index
        return placings, breeder_bonus, last_index

    def _read_purse(self, block, lines, last_pct_index):
        if last_pct_index is not None:
            following = [line for line in lines[last_pct_index + 1:] if line]
            if following:
                amounts = self.parse_two_number_line(following[0])
                if amounts is not None:
                    return PrizePool(primary=amounts[0], secondary=amounts[1])

        primary = secondary = None
        match = PURSE_LABEL_PATTERN.search(block)
        if match:
            primary = parse_amount(match.group(1))
        match = BONUS_LABEL_PATTERN.search(block)
        if match:
            secondary = parse_amount(match.group(1))
        return PrizePool(primary=primary or 0.0, secondary=secondary or 0.0)

    def _read_games(self, block):
        match = GAMES_LINE_PATTERN.search(block)
        if not match:
            return frozenset()
        games: set[GameType] = set()
        for token in re.split(r"[|,]", match.group(1)):
            game = map_game_token(token)
            if game is not None:
                games.add(game)
        return frozenset(games)


class FormatAStrategy(FormatStrategy):
    """Column-oriented national-institute layout."""

    FORMAT = SourceFormat.FORMAT_A
    MEETING_EXTRACTOR_CLASS = FormatAMeetingExtractor
    RACE_HEADER_EXTRACTOR_CLASS = FormatARaceHeaderExtractor
    ENTRY_TABLE_EXTRACTOR_CLASS = ColumnEntryExtractor
