"""
Built-in airport reference data and lookup helpers.

Security priors are (mean, std) minutes per screening lane. Airports with an
airside train carry its average headway.
"""
import logging
from typing import List, Optional

from airport_timing.monte_carlo.models import Airport, SecurityProfile, SecurityWait

logger = logging.getLogger(__name__)


class AirportNotFoundError(LookupError):
    pass


def _profile(standard, expedited, biometric) -> SecurityProfile:
    return SecurityProfile(
        standard=SecurityWait(*standard),
        expedited=SecurityWait(*expedited),
        biometric=SecurityWait(*biometric),
    )


AIRPORTS: tuple[Airport, ...] = (
    Airport("SFO", "San Francisco International", "San Francisco", "large",
            _profile((38, 14), (12, 5), (8, 3))),
    Airport("ATL", "Hartsfield-Jackson Atlanta International", "Atlanta", "large",
            _profile((42, 18), (14, 6), (9, 4)), has_terminal_train=True, train_headway_min=2.0),
    Airport("DFW", "Dallas/Fort Worth International", "Dallas", "large",
            _profile((35, 15), (12, 5), (8, 3)), has_terminal_train=True, train_headway_min=2.5),
    Airport("DEN", "Denver International", "Denver", "large",
            _profile((40, 17), (13, 6), (9, 4)), has_terminal_train=True, train_headway_min=2.0),
    Airport("ORD", "O'Hare International", "Chicago", "large",
            _profile((36, 15), (12, 5), (8, 3))),
    Airport("LAX", "Los Angeles International", "Los Angeles", "large",
            _profile((40, 16), (13, 5), (9, 3))),
    Airport("JFK", "John F. Kennedy International", "New York", "large",
            _profile((45, 20), (15, 6), (10, 4))),
    Airport("SEA", "Seattle-Tacoma International", "Seattle", "large",
            _profile((34, 14), (11, 5), (8, 3)), has_terminal_train=True, train_headway_min=2.0),
    Airport("IAH", "George Bush Intercontinental", "Houston", "large",
            _profile((30, 12), (11, 4), (7, 3)), has_terminal_train=True, train_headway_min=3.0),
    Airport("BOS", "Logan International", "Boston", "large",
            _profile((30, 12), (10, 4), (7, 3))),
    Airport("OAK", "Oakland International", "Oakland", "medium",
            _profile((22, 9), (8, 3), (6, 2))),
    Airport("AUS", "Austin-Bergstrom International", "Austin", "medium",
            _profile((28, 11), (10, 4), (7, 3))),
    Airport("BUR", "Hollywood Burbank", "Burbank", "small",
            _profile((15, 6), (6, 2), (5, 2))),
)


def get_all_airports() -> List[Airport]:
    return list(AIRPORTS)


def find_airport_by_code(code: str) -> Optional[Airport]:
    """Case-insensitive lookup; None when the code is unknown."""
    needle = code.strip().upper()
    for airport in AIRPORTS:
        if airport.code == needle:
            return airport
    return None


def get_airport(code: str) -> Airport:
    airport = find_airport_by_code(code)
    if airport is None:
        raise AirportNotFoundError(f"Airport {code} not found")
    return airport


def _match_score(airport: Airport, term: str) -> int:
    code = airport.code.lower()
    name = airport.name.lower()
    city = airport.city.lower()
    score = 0

    if code == term:
        score += 1000
    elif code.startswith(term):
        score += 500
    elif term in code:
        score += 100

    if city == term:
        score += 400
    elif city.startswith(term):
        score += 300
    elif term in city:
        score += 50

    if term in name:
        score += 25

    # Large airports are the more common pick for ties
    if airport.size == "large" and score > 0:
        score += 5
    return score


def search_airports(query: str, limit: int = 10) -> List[Airport]:
    """
    Rank airports by how well code, city and name match the query.

    Returns an empty list for a blank query.
    """
    if not query or not query.strip():
        return []

    term = query.strip().lower()
    scored = [(airport, _match_score(airport, term)) for airport in AIRPORTS]
    matches = [item for item in scored if item[1] > 0]
    matches.sort(key=lambda item: item[1], reverse=True)
    logger.debug("Airport search %r matched %s airports", query, len(matches))
    return [airport for airport, _ in matches[:limit]]


def format_airport_display(airport: Airport) -> str:
    """E.g. "SFO - San Francisco International"."""
    return f"{airport.code} - {airport.name}"
