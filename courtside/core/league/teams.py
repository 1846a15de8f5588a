"""
League Team and Structure Data.

This module contains the league structure the schedule is built around:
- 30 teams
- 2 conferences (Eastern, Western)
- 6 divisions (3 per conference, 5 teams each)
- Team metadata (names, cities, abbreviations, market size)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class Conference(Enum):
    """League conferences."""
    EASTERN = "Eastern"
    WESTERN = "Western"


class Division(Enum):
    """League divisions."""
    # Eastern
    ATLANTIC = "Atlantic"
    CENTRAL = "Central"
    SOUTHEAST = "Southeast"
    # Western
    NORTHWEST = "Northwest"
    PACIFIC = "Pacific"
    SOUTHWEST = "Southwest"

    @property
    def conference(self) -> Conference:
        """Get the conference this division belongs to."""
        if self in (Division.ATLANTIC, Division.CENTRAL, Division.SOUTHEAST):
            return Conference.EASTERN
        return Conference.WESTERN


class MarketSize(Enum):
    """Media market tier, used by free agents who care about exposure."""
    LARGE = "large"
    MEDIUM = "medium"
    SMALL = "small"


@dataclass(frozen=True)
class Team:
    """
    A team as seen by the schedule and the league economy.

    Immutable for the duration of a season.
    """
    id: str
    abbreviation: str
    conference: Conference
    division: Division
    name: str = ""
    city: str = ""
    market_size: MarketSize = MarketSize.MEDIUM

    def __post_init__(self):
        if self.division.conference != self.conference:
            raise ValueError(
                f"{self.abbreviation}: division {self.division.value} is not in "
                f"the {self.conference.value} conference"
            )

    @property
    def full_name(self) -> str:
        return f"{self.city} {self.name}".strip()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "abbreviation": self.abbreviation,
            "conference": self.conference.value,
            "division": self.division.value,
            "name": self.name,
            "city": self.city,
            "market_size": self.market_size.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Team":
        return cls(
            id=str(data["id"]),
            abbreviation=data["abbreviation"],
            conference=Conference(data["conference"]),
            division=Division(data["division"]),
            name=data.get("name", ""),
            city=data.get("city", ""),
            market_size=MarketSize(data.get("market_size", "medium")),
        )


@dataclass(frozen=True)
class LeagueTeamData:
    """
    Static data for a franchise.

    This is the "template" data - immutable information about each franchise.
    """
    name: str  # "Shamrocks"
    city: str  # "Boston"
    abbreviation: str  # "BOS"
    division: Division
    market_size: MarketSize
    arena: str


# =============================================================================
# Default League (30 Teams)
# =============================================================================

DEFAULT_TEAMS: dict[str, LeagueTeamData] = {
    # Atlantic
    "NYT": LeagueTeamData("Titans", "New York", "NYT", Division.ATLANTIC, MarketSize.LARGE, "Empire Arena"),
    "BOS": LeagueTeamData("Shamrocks", "Boston", "BOS", Division.ATLANTIC, MarketSize.LARGE, "Garden Arena"),
    "PHI": LeagueTeamData("Founders", "Philadelphia", "PHI", Division.ATLANTIC, MarketSize.LARGE, "Liberty Center"),
    "BAL": LeagueTeamData("Dockers", "Baltimore", "BAL", Division.ATLANTIC, MarketSize.MEDIUM, "Harbor Pavilion"),
    "BKN": LeagueTeamData("Bridges", "Brooklyn", "BKN", Division.ATLANTIC, MarketSize.LARGE, "Borough Arena"),
    # Central
    "CHI": LeagueTeamData("Windigo", "Chicago", "CHI", Division.CENTRAL, MarketSize.LARGE, "Lakeshore Arena"),
    "DET": LeagueTeamData("Engines", "Detroit", "DET", Division.CENTRAL, MarketSize.MEDIUM, "Motor City Center"),
    "PIT": LeagueTeamData("Ironworks", "Pittsburgh", "PIT", Division.CENTRAL, MarketSize.SMALL, "Steel City Arena"),
    "IND": LeagueTeamData("Racers", "Indianapolis", "IND", Division.CENTRAL, MarketSize.SMALL, "Speedway Center"),
    "MIL": LeagueTeamData("Lumberjacks", "Milwaukee", "MIL", Division.CENTRAL, MarketSize.SMALL, "Timber Arena"),
    # Southeast
    "MIA": LeagueTeamData("Riptide", "Miami", "MIA", Division.SOUTHEAST, MarketSize.MEDIUM, "South Beach Arena"),
    "ATL": LeagueTeamData("Firebirds", "Atlanta", "ATL", Division.SOUTHEAST, MarketSize.MEDIUM, "Peachtree Center"),
    "NSH": LeagueTeamData("Vipers", "Nashville", "NSH", Division.SOUTHEAST, MarketSize.SMALL, "Music City Arena"),
    "WAS": LeagueTeamData("Monuments", "Washington", "WAS", Division.SOUTHEAST, MarketSize.MEDIUM, "Capital Center"),
    "ORL": LeagueTeamData("Gators", "Orlando", "ORL", Division.SOUTHEAST, MarketSize.SMALL, "Swamp Arena"),
    # Northwest
    "DEN": LeagueTeamData("Altitude", "Denver", "DEN", Division.NORTHWEST, MarketSize.MEDIUM, "Mile High Court"),
    "VAN": LeagueTeamData("Glaciers", "Vancouver", "VAN", Division.NORTHWEST, MarketSize.MEDIUM, "Pacific Coliseum"),
    "POR": LeagueTeamData("Pioneers", "Portland", "POR", Division.NORTHWEST, MarketSize.SMALL, "Rose Garden"),
    "KCB": LeagueTeamData("Bison", "Kansas City", "KCB", Division.NORTHWEST, MarketSize.SMALL, "Heartland Arena"),
    "SLC": LeagueTeamData("Summit", "Salt Lake City", "SLC", Division.NORTHWEST, MarketSize.SMALL, "Mountain Center"),
    # Pacific
    "LAW": LeagueTeamData("Waves", "Los Angeles", "LAW", Division.PACIFIC, MarketSize.LARGE, "Pacific Center"),
    "SFR": LeagueTeamData("Rush", "San Francisco", "SFR", Division.PACIFIC, MarketSize.LARGE, "Bay Arena"),
    "SEA": LeagueTeamData("Sasquatch", "Seattle", "SEA", Division.PACIFIC, MarketSize.MEDIUM, "Emerald Court"),
    "PHX": LeagueTeamData("Scorpions", "Phoenix", "PHX", Division.PACIFIC, MarketSize.MEDIUM, "Desert Dome"),
    "LVD": LeagueTeamData("Dealers", "Las Vegas", "LVD", Division.PACIFIC, MarketSize.MEDIUM, "Strip Arena"),
    # Southwest
    "DAL": LeagueTeamData("Stampede", "Dallas", "DAL", Division.SOUTHWEST, MarketSize.LARGE, "Lone Star Arena"),
    "HOU": LeagueTeamData("Wildcatters", "Houston", "HOU", Division.SOUTHWEST, MarketSize.LARGE, "Energy Center"),
    "AUS": LeagueTeamData("Outlaws", "Austin", "AUS", Division.SOUTHWEST, MarketSize.MEDIUM, "Capitol Arena"),
    "MEM": LeagueTeamData("Groove", "Memphis", "MEM", Division.SOUTHWEST, MarketSize.SMALL, "Beale Street Arena"),
    "NOR": LeagueTeamData("Krewe", "New Orleans", "NOR", Division.SOUTHWEST, MarketSize.SMALL, "Bourbon Arena"),
}


# Division groupings for easy iteration
DIVISIONS_BY_CONFERENCE: dict[Conference, list[Division]] = {
    Conference.EASTERN: [Division.ATLANTIC, Division.CENTRAL, Division.SOUTHEAST],
    Conference.WESTERN: [Division.NORTHWEST, Division.PACIFIC, Division.SOUTHWEST],
}


# =============================================================================
# Helper Functions
# =============================================================================

def build_default_teams() -> list[Team]:
    """Build Team records for the default league, keyed by abbreviation."""
    return [
        Team(
            id=data.abbreviation,
            abbreviation=data.abbreviation,
            conference=data.division.conference,
            division=data.division,
            name=data.name,
            city=data.city,
            market_size=data.market_size,
        )
        for data in DEFAULT_TEAMS.values()
    ]


def teams_in_division(teams: list[Team], division: Division) -> list[Team]:
    """Get all teams in a division, ordered by id."""
    return sorted((t for t in teams if t.division == division), key=lambda t: t.id)


def teams_in_conference(teams: list[Team], conference: Conference) -> list[Team]:
    """Get all teams in a conference, ordered by id."""
    return sorted((t for t in teams if t.conference == conference), key=lambda t: t.id)


def team_by_abbreviation(teams: list[Team], abbreviation: str) -> Optional[Team]:
    """Find a team by abbreviation (case-insensitive)."""
    for team in teams:
        if team.abbreviation.lower() == abbreviation.lower():
            return team
    return None
