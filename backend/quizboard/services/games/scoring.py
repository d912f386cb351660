from enum import Enum
from typing import List, Optional, Sequence

from quizboard.errors import NotFound
from quizboard.models import Game, Team


class Badge(str, Enum):
    GOLD = 'gold'
    SILVER = 'silver'
    BRONZE = 'bronze'


_BADGES_BY_INDEX = (Badge.GOLD, Badge.SILVER, Badge.BRONZE)


def create_teams(game: Game, names: Sequence[str]) -> Game:
    """Replace the roster with one zero-score team per name.

    Ids are the 1-based positions; blank names become ``Team {position}``.
    An empty ``names`` clears the roster and leaves the game inactive.
    Calling this on an already active game simply overwrites the roster.
    """
    if not names:
        game.teams = []
        game.active = False
        return game
    teams = []
    for position, raw in enumerate(names, start=1):
        name = (raw or '').strip() or f'Team {position}'
        teams.append(Team(id=position, name=name, score=0))
    game.teams = teams
    game.active = True
    return game


def apply_points(game: Game, team_id: int, delta: int) -> Team:
    """Add ``delta`` (may be negative) to one team's score."""
    team = game.find_team(team_id)
    if team is None:
        raise NotFound('Team not found')
    team.score += delta
    return team


def reset(game: Game) -> Game:
    game.teams = []
    game.active = False
    return game


def rank_badge(teams: Sequence[Team], team: Team) -> Optional[Badge]:
    """Medal for ``team`` given the whole roster.

    The rank is the first index in the score-descending order holding a team
    with the same score, so tied teams share a badge and consume the
    positions below them: scores [30, 30, 10] give gold, gold, bronze.
    """
    if not teams:
        return None
    ordered = sorted(teams, key=lambda t: t.score, reverse=True)
    index = next((i for i, t in enumerate(ordered) if t.score == team.score), None)
    if index is not None and index < len(_BADGES_BY_INDEX):
        return _BADGES_BY_INDEX[index]
    return None


def scoreboard(teams: Sequence[Team]) -> List[dict]:
    """Serialized teams in roster order, each annotated with its badge."""
    rows = []
    for team in teams:
        row = team.to_dict()
        badge = rank_badge(teams, team)
        row['badge'] = badge.value if badge else None
        rows.append(row)
    return rows
