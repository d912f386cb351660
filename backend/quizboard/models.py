from dataclasses import dataclass, field
from typing import List, Optional
import random

GAME_CODE_LENGTH = 6
GAME_CODE_MIN = 100000
GAME_CODE_MAX = 999999


def generate_game_code(taken=(), max_attempts: int = 100) -> str:
    """Generate a 6-digit game code not already present in ``taken``."""
    for _ in range(max_attempts):
        code = str(random.randint(GAME_CODE_MIN, GAME_CODE_MAX))
        if code not in taken:
            return code
    raise RuntimeError(f'No free game code after {max_attempts} attempts')


@dataclass
class Team:
    id: int
    name: str
    score: int = 0

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'score': self.score,
        }


@dataclass
class Game:
    code: str
    teams: List[Team] = field(default_factory=list)
    active: bool = False

    @property
    def total_score(self) -> int:
        # Derived on every read so it can never drift from the roster
        return sum(t.score for t in self.teams)

    def find_team(self, team_id: int) -> Optional[Team]:
        for team in self.teams:
            if team.id == team_id:
                return team
        return None

    def to_dict(self):
        total = self.total_score
        return {
            'gameCode': self.code,
            'teams': [t.to_dict() for t in self.teams],
            'gameState': {
                'isGameActive': self.active,
                'totalScore': total,
            },
            'totalScore': total,
        }
